"""
Feature package: turns form values into model feature vectors.
"""
