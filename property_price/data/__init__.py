"""
Data package for the fixed sample dataset.

This package exposes the six hard-coded training samples and the area
multiplier table, both as plain constants and as a pandas frame for training.
"""
