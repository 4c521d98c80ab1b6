"""
property_price package initializer.

This package contains the project source code for the Indian property price
predictor: the fixed sample data, feature assembly, model training, the
readiness lifecycle and prediction.

Modules
-------
- config: Central configuration and hyper-parameter defaults.
- data: The fixed training set and area multiplier table.
- features: Feature vector assembly from form values.
- models: Model training, lifecycle, prediction and evaluation utilities.
- formatting: Rupee and lakh display helpers.
"""

__version__ = "0.1.0"
