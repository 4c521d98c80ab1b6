"""
Model utilities package.

This package contains modules for training the price network and making
predictions with it. Typical entrypoints are:

- property_price.models.lifecycle.initialize()  : start background training, returns a readiness handle
- property_price.models.predict.Estimator.predict(): estimate a price from a feature vector
- property_price.models.evaluate.evaluate_estimator(): fit metrics over the training set
"""
