"""
Central configuration for the project.

This module centralizes the constants used throughout the codebase: the
regression network hyper-parameters and the display conventions for prices.

Constants
---------
HIDDEN_UNITS : int
    Width of the single hidden layer.
ACTIVATION : str
    Hidden-layer activation passed to the regressor.
LEARNING_RATE : float
    Adam step size.
EPOCHS : int
    Number of full-batch passes over the training set.
RANDOM_STATE : int
    Seed for weight initialisation, so repeated fits are identical.
STANDARDIZE : bool
    Whether features and labels are standardized before fitting.
N_FEATURES : int
    Length of a feature vector.
LAKH, CURRENCY_SYMBOL : int, str
    Display conventions for Indian rupee amounts.
DEFAULT_AREA : str
    Area preselected in the form.
"""

HIDDEN_UNITS = 10
ACTIVATION = "relu"
LEARNING_RATE = 0.001
EPOCHS = 100
RANDOM_STATE = 42
STANDARDIZE = True

N_FEATURES = 5

LAKH = 100_000
CURRENCY_SYMBOL = "₹"

DEFAULT_AREA = "Noida"
