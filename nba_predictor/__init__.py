"""NBA betting predictor: cached data feeds and a weighted spread/moneyline model."""

__version__ = "0.1.0"
