"""Prediction models."""

from .ratings import EloRatingStore
from .weighted import WeightedFactorPredictor

__all__ = ["EloRatingStore", "WeightedFactorPredictor"]
