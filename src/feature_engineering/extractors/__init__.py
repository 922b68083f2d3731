"""Feature extractors for race entry data."""

from src.feature_engineering.extractors.base import BaseFeatureExtractor
from src.feature_engineering.extractors.breeding_features import BreedingFeatureExtractor

__all__ = [
    "BaseFeatureExtractor",
    "BreedingFeatureExtractor",
]
