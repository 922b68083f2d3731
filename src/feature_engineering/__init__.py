"""Feature engineering for race entries."""

from src.feature_engineering.extractors import BaseFeatureExtractor, BreedingFeatureExtractor

__all__ = ["BaseFeatureExtractor", "BreedingFeatureExtractor"]
