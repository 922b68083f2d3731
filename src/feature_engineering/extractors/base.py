"""Base feature extractor with ABC interface.

Feature extractors take a DataFrame of race entries and return it with
their feature columns appended. They follow the Strategy pattern so a
caller can run any mix of them over the same frame.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

import polars as pl


class BaseFeatureExtractor(ABC):
    """Abstract base class for feature extractors.

    Subclasses must implement extract() and feature_names.
    """

    @property
    @abstractmethod
    def feature_names(self) -> list[str]:
        """Return the list of feature column names produced by this extractor."""

    @abstractmethod
    def extract(self, df: pl.DataFrame) -> pl.DataFrame:
        """Extract features from the input DataFrame.

        Args:
            df: One row per horse entry.

        Returns:
            DataFrame with the original columns plus the feature columns.
        """

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(features={self.feature_names})"
