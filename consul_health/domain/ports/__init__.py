"""Domain ports package."""

from .status_classifier import IStatusClassifier

__all__ = ["IStatusClassifier"]
