from .classifiers import PercentageClassifier, WorstStatusClassifier, passing_percent

__all__ = ["PercentageClassifier", "WorstStatusClassifier", "passing_percent"]
