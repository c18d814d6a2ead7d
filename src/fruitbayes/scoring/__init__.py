"""Gaussian Naive Bayes estimation and scoring."""

from .statistics import GaussianStatsEstimator, is_valid
from .density import ClassConditionalDensity, gaussian_pdf
from .priors import PriorTable
from .posterior import PosteriorScorer, PosteriorRanker, rank_classes

__all__ = [
    "GaussianStatsEstimator",
    "is_valid",
    "ClassConditionalDensity",
    "gaussian_pdf",
    "PriorTable",
    "PosteriorScorer",
    "PosteriorRanker",
    "rank_classes",
]
