"""Gaussian Naive Bayes classification of fruit samples."""

from fruitbayes.domain.models import (
    Attribute,
    TrainingSample,
    TrainingCorpus,
    ClassCandidate,
    PosteriorResult,
)
from fruitbayes.scoring import rank_classes

__version__ = "0.1.0"

__all__ = [
    "Attribute",
    "TrainingSample",
    "TrainingCorpus",
    "ClassCandidate",
    "PosteriorResult",
    "rank_classes",
]
