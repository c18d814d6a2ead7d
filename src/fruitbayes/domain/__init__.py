"""Core domain models."""

from .models import (
    Attribute,
    TrainingSample,
    TrainingCorpus,
    ClassStats,
    HSVRange,
    ClassCandidate,
    Observation,
    FeatureDensities,
    ScoreBreakdown,
    PosteriorEntry,
    PosteriorResult,
)

__all__ = [
    "Attribute",
    "TrainingSample",
    "TrainingCorpus",
    "ClassStats",
    "HSVRange",
    "ClassCandidate",
    "Observation",
    "FeatureDensities",
    "ScoreBreakdown",
    "PosteriorEntry",
    "PosteriorResult",
]
