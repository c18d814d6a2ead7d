"""Gaussian class-conditional densities."""

import math
from typing import Iterable, Optional, Union

from fruitbayes.domain.models import Attribute, TrainingSample
from .statistics import GaussianStatsEstimator

def gaussian_pdf(x: float, mean: float, sd: float) -> float:
    """Normal density of x. A non-positive or NaN sd yields exactly 0.0."""
    if not sd > 0:
        return 0.0
    a = 1.0 / (sd * math.sqrt(2 * math.pi))
    b = math.exp(-((x - mean) ** 2) / (2 * sd ** 2))
    return a * b


class ClassConditionalDensity:
    """p(attribute = x | class), from the class's estimated mean and sd."""

    def __init__(self, estimator: Optional[GaussianStatsEstimator] = None):
        self.estimator = estimator or GaussianStatsEstimator()

    def density(
        self,
        corpus: Iterable[TrainingSample],
        class_label: str,
        attribute: Union[Attribute, str],
        observed_value: float,
    ) -> float:
        """Density of ``observed_value`` under the class's fitted normal.

        A zero or negative sd gives 0.0. An undefined sd (no valid samples) is
        not turned into 0.0 here: the estimator's ``EmptyClassError`` propagates,
        and ``PosteriorRanker`` records the class as a 0.0 entry carrying it.
        """
        stats = self.estimator.estimate(corpus, class_label, attribute)
        return gaussian_pdf(observed_value, stats.mean, stats.standard_deviation)
