"""Per-class Gaussian parameter estimation over a training corpus."""

import logging
from typing import Iterable, Union

import numpy as np

from fruitbayes.domain.models import Attribute, ClassStats, TrainingSample
from fruitbayes.domain.exceptions import EmptyClassError, UnknownClassLabelError

logger = logging.getLogger(__name__)

def is_valid(sample: TrainingSample) -> bool:
    """A sample is usable for statistics only if none of its five features is zero.

    A zero anywhere excludes the sample from the statistics of every attribute.
    """
    return all(x != 0 for x in sample.features())


def _valid_values(
    corpus: Iterable[TrainingSample],
    class_label: str,
    attribute: Attribute,
) -> np.ndarray:
    values = [
        s.feature(attribute)
        for s in corpus
        if s.class_label == class_label and is_valid(s)
    ]
    return np.asarray(values, dtype=float)


class GaussianStatsEstimator:
    """Mean and population standard deviation of one attribute for one class.

    The corpus is passed to every call and only iterated, never modified. It is
    copied to a tuple once per call, so a one-shot iterator is scanned once.
    """

    def mean(
        self,
        corpus: Iterable[TrainingSample],
        class_label: str,
        attribute: Union[Attribute, str],
    ) -> float:
        """Mean over valid samples of the class; 0.0 when there are none."""
        attribute = Attribute.parse(attribute)
        values = _valid_values(tuple(corpus), class_label, attribute)
        if values.size == 0:
            return 0.0
        return float(values.sum() / values.size)

    def standard_deviation(
        self,
        corpus: Iterable[TrainingSample],
        class_label: str,
        attribute: Union[Attribute, str],
    ) -> float:
        """Population standard deviation (divisor = count, not count - 1).

        Raises:
            EmptyClassError: the class has no valid samples.
            UnknownClassLabelError: the label does not occur in the corpus.
        """
        return self.estimate(corpus, class_label, attribute).standard_deviation

    def estimate(
        self,
        corpus: Iterable[TrainingSample],
        class_label: str,
        attribute: Union[Attribute, str],
    ) -> ClassStats:
        attribute = Attribute.parse(attribute)
        samples = tuple(corpus)
        avg = self.mean(samples, class_label, attribute)
        values = _valid_values(samples, class_label, attribute)

        if values.size == 0:
            if any(s.class_label == class_label for s in samples):
                raise EmptyClassError(class_label, attribute)
            raise UnknownClassLabelError(class_label, attribute)

        sum_sq_diff = float(np.square(values - avg).sum())
        sd = float(np.sqrt(sum_sq_diff / values.size))

        logger.debug(
            "estimate(class=%s, attr=%s) mean=%f sd=%f n=%d",
            class_label, attribute.label, avg, sd, values.size,
        )
        return ClassStats(
            class_label=class_label,
            attribute=attribute,
            mean=avg,
            standard_deviation=sd,
            count=int(values.size),
        )


_default_estimator = GaussianStatsEstimator()

def mean(corpus, class_label, attribute) -> float:
    return _default_estimator.mean(corpus, class_label, attribute)

def standard_deviation(corpus, class_label, attribute) -> float:
    return _default_estimator.standard_deviation(corpus, class_label, attribute)
