"""Posterior scoring and ranking across candidate classes."""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Iterable, List, Optional, Sequence, Tuple, Union

from fruitbayes.domain.models import (
    Attribute,
    ClassCandidate,
    FeatureDensities,
    HSVRange,
    PosteriorResult,
    ScoreBreakdown,
    TrainingSample,
)
from fruitbayes.domain.exceptions import EstimationError, ParameterValidationError
from .density import ClassConditionalDensity
from .priors import PriorTable

logger = logging.getLogger(__name__)

ScoreObserver = Callable[[ScoreBreakdown], None]
Candidate = Union[str, ClassCandidate, HSVRange]

class PosteriorScorer:
    """Unnormalized posterior score of one class for one observation.

    score = p(hue|c) * p(saturation|c) * p(value|c) * p(compactness|c)

    The texture density is evaluated and reported in the breakdown but is not
    part of the product. Under the default uniform prior table the prior
    weight is 1.0, so the score is exactly the product above.
    """

    def __init__(
        self,
        density: Optional[ClassConditionalDensity] = None,
        priors: Optional[PriorTable] = None,
        observer: Optional[ScoreObserver] = None,
    ):
        self.density = density or ClassConditionalDensity()
        self.priors = priors or PriorTable()
        self.observer = observer

    def breakdown(
        self,
        corpus: Iterable[TrainingSample],
        class_label: str,
        hue: float,
        saturation: float,
        value: float,
        compactness: float,
        texture: float,
        class_labels: Optional[Sequence[str]] = None,
    ) -> ScoreBreakdown:
        corpus = tuple(corpus)
        p_hue = self.density.density(corpus, class_label, Attribute.HUE, hue)
        p_sat = self.density.density(corpus, class_label, Attribute.SATURATION, saturation)
        p_val = self.density.density(corpus, class_label, Attribute.VALUE, value)
        p_c = self.density.density(corpus, class_label, Attribute.COMPACTNESS, compactness)
        p_t = self.density.density(corpus, class_label, Attribute.TEXTURE, texture)

        weight = self.priors.weight(class_label, class_labels or ())
        # texture deliberately left out of the product
        post = p_hue * p_sat * p_val * p_c * weight

        result = ScoreBreakdown(
            class_label=class_label,
            densities=FeatureDensities(
                hue=p_hue,
                saturation=p_sat,
                value=p_val,
                compactness=p_c,
                texture=p_t,
            ),
            prior_weight=weight,
            score=post,
        )
        logger.debug(
            "P(hue|%s) %g, P(sat|%s) %g, P(val|%s) %g, P(c|%s) %g, P(t|%s) %g",
            class_label, p_hue, class_label, p_sat, class_label, p_val,
            class_label, p_c, class_label, p_t,
        )
        logger.debug("posterior(%s) = %.6e", class_label, post)
        if self.observer is not None:
            self.observer(result)
        return result

    def score(
        self,
        corpus: Iterable[TrainingSample],
        class_label: str,
        hue: float,
        saturation: float,
        value: float,
        compactness: float,
        texture: float,
        class_labels: Optional[Sequence[str]] = None,
    ) -> float:
        return self.breakdown(
            corpus, class_label, hue, saturation, value, compactness, texture,
            class_labels=class_labels,
        ).score


class PosteriorRanker:
    """Scores every candidate class, in the order given.

    The ranker never sorts, normalizes or picks a winner. An estimation failure
    for one class gives that class a 0.0 entry carrying the error; the other
    classes are still scored. With ``strict=True`` the first failure is raised
    instead.
    """

    def __init__(
        self,
        scorer: Optional[PosteriorScorer] = None,
        *,
        strict: bool = False,
        max_workers: int = 1,
    ):
        if max_workers < 1:
            raise ParameterValidationError(
                "max_workers", max_workers, expected_type="positive integer"
            )
        self.scorer = scorer or PosteriorScorer()
        self.strict = strict
        self.max_workers = max_workers

    def rank_classes(
        self,
        corpus: Iterable[TrainingSample],
        class_candidates: Iterable[Candidate],
        hue: float,
        saturation: float,
        value: float,
        compactness: float,
        texture: float,
    ) -> PosteriorResult:
        corpus = tuple(corpus)
        labels = [ClassCandidate.coerce(c).class_label for c in class_candidates]

        def _score_one(label: str) -> Tuple[float, Optional[EstimationError]]:
            try:
                s = self.scorer.score(
                    corpus, label, hue, saturation, value, compactness, texture,
                    class_labels=labels,
                )
                return s, None
            except EstimationError as e:
                logger.warning("[rank] %s: %s", e.error_code, e.message)
                if self.strict:
                    raise
                return 0.0, e

        if self.max_workers > 1 and len(labels) > 1:
            with ThreadPoolExecutor(max_workers=self.max_workers) as pool:
                outcomes: List[Tuple[float, Optional[EstimationError]]] = list(
                    pool.map(_score_one, labels)
                )
        else:
            outcomes = [_score_one(label) for label in labels]

        result = PosteriorResult()
        for label, (s, err) in zip(labels, outcomes):
            result.append(label, s, err)
        return result


def rank_classes(
    corpus: Iterable[TrainingSample],
    class_candidates: Iterable[Candidate],
    hue: float,
    saturation: float,
    value: float,
    compactness: float,
    texture: float,
    *,
    strict: bool = False,
    observer: Optional[ScoreObserver] = None,
    priors: Optional[PriorTable] = None,
    max_workers: int = 1,
) -> PosteriorResult:
    """Score every candidate class for one observation."""
    ranker = PosteriorRanker(
        PosteriorScorer(priors=priors, observer=observer),
        strict=strict,
        max_workers=max_workers,
    )
    return ranker.rank_classes(
        corpus, class_candidates, hue, saturation, value, compactness, texture
    )
