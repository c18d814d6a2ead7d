"""Class prior table."""

import math
from typing import Dict, Mapping, Optional, Sequence

from fruitbayes.domain.exceptions import ParameterValidationError

class PriorTable:
    """Prior probability per class, uniform (1/N) unless configured otherwise.

    Scores are multiplied by ``weight(label)``, the prior relative to the
    uniform prior. For the uniform table every weight is 1.0, so the constant
    1/N cancels and never appears in a score.
    """

    def __init__(self, priors: Optional[Mapping[str, float]] = None):
        priors = dict(priors or {})
        for label, p in priors.items():
            if isinstance(p, bool) or not isinstance(p, (int, float)) \
                    or not (math.isfinite(p) and p >= 0):
                raise ParameterValidationError(
                    f"priors[{label}]", p, expected_type="finite non-negative number"
                )
        self._priors: Dict[str, float] = priors

    @property
    def is_uniform(self) -> bool:
        return not self._priors

    def prior(self, class_label: str, class_labels: Sequence[str]) -> float:
        n = len(class_labels)
        if n == 0:
            return 0.0
        if self.is_uniform:
            return 1.0 / n
        return float(self._priors.get(class_label, 0.0))

    def weight(self, class_label: str, class_labels: Sequence[str]) -> float:
        if self.is_uniform or not class_labels:
            return 1.0
        return self.prior(class_label, class_labels) * len(class_labels)
