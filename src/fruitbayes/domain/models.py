"""Core domain models for training data, candidates and posterior results."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Dict, Any, List, Iterable, Iterator, Tuple, Union

from fruitbayes.domain.exceptions import EstimationError, ParameterValidationError

class Attribute(Enum):
    """Features describing a sample. Values follow the original attribute indices."""
    HUE = 0
    SATURATION = 1
    VALUE = 2
    COMPACTNESS = 3
    TEXTURE = 4

    @property
    def label(self) -> str:
        return self.name.lower()

    @classmethod
    def parse(cls, attribute: Union["Attribute", str]) -> "Attribute":
        """Accept an Attribute or its (case-insensitive) name."""
        if isinstance(attribute, cls):
            return attribute
        if isinstance(attribute, str):
            try:
                return cls[attribute.strip().upper()]
            except KeyError:
                pass
        raise ParameterValidationError(
            "attribute",
            attribute,
            expected_type=f"one of {[a.label for a in cls]}",
        )


FEATURE_COLUMNS: Tuple[str, ...] = tuple(a.label for a in Attribute)

@dataclass(frozen=True)
class TrainingSample:
    """One labeled training observation."""
    class_label: str
    hue: float
    saturation: float
    value: float
    compactness: float
    texture: float

    def feature(self, attribute: Attribute) -> float:
        return getattr(self, attribute.label)

    def features(self) -> Tuple[float, ...]:
        return tuple(self.feature(a) for a in Attribute)


@dataclass(frozen=True)
class TrainingCorpus:
    """Ordered, read-only collection of training samples."""
    samples: Tuple[TrainingSample, ...] = ()

    @classmethod
    def from_samples(cls, samples: Iterable[TrainingSample]) -> "TrainingCorpus":
        return cls(samples=tuple(samples))

    def __iter__(self) -> Iterator[TrainingSample]:
        return iter(self.samples)

    def __len__(self) -> int:
        return len(self.samples)

    def labels(self) -> List[str]:
        """Distinct class labels in order of first appearance."""
        return list(dict.fromkeys(s.class_label for s in self.samples))


@dataclass(frozen=True)
class ClassStats:
    """Gaussian parameters of one attribute for one class."""
    class_label: str
    attribute: Attribute
    mean: float
    standard_deviation: float
    count: int


@dataclass(frozen=True)
class HSVRange:
    """Per-class HSV thresholds. h3/h4 cover red hues wrapping round the hue axis."""
    class_label: str
    h1: int = 0
    h2: int = 0
    h3: int = 0
    h4: int = 0
    s1: int = 0
    s2: int = 0
    v1: int = 0
    v2: int = 0


@dataclass(frozen=True)
class ClassCandidate:
    """A class to be scored; only the label matters."""
    class_label: str

    @classmethod
    def from_hsv_range(cls, hsv_range: HSVRange) -> "ClassCandidate":
        return cls(class_label=hsv_range.class_label)

    @classmethod
    def coerce(cls, candidate: Union["ClassCandidate", HSVRange, str]) -> "ClassCandidate":
        if isinstance(candidate, cls):
            return candidate
        if isinstance(candidate, HSVRange):
            return cls.from_hsv_range(candidate)
        if isinstance(candidate, str):
            return cls(class_label=candidate)
        raise ParameterValidationError(
            "class_candidate",
            candidate,
            expected_type="str, ClassCandidate or HSVRange",
        )


@dataclass(frozen=True)
class Observation:
    """The sample under test. Used as-is, no validity filtering."""
    hue: float
    saturation: float
    value: float
    compactness: float
    texture: float
    sample_id: Optional[str] = None

    def feature(self, attribute: Attribute) -> float:
        return getattr(self, attribute.label)


@dataclass(frozen=True)
class FeatureDensities:
    """Class-conditional densities of one observation, per feature."""
    hue: float
    saturation: float
    value: float
    compactness: float
    texture: float

    def as_dict(self) -> Dict[str, float]:
        return {a.label: getattr(self, a.label) for a in Attribute}


@dataclass(frozen=True)
class ScoreBreakdown:
    """Diagnostic record emitted for every scored class."""
    class_label: str
    densities: FeatureDensities
    prior_weight: float
    score: float

    def as_dict(self) -> Dict[str, Any]:
        return {
            "class_label": self.class_label,
            "densities": self.densities.as_dict(),
            "prior_weight": self.prior_weight,
            "score": self.score,
        }


@dataclass(frozen=True)
class PosteriorEntry:
    class_label: str
    score: float
    error: Optional[EstimationError] = None

    @property
    def degenerate(self) -> bool:
        """Whether an estimation failure forced the score to zero."""
        return self.error is not None


@dataclass
class PosteriorResult:
    """Unnormalized posterior scores, one entry per candidate, in candidate order."""
    entries: List[PosteriorEntry] = field(default_factory=list)

    def append(self, class_label: str, score: float, error: Optional[EstimationError] = None) -> None:
        self.entries.append(PosteriorEntry(class_label=class_label, score=score, error=error))

    def __iter__(self) -> Iterator[PosteriorEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __getitem__(self, index: int) -> PosteriorEntry:
        return self.entries[index]

    def labels(self) -> List[str]:
        return [e.class_label for e in self.entries]

    def scores(self) -> List[float]:
        return [e.score for e in self.entries]

    def errors(self) -> List[PosteriorEntry]:
        return [e for e in self.entries if e.error is not None]

    def as_dict(self) -> Dict[str, float]:
        return {e.class_label: e.score for e in self.entries}
