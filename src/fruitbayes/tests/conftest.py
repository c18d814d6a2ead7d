import pytest

from fruitbayes.domain.models import TrainingCorpus, TrainingSample


def _sample(label, hue, saturation=100.0, value=200.0, compactness=0.8, texture=5.0):
    return TrainingSample(
        class_label=label,
        hue=hue,
        saturation=saturation,
        value=value,
        compactness=compactness,
        texture=texture,
    )


@pytest.fixture
def apple_corpus() -> TrainingCorpus:
    """Three valid Apple samples with hues 10, 12, 14."""
    return TrainingCorpus.from_samples([
        _sample("Apple", 10, 100, 200, 0.80, 5),
        _sample("Apple", 12, 110, 210, 0.85, 6),
        _sample("Apple", 14, 120, 220, 0.90, 7),
    ])


@pytest.fixture
def fruit_corpus() -> TrainingCorpus:
    """Apple and Banana samples plus one Apple sample with a zero hue."""
    return TrainingCorpus.from_samples([
        _sample("Apple", 10, 100, 200, 0.80, 5),
        _sample("Banana", 30, 150, 180, 0.40, 2),
        _sample("Apple", 12, 110, 210, 0.85, 6),
        _sample("Banana", 32, 160, 190, 0.45, 3),
        _sample("Apple", 14, 120, 220, 0.90, 7),
        _sample("Banana", 34, 170, 200, 0.50, 4),
        _sample("Apple", 0, 999, 999, 9.99, 99),
    ])


@pytest.fixture
def apple_sample() -> dict:
    return dict(hue=12.0, saturation=110.0, value=210.0, compactness=0.85, texture=6.0)


@pytest.fixture
def make_sample():
    return _sample
