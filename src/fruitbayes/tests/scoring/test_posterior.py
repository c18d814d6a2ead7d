import math
from dataclasses import replace

import pytest

from fruitbayes.domain.models import (
    Attribute,
    ClassCandidate,
    HSVRange,
    ScoreBreakdown,
    TrainingCorpus,
)
from fruitbayes.domain.exceptions import (
    EmptyClassError,
    ParameterValidationError,
    UnknownClassLabelError,
)
from fruitbayes.scoring.density import gaussian_pdf
from fruitbayes.scoring.posterior import PosteriorRanker, PosteriorScorer, rank_classes
from fruitbayes.scoring.priors import PriorTable
from fruitbayes.scoring.statistics import GaussianStatsEstimator


@pytest.fixture
def scorer() -> PosteriorScorer:
    return PosteriorScorer()


def _expected_score(corpus, label, sample):
    est = GaussianStatsEstimator()
    product = 1.0
    for attr in (Attribute.HUE, Attribute.SATURATION, Attribute.VALUE, Attribute.COMPACTNESS):
        stats = est.estimate(corpus, label, attr)
        product *= gaussian_pdf(sample[attr.label], stats.mean, stats.standard_deviation)
    return product


class TestPosteriorScorer:

    def test_score_is_product_of_four_densities(self, scorer, fruit_corpus, apple_sample):
        s = scorer.score(fruit_corpus, "Apple", **apple_sample)
        assert s == pytest.approx(_expected_score(fruit_corpus, "Apple", apple_sample), rel=1e-9)
        assert s > 0

    def test_texture_density_is_reported_but_not_scored(self, scorer, fruit_corpus, apple_sample):
        near = scorer.breakdown(fruit_corpus, "Apple", **apple_sample)
        far = scorer.breakdown(fruit_corpus, "Apple", **dict(apple_sample, texture=60.0))

        assert near.score == far.score
        assert near.densities.texture > far.densities.texture
        expected_texture = gaussian_pdf(6.0, 6.0, math.sqrt(2 / 3))
        assert near.densities.texture == pytest.approx(expected_texture)

    def test_breakdown_exposes_every_feature(self, scorer, fruit_corpus, apple_sample):
        b = scorer.breakdown(fruit_corpus, "Apple", **apple_sample)
        assert isinstance(b, ScoreBreakdown)
        assert set(b.densities.as_dict()) == {a.label for a in Attribute}
        assert b.prior_weight == 1.0
        assert b.as_dict()["class_label"] == "Apple"

    def test_observer_receives_breakdown(self, fruit_corpus, apple_sample):
        seen = []
        scorer = PosteriorScorer(observer=seen.append)
        s = scorer.score(fruit_corpus, "Banana", **apple_sample)
        assert len(seen) == 1
        assert seen[0].class_label == "Banana"
        assert seen[0].score == s

    def test_uniform_priors_leave_score_unchanged(self, fruit_corpus, apple_sample):
        plain = PosteriorScorer().score(fruit_corpus, "Apple", **apple_sample)
        uniform = PosteriorScorer(priors=PriorTable()).score(
            fruit_corpus, "Apple", **apple_sample, class_labels=["Apple", "Banana"]
        )
        assert uniform == plain

    def test_zero_variance_feature_zeroes_the_score(self, scorer, make_sample):
        corpus = TrainingCorpus.from_samples([
            make_sample("Banana", 5, 150, 180, 0.40, 2),
            make_sample("Banana", 5, 160, 190, 0.45, 3),
            make_sample("Apple", 10, 100, 200, 0.80, 5),
            make_sample("Apple", 14, 120, 220, 0.90, 7),
        ])
        s = scorer.score(corpus, "Banana", 6.0, 155.0, 185.0, 0.42, 2.5)
        assert s == 0.0

    def test_empty_class_error_propagates(self, scorer, apple_corpus, apple_sample):
        with pytest.raises(UnknownClassLabelError):
            scorer.score(apple_corpus, "Kiwi", **apple_sample)


class TestPosteriorRanker:

    def test_one_entry_per_candidate_in_order(self, fruit_corpus, apple_sample):
        ranker = PosteriorRanker()
        candidates = ["Banana", "Apple"]
        result = ranker.rank_classes(fruit_corpus, candidates, **apple_sample)

        assert len(result) == 2
        assert result.labels() == candidates
        assert result.as_dict()["Apple"] > result.as_dict()["Banana"]
        assert result.errors() == []

    def test_unknown_class_gets_zero_entry_with_error(self, fruit_corpus, apple_sample):
        result = PosteriorRanker().rank_classes(
            fruit_corpus, ["Apple", "Kiwi", "Banana"], **apple_sample
        )
        assert result.labels() == ["Apple", "Kiwi", "Banana"]
        kiwi = result[1]
        assert kiwi.score == 0.0
        assert kiwi.degenerate
        assert isinstance(kiwi.error, EmptyClassError)
        assert kiwi.error.context["class_label"] == "Kiwi"
        assert result[0].score > 0
        assert [e.class_label for e in result.errors()] == ["Kiwi"]

    def test_class_with_only_invalid_samples_scores_zero(self, make_sample, apple_sample):
        corpus = TrainingCorpus.from_samples([
            make_sample("Apple", 10, 100, 200, 0.80, 5),
            make_sample("Apple", 14, 120, 220, 0.90, 7),
            make_sample("Pear", 0, 90, 150, 0.70, 4),
        ])
        result = PosteriorRanker().rank_classes(corpus, ["Apple", "Pear"], **apple_sample)
        pear = result[1]
        assert pear.score == 0.0
        assert type(pear.error) is EmptyClassError
        assert pear.error.error_code == "EMPTY_CLASS"

    def test_strict_mode_raises_classified_failure(self, fruit_corpus, apple_sample):
        ranker = PosteriorRanker(strict=True)
        with pytest.raises(UnknownClassLabelError) as exc_info:
            ranker.rank_classes(fruit_corpus, ["Apple", "Kiwi"], **apple_sample)
        assert exc_info.value.context["class_label"] == "Kiwi"
        assert exc_info.value.context["attribute"] == "hue"

    def test_ranking_is_idempotent(self, fruit_corpus, apple_sample):
        ranker = PosteriorRanker()
        first = ranker.rank_classes(fruit_corpus, ["Apple", "Banana"], **apple_sample)
        second = ranker.rank_classes(fruit_corpus, ["Apple", "Banana"], **apple_sample)
        assert first.labels() == second.labels()
        assert first.scores() == second.scores()

    def test_threaded_ranking_matches_sequential(self, fruit_corpus, apple_sample):
        labels = ["Banana", "Kiwi", "Apple"]
        sequential = PosteriorRanker().rank_classes(fruit_corpus, labels, **apple_sample)
        threaded = PosteriorRanker(max_workers=4).rank_classes(fruit_corpus, labels, **apple_sample)
        assert threaded.labels() == labels
        assert threaded.scores() == sequential.scores()

    def test_candidates_may_be_records(self, fruit_corpus, apple_sample):
        candidates = [
            ClassCandidate("Apple"),
            HSVRange("Banana", h1=20, h2=40, s1=100, s2=255, v1=100, v2=255),
        ]
        result = PosteriorRanker().rank_classes(fruit_corpus, candidates, **apple_sample)
        assert result.labels() == ["Apple", "Banana"]

    def test_empty_candidate_list_gives_empty_result(self, fruit_corpus, apple_sample):
        result = PosteriorRanker().rank_classes(fruit_corpus, [], **apple_sample)
        assert len(result) == 0

    def test_ranker_does_not_sort(self, fruit_corpus, apple_sample):
        result = PosteriorRanker().rank_classes(
            fruit_corpus, ["Banana", "Apple"], **apple_sample
        )
        assert result.scores() != sorted(result.scores(), reverse=True)

    def test_non_positive_workers_rejected(self):
        with pytest.raises(ParameterValidationError):
            PosteriorRanker(max_workers=0)

    def test_configured_priors_weight_scores(self, fruit_corpus, apple_sample):
        labels = ["Apple", "Banana"]
        plain = PosteriorRanker().rank_classes(fruit_corpus, labels, **apple_sample)
        weighted = PosteriorRanker(
            PosteriorScorer(priors=PriorTable({"Apple": 0.75, "Banana": 0.25}))
        ).rank_classes(fruit_corpus, labels, **apple_sample)
        assert weighted[0].score == pytest.approx(plain[0].score * 1.5)
        assert weighted[1].score == pytest.approx(plain[1].score * 0.5)


def test_rank_classes_entry_point(fruit_corpus, apple_sample):
    seen = []
    result = rank_classes(fruit_corpus, ["Apple", "Banana"], observer=seen.append, **apple_sample)
    assert result.labels() == ["Apple", "Banana"]
    assert [b.class_label for b in seen] == ["Apple", "Banana"]
    assert [b.score for b in seen] == result.scores()


def test_result_unaffected_by_corpus_copy(fruit_corpus, apple_sample):
    copy = TrainingCorpus.from_samples(replace(s) for s in fruit_corpus)
    a = rank_classes(fruit_corpus, ["Apple", "Banana"], **apple_sample)
    b = rank_classes(copy, ["Apple", "Banana"], **apple_sample)
    assert a.scores() == b.scores()


def test_one_shot_corpus_iterator_is_scanned_once(fruit_corpus, apple_sample):
    expected = rank_classes(fruit_corpus, ["Apple", "Banana"], **apple_sample)
    result = rank_classes((s for s in fruit_corpus), ["Apple", "Banana"], **apple_sample)
    assert result.scores() == expected.scores()
    assert result.errors() == []
    assert result[0].score > 0.0
