"""Command line interface for fruitbayes."""

import argparse
import logging
import sys
from typing import List, Optional

from tqdm import tqdm

from fruitbayes.config.loader import configure_from_cli
from fruitbayes.config.settings import Settings, set_settings
from fruitbayes.config.resolvers import resolve_training_path
from fruitbayes.data.corpus_repo import load_corpus
from fruitbayes.data.ranges_repo import load_hsv_ranges
from fruitbayes.data.observations_repo import load_observations, write_results
from fruitbayes.domain.models import Attribute, ClassCandidate, PosteriorResult, TrainingCorpus
from fruitbayes.domain.exceptions import (
    ConfigurationError,
    EstimationError,
    FruitBayesError,
)
from fruitbayes.scoring import GaussianStatsEstimator, PosteriorRanker, PosteriorScorer, PriorTable
from fruitbayes.utils.logging import setup_logging
from fruitbayes.utils.timing import section_timer


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the fruitbayes CLI."""
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "-t",
        "--training",
        required=True,
        help="Training data CSV (class_label,hue,saturation,value,compactness,texture).",
    )
    common.add_argument(
        "--delimiter",
        default=",",
        help="Field delimiter of the CSV files (default: ',').",
    )

    mx = common.add_mutually_exclusive_group()
    mx.add_argument(
        "-c",
        "--classes",
        nargs="+",
        help="Candidate class labels, in scoring order. Defaults to the labels in the training data.",
    )
    mx.add_argument(
        "-r",
        "--ranges",
        help="HSV range table CSV; its class labels become the candidates.",
    )

    scoring_group = common.add_argument_group("Scoring Options")
    scoring_group.add_argument(
        "--strict",
        action="store_true",
        help="Fail when a class cannot be estimated instead of scoring it 0.",
    )
    scoring_group.add_argument(
        "--workers",
        type=int,
        metavar="N",
        help="Score classes on N threads (default: 1).",
    )
    scoring_group.add_argument(
        "--prior",
        action="append",
        metavar="LABEL=P",
        help="Class prior; repeat per class. Omit for equal priors.",
    )

    debug_group = common.add_argument_group("Debug Options")
    debug_group.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging, including per-feature densities.",
    )
    debug_group.add_argument(
        "--log-dir",
        type=str,
        metavar="PATH",
        help="Directory for log files (default: user log directory).",
    )
    debug_group.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="No console logging.",
    )

    parser = argparse.ArgumentParser(
        prog="fruitbayes",
        description="Classify fruit samples with a Gaussian Naive Bayes model.",
    )
    sub = parser.add_subparsers(dest="cmd", required=True)

    classify_p = sub.add_parser("classify", parents=[common], help="Score one sample against every class")
    for attr in Attribute:
        classify_p.add_argument(
            f"--{attr.label}",
            type=float,
            required=True,
            help=f"Observed {attr.label} of the sample.",
        )

    batch_p = sub.add_parser("batch", parents=[common], help="Classify every sample in a CSV file")
    batch_p.add_argument(
        "-s",
        "--samples",
        required=True,
        help="CSV of samples to classify (optional sample_id plus the five features).",
    )
    batch_p.add_argument(
        "-o",
        "--output",
        required=True,
        help="Path of the results CSV.",
    )

    sub.add_parser("stats", parents=[common], help="Show per-class mean and standard deviation")

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for the fruitbayes CLI."""
    args = build_parser().parse_args(argv)

    try:
        settings = configure_from_cli(args)
        set_settings(settings)

        logger, summary_logger = setup_logging(
            log_dir=str(settings.logging.log_dir) if settings.logging.log_dir else None,
            console=settings.logging.console_output,
            level=settings.logging.level.value,
            console_level="DEBUG" if settings.debug_mode else "WARNING",
        )

        if settings.debug_mode:
            logger.debug("Configuration details:")
            for section, values in settings.to_dict().items():
                logger.debug("  %s: %s", section, values)

        with section_timer("load training data", logger):
            corpus = load_corpus(
                resolve_training_path(settings.data.training_path),
                delimiter=settings.data.delimiter,
            )
        labels = _resolve_class_labels(settings, corpus)
        summary_logger.info("%d training samples, %d candidate classes", len(corpus), len(labels))

        if args.cmd == "stats":
            _print_stats(corpus, labels)
            sys.exit(0)

        ranker = PosteriorRanker(
            PosteriorScorer(priors=PriorTable(settings.scoring.priors)),
            strict=settings.scoring.strict,
            max_workers=settings.scoring.max_workers,
        )

        if args.cmd == "classify":
            result = ranker.rank_classes(
                corpus, labels,
                args.hue, args.saturation, args.value, args.compactness, args.texture,
            )
            _print_result(result)
            sys.exit(0)

        observations = load_observations(args.samples, delimiter=settings.data.delimiter)
        rows = []
        with section_timer(f"classify {len(observations)} samples", logger):
            for obs in tqdm(observations, desc="Classifying", unit="sample", disable=args.quiet):
                result = ranker.rank_classes(
                    corpus, labels,
                    obs.hue, obs.saturation, obs.value, obs.compactness, obs.texture,
                )
                rows.append((obs, result, select_best(result) or ""))
        out = write_results(rows, args.output, labels, delimiter=settings.data.delimiter)
        summary_logger.info("Wrote %d results to %s", len(rows), out)
        sys.exit(0)

    except ConfigurationError as e:
        logging.error("Configuration error: %s", e.message)
        _log_suggestions(e)
        sys.exit(1)

    except EstimationError as e:
        logging.error("Estimation failed [%s]: %s", e.error_code, e.message)
        _log_suggestions(e)
        sys.exit(1)

    except FruitBayesError as e:
        logging.error("%s", e.message)
        _log_suggestions(e)
        sys.exit(1)

    except KeyboardInterrupt:
        logging.info("Interrupted by user")
        sys.exit(130)


def select_best(result: PosteriorResult) -> Optional[str]:
    """Label with the highest score; ties go to the earlier class. None if every score is 0."""
    best = None
    for entry in result:
        if entry.score > 0 and (best is None or entry.score > best.score):
            best = entry
    return best.class_label if best else None


def _resolve_class_labels(settings: Settings, corpus: TrainingCorpus) -> List[str]:
    if settings.scoring.class_labels:
        return list(settings.scoring.class_labels)
    if settings.data.class_ranges_path:
        ranges = load_hsv_ranges(settings.data.class_ranges_path, delimiter=settings.data.delimiter)
        return [ClassCandidate.from_hsv_range(r).class_label for r in ranges]
    labels = corpus.labels()
    if not labels:
        raise ConfigurationError(
            "No candidate classes: training data is empty and no classes were given",
            config_field="scoring.class_labels",
        ).add_suggestion("Pass --classes or --ranges, or add training samples")
    return labels


def _log_suggestions(e: FruitBayesError) -> None:
    if getattr(e, "suggestions", None):
        logging.error("Suggestions:")
        for suggestion in e.suggestions:
            logging.error("  - %s", suggestion)


def _print_result(result: PosteriorResult) -> None:
    width = max([len(label) for label in result.labels()] + [5])
    print("=" * (width + 26))
    for entry in result:
        note = f"  ({entry.error.error_code})" if entry.error is not None else ""
        print(f"{entry.class_label:<{width}}  {entry.score:.6e}{note}")
    print("=" * (width + 26))
    best = select_best(result)
    print(f"Best class: {best if best is not None else 'none (all scores are 0)'}")


def _print_stats(corpus: TrainingCorpus, labels: List[str]) -> None:
    estimator = GaussianStatsEstimator()
    for label in labels:
        print(label)
        for attr in Attribute:
            try:
                st = estimator.estimate(corpus, label, attr)
                print(f"  {attr.label:<12} mean={st.mean:.6f} sd={st.standard_deviation:.6f} n={st.count}")
            except EstimationError as e:
                print(f"  {attr.label:<12} n/a ({e.error_code})")


if __name__ == "__main__":
    main()
