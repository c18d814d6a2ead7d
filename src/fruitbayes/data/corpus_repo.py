"""Load and store labeled training samples."""

import csv
import logging
from pathlib import Path
from typing import Iterable, Union

from fruitbayes.domain.models import FEATURE_COLUMNS, TrainingCorpus, TrainingSample
from fruitbayes.domain.exceptions import FileSystemError, InvalidRecordError
from .tables import read_table, parse_number

logger = logging.getLogger(__name__)

CORPUS_COLUMNS = ("class_label",) + FEATURE_COLUMNS

def load_corpus(path: Union[str, Path], *, delimiter: str = ",") -> TrainingCorpus:
    """Read a training CSV (class_label plus the five features) into a corpus."""
    p = Path(path)
    samples = []
    for line_number, row in read_table(p, CORPUS_COLUMNS, delimiter=delimiter):
        label = row["class_label"]
        if not label:
            raise InvalidRecordError(
                "Missing class_label",
                file_path=str(p),
                line_number=line_number,
            )
        features = {
            c: parse_number(row, c, path=p, line_number=line_number)
            for c in FEATURE_COLUMNS
        }
        samples.append(TrainingSample(class_label=label, **features))

    corpus = TrainingCorpus.from_samples(samples)
    logger.info("Loaded %d training samples (%d classes) from %s",
                len(corpus), len(corpus.labels()), p)
    return corpus

def save_corpus(
    corpus: Iterable[TrainingSample],
    path: Union[str, Path],
    *,
    delimiter: str = ",",
) -> Path:
    p = Path(path)
    try:
        p.parent.mkdir(parents=True, exist_ok=True)
        with p.open("w", newline="", encoding="utf-8") as fh:
            writer = csv.writer(fh, delimiter=delimiter)
            writer.writerow(CORPUS_COLUMNS)
            for s in corpus:
                writer.writerow((s.class_label,) + tuple(repr(x) for x in s.features()))
    except OSError as e:
        raise FileSystemError(f"Cannot write corpus: {e}", path=str(p)) from e
    return p
