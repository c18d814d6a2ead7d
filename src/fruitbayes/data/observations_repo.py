"""Read observations to classify and write ranked results."""

import csv
from pathlib import Path
from typing import List, Sequence, Tuple, Union

from fruitbayes.domain.exceptions import FileSystemError
from fruitbayes.domain.models import FEATURE_COLUMNS, Observation, PosteriorResult
from .tables import read_table, parse_number

def load_observations(path: Union[str, Path], *, delimiter: str = ",") -> List[Observation]:
    """Rows without a sample_id column are numbered from 1."""
    p = Path(path)
    observations = []
    for i, (line_number, row) in enumerate(read_table(p, FEATURE_COLUMNS, delimiter=delimiter), start=1):
        features = {
            c: parse_number(row, c, path=p, line_number=line_number)
            for c in FEATURE_COLUMNS
        }
        sample_id = row.get("sample_id") or str(i)
        observations.append(Observation(sample_id=sample_id, **features))
    return observations

def write_results(
    rows: Sequence[Tuple[Observation, PosteriorResult, str]],
    path: Union[str, Path],
    class_labels: Sequence[str],
    *,
    delimiter: str = ",",
) -> Path:
    """One row per observation: sample_id, best_class, then one score per class."""
    p = Path(path)
    try:
        p.parent.mkdir(parents=True, exist_ok=True)
        with p.open("w", newline="", encoding="utf-8") as fh:
            writer = csv.writer(fh, delimiter=delimiter)
            writer.writerow(["sample_id", "best_class"] + list(class_labels))
            for obs, result, best in rows:
                scores = result.as_dict()
                writer.writerow(
                    [obs.sample_id, best] + [repr(scores.get(label, 0.0)) for label in class_labels]
                )
    except OSError as e:
        raise FileSystemError(f"Cannot write results: {e}", path=str(p)) from e
    return p
