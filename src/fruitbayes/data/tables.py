"""Shared CSV reading for training, range and observation tables."""

import csv
from pathlib import Path
from typing import Dict, Iterator, Sequence, Tuple, Union

from fruitbayes.domain.exceptions import (
    DataFileNotFoundError,
    InvalidFileFormatError,
    InvalidRecordError,
)


Row = Dict[str, str]

def read_table(
    path: Union[str, Path],
    required: Sequence[str],
    *,
    delimiter: str = ",",
) -> Iterator[Tuple[int, Row]]:
    """
    Yield (line_number, row) for every data row of a CSV file.

    Header names are matched case-insensitively; columns beyond ``required``
    are passed through untouched. Blank lines are skipped.
    """
    p = Path(path)
    if not p.is_file():
        raise DataFileNotFoundError(str(p))

    with p.open(newline="", encoding="utf-8") as fh:
        reader = csv.reader(fh, delimiter=delimiter)
        try:
            header = next(reader)
        except StopIteration:
            raise InvalidFileFormatError(str(p), list(required), list(required)) from None

        columns = [h.strip().lower() for h in header]
        missing = [c for c in required if c not in columns]
        if missing:
            raise InvalidFileFormatError(str(p), list(required), missing)

        for values in reader:
            if not any(v.strip() for v in values):
                continue
            if len(values) != len(columns):
                raise InvalidRecordError(
                    f"Expected {len(columns)} fields, found {len(values)}",
                    file_path=str(p),
                    line_number=reader.line_num,
                )
            yield reader.line_num, dict(zip(columns, (v.strip() for v in values)))

def parse_number(row: Row, column: str, *, path: Path, line_number: int, cast=float):
    raw = row.get(column, "")
    try:
        return cast(raw)
    except (TypeError, ValueError) as e:
        raise InvalidRecordError(
            f"Column '{column}' is not a valid number: {raw!r}",
            file_path=str(path),
            line_number=line_number,
            field_name=column,
            field_value=raw,
        ) from e
