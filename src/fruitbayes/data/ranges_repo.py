"""Load the per-class HSV threshold table."""

import logging
from pathlib import Path
from typing import List, Union

from fruitbayes.domain.models import HSVRange
from fruitbayes.domain.exceptions import InvalidRecordError
from .tables import read_table, parse_number

logger = logging.getLogger(__name__)

RANGE_COLUMNS = ("class_label", "h1", "h2", "h3", "h4", "s1", "s2", "v1", "v2")

def load_hsv_ranges(path: Union[str, Path], *, delimiter: str = ",") -> List[HSVRange]:
    p = Path(path)
    ranges: List[HSVRange] = []
    for line_number, row in read_table(p, RANGE_COLUMNS, delimiter=delimiter):
        if not row["class_label"]:
            raise InvalidRecordError("Missing class_label", file_path=str(p), line_number=line_number)
        bounds = {
            c: parse_number(row, c, path=p, line_number=line_number, cast=int)
            for c in RANGE_COLUMNS[1:]
        }
        ranges.append(HSVRange(class_label=row["class_label"], **bounds))
    logger.info("Loaded %d class ranges from %s", len(ranges), p)
    return ranges
