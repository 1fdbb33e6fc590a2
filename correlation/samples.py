"""Load (x, y) sample pairs from CSV files."""

import csv
import logging
from pathlib import Path
from typing import List, Tuple


def parse_row(row: List[str]) -> Tuple[float, float] | None:
    """
    Parse one CSV row into an (x, y) pair.

    Only the first two columns are used. Returns None for rows that
    don't hold two numbers (headers, blanks, comments).
    """
    if len(row) < 2:
        return None
    if row[0].lstrip().startswith("#"):
        return None
    try:
        return float(row[0]), float(row[1])
    except ValueError:
        return None


def read_pairs(path: str | Path) -> List[Tuple[float, float]]:
    """
    Read every valid (x, y) pair from a CSV file.

    Raises:
        OSError: if the file can't be opened.
    """
    pairs: List[Tuple[float, float]] = []
    skipped = 0

    with open(path, newline='') as f:
        reader = csv.reader(f)
        for line_no, row in enumerate(reader, 1):
            if not any(cell.strip() for cell in row):
                continue
            parsed = parse_row(row)
            if parsed is None:
                # A leading header is expected, don't warn about it
                if line_no > 1:
                    logging.warning(f"{path}:{line_no}: skipping row {row!r}")
                    skipped += 1
                continue
            pairs.append(parsed)

    logging.info(f"Loaded {len(pairs)} pairs from {path} ({skipped} skipped)")
    return pairs
