"""
Tab-separated row source.
"""

import logging
import os

logger = logging.getLogger()


def read_rows(path: str | os.PathLike, delimiter: str = "\t") -> list[list[str]] | None:
    """
    Read a delimited text file into rows of fields.

    Empty fields (runs of the delimiter) are dropped, so every row holds
    only non-empty values.

    Args:
        path: Location of the file.
        delimiter: Field separator, tab by default.

    Returns:
        One list of fields per line, or None if the file could not be read.
    """
    rows = []
    try:
        with open(path, encoding="utf-8") as f:
            for line in f:
                fields = [field for field in line.rstrip("\r\n").split(delimiter) if field]
                rows.append(fields)
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Something went wrong reading {path}: {e}")
        return None

    logger.debug(f"Read {len(rows)} rows from {path}")
    return rows


def extract_people(rows: list[list[str]]) -> list[list[str]]:
    """
    Turn movie rows into groups of people who appeared together.

    The first row is a header. Each remaining row is (number, title,
    people), where people is a comma-separated list.

    Args:
        rows: Rows as returned by read_rows.

    Returns:
        One list of stripped names per movie.
    """
    groups = []
    for row in rows[1:]:
        if len(row) < 3:
            logger.debug(f"Skipping row without people: {row}")
            continue
        names = [name.strip() for name in row[2].split(",")]
        groups.append([name for name in names if name])
    return groups
