"""
Scopus CSV loading.
"""

import logging
from pathlib import Path
from typing import List, Union

import pandas as pd

from coauthor_network.exceptions import InputFormatError
from coauthor_network.models import AFFILIATIONS_COLUMN, Record

logger = logging.getLogger(__name__)


def load_records(path: Union[str, Path]) -> List[Record]:
    """
    Load a Scopus CSV export as records.

    Args:
        path: CSV file with at least the "Authors with affiliations" column.

    Returns:
        One Record per row, in file order. Missing cells become None.

    Raises:
        FileNotFoundError: The file does not exist.
        InputFormatError: The file is not a usable export.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Data file not found: {path}")

    logger.info("Loading data from %s...", path)
    try:
        # Scopus exports start with a byte order mark
        df = pd.read_csv(path, dtype=str, encoding="utf-8-sig")
    except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as e:
        raise InputFormatError(f"Could not read {path}: {e}") from e

    df.columns = [str(c).strip() for c in df.columns]
    if AFFILIATIONS_COLUMN not in df.columns:
        raise InputFormatError(
            f"{path} has no '{AFFILIATIONS_COLUMN}' column; "
            f"found: {', '.join(df.columns)}"
        )

    df = df.astype(object).where(pd.notna(df), None)
    records = [Record.from_row(row) for row in df.to_dict(orient="records")]

    logger.info("Loaded %d records", len(records))
    return records
