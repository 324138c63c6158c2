"""
CSV ingestion for the card and offer tables.

A table that cannot be read is not an error for the engine: it becomes zero
rows, exactly like a table that has not loaded yet, and the reason is kept in
the snapshot's load_errors so the UI can explain empty chip strips.
"""

from pathlib import Path
from typing import Dict, Optional, Tuple, Union

import pandas as pd

from dineout_offers.models import RawRow, SiteTag, TableSnapshot
from dineout_offers.offers.sites import REFERENCE_FILENAME, SITE_PROFILES
from dineout_offers.utils.logging_config import logger

PathLike = Union[str, Path]

_READ_ERRORS = (OSError, UnicodeDecodeError, pd.errors.ParserError, pd.errors.EmptyDataError)


def load_table(path: PathLike) -> Tuple[RawRow, ...]:
    """
    Reads one CSV with a header row into a tuple of column -> string dicts.

    Every cell is kept as text; blanks stay "" rather than NaN, and fully
    blank lines are skipped.

    Raises:
        FileNotFoundError, pandas.errors.ParserError, ... on unreadable input.
    """
    df = pd.read_csv(
        path,
        dtype=str,
        keep_default_na=False,
        skip_blank_lines=True,
        encoding="utf-8-sig",
    )
    df.columns = [str(col).strip() for col in df.columns]
    if len(df):
        # ",,,," lines survive skip_blank_lines
        blank = (df.apply(lambda col: col.str.strip()) == "").all(axis=1)
        df = df[~blank]
    return tuple(df.to_dict(orient="records"))


def try_load_table(path: PathLike) -> Tuple[Tuple[RawRow, ...], Optional[str]]:
    """load_table(), but failures come back as (no rows, reason)."""
    try:
        rows = load_table(path)
        logger.info(f"Loaded {len(rows)} rows from {path}")
        return rows, None
    except FileNotFoundError:
        logger.warning(f"Table not found: {path}")
        return (), "not found"
    except _READ_ERRORS as e:
        logger.error(f"Error reading {path}: {e}")
        return (), str(e) or type(e).__name__


def load_snapshot(data_dir: PathLike) -> TableSnapshot:
    """
    Loads the reference list and every offer table from `data_dir`.

    Args:
        data_dir: Directory with allCards.csv and the per-site CSVs.

    Returns:
        TableSnapshot of everything that could be read.
    """
    base = Path(data_dir)
    reference, reference_error = try_load_table(base / REFERENCE_FILENAME)
    if reference_error:
        logger.warning(f"Reference card list unavailable ({reference_error}); dropdown will be empty")

    offers: Dict[SiteTag, Tuple[RawRow, ...]] = {}
    errors: Dict[SiteTag, str] = {}
    for profile in SITE_PROFILES:
        rows, error = try_load_table(base / profile.filename)
        offers[profile.tag] = rows
        if error:
            errors[profile.tag] = error

    return TableSnapshot(reference=reference, offers=offers, load_errors=errors)
