from __future__ import annotations
import logging
import os

import pandas as pd

from utils.helpers import COLUMNS

logger = logging.getLogger(__name__)


class DatasetError(RuntimeError):
    """The cars dataset is missing or does not have the expected columns."""


def load_cars(path: str) -> pd.DataFrame:
    """
    Read the mtcars CSV (row names in the first column) into a DataFrame.
    - Keeps the 11 known columns in their fixed order
    - Coerces every column to numeric; non-numeric cells raise DatasetError
    """
    if not os.path.isfile(path):
        raise DatasetError(f"Dataset not found: {path}")

    df = pd.read_csv(path, index_col=0)

    missing = [c for c in COLUMNS if c not in df.columns]
    if missing:
        raise DatasetError(f"Dataset {path} is missing columns: {', '.join(missing)}")

    df = df[list(COLUMNS)].copy()
    try:
        df = df.apply(pd.to_numeric, errors="raise")
    except (TypeError, ValueError) as exc:
        raise DatasetError(f"Dataset {path} has non-numeric values: {exc}") from exc

    logger.info("Loaded %d rows x %d columns from %s", len(df), len(df.columns), path)
    return df
