from __future__ import annotations

import pandas as pd
import pytest

from services.dataset import load_cars
from utils.settings import DEFAULT_DATA_PATH


@pytest.fixture(scope="session")
def _cars_session() -> pd.DataFrame:
    return load_cars(DEFAULT_DATA_PATH)


@pytest.fixture()
def cars(_cars_session: pd.DataFrame) -> pd.DataFrame:
    """Fresh copy per test so tests may tamper with values."""
    return _cars_session.copy()


@pytest.fixture()
def full_assignment() -> tuple[str, ...]:
    return ("mpg", "hp", "wt", "am", "gear")
