from __future__ import annotations
from typing import Dict, Iterable, List, Mapping, Optional

# ---------- Columns & labels ----------
# Sentinel meaning "no selection yet"
UNSET = ""

# mtcars fields, in dataset order
COLUMNS = ("mpg", "cyl", "disp", "hp", "drat", "wt", "qsec", "vs", "am", "gear", "carb")

COLUMN_LABELS: Dict[str, str] = {
    "mpg":  "Miles Per Gallon",
    "cyl":  "Number of Cylinders",
    "disp": "Displacement",
    "hp":   "Gross Horsepower",
    "drat": "Rear Axle Ratio",
    "wt":   "Weight (1000 lbs)",
    "qsec": "Quarter Mile Time",
    "vs":   "V/S",
    "am":   "Transmission",
    "gear": "Number of Gears",
    "carb": "Number of Carburetors",
}


def label_for(column: str) -> str:
    """Human-readable label of a column; unknown names are returned as-is."""
    return COLUMN_LABELS.get(column, column)


# ---------- Options ----------

def make_options(values: Iterable[str], labels: Optional[Mapping[str, str]] = None) -> List[Dict[str, str]]:
    """
    Map a list of strings to Dash dropdown options.
    With `labels`, each option shows "Label (value)".
    """
    labels = labels or {}
    return [
        {"label": f"{labels[v]} ({v})" if v in labels else v, "value": v}
        for v in values
    ]


def normalize_choice(value: Optional[str]) -> str:
    """Dash clears a dropdown to None; treat that as UNSET."""
    return UNSET if value is None else str(value)


# Toggle base class with "hidden" -> hide or show cards
def with_visibility(base_class: str, show: bool) -> str:
    """Return base class + ' hidden' when show=False; keep base otherwise."""
    return f"{base_class} hidden" if not show else base_class


def to_dropdown_value(column: str) -> Optional[str]:
    """UNSET shows as an empty dropdown (placeholder) in the UI."""
    return None if column == UNSET else column
