from __future__ import annotations
from typing import Optional, Tuple

import pandas as pd
import plotly.express as px
from dash import Dash, Input, Output

from services.cascade import Assignment, coerce_assignment
from services.figures import render
from utils.helpers import with_visibility
from utils.ids import IDS

_CARD_CLASS = "chart-card chart-card--wide"


# ---------- Helpers ----------

def scatter_outputs(assignment: Assignment, dataset: pd.DataFrame) -> Tuple[object, str, Optional[str], Optional[str]]:
    """
    (figure, card class, error text, warning text) for an assignment.
    - Still configuring: empty hidden card, no messages
    - Failed render:     empty hidden card, error text
    - Otherwise:         the figure, warning text if any
    """
    empty = px.scatter()
    result = render(assignment, dataset)
    if result is None:
        return empty, with_visibility(_CARD_CLASS, False), None, None

    error = f"Error: {result.error}" if result.error else None
    warning = f"Warning: {result.warning}" if result.warning else None
    if result.figure is None:
        return empty, with_visibility(_CARD_CLASS, False), error, warning
    return result.figure, with_visibility(_CARD_CLASS, True), error, warning


# ---------- Public API ----------

def register_charts_callbacks(app: Dash, dataset: pd.DataFrame) -> None:
    """
    Register the scatter callback; figure building lives in services.figures,
    the assignment is maintained by the menus callback.
    """

    @app.callback(
        Output(IDS.FIG_SCATTER, "figure"),
        Output(IDS.SCATTER_CARD, "className"),
        Output(IDS.ERROR, "children"),
        Output(IDS.WARNING, "children"),
        Input(IDS.ASSIGNMENT, "data"),
        prevent_initial_call=True,
    )
    def _render_scatter(stored):
        return scatter_outputs(coerce_assignment(stored), dataset)
