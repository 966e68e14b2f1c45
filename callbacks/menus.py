# -------------------------------------------------------------------
# Single responsibility: the five aesthetic selectors.
#   - A change to any selector goes through the cascade reducer
#   - Options, values and visibility of all selectors are re-derived
#     from the stored assignment on every change
# -------------------------------------------------------------------

from __future__ import annotations
import logging
from typing import Any, List, Optional, Tuple

from dash import Input, Output, State, ctx

from services.cascade import (
    Assignment, InvalidSelection, Slot, SlotChanged,
    available_for, coerce_assignment, is_visible, reduce,
)
from utils.helpers import COLUMN_LABELS, UNSET, make_options, to_dropdown_value, with_visibility
from utils.ids import IDS, SELECTORS, SELECTOR_CARDS

logger = logging.getLogger(__name__)

_CARD_CLASS = "selector-card"


# ---------- Pure helpers (no Dash context) ----------

def slot_for(component_id: Optional[str]) -> Optional[Slot]:
    """Map a selector's component ID to its slot; None for anything else."""
    if component_id not in SELECTORS:
        return None
    return Slot(SELECTORS.index(component_id) + 1)


def apply_selection(stored: Optional[List[str]], component_id: Optional[str], value: Optional[str]) -> Assignment:
    """
    Run one selector change through the reducer.
    Rejected selections leave the stored assignment unchanged.
    """
    assignment = coerce_assignment(stored)
    slot = slot_for(component_id)
    if slot is None:
        return assignment

    try:
        return reduce(assignment, SlotChanged(slot, value))
    except InvalidSelection as exc:
        logger.warning("Rejected selection: %s", exc)
        return assignment


def selector_state(assignment: Assignment) -> Tuple[list, list, list]:
    """
    Derive (options, values, card classes) for all five selectors.
    Hidden selectors get no options; UNSET shows as an empty dropdown.
    """
    options, values, classes = [], [], []
    for slot in Slot:
        show = is_visible(slot, assignment)
        choices = [c for c in available_for(slot, assignment) if c != UNSET] if show else []
        options.append(make_options(choices, COLUMN_LABELS))
        values.append(to_dropdown_value(assignment[slot - 1]))
        classes.append(with_visibility(_CARD_CLASS, show))
    return options, values, classes


# ---------- Public API ----------

def register(app):
    """
    Register the selector callback on the given Dash app instance.
    The callback both reads and writes the selector values; Dash does not
    re-fire a callback for its own outputs.
    """
    @app.callback(
        Output(IDS.ASSIGNMENT, "data"),
        *[Output(sid, "options") for sid in SELECTORS],
        *[Output(sid, "value") for sid in SELECTORS],
        *[Output(cid, "className") for cid in SELECTOR_CARDS],
        *[Input(sid, "value") for sid in SELECTORS],
        State(IDS.ASSIGNMENT, "data"),
        prevent_initial_call=True,
    )
    def on_select(*args: Any):
        """Apply the triggering selector's value, then re-derive every selector."""
        *values, stored = args
        component_id = ctx.triggered_id
        slot = slot_for(component_id)
        value = values[slot - 1] if slot is not None else None

        assignment = apply_selection(stored, component_id, value)
        options, dropdown_values, classes = selector_state(assignment)
        return (list(assignment), *options, *dropdown_values, *classes)
