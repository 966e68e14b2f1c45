from __future__ import annotations
import logging
from enum import IntEnum
from typing import Iterable, List, NamedTuple, Optional, Tuple, Union

from utils.helpers import COLUMNS, UNSET, normalize_choice

logger = logging.getLogger(__name__)

# ---------- Selection cascade (pure, no Dash) ----------
# Each slot only offers columns that earlier slots have not taken.
# The assignment itself is the single source of truth: what is offered is
# always recomputed from what is bound upstream.


class Slot(IntEnum):
    X_AXIS = 1
    Y_AXIS = 2
    COLOR  = 3
    SIZE   = 4
    SHAPE  = 5


Assignment = Tuple[str, str, str, str, str]

EMPTY_ASSIGNMENT: Assignment = (UNSET,) * len(Slot)


class InvalidSelection(ValueError):
    """Raised when a column is not selectable for a slot right now."""

    def __init__(self, slot: Slot, column: str, reason: str):
        super().__init__(f"Cannot set {slot.name.lower()} to {column!r}: {reason}")
        self.slot = slot
        self.column = column


class SlotChanged(NamedTuple):
    slot: Union[Slot, int]
    column: Optional[str]


class Reset(NamedTuple):
    pass


Event = Union[SlotChanged, Reset]


def _as_slot(slot: Union[Slot, int]) -> Slot:
    try:
        return Slot(slot)
    except ValueError:
        raise ValueError(f"Slot must be 1..{len(Slot)}, got {slot!r}")


def bound_columns(assignment: Assignment, before: Optional[Union[Slot, int]] = None) -> List[str]:
    """Concrete columns bound to the slots preceding `before` (all slots if None)."""
    stop = len(assignment) if before is None else _as_slot(before) - 1
    return [c for c in assignment[:stop] if c != UNSET]


def is_visible(slot: Union[Slot, int], assignment: Assignment) -> bool:
    """A selector is shown only once every slot before it holds a column."""
    k = _as_slot(slot)
    return all(c != UNSET for c in assignment[: k - 1])


def is_complete(assignment: Assignment) -> bool:
    return all(c != UNSET for c in assignment)


def available_for(slot: Union[Slot, int], assignment: Assignment) -> List[str]:
    """
    Choices for `slot`: UNSET first, then every column (universe order)
    not already bound to an earlier slot.
    """
    taken = set(bound_columns(assignment, before=slot))
    return [UNSET] + [c for c in COLUMNS if c not in taken]


def set_slot(slot: Union[Slot, int], column: Optional[str], assignment: Assignment) -> Assignment:
    """
    Return a new assignment with `slot` set to `column` and every later slot
    reset to UNSET. The reset applies even when the value is unchanged.
    """
    k = _as_slot(slot)
    column = normalize_choice(column)

    if column != UNSET and not is_visible(k, assignment):
        raise InvalidSelection(k, column, "earlier slots are not set")
    if column not in available_for(k, assignment):
        raise InvalidSelection(k, column, "column is unknown or already in use")

    return tuple(assignment[: k - 1]) + (column,) + (UNSET,) * (len(Slot) - k)


def reduce(assignment: Assignment, event: Event) -> Assignment:
    """Pure reducer: (Assignment, Event) -> Assignment."""
    if isinstance(event, Reset):
        return EMPTY_ASSIGNMENT
    if isinstance(event, SlotChanged):
        return set_slot(event.slot, event.column, assignment)
    raise TypeError(f"Unknown event: {event!r}")


def coerce_assignment(values: Optional[Iterable[Optional[str]]]) -> Assignment:
    """
    Rebuild an assignment from stored JSON (list or None).
    Replays the values slot by slot so a corrupted store can never break the
    invariants; the first invalid value truncates the rest to UNSET.
    """
    assignment = EMPTY_ASSIGNMENT
    if not values:
        return assignment

    for slot, value in zip(Slot, values):
        value = normalize_choice(value)
        if value == UNSET:
            break
        try:
            assignment = set_slot(slot, value, assignment)
        except InvalidSelection as exc:
            logger.warning("Dropping stored selection: %s", exc)
            break
    return assignment
