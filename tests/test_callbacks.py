"""Tests for the Dash surface: selector derivation, scatter outputs, wiring."""

from __future__ import annotations

from callbacks.charts import scatter_outputs
from callbacks.menus import apply_selection, selector_state, slot_for
from layout import build_layout
from services.cascade import EMPTY_ASSIGNMENT, Slot
from utils.helpers import UNSET
from utils.ids import IDS, SELECTOR_CARDS, SELECTORS


def _component_ids(component) -> set[str]:
    """Collect every id in a Dash component tree."""
    ids = set()
    cid = getattr(component, "id", None)
    if cid:
        ids.add(cid)
    children = getattr(component, "children", None)
    if isinstance(children, (list, tuple)):
        for child in children:
            ids |= _component_ids(child)
    elif children is not None and hasattr(children, "children"):
        ids |= _component_ids(children)
    return ids


class TestMenus:
    def test_slot_for(self) -> None:
        assert slot_for(IDS.X_AXIS) is Slot.X_AXIS
        assert slot_for(IDS.SHAPE) is Slot.SHAPE
        assert slot_for(IDS.ASSIGNMENT) is None
        assert slot_for(None) is None

    def test_apply_selection_sets_and_resets(self) -> None:
        stored = ["mpg", "hp", "wt", "", ""]
        assert apply_selection(stored, IDS.X_AXIS, "cyl") == ("cyl", UNSET, UNSET, UNSET, UNSET)

    def test_apply_selection_cleared_dropdown(self) -> None:
        stored = ["mpg", "hp", "", "", ""]
        assert apply_selection(stored, IDS.Y_AXIS, None) == ("mpg", UNSET, UNSET, UNSET, UNSET)

    def test_apply_selection_rejects_duplicate(self) -> None:
        stored = ["mpg", "hp", "", "", ""]
        assert apply_selection(stored, IDS.COLOR, "mpg") == ("mpg", "hp", UNSET, UNSET, UNSET)

    def test_apply_selection_unknown_trigger(self) -> None:
        stored = ["mpg", "", "", "", ""]
        assert apply_selection(stored, None, "hp") == ("mpg", UNSET, UNSET, UNSET, UNSET)

    def test_selector_state_initial(self) -> None:
        options, values, classes = selector_state(EMPTY_ASSIGNMENT)
        assert len(options[0]) == 11
        assert options[1:] == [[], [], [], []]
        assert values == [None] * 5
        assert classes == ["selector-card"] + ["selector-card hidden"] * 4

    def test_selector_state_partial(self) -> None:
        options, values, classes = selector_state(("mpg", "hp", UNSET, UNSET, UNSET))
        assert values == ["mpg", "hp", None, None, None]
        assert classes[:3] == ["selector-card"] * 3
        assert classes[3:] == ["selector-card hidden"] * 2
        color_values = [o["value"] for o in options[2]]
        assert "mpg" not in color_values and "hp" not in color_values
        assert len(color_values) == 9

    def test_option_labels(self) -> None:
        options, _, _ = selector_state(EMPTY_ASSIGNMENT)
        assert options[0][0] == {"label": "Miles Per Gallon (mpg)", "value": "mpg"}


class TestCharts:
    def test_still_configuring(self, cars) -> None:
        fig, card, error, warning = scatter_outputs(("mpg", UNSET, UNSET, UNSET, UNSET), cars)
        assert card.endswith("hidden")
        assert (error, warning) == (None, None)
        assert len(fig.data) == 0

    def test_success(self, cars, full_assignment) -> None:
        fig, card, error, warning = scatter_outputs(full_assignment, cars)
        assert card == "chart-card chart-card--wide"
        assert (error, warning) == (None, None)
        assert len(fig.data) > 0

    def test_error_then_success_clears_messages(self, cars, full_assignment) -> None:
        broken = cars.copy()
        broken["am"] = broken["am"].astype(str) + "x"
        _, card, error, _ = scatter_outputs(full_assignment, broken)
        assert card.endswith("hidden")
        assert error.startswith("Error: ")

        _, card, error, warning = scatter_outputs(full_assignment, cars)
        assert not card.endswith("hidden")
        assert (error, warning) == (None, None)

    def test_warning_text(self, cars, full_assignment) -> None:
        cars.loc[cars.index[:2], "mpg"] = float("nan")
        fig, card, error, warning = scatter_outputs(full_assignment, cars)
        assert error is None
        assert warning == "Warning: Removed 2 rows containing missing values"
        assert not card.endswith("hidden")


class TestLayout:
    def test_layout_ids(self) -> None:
        ids = _component_ids(build_layout())
        expected = {IDS.ASSIGNMENT, IDS.ERROR, IDS.WARNING, IDS.FIG_SCATTER, IDS.SCATTER_CARD}
        assert expected | set(SELECTORS) | set(SELECTOR_CARDS) <= ids

    def test_app_registers_callbacks(self) -> None:
        import app as app_module

        keys = " ".join(app_module.app.callback_map)
        assert IDS.FIG_SCATTER in keys
        assert IDS.ASSIGNMENT in keys
        assert app_module.cars.shape == (32, 11)

    def test_assignment_store_not_persisted(self) -> None:
        """A reload must start fully unset, matching the empty selectors."""
        layout = build_layout()
        stores = [c for c in layout.children if getattr(c, "id", None) == IDS.ASSIGNMENT]
        assert len(stores) == 1
        assert stores[0].storage_type == "memory"
        assert stores[0].data == list(EMPTY_ASSIGNMENT)
