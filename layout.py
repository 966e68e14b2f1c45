from dash import dcc, html

from services.cascade import EMPTY_ASSIGNMENT, Slot, available_for
from utils.helpers import COLUMN_LABELS, UNSET, make_options
from utils.ids import IDS, SELECTORS, SELECTOR_CARDS

# Prompt shown on each selector, in slot order
SELECTOR_PROMPTS = {
    Slot.X_AXIS: "Select a x-axis value",
    Slot.Y_AXIS: "Select a y-axis value",
    Slot.COLOR:  "Select a color value",
    Slot.SIZE:   "Select a size value",
    Slot.SHAPE:  "Select a shape value",
}


def _selector(slot: Slot):
    """One aesthetic dropdown; only the x-axis card is visible at start."""
    options = []
    if slot == Slot.X_AXIS:
        options = make_options([c for c in available_for(slot, EMPTY_ASSIGNMENT) if c != UNSET], COLUMN_LABELS)
    return html.Div([
        html.Label(SELECTOR_PROMPTS[slot], htmlFor=SELECTORS[slot - 1]),
        dcc.Dropdown(
            id=SELECTORS[slot - 1],
            options=options,
            value=None,
            placeholder=SELECTOR_PROMPTS[slot],
            clearable=True,
        ),
    ],
        className="selector-card" if slot == Slot.X_AXIS else "selector-card hidden",
        id=SELECTOR_CARDS[slot - 1],
    )


def build_layout():
    """Return the full Dash layout (no callbacks here)."""
    return html.Div([
        html.Header(html.H1("Visualizing Cars Data"), className="app-header"),

        # In-memory store: the current assignment (one column per slot); a reload starts unset
        dcc.Store(id=IDS.ASSIGNMENT, storage_type="memory", data=list(EMPTY_ASSIGNMENT)),

        html.Div([
            # A) Graph configuration
            html.Div([
                html.H3("Graph Configuration"),
                html.P(
                    "Select a variable from the mtcars dataset for each aesthetic "
                    "dimension of the graph. Once all five aesthetics have been chosen, "
                    "the plot of the data will be rendered accordingly.",
                    className="help-text"
                ),
                # Render messages; error and warning are independent
                html.Div(id=IDS.ERROR, className="render-error"),
                html.Div(id=IDS.WARNING, className="render-warning"),

                *[_selector(slot) for slot in Slot],
            ], className="sidebar"),

            # B) Scatter chart
            html.Div([
                dcc.Graph(id=IDS.FIG_SCATTER, className="chart-plot"),
            ], className="chart-card chart-card--wide hidden", id=IDS.SCATTER_CARD),
        ], className="main-grid"),
    ])
