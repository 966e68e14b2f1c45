from __future__ import annotations
import logging
import warnings
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

import numpy as np
import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

from services.cascade import Assignment, Slot, is_complete
from utils.helpers import label_for

logger = logging.getLogger(__name__)

# ---------- Internal helpers ----------

# --- Common layout defaults ---
_DEFAULT_MARGIN = dict(l=0, r=0, t=60, b=0)

# Marker diameters (px); zero-valued rows still get the minimum
_SIZE_MIN = 4
_SIZE_MAX = 20
_SIZE_COL = "__size"

# Which aesthetic each slot drives
AESTHETIC_BY_SLOT: Dict[Slot, str] = {
    Slot.X_AXIS: "x",
    Slot.Y_AXIS: "y",
    Slot.COLOR:  "color",
    Slot.SIZE:   "size",
    Slot.SHAPE:  "shape",
}

# Library housekeeping noise, not about the user's data
_IGNORED_WARNINGS = (DeprecationWarning, PendingDeprecationWarning, FutureWarning)


@dataclass(frozen=True)
class AestheticBinding:
    aesthetic: str
    column: str
    label: str
    discrete: bool = False


@dataclass(frozen=True)
class ScatterSpec:
    """Point geometry plus one binding per aesthetic."""
    bindings: Tuple[AestheticBinding, ...]
    geometry: str = "point"

    def binding(self, aesthetic: str) -> AestheticBinding:
        for b in self.bindings:
            if b.aesthetic == aesthetic:
                return b
        raise KeyError(aesthetic)

    @property
    def labels(self) -> Dict[str, str]:
        """aesthetic -> display label"""
        return {b.aesthetic: b.label for b in self.bindings}


@dataclass(frozen=True)
class RenderResult:
    spec: ScatterSpec
    figure: Optional[go.Figure] = None
    error: Optional[str] = None
    warning: Optional[str] = None


def _apply_title(fig, title: str, n: int):
    """Apply a centered title and an N subtext; keep minimal visual noise."""
    fig.update_layout(
        title=dict(text=f"{title}<br><sup>N = {n}</sup>", x=0.5, xanchor="center"),
        uniformtext_minsize=10,
    )
    return fig


def _check_size_column(s: pd.Series, label: str) -> None:
    """Marker sizes must be finite, non-negative numbers."""
    if not pd.api.types.is_numeric_dtype(s):
        raise ValueError(f"{label} cannot be used for size: values are not numeric")
    arr = s.dropna().to_numpy(dtype=float)
    if not np.isfinite(arr).all() or (arr < 0).any():
        raise ValueError(f"{label} cannot be used for size: values must be finite and non-negative")


def _marker_sizes(s: pd.Series) -> np.ndarray:
    """Rescale values linearly onto [_SIZE_MIN, _SIZE_MAX]; a constant column gets the midpoint."""
    arr = s.to_numpy(dtype=float)
    lo, hi = arr.min(), arr.max()
    if hi == lo:
        return np.full_like(arr, (_SIZE_MIN + _SIZE_MAX) / 2)
    return np.interp(arr, (lo, hi), (_SIZE_MIN, _SIZE_MAX))


# ---------- Public API ----------

def build_spec(assignment: Assignment) -> ScatterSpec:
    """Map each slot's column to its aesthetic with a display label."""
    bindings = tuple(
        AestheticBinding(
            aesthetic=AESTHETIC_BY_SLOT[slot],
            column=assignment[slot - 1],
            label=label_for(assignment[slot - 1]),
            # shape is always categorical, even for numeric codes
            discrete=(slot == Slot.SHAPE),
        )
        for slot in Slot
    )
    return ScatterSpec(bindings=bindings)


def build_scatter(df: pd.DataFrame, spec: ScatterSpec) -> go.Figure:
    """
    Scatter plot with five aesthetics:
       - x/y positions, continuous color, marker size
       - shape as discrete symbols (values cast to str)
       - rows missing any bound value are dropped with a warning
    """
    x, y, color, size, shape = (spec.binding(a) for a in ("x", "y", "color", "size", "shape"))
    missing = [b.column for b in spec.bindings if b.column not in df.columns]
    if missing:
        raise ValueError(f"Columns not in dataset: {', '.join(missing)}")

    cols = list(dict.fromkeys(b.column for b in spec.bindings))
    plot_df = df[cols].dropna()
    dropped = len(df) - len(plot_df)
    if dropped:
        warnings.warn(f"Removed {dropped} rows containing missing values", UserWarning)
    if plot_df.empty:
        raise ValueError("No complete rows left to plot")

    _check_size_column(plot_df[size.column], size.label)

    # Row names (car models) become the hover title
    hover = plot_df.index.name
    plot_df = plot_df.reset_index() if hover else plot_df.copy()
    plot_df[shape.column] = plot_df[shape.column].astype(str)
    plot_df[_SIZE_COL] = _marker_sizes(plot_df[size.column])

    # labels= titles the axes, the colorbar and the symbol legend
    fig = px.scatter(
        plot_df,
        x=x.column,
        y=y.column,
        color=color.column,
        size=_SIZE_COL,
        size_max=_SIZE_MAX,
        # raw value on hover, not the rescaled one
        hover_data={size.column: True, _SIZE_COL: False},
        symbol=shape.column,
        hover_name=hover,
        labels={**{b.column: b.label for b in spec.bindings}, _SIZE_COL: size.label},
        opacity=0.85,
    )
    fig.update_layout(margin=_DEFAULT_MARGIN)
    return _apply_title(fig, f"{y.label} vs {x.label}", len(plot_df))


def render(assignment: Assignment, dataset: pd.DataFrame) -> Optional[RenderResult]:
    """
    Render the scatter plot for a complete assignment.
    - Returns None while still configuring (some slot unset)
    - Errors are caught: figure=None, error=<message>
    - Warnings are captured: figure kept, warning=<message>
    """
    if not is_complete(assignment):
        return None

    spec = build_spec(assignment)
    fig, error = None, None
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        try:
            fig = build_scatter(dataset, spec)
        except Exception as exc:
            logger.warning("Render failed for %s: %s", assignment, exc)
            error = str(exc) or type(exc).__name__

    shown = []
    for w in caught:
        if issubclass(w.category, _IGNORED_WARNINGS):
            logger.debug("Library warning during render: %s: %s", w.category.__name__, w.message)
        else:
            shown.append(w)
    warning = "; ".join(str(w.message) for w in shown) or None
    if warning:
        logger.info("Render warning for %s: %s", assignment, warning)
    return RenderResult(spec=spec, figure=fig, error=error, warning=warning)
