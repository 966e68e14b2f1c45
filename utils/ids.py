# Single source of truth for all Dash component IDs.

class IDS:
    # Stores
    ASSIGNMENT = "assignment"

    # Render messages
    ERROR   = "error"
    WARNING = "warning"

    # Aesthetic selectors (dropdowns), in slot order
    X_AXIS = "xaxis"
    Y_AXIS = "yaxis"
    COLOR  = "color"
    SIZE   = "size"
    SHAPE  = "shape"

    # Containers wrapping each selector; hidden until upstream is chosen
    X_AXIS_CARD = "xaxis_card"
    Y_AXIS_CARD = "yaxis_card"
    COLOR_CARD  = "color_card"
    SIZE_CARD   = "size_card"
    SHAPE_CARD  = "shape_card"

    # Chart
    FIG_SCATTER  = "fig_scatter"
    SCATTER_CARD = "scatter_card"


# Slot order: x, y, color, size, shape; slot 4 drives size and slot 5 shape, so size is picked before shape
SELECTORS = (IDS.X_AXIS, IDS.Y_AXIS, IDS.COLOR, IDS.SIZE, IDS.SHAPE)
SELECTOR_CARDS = (IDS.X_AXIS_CARD, IDS.Y_AXIS_CARD, IDS.COLOR_CARD, IDS.SIZE_CARD, IDS.SHAPE_CARD)
