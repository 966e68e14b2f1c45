import logging

from dash import Dash

from layout import build_layout
from callbacks.charts import register_charts_callbacks
from callbacks.menus import register as register_menu_callbacks
from services.dataset import load_cars
from utils.settings import load_settings

logger = logging.getLogger(__name__)

settings = load_settings()
logging.basicConfig(level=settings.log_level, format="%(levelname)s: %(message)s")

# Read-only dataset, loaded once per process
cars = load_cars(settings.data_path)

app = Dash(__name__, title="Visualizing Cars Data")

# Expose the underlying Flask server if deployed on platforms expecting it
# (e.g., Gunicorn). Not strictly required for local dev.
server = app.server

# App Layout (pure UI structure)
app.layout = build_layout()

# Aesthetic selectors (cascade)
register_menu_callbacks(app)

# Scatter rendering + error/warning messages
register_charts_callbacks(app, cars)


def main():
    logger.info("Serving on http://%s:%d", settings.host, settings.port)
    app.run(host=settings.host, port=settings.port, debug=settings.debug)


# RUN APP
if __name__ == "__main__":
    main()
