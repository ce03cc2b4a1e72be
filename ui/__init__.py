"""
ui - JSON endpoints consumed by the browser frontend.

All route modules register on a single Flask Blueprint.
"""

from flask import Blueprint

ui_bp = Blueprint("ui", __name__)

# Import route modules so their @ui_bp decorators execute
from ui import live_search        # noqa: F401, E402
from ui import routes_rates       # noqa: F401, E402
