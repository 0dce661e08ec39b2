from flask import Blueprint

from classroom_webhooks import __version__

ui = Blueprint('ui', __name__)


@ui.route("/")
def index():
    """
    Just to verify that things are working.
    """
    return f"classroom-webhooks {__version__}"
