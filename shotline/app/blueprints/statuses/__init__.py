from flask import Blueprint
from shotline.app.utils.api import configure_api_from_blueprint

from shotline.app.blueprints.statuses.resources import (
    StatusResource,
    StatusesResource,
)

routes = [
    ("/data/statuses", StatusesResource),
    ("/data/statuses/<status_id>", StatusResource),
]

blueprint = Blueprint("statuses", "statuses")
api = configure_api_from_blueprint(blueprint, routes)
