from flask import Blueprint
from shotline.app.utils.api import configure_api_from_blueprint

from shotline.app.blueprints.index.resources import (
    IndexResource,
    StatusResource,
)

routes = [
    ("/", IndexResource),
    ("/status", StatusResource),
]

blueprint = Blueprint("index", "index")
api = configure_api_from_blueprint(blueprint, routes)
