from flask import Blueprint
from shotline.app.utils.api import configure_api_from_blueprint

from shotline.app.blueprints.versions.resources import (
    VersionResource,
    VersionsResource,
)

routes = [
    ("/data/versions", VersionsResource),
    ("/data/versions/<version_id>", VersionResource),
]

blueprint = Blueprint("versions", "versions")
api = configure_api_from_blueprint(blueprint, routes)
