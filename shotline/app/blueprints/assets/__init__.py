from flask import Blueprint
from shotline.app.utils.api import configure_api_from_blueprint

from shotline.app.blueprints.assets.resources import (
    AssetResource,
    AssetsResource,
    ProjectAssetsResource,
)

routes = [
    ("/data/projects/<project_id>/assets", ProjectAssetsResource),
    ("/data/assets", AssetsResource),
    ("/data/assets/<asset_id>", AssetResource),
]

blueprint = Blueprint("assets", "assets")
api = configure_api_from_blueprint(blueprint, routes)
