from flask import Blueprint
from shotline.app.utils.api import configure_api_from_blueprint

from shotline.app.blueprints.user.resources import (
    ProjectPermissionsResource,
    ProjectRoleResource,
)

routes = [
    ("/data/user/project-permissions", ProjectPermissionsResource),
    ("/data/user/projects/<project_id>/role", ProjectRoleResource),
]

blueprint = Blueprint("user", "user")
api = configure_api_from_blueprint(blueprint, routes)
