from flask import Blueprint
from shotline.app.utils.api import configure_api_from_blueprint

from shotline.app.blueprints.projects.resources import (
    MyProjectPermissionsResource,
    ProjectPermissionResource,
    ProjectPermissionsResource,
    ProjectResource,
    ProjectsResource,
)

routes = [
    ("/data/projects", ProjectsResource),
    ("/data/projects/<project_id>", ProjectResource),
    ("/data/projects/<project_id>/permissions", ProjectPermissionsResource),
    (
        "/data/projects/<project_id>/permissions/my-projects",
        MyProjectPermissionsResource,
    ),
    (
        "/data/projects/<project_id>/permissions/<person_id>",
        ProjectPermissionResource,
    ),
]

blueprint = Blueprint("projects", "projects")
api = configure_api_from_blueprint(blueprint, routes)
