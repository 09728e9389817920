from flask import Blueprint
from shotline.app.utils.api import configure_api_from_blueprint

from shotline.app.blueprints.auth.resources import (
    AuthenticatedResource,
    ChangePasswordResource,
    LoginResource,
    LogoutResource,
    RefreshTokenResource,
)

routes = [
    ("/auth/login", LoginResource),
    ("/auth/logout", LogoutResource),
    ("/auth/authenticated", AuthenticatedResource),
    ("/auth/change-password", ChangePasswordResource),
    ("/auth/refresh-token", RefreshTokenResource),
]

blueprint = Blueprint("auth", "auth")
api = configure_api_from_blueprint(blueprint, routes)
