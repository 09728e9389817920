from flask import Blueprint
from shotline.app.utils.api import configure_api_from_blueprint

from shotline.app.blueprints.playlists.resources import (
    PlaylistResource,
    PlaylistsResource,
    PlaylistVersionResource,
    PlaylistVersionsResource,
    ProjectPlaylistsResource,
)

routes = [
    ("/data/projects/<project_id>/playlists", ProjectPlaylistsResource),
    ("/data/playlists", PlaylistsResource),
    ("/data/playlists/<playlist_id>", PlaylistResource),
    ("/data/playlists/<playlist_id>/versions", PlaylistVersionsResource),
    (
        "/data/playlists/<playlist_id>/versions/<version_code>",
        PlaylistVersionResource,
    ),
]

blueprint = Blueprint("playlists", "playlists")
api = configure_api_from_blueprint(blueprint, routes)
