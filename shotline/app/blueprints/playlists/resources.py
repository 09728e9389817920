from flask_restful import Resource
from flask_jwt_extended import jwt_required

from shotline.app.blueprints.playlists.schemas import (
    PlaylistCreateSchema,
    PlaylistUpdateSchema,
    PlaylistVersionAddSchema,
    PlaylistVersionsOrderSchema,
)
from shotline.app.mixin import ArgsMixin
from shotline.app.services import (
    persons_service,
    playlists_service,
    project_access_service,
    projects_service,
)
from shotline.app.utils.validation import (
    get_update_data,
    validate_request_body,
)


def get_playlist_for_contributor(playlist_id):
    playlist = playlists_service.get_playlist(playlist_id)
    project_access_service.check_contributor_access(
        playlist["project_id"], persons_service.get_current_user_context()
    )
    return playlist


class ProjectPlaylistsResource(Resource, ArgsMixin):
    @jwt_required()
    def get(self, project_id):
        """
        Get project playlists
        ---
        tags:
        - Playlists
        description: Get playlists of a project, most recent first. Requires
          viewer access on the project.
        parameters:
          - in: path
            name: project_id
            required: True
            type: string
            format: uuid
            example: a24a6ea4-ce75-4665-a070-57453082c25
        responses:
            200:
                description: All playlists of given project
                content:
                  application/json:
                    schema:
                      type: array
                      items:
                        $ref: '#/definitions/Playlist'
        """
        project = projects_service.get_project(project_id)
        project_access_service.check_viewer_access(
            project["id"], persons_service.get_current_user_context()
        )
        return playlists_service.get_playlists_for_project(project["id"])

    @jwt_required()
    def post(self, project_id):
        """
        Create project playlist
        ---
        tags:
        - Playlists
        description: Create a playlist in a project, empty or made of the
          given versions. Every listed version must exist. Requires
          contributor access on the project.
        parameters:
          - in: path
            name: project_id
            required: True
            type: string
            format: uuid
            example: a24a6ea4-ce75-4665-a070-57453082c25
        requestBody:
          required: true
          content:
            application/json:
              schema:
                type: object
                required:
                  - code
                  - name
                properties:
                  code:
                    type: string
                    example: DAILIES_0412
                  name:
                    type: string
                    example: Dailies April 12
                  version_codes:
                    type: array
                    items:
                      type: string
        responses:
            201:
                description: Playlist created
            400:
                description: Unknown version codes
            409:
                description: Code already used
        """
        project = projects_service.get_project(project_id)
        user_context = persons_service.get_current_user_context()
        project_access_service.check_contributor_access(
            project["id"], user_context
        )
        data = validate_request_body(PlaylistCreateSchema)
        return (
            playlists_service.create_playlist(
                project["id"],
                created_by=user_context.user_id,
                **data.model_dump()
            ),
            201,
        )


class PlaylistsResource(Resource, ArgsMixin):
    @jwt_required()
    def get(self):
        """
        Get playlists
        ---
        tags:
        - Playlists
        description: Get playlists of the projects the current user has
          access to, with optional filters and pagination.
        parameters:
          - in: query
            name: project_id
            required: False
            type: string
            format: uuid
          - in: query
            name: status_id
            required: False
            type: string
            format: uuid
          - in: query
            name: search
            required: False
            type: string
          - in: query
            name: page
            required: False
            type: integer
          - in: query
            name: limit
            required: False
            type: integer
        responses:
            200:
                description: Playlists the user can access
        """
        return playlists_service.get_playlists(
            persons_service.get_current_user_context(),
            project_id=self.get_project_id(),
            status_id=self.get_id_parameter("status_id"),
            created_by=self.get_id_parameter("created_by"),
            assigned_to=self.get_id_parameter("assigned_to"),
            search=self.get_text_parameter("search"),
            page=self.get_page(),
            limit=self.get_limit(),
        )


class PlaylistResource(Resource, ArgsMixin):
    @jwt_required()
    def get(self, playlist_id):
        """
        Get playlist
        ---
        tags:
        - Playlists
        description: Get a playlist with its versions in playing order.
          Requires viewer access on its project.
        parameters:
          - in: path
            name: playlist_id
            required: True
            type: string
            format: uuid
            example: a24a6ea4-ce75-4665-a070-57453082c25
        responses:
            200:
                description: Playlist found and returned
            404:
                description: Playlist not found
        """
        playlist = playlists_service.get_full_playlist(playlist_id)
        project_access_service.check_viewer_access(
            playlist["project_id"], persons_service.get_current_user_context()
        )
        return playlist

    @jwt_required()
    def put(self, playlist_id):
        """
        Update playlist
        ---
        tags:
        - Playlists
        description: Update a playlist. Requires contributor access on its
          project, and on the target project when the playlist is moved.
        parameters:
          - in: path
            name: playlist_id
            required: True
            type: string
            format: uuid
            example: a24a6ea4-ce75-4665-a070-57453082c25
        responses:
            200:
                description: Playlist updated
            409:
                description: Code already used
        """
        playlist = get_playlist_for_contributor(playlist_id)
        data = get_update_data(PlaylistUpdateSchema)
        if data.get("project_id") is not None and str(
            data["project_id"]
        ) != str(playlist["project_id"]):
            project = projects_service.get_project(data["project_id"])
            project_access_service.check_contributor_access(
                project["id"], persons_service.get_current_user_context()
            )
        return playlists_service.update_playlist(playlist["id"], data)

    @jwt_required()
    def delete(self, playlist_id):
        """
        Delete playlist
        ---
        tags:
        - Playlists
        description: Delete a playlist. Listed versions are kept. Requires
          contributor access on its project.
        parameters:
          - in: path
            name: playlist_id
            required: True
            type: string
            format: uuid
            example: a24a6ea4-ce75-4665-a070-57453082c25
        responses:
            204:
                description: Playlist deleted
        """
        playlist = get_playlist_for_contributor(playlist_id)
        playlists_service.remove_playlist(playlist["id"])
        return "", 204


class PlaylistVersionsResource(Resource):
    @jwt_required()
    def post(self, playlist_id):
        """
        Add version to playlist
        ---
        tags:
        - Playlists
        description: Insert a version in a playlist at given position, or at
          the end. Requires contributor access on the playlist project.
        parameters:
          - in: path
            name: playlist_id
            required: True
            type: string
            format: uuid
            example: a24a6ea4-ce75-4665-a070-57453082c25
        requestBody:
          required: true
          content:
            application/json:
              schema:
                type: object
                required:
                  - version_code
                properties:
                  version_code:
                    type: string
                    example: EP01_SQ01_SH010_V002
                  position:
                    type: integer
                    example: 0
        responses:
            201:
                description: Version added to the playlist
            400:
                description: Version already in the playlist
            404:
                description: Version not found
        """
        playlist = get_playlist_for_contributor(playlist_id)
        data = validate_request_body(PlaylistVersionAddSchema)
        return (
            playlists_service.add_version(
                playlist["id"], data.version_code, data.position
            ),
            201,
        )

    @jwt_required()
    def put(self, playlist_id):
        """
        Reorder playlist versions
        ---
        tags:
        - Playlists
        description: Replace the version list of a playlist with the given
          ordered codes. Every code must match an existing version. Requires
          contributor access on the playlist project.
        parameters:
          - in: path
            name: playlist_id
            required: True
            type: string
            format: uuid
            example: a24a6ea4-ce75-4665-a070-57453082c25
        responses:
            200:
                description: Versions reordered
            400:
                description: Unknown version codes
        """
        playlist = get_playlist_for_contributor(playlist_id)
        data = validate_request_body(PlaylistVersionsOrderSchema)
        return playlists_service.reorder_versions(
            playlist["id"], data.version_codes
        )


class PlaylistVersionResource(Resource):
    @jwt_required()
    def delete(self, playlist_id, version_code):
        """
        Remove version from playlist
        ---
        tags:
        - Playlists
        description: Remove a version from a playlist. The version itself is
          kept. Requires contributor access on the playlist project.
        parameters:
          - in: path
            name: playlist_id
            required: True
            type: string
            format: uuid
            example: a24a6ea4-ce75-4665-a070-57453082c25
          - in: path
            name: version_code
            required: True
            type: string
            example: EP01_SQ01_SH010_V002
        responses:
            200:
                description: Playlist without the version
        """
        playlist = get_playlist_for_contributor(playlist_id)
        return playlists_service.remove_version(playlist["id"], version_code)
