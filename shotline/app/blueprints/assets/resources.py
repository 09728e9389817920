from flask_restful import Resource
from flask_jwt_extended import jwt_required

from shotline.app.blueprints.assets.schemas import (
    AssetCreateSchema,
    AssetUpdateSchema,
)
from shotline.app.mixin import ArgsMixin
from shotline.app.services import (
    assets_service,
    persons_service,
    project_access_service,
    projects_service,
)
from shotline.app.utils.validation import (
    get_update_data,
    validate_request_body,
)


class ProjectAssetsResource(Resource, ArgsMixin):
    @jwt_required()
    def get(self, project_id):
        """
        Get project assets
        ---
        tags:
        - Assets
        description: Get assets of a project ordered by type. Requires viewer
          access on the project.
        parameters:
          - in: path
            name: project_id
            required: True
            type: string
            format: uuid
            example: a24a6ea4-ce75-4665-a070-57453082c25
        responses:
            200:
                description: All assets of given project
                content:
                  application/json:
                    schema:
                      type: array
                      items:
                        $ref: '#/definitions/Asset'
        """
        project = projects_service.get_project(project_id)
        project_access_service.check_viewer_access(
            project["id"], persons_service.get_current_user_context()
        )
        return assets_service.get_assets_for_project(project["id"])

    @jwt_required()
    def post(self, project_id):
        """
        Create project asset
        ---
        tags:
        - Assets
        description: Create an asset in a project. Requires contributor
          access on the project. Assets are text documents unless another
          type is given.
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
                    example: SCRIPT_EP01
                  name:
                    type: string
                    example: Episode 1 script
                  asset_type:
                    type: string
                    example: director_script
        responses:
            201:
                description: Asset created
            409:
                description: Code already used
        """
        project = projects_service.get_project(project_id)
        user_context = persons_service.get_current_user_context()
        project_access_service.check_contributor_access(
            project["id"], user_context
        )
        data = validate_request_body(AssetCreateSchema)
        return (
            assets_service.create_asset(
                project["id"],
                created_by=user_context.user_id,
                **data.model_dump()
            ),
            201,
        )


class AssetsResource(Resource, ArgsMixin):
    @jwt_required()
    def get(self):
        """
        Get assets
        ---
        tags:
        - Assets
        description: Get assets of the projects the current user has access
          to, with optional filters and pagination.
        parameters:
          - in: query
            name: project_id
            required: False
            type: string
            format: uuid
          - in: query
            name: asset_type
            required: False
            type: string
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
                description: Assets the user can access
        """
        return assets_service.get_assets(
            persons_service.get_current_user_context(),
            project_id=self.get_project_id(),
            asset_type=self.get_text_parameter("asset_type"),
            status_id=self.get_id_parameter("status_id"),
            created_by=self.get_id_parameter("created_by"),
            assigned_to=self.get_id_parameter("assigned_to"),
            search=self.get_text_parameter("search"),
            page=self.get_page(),
            limit=self.get_limit(),
        )


class AssetResource(Resource, ArgsMixin):
    @jwt_required()
    def get(self, asset_id):
        """
        Get asset
        ---
        tags:
        - Assets
        description: Get an asset. Requires viewer access on its project.
        parameters:
          - in: path
            name: asset_id
            required: True
            type: string
            format: uuid
            example: a24a6ea4-ce75-4665-a070-57453082c25
        responses:
            200:
                description: Asset found and returned
            404:
                description: Asset not found
        """
        asset = assets_service.get_asset(asset_id)
        project_access_service.check_viewer_access(
            asset["project_id"], persons_service.get_current_user_context()
        )
        return asset

    @jwt_required()
    def put(self, asset_id):
        """
        Update asset
        ---
        tags:
        - Assets
        description: Update an asset. Requires contributor access on its
          project, and on the target project when the asset is moved.
        parameters:
          - in: path
            name: asset_id
            required: True
            type: string
            format: uuid
            example: a24a6ea4-ce75-4665-a070-57453082c25
        responses:
            200:
                description: Asset updated
            409:
                description: Code already used
        """
        asset = assets_service.get_asset(asset_id)
        user_context = persons_service.get_current_user_context()
        project_access_service.check_contributor_access(
            asset["project_id"], user_context
        )
        data = get_update_data(AssetUpdateSchema)
        if data.get("project_id") is not None and str(
            data["project_id"]
        ) != str(asset["project_id"]):
            project = projects_service.get_project(data["project_id"])
            project_access_service.check_contributor_access(
                project["id"], user_context
            )
        return assets_service.update_asset(asset["id"], data)

    @jwt_required()
    def delete(self, asset_id):
        """
        Delete asset
        ---
        tags:
        - Assets
        description: Delete an asset with its versions and notes. Requires
          contributor access on its project.
        parameters:
          - in: path
            name: asset_id
            required: True
            type: string
            format: uuid
            example: a24a6ea4-ce75-4665-a070-57453082c25
        responses:
            204:
                description: Asset deleted
        """
        asset = assets_service.get_asset(asset_id)
        project_access_service.check_contributor_access(
            asset["project_id"], persons_service.get_current_user_context()
        )
        assets_service.remove_asset(asset["id"])
        return "", 204
