from flask_restful import Resource
from flask_jwt_extended import jwt_required

from shotline.app.blueprints.versions.schemas import (
    VersionCreateSchema,
    VersionUpdateSchema,
)
from shotline.app.mixin import ArgsMixin
from shotline.app.services import (
    persons_service,
    project_access_service,
    versions_service,
)
from shotline.app.utils import permissions
from shotline.app.utils.validation import (
    get_update_data,
    validate_request_body,
)


class VersionsResource(Resource, ArgsMixin):
    @jwt_required()
    def get(self):
        """
        Get versions
        ---
        tags:
        - Versions
        description: Get versions made for entities of the projects the
          current user has access to, with optional filters and pagination.
        parameters:
          - in: query
            name: entity_id
            required: False
            type: string
            format: uuid
          - in: query
            name: entity_type
            required: False
            type: string
            example: shot
          - in: query
            name: latest
            required: False
            type: boolean
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
                description: Versions the user can access
        """
        latest = self.get_text_parameter("latest")
        if latest is not None:
            latest = latest.lower() == "true"
        return versions_service.get_versions(
            persons_service.get_current_user_context(),
            entity_id=self.get_id_parameter("entity_id"),
            entity_type=self.get_text_parameter("entity_type"),
            latest=latest,
            status_id=self.get_id_parameter("status_id"),
            created_by=self.get_id_parameter("created_by"),
            search=self.get_text_parameter("search"),
            page=self.get_page(),
            limit=self.get_limit(),
        )

    @jwt_required()
    def post(self):
        """
        Create version
        ---
        tags:
        - Versions
        description: Create a version of an entity. It takes the next version
          number of the entity and becomes its latest version unless latest
          is set to false. Requires contributor access on the project of the
          entity.
        requestBody:
          required: true
          content:
            application/json:
              schema:
                type: object
                required:
                  - entity_type
                  - entity_id
                  - code
                  - name
                properties:
                  entity_type:
                    type: string
                    example: shot
                  entity_id:
                    type: string
                    format: uuid
                  code:
                    type: string
                    example: EP01_SQ01_SH010_V001
                  name:
                    type: string
                    example: First animation pass
                  latest:
                    type: boolean
                    example: true
        responses:
            201:
                description: Version created
            404:
                description: Entity not found
            409:
                description: Code already used
        """
        data = validate_request_body(VersionCreateSchema).model_dump()
        user_context = persons_service.get_current_user_context()
        project_access_service.verify_entity_access(
            data["entity_type"],
            data["entity_id"],
            user_context,
            permissions.CONTRIBUTOR,
        )
        return (
            versions_service.create_version(
                created_by=user_context.user_id, **data
            ),
            201,
        )


class VersionResource(Resource, ArgsMixin):
    @jwt_required()
    def get(self, version_id):
        """
        Get version
        ---
        tags:
        - Versions
        description: Get a version with the notes left on it. Requires viewer
          access on the project of its entity.
        parameters:
          - in: path
            name: version_id
            required: True
            type: string
            format: uuid
            example: a24a6ea4-ce75-4665-a070-57453082c25
        responses:
            200:
                description: Version found and returned
            404:
                description: Version not found
        """
        version = versions_service.get_full_version(version_id)
        project_access_service.verify_entity_access(
            "version",
            version["id"],
            persons_service.get_current_user_context(),
        )
        return version

    @jwt_required()
    def put(self, version_id):
        """
        Update version
        ---
        tags:
        - Versions
        description: Update a version. Setting latest to true removes the flag
          from the other versions of the entity. Requires contributor access
          on the project of its entity.
        parameters:
          - in: path
            name: version_id
            required: True
            type: string
            format: uuid
            example: a24a6ea4-ce75-4665-a070-57453082c25
        responses:
            200:
                description: Version updated
            409:
                description: Code already used
        """
        version = versions_service.get_version(version_id)
        project_access_service.verify_entity_access(
            "version",
            version["id"],
            persons_service.get_current_user_context(),
            permissions.CONTRIBUTOR,
        )
        data = get_update_data(VersionUpdateSchema)
        return versions_service.update_version(version["id"], data)

    @jwt_required()
    def delete(self, version_id):
        """
        Delete version
        ---
        tags:
        - Versions
        description: Delete a version with its notes. When it was the latest
          version of its entity, the most recent remaining one becomes the
          latest. Requires contributor access on the project of its entity.
        parameters:
          - in: path
            name: version_id
            required: True
            type: string
            format: uuid
            example: a24a6ea4-ce75-4665-a070-57453082c25
        responses:
            204:
                description: Version deleted
        """
        version = versions_service.get_version(version_id)
        project_access_service.verify_entity_access(
            "version",
            version["id"],
            persons_service.get_current_user_context(),
            permissions.CONTRIBUTOR,
        )
        versions_service.remove_version(version["id"])
        return "", 204
