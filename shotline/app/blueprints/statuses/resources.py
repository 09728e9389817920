from flask_restful import Resource
from flask_jwt_extended import jwt_required

from shotline.app.blueprints.statuses.schemas import (
    StatusCreateSchema,
    StatusUpdateSchema,
)
from shotline.app.services import persons_service, statuses_service
from shotline.app.utils import permissions
from shotline.app.utils.validation import (
    get_update_data,
    validate_request_body,
)


class StatusesResource(Resource):

    @jwt_required()
    def get(self):
        """
        Get statuses
        ---
        tags:
          - Statuses
        description: Return all statuses available for projects, episodes and
          sequences, ordered by sort order.
        responses:
            200:
                description: All statuses
        """
        return statuses_service.get_statuses()

    @jwt_required()
    def post(self):
        """
        Create status
        ---
        tags:
          - Statuses
        description: Create a status. Only admins can create statuses.
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
                    example: wip
                  name:
                    type: string
                    example: Work In Progress
                  color:
                    type: string
                    example: "#3273dc"
        responses:
            201:
                description: Status created
            409:
                description: Code already used
        """
        permissions.check_admin_permissions(
            persons_service.get_current_user_context()
        )
        data = validate_request_body(StatusCreateSchema)
        return statuses_service.create_status(**data.model_dump()), 201


class StatusResource(Resource):

    @jwt_required()
    def get(self, status_id):
        """
        Get status
        ---
        tags:
          - Statuses
        parameters:
          - in: path
            name: status_id
            required: True
            type: string
            format: uuid
            example: a24a6ea4-ce75-4665-a070-57453082c25
        responses:
            200:
                description: Status found and returned
        """
        return statuses_service.get_status(status_id)

    @jwt_required()
    def put(self, status_id):
        """
        Update status
        ---
        tags:
          - Statuses
        description: Update a status. Only admins can update statuses.
        parameters:
          - in: path
            name: status_id
            required: True
            type: string
            format: uuid
            example: a24a6ea4-ce75-4665-a070-57453082c25
        responses:
            200:
                description: Status updated
        """
        permissions.check_admin_permissions(
            persons_service.get_current_user_context()
        )
        data = get_update_data(StatusUpdateSchema, keep_none=False)
        return statuses_service.update_status(status_id, data)

    @jwt_required()
    def delete(self, status_id):
        """
        Delete status
        ---
        tags:
          - Statuses
        description: Delete a status. A status still in use can't be deleted.
        parameters:
          - in: path
            name: status_id
            required: True
            type: string
            format: uuid
            example: a24a6ea4-ce75-4665-a070-57453082c25
        responses:
            204:
                description: Status deleted
            400:
                description: Status still in use
        """
        permissions.check_admin_permissions(
            persons_service.get_current_user_context()
        )
        statuses_service.delete_status(status_id)
        return "", 204
