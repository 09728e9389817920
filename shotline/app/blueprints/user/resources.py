from flask_restful import Resource
from flask_jwt_extended import jwt_required

from shotline.app.services import (
    persons_service,
    project_access_service,
    project_permissions_service,
    projects_service,
)


class ProjectPermissionsResource(Resource):
    @jwt_required()
    def get(self):
        """
        Get current user project permissions
        ---
        description: Retrieve the permissions of the current user on every
          project, newest first. Each permission embeds the code and name of
          its project.
        tags:
        - User
        responses:
            200:
              description: Project permissions of the current user
              content:
                application/json:
                  schema:
                    type: array
                    items:
                      $ref: '#/definitions/ProjectPermission'
        """
        user_context = persons_service.get_current_user_context()
        return project_permissions_service.get_permissions_for_person(
            user_context.user_id
        )


class ProjectRoleResource(Resource):
    @jwt_required()
    def get(self, project_id):
        """
        Get current user role on project
        ---
        description: Retrieve the role of the current user on given project.
          Role is null when the user has no permission on the project, whether
          the project exists or not. Admins are flagged as such because they
          can access every project.
        tags:
        - User
        parameters:
          - in: path
            name: project_id
            required: True
            type: string
            format: uuid
            example: a24a6ea4-ce75-4665-a070-57453082c25
        responses:
            200:
              description: Role of the current user
              content:
                application/json:
                  schema:
                    type: object
                    properties:
                      project_id:
                        type: string
                        format: uuid
                      role:
                        type: string
                        example: contributor
                      is_admin:
                        type: boolean
                        example: false
        """
        user_context = persons_service.get_current_user_context()
        if project_access_service.is_admin(user_context):
            project_id = projects_service.get_project(project_id)["id"]
        return {
            "project_id": project_id,
            "role": project_access_service.get_user_role(
                project_id, user_context
            ),
            "is_admin": project_access_service.is_admin(user_context),
        }
