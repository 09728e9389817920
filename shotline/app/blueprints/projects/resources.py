from flask_restful import Resource
from flask_jwt_extended import jwt_required

from shotline.app.blueprints.projects.schemas import (
    PermissionCreateSchema,
    PermissionUpdateSchema,
    ProjectCreateSchema,
    ProjectUpdateSchema,
)
from shotline.app.mixin import ArgsMixin
from shotline.app.services import (
    persons_service,
    project_access_service,
    project_permissions_service,
    projects_service,
)
from shotline.app.utils.validation import (
    get_update_data,
    validate_request_body,
)


class ProjectsResource(Resource, ArgsMixin):

    @jwt_required()
    def get(self):
        """
        Get projects
        ---
        tags:
        - Projects
        description: Get projects the current user has access to. Admins get
          all projects. Results can be filtered and paginated.
        parameters:
          - in: query
            name: status_id
            required: False
            type: string
            format: uuid
          - in: query
            name: client_name
            required: False
            type: string
            example: Studio Ghibli
          - in: query
            name: created_by
            required: False
            type: string
            format: uuid
          - in: query
            name: search
            required: False
            type: string
            example: PRJ
          - in: query
            name: page
            required: False
            type: integer
            example: 1
          - in: query
            name: limit
            required: False
            type: integer
            example: 20
        responses:
            200:
                description: Projects the user can access
                content:
                  application/json:
                    schema:
                      type: array
                      items:
                        $ref: '#/definitions/Project'
        """
        return projects_service.get_projects(
            persons_service.get_current_user_context(),
            status_id=self.get_id_parameter("status_id"),
            client_name=self.get_text_parameter("client_name"),
            created_by=self.get_id_parameter("created_by"),
            search=self.get_text_parameter("search"),
            page=self.get_page(),
            limit=self.get_limit(),
        )

    @jwt_required()
    def post(self):
        """
        Create project
        ---
        tags:
        - Projects
        description: Create a project. Its creator becomes its owner.
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
                    example: PROJ_1
                  name:
                    type: string
                    example: My Project
                  description:
                    type: string
                  client_name:
                    type: string
                  start_date:
                    type: string
                    format: date
                    example: "2024-01-15"
                  end_date:
                    type: string
                    format: date
                    example: "2024-12-15"
                  status:
                    type: string
                    example: wip
        responses:
            201:
                description: Project created
            409:
                description: Code already used
        """
        data = validate_request_body(ProjectCreateSchema)
        user_context = persons_service.get_current_user_context()
        return (
            projects_service.create_project(
                created_by=user_context.user_id, **data.model_dump()
            ),
            201,
        )


class ProjectResource(Resource):

    @jwt_required()
    def get(self, project_id):
        """
        Get project
        ---
        tags:
        - Projects
        description: Get a project. Requires viewer access on the project.
        parameters:
          - in: path
            name: project_id
            required: True
            type: string
            format: uuid
            example: a24a6ea4-ce75-4665-a070-57453082c25
        responses:
            200:
                description: Project found and returned
            403:
                description: No access to this project
            404:
                description: Project not found
        """
        project = projects_service.get_project(project_id)
        project_access_service.check_viewer_access(
            project["id"], persons_service.get_current_user_context()
        )
        return project

    @jwt_required()
    def put(self, project_id):
        """
        Update project
        ---
        tags:
        - Projects
        description: Update a project. Requires contributor access on the
          project.
        parameters:
          - in: path
            name: project_id
            required: True
            type: string
            format: uuid
            example: a24a6ea4-ce75-4665-a070-57453082c25
        responses:
            200:
                description: Project updated
            403:
                description: No contributor access to this project
        """
        project = projects_service.get_project(project_id)
        project_access_service.check_contributor_access(
            project["id"], persons_service.get_current_user_context()
        )
        data = get_update_data(ProjectUpdateSchema)
        return projects_service.update_project(project["id"], data)

    @jwt_required()
    def delete(self, project_id):
        """
        Delete project
        ---
        tags:
        - Projects
        description: Delete a project with its episodes, sequences and
          permissions. Requires owner access on the project.
        parameters:
          - in: path
            name: project_id
            required: True
            type: string
            format: uuid
            example: a24a6ea4-ce75-4665-a070-57453082c25
        responses:
            204:
                description: Project deleted
            403:
                description: No owner access to this project
        """
        project = projects_service.get_project(project_id)
        project_access_service.check_owner_access(
            project["id"], persons_service.get_current_user_context()
        )
        projects_service.remove_project(project["id"])
        return "", 204


class ProjectPermissionsResource(Resource):

    @jwt_required()
    def get(self, project_id):
        """
        Get project permissions
        ---
        tags:
        - Permissions
        description: Get all permissions of a project, oldest first. Requires
          owner access on the project.
        parameters:
          - in: path
            name: project_id
            required: True
            type: string
            format: uuid
            example: a24a6ea4-ce75-4665-a070-57453082c25
        responses:
            200:
                description: Permissions of the project
                content:
                  application/json:
                    schema:
                      type: array
                      items:
                        $ref: '#/definitions/ProjectPermission'
        """
        project = projects_service.get_project(project_id)
        project_access_service.check_owner_access(
            project["id"], persons_service.get_current_user_context()
        )
        return project_permissions_service.get_permissions_for_project(
            project["id"]
        )

    @jwt_required()
    def post(self, project_id):
        """
        Grant project permission
        ---
        tags:
        - Permissions
        description: Give a person access to a project. Requires owner access
          on the project.
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
                  - person_id
                properties:
                  person_id:
                    type: string
                    format: uuid
                  role:
                    type: string
                    enum: [viewer, contributor, owner]
                    example: viewer
        responses:
            201:
                description: Permission created
            404:
                description: Person not found
            409:
                description: Person already has a permission on this project
        """
        project = projects_service.get_project(project_id)
        project_access_service.check_owner_access(
            project["id"], persons_service.get_current_user_context()
        )
        data = validate_request_body(PermissionCreateSchema)
        return (
            project_permissions_service.grant_permission(
                project["id"], data.person_id, data.role
            ),
            201,
        )


class MyProjectPermissionsResource(Resource):

    @jwt_required()
    def get(self, project_id):
        """
        Get current user permissions
        ---
        tags:
        - Permissions
        description: Get all project permissions of the current user, newest
          first. Each permission embeds the code and name of its project.
        parameters:
          - in: path
            name: project_id
            required: True
            type: string
            format: uuid
            example: a24a6ea4-ce75-4665-a070-57453082c25
        responses:
            200:
                description: Permissions of the current user
        """
        user_context = persons_service.get_current_user_context()
        return project_permissions_service.get_permissions_for_person(
            user_context.user_id
        )


class ProjectPermissionResource(Resource):

    @jwt_required()
    def get(self, project_id, person_id):
        """
        Get project permission
        ---
        tags:
        - Permissions
        description: Get the permission of a person on a project. Requires
          owner access on the project, except for the user's own permission.
        parameters:
          - in: path
            name: project_id
            required: True
            type: string
            format: uuid
            example: a24a6ea4-ce75-4665-a070-57453082c25
          - in: path
            name: person_id
            required: True
            type: string
            format: uuid
            example: b24a6ea4-ce75-4665-a070-57453082c25
        responses:
            200:
                description: Permission found and returned
            404:
                description: Permission not found
        """
        project = projects_service.get_project(project_id)
        user_context = persons_service.get_current_user_context()
        if str(user_context.user_id) != person_id:
            project_access_service.check_owner_access(
                project["id"], user_context
            )
        return project_permissions_service.get_permission(
            project["id"], person_id
        )

    @jwt_required()
    def patch(self, project_id, person_id):
        """
        Change project role
        ---
        tags:
        - Permissions
        description: Change the role of a person on a project. Requires owner
          access on the project. The last owner of a project can't be
          downgraded.
        parameters:
          - in: path
            name: project_id
            required: True
            type: string
            format: uuid
            example: a24a6ea4-ce75-4665-a070-57453082c25
          - in: path
            name: person_id
            required: True
            type: string
            format: uuid
            example: b24a6ea4-ce75-4665-a070-57453082c25
        requestBody:
          required: true
          content:
            application/json:
              schema:
                type: object
                required:
                  - role
                properties:
                  role:
                    type: string
                    enum: [viewer, contributor, owner]
                    example: contributor
        responses:
            200:
                description: Permission updated
            403:
                description: Last owner can't be downgraded
            404:
                description: Permission not found
        """
        project = projects_service.get_project(project_id)
        project_access_service.check_owner_access(
            project["id"], persons_service.get_current_user_context()
        )
        data = validate_request_body(PermissionUpdateSchema)
        return project_permissions_service.change_role(
            project["id"], person_id, data.role
        )

    @jwt_required()
    def put(self, project_id, person_id):
        """
        Change project role
        ---
        tags:
        - Permissions
        description: Same as PATCH.
        parameters:
          - in: path
            name: project_id
            required: True
            type: string
            format: uuid
          - in: path
            name: person_id
            required: True
            type: string
            format: uuid
        responses:
            200:
                description: Permission updated
        """
        return self.patch(project_id, person_id)

    @jwt_required()
    def delete(self, project_id, person_id):
        """
        Revoke project permission
        ---
        tags:
        - Permissions
        description: Remove the access of a person to a project. Requires
          owner access on the project. The last owner of a project can't be
          removed.
        parameters:
          - in: path
            name: project_id
            required: True
            type: string
            format: uuid
            example: a24a6ea4-ce75-4665-a070-57453082c25
          - in: path
            name: person_id
            required: True
            type: string
            format: uuid
            example: b24a6ea4-ce75-4665-a070-57453082c25
        responses:
            204:
                description: Permission removed
            403:
                description: Last owner can't be removed
            404:
                description: Permission not found
        """
        project = projects_service.get_project(project_id)
        project_access_service.check_owner_access(
            project["id"], persons_service.get_current_user_context()
        )
        project_permissions_service.revoke_permission(project["id"], person_id)
        return "", 204
