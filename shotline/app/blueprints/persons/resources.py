from flask_restful import Resource
from flask_jwt_extended import jwt_required

from shotline.app.mixin import ArgsMixin
from shotline.app.blueprints.persons.schemas import (
    PersonCreateSchema,
    PersonUpdateSchema,
)
from shotline.app.services import persons_service
from shotline.app.services.exception import WrongParameterException
from shotline.app.utils import auth, permissions
from shotline.app.utils.validation import (
    get_update_data,
    validate_request_body,
)


class PersonsResource(Resource, ArgsMixin):

    @jwt_required()
    def get(self):
        """
        Get persons
        ---
        tags:
          - Persons
        description: Return all persons of the studio, without their
          password. Use minimal=true to get only names and roles.
        parameters:
          - in: query
            name: minimal
            required: False
            type: boolean
            example: false
        responses:
            200:
                description: All persons
        """
        return persons_service.get_persons(
            minimal=self.get_bool_parameter("minimal")
        )

    @jwt_required()
    def post(self):
        """
        Create person
        ---
        tags:
          - Persons
        description: Create a new person. Only admins can create persons.
        requestBody:
          required: true
          content:
            application/json:
              schema:
                type: object
                required:
                  - email
                  - password
                  - first_name
                  - last_name
                properties:
                  email:
                    type: string
                    example: john.doe@example.com
                  password:
                    type: string
                    example: mysecretpassword
                  first_name:
                    type: string
                    example: John
                  last_name:
                    type: string
                    example: Doe
                  role:
                    type: string
                    enum: [admin, member]
                    example: member
        responses:
            201:
                description: Person created
            400:
                description: Invalid data
            403:
                description: Not an admin
        """
        permissions.check_admin_permissions(
            persons_service.get_current_user_context()
        )
        data = validate_request_body(PersonCreateSchema)
        try:
            auth.validate_password(data.password)
        except auth.PasswordTooShortException:
            raise WrongParameterException("Password is too short.")
        return (
            persons_service.create_person(
                data.email,
                auth.encrypt_password(data.password),
                data.first_name,
                data.last_name,
                role=data.role,
                active=data.active,
            ),
            201,
        )


class PersonResource(Resource, ArgsMixin):

    @jwt_required()
    def get(self, person_id):
        """
        Get person
        ---
        tags:
          - Persons
        parameters:
          - in: path
            name: person_id
            required: True
            type: string
            format: uuid
            example: a24a6ea4-ce75-4665-a070-57453082c25
        responses:
            200:
                description: Person found and returned
            404:
                description: Person not found
        """
        return persons_service.get_person(person_id)

    @jwt_required()
    def put(self, person_id):
        """
        Update person
        ---
        tags:
          - Persons
        description: Update a person. Only admins can update persons.
        parameters:
          - in: path
            name: person_id
            required: True
            type: string
            format: uuid
            example: a24a6ea4-ce75-4665-a070-57453082c25
        responses:
            200:
                description: Person updated
            403:
                description: Not an admin
        """
        user_context = persons_service.get_current_user_context()
        permissions.check_admin_permissions(user_context)
        data = get_update_data(PersonUpdateSchema, keep_none=False)
        persons_service.get_person_raw(person_id)
        return persons_service.update_person(person_id, data)

    @jwt_required()
    def delete(self, person_id):
        """
        Delete person
        ---
        tags:
          - Persons
        description: Delete a person and its project permissions. Only admins
          can delete persons. An admin can't delete himself.
        parameters:
          - in: path
            name: person_id
            required: True
            type: string
            format: uuid
            example: a24a6ea4-ce75-4665-a070-57453082c25
        responses:
            204:
                description: Person deleted
            403:
                description: Not an admin
        """
        user_context = persons_service.get_current_user_context()
        permissions.check_admin_permissions(user_context)
        if str(user_context.user_id) == str(person_id):
            raise WrongParameterException("You can't delete yourself.")
        persons_service.delete_person(person_id)
        return "", 204
