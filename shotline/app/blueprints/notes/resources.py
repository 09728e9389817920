from flask_restful import Resource
from flask_jwt_extended import jwt_required

from shotline.app.blueprints.notes.schemas import (
    NoteCreateSchema,
    NoteUpdateSchema,
)
from shotline.app.mixin import ArgsMixin
from shotline.app.services import (
    notes_service,
    persons_service,
    project_access_service,
)
from shotline.app.services.exception import LinkedEntityNotFoundException
from shotline.app.utils import permissions
from shotline.app.utils.validation import (
    get_update_data,
    validate_request_body,
)


def check_note_access(note, min_role):
    if note["project_id"] is None:
        raise LinkedEntityNotFoundException()
    project_access_service.verify_access(
        note["project_id"],
        persons_service.get_current_user_context(),
        min_role,
    )


class NotesResource(Resource, ArgsMixin):
    @jwt_required()
    def get(self):
        """
        Get notes
        ---
        tags:
        - Notes
        description: Get notes left on entities of the projects the current
          user has access to, with optional filters and pagination.
        parameters:
          - in: query
            name: link_id
            required: False
            type: string
            format: uuid
          - in: query
            name: link_type
            required: False
            type: string
            example: shot
          - in: query
            name: is_read
            required: False
            type: boolean
          - in: query
            name: assigned_to
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
                description: Notes the user can access
        """
        is_read = self.get_text_parameter("is_read")
        if is_read is not None:
            is_read = is_read.lower() == "true"
        return notes_service.get_notes(
            persons_service.get_current_user_context(),
            link_id=self.get_id_parameter("link_id"),
            link_type=self.get_text_parameter("link_type"),
            is_read=is_read,
            created_by=self.get_id_parameter("created_by"),
            assigned_to=self.get_id_parameter("assigned_to"),
            search=self.get_text_parameter("search"),
            page=self.get_page(),
            limit=self.get_limit(),
        )

    @jwt_required()
    def post(self):
        """
        Create note
        ---
        tags:
        - Notes
        description: Leave a note on an entity. Requires contributor access
          on the project of the entity.
        requestBody:
          required: true
          content:
            application/json:
              schema:
                type: object
                required:
                  - link_type
                  - link_id
                  - subject
                  - content
                properties:
                  link_type:
                    type: string
                    example: version
                  link_id:
                    type: string
                    format: uuid
                  subject:
                    type: string
                    example: Timing
                  content:
                    type: string
                    example: Hold the last pose four more frames.
        responses:
            201:
                description: Note created
            404:
                description: Linked entity not found
        """
        data = validate_request_body(NoteCreateSchema).model_dump()
        user_context = persons_service.get_current_user_context()
        project_access_service.verify_entity_access(
            data["link_type"],
            data["link_id"],
            user_context,
            permissions.CONTRIBUTOR,
        )
        return (
            notes_service.create_note(created_by=user_context.user_id, **data),
            201,
        )


class NoteResource(Resource, ArgsMixin):
    @jwt_required()
    def get(self, note_id):
        """
        Get note
        ---
        tags:
        - Notes
        description: Get a note. Requires viewer access on the project of the
          linked entity.
        parameters:
          - in: path
            name: note_id
            required: True
            type: string
            format: uuid
            example: a24a6ea4-ce75-4665-a070-57453082c25
        responses:
            200:
                description: Note found and returned
            404:
                description: Note not found
        """
        note = notes_service.get_note(note_id)
        check_note_access(note, permissions.VIEWER)
        return note

    @jwt_required()
    def put(self, note_id):
        """
        Update note
        ---
        tags:
        - Notes
        description: Update a note, for instance to mark it as read. Requires
          contributor access on the project of the linked entity.
        parameters:
          - in: path
            name: note_id
            required: True
            type: string
            format: uuid
            example: a24a6ea4-ce75-4665-a070-57453082c25
        responses:
            200:
                description: Note updated
        """
        note = notes_service.get_note(note_id)
        check_note_access(note, permissions.CONTRIBUTOR)
        data = get_update_data(NoteUpdateSchema)
        return notes_service.update_note(note["id"], data)

    @jwt_required()
    def delete(self, note_id):
        """
        Delete note
        ---
        tags:
        - Notes
        description: Delete a note. Requires contributor access on the project
          of the linked entity.
        parameters:
          - in: path
            name: note_id
            required: True
            type: string
            format: uuid
            example: a24a6ea4-ce75-4665-a070-57453082c25
        responses:
            204:
                description: Note deleted
        """
        note = notes_service.get_note(note_id)
        check_note_access(note, permissions.CONTRIBUTOR)
        notes_service.remove_note(note["id"])
        return "", 204
