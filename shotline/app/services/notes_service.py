"""
Notes left on project entities. A note is linked to its entity through a
link type and a link id, access to a note is the access to the project of
the linked entity.
"""
import logging

from sqlalchemy.exc import StatementError

from shotline.app.models.note import Note, LINK_TYPES
from shotline.app.services import project_access_service, projects_service
from shotline.app.services.exception import (
    LinkedEntityNotFoundException,
    NoteNotFoundException,
    WrongParameterException,
)
from shotline.app.utils import events, fields, query as query_utils

logger = logging.getLogger(__name__)

LINK_TYPE_CODES = [code for (code, _) in LINK_TYPES]


def get_note_raw(note_id):
    try:
        note = Note.get(note_id)
    except StatementError:
        raise NoteNotFoundException()

    if note is None:
        raise NoteNotFoundException()
    return note


def get_note(note_id):
    """
    Return given note as a dictionary with the id of the project of its
    linked entity.
    """
    note = get_note_raw(note_id)
    note_dict = note.serialize()
    note_dict["project_id"] = fields.serialize_value(get_project_id(note))
    return note_dict


def get_project_id(note):
    return project_access_service.get_project_id_for_entity(
        fields.serialize_value(note.link_type), note.link_id
    )


def check_link_type(link_type):
    if link_type not in LINK_TYPE_CODES:
        raise WrongParameterException(
            f"Notes can't be linked to entities of type {link_type}."
        )


def get_notes(
    user_context,
    link_id=None,
    link_type=None,
    is_read=None,
    created_by=None,
    assigned_to=None,
    search=None,
    page=None,
    limit=None,
):
    """
    Return notes linked to entities of the projects the user can access.
    Results can be filtered and paginated.
    """
    query = Note.query
    if not project_access_service.is_admin(user_context):
        project_ids = project_access_service.get_accessible_project_ids(
            user_context
        )
        if len(project_ids) == 0:
            return (
                []
                if page is None or page < 1
                else projects_service.empty_page(page, limit)
            )
        query = query.filter(
            project_access_service.get_linked_entities_filter(
                Note.link_type, Note.link_id, LINK_TYPE_CODES, project_ids
            )
        )

    if link_id is not None:
        query = query.filter(Note.link_id == link_id)
    if link_type is not None:
        check_link_type(link_type)
        query = query.filter(Note.link_type == link_type)
    if is_read is not None:
        query = query.filter(Note.is_read == is_read)
    if created_by is not None:
        query = query.filter(Note.created_by == created_by)
    if assigned_to is not None:
        query = query.filter(Note.assigned_to == assigned_to)
    query = query_utils.apply_text_search(
        query, search, Note.subject, Note.content
    )
    query = query.order_by(Note.created_at.desc())
    return query_utils.get_paginated_results(query, page, limit)


def get_notes_for_entity(link_type, link_id):
    check_link_type(link_type)
    notes = (
        Note.query.filter(Note.link_type == link_type, Note.link_id == link_id)
        .order_by(Note.created_at)
        .all()
    )
    return fields.serialize_models(notes)


def create_note(
    link_type,
    link_id,
    subject,
    content,
    created_by=None,
    is_read=False,
    attachments=None,
    assigned_to=None,
):
    """
    Create a note on given entity. The entity must exist.
    """
    check_link_type(link_type)
    project_id = project_access_service.get_project_id_for_entity(
        link_type, link_id
    )
    if project_id is None:
        raise LinkedEntityNotFoundException(
            f"{link_type.capitalize()} {link_id} does not exist."
        )

    note = Note.create(
        link_type=link_type,
        link_id=link_id,
        subject=subject,
        content=content,
        is_read=bool(is_read),
        attachments=attachments or [],
        created_by=created_by,
        assigned_to=assigned_to,
    )
    note_dict = note.serialize()
    events.emit(
        "note:new",
        {
            "note_id": note_dict["id"],
            "link_id": note_dict["link_id"],
            "link_type": link_type,
            "assigned_to": note_dict["assigned_to"],
        },
        project_id=project_id,
    )
    return note_dict


def update_note(note_id, data):
    """
    Update note with given data. A note can't be moved to another entity.
    """
    note = get_note_raw(note_id)
    data.pop("link_id", None)
    data.pop("link_type", None)
    if "attachments" in data and data["attachments"] is None:
        data["attachments"] = []
    note.update(data)
    events.emit(
        "note:update",
        {"note_id": str(note.id)},
        project_id=get_project_id(note),
    )
    return note.serialize()


def remove_note(note_id):
    note = get_note_raw(note_id)
    project_id = get_project_id(note)
    note_dict = note.serialize()
    note.delete()
    events.emit(
        "note:delete", {"note_id": note_dict["id"]}, project_id=project_id
    )
    return note_dict
