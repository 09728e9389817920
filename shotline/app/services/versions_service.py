"""
Versions of the entities of a project. Versions of an entity are numbered
from 1 and at most one of them is flagged as the latest one. Deleting the
latest version gives the flag to the most recent remaining version.
"""
import logging

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError, StatementError

from shotline.app import db
from shotline.app.models.note import Note
from shotline.app.models.status import Status
from shotline.app.models.version import Version, VERSION_ENTITY_TYPES
from shotline.app.services import (
    deletion_service,
    project_access_service,
    projects_service,
    statuses_service,
)
from shotline.app.services.exception import (
    EntryAlreadyExistsException,
    LinkedEntityNotFoundException,
    VersionNotFoundException,
    WrongParameterException,
)
from shotline.app.utils import (
    date_helpers,
    events,
    fields,
    query as query_utils,
)

logger = logging.getLogger(__name__)

ENTITY_TYPES = [code for (code, _) in VERSION_ENTITY_TYPES]
DEFAULT_STATUS_CODE = "wip"


def get_version_raw(version_id):
    """
    Return given version as an active record.
    """
    try:
        version = Version.get(version_id)
    except StatementError:
        raise VersionNotFoundException()

    if version is None:
        raise VersionNotFoundException()
    return version


def get_version(version_id):
    return get_version_raw(version_id).serialize()


def get_version_by_code(code):
    version = Version.get_by(code=code)
    if version is None:
        raise VersionNotFoundException(f"Version {code} does not exist.")
    return version.serialize()


def get_project_id(version):
    return project_access_service.get_project_id_for_entity(
        fields.serialize_value(version.entity_type), version.entity_id
    )


def get_full_version(version_id):
    """
    Return given version as a dictionary with the id of its project and the
    notes left on it.
    """
    version = get_version_raw(version_id)
    version_dict = version.serialize()
    project_id = get_project_id(version)
    version_dict["project_id"] = fields.serialize_value(project_id)
    notes = (
        Note.query.filter(
            Note.link_type == "version", Note.link_id == version.id
        )
        .order_by(Note.created_at)
        .all()
    )
    version_dict["notes"] = fields.serialize_models(notes)
    return version_dict


def get_versions(
    user_context,
    entity_id=None,
    entity_type=None,
    latest=None,
    status_id=None,
    created_by=None,
    search=None,
    page=None,
    limit=None,
):
    """
    Return versions made for entities of the projects the user can access.
    Results can be filtered and paginated.
    """
    query = Version.query
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
                Version.entity_type,
                Version.entity_id,
                ENTITY_TYPES,
                project_ids,
            )
        )

    if entity_id is not None:
        query = query.filter(Version.entity_id == entity_id)
    if entity_type is not None:
        check_entity_type(entity_type)
        query = query.filter(Version.entity_type == entity_type)
    if latest is not None:
        query = query.filter(Version.latest == latest)
    if status_id is not None:
        query = query.filter(Version.status_id == status_id)
    if created_by is not None:
        query = query.filter(Version.created_by == created_by)
    query = query_utils.apply_text_search(
        query, search, Version.name, Version.code
    )
    query = query.order_by(Version.created_at.desc())
    return query_utils.get_paginated_results(query, page, limit)


def get_versions_for_entity(entity_type, entity_id):
    """
    Return all versions of given entity, most recent number first.
    """
    versions = (
        Version.query.filter(
            Version.entity_type == entity_type,
            Version.entity_id == entity_id,
        )
        .order_by(Version.version_number.desc())
        .all()
    )
    return fields.serialize_models(versions)


def check_entity_type(entity_type):
    if entity_type not in ENTITY_TYPES:
        raise WrongParameterException(
            f"Versions can't be made for entities of type {entity_type}."
        )


def check_code_is_available(code, version_id=None):
    version = Version.get_by(code=code)
    if version is not None and str(version.id) != str(version_id):
        raise EntryAlreadyExistsException(
            f"A version with code {code} already exists."
        )


def get_next_version_number(entity_type, entity_id):
    max_number = (
        db.session.query(func.max(Version.version_number))
        .filter(
            Version.entity_type == entity_type,
            Version.entity_id == entity_id,
        )
        .scalar()
    )
    return (max_number or 0) + 1


def unset_latest_no_commit(entity_type, entity_id, version_id=None):
    """
    Remove the latest flag from every version of given entity, except the
    given one.
    """
    query = Version.query.filter(
        Version.entity_type == entity_type,
        Version.entity_id == entity_id,
        Version.latest.is_(True),
    )
    if version_id is not None:
        query = query.filter(Version.id != version_id)
    query.update({"latest": False}, synchronize_session="fetch")


def get_default_status_id():
    status = Status.get_by(code=DEFAULT_STATUS_CODE)
    return None if status is None else status.id


def create_version(
    entity_type,
    entity_id,
    code,
    name,
    created_by=None,
    description=None,
    file_path=None,
    thumbnail_path=None,
    artist=None,
    format=None,
    frame_range=None,
    duration=None,
    latest=True,
    status_id=None,
    status=None,
    assigned_to=None,
):
    """
    Create a version for given entity. It takes the next version number of
    the entity. A new version is the latest one unless told otherwise.
    Without status, the version is set as work in progress.
    """
    check_entity_type(entity_type)
    project_id = project_access_service.get_project_id_for_entity(
        entity_type, entity_id
    )
    if project_id is None:
        raise LinkedEntityNotFoundException(
            f"{entity_type.capitalize()} {entity_id} does not exist."
        )
    check_code_is_available(code)
    status_id = statuses_service.get_status_id(status_id, status)
    if status_id is None:
        status_id = get_default_status_id()
    latest = latest is not False

    try:
        if latest:
            unset_latest_no_commit(entity_type, entity_id)
        version = Version.create_no_commit(
            entity_type=entity_type,
            entity_id=entity_id,
            code=code,
            name=name,
            description=description,
            version_number=get_next_version_number(entity_type, entity_id),
            latest=latest,
            file_path=file_path,
            thumbnail_path=thumbnail_path,
            artist=artist,
            format=format,
            frame_range=frame_range,
            duration=duration,
            status_id=status_id,
            status_updated_at=date_helpers.get_utc_now_datetime(),
            created_by=created_by,
            assigned_to=assigned_to,
        )
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        raise EntryAlreadyExistsException(
            f"A version with code {code} already exists."
        )
    except BaseException:
        db.session.rollback()
        logger.error(
            f"Version {code} could not be created for {entity_type} "
            f"{entity_id}.",
            exc_info=1,
        )
        raise

    version_dict = version.serialize()
    events.emit(
        "version:new",
        {
            "version_id": version_dict["id"],
            "entity_id": version_dict["entity_id"],
            "entity_type": entity_type,
        },
        project_id=project_id,
    )
    return version_dict


def update_version(version_id, data):
    """
    Update version with given data. Flagging a version as the latest one
    removes the flag from the other versions of its entity. A status change
    updates the status date and emits a dedicated event.
    """
    version = get_version_raw(version_id)
    entity_type = fields.serialize_value(version.entity_type)
    previous_status_id = version.status_id
    for field in ["entity_id", "entity_type", "version_number"]:
        data.pop(field, None)
    if "code" in data:
        check_code_is_available(data["code"], version.id)
    if "status" in data:
        data["status_id"] = statuses_service.get_status_id(
            data.get("status_id"), data.pop("status")
        )
    elif data.get("status_id") is not None:
        data["status_id"] = statuses_service.get_status_id(data["status_id"])
    status_changed = "status_id" in data and str(data["status_id"]) != str(
        previous_status_id
    )
    if status_changed:
        data["status_updated_at"] = date_helpers.get_utc_now_datetime()

    try:
        if data.get("latest"):
            unset_latest_no_commit(entity_type, version.entity_id, version.id)
        version.update_no_commit(data)
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        raise EntryAlreadyExistsException(
            f"A version with code {data.get('code')} already exists."
        )
    except BaseException:
        db.session.rollback()
        logger.error(f"Version {version_id} could not be updated.", exc_info=1)
        raise

    version_dict = version.serialize()
    project_id = get_project_id(version)
    events.emit(
        "version:update",
        {"version_id": version_dict["id"]},
        project_id=project_id,
    )
    if status_changed:
        events.emit(
            "version:status-changed",
            {
                "version_id": version_dict["id"],
                "previous_status_id": fields.serialize_value(
                    previous_status_id
                ),
                "status_id": version_dict["status_id"],
                "created_by": version_dict["created_by"],
                "assigned_to": version_dict["assigned_to"],
            },
            project_id=project_id,
        )
    return version_dict


def remove_version(version_id):
    """
    Delete given version with its notes. When it was the latest version of
    its entity, the most recently created remaining version becomes the
    latest one.
    """
    version = get_version_raw(version_id)
    version_dict = version.serialize()
    entity_type = version_dict["entity_type"]
    project_id = get_project_id(version)
    try:
        deletion_service.remove_notes_no_commit("version", [version.id])
        version.delete_no_commit()
        db.session.flush()
        if version_dict["latest"]:
            previous_version = (
                Version.query.filter(
                    Version.entity_type == entity_type,
                    Version.entity_id == version_dict["entity_id"],
                )
                .order_by(
                    Version.created_at.desc(), Version.version_number.desc()
                )
                .first()
            )
            if previous_version is not None:
                previous_version.update_no_commit({"latest": True})
        db.session.commit()
    except BaseException:
        db.session.rollback()
        logger.error(f"Version {version_id} could not be deleted.", exc_info=1)
        raise

    events.emit(
        "version:delete",
        {
            "version_id": version_dict["id"],
            "entity_id": version_dict["entity_id"],
            "entity_type": entity_type,
        },
        project_id=project_id,
    )
    return version_dict
