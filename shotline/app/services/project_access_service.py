"""
Project scoped access control. Every check receives the user context built
for the current request (user id and global role). Admins bypass every
project check, other persons need a permission row on the project with a
role at least as high as the one required (viewer < contributor < owner).
"""
import logging

from sqlalchemy import and_, or_, select
from sqlalchemy.exc import StatementError

from shotline.app import db
from shotline.app.models.asset import Asset
from shotline.app.models.episode import Episode
from shotline.app.models.playlist import Playlist
from shotline.app.models.project import Project
from shotline.app.models.project_permission import ProjectPermission
from shotline.app.models.sequence import Sequence
from shotline.app.models.shot import Shot
from shotline.app.models.version import Version, VERSION_ENTITY_TYPES
from shotline.app.services.exception import (
    LinkedEntityNotFoundException,
    ProjectAccessDeniedException,
)
from shotline.app.utils import permissions

logger = logging.getLogger(__name__)


def is_admin(user_context):
    return permissions.is_admin(user_context)


def get_permission_raw(project_id, person_id):
    """
    Return the permission row linking given person to given project, None if
    there is no such row.
    """
    try:
        return ProjectPermission.get_by(
            project_id=project_id, person_id=person_id
        )
    except StatementError:
        return None


def get_user_role(project_id, user_context):
    """
    Return the role code of the user on given project, None if the user has
    no permission on it.
    """
    permission = get_permission_raw(project_id, user_context.user_id)
    if permission is None:
        return None
    return permission.role.code


def has_permission(project_id, user_context, min_role=permissions.VIEWER):
    """
    Return True if the user can act on given project with at least the given
    role.
    """
    if is_admin(user_context):
        return True
    permission = get_permission_raw(project_id, user_context.user_id)
    if permission is None:
        return False
    return permissions.get_role_rank(
        permission.role
    ) >= permissions.get_role_rank(min_role)


def verify_access(project_id, user_context, min_role=permissions.VIEWER):
    """
    Raise a ProjectAccessDeniedException if the user can't act on given
    project with at least the given role.
    """
    if not has_permission(project_id, user_context, min_role):
        logger.info(
            f"Access denied to project {project_id} for user "
            f"{user_context.user_id} (required role: {min_role})."
        )
        raise ProjectAccessDeniedException()
    return True


def check_viewer_access(project_id, user_context):
    return verify_access(project_id, user_context, permissions.VIEWER)


def check_contributor_access(project_id, user_context):
    return verify_access(project_id, user_context, permissions.CONTRIBUTOR)


def check_owner_access(project_id, user_context):
    return verify_access(project_id, user_context, permissions.OWNER)


def get_accessible_project_ids(user_context):
    """
    Return ids of all projects the user can read. Admins can read every
    project.
    """
    if is_admin(user_context):
        return [project.id for project in Project.query.all()]
    return [
        permission.project_id
        for permission in ProjectPermission.query.filter_by(
            person_id=user_context.user_id
        )
    ]


def get_project_id_for_entity(entity_type, entity_id):
    """
    Return the id of the project given entity belongs to, None if the entity
    does not exist. Versions belong to the project of the entity they were
    made for.
    """
    try:
        if entity_type == "project":
            query = db.session.query(Project.id).filter(
                Project.id == entity_id
            )
        elif entity_type == "episode":
            query = db.session.query(Episode.project_id).filter(
                Episode.id == entity_id
            )
        elif entity_type == "sequence":
            query = (
                db.session.query(Episode.project_id)
                .join(Sequence, Sequence.episode_id == Episode.id)
                .filter(Sequence.id == entity_id)
            )
        elif entity_type == "shot":
            query = (
                db.session.query(Episode.project_id)
                .join(Sequence, Sequence.episode_id == Episode.id)
                .join(Shot, Shot.sequence_id == Sequence.id)
                .filter(Shot.id == entity_id)
            )
        elif entity_type == "asset":
            query = db.session.query(Asset.project_id).filter(
                Asset.id == entity_id
            )
        elif entity_type == "playlist":
            query = db.session.query(Playlist.project_id).filter(
                Playlist.id == entity_id
            )
        elif entity_type == "version":
            version = Version.get(entity_id)
            if version is None:
                return None
            return get_project_id_for_entity(
                version.entity_type.code, version.entity_id
            )
        else:
            return None
        return query.scalar()
    except StatementError:
        return None


def verify_entity_access(
    entity_type, entity_id, user_context, min_role=permissions.VIEWER
):
    """
    Check the user can act with at least the given role on the project of
    given entity. Return the project id.
    """
    project_id = get_project_id_for_entity(entity_type, entity_id)
    if project_id is None:
        raise LinkedEntityNotFoundException()
    verify_access(project_id, user_context, min_role)
    return project_id


def get_entity_ids_select(entity_type, project_ids):
    """
    Return a select statement listing the ids of the entities of given type
    that belong to given projects.
    """
    if entity_type == "project":
        return select(Project.id).where(Project.id.in_(project_ids))
    elif entity_type == "episode":
        return select(Episode.id).where(Episode.project_id.in_(project_ids))
    elif entity_type == "sequence":
        return (
            select(Sequence.id)
            .join(Episode, Episode.id == Sequence.episode_id)
            .where(Episode.project_id.in_(project_ids))
        )
    elif entity_type == "shot":
        return (
            select(Shot.id)
            .join(Sequence, Sequence.id == Shot.sequence_id)
            .join(Episode, Episode.id == Sequence.episode_id)
            .where(Episode.project_id.in_(project_ids))
        )
    elif entity_type == "asset":
        return select(Asset.id).where(Asset.project_id.in_(project_ids))
    elif entity_type == "playlist":
        return select(Playlist.id).where(Playlist.project_id.in_(project_ids))
    elif entity_type == "version":
        return select(Version.id).where(
            get_linked_entities_filter(
                Version.entity_type,
                Version.entity_id,
                [code for (code, _) in VERSION_ENTITY_TYPES],
                project_ids,
            )
        )
    raise ValueError(f"Unknown entity type: {entity_type}")


def get_linked_entities_filter(
    type_column, id_column, entity_types, project_ids
):
    """
    Build a filter keeping rows linked (through a type column and an id
    column) to an entity of given projects.
    """
    return or_(
        *[
            and_(
                type_column == entity_type,
                id_column.in_(get_entity_ids_select(entity_type, project_ids)),
            )
            for entity_type in entity_types
        ]
    )
