"""
Management of the permission rows granting persons access to projects.

A project that has permission rows always keeps at least one owner. Role
changes and revocations re-count owners inside the transaction performing the
write, after locking the project row, so concurrent requests cannot remove
the last two owners at the same time.
"""
import logging

from sqlalchemy.exc import IntegrityError, StatementError

from shotline.app import db
from shotline.app.models.person import Person
from shotline.app.models.project import Project
from shotline.app.models.project_permission import ProjectPermission
from shotline.app.services import persons_service, projects_service
from shotline.app.services.exception import (
    LastProjectOwnerException,
    ProjectPermissionAlreadyExistsException,
    ProjectPermissionNotFoundException,
    WrongParameterException,
)
from shotline.app.utils import events, permissions

logger = logging.getLogger(__name__)


def check_role(role):
    if role not in permissions.PROJECT_ROLE_RANKS:
        raise WrongParameterException(
            f"Role {role} is not valid.",
            dict={
                "errors": [
                    {
                        "field": "role",
                        "message": "Role must be one of: "
                        + ", ".join(permissions.PROJECT_ROLE_RANKS.keys()),
                    }
                ]
            },
        )
    return role


def serialize_permission(permission, person=None, project=None):
    permission_dict = permission.serialize()
    if person is not None:
        permission_dict["person"] = person.present_minimal()
    if project is not None:
        permission_dict["project"] = {
            "id": str(project.id),
            "code": project.code,
            "name": project.name,
        }
    return permission_dict


def get_permissions_for_project(project_id):
    """
    Return all permissions of given project, oldest first. Each entry embeds
    a minimal description of the related person.
    """
    project = projects_service.get_project_raw(project_id)
    rows = (
        db.session.query(ProjectPermission, Person)
        .join(Person, Person.id == ProjectPermission.person_id)
        .filter(ProjectPermission.project_id == project.id)
        .order_by(ProjectPermission.created_at.asc())
        .all()
    )
    return [
        serialize_permission(permission, person=person)
        for (permission, person) in rows
    ]


def get_permissions_for_person(person_id):
    """
    Return all permissions of given person, newest first. Each entry embeds
    the code and name of the related project.
    """
    rows = (
        db.session.query(ProjectPermission, Project)
        .join(Project, Project.id == ProjectPermission.project_id)
        .filter(ProjectPermission.person_id == person_id)
        .order_by(ProjectPermission.created_at.desc())
        .all()
    )
    return [
        serialize_permission(permission, project=project)
        for (permission, project) in rows
    ]


def get_permission_raw(project_id, person_id):
    """
    Return permission row for given project and person. It raises a
    ProjectPermissionNotFoundException if there is none.
    """
    try:
        permission = ProjectPermission.get_by(
            project_id=project_id, person_id=person_id
        )
    except StatementError:
        raise ProjectPermissionNotFoundException()

    if permission is None:
        raise ProjectPermissionNotFoundException()
    return permission


def get_permission(project_id, person_id):
    return get_permission_raw(project_id, person_id).serialize()


def count_owners(project_id):
    return ProjectPermission.query.filter_by(
        project_id=project_id, role=permissions.OWNER
    ).count()


def lock_project(project_id):
    """
    Lock project row until the end of the current transaction. Writes on
    its permissions are serialized that way.
    """
    return (
        Project.query.filter_by(id=project_id).with_for_update().first()
    )


def grant_permission(project_id, person_id, role=permissions.VIEWER):
    """
    Give a person access to a project with given role. It fails if the
    person already has a permission on the project.
    """
    check_role(role)
    project = projects_service.get_project_raw(project_id)
    person = persons_service.get_person_raw(person_id)

    if (
        ProjectPermission.get_by(project_id=project.id, person_id=person.id)
        is not None
    ):
        raise ProjectPermissionAlreadyExistsException()

    try:
        permission = ProjectPermission.create_no_commit(
            project_id=project.id, person_id=person.id, role=role
        )
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        raise ProjectPermissionAlreadyExistsException()

    permission_dict = permission.serialize()
    logger.info(
        f"Role {role} granted to person {person.id} on project {project.id}."
    )
    events.emit(
        "project-permission:new",
        {"person_id": str(person.id), "role": role},
        project_id=project.id,
    )
    return permission_dict


def assign_owner_no_commit(project_id, person_id):
    """
    Make given person owner of given project. The permission row is created
    if needed. Nothing is written when the person already is an owner. The
    change is not commited.
    """
    permission = ProjectPermission.get_by(
        project_id=project_id, person_id=person_id
    )
    if permission is None:
        permission = ProjectPermission.create_no_commit(
            project_id=project_id,
            person_id=person_id,
            role=permissions.OWNER,
        )
    elif permission.role != permissions.OWNER:
        permission.update_no_commit({"role": permissions.OWNER})
    return permission


def assign_owner(project_id, person_id):
    """
    Make given person owner of given project. Calling it several times leads
    to the same result.
    """
    try:
        permission = assign_owner_no_commit(project_id, person_id)
        db.session.commit()
    except BaseException:
        db.session.rollback()
        raise
    return permission.serialize()


def change_role(project_id, person_id, role):
    """
    Change the role of a person on a project. Downgrading the last owner of
    the project is refused.
    """
    check_role(role)
    projects_service.get_project_raw(project_id)
    try:
        lock_project(project_id)
        permission = get_permission_raw(project_id, person_id)
        if (
            permission.role == permissions.OWNER
            and role != permissions.OWNER
            and count_owners(project_id) <= 1
        ):
            logger.info(
                f"Last owner {person_id} of project {project_id} can't be "
                "downgraded."
            )
            raise LastProjectOwnerException()
        permission.update_no_commit({"role": role})
        db.session.commit()
    except BaseException:
        db.session.rollback()
        raise

    events.emit(
        "project-permission:update",
        {"person_id": str(person_id), "role": role},
        project_id=project_id,
    )
    return permission.serialize()


def revoke_permission(project_id, person_id):
    """
    Remove the access of a person to a project. Removing the last owner of
    the project is refused.
    """
    projects_service.get_project_raw(project_id)
    try:
        lock_project(project_id)
        permission = get_permission_raw(project_id, person_id)
        if (
            permission.role == permissions.OWNER
            and count_owners(project_id) <= 1
        ):
            logger.info(
                f"Last owner {person_id} of project {project_id} can't be "
                "removed."
            )
            raise LastProjectOwnerException()
        permission_dict = permission.serialize()
        permission.delete_no_commit()
        db.session.commit()
    except BaseException:
        db.session.rollback()
        raise

    events.emit(
        "project-permission:delete",
        {"person_id": str(person_id)},
        project_id=project_id,
    )
    return permission_dict


def remove_project_permissions_no_commit(project_id):
    """
    Delete all permissions of given project. The change is not commited.
    """
    return ProjectPermission.delete_all_by_no_commit(project_id=project_id)
