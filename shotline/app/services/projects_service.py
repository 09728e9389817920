import logging

from sqlalchemy.exc import IntegrityError, StatementError

from shotline.app import db
from shotline.app.models.project import Project
from shotline.app.services import (
    deletion_service,
    project_access_service,
    project_permissions_service,
    statuses_service,
)
from shotline.app.services.exception import (
    EntryAlreadyExistsException,
    ProjectNotFoundException,
    WrongParameterException,
)
from shotline.app.utils import date_helpers, events, query as query_utils

logger = logging.getLogger(__name__)


def get_project_raw(project_id):
    """
    Get project matching given id, as an active record. Raises an exception
    if project is not found.
    """
    try:
        project = Project.get(project_id)
    except StatementError:
        raise ProjectNotFoundException()

    if project is None:
        raise ProjectNotFoundException()
    return project


def get_project(project_id):
    """
    Get project matching given id, as a dict. Raises an exception if project
    is not found.
    """
    return get_project_raw(project_id).serialize()


def get_projects(
    user_context,
    status_id=None,
    client_name=None,
    created_by=None,
    search=None,
    page=None,
    limit=None,
):
    """
    Return projects the user can access. Results can be filtered and
    paginated.
    """
    project_ids = project_access_service.get_accessible_project_ids(
        user_context
    )
    if len(project_ids) == 0:
        return [] if page is None or page < 1 else empty_page(page, limit)

    query = Project.query.filter(Project.id.in_(project_ids))
    if status_id is not None:
        query = query.filter(Project.status_id == status_id)
    if created_by is not None:
        query = query.filter(Project.created_by == created_by)
    if client_name:
        query = query.filter(Project.client_name.ilike(f"%{client_name}%"))
    query = query_utils.apply_text_search(
        query, search, Project.name, Project.code
    )
    query = query.order_by(Project.created_at.desc())
    return query_utils.get_paginated_results(query, page, limit)


def empty_page(page, limit):
    return {
        "data": [],
        "total": 0,
        "nb_pages": 0,
        "limit": limit,
        "offset": 0,
        "page": page,
    }


def check_dates(start_date, end_date):
    if (
        start_date is not None
        and end_date is not None
        and start_date > end_date
    ):
        raise WrongParameterException("Start date must be before end date.")


def create_project(
    code,
    name,
    created_by,
    description=None,
    client_name=None,
    start_date=None,
    end_date=None,
    status_id=None,
    status=None,
):
    """
    Create a new project. Its creator becomes its owner within the same
    transaction.
    """
    if Project.get_by(code=code) is not None:
        raise EntryAlreadyExistsException(
            f"A project with code {code} already exists."
        )
    start_date = date_helpers.get_date_from_any_string(start_date)
    end_date = date_helpers.get_date_from_any_string(end_date)
    check_dates(start_date, end_date)
    status_id = statuses_service.get_status_id(status_id, status)

    try:
        project = Project.create_no_commit(
            code=code,
            name=name,
            description=description,
            client_name=client_name,
            start_date=start_date,
            end_date=end_date,
            status_id=status_id,
            created_by=created_by,
        )
        db.session.flush()
        project_permissions_service.assign_owner_no_commit(
            project.id, created_by
        )
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        raise EntryAlreadyExistsException(
            f"A project with code {code} already exists."
        )
    except BaseException:
        db.session.rollback()
        raise

    project_dict = project.serialize()
    logger.info(f"Project {code} created by {created_by}.")
    events.emit(
        "project:new",
        {"project_id": project_dict["id"]},
        project_id=project.id,
    )
    return project_dict


def update_project(project_id, data):
    """
    Update project with given data. Code unicity and date consistency are
    checked.
    """
    project = get_project_raw(project_id)
    if "code" in data and data["code"] != project.code:
        if Project.get_by(code=data["code"]) is not None:
            raise EntryAlreadyExistsException(
                f"A project with code {data['code']} already exists."
            )
    if "status" in data:
        data["status_id"] = statuses_service.get_status_id(
            data.get("status_id"), data.pop("status")
        )
    elif data.get("status_id") is not None:
        data["status_id"] = statuses_service.get_status_id(data["status_id"])
    for field in ["start_date", "end_date"]:
        if field in data:
            data[field] = date_helpers.get_date_from_any_string(data[field])
    check_dates(
        data.get("start_date", project.start_date),
        data.get("end_date", project.end_date),
    )

    try:
        project.update(data)
    except IntegrityError:
        raise EntryAlreadyExistsException(
            f"A project with code {data.get('code')} already exists."
        )
    events.emit(
        "project:update", {"project_id": project_id}, project_id=project_id
    )
    return project.serialize()


def remove_project(project_id):
    """
    Delete given project with everything it contains: episodes, sequences,
    shots, assets, playlists, versions, notes and permissions.
    """
    project = get_project_raw(project_id)
    project_dict = project.serialize()
    try:
        deletion_service.remove_project_content_no_commit(project.id)
        project_permissions_service.remove_project_permissions_no_commit(
            project.id
        )
        project.delete_no_commit()
        db.session.commit()
    except BaseException:
        db.session.rollback()
        raise

    logger.info(f"Project {project_dict['code']} deleted.")
    events.emit(
        "project:delete", {"project_id": project_id}, project_id=project_id
    )
    return project_dict
