import logging

from sqlalchemy.exc import IntegrityError, StatementError

from shotline.app import db
from shotline.app.models.asset import Asset
from shotline.app.services import (
    deletion_service,
    project_access_service,
    projects_service,
    statuses_service,
)
from shotline.app.services.exception import (
    AssetNotFoundException,
    EntryAlreadyExistsException,
)
from shotline.app.utils import events, fields, query as query_utils

logger = logging.getLogger(__name__)


def get_asset_raw(asset_id):
    """
    Return given asset as an active record.
    """
    try:
        asset = Asset.get(asset_id)
    except StatementError:
        raise AssetNotFoundException()

    if asset is None:
        raise AssetNotFoundException()
    return asset


def get_asset(asset_id):
    return get_asset_raw(asset_id).serialize()


def get_assets(
    user_context,
    project_id=None,
    asset_type=None,
    status_id=None,
    created_by=None,
    assigned_to=None,
    search=None,
    page=None,
    limit=None,
):
    """
    Return assets of the projects the user can access. Results can be
    filtered and paginated.
    """
    project_ids = project_access_service.get_accessible_project_ids(
        user_context
    )
    if len(project_ids) == 0:
        return (
            []
            if page is None or page < 1
            else projects_service.empty_page(page, limit)
        )

    query = Asset.query.filter(Asset.project_id.in_(project_ids))
    if project_id is not None:
        query = query.filter(Asset.project_id == project_id)
    if asset_type is not None:
        query = query.filter(Asset.asset_type == asset_type)
    if status_id is not None:
        query = query.filter(Asset.status_id == status_id)
    if created_by is not None:
        query = query.filter(Asset.created_by == created_by)
    if assigned_to is not None:
        query = query.filter(Asset.assigned_to == assigned_to)
    query = query_utils.apply_text_search(
        query, search, Asset.name, Asset.code, Asset.description
    )
    query = query.order_by(Asset.created_at.desc())
    return query_utils.get_paginated_results(query, page, limit)


def get_assets_for_project(project_id):
    project = projects_service.get_project_raw(project_id)
    assets = (
        Asset.query.filter_by(project_id=project.id)
        .order_by(Asset.asset_type, Asset.code)
        .all()
    )
    return fields.serialize_models(assets)


def check_code_is_available(code, asset_id=None):
    asset = Asset.get_by(code=code)
    if asset is not None and str(asset.id) != str(asset_id):
        raise EntryAlreadyExistsException(
            f"An asset with code {code} already exists."
        )


def create_asset(
    project_id,
    code,
    name,
    asset_type="txt",
    created_by=None,
    description=None,
    thumbnail_path=None,
    status_id=None,
    status=None,
    assigned_to=None,
):
    """
    Create an asset for given project. Assets are text documents by default.
    """
    project = projects_service.get_project_raw(project_id)
    check_code_is_available(code)
    status_id = statuses_service.get_status_id(status_id, status)

    try:
        asset = Asset.create(
            project_id=project.id,
            code=code,
            name=name,
            asset_type=asset_type or "txt",
            description=description,
            thumbnail_path=thumbnail_path,
            status_id=status_id,
            created_by=created_by,
            assigned_to=assigned_to,
        )
    except IntegrityError:
        raise EntryAlreadyExistsException(
            f"An asset with code {code} already exists."
        )

    asset_dict = asset.serialize()
    events.emit(
        "asset:new", {"asset_id": asset_dict["id"]}, project_id=project.id
    )
    return asset_dict


def update_asset(asset_id, data):
    """
    Update asset with given data. An asset can be moved to another project.
    """
    asset = get_asset_raw(asset_id)
    if "code" in data:
        check_code_is_available(data["code"], asset.id)
    if data.get("project_id") is not None:
        data["project_id"] = projects_service.get_project_raw(
            data["project_id"]
        ).id
    elif "project_id" in data:
        del data["project_id"]
    if "status" in data:
        data["status_id"] = statuses_service.get_status_id(
            data.get("status_id"), data.pop("status")
        )
    elif data.get("status_id") is not None:
        data["status_id"] = statuses_service.get_status_id(data["status_id"])

    try:
        asset.update(data)
    except IntegrityError:
        raise EntryAlreadyExistsException(
            f"An asset with code {data.get('code')} already exists."
        )
    events.emit(
        "asset:update",
        {"asset_id": str(asset.id)},
        project_id=asset.project_id,
    )
    return asset.serialize()


def remove_asset(asset_id):
    """
    Delete given asset with its versions and notes.
    """
    asset = get_asset_raw(asset_id)
    asset_dict = asset.serialize()
    try:
        deletion_service.remove_assets_no_commit([asset.id])
        db.session.commit()
    except BaseException:
        db.session.rollback()
        logger.error(f"Asset {asset_id} could not be deleted.", exc_info=1)
        raise
    events.emit(
        "asset:delete",
        {"asset_id": asset_dict["id"]},
        project_id=asset_dict["project_id"],
    )
    return asset_dict
