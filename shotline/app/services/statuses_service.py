from sqlalchemy.exc import StatementError

from shotline.app.models.asset import Asset
from shotline.app.models.episode import Episode
from shotline.app.models.playlist import Playlist
from shotline.app.models.project import Project
from shotline.app.models.sequence import Sequence
from shotline.app.models.shot import Shot
from shotline.app.models.status import Status
from shotline.app.models.version import Version
from shotline.app.services.exception import (
    EntryAlreadyExistsException,
    StatusNotFoundException,
    WrongParameterException,
)
from shotline.app.utils import cache, events

DEFAULT_STATUSES = [
    {"code": "wip", "name": "Work In Progress", "color": "#3273dc"},
    {"code": "wfa", "name": "Waiting For Approval", "color": "#ab26ff"},
    {"code": "retake", "name": "Retake", "color": "#ff3860"},
    {"code": "done", "name": "Done", "color": "#22d160"},
    {"code": "on-hold", "name": "On Hold", "color": "#f5a623"},
]


def clear_status_cache():
    cache.cache.delete_memoized(get_status_by_code)
    cache.cache.delete_memoized(get_statuses)


@cache.memoize_function(120)
def get_statuses():
    """
    Return all statuses ordered by sort order.
    """
    statuses = Status.query.order_by(Status.sort_order, Status.code).all()
    return Status.serialize_list(statuses)


def get_status_raw(status_id):
    try:
        status = Status.get(status_id)
    except StatementError:
        raise StatusNotFoundException()

    if status is None:
        raise StatusNotFoundException()
    return status


def get_status(status_id):
    return get_status_raw(status_id).serialize()


@cache.memoize_function(120)
def get_status_by_code(code):
    """
    Return status matching given code as a dictionary.
    """
    status = Status.get_by(code=code)
    if status is None:
        raise StatusNotFoundException(f"Status {code} does not exist.")
    return status.serialize()


def get_status_id(status_id=None, status_code=None):
    """
    Resolve the status an entity should point to from either a status ID or a
    status code. It returns None when none of them is given.
    """
    if status_id is not None:
        return get_status_raw(status_id).id
    elif status_code is not None:
        return get_status_by_code(status_code)["id"]
    return None


def create_status(
    code, name, description=None, color=None, is_active=True, sort_order=0
):
    if Status.get_by(code=code) is not None:
        raise EntryAlreadyExistsException(
            f"A status with code {code} already exists."
        )
    status = Status.create(
        code=code,
        name=name,
        description=description,
        color=color or "#999999",
        is_active=is_active,
        sort_order=sort_order,
    )
    clear_status_cache()
    events.emit("status:new", {"status_id": str(status.id)})
    return status.serialize()


def update_status(status_id, data):
    status = get_status_raw(status_id)
    if "code" in data and data["code"] != status.code:
        if Status.get_by(code=data["code"]) is not None:
            raise EntryAlreadyExistsException(
                f"A status with code {data['code']} already exists."
            )
    status.update(data)
    clear_status_cache()
    events.emit("status:update", {"status_id": str(status.id)})
    return status.serialize()


def delete_status(status_id):
    """
    Delete given status. A status still used by any entity cannot be
    deleted.
    """
    status = get_status_raw(status_id)
    for model in [Project, Episode, Sequence, Shot, Asset, Version, Playlist]:
        if model.query.filter_by(status_id=status.id).count() > 0:
            raise WrongParameterException(
                f"Status {status.code} is still used and can't be deleted."
            )
    status_dict = status.serialize()
    status.delete()
    clear_status_cache()
    events.emit("status:delete", {"status_id": status_dict["id"]})
    return status_dict


def init_default_statuses():
    """
    Create default statuses when they don't exist yet.
    """
    created = []
    for sort_order, data in enumerate(DEFAULT_STATUSES):
        if Status.get_by(code=data["code"]) is None:
            created.append(
                Status.create(sort_order=sort_order, **data).serialize()
            )
    clear_status_cache()
    return created
