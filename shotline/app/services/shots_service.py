"""
Shots of sequences. Shot durations are expressed in frames and are not
added to the durations of sequences or episodes.
"""
import logging

from sqlalchemy.exc import IntegrityError, StatementError

from shotline.app import db
from shotline.app.models.episode import Episode
from shotline.app.models.note import Note
from shotline.app.models.sequence import Sequence
from shotline.app.models.shot import Shot
from shotline.app.services import (
    deletion_service,
    episodes_service,
    project_access_service,
    projects_service,
    sequences_service,
    statuses_service,
)
from shotline.app.services.exception import (
    EntryAlreadyExistsException,
    ShotNotFoundException,
    WrongParameterException,
)
from shotline.app.utils import events, fields, query as query_utils

logger = logging.getLogger(__name__)


def get_shot_raw(shot_id):
    """
    Return given shot as an active record.
    """
    try:
        shot = Shot.get(shot_id)
    except StatementError:
        raise ShotNotFoundException()

    if shot is None:
        raise ShotNotFoundException()
    return shot


def get_shot(shot_id):
    return get_shot_raw(shot_id).serialize()


def get_project_id(shot_id):
    """
    Return the id of the project given shot belongs to.
    """
    shot = get_shot_raw(shot_id)
    sequence = sequences_service.get_sequence_raw(shot.sequence_id)
    return episodes_service.get_episode_raw(sequence.episode_id).project_id


def get_full_shot(shot_id):
    """
    Return given shot as a dictionary with the ids of its episode and project
    and the notes left on it.
    """
    shot = get_shot_raw(shot_id)
    sequence = sequences_service.get_sequence_raw(shot.sequence_id)
    episode = episodes_service.get_episode_raw(sequence.episode_id)
    shot_dict = shot.serialize()
    shot_dict["sequence_code"] = sequence.code
    shot_dict["episode_id"] = fields.serialize_value(episode.id)
    shot_dict["project_id"] = fields.serialize_value(episode.project_id)
    notes = (
        Note.query.filter(Note.link_type == "shot", Note.link_id == shot.id)
        .order_by(Note.created_at)
        .all()
    )
    shot_dict["notes"] = fields.serialize_models(notes)
    return shot_dict


def get_shots(
    user_context,
    sequence_id=None,
    episode_id=None,
    project_id=None,
    status_id=None,
    shot_type=None,
    created_by=None,
    assigned_to=None,
    search=None,
    page=None,
    limit=None,
):
    """
    Return shots of the projects the user can access. Results can be
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

    query = (
        Shot.query.join(Sequence, Sequence.id == Shot.sequence_id)
        .join(Episode, Episode.id == Sequence.episode_id)
        .filter(Episode.project_id.in_(project_ids))
    )
    if sequence_id is not None:
        query = query.filter(Shot.sequence_id == sequence_id)
    if episode_id is not None:
        query = query.filter(Sequence.episode_id == episode_id)
    if project_id is not None:
        query = query.filter(Episode.project_id == project_id)
    if status_id is not None:
        query = query.filter(Shot.status_id == status_id)
    if shot_type is not None:
        query = query.filter(Shot.shot_type == shot_type)
    if created_by is not None:
        query = query.filter(Shot.created_by == created_by)
    if assigned_to is not None:
        query = query.filter(Shot.assigned_to == assigned_to)
    query = query_utils.apply_text_search(query, search, Shot.name, Shot.code)
    query = query.order_by(Shot.sequence_number, Shot.code)
    return query_utils.get_paginated_results(query, page, limit)


def get_shots_for_sequence(sequence_id):
    """
    Return all shots of given sequence ordered by their number in the
    sequence.
    """
    sequence = sequences_service.get_sequence_raw(sequence_id)
    shots = (
        Shot.query.filter_by(sequence_id=sequence.id)
        .order_by(Shot.sequence_number, Shot.code)
        .all()
    )
    return fields.serialize_models(shots)


def check_code_is_available(code, shot_id=None):
    shot = Shot.get_by(code=code)
    if shot is not None and str(shot.id) != str(shot_id):
        raise EntryAlreadyExistsException(
            f"A shot with code {code} already exists."
        )


def check_duration(duration):
    if duration is not None and duration < 0:
        raise WrongParameterException("Duration can't be negative.")


def create_shot(
    sequence_id,
    code,
    name,
    sequence_number,
    created_by=None,
    description=None,
    shot_type=None,
    duration=None,
    cut_order=None,
    status_id=None,
    status=None,
    assigned_to=None,
):
    """
    Create a shot for given sequence.
    """
    sequence = sequences_service.get_sequence_raw(sequence_id)
    episode = episodes_service.get_episode_raw(sequence.episode_id)
    check_code_is_available(code)
    check_duration(duration)
    status_id = statuses_service.get_status_id(status_id, status)

    try:
        shot = Shot.create(
            sequence_id=sequence.id,
            code=code,
            name=name,
            sequence_number=sequence_number,
            description=description,
            shot_type=shot_type,
            duration=duration,
            cut_order=cut_order,
            status_id=status_id,
            created_by=created_by,
            assigned_to=assigned_to,
        )
    except IntegrityError:
        raise EntryAlreadyExistsException(
            f"A shot with code {code} already exists."
        )

    shot_dict = shot.serialize()
    events.emit(
        "shot:new",
        {"shot_id": shot_dict["id"], "sequence_id": shot_dict["sequence_id"]},
        project_id=episode.project_id,
    )
    return shot_dict


def update_shot(shot_id, data):
    """
    Update shot with given data. A shot can be moved to another sequence.
    """
    shot = get_shot_raw(shot_id)
    if "code" in data:
        check_code_is_available(data["code"], shot.id)
    if "duration" in data:
        check_duration(data["duration"])
    if data.get("sequence_id") is not None:
        data["sequence_id"] = sequences_service.get_sequence_raw(
            data["sequence_id"]
        ).id
    elif "sequence_id" in data:
        del data["sequence_id"]
    if "status" in data:
        data["status_id"] = statuses_service.get_status_id(
            data.get("status_id"), data.pop("status")
        )
    elif data.get("status_id") is not None:
        data["status_id"] = statuses_service.get_status_id(data["status_id"])

    try:
        shot.update(data)
    except IntegrityError:
        raise EntryAlreadyExistsException(
            f"A shot with code {data.get('code')} already exists."
        )

    shot_dict = shot.serialize()
    events.emit(
        "shot:update",
        {"shot_id": shot_dict["id"], "sequence_id": shot_dict["sequence_id"]},
        project_id=get_project_id(shot.id),
    )
    return shot_dict


def remove_shot(shot_id):
    """
    Delete given shot with its versions and notes.
    """
    shot = get_shot_raw(shot_id)
    project_id = get_project_id(shot.id)
    shot_dict = shot.serialize()
    try:
        deletion_service.remove_shots_no_commit([shot.id])
        db.session.commit()
    except BaseException:
        db.session.rollback()
        logger.error(f"Shot {shot_id} could not be deleted.", exc_info=1)
        raise

    events.emit(
        "shot:delete",
        {"shot_id": shot_dict["id"], "sequence_id": shot_dict["sequence_id"]},
        project_id=project_id,
    )
    return shot_dict
