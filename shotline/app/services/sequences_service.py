"""
Sequences of episodes. Every change affecting the duration of a sequence or
the episode it belongs to updates the episode duration in the same
transaction: if the duration update fails, the sequence change is rolled
back too.
"""
import logging

from sqlalchemy.exc import IntegrityError, StatementError

from shotline.app import db
from shotline.app.models.episode import Episode
from shotline.app.models.sequence import Sequence
from shotline.app.services import (
    deletion_service,
    episodes_service,
    project_access_service,
    projects_service,
    statuses_service,
)
from shotline.app.services.exception import (
    EntryAlreadyExistsException,
    SequenceNotFoundException,
    WrongParameterException,
)
from shotline.app.utils import events, fields, query as query_utils

logger = logging.getLogger(__name__)


def get_sequence_raw(sequence_id):
    """
    Return given sequence as an active record.
    """
    try:
        sequence = Sequence.get(sequence_id)
    except StatementError:
        raise SequenceNotFoundException()

    if sequence is None:
        raise SequenceNotFoundException()
    return sequence


def get_sequence(sequence_id):
    """
    Return given sequence as a dictionary.
    """
    return get_sequence_raw(sequence_id).serialize()


def get_full_sequence(sequence_id):
    """
    Return given sequence as a dictionary with the project id of its episode.
    """
    sequence = get_sequence_raw(sequence_id)
    episode = episodes_service.get_episode_raw(sequence.episode_id)
    sequence_dict = sequence.serialize()
    sequence_dict["project_id"] = fields.serialize_value(episode.project_id)
    sequence_dict["episode_code"] = episode.code
    return sequence_dict


def get_sequences(
    user_context,
    episode_id=None,
    project_id=None,
    status_id=None,
    cut_order=None,
    created_by=None,
    assigned_to=None,
    search=None,
    page=None,
    limit=None,
):
    """
    Return sequences of the projects the user can access. Results can be
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

    query = Sequence.query.join(
        Episode, Episode.id == Sequence.episode_id
    ).filter(Episode.project_id.in_(project_ids))
    if episode_id is not None:
        query = query.filter(Sequence.episode_id == episode_id)
    if project_id is not None:
        query = query.filter(Episode.project_id == project_id)
    if status_id is not None:
        query = query.filter(Sequence.status_id == status_id)
    if cut_order is not None:
        query = query.filter(Sequence.cut_order == cut_order)
    if created_by is not None:
        query = query.filter(Sequence.created_by == created_by)
    if assigned_to is not None:
        query = query.filter(Sequence.assigned_to == assigned_to)
    query = query_utils.apply_text_search(
        query, search, Sequence.name, Sequence.code
    )
    query = query.order_by(Sequence.cut_order, Sequence.code)
    return query_utils.get_paginated_results(query, page, limit)


def get_sequences_for_episode(episode_id):
    """
    Return all sequences of given episode ordered by cut order.
    """
    episode = episodes_service.get_episode_raw(episode_id)
    sequences = (
        Sequence.query.filter_by(episode_id=episode.id)
        .order_by(Sequence.cut_order, Sequence.code)
        .all()
    )
    return fields.serialize_models(sequences)


def check_code_is_available(code, sequence_id=None):
    sequence = Sequence.get_by(code=code)
    if sequence is not None and str(sequence.id) != str(sequence_id):
        raise EntryAlreadyExistsException(
            f"A sequence with code {code} already exists."
        )


def check_duration(duration):
    if duration is not None and duration < 0:
        raise WrongParameterException("Duration can't be negative.")


def create_sequence(
    episode_id,
    code,
    name,
    created_by=None,
    description=None,
    cut_order=None,
    duration=None,
    story_id=None,
    status_id=None,
    status=None,
    assigned_to=None,
):
    """
    Create a sequence for given episode and update the episode duration.
    """
    episode = episodes_service.get_episode_raw(episode_id)
    check_code_is_available(code)
    check_duration(duration)
    status_id = statuses_service.get_status_id(status_id, status)

    try:
        sequence = Sequence.create_no_commit(
            episode_id=episode.id,
            code=code,
            name=name,
            description=description,
            cut_order=cut_order,
            duration=duration,
            story_id=story_id,
            status_id=status_id,
            created_by=created_by,
            assigned_to=assigned_to,
        )
        db.session.flush()
        episodes_service.update_episode_duration_no_commit(episode.id)
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        raise EntryAlreadyExistsException(
            f"A sequence with code {code} already exists."
        )
    except BaseException:
        db.session.rollback()
        logger.error(
            f"Sequence {code} could not be created in episode {episode_id}.",
            exc_info=1,
        )
        raise

    sequence_dict = sequence.serialize()
    events.emit(
        "sequence:new",
        {"sequence_id": sequence_dict["id"], "episode_id": episode_id},
        project_id=episode.project_id,
    )
    return sequence_dict


def update_sequence(sequence_id, data):
    """
    Update sequence with given data. When the duration changes, the episode
    duration is updated. When the sequence moves to another episode, both the
    previous and the new episode durations are updated.
    """
    sequence = get_sequence_raw(sequence_id)
    previous_episode_id = sequence.episode_id
    previous_duration = sequence.duration

    if "code" in data:
        check_code_is_available(data["code"], sequence.id)
    if "duration" in data:
        check_duration(data["duration"])
    if data.get("episode_id") is not None:
        data["episode_id"] = episodes_service.get_episode_raw(
            data["episode_id"]
        ).id
    elif "episode_id" in data:
        del data["episode_id"]
    if "status" in data:
        data["status_id"] = statuses_service.get_status_id(
            data.get("status_id"), data.pop("status")
        )
    elif data.get("status_id") is not None:
        data["status_id"] = statuses_service.get_status_id(data["status_id"])

    try:
        sequence.update_no_commit(data)
        db.session.flush()
        episode_changed = str(sequence.episode_id) != str(previous_episode_id)
        if episode_changed or sequence.duration != previous_duration:
            episodes_service.update_episode_duration_no_commit(
                previous_episode_id
            )
        if episode_changed:
            episodes_service.update_episode_duration_no_commit(
                sequence.episode_id
            )
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        raise EntryAlreadyExistsException(
            f"A sequence with code {data.get('code')} already exists."
        )
    except BaseException:
        db.session.rollback()
        logger.error(
            f"Sequence {sequence_id} could not be updated.", exc_info=1
        )
        raise

    sequence_dict = sequence.serialize()
    episode = episodes_service.get_episode_raw(sequence.episode_id)
    events.emit(
        "sequence:update",
        {
            "sequence_id": sequence_dict["id"],
            "episode_id": sequence_dict["episode_id"],
        },
        project_id=episode.project_id,
    )
    return sequence_dict


def remove_sequence(sequence_id):
    """
    Delete given sequence with its shots, versions and notes and update the
    duration of its episode.
    """
    sequence = get_sequence_raw(sequence_id)
    sequence_dict = sequence.serialize()
    try:
        deletion_service.remove_sequences_no_commit([sequence.id])
        db.session.flush()
        episode = episodes_service.update_episode_duration_no_commit(
            sequence_dict["episode_id"]
        )
        db.session.commit()
    except BaseException:
        db.session.rollback()
        logger.error(
            f"Sequence {sequence_id} could not be deleted.", exc_info=1
        )
        raise

    events.emit(
        "sequence:delete",
        {
            "sequence_id": sequence_dict["id"],
            "episode_id": sequence_dict["episode_id"],
        },
        project_id=episode.project_id,
    )
    return sequence_dict
