import logging

from sqlalchemy.exc import IntegrityError, StatementError

from shotline.app import db
from shotline.app.models.episode import Episode
from shotline.app.models.sequence import Sequence
from shotline.app.services import (
    deletion_service,
    project_access_service,
    projects_service,
    statuses_service,
)
from shotline.app.services.exception import (
    EntryAlreadyExistsException,
    EpisodeNotFoundException,
)
from shotline.app.utils import events, fields, query as query_utils

logger = logging.getLogger(__name__)


def get_episode_raw(episode_id):
    """
    Return given episode as an active record.
    """
    try:
        episode = Episode.get(episode_id)
    except StatementError:
        raise EpisodeNotFoundException()

    if episode is None:
        raise EpisodeNotFoundException()
    return episode


def get_episode(episode_id):
    """
    Return given episode as a dictionary.
    """
    return get_episode_raw(episode_id).serialize()


def get_full_episode(episode_id):
    """
    Return given episode as a dictionary with its sequences ordered by cut
    order.
    """
    episode = get_episode_raw(episode_id)
    episode_dict = episode.serialize()
    sequences = (
        Sequence.query.filter_by(episode_id=episode.id)
        .order_by(Sequence.cut_order, Sequence.code)
        .all()
    )
    episode_dict["sequences"] = fields.serialize_models(sequences)
    return episode_dict


def get_episode_by_code(code):
    episode = Episode.get_by(code=code)
    if episode is None:
        raise EpisodeNotFoundException()
    return episode.serialize()


def get_episodes(
    user_context,
    project_id=None,
    status_id=None,
    created_by=None,
    assigned_to=None,
    search=None,
    page=None,
    limit=None,
):
    """
    Return episodes of the projects the user can access. Results can be
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

    query = Episode.query.filter(Episode.project_id.in_(project_ids))
    if project_id is not None:
        query = query.filter(Episode.project_id == project_id)
    if status_id is not None:
        query = query.filter(Episode.status_id == status_id)
    if created_by is not None:
        query = query.filter(Episode.created_by == created_by)
    if assigned_to is not None:
        query = query.filter(Episode.assigned_to == assigned_to)
    query = query_utils.apply_text_search(
        query, search, Episode.name, Episode.code
    )
    query = query.order_by(Episode.ep_number, Episode.cut_order, Episode.code)
    return query_utils.get_paginated_results(query, page, limit)


def get_episodes_for_project(project_id):
    """
    Return all episodes of given project ordered by episode number.
    """
    project = projects_service.get_project_raw(project_id)
    episodes = (
        Episode.query.filter_by(project_id=project.id)
        .order_by(Episode.ep_number, Episode.cut_order, Episode.code)
        .all()
    )
    return fields.serialize_models(episodes)


def check_code_is_available(code, episode_id=None):
    episode = Episode.get_by(code=code)
    if episode is not None and str(episode.id) != str(episode_id):
        raise EntryAlreadyExistsException(
            f"An episode with code {code} already exists."
        )


def create_episode(
    project_id,
    code,
    name,
    created_by=None,
    ep_number=None,
    cut_order=None,
    description=None,
    status_id=None,
    status=None,
    assigned_to=None,
):
    """
    Create an episode for given project. A new episode has no sequence, its
    duration is zero.
    """
    project = projects_service.get_project_raw(project_id)
    check_code_is_available(code)
    status_id = statuses_service.get_status_id(status_id, status)

    try:
        episode = Episode.create(
            project_id=project.id,
            code=code,
            name=name,
            ep_number=ep_number,
            cut_order=cut_order,
            description=description,
            status_id=status_id,
            created_by=created_by,
            assigned_to=assigned_to,
            duration=0,
        )
    except IntegrityError:
        raise EntryAlreadyExistsException(
            f"An episode with code {code} already exists."
        )

    episode_dict = episode.serialize()
    events.emit(
        "episode:new",
        {"episode_id": episode_dict["id"]},
        project_id=project.id,
    )
    return episode_dict


def update_episode(episode_id, data):
    """
    Update episode with given data. Duration is computed from sequences and
    cannot be set directly.
    """
    episode = get_episode_raw(episode_id)
    data.pop("duration", None)
    if "code" in data:
        check_code_is_available(data["code"], episode.id)
    if "project_id" in data:
        data["project_id"] = projects_service.get_project_raw(
            data["project_id"]
        ).id
    if "status" in data:
        data["status_id"] = statuses_service.get_status_id(
            data.get("status_id"), data.pop("status")
        )
    elif data.get("status_id") is not None:
        data["status_id"] = statuses_service.get_status_id(data["status_id"])

    try:
        episode.update(data)
    except IntegrityError:
        raise EntryAlreadyExistsException(
            f"An episode with code {data.get('code')} already exists."
        )
    events.emit(
        "episode:update",
        {"episode_id": str(episode.id)},
        project_id=episode.project_id,
    )
    return episode.serialize()


def remove_episode(episode_id):
    """
    Delete given episode with its sequences, shots, versions and notes.
    """
    episode = get_episode_raw(episode_id)
    episode_dict = episode.serialize()
    try:
        deletion_service.remove_episodes_no_commit([episode.id])
        db.session.commit()
    except BaseException:
        db.session.rollback()
        raise
    events.emit(
        "episode:delete",
        {"episode_id": episode_dict["id"]},
        project_id=episode_dict["project_id"],
    )
    return episode_dict


def compute_episode_duration(episode_id):
    """
    Sum durations of the sequences of given episode. Sequences without
    duration count as zero.
    """
    durations = db.session.query(Sequence.duration).filter(
        Sequence.episode_id == episode_id
    )
    return sum(duration or 0 for (duration,) in durations)


def update_episode_duration_no_commit(episode_id):
    """
    Store on given episode the sum of the durations of its sequences. The
    change is not commited.
    """
    episode = get_episode_raw(episode_id)
    duration = compute_episode_duration(episode.id)
    if episode.duration != duration:
        episode.update_no_commit({"duration": duration})
    return episode


def update_episode_duration(episode_id):
    """
    Recompute and store the duration of given episode from its sequences.
    Return the updated episode.
    """
    episode = get_episode_raw(episode_id)
    try:
        update_episode_duration_no_commit(episode.id)
        db.session.commit()
    except BaseException:
        db.session.rollback()
        logger.error(
            f"Duration of episode {episode_id} could not be updated.",
            exc_info=1,
        )
        raise
    return episode.serialize()


def recompute_all_durations():
    """
    Recompute stored duration of every episode. Return the number of episodes
    whose duration changed.
    """
    nb_updated = 0
    for episode in Episode.query.all():
        duration = compute_episode_duration(episode.id)
        if episode.duration != duration:
            episode.update_no_commit({"duration": duration})
            nb_updated += 1
    db.session.commit()
    return nb_updated
