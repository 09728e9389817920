"""
Playlists gather versions to review them in a given order. Versions are
referenced by their codes, the order of the code list is the playing order.
"""
import logging

from sqlalchemy.exc import IntegrityError, StatementError

from shotline.app import db
from shotline.app.models.playlist import Playlist
from shotline.app.models.version import Version
from shotline.app.services import (
    deletion_service,
    project_access_service,
    projects_service,
    statuses_service,
)
from shotline.app.services.exception import (
    EntryAlreadyExistsException,
    PlaylistNotFoundException,
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


def get_playlist_raw(playlist_id):
    """
    Return given playlist as an active record.
    """
    try:
        playlist = Playlist.get(playlist_id)
    except StatementError:
        raise PlaylistNotFoundException()

    if playlist is None:
        raise PlaylistNotFoundException()
    return playlist


def get_playlist(playlist_id):
    return get_playlist_raw(playlist_id).serialize()


def get_full_playlist(playlist_id):
    """
    Return given playlist as a dictionary with its versions, in playing
    order. Codes of deleted versions are skipped.
    """
    playlist = get_playlist_raw(playlist_id)
    playlist_dict = playlist.serialize()
    codes = playlist.version_codes or []
    versions = {}
    if len(codes) > 0:
        versions = {
            version.code: version
            for version in Version.query.filter(Version.code.in_(codes))
        }
    playlist_dict["versions"] = [
        versions[code].serialize() for code in codes if code in versions
    ]
    return playlist_dict


def get_playlists(
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
    Return playlists of the projects the user can access. Results can be
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

    query = Playlist.query.filter(Playlist.project_id.in_(project_ids))
    if project_id is not None:
        query = query.filter(Playlist.project_id == project_id)
    if status_id is not None:
        query = query.filter(Playlist.status_id == status_id)
    if created_by is not None:
        query = query.filter(Playlist.created_by == created_by)
    if assigned_to is not None:
        query = query.filter(Playlist.assigned_to == assigned_to)
    query = query_utils.apply_text_search(
        query, search, Playlist.name, Playlist.code
    )
    query = query.order_by(Playlist.created_at.desc())
    return query_utils.get_paginated_results(query, page, limit)


def get_playlists_for_project(project_id):
    project = projects_service.get_project_raw(project_id)
    playlists = (
        Playlist.query.filter_by(project_id=project.id)
        .order_by(Playlist.created_at.desc())
        .all()
    )
    return fields.serialize_models(playlists)


def check_code_is_available(code, playlist_id=None):
    playlist = Playlist.get_by(code=code)
    if playlist is not None and str(playlist.id) != str(playlist_id):
        raise EntryAlreadyExistsException(
            f"A playlist with code {code} already exists."
        )


def check_version_codes(version_codes):
    """
    Raise a WrongParameterException if given codes contain duplicates or
    codes of versions that don't exist.
    """
    if len(set(version_codes)) != len(version_codes):
        raise WrongParameterException("A version can't be listed twice.")
    if len(version_codes) == 0:
        return version_codes
    nb_versions = Version.query.filter(Version.code.in_(version_codes)).count()
    if nb_versions != len(version_codes):
        raise WrongParameterException(
            "One or more versions do not exist.",
            dict={
                "missing": [
                    code
                    for code in version_codes
                    if Version.get_by(code=code) is None
                ]
            },
        )
    return version_codes


def create_playlist(
    project_id,
    code,
    name,
    created_by=None,
    description=None,
    version_codes=None,
    status_id=None,
    status=None,
    assigned_to=None,
):
    """
    Create a playlist for given project, empty or made of given versions.
    """
    project = projects_service.get_project_raw(project_id)
    check_code_is_available(code)
    version_codes = check_version_codes(list(version_codes or []))
    status_id = statuses_service.get_status_id(status_id, status)

    try:
        playlist = Playlist.create(
            project_id=project.id,
            code=code,
            name=name,
            description=description,
            version_codes=version_codes,
            status_id=status_id,
            status_updated_at=date_helpers.get_utc_now_datetime(),
            created_by=created_by,
            assigned_to=assigned_to,
        )
    except IntegrityError:
        raise EntryAlreadyExistsException(
            f"A playlist with code {code} already exists."
        )

    playlist_dict = playlist.serialize()
    events.emit(
        "playlist:new",
        {"playlist_id": playlist_dict["id"]},
        project_id=project.id,
    )
    return playlist_dict


def update_playlist(playlist_id, data):
    """
    Update playlist with given data. A new list of version codes replaces
    the current one.
    """
    playlist = get_playlist_raw(playlist_id)
    if "code" in data:
        check_code_is_available(data["code"], playlist.id)
    if data.get("project_id") is not None:
        data["project_id"] = projects_service.get_project_raw(
            data["project_id"]
        ).id
    elif "project_id" in data:
        del data["project_id"]
    if "version_codes" in data:
        data["version_codes"] = check_version_codes(
            list(data["version_codes"] or [])
        )
    if "status" in data:
        data["status_id"] = statuses_service.get_status_id(
            data.get("status_id"), data.pop("status")
        )
    elif data.get("status_id") is not None:
        data["status_id"] = statuses_service.get_status_id(data["status_id"])
    if "status_id" in data and str(data["status_id"]) != str(
        playlist.status_id
    ):
        data["status_updated_at"] = date_helpers.get_utc_now_datetime()

    try:
        playlist.update(data)
    except IntegrityError:
        raise EntryAlreadyExistsException(
            f"A playlist with code {data.get('code')} already exists."
        )
    return emit_update(playlist)


def emit_update(playlist):
    events.emit(
        "playlist:update",
        {"playlist_id": str(playlist.id)},
        project_id=playlist.project_id,
    )
    return playlist.serialize()


def add_version(playlist_id, version_code, position=None):
    """
    Insert given version in the playlist, at given position or at the end.
    Out of range positions append the version.
    """
    playlist = get_playlist_raw(playlist_id)
    if Version.get_by(code=version_code) is None:
        raise VersionNotFoundException(
            f"Version {version_code} does not exist."
        )
    version_codes = list(playlist.version_codes or [])
    if version_code in version_codes:
        raise WrongParameterException(
            f"Version {version_code} is already in playlist {playlist.code}."
        )
    if position is not None and 0 <= position <= len(version_codes):
        version_codes.insert(position, version_code)
    else:
        version_codes.append(version_code)
    playlist.update({"version_codes": version_codes})
    return emit_update(playlist)


def remove_version(playlist_id, version_code):
    """
    Remove given version from the playlist. Nothing changes if the version
    is not listed.
    """
    playlist = get_playlist_raw(playlist_id)
    version_codes = [
        code for code in playlist.version_codes or [] if code != version_code
    ]
    playlist.update({"version_codes": version_codes})
    return emit_update(playlist)


def reorder_versions(playlist_id, version_codes):
    """
    Replace the version list of the playlist with given ordered codes. Every
    code must match an existing version.
    """
    playlist = get_playlist_raw(playlist_id)
    version_codes = check_version_codes(list(version_codes))
    playlist.update({"version_codes": version_codes})
    return emit_update(playlist)


def remove_playlist(playlist_id):
    """
    Delete given playlist with the versions and notes attached to it. The
    versions it lists are kept.
    """
    playlist = get_playlist_raw(playlist_id)
    playlist_dict = playlist.serialize()
    try:
        deletion_service.remove_playlists_no_commit([playlist.id])
        db.session.commit()
    except BaseException:
        db.session.rollback()
        logger.error(
            f"Playlist {playlist_id} could not be deleted.", exc_info=1
        )
        raise
    events.emit(
        "playlist:delete",
        {"playlist_id": playlist_dict["id"]},
        project_id=playlist_dict["project_id"],
    )
    return playlist_dict
