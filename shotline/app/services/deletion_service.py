"""
Removal of the data depending on an entity being deleted. Functions of this
module don't commit: callers delete the entity itself and commit everything
in one transaction.
"""
from shotline.app import db
from shotline.app.models.asset import Asset
from shotline.app.models.episode import Episode
from shotline.app.models.note import Note
from shotline.app.models.playlist import Playlist
from shotline.app.models.project import Project
from shotline.app.models.project_permission import ProjectPermission
from shotline.app.models.sequence import Sequence
from shotline.app.models.shot import Shot
from shotline.app.models.version import Version

PERSON_REFERENCES = [
    (Project, ["created_by"]),
    (Episode, ["created_by", "assigned_to"]),
    (Sequence, ["created_by", "assigned_to"]),
    (Shot, ["created_by", "assigned_to"]),
    (Asset, ["created_by", "assigned_to"]),
    (Version, ["created_by", "assigned_to"]),
    (Note, ["created_by", "assigned_to"]),
    (Playlist, ["created_by", "assigned_to"]),
]


def clear_person_references_no_commit(person_id):
    """
    Remove permissions of given person and unset every creator or assignee
    field pointing to it.
    """
    ProjectPermission.delete_all_by_no_commit(person_id=person_id)
    for model, columns in PERSON_REFERENCES:
        for column in columns:
            model.query.filter(getattr(model, column) == person_id).update(
                {column: None}, synchronize_session="fetch"
            )


def remove_notes_no_commit(link_type, link_ids):
    if len(link_ids) > 0:
        Note.delete_all_by_no_commit(
            Note.link_type == link_type, Note.link_id.in_(link_ids)
        )


def remove_versions_no_commit(entity_type, entity_ids):
    """
    Delete versions made for given entities, with the notes left on them.
    """
    if len(entity_ids) == 0:
        return
    version_ids = [
        version_id
        for (version_id,) in db.session.query(Version.id).filter(
            Version.entity_type == entity_type,
            Version.entity_id.in_(entity_ids),
        )
    ]
    remove_notes_no_commit("version", version_ids)
    if len(version_ids) > 0:
        Version.delete_all_by_no_commit(Version.id.in_(version_ids))


def remove_entity_links_no_commit(entity_type, entity_ids):
    """
    Delete versions and notes attached to given entities.
    """
    remove_versions_no_commit(entity_type, entity_ids)
    remove_notes_no_commit(entity_type, entity_ids)


def remove_shots_no_commit(shot_ids):
    if len(shot_ids) > 0:
        remove_entity_links_no_commit("shot", shot_ids)
        Shot.delete_all_by_no_commit(Shot.id.in_(shot_ids))


def remove_sequences_no_commit(sequence_ids):
    """
    Delete given sequences with their shots, versions and notes.
    """
    if len(sequence_ids) == 0:
        return
    shot_ids = [
        shot_id
        for (shot_id,) in db.session.query(Shot.id).filter(
            Shot.sequence_id.in_(sequence_ids)
        )
    ]
    remove_shots_no_commit(shot_ids)
    remove_entity_links_no_commit("sequence", sequence_ids)
    Sequence.delete_all_by_no_commit(Sequence.id.in_(sequence_ids))


def remove_episodes_no_commit(episode_ids):
    """
    Delete given episodes with their sequences, shots, versions and notes.
    """
    if len(episode_ids) == 0:
        return
    sequence_ids = [
        sequence_id
        for (sequence_id,) in db.session.query(Sequence.id).filter(
            Sequence.episode_id.in_(episode_ids)
        )
    ]
    remove_sequences_no_commit(sequence_ids)
    remove_entity_links_no_commit("episode", episode_ids)
    Episode.delete_all_by_no_commit(Episode.id.in_(episode_ids))


def remove_assets_no_commit(asset_ids):
    if len(asset_ids) > 0:
        remove_entity_links_no_commit("asset", asset_ids)
        Asset.delete_all_by_no_commit(Asset.id.in_(asset_ids))


def remove_playlists_no_commit(playlist_ids):
    if len(playlist_ids) > 0:
        remove_entity_links_no_commit("playlist", playlist_ids)
        Playlist.delete_all_by_no_commit(Playlist.id.in_(playlist_ids))


def remove_project_content_no_commit(project_id):
    """
    Delete everything a project contains: episodes and their children,
    assets, playlists, versions and notes.
    """
    episode_ids = [
        episode_id
        for (episode_id,) in db.session.query(Episode.id).filter(
            Episode.project_id == project_id
        )
    ]
    remove_episodes_no_commit(episode_ids)
    asset_ids = [
        asset_id
        for (asset_id,) in db.session.query(Asset.id).filter(
            Asset.project_id == project_id
        )
    ]
    remove_assets_no_commit(asset_ids)
    playlist_ids = [
        playlist_id
        for (playlist_id,) in db.session.query(Playlist.id).filter(
            Playlist.project_id == project_id
        )
    ]
    remove_playlists_no_commit(playlist_ids)
    remove_entity_links_no_commit("project", [project_id])
