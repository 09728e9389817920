from flask import Blueprint
from shotline.app.utils.api import configure_api_from_blueprint

from shotline.app.blueprints.shots.resources import (
    EpisodeDurationResource,
    EpisodeResource,
    EpisodeSequencesResource,
    EpisodesResource,
    ProjectEpisodesResource,
    SequenceResource,
    SequenceShotsResource,
    SequencesResource,
    ShotResource,
    ShotsResource,
)

routes = [
    ("/data/projects/<project_id>/episodes", ProjectEpisodesResource),
    ("/data/episodes", EpisodesResource),
    ("/data/episodes/<episode_id>", EpisodeResource),
    ("/data/episodes/<episode_id>/duration", EpisodeDurationResource),
    ("/data/episodes/<episode_id>/sequences", EpisodeSequencesResource),
    ("/data/sequences", SequencesResource),
    ("/data/sequences/<sequence_id>", SequenceResource),
    ("/data/sequences/<sequence_id>/shots", SequenceShotsResource),
    ("/data/shots", ShotsResource),
    ("/data/shots/<shot_id>", ShotResource),
]

blueprint = Blueprint("shots", "shots")
api = configure_api_from_blueprint(blueprint, routes)
