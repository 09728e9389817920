from sqlalchemy import text

from tests.base import ApiDBTestCase

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
from shotline.app.services import projects_service


class DeletionServiceTestCase(ApiDBTestCase):
    def setUp(self):
        super(DeletionServiceTestCase, self).setUp()
        self.generate_fixture_project()
        self.generate_fixture_permission(
            self.user_id, self.project_id, "owner"
        )
        self.generate_fixture_episode()
        self.generate_fixture_sequence()
        self.generate_fixture_shot()
        self.generate_fixture_version("SH010_V001")
        self.generate_fixture_note()
        self.generate_fixture_asset()
        self.generate_fixture_version(
            "SCRIPT_V001", entity_type="asset", entity_id=self.asset.id
        )
        self.generate_fixture_playlist(version_codes=["SH010_V001"])
        self.generate_fixture_note(
            link_type="playlist", link_id=self.playlist.id, subject="Pacing"
        )
        self.generate_fixture_note(
            link_type="project", link_id=self.project.id, subject="Budget"
        )

    def test_remove_project_content(self):
        other_project = self.generate_fixture_project("PROJ_2", "Project 2")
        self.generate_fixture_asset("SCRIPT_PROJ_2", "Script")
        first_project_id = self.project_id

        db.session.execute(text("PRAGMA foreign_keys=ON"))
        try:
            projects_service.remove_project(first_project_id)
        finally:
            db.session.rollback()
            db.engine.dispose()

        self.assertIsNone(Project.get(first_project_id))
        for model in [Episode, Sequence, Shot, Version, Note, Playlist]:
            self.assertEqual(model.query.count(), 0)
        self.assertEqual(ProjectPermission.query.count(), 0)
        self.assertEqual(
            [asset.project_id for asset in Asset.query.all()],
            [other_project.id],
        )
