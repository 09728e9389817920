from tests.base import ApiDBTestCase

from shotline.app.models.version import Version
from shotline.app.services import persons_service, playlists_service
from shotline.app.services.exception import (
    EntryAlreadyExistsException,
    PlaylistNotFoundException,
    ProjectNotFoundException,
    VersionNotFoundException,
    WrongParameterException,
)


class PlaylistsServiceTestCase(ApiDBTestCase):
    def setUp(self):
        super(PlaylistsServiceTestCase, self).setUp()
        self.generate_fixture_project()
        self.generate_fixture_episode()
        self.generate_fixture_sequence()
        self.generate_fixture_shot()
        self.generate_fixture_version("V001", version_number=1)
        self.generate_fixture_version("V002", version_number=2)
        self.generate_fixture_version("V003", version_number=3)

    def get_version_codes(self, playlist_id):
        return playlists_service.get_playlist(playlist_id)["version_codes"]

    def test_create_playlist(self):
        playlist = playlists_service.create_playlist(
            self.project_id, "DAILIES_01", "Dailies", created_by=self.user_id
        )
        self.assertEqual(playlist["version_codes"], [])
        self.assertEqual(playlist["project_id"], self.project_id)
        playlist = playlists_service.create_playlist(
            self.project_id,
            "DAILIES_02",
            "Dailies",
            version_codes=["V002", "V001"],
        )
        self.assertEqual(playlist["version_codes"], ["V002", "V001"])

    def test_create_playlist_errors(self):
        playlists_service.create_playlist(self.project_id, "DAILIES", "D")
        self.assertRaises(
            EntryAlreadyExistsException,
            playlists_service.create_playlist,
            self.project_id,
            "DAILIES",
            "D",
        )
        self.assertRaises(
            ProjectNotFoundException,
            playlists_service.create_playlist,
            "wrong-id",
            "DAILIES_02",
            "D",
        )
        self.assertRaises(
            WrongParameterException,
            playlists_service.create_playlist,
            self.project_id,
            "DAILIES_02",
            "D",
            version_codes=["V001", "V999"],
        )
        self.assertRaises(
            WrongParameterException,
            playlists_service.create_playlist,
            self.project_id,
            "DAILIES_02",
            "D",
            version_codes=["V001", "V001"],
        )

    def test_add_version(self):
        self.generate_fixture_playlist(version_codes=["V001"])
        playlists_service.add_version(self.playlist_id, "V002")
        self.assertEqual(
            self.get_version_codes(self.playlist_id), ["V001", "V002"]
        )
        playlists_service.add_version(self.playlist_id, "V003", 0)
        self.assertEqual(
            self.get_version_codes(self.playlist_id), ["V003", "V001", "V002"]
        )
        self.assertRaises(
            WrongParameterException,
            playlists_service.add_version,
            self.playlist_id,
            "V001",
        )
        self.assertRaises(
            VersionNotFoundException,
            playlists_service.add_version,
            self.playlist_id,
            "V999",
        )

    def test_add_version_out_of_range(self):
        self.generate_fixture_playlist(version_codes=["V001"])
        playlists_service.add_version(self.playlist_id, "V002", 12)
        self.assertEqual(
            self.get_version_codes(self.playlist_id), ["V001", "V002"]
        )

    def test_remove_version(self):
        self.generate_fixture_playlist(version_codes=["V001", "V002"])
        playlists_service.remove_version(self.playlist_id, "V001")
        self.assertEqual(self.get_version_codes(self.playlist_id), ["V002"])
        playlists_service.remove_version(self.playlist_id, "V999")
        self.assertEqual(self.get_version_codes(self.playlist_id), ["V002"])
        self.assertIsNotNone(Version.get_by(code="V001"))

    def test_reorder_versions(self):
        self.generate_fixture_playlist(version_codes=["V001", "V002"])
        playlists_service.reorder_versions(
            self.playlist_id, ["V003", "V002", "V001"]
        )
        self.assertEqual(
            self.get_version_codes(self.playlist_id), ["V003", "V002", "V001"]
        )
        self.assertRaises(
            WrongParameterException,
            playlists_service.reorder_versions,
            self.playlist_id,
            ["V001", "V999"],
        )
        self.assertEqual(
            self.get_version_codes(self.playlist_id), ["V003", "V002", "V001"]
        )

    def test_get_full_playlist(self):
        self.generate_fixture_playlist(version_codes=["V003", "V001"])
        Version.get_by(code="V001").delete()
        playlist = playlists_service.get_full_playlist(self.playlist_id)
        self.assertEqual(
            [version["code"] for version in playlist["versions"]], ["V003"]
        )
        self.assertRaises(
            PlaylistNotFoundException,
            playlists_service.get_full_playlist,
            "wrong-id",
        )

    def test_get_playlists(self):
        self.generate_fixture_playlist("DAILIES_01")
        self.generate_fixture_playlist("REVIEW_01", "Client review")
        self.generate_fixture_person()
        member_context = persons_service.get_user_context(self.person)
        self.assertEqual(playlists_service.get_playlists(member_context), [])
        self.generate_fixture_permission(
            self.person_id, self.project_id, "viewer"
        )
        playlists = playlists_service.get_playlists(
            member_context, project_id=self.project_id
        )
        self.assertEqual(len(playlists), 2)
        playlists = playlists_service.get_playlists(
            member_context, search="client"
        )
        self.assertEqual([p["code"] for p in playlists], ["REVIEW_01"])

    def test_update_and_remove_playlist(self):
        self.generate_fixture_playlist()
        playlist = playlists_service.update_playlist(
            self.playlist_id, {"name": "Dailies 2", "version_codes": ["V002"]}
        )
        self.assertEqual(playlist["name"], "Dailies 2")
        self.assertEqual(playlist["version_codes"], ["V002"])
        self.assertRaises(
            WrongParameterException,
            playlists_service.update_playlist,
            self.playlist_id,
            {"version_codes": ["V999"]},
        )
        playlists_service.remove_playlist(self.playlist_id)
        self.assertRaises(
            PlaylistNotFoundException,
            playlists_service.get_playlist,
            self.playlist_id,
        )
        self.assertEqual(Version.query.count(), 3)
