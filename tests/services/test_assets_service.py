from tests.base import ApiDBTestCase

from shotline.app.models.note import Note
from shotline.app.models.version import Version
from shotline.app.services import assets_service, persons_service
from shotline.app.services.exception import (
    AssetNotFoundException,
    EntryAlreadyExistsException,
    ProjectNotFoundException,
)


class AssetsServiceTestCase(ApiDBTestCase):
    def setUp(self):
        super(AssetsServiceTestCase, self).setUp()
        self.generate_fixture_project()

    def test_create_asset(self):
        asset = assets_service.create_asset(
            self.project_id, "SCRIPT_EP01", "Script", asset_type=None
        )
        self.assertEqual(asset["asset_type"], "txt")
        self.assertEqual(asset["project_id"], self.project_id)
        asset = assets_service.create_asset(
            self.project_id, "SUBS_EP01", "Subtitles", "subtitles_en"
        )
        self.assertEqual(asset["asset_type"], "subtitles_en")
        self.assertRaises(
            EntryAlreadyExistsException,
            assets_service.create_asset,
            self.project_id,
            "SUBS_EP01",
            "Subtitles",
        )
        self.assertRaises(
            ProjectNotFoundException,
            assets_service.create_asset,
            "wrong-id",
            "SUBS_EP02",
            "Subtitles",
        )

    def test_get_assets(self):
        self.generate_fixture_asset("SCRIPT_EP01", "Script")
        self.generate_fixture_asset("SCRIPT_EP02", "Script")
        assets_service.update_asset(self.asset_id, {"asset_type": "prompt"})
        self.generate_fixture_person()
        member_context = persons_service.get_user_context(self.person)
        self.assertEqual(assets_service.get_assets(member_context), [])
        self.generate_fixture_permission(
            self.person_id, self.project_id, "viewer"
        )
        self.assertEqual(len(assets_service.get_assets(member_context)), 2)
        assets = assets_service.get_assets(
            member_context, asset_type="prompt"
        )
        self.assertEqual([a["code"] for a in assets], ["SCRIPT_EP02"])
        assets = assets_service.get_assets_for_project(self.project_id)
        self.assertEqual(
            [a["asset_type"] for a in assets], ["director_script", "prompt"]
        )

    def test_update_asset(self):
        self.generate_fixture_asset()
        other_project = self.generate_fixture_project("PROJ_2", "Project 2")
        asset = assets_service.update_asset(
            self.asset_id, {"name": "Final script", "project_id": None}
        )
        self.assertEqual(asset["name"], "Final script")
        asset = assets_service.update_asset(
            self.asset_id, {"project_id": other_project.id}
        )
        self.assertEqual(asset["project_id"], str(other_project.id))

    def test_remove_asset(self):
        self.generate_fixture_asset()
        self.generate_fixture_version(
            entity_type="asset", entity_id=self.asset.id
        )
        self.generate_fixture_note()
        assets_service.remove_asset(self.asset_id)
        self.assertRaises(
            AssetNotFoundException, assets_service.get_asset, self.asset_id
        )
        self.assertEqual(Version.query.count(), 0)
        self.assertEqual(Note.query.count(), 0)
