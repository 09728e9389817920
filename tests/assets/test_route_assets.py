from tests.base import ApiDBTestCase

from shotline.app.models.asset import Asset


class AssetTestCase(ApiDBTestCase):
    def setUp(self):
        super(AssetTestCase, self).setUp()
        self.generate_fixture_project()
        self.generate_fixture_person()
        self.member_email = self.person.email
        self.assets_path = "data/projects/%s/assets" % self.project_id

    def test_create_asset(self):
        asset = self.post(
            self.assets_path,
            {"code": "SUBS_EP01", "name": "Subtitles", "asset_type": "json"},
        )
        self.assertEqual(asset["asset_type"], "json")
        self.assertEqual(asset["project_id"], self.project_id)
        asset = self.post(
            self.assets_path, {"code": "NOTES_EP01", "name": "Notes"}
        )
        self.assertEqual(asset["asset_type"], "txt")
        self.post(self.assets_path, {"code": "NOTES_EP01", "name": "N"}, 409)
        self.post(
            self.assets_path,
            {"code": "VIDEO_EP01", "name": "Video", "asset_type": "video"},
            400,
        )
        self.post(
            "data/projects/wrong-id/assets",
            {"code": "VIDEO_EP01", "name": "Video"},
            404,
        )

    def test_get_assets(self):
        self.generate_fixture_asset("SCRIPT_EP01", "Script")
        self.generate_fixture_asset("SCRIPT_EP02", "Script")
        self.assertEqual(len(self.get(self.assets_path)), 2)
        assets = self.get("data/assets?search=ep02")
        self.assertEqual([a["code"] for a in assets], ["SCRIPT_EP02"])
        assets = self.get("data/assets?asset_type=prompt")
        self.assertEqual(assets, [])
        asset = self.get("data/assets/%s" % self.asset_id)
        self.assertEqual(asset["code"], "SCRIPT_EP02")
        self.get_404("data/assets/wrong-id")

    def test_asset_access(self):
        self.generate_fixture_asset()
        asset_path = "data/assets/%s" % self.asset_id
        self.log_in(self.member_email)
        self.get(asset_path, 403)
        self.assertEqual(self.get("data/assets"), [])

        self.log_in_admin()
        self.generate_fixture_permission(
            self.person_id, self.project_id, "viewer"
        )
        self.log_in(self.member_email)
        self.assertEqual(len(self.get(self.assets_path)), 1)
        self.post(self.assets_path, {"code": "TXT_01", "name": "Text"}, 403)
        self.put(asset_path, {"name": "Script 2"}, 403)
        self.delete(asset_path, 403)

    def test_update_asset(self):
        self.generate_fixture_asset()
        asset = self.put(
            "data/assets/%s" % self.asset_id,
            {"name": "Final script", "asset_type": "txt"},
        )
        self.assertEqual(asset["name"], "Final script")
        self.assertEqual(asset["asset_type"], "txt")
        self.put(
            "data/assets/%s" % self.asset_id, {"asset_type": "video"}, 400
        )

    def test_move_asset_to_other_project(self):
        self.generate_fixture_asset()
        self.generate_fixture_permission(
            self.person_id, self.project_id, "contributor"
        )
        other_project = self.generate_fixture_project("PROJ_2", "Project 2")
        self.log_in(self.member_email)
        self.put(
            "data/assets/%s" % self.asset_id,
            {"project_id": str(other_project.id)},
            403,
        )

    def test_delete_asset(self):
        self.generate_fixture_asset()
        self.delete("data/assets/%s" % self.asset_id)
        self.assertIsNone(Asset.get(self.asset_id))
        self.delete_404("data/assets/%s" % self.asset_id)
