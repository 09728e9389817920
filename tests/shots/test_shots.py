from tests.base import ApiDBTestCase

from shotline.app.models.shot import Shot
from shotline.app.models.version import Version


class ShotTestCase(ApiDBTestCase):
    def setUp(self):
        super(ShotTestCase, self).setUp()
        self.generate_fixture_project()
        self.generate_fixture_episode()
        self.generate_fixture_sequence(duration=100)
        self.generate_fixture_person()
        self.member_email = self.person.email
        self.shots_path = "data/sequences/%s/shots" % self.sequence_id

    def test_create_shot(self):
        shot = self.post(
            self.shots_path,
            {
                "code": "EP01_SQ01_SH010",
                "name": "Wide establishing",
                "sequence_number": 10,
                "shot_type": "establishing",
                "duration": 96,
            },
        )
        self.assertEqual(shot["sequence_id"], self.sequence_id)
        self.assertEqual(shot["created_by"], self.user_id)
        sequence = self.get("data/sequences/%s" % self.sequence_id)
        self.assertEqual(sequence["duration"], 100)
        self.post(
            self.shots_path,
            {"code": "EP01_SQ01_SH010", "name": "Shot", "sequence_number": 20},
            409,
        )
        self.post(
            self.shots_path,
            {"code": "EP01_SQ01_SH020", "name": "Shot", "shot_type": "wide"},
            400,
        )
        self.post(
            "data/sequences/wrong-id/shots",
            {"code": "EP01_SQ01_SH020", "name": "Shot", "sequence_number": 20},
            404,
        )

    def test_shot_access(self):
        self.generate_fixture_shot()
        shot_path = "data/shots/%s" % self.shot_id
        self.log_in(self.member_email)
        self.get(shot_path, 403)
        self.get(self.shots_path, 403)
        self.assertEqual(self.get("data/shots"), [])

        self.log_in_admin()
        self.generate_fixture_permission(
            self.person_id, self.project_id, "viewer"
        )
        self.log_in(self.member_email)
        self.assertEqual(self.get(shot_path)["code"], "EP01_SQ01_SH010")
        self.assertEqual(len(self.get("data/shots")), 1)
        self.post(
            self.shots_path,
            {"code": "EP01_SQ01_SH020", "name": "Shot", "sequence_number": 20},
            403,
        )
        self.put(shot_path, {"name": "Shot"}, 403)
        self.delete(shot_path, 403)

    def test_get_shots(self):
        self.generate_fixture_shot("EP01_SQ01_SH020", sequence_number=20)
        self.generate_fixture_shot("EP01_SQ01_SH010", sequence_number=10)
        shots = self.get(self.shots_path)
        self.assertEqual(
            [shot["code"] for shot in shots],
            ["EP01_SQ01_SH010", "EP01_SQ01_SH020"],
        )
        shots = self.get("data/shots?sequence_id=%s" % self.sequence_id)
        self.assertEqual(len(shots), 2)
        shots = self.get("data/shots?search=sh02")
        self.assertEqual([s["code"] for s in shots], ["EP01_SQ01_SH020"])
        result = self.get("data/shots?page=1&limit=1")
        self.assertEqual(result["total"], 2)
        self.get("data/shots?sequence_id=wrong-id", 400)

    def test_get_shot(self):
        self.generate_fixture_shot()
        self.generate_fixture_note(link_type="shot", link_id=self.shot.id)
        shot = self.get("data/shots/%s" % self.shot_id)
        self.assertEqual(shot["project_id"], self.project_id)
        self.assertEqual(shot["episode_id"], self.episode_id)
        self.assertEqual(shot["notes"][0]["subject"], "Timing")
        self.get_404("data/shots/wrong-id")

    def test_move_shot_to_other_project(self):
        self.generate_fixture_shot()
        self.generate_fixture_permission(
            self.person_id, self.project_id, "contributor"
        )
        self.generate_fixture_project("PROJ_2", "Project Two")
        self.generate_fixture_episode("EP02", "Episode 2")
        self.generate_fixture_sequence("EP02_SQ01", "Sequence 1")
        self.log_in(self.member_email)
        self.put(
            "data/shots/%s" % self.shot_id,
            {"sequence_id": self.sequence_id},
            403,
        )
        self.log_in_admin()
        shot = self.put(
            "data/shots/%s" % self.shot_id, {"sequence_id": self.sequence_id}
        )
        self.assertEqual(shot["sequence_id"], self.sequence_id)

    def test_delete_shot(self):
        self.generate_fixture_shot()
        self.generate_fixture_version()
        self.generate_fixture_permission(
            self.person_id, self.project_id, "contributor"
        )
        self.log_in(self.member_email)
        self.delete("data/shots/%s" % self.shot_id)
        self.assertIsNone(Shot.get(self.shot_id))
        self.assertEqual(Version.query.count(), 0)
        self.delete_404("data/shots/%s" % self.shot_id)
