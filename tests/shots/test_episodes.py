from tests.base import ApiDBTestCase

from shotline.app.models.episode import Episode


class EpisodeTestCase(ApiDBTestCase):
    def setUp(self):
        super(EpisodeTestCase, self).setUp()
        self.generate_fixture_project()
        self.generate_fixture_episode("EP01")
        self.generate_fixture_sequence("EP01_SQ01", duration=100)
        self.generate_fixture_sequence("EP01_SQ02", duration=200)
        self.generate_fixture_sequence("EP01_SQ03")
        self.generate_fixture_person()
        self.member_email = self.person.email
        self.main_project_id = self.project_id

    def log_in_with_role(self, role):
        self.generate_fixture_permission(
            self.person_id, self.main_project_id, role
        )
        self.log_in(self.member_email)

    def test_get_project_episodes(self):
        self.generate_fixture_episode("EP02", "Episode 2")
        episodes = self.get("data/projects/%s/episodes" % self.project_id)
        self.assertEqual(len(episodes), 2)
        self.assertEqual(episodes[0]["type"], "Episode")
        self.get_404("data/projects/wrong-id/episodes")

    def test_get_project_episodes_access(self):
        self.log_in(self.member_email)
        self.get("data/projects/%s/episodes" % self.project_id, 403)
        self.log_in_admin()
        self.generate_fixture_permission(
            self.person_id, self.project_id, "viewer"
        )
        self.log_in(self.member_email)
        self.get("data/projects/%s/episodes" % self.project_id)

    def test_create_episode(self):
        self.log_in_with_role("contributor")
        episode = self.post(
            "data/projects/%s/episodes" % self.project_id,
            {"code": "EP02", "name": "Episode 2", "ep_number": 2},
        )
        self.assertEqual(episode["code"], "EP02")
        self.assertEqual(episode["duration"], 0)
        self.assertEqual(episode["created_by"], self.person_id)
        self.assertEqual(episode["project_id"], self.project_id)

    def test_create_episode_errors(self):
        path = "data/projects/%s/episodes" % self.project_id
        self.post(path, {"code": "EP01", "name": "Episode 1"}, 409)
        self.post(path, {"name": "Episode 1"}, 400)
        self.post(path, {"code": "EP02", "name": "Ep", "ep_number": -1}, 400)

    def test_create_episode_as_viewer(self):
        self.log_in_with_role("viewer")
        self.post(
            "data/projects/%s/episodes" % self.project_id,
            {"code": "EP02", "name": "Episode 2"},
            403,
        )

    def test_get_episode(self):
        episode = self.get("data/episodes/%s" % self.episode_id)
        self.assertEqual(episode["code"], "EP01")
        self.assertEqual(len(episode["sequences"]), 3)
        self.get_404("data/episodes/wrong-id")

    def test_get_episodes(self):
        other_project = self.generate_fixture_project("PROJ_2", "Project Two")
        self.generate_fixture_episode("EP02", "Episode 2")
        self.assertEqual(len(self.get("data/episodes")), 2)
        episodes = self.get("data/episodes?project_id=%s" % other_project.id)
        self.assertEqual([e["code"] for e in episodes], ["EP02"])
        episodes = self.get("data/episodes?search=ep01")
        self.assertEqual([e["code"] for e in episodes], ["EP01"])

        self.log_in(self.member_email)
        self.assertEqual(self.get("data/episodes"), [])
        self.log_in_admin()
        self.generate_fixture_permission(
            self.person_id, str(other_project.id), "viewer"
        )
        self.log_in(self.member_email)
        episodes = self.get("data/episodes")
        self.assertEqual([e["code"] for e in episodes], ["EP02"])

    def test_update_episode(self):
        self.log_in_with_role("contributor")
        episode = self.put(
            "data/episodes/%s" % self.episode_id,
            {"name": "Pilot", "cut_order": 1},
        )
        self.assertEqual(episode["name"], "Pilot")
        self.assertEqual(episode["cut_order"], 1)

    def test_update_episode_as_viewer(self):
        self.log_in_with_role("viewer")
        self.put("data/episodes/%s" % self.episode_id, {"name": "Pilot"}, 403)

    def test_move_episode_to_other_project(self):
        other_project = self.generate_fixture_project("PROJ_2", "Project Two")
        other_project_id = str(other_project.id)
        self.log_in_with_role("contributor")
        self.put(
            "data/episodes/%s" % self.episode_id,
            {"project_id": other_project_id},
            403,
        )
        self.log_in_admin()
        self.generate_fixture_permission(
            self.person_id, other_project_id, "contributor"
        )
        self.log_in(self.member_email)
        episode = self.put(
            "data/episodes/%s" % self.episode_id,
            {"project_id": other_project_id},
        )
        self.assertEqual(episode["project_id"], other_project_id)

    def test_delete_episode(self):
        self.log_in_with_role("contributor")
        self.delete("data/episodes/%s" % self.episode_id)
        self.assertIsNone(Episode.get(self.episode_id))
        self.delete_404("data/episodes/%s" % self.episode_id)

    def test_get_episode_duration(self):
        episode = self.get("data/episodes/%s/duration" % self.episode_id)
        self.assertEqual(episode["duration"], 300)
        self.log_in(self.member_email)
        self.get("data/episodes/%s/duration" % self.episode_id, 403)

    def test_get_episode_sequences(self):
        sequences = self.get("data/episodes/%s/sequences" % self.episode_id)
        self.assertEqual(len(sequences), 3)
        self.assertEqual(sequences[0]["type"], "Sequence")
