from tests.base import ApiDBTestCase

from shotline.app.models.episode import Episode
from shotline.app.models.project import Project
from shotline.app.models.project_permission import ProjectPermission
from shotline.app.models.sequence import Sequence


class ProjectRoutesTestCase(ApiDBTestCase):
    def setUp(self):
        super(ProjectRoutesTestCase, self).setUp()
        self.generate_fixture_status()
        self.generate_fixture_person()
        self.member_email = self.person.email

    def create_project_as_member(self, code="PROJ_1", name="Project One"):
        self.log_in(self.member_email)
        return self.post("data/projects", {"code": code, "name": name})

    def test_create_project(self):
        project = self.create_project_as_member()
        self.assertEqual(project["code"], "PROJ_1")
        self.assertEqual(project["created_by"], self.person_id)
        self.assertEqual(project["type"], "Project")
        permission = self.get_permission_dict(self.person_id, project["id"])
        self.assertEqual(permission["role"], "owner")

    def test_create_project_with_dates_and_status(self):
        project = self.post(
            "data/projects",
            {
                "code": "PROJ_1",
                "name": "Project One",
                "client_name": "Big Client",
                "start_date": "2024-01-15",
                "end_date": "2024-12-15",
                "status": "wip",
            },
        )
        self.assertEqual(project["start_date"], "2024-01-15")
        self.assertEqual(project["end_date"], "2024-12-15")
        self.assertEqual(project["status_id"], self.status_id)

    def test_create_project_errors(self):
        self.post("data/projects", {"code": "PROJ_1", "name": "Project One"})
        self.post(
            "data/projects", {"code": "PROJ_1", "name": "Project One"}, 409
        )
        self.post("data/projects", {"name": "Project Two"}, 400)
        result = self.post(
            "data/projects",
            {
                "code": "PROJ_2",
                "name": "Project Two",
                "start_date": "2024-12-15",
                "end_date": "2024-01-15",
            },
            400,
        )
        self.assertTrue(result["error"])
        self.post(
            "data/projects",
            {"code": "PROJ_2", "name": "Project Two", "status": "unknown"},
            404,
        )

    def test_get_projects(self):
        self.create_project_as_member("PROJ_1", "Project One")
        self.log_in_admin()
        self.post("data/projects", {"code": "PROJ_2", "name": "Project Two"})

        projects = self.get("data/projects")
        self.assertEqual(len(projects), 2)

        self.log_in(self.member_email)
        projects = self.get("data/projects")
        self.assertEqual(len(projects), 1)
        self.assertEqual(projects[0]["code"], "PROJ_1")

    def test_get_projects_filters(self):
        self.post(
            "data/projects",
            {"code": "PROJ_1", "name": "Alpha", "client_name": "Big Client"},
        )
        self.post(
            "data/projects",
            {"code": "PROJ_2", "name": "Beta", "status": "wip"},
        )
        projects = self.get("data/projects?search=alp")
        self.assertEqual([p["code"] for p in projects], ["PROJ_1"])
        projects = self.get("data/projects?client_name=big")
        self.assertEqual([p["code"] for p in projects], ["PROJ_1"])
        projects = self.get("data/projects?status_id=%s" % self.status_id)
        self.assertEqual([p["code"] for p in projects], ["PROJ_2"])
        self.get("data/projects?status_id=wrong-id", 400)

        result = self.get("data/projects?page=1&limit=1")
        self.assertEqual(result["total"], 2)
        self.assertEqual(result["nb_pages"], 2)
        self.assertEqual(len(result["data"]), 1)

    def test_get_projects_without_access(self):
        self.post("data/projects", {"code": "PROJ_1", "name": "Project One"})
        self.log_in(self.member_email)
        self.assertEqual(self.get("data/projects"), [])
        result = self.get("data/projects?page=1")
        self.assertEqual(result["data"], [])
        self.assertEqual(result["total"], 0)

    def test_get_project(self):
        project = self.post(
            "data/projects", {"code": "PROJ_1", "name": "Project One"}
        )
        path = "data/projects/%s" % project["id"]
        self.assertEqual(self.get(path)["code"], "PROJ_1")
        self.get_404("data/projects/wrong-id")

        self.log_in(self.member_email)
        result = self.get(path, 403)
        self.assertEqual(
            result["message"], "You do not have access to this project"
        )
        self.generate_fixture_permission(
            self.person_id, project["id"], "viewer"
        )
        self.assertEqual(self.get(path)["id"], project["id"])

    def test_update_project(self):
        project = self.create_project_as_member()
        path = "data/projects/%s" % project["id"]
        project = self.put(path, {"name": "Renamed", "status": "wip"})
        self.assertEqual(project["name"], "Renamed")
        self.assertEqual(project["status_id"], self.status_id)

        self.log_in_admin()
        self.post("data/projects", {"code": "PROJ_2", "name": "Project Two"})
        self.put(path, {"code": "PROJ_2"}, 409)
        self.put(path, {"end_date": "2024-06-01"})
        self.put(path, {"start_date": "2025-01-01"}, 400)
        self.put(path, {"name": None}, 400)

    def test_update_project_roles(self):
        project = self.post(
            "data/projects", {"code": "PROJ_1", "name": "Project One"}
        )
        path = "data/projects/%s" % project["id"]
        self.generate_fixture_permission(
            self.person_id, project["id"], "viewer"
        )
        self.log_in(self.member_email)
        self.put(path, {"name": "Renamed"}, 403)
        ProjectPermission.get_by(
            person_id=self.person_id, project_id=project["id"]
        ).update({"role": "contributor"})
        self.put(path, {"name": "Renamed"}, 200)
        self.delete(path, 403)

    def test_delete_project(self):
        project = self.create_project_as_member()
        episode = self.post(
            "data/projects/%s/episodes" % project["id"],
            {"code": "EP01", "name": "Episode 1"},
        )
        self.post(
            "data/episodes/%s/sequences" % episode["id"],
            {"code": "EP01_SQ01", "name": "Sequence 1", "duration": 10},
        )
        self.delete("data/projects/%s" % project["id"])
        self.assertIsNone(Project.get(project["id"]))
        self.assertEqual(Episode.query.count(), 0)
        self.assertEqual(Sequence.query.count(), 0)
        self.assertEqual(
            ProjectPermission.query.filter_by(
                project_id=project["id"]
            ).count(),
            0,
        )
        self.delete_404("data/projects/%s" % project["id"])
