from tests.base import ApiDBTestCase


class ProjectPermissionRoutesTestCase(ApiDBTestCase):
    def setUp(self):
        super(ProjectPermissionRoutesTestCase, self).setUp()
        self.generate_fixture_person()
        self.owner_id = self.person_id
        self.owner_email = self.person.email
        self.generate_fixture_person(
            first_name="Ema", last_name="Doe", email="ema.doe@gmail.com"
        )
        self.member_id = self.person_id
        self.member_email = self.person.email

        self.log_in(self.owner_email)
        self.project = self.post(
            "data/projects", {"code": "PROJ_1", "name": "Project One"}
        )
        self.project_id = self.project["id"]
        self.permissions_path = "data/projects/%s/permissions" % self.project_id

    def permission_path(self, person_id):
        return "%s/%s" % (self.permissions_path, person_id)

    def test_get_permissions(self):
        project_permissions = self.get(self.permissions_path)
        self.assertEqual(len(project_permissions), 1)
        self.assertEqual(project_permissions[0]["role"], "owner")
        self.assertEqual(
            project_permissions[0]["person"]["full_name"], "John Doe"
        )
        self.assertNotIn("password", project_permissions[0]["person"])

    def test_grant_permission(self):
        permission = self.post(
            self.permissions_path,
            {"person_id": self.member_id, "role": "contributor"},
        )
        self.assertEqual(permission["role"], "contributor")
        self.assertEqual(permission["person_id"], self.member_id)
        self.assertEqual(len(self.get(self.permissions_path)), 2)

    def test_grant_permission_default_role(self):
        permission = self.post(
            self.permissions_path, {"person_id": self.member_id}
        )
        self.assertEqual(permission["role"], "viewer")

    def test_grant_permission_errors(self):
        self.post(self.permissions_path, {"person_id": self.member_id})
        result = self.post(
            self.permissions_path, {"person_id": self.member_id}, 409
        )
        self.assertEqual(
            result["message"], "User already has permission for this project"
        )
        self.post(
            self.permissions_path,
            {"person_id": "a24a6ea4-ce75-4665-a070-57453082c25f"},
            404,
        )
        self.post(
            self.permissions_path,
            {"person_id": self.member_id, "role": "admin"},
            400,
        )
        self.post(self.permissions_path, {"person_id": "wrong-id"}, 400)

    def test_permissions_require_owner(self):
        self.post(
            self.permissions_path,
            {"person_id": self.member_id, "role": "contributor"},
        )
        self.log_in(self.member_email)
        self.get(self.permissions_path, 403)
        self.post(self.permissions_path, {"person_id": self.owner_id}, 403)
        self.patch(
            self.permission_path(self.owner_id), {"role": "viewer"}, 403
        )
        self.delete(self.permission_path(self.owner_id), 403)

    def test_get_own_permission(self):
        self.post(self.permissions_path, {"person_id": self.member_id})
        self.log_in(self.member_email)
        permission = self.get(self.permission_path(self.member_id))
        self.assertEqual(permission["role"], "viewer")
        self.get(self.permission_path(self.owner_id), 403)

    def test_get_permission_not_found(self):
        result = self.get(self.permission_path(self.member_id), 404)
        self.assertEqual(
            result["message"], "Permission not found for this user and project"
        )

    def test_my_projects(self):
        self.post(self.permissions_path, {"person_id": self.member_id})
        self.log_in(self.member_email)
        my_permissions = self.get("%s/my-projects" % self.permissions_path)
        self.assertEqual(len(my_permissions), 1)
        self.assertEqual(my_permissions[0]["project"]["code"], "PROJ_1")

    def test_change_role(self):
        self.post(self.permissions_path, {"person_id": self.member_id})
        permission = self.patch(
            self.permission_path(self.member_id), {"role": "contributor"}
        )
        self.assertEqual(permission["role"], "contributor")
        permission = self.put(
            self.permission_path(self.member_id), {"role": "owner"}
        )
        self.assertEqual(permission["role"], "owner")
        self.patch(self.permission_path(self.member_id), {"role": "boss"}, 400)
        self.patch(self.permission_path(self.member_id), {}, 400)

    def test_change_role_last_owner(self):
        result = self.patch(
            self.permission_path(self.owner_id), {"role": "viewer"}, 403
        )
        self.assertEqual(
            result["message"], "Cannot remove the last owner of a project"
        )
        permission = self.get(self.permission_path(self.owner_id))
        self.assertEqual(permission["role"], "owner")

    def test_revoke_permission(self):
        self.post(self.permissions_path, {"person_id": self.member_id})
        self.delete(self.permission_path(self.member_id))
        self.get(self.permission_path(self.member_id), 404)
        self.delete(self.permission_path(self.member_id), 404)

    def test_revoke_last_owner(self):
        result = self.app.delete(
            self.permission_path(self.owner_id), headers=self.base_headers
        )
        self.assertEqual(result.status_code, 403)
        self.assertEqual(
            result.json["message"], "Cannot remove the last owner of a project"
        )

    def test_project_scenario(self):
        self.log_in_admin()
        project = self.post(
            "data/projects", {"code": "PROJ_2", "name": "Project Two"}
        )
        permissions_path = "data/projects/%s/permissions" % project["id"]
        self.post(
            permissions_path, {"person_id": self.member_id, "role": "viewer"}
        )

        self.log_in(self.member_email)
        self.get("data/projects/%s" % project["id"])
        self.put("data/projects/%s" % project["id"], {"name": "Two"}, 403)

        self.log_in_admin()
        self.patch(
            "%s/%s" % (permissions_path, self.member_id),
            {"role": "contributor"},
        )
        self.delete("%s/%s" % (permissions_path, self.user_id), 403)
        self.patch(
            "%s/%s" % (permissions_path, self.member_id), {"role": "owner"}
        )
        self.delete("%s/%s" % (permissions_path, self.user_id))

        self.log_in(self.member_email)
        project_permissions = self.get(permissions_path)
        self.assertEqual(len(project_permissions), 1)
        self.assertEqual(project_permissions[0]["person_id"], self.member_id)
        self.assertEqual(project_permissions[0]["role"], "owner")
