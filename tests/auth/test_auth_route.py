from tests.base import ApiDBTestCase

from shotline.app.services import persons_service


class AuthTestCase(ApiDBTestCase):
    def setUp(self):
        super(AuthTestCase, self).setUp()
        self.generate_fixture_person()
        self.person_email = self.person.email
        self.credentials = {
            "email": self.person_email,
            "password": "mypassword",
        }
        self.log_out()

    def test_not_authenticated(self):
        response = self.app.get("auth/authenticated")
        self.assertEqual(response.status_code, 401)
        response = self.app.get("data/projects")
        self.assertEqual(response.status_code, 401)

    def test_login(self):
        result = self.post("auth/login", self.credentials, 200)
        self.assertTrue(result["login"])
        self.assertEqual(result["user"]["id"], self.person_id)
        self.assertNotIn("password", result["user"])
        self.assertIn("access_token", result)
        self.assertIn("refresh_token", result)

        headers = {"Authorization": "Bearer %s" % result["access_token"]}
        response = self.app.get("auth/authenticated", headers=headers)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json["user"]["email"], self.person_email)

    def test_login_case_insensitive_email(self):
        self.credentials["email"] = "John.Doe@Gmail.com"
        result = self.post("auth/login", self.credentials, 200)
        self.assertEqual(result["user"]["id"], self.person_id)

    def test_login_wrong_credentials(self):
        self.credentials["password"] = "wrongpassword"
        result = self.post("auth/login", self.credentials, 400)
        self.assertFalse(result["login"])
        self.credentials["email"] = "unknown@gmail.com"
        result = self.post("auth/login", self.credentials, 400)
        self.assertFalse(result["login"])

    def test_login_missing_email(self):
        self.post("auth/login", {"password": "mypassword"}, 400)

    def test_login_unactive_user(self):
        persons_service.update_person(self.person_id, {"active": False})
        result = self.post("auth/login", self.credentials, 401)
        self.assertFalse(result["login"])

    def test_unactive_user_token(self):
        tokens = self.log_in(self.person_email)
        self.get("auth/authenticated")
        persons_service.update_person(self.person_id, {"active": False})
        self.app = self.flask_app.test_client()
        response = self.app.get(
            "auth/authenticated",
            headers={"Authorization": "Bearer %s" % tokens["access_token"]},
        )
        self.assertEqual(response.status_code, 401)

    def test_logout(self):
        self.log_in(self.person_email)
        result = self.get("auth/logout")
        self.assertTrue(result["logout"])

    def test_refresh_token(self):
        tokens = self.post("auth/login", self.credentials, 200)
        self.app = self.flask_app.test_client()
        response = self.app.get(
            "auth/refresh-token",
            headers={"Authorization": "Bearer %s" % tokens["refresh_token"]},
        )
        self.assertEqual(response.status_code, 200)
        access_token = response.json["access_token"]
        response = self.app.get(
            "auth/authenticated",
            headers={"Authorization": "Bearer %s" % access_token},
        )
        self.assertEqual(response.status_code, 200)

    def test_change_password(self):
        self.log_in(self.person_email)
        self.post(
            "auth/change-password",
            {
                "old_password": "mypassword",
                "password": "mypassword2",
                "password_2": "mypassword2",
            },
            200,
        )
        self.log_out()
        self.post("auth/login", self.credentials, 400)
        self.credentials["password"] = "mypassword2"
        self.post("auth/login", self.credentials, 200)

    def test_change_password_errors(self):
        self.log_in(self.person_email)
        result = self.post(
            "auth/change-password",
            {
                "old_password": "wrongpassword",
                "password": "mypassword2",
                "password_2": "mypassword2",
            },
            400,
        )
        self.assertTrue(result["error"])
        self.post(
            "auth/change-password",
            {
                "old_password": "mypassword",
                "password": "mypassword2",
                "password_2": "mypassword3",
            },
            400,
        )
        self.post(
            "auth/change-password",
            {
                "old_password": "mypassword",
                "password": "short",
                "password_2": "short",
            },
            400,
        )
