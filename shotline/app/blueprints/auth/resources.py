from flask import jsonify, current_app
from flask_restful import Resource
from flask_jwt_extended import (
    jwt_required,
    create_access_token,
    create_refresh_token,
    set_access_cookies,
    set_refresh_cookies,
    unset_jwt_cookies,
    unset_refresh_cookies,
)

from shotline.app.mixin import ArgsMixin
from shotline.app.utils import auth
from shotline.app.services import persons_service, auth_service
from shotline.app.services.exception import (
    UnactiveUserException,
    WrongPasswordException,
    WrongUserException,
)


def create_tokens(person_id):
    claims = {"identity_type": "person"}
    access_token = create_access_token(
        identity=str(person_id), additional_claims=claims
    )
    refresh_token = create_refresh_token(
        identity=str(person_id), additional_claims=claims
    )
    return access_token, refresh_token


class AuthenticatedResource(Resource):

    @jwt_required()
    def get(self):
        """
        Check authentication status
        ---
        description: Returns information if the user is authenticated.
          It can be used by third party tools, especially browser frontend,
          to know if current user is still logged in.
        tags:
            - Authentication
        responses:
          200:
            description: User authenticated
          401:
            description: Person not found
        """
        return {
            "authenticated": True,
            "user": persons_service.get_current_user(),
        }


class LogoutResource(Resource):

    @jwt_required()
    def get(self):
        """
        Logout user
        ---
        description: Log user out by removing auth cookies.
        tags:
            - Authentication
        responses:
          200:
            description: Logout successful
        """
        response = jsonify({"logout": True})
        unset_jwt_cookies(response)
        return response


class LoginResource(Resource, ArgsMixin):

    def post(self):
        """
        Log in user
        ---
        description: Log in user by creating and registering auth tokens.
          Login is based on email and password. Tokens are returned in the
          response body and set as cookies.
        tags:
            - Authentication
        parameters:
          - in: formData
            name: email
            required: True
            type: string
            format: email
            example: admin@example.com
          - in: formData
            name: password
            required: True
            type: string
            format: password
            example: mysecretpassword
        responses:
          200:
            description: Login successful
          400:
            description: Login failed
          401:
            description: User is unactive
        """
        email, password = self.get_arguments()
        try:
            user = auth_service.check_auth(email, password)
            access_token, refresh_token = create_tokens(user["id"])
            response = jsonify(
                {
                    "user": user,
                    "login": True,
                    "access_token": access_token,
                    "refresh_token": refresh_token,
                }
            )
            set_access_cookies(response, access_token)
            set_refresh_cookies(response, refresh_token)
            current_app.logger.info(f"User {email} is logged in.")
            return response
        except WrongUserException:
            current_app.logger.info(f"User {email} is not registered.")
            return {"login": False}, 400
        except WrongPasswordException:
            current_app.logger.info(f"User {email} gave a wrong password.")
            return {"login": False}, 400
        except UnactiveUserException:
            current_app.logger.info(f"User {email} is unactive.")
            return (
                {
                    "error": True,
                    "login": False,
                    "message": "User is unactive, he cannot log in.",
                },
                401,
            )

    def get_arguments(self):
        args = self.get_args(
            [
                {
                    "name": "email",
                    "required": True,
                    "help": "User email is missing.",
                },
                ("password", ""),
            ]
        )
        return args["email"], args["password"]


class RefreshTokenResource(Resource):

    @jwt_required(refresh=True)
    def get(self):
        """
        Refresh access token
        ---
        description: Tokens are considered outdated after a while.
          This route allows to get a new access token from a refresh token.
        tags:
            - Authentication
        responses:
          200:
            description: Access Token
        """
        user = persons_service.get_current_user()
        access_token = create_access_token(
            identity=user["id"],
            additional_claims={
                "identity_type": "person",
            },
        )
        response = jsonify({"refresh": True, "access_token": access_token})
        set_access_cookies(response, access_token)
        unset_refresh_cookies(response)
        return response


class ChangePasswordResource(Resource, ArgsMixin):

    @jwt_required()
    def post(self):
        """
        Change password
        ---
        description: Allow the user to change his password. The old password
          is required and the new one must be given twice.
        tags:
            - Authentication
        parameters:
          - in: formData
            name: old_password
            required: True
            type: string
            format: password
          - in: formData
            name: password
            required: True
            type: string
            format: password
          - in: formData
            name: password_2
            required: True
            type: string
            format: password
        responses:
          200:
            description: Password changed
          400:
            description: Invalid password
        """
        (old_password, password, password_2) = self.get_arguments()
        user = persons_service.get_current_user()
        try:
            auth_service.check_auth(user["email"], old_password)
            auth.validate_password(password, password_2)
            persons_service.update_password(
                user["email"], auth.encrypt_password(password)
            )
            return {"success": True}
        except (WrongPasswordException, WrongUserException):
            current_app.logger.info(
                f"User {user['email']} gave a wrong password."
            )
            return {"error": True, "message": "Old password is wrong."}, 400
        except auth.PasswordsNoMatchException:
            return (
                {"error": True, "message": "Confirmation password doesn't match."},
                400,
            )
        except auth.PasswordTooShortException:
            return {"error": True, "message": "Password is too short."}, 400

    def get_arguments(self):
        args = self.get_args(
            [
                {"name": "old_password", "required": True},
                {"name": "password", "required": True},
                {"name": "password_2", "required": True},
            ]
        )
        return args["old_password"], args["password"], args["password_2"]
