from shotline.app.services import persons_service
from shotline.app.services.exception import (
    PersonNotFoundException,
    UnactiveUserException,
    WrongPasswordException,
    WrongUserException,
)
from shotline.app.utils import auth


def check_auth(email, password):
    """
    Check if given email and password match an active user in the database.
    It raises exceptions adapted to encountered error (wrong email, wrong
    password or unactive user).
    """
    if not email:
        raise WrongUserException()
    try:
        person = persons_service.get_person_by_email(email, unsafe=True)
    except PersonNotFoundException:
        raise WrongUserException()

    if not person.get("active", False):
        raise UnactiveUserException()

    local_auth_strategy(person, password)
    return {key: value for key, value in person.items() if key != "password"}


def local_auth_strategy(person, password):
    """
    Local strategy just checks that person and passwords are correct the
    traditional way (email is in database and related password hash corresponds
    to given password).
    Password hash comparison is based on BCrypt.
    """
    if password and auth.check_password(person["password"] or "", password):
        return person
    else:
        raise WrongPasswordException()
