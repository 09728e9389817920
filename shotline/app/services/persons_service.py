from flask_jwt_extended import current_user
from sqlalchemy.exc import StatementError

from shotline.app import db
from shotline.app.models.person import Person
from shotline.app.services import deletion_service
from shotline.app.services.exception import (
    EntryAlreadyExistsException,
    PersonNotFoundException,
    WrongParameterException,
)
from shotline.app.utils import auth, cache, events, fields, permissions


def clear_person_cache():
    cache.cache.delete_memoized(get_person)
    cache.cache.delete_memoized(get_person_by_email)
    cache.cache.delete_memoized(get_persons)


@cache.memoize_function(120)
def get_persons(minimal=False):
    """
    Return all person stored in database.
    """
    persons = []
    for person in Person.query.order_by(
        Person.first_name, Person.last_name
    ).all():
        if minimal:
            persons.append(person.present_minimal())
        else:
            persons.append(person.serialize_safe())
    return persons


def get_active_persons():
    """
    Return all persons with flag active set to True.
    """
    persons = (
        Person.query.filter_by(active=True)
        .order_by(Person.first_name)
        .order_by(Person.last_name)
        .all()
    )
    return [person.serialize_safe() for person in persons]


def get_person_raw(person_id):
    """
    Return given person as an active record.
    """
    if person_id is None:
        raise PersonNotFoundException()

    try:
        person = Person.get(person_id)
    except StatementError:
        raise PersonNotFoundException()

    if person is None:
        raise PersonNotFoundException()
    return person


@cache.memoize_function(120)
def get_person(person_id, unsafe=False):
    """
    Return given person as a dictionary.
    """
    person = get_person_raw(person_id)
    if unsafe:
        return person.serialize()
    else:
        return person.serialize_safe()


def get_person_by_email_raw(email):
    """
    Return person that matches given email as an active record.
    """
    person = Person.get_by_case_insensitive(email=email)

    if person is None:
        raise PersonNotFoundException()
    return person


@cache.memoize_function(120)
def get_person_by_email(email, unsafe=False):
    """
    Return person that matches given email as a dictionary.
    """
    person = get_person_by_email_raw(email)
    if unsafe:
        return person.serialize()
    else:
        return person.serialize_safe()


def get_current_user(unsafe=False):
    """
    Return person from its auth token (the one that does the request) as a
    dictionary.
    """
    if unsafe:
        return current_user.serialize()
    else:
        return current_user.serialize_safe()


def get_current_user_context():
    """
    Build the context used by services to evaluate what the current user can
    do. It is built once per request from the authenticated person.
    """
    return get_user_context(current_user)


def get_user_context(person):
    """
    Build a user context from given person (active record or dict).
    """
    if isinstance(person, dict):
        return permissions.UserContext(person["id"], person["role"])
    return permissions.UserContext(
        str(person.id), fields.serialize_value(person.role)
    )


def create_person(
    email,
    password,
    first_name,
    last_name,
    role="member",
    active=True,
    serialize=True,
):
    """
    Create a new person entry in the database. No operation are performed on
    password, so encrypted password is expected.
    """
    if email is not None:
        email = email.strip()

    if role not in ["admin", "member"]:
        raise WrongParameterException(f"Role {role} is not valid.")

    if Person.get_by_case_insensitive(email=email) is not None:
        raise EntryAlreadyExistsException(
            f"A person with email {email} already exists."
        )

    person = Person.create(
        email=email,
        password=password,
        first_name=first_name,
        last_name=last_name,
        role=role,
        active=active,
    )
    clear_person_cache()
    events.emit("person:new", {"person_id": str(person.id)})
    return person.serialize_safe() if serialize else person


def update_person(person_id, data):
    """
    Update person entry with data given in parameter.
    """
    person = get_person_raw(person_id)

    if "email" in data and data["email"] is not None:
        data["email"] = data["email"].strip()
        other = Person.get_by_case_insensitive(email=data["email"])
        if other is not None and other.id != person.id:
            raise EntryAlreadyExistsException(
                f"A person with email {data['email']} already exists."
            )

    if "role" in data and data["role"] not in ["admin", "member"]:
        raise WrongParameterException(f"Role {data['role']} is not valid.")

    person.update(data)
    clear_person_cache()
    events.emit("person:update", {"person_id": person_id})
    return person.serialize_safe()


def update_password(email, password):
    """
    Update password field for person matching given email.
    """
    person = get_person_by_email_raw(email)
    person.update({"password": password})
    clear_person_cache()
    return person.serialize_safe()


def delete_person(person_id):
    """
    Delete person entry from database. Project permissions of the person are
    removed and every creator or assignee field pointing to the person is
    unset within the same transaction.
    """
    person = get_person_raw(person_id)
    person_dict = person.serialize_safe()
    try:
        deletion_service.clear_person_references_no_commit(person.id)
        person.delete_no_commit()
        db.session.commit()
    except BaseException:
        db.session.rollback()
        raise
    events.emit("person:delete", {"person_id": person_id})
    clear_person_cache()
    return person_dict


def create_admin(email, password, first_name="Super", last_name="Admin"):
    """
    Create an admin person, or promote existing person to admin. Given
    password is expected in clear and is encrypted before storage.
    """
    email = auth.validate_email(email)
    auth.validate_password(password)
    encrypted_password = auth.encrypt_password(password)
    try:
        person = get_person_by_email_raw(email)
        person.update(
            {"password": encrypted_password, "role": "admin", "active": True}
        )
        clear_person_cache()
        return person.serialize_safe()
    except PersonNotFoundException:
        return create_person(
            email,
            encrypted_password,
            first_name,
            last_name,
            role="admin",
        )
