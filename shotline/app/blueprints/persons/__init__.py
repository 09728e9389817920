from flask import Blueprint
from shotline.app.utils.api import configure_api_from_blueprint

from shotline.app.blueprints.persons.resources import (
    PersonResource,
    PersonsResource,
)

routes = [
    ("/data/persons", PersonsResource),
    ("/data/persons/<person_id>", PersonResource),
]

blueprint = Blueprint("persons", "persons")
api = configure_api_from_blueprint(blueprint, routes)
