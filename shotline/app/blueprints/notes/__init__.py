from flask import Blueprint
from shotline.app.utils.api import configure_api_from_blueprint

from shotline.app.blueprints.notes.resources import NoteResource, NotesResource

routes = [
    ("/data/notes", NotesResource),
    ("/data/notes/<note_id>", NoteResource),
]

blueprint = Blueprint("notes", "notes")
api = configure_api_from_blueprint(blueprint, routes)
