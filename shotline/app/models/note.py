from sqlalchemy_utils import UUIDType, ChoiceType

from shotline.app import db
from shotline.app.models.serializer import SerializerMixin
from shotline.app.models.base import BaseMixin

LINK_TYPES = [
    ("project", "Project"),
    ("episode", "Episode"),
    ("sequence", "Sequence"),
    ("shot", "Shot"),
    ("asset", "Asset"),
    ("version", "Version"),
    ("playlist", "Playlist"),
]


class Note(db.Model, BaseMixin, SerializerMixin):
    """
    Note left on any entity of a project, mostly feedback given during
    reviews. Attachments are stored as a list of file paths or URLs.
    """

    subject = db.Column(db.String(255), nullable=False)
    content = db.Column(db.Text(), nullable=False)
    is_read = db.Column(db.Boolean(), default=False, index=True)
    attachments = db.Column(db.JSON(), default=list)

    link_id = db.Column(UUIDType(binary=False), nullable=False, index=True)
    link_type = db.Column(ChoiceType(LINK_TYPES), nullable=False, index=True)
    created_by = db.Column(
        UUIDType(binary=False), db.ForeignKey("person.id"), index=True
    )
    assigned_to = db.Column(
        UUIDType(binary=False), db.ForeignKey("person.id"), index=True
    )

    def __repr__(self):
        return f"<Note {self.subject}>"
