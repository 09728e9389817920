from sqlalchemy_utils import UUIDType, ChoiceType

from shotline.app import db
from shotline.app.models.serializer import SerializerMixin
from shotline.app.models.base import BaseMixin

VERSION_ENTITY_TYPES = [
    ("project", "Project"),
    ("episode", "Episode"),
    ("sequence", "Sequence"),
    ("shot", "Shot"),
    ("asset", "Asset"),
    ("playlist", "Playlist"),
]


class Version(db.Model, BaseMixin, SerializerMixin):
    """
    Delivery of a piece of work (video, image, text) made for an entity of
    a project. Versions of an entity are numbered from 1 and only one of
    them is flagged as the latest.
    """

    code = db.Column(db.String(80), unique=True, nullable=False, index=True)
    name = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text())
    version_number = db.Column(db.Integer, default=1, nullable=False)
    latest = db.Column(db.Boolean(), default=False, index=True)
    file_path = db.Column(db.String(400))
    thumbnail_path = db.Column(db.String(400))
    artist = db.Column(db.String(160))
    format = db.Column(db.String(80))
    frame_range = db.Column(db.String(80))
    duration = db.Column(db.Numeric(10, 2))
    status_updated_at = db.Column(db.DateTime)

    entity_id = db.Column(UUIDType(binary=False), nullable=False, index=True)
    entity_type = db.Column(
        ChoiceType(VERSION_ENTITY_TYPES), nullable=False, index=True
    )
    status_id = db.Column(
        UUIDType(binary=False), db.ForeignKey("status.id"), index=True
    )
    created_by = db.Column(
        UUIDType(binary=False), db.ForeignKey("person.id"), index=True
    )
    assigned_to = db.Column(
        UUIDType(binary=False), db.ForeignKey("person.id"), index=True
    )

    __table_args__ = (
        db.Index("version_entity_idx", "entity_id", "entity_type"),
    )
