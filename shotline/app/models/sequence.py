from sqlalchemy_utils import UUIDType

from shotline.app import db
from shotline.app.models.serializer import SerializerMixin
from shotline.app.models.base import BaseMixin


class Sequence(db.Model, BaseMixin, SerializerMixin):
    """
    Sequence of an episode. Duration is expressed in seconds and may be
    unknown.
    """

    code = db.Column(db.String(80), unique=True, nullable=False, index=True)
    name = db.Column(db.String(160), nullable=False)
    description = db.Column(db.Text())
    cut_order = db.Column(db.Integer)
    duration = db.Column(db.Integer)
    story_id = db.Column(db.String(80))

    episode_id = db.Column(
        UUIDType(binary=False),
        db.ForeignKey("episode.id"),
        nullable=False,
        index=True,
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
