from sqlalchemy_utils import UUIDType

from shotline.app import db
from shotline.app.models.serializer import SerializerMixin
from shotline.app.models.base import BaseMixin


class Episode(db.Model, BaseMixin, SerializerMixin):
    """
    Episode of a project. Its duration is the sum of the durations of its
    sequences, expressed in seconds.
    """

    code = db.Column(db.String(80), unique=True, nullable=False, index=True)
    ep_number = db.Column(db.Integer)
    cut_order = db.Column(db.Integer)
    name = db.Column(db.String(160), nullable=False)
    description = db.Column(db.Text())
    duration = db.Column(db.Integer, default=0)

    project_id = db.Column(
        UUIDType(binary=False),
        db.ForeignKey("project.id"),
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
