from sqlalchemy_utils import UUIDType, ChoiceType

from shotline.app import db
from shotline.app.models.serializer import SerializerMixin
from shotline.app.models.base import BaseMixin

SHOT_TYPES = [
    ("establishing", "Establishing"),
    ("medium", "Medium"),
    ("closeup", "Close-up"),
    ("detail", "Detail"),
]


class Shot(db.Model, BaseMixin, SerializerMixin):
    """
    Shot of a sequence. Its duration is expressed in frames.
    """

    code = db.Column(db.String(80), unique=True, nullable=False, index=True)
    name = db.Column(db.String(160), nullable=False)
    description = db.Column(db.Text())
    sequence_number = db.Column(db.Integer, nullable=False)
    shot_type = db.Column(ChoiceType(SHOT_TYPES))
    duration = db.Column(db.Integer)
    cut_order = db.Column(db.Integer)

    sequence_id = db.Column(
        UUIDType(binary=False),
        db.ForeignKey("sequence.id"),
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
