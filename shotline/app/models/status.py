from shotline.app import db
from shotline.app.models.serializer import SerializerMixin
from shotline.app.models.base import BaseMixin


class Status(db.Model, BaseMixin, SerializerMixin):
    """
    Describe the state of a project, an episode or a sequence (e.g. wip,
    approved).
    """

    code = db.Column(db.String(40), unique=True, nullable=False, index=True)
    name = db.Column(db.String(80), nullable=False)
    description = db.Column(db.Text())
    color = db.Column(db.String(7), default="#999999")
    is_active = db.Column(db.Boolean(), default=True)
    sort_order = db.Column(db.Integer, default=0)
