from sqlalchemy_utils import UUIDType

from shotline.app import db
from shotline.app.models.serializer import SerializerMixin
from shotline.app.models.base import BaseMixin


class Project(db.Model, BaseMixin, SerializerMixin):
    """
    Describes a production the studio works on.
    """

    code = db.Column(db.String(80), unique=True, nullable=False, index=True)
    name = db.Column(db.String(80), nullable=False)
    description = db.Column(db.Text())
    client_name = db.Column(db.String(120))
    start_date = db.Column(db.Date())
    end_date = db.Column(db.Date())

    status_id = db.Column(
        UUIDType(binary=False), db.ForeignKey("status.id"), index=True
    )
    created_by = db.Column(
        UUIDType(binary=False), db.ForeignKey("person.id"), index=True
    )
