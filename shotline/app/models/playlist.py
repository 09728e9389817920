from sqlalchemy_utils import UUIDType

from shotline.app import db
from shotline.app.models.serializer import SerializerMixin
from shotline.app.models.base import BaseMixin


class Playlist(db.Model, BaseMixin, SerializerMixin):
    """
    Describes a playlist. The goal is to review an ordered set of versions
    of a project, referenced by their codes.
    """

    code = db.Column(db.String(80), unique=True, nullable=False, index=True)
    name = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text())
    version_codes = db.Column(db.JSON(), default=list)
    status_updated_at = db.Column(db.DateTime)

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
