from sqlalchemy_utils import UUIDType, ChoiceType

from shotline.app import db
from shotline.app.models.serializer import SerializerMixin
from shotline.app.models.base import BaseMixin

PROJECT_ROLES = [
    ("viewer", "Viewer"),
    ("contributor", "Contributor"),
    ("owner", "Owner"),
]


class ProjectPermission(db.Model, BaseMixin, SerializerMixin):
    """
    Grant a person access to a project with a given role. Viewers can read
    the project data, contributors can modify it and owners can also manage
    the permissions of the project.
    """

    person_id = db.Column(
        UUIDType(binary=False),
        db.ForeignKey("person.id"),
        nullable=False,
        index=True,
    )
    project_id = db.Column(
        UUIDType(binary=False),
        db.ForeignKey("project.id"),
        nullable=False,
        index=True,
    )
    role = db.Column(
        ChoiceType(PROJECT_ROLES), default="viewer", nullable=False
    )

    __table_args__ = (
        db.UniqueConstraint(
            "person_id", "project_id", name="project_permission_uc"
        ),
    )

    def __repr__(self):
        return f"<ProjectPermission {self.project_id} {self.person_id}>"
