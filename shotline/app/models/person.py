from sqlalchemy_utils import EmailType, ChoiceType
from sqlalchemy.ext.hybrid import hybrid_property

from shotline.app import db
from shotline.app.models.serializer import SerializerMixin
from shotline.app.models.base import BaseMixin

ROLE_TYPES = [
    ("member", "Member"),
    ("admin", "Administrator"),
]


class Person(db.Model, BaseMixin, SerializerMixin):
    """
    Describe a person registered in the studio. Admins can access every
    project, members only access projects they got a permission for.
    """

    first_name = db.Column(db.String(80), nullable=False)
    last_name = db.Column(db.String(80), nullable=False)
    email = db.Column(EmailType, unique=True, nullable=False, index=True)
    password = db.Column(db.LargeBinary(60))
    role = db.Column(ChoiceType(ROLE_TYPES), default="member", nullable=False)
    active = db.Column(db.Boolean(), default=True)

    def __repr__(self):
        return f"<Person {self.full_name}>"

    @hybrid_property
    def full_name(self):
        if self.first_name and self.last_name:
            return f"{self.first_name} {self.last_name}"
        else:
            return f"{self.first_name}{self.last_name}"

    @full_name.expression
    def full_name(cls):
        return cls.first_name + " " + cls.last_name

    def serialize(self, obj_type="Person", relations=False, milliseconds=False):
        data = SerializerMixin.serialize(
            self, obj_type, relations=relations, milliseconds=milliseconds
        )
        data["full_name"] = self.full_name
        return data

    def serialize_safe(self, relations=False, milliseconds=False):
        data = self.serialize(relations=relations, milliseconds=milliseconds)
        del data["password"]
        return data

    def present_minimal(self, relations=False, milliseconds=False):
        return {
            "id": str(self.id),
            "first_name": self.first_name,
            "last_name": self.last_name,
            "full_name": self.full_name,
            "role": self.role.code if self.role is not None else None,
            "active": self.active,
        }
