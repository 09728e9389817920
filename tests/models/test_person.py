# -*- coding: UTF-8 -*-
from tests.base import ApiDBTestCase

from shotline.app.models.person import Person
from shotline.app.models.serializer import SerializerMixin


class PersonTestCase(ApiDBTestCase):
    def setUp(self):
        super(PersonTestCase, self).setUp()
        self.generate_fixture_person(
            first_name="Jérémy",
            last_name="Utêfœuit",
            email="jeremy.utf8@gmail.com",
        )
        self.generate_fixture_person()

    def test_repr(self):
        self.assertEqual(str(self.person), "<Person John Doe>")
        self.person.first_name = "Léon"
        self.assertEqual(str(self.person), "<Person Léon Doe>")

    def test_serialize(self):
        person = self.person.serialize()
        self.assertEqual(person["type"], "Person")
        self.assertEqual(person["role"], "member")
        self.assertEqual(person["full_name"], "John Doe")
        self.assertIn("password", person)
        self.assertNotIn("password", self.person.serialize_safe())

    def test_present_minimal(self):
        person = self.person.present_minimal()
        self.assertEqual(
            set(person.keys()),
            {"id", "first_name", "last_name", "full_name", "role", "active"},
        )

    def test_full_name_expression(self):
        person = Person.query.filter(
            Person.full_name == "Jérémy Utêfœuit"
        ).first()
        self.assertEqual(person.email, "jeremy.utf8@gmail.com")

    def test_get_by_case_insensitive(self):
        person = Person.get_by_case_insensitive(email="JOHN.DOE@gmail.com")
        self.assertEqual(str(person.id), self.person_id)

    def test_serialize_ignored_attrs(self):
        self.assertFalse(self.person.is_join("email"))
        self.assertFalse(self.person.is_join("unknown_attr"))
        person = SerializerMixin.serialize(
            self.person, ignored_attrs=["password", "email"]
        )
        self.assertNotIn("password", person)
        self.assertNotIn("email", person)
        self.assertEqual(person["first_name"], "John")
        person = SerializerMixin.serialize(self.person)
        self.assertIn("password", person)
        self.assertIn("email", person)
