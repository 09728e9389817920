from tests.base import ApiDBTestCase

from shotline.app.services import notes_service, persons_service
from shotline.app.services.exception import (
    LinkedEntityNotFoundException,
    NoteNotFoundException,
    WrongParameterException,
)


class NotesServiceTestCase(ApiDBTestCase):
    def setUp(self):
        super(NotesServiceTestCase, self).setUp()
        self.generate_fixture_project()
        self.generate_fixture_episode()
        self.generate_fixture_sequence()
        self.generate_fixture_shot()
        self.generate_fixture_version()

    def test_create_note(self):
        note = notes_service.create_note(
            "version",
            self.version_id,
            "Timing",
            "Hold the last pose longer.",
            created_by=self.user_id,
            attachments=["renders/frame_0042.png"],
        )
        self.assertEqual(note["link_type"], "version")
        self.assertEqual(note["link_id"], self.version_id)
        self.assertFalse(note["is_read"])
        self.assertEqual(note["attachments"], ["renders/frame_0042.png"])
        self.assertEqual(note["created_by"], self.user_id)

    def test_create_note_errors(self):
        self.assertRaises(
            LinkedEntityNotFoundException,
            notes_service.create_note,
            "shot",
            self.version_id,
            "Timing",
            "Content",
        )
        self.assertRaises(
            LinkedEntityNotFoundException,
            notes_service.create_note,
            "shot",
            "wrong-id",
            "Timing",
            "Content",
        )
        self.assertRaises(
            WrongParameterException,
            notes_service.create_note,
            "person",
            self.user_id,
            "Timing",
            "Content",
        )

    def test_get_note(self):
        self.generate_fixture_note()
        note = notes_service.get_note(self.note_id)
        self.assertEqual(note["subject"], "Timing")
        self.assertEqual(note["project_id"], self.project_id)
        self.assertRaises(
            NoteNotFoundException, notes_service.get_note, "wrong-id"
        )

    def test_get_notes(self):
        self.generate_fixture_note()
        self.generate_fixture_note(
            link_type="shot", link_id=self.shot.id, subject="Framing"
        )
        notes_service.update_note(self.note_id, {"is_read": True})
        self.generate_fixture_person()
        member_context = persons_service.get_user_context(self.person)
        self.assertEqual(notes_service.get_notes(member_context), [])
        self.generate_fixture_permission(
            self.person_id, self.project_id, "viewer"
        )
        self.assertEqual(len(notes_service.get_notes(member_context)), 2)
        notes = notes_service.get_notes(member_context, link_type="shot")
        self.assertEqual([n["subject"] for n in notes], ["Framing"])
        notes = notes_service.get_notes(member_context, is_read=False)
        self.assertEqual([n["subject"] for n in notes], ["Timing"])
        notes = notes_service.get_notes(member_context, search="fram")
        self.assertEqual(len(notes), 1)
        notes = notes_service.get_notes_for_entity("version", self.version_id)
        self.assertEqual([n["subject"] for n in notes], ["Timing"])

    def test_update_note(self):
        self.generate_fixture_note()
        note = notes_service.update_note(
            self.note_id,
            {
                "is_read": True,
                "attachments": None,
                "link_type": "project",
                "link_id": self.project_id,
            },
        )
        self.assertTrue(note["is_read"])
        self.assertEqual(note["attachments"], [])
        self.assertEqual(note["link_type"], "version")

    def test_remove_note(self):
        self.generate_fixture_note()
        notes_service.remove_note(self.note_id)
        self.assertRaises(
            NoteNotFoundException, notes_service.get_note, self.note_id
        )
