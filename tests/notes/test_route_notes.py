from tests.base import ApiDBTestCase

from shotline.app.models.note import Note


class NoteTestCase(ApiDBTestCase):
    def setUp(self):
        super(NoteTestCase, self).setUp()
        self.generate_fixture_project()
        self.generate_fixture_episode()
        self.generate_fixture_sequence()
        self.generate_fixture_shot()
        self.generate_fixture_version()
        self.generate_fixture_person()
        self.member_email = self.person.email

    def new_note(self, **kwargs):
        data = {
            "link_type": "version",
            "link_id": self.version_id,
            "subject": "Timing",
            "content": "Hold the last pose longer.",
        }
        data.update(kwargs)
        return data

    def test_create_note(self):
        note = self.post(
            "data/notes",
            self.new_note(attachments=["renders/frame_0042.png"]),
        )
        self.assertEqual(note["link_id"], self.version_id)
        self.assertEqual(note["created_by"], self.user_id)
        self.assertFalse(note["is_read"])
        self.assertEqual(note["attachments"], ["renders/frame_0042.png"])
        note = self.post(
            "data/notes", self.new_note(link_type="shot", link_id=self.shot_id)
        )
        self.assertEqual(note["attachments"], [])

    def test_create_note_errors(self):
        self.post("data/notes", self.new_note(link_type="person"), 400)
        self.post("data/notes", self.new_note(subject=""), 400)
        self.post("data/notes", self.new_note(link_type="shot"), 404)

    def test_note_access(self):
        self.generate_fixture_note()
        note_path = "data/notes/%s" % self.note_id
        self.log_in(self.member_email)
        self.get(note_path, 403)
        self.post("data/notes", self.new_note(), 403)
        self.assertEqual(self.get("data/notes"), [])

        self.log_in_admin()
        self.generate_fixture_permission(
            self.person_id, self.project_id, "viewer"
        )
        self.log_in(self.member_email)
        self.assertEqual(self.get(note_path)["subject"], "Timing")
        self.assertEqual(len(self.get("data/notes")), 1)
        self.post("data/notes", self.new_note(), 403)
        self.put(note_path, {"is_read": True}, 403)
        self.delete(note_path, 403)

    def test_get_notes(self):
        self.generate_fixture_note()
        self.generate_fixture_note(
            link_type="shot", link_id=self.shot.id, subject="Framing"
        )
        notes = self.get("data/notes?link_type=shot")
        self.assertEqual([n["subject"] for n in notes], ["Framing"])
        notes = self.get("data/notes?link_id=%s" % self.version_id)
        self.assertEqual([n["subject"] for n in notes], ["Timing"])
        notes = self.get("data/notes?is_read=true")
        self.assertEqual(notes, [])
        self.get("data/notes?link_type=person", 400)
        self.get_404("data/notes/wrong-id")

    def test_update_note(self):
        self.generate_fixture_note()
        self.generate_fixture_permission(
            self.person_id, self.project_id, "contributor"
        )
        self.log_in(self.member_email)
        note = self.put(
            "data/notes/%s" % self.note_id,
            {"is_read": True, "attachments": ["renders/frame_0043.png"]},
        )
        self.assertTrue(note["is_read"])
        self.assertEqual(note["attachments"], ["renders/frame_0043.png"])
        self.put("data/notes/%s" % self.note_id, {"subject": ""}, 400)

    def test_delete_note(self):
        self.generate_fixture_note()
        self.delete("data/notes/%s" % self.note_id)
        self.assertIsNone(Note.get(self.note_id))
        self.delete_404("data/notes/%s" % self.note_id)

    def test_note_on_deleted_entity(self):
        self.generate_fixture_note(link_type="shot", link_id=self.shot.id)
        Note.get(self.note_id).update({"link_id": self.episode.id})
        self.generate_fixture_person(
            "Jane", "Doe", "jane.doe@gmail.com", role="member"
        )
        self.log_in(self.person.email)
        self.get("data/notes/%s" % self.note_id, 404)
