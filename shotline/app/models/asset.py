from sqlalchemy_utils import UUIDType, ChoiceType

from shotline.app import db
from shotline.app.models.serializer import SerializerMixin
from shotline.app.models.base import BaseMixin

ASSET_TYPES = [
    ("prompt", "Prompt"),
    ("txt", "Text"),
    ("json", "JSON"),
    ("subtitles_en", "English subtitles"),
    ("subtitles_es", "Spanish subtitles"),
    ("director_script", "Director script"),
    ("audio_original", "Original audio"),
    ("audio_caricature_en", "English caricature audio"),
    ("audio_caricature_es", "Spanish caricature audio"),
]


class Asset(db.Model, BaseMixin, SerializerMixin):
    """
    Reusable material of a project: scripts, prompts, subtitles, audio
    tracks...
    """

    code = db.Column(db.String(80), unique=True, nullable=False, index=True)
    name = db.Column(db.String(255), nullable=False)
    asset_type = db.Column(
        ChoiceType(ASSET_TYPES), default="txt", nullable=False, index=True
    )
    description = db.Column(db.Text())
    thumbnail_path = db.Column(db.String(400))

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
