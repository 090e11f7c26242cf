"""Tests for the page content editor."""

import io
from datetime import datetime, timedelta, timezone

import pytest
from werkzeug.datastructures import FileStorage

from fondation_cms.editor import PageContentEditor

from .conftest import make_page


class FakeClock:
    def __init__(self, start=datetime(2025, 5, 1, 9, 0, tzinfo=timezone.utc)):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += timedelta(seconds=seconds)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def saved():
    return []


@pytest.fixture
def editor(repository, clock, saved):
    def on_save(content):
        saved.append(content)
        return repository.set_page_content(content)

    return PageContentEditor("contact", make_page(), on_save, recent_edits=repository, clock=clock)


class TestEditorFields:
    def test_blank_editor_without_initial_content(self):
        editor = PageContentEditor("new", None, lambda content: True)
        assert editor.content == {"id": "new", "title": {"fr": "", "ar": ""}, "sections": []}

    def test_initial_content_is_copied(self):
        page = make_page()
        editor = PageContentEditor("contact", page, lambda content: True)
        editor.set_title("fr", "Autre")
        assert page["title"]["fr"] == "Titre"

    def test_setting_a_field_clears_its_error(self, editor):
        editor.set_title("fr", "")
        editor.validate()
        assert "title_fr" in editor.errors

        editor.set_title("fr", "Contact")
        assert "title_fr" not in editor.errors

    def test_section_setters(self, editor):
        editor.set_section_title(0, "ar", "جديد")
        editor.set_section_content(0, "fr", "texte")
        editor.set_section_image(0, "/images/a.jpg")

        section = editor.sections[0]
        assert section["title"] == {"fr": "Un", "ar": "جديد"}
        assert section["content"] == {"fr": "texte", "ar": "ب"}
        assert section["image"] == "/images/a.jpg"

        editor.set_section_image(0, None)
        assert "image" not in section

    def test_unsupported_language(self, editor):
        with pytest.raises(ValueError):
            editor.set_title("en", "Hello")

    def test_load_section_image_as_data_uri(self, editor):
        upload = FileStorage(io.BytesIO(b"\x89PNG"), filename="photo.png", content_type="image/png")

        data_uri = editor.load_section_image(0, upload)

        assert data_uri == "data:image/png;base64,iVBORw=="
        assert editor.sections[0]["image"] == data_uri

    def test_load_section_image_rejects_other_files(self, editor):
        upload = FileStorage(io.BytesIO(b"MZ"), filename="tool.exe")
        with pytest.raises(ValueError):
            editor.load_section_image(0, upload)


class TestSectionList:
    def test_add_section(self, editor, clock):
        section = editor.add_section()

        assert section == {
            "id": f"section_{int(clock.now.timestamp() * 1000)}",
            "title": {"fr": "Nouvelle section", "ar": "قسم جديد"},
            "content": {"fr": "", "ar": ""},
        }
        assert editor.sections[-1] is section

    def test_sections_added_at_the_same_instant_get_distinct_ids(self, editor, clock):
        millis = int(clock.now.timestamp() * 1000)

        ids = [editor.add_section()["id"] for _ in range(5)]

        assert ids == [f"section_{millis + offset}" for offset in range(5)]
        assert len({s["id"] for s in editor.sections}) == len(editor.sections)

    def test_delete_requires_confirmation(self, editor):
        prompts = []

        assert editor.delete_section(0, lambda prompt: prompts.append(prompt) or False) is False
        assert len(editor.sections) == 1
        assert prompts == ["Êtes-vous sûr de vouloir supprimer cette section ?"]

        assert editor.delete_section(0, lambda prompt: True)
        assert editor.sections == []

    def test_arabic_delete_prompt(self, repository):
        editor = PageContentEditor("contact", make_page(), lambda c: True, language="ar")
        assert editor.delete_prompt() == "هل أنت متأكد أنك تريد حذف هذا القسم؟"

    def test_move_sections(self, editor):
        editor.add_section()
        first, second = (s["id"] for s in editor.sections)

        assert not editor.can_move(0, "up")
        assert not editor.can_move(1, "down")
        assert editor.move_section(0, "up") is False

        assert editor.move_section(0, "down")
        assert [s["id"] for s in editor.sections] == [second, first]

        assert editor.move_section(1, "up")
        assert [s["id"] for s in editor.sections] == [first, second]


class TestValidationAndSave:
    def test_validation_errors_block_save(self, editor, saved):
        editor.set_title("ar", "  ")
        editor.add_section()

        assert editor.save() is False
        assert saved == []
        assert editor.errors == {
            "title_ar": "Le titre en arabe est requis",
            "section_1_content_fr": "Le contenu en français est requis",
            "section_1_content_ar": "Le contenu en arabe est requis",
        }

    def test_messages_follow_editor_language(self):
        editor = PageContentEditor("x", {"id": "x", "title": {"fr": "", "ar": "ع"}, "sections": []},
                                   lambda c: True, language="ar")
        assert not editor.validate()
        assert editor.errors == {"title_fr": "العنوان بالفرنسية مطلوب"}

    def test_section_title_not_required(self, editor):
        editor.sections[0].pop("title")
        assert editor.validate()

    def test_successful_save(self, editor, repository, clock, saved, events):
        editor.set_section_content(0, "fr", "nouveau")

        assert editor.save(user="alice")

        assert saved[0]["sections"][0]["content"]["fr"] == "nouveau"
        assert repository.get_page_content("contact")["sections"][0]["content"]["fr"] == "nouveau"
        assert events.content_updated == 1
        assert editor.success_message == "Contenu enregistré avec succès"

        edit = repository.get_recent_edits()[0]
        assert edit["page"] == "Titre"
        assert edit["user"] == "alice"

        clock.advance(3)
        assert editor.success_message == ""

    def test_failed_callback(self, repository):
        editor = PageContentEditor("contact", make_page(), lambda c: False, recent_edits=repository)

        assert editor.save() is False
        assert editor.success_message == ""
        assert repository.get_recent_edits() == []

    def test_callback_exception_is_contained(self, caplog):
        def explode(content):
            raise RuntimeError("disk full")

        editor = PageContentEditor("contact", make_page(), explode)

        assert editor.save() is False
        assert not editor.is_saving
        assert "disk full" in caplog.text

    def test_editor_never_writes_itself(self, repository, storage):
        editor = PageContentEditor("contact", make_page(), lambda c: True, recent_edits=repository)
        assert editor.save()
        assert storage.get_item("page_contact") is None
