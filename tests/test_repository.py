"""Tests for ContentRepository accessors."""

from datetime import datetime, timedelta, timezone

from fondation_cms.repository.content import ContentRepository
from fondation_cms.storage import MemoryBackend, Storage

from .conftest import make_page


# ============== Pages ==============

class TestSetPageContent:
    def test_backfills_missing_section_titles(self, repository):
        """Untitled sections gain the generic bilingual title."""
        repository.set_page_content({
            "id": "contact",
            "title": {"fr": "X", "ar": "ص"},
            "sections": [{"id": "s1", "content": {"fr": "a", "ar": "ب"}}],
        })

        page = repository.get_page_content("contact")
        assert page["sections"][0]["title"] == {"fr": "Section", "ar": "قسم"}

    def test_roundtrip_is_otherwise_unchanged(self, repository):
        page = make_page(sections=[
            {"id": "s1", "title": {"fr": "T", "ar": "ت"}, "content": {"fr": "a", "ar": "ب"}, "image": "/x.jpg"},
            {"id": "s2", "content": {"fr": "b", "ar": "ج"}, "metadata": {"order": 2}},
        ])
        assert repository.set_page_content(page)

        stored = repository.get_page_content("contact")
        assert stored["sections"][0] == page["sections"][0]
        assert stored["sections"][1] == {**page["sections"][1], "title": {"fr": "Section", "ar": "قسم"}}
        # the caller's dict is not mutated
        assert "title" not in page["sections"][1]

    def test_editor_and_live_copies_match(self, repository, storage):
        repository.set_page_content(make_page())
        assert storage.get_item("editor_contact") == storage.get_item("page_contact")

    def test_rejects_missing_id(self, repository, events):
        assert repository.set_page_content({"id": "", "sections": []}) is False
        assert repository.set_page_content(None) is False
        assert events.content_updated == 0

    def test_missing_sections_become_empty_list(self, repository):
        repository.set_page_content({"id": "x", "title": {"fr": "X", "ar": "X"}})
        assert repository.get_page_content("x")["sections"] == []

    def test_notifies_once_per_write(self, repository, events):
        """A save dispatches content_updated and a storage event for page_<id>."""
        repository.set_page_content(make_page("news"))

        assert events.content_updated == 1
        assert events.storage_keys == ["page_news"]

    def test_quota_failure_returns_false_without_notification(self, notifier, events):
        repository = ContentRepository(Storage(MemoryBackend(quota=40)), notifier)

        assert repository.set_page_content(make_page()) is False
        assert events.content_updated == 0
        assert events.storage_events == []


class TestPageQueries:
    def test_get_missing_page(self, repository):
        assert repository.get_page_content("about") is None

    def test_all_pages(self, repository):
        repository.set_page_content(make_page("home"))
        repository.set_page_content(make_page("about"))
        repository.save_page_draft(make_page("draft_only"))

        assert sorted(repository.get_all_page_ids()) == ["about", "home"]
        assert {p["id"] for p in repository.get_all_pages()} == {"home", "about"}

    def test_draft_does_not_touch_live_copy(self, repository, events):
        repository.set_page_content(make_page())
        draft = make_page(title={"fr": "Brouillon", "ar": "مسودة"})

        assert repository.save_page_draft(draft)
        assert repository.get_page_content("contact")["title"]["fr"] == "Titre"
        assert repository.get_editor_page_content("contact")["title"]["fr"] == "Brouillon"
        assert events.content_updated == 1


# ============== Collections ==============

class TestNewsAndResources:
    def test_news_crud(self, repository):
        repository.set_news([{"id": 1, "slug": "a"}, {"id": 2, "slug": "b"}])

        assert repository.get_news_item(2)["slug"] == "b"
        assert repository.update_news_item({"id": 2, "slug": "bb"})
        assert repository.get_news_item(2)["slug"] == "bb"
        assert repository.update_news_item({"id": 9, "slug": "x"}) is False

        repository.delete_news_item(1)
        assert [item["id"] for item in repository.get_news()] == [2]

    def test_resources_crud(self, repository):
        repository.set_resources([{"id": 1, "type": "guide"}])

        assert repository.update_resource({"id": 1, "type": "report"})
        assert repository.get_resource(1)["type"] == "report"
        assert repository.update_resource({"id": 5}) is False

        repository.delete_resource(1)
        assert repository.get_resources() == []

    def test_empty_collections(self, repository):
        assert repository.get_news() == []
        assert repository.get_resources() == []
        assert repository.get_news_item(1) is None


class TestCatalogs:
    def test_global_content_upsert_and_lookup(self, repository):
        item = {"id": "btn_submit", "category": "buttons", "key": "submit", "text": {"fr": "Soumettre", "ar": "إرسال"}}
        repository.update_global_content_item(item)
        repository.update_global_content_item({**item, "text": {"fr": "Envoyer", "ar": "إرسال"}})

        assert len(repository.get_global_content()) == 1
        assert repository.get_global_content_item("buttons", "submit")["text"]["fr"] == "Envoyer"
        assert repository.get_global_content_item("buttons", "missing") is None
        assert repository.get_category_content("buttons") == repository.get_global_content()

        repository.delete_global_content_item("btn_submit")
        assert repository.get_global_content() == []

    def test_media_upsert_and_delete(self, repository):
        repository.update_media_item({"id": "m1", "path": "/a.jpg"})
        repository.update_media_item({"id": "m2", "path": "/b.jpg"})
        repository.update_media_item({"id": "m1", "path": "/c.jpg"})

        assert repository.get_media_item("m1")["path"] == "/c.jpg"
        repository.delete_media_item("m2")
        assert [m["id"] for m in repository.get_media_library()] == ["m1"]

    def test_website_structure(self, repository):
        assert repository.get_website_structure() is None
        repository.set_website_structure({"pages": ["home"], "mainMenu": [], "footer": []})
        assert repository.get_website_structure()["pages"] == ["home"]


# ============== Editor workspace ==============

class TestEditorWorkspace:
    def test_sync_copies_live_records(self, repository, storage):
        storage.set_item("page_home", make_page("home"))
        repository.set_news([{"id": 1}])
        repository.set_website_structure({"pages": []})

        assert repository.sync_content_to_editor()

        assert storage.get_item("editor_home") == make_page("home")
        assert storage.get_item("editor_news") == [{"id": 1}]
        assert storage.get_item("editor_resources") == []
        assert storage.get_item("editor_websiteStructure") == {"pages": []}
        assert storage.get_item("editor_media_library") == []

    def test_apply_editor_changes(self, repository, events):
        repository.save_page_draft(make_page("about"))

        assert repository.apply_editor_changes("about")
        assert repository.get_page_content("about") == make_page("about")
        assert events.storage_keys == ["page_about"]

    def test_apply_without_draft(self, repository):
        assert repository.apply_editor_changes("nothing") is False


# ============== Recent edits & flag ==============

class TestRecentEdits:
    def test_newest_first_and_deduplicated(self, repository):
        start = datetime(2025, 1, 1, tzinfo=timezone.utc)
        repository.record_recent_edit("Accueil", now=start)
        repository.record_recent_edit("Contact", now=start + timedelta(seconds=1))
        repository.record_recent_edit("Accueil", now=start + timedelta(seconds=2), user="alice")

        edits = repository.get_recent_edits()
        assert [e["page"] for e in edits] == ["Accueil", "Contact"]
        assert edits[0]["user"] == "alice"
        assert edits[0]["date"] == "2025-01-01"
        assert edits[0]["id"] == int((start + timedelta(seconds=2)).timestamp() * 1000)

    def test_capped_at_ten(self, repository):
        for index in range(15):
            repository.record_recent_edit(f"Page {index}")

        edits = repository.get_recent_edits()
        assert len(edits) == 10
        assert edits[0]["page"] == "Page 14"

    def test_corrupt_list_is_ignored(self, repository, storage):
        storage.set_item("recentEdits", {"not": "a list"})
        assert repository.get_recent_edits() == []


class TestInitializedFlag:
    def test_flag(self, repository, backend):
        assert not repository.is_initialized()
        repository.mark_initialized()
        assert repository.is_initialized()
        assert backend.get("dbInitialized") == "true"
