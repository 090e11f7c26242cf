"""Tests for live page views and the listing filter."""

import pytest

from fondation_cms.seeding.defaults import NEWS_ITEMS, RESOURCES
from fondation_cms.views import PageView, PageViewRegistry, filter_items

from .conftest import make_page


class TestPageView:
    def test_falls_back_to_defaults(self, repository):
        view = PageView("contact", repository)
        assert view.content["title"]["fr"] == "Contactez-nous"
        assert view.revision == 0

    def test_reloads_on_save(self, repository):
        view = PageView("contact", repository)

        repository.set_page_content(make_page(title={"fr": "Nouveau", "ar": "جديد"}))

        assert view.content["title"]["fr"] == "Nouveau"
        assert view.revision >= 1

    def test_storage_event_for_other_page_only_reloads_on_content_updated(self, repository, notifier):
        view = PageView("contact", repository)

        notifier.publish_storage_change("page_home", "{}")
        assert view.revision == 0

        notifier.publish_storage_change("editor_contact", "{}")
        assert view.revision == 1

        notifier.publish_content_updated()
        assert view.revision == 2

    def test_close_stops_reloading(self, repository):
        view = PageView("contact", repository)
        view.close()

        repository.set_page_content(make_page())
        assert view.revision == 0
        view.close()

    def test_render_arabic_is_rtl(self, repository):
        repository.set_page_content(make_page())
        rendered = PageView("contact", repository).render("ar")

        assert rendered["dir"] == "rtl"
        assert rendered["title"] == "عنوان"
        assert rendered["sections"][0] == {"id": "s1", "title": "واحد", "content": "ب"}

    def test_render_missing_translation_uses_default_literal(self, repository):
        repository.set_page_content({
            "id": "contact",
            "title": {"fr": "Contact"},
            "sections": [{"id": "email", "title": {"fr": "Courriel"}, "content": {"fr": "x@y.org"}}],
        })
        rendered = PageView("contact", repository).render("ar")

        assert rendered["title"] == "اتصل بنا"
        assert rendered["sections"][0]["title"] == "البريد الإلكتروني"
        assert rendered["sections"][0]["content"] == "contact@fondation-droits.org"

    def test_render_rejects_unknown_language(self, repository):
        with pytest.raises(ValueError):
            PageView("home", repository).render("en")

    def test_unknown_page_has_no_content(self, repository):
        assert PageView("nowhere", repository).content is None


class TestPageViewRegistry:
    def test_one_view_per_page(self, repository):
        registry = PageViewRegistry(repository)

        assert registry.get("home") is registry.get("home")
        assert "home" in registry

        registry.close_all()
        assert "home" not in registry

    def test_all_open_views_refresh(self, repository):
        registry = PageViewRegistry(repository)
        home, contact = registry.get("home"), registry.get("contact")

        repository.set_page_content(make_page("contact"))

        assert contact.content == make_page("contact")
        assert home.revision >= 1


class TestFilterItems:
    def test_query_matches_title_or_excerpt(self):
        results = filter_items(NEWS_ITEMS, "fr", query="PLATEFORME")
        assert [item["id"] for item in results] == [1]

        results = filter_items(NEWS_ITEMS, "fr", query="analyse détaillée")
        assert [item["id"] for item in results] == [2]

    def test_query_in_arabic(self):
        results = filter_items(NEWS_ITEMS, "ar", query="المؤتمر")
        assert [item["id"] for item in results] == [3]

    def test_category(self):
        assert [i["id"] for i in filter_items(NEWS_ITEMS, "fr", category="rapport")] == [2]
        assert len(filter_items(NEWS_ITEMS, "fr", category="all")) == 3

    def test_resources_by_type_and_description(self):
        results = filter_items(
            RESOURCES, "fr", query="modèles",
            text_fields=("title", "description"),
        )
        assert [item["id"] for item in results] == [2]

        reports = filter_items(RESOURCES, "fr", category="report", category_field="type",
                               text_fields=("title", "description"))
        assert [item["id"] for item in reports] == [3]

    def test_no_filters_returns_everything(self):
        assert filter_items(RESOURCES, "fr") == RESOURCES
