# fondation_cms/api/v1/pages.py
from flask import abort, current_app, jsonify, request

from fondation_cms.domain.records import LANGUAGES
from fondation_cms.normalizers.item import localize_item
from fondation_cms.normalizers.page import normalize_page_summary
from fondation_cms.normalizers.pagination import normalize_pagination
from fondation_cms.seeding.defaults import PUBLICATIONS, default_page
from fondation_cms.services import get_repository, get_services
from fondation_cms.utils.pagination import parse_page_args
from fondation_cms.views import filter_items
from . import v1_bp


def _requested_language(required=False):
    lang = request.args.get("lang")
    if lang is None:
        return current_app.config.get("DEFAULT_LANGUAGE", "fr") if required else None
    if lang not in LANGUAGES:
        abort(400, description=f"Unsupported language '{lang}'")
    return lang


# ------------------------
# Pages
# ------------------------

@v1_bp.route("/pages", methods=["GET"])
def list_pages():
    pages = get_repository().get_all_pages()
    return jsonify([normalize_page_summary(page) for page in pages])


@v1_bp.route("/pages/<page_id>", methods=["GET"])
def get_page(page_id):
    """
    Public read of a page.

    With ?lang= the page is rendered through its live view (localized,
    default literals for missing translations). Without it the stored
    bilingual record is returned.
    """
    lang = _requested_language()

    if lang is None:
        content = get_repository().get_page_content(page_id) or default_page(page_id)
        if content is None:
            abort(404, description=f"Page '{page_id}' not found")
        return jsonify(content)

    view = get_services().views.get(page_id)
    if view.content is None:
        get_services().views.close(page_id)
        abort(404, description=f"Page '{page_id}' not found")

    return jsonify(view.render(lang))


# ------------------------
# News
# ------------------------

@v1_bp.route("/news", methods=["GET"])
def list_news():
    lang = _requested_language()
    page, per_page = parse_page_args(request.args)

    items = filter_items(
        get_repository().get_news(),
        lang or current_app.config.get("DEFAULT_LANGUAGE", "fr"),
        query=request.args.get("q", ""),
        category=request.args.get("category"),
        text_fields=("title", "excerpt"),
    )

    return jsonify(normalize_pagination(
        items,
        lambda item: localize_item(item, lang),
        page=page,
        per_page=per_page,
    ))


@v1_bp.route("/news/<int:item_id>", methods=["GET"])
def get_news_item(item_id):
    item = get_repository().get_news_item(item_id)
    if item is None:
        abort(404, description=f"News item {item_id} not found")
    return jsonify(localize_item(item, _requested_language()))


# ------------------------
# Resources
# ------------------------

@v1_bp.route("/resources", methods=["GET"])
def list_resources():
    lang = _requested_language()
    page, per_page = parse_page_args(request.args)

    items = filter_items(
        get_repository().get_resources(),
        lang or current_app.config.get("DEFAULT_LANGUAGE", "fr"),
        query=request.args.get("q", ""),
        category=request.args.get("type"),
        category_field="type",
        text_fields=("title", "description"),
    )

    return jsonify(normalize_pagination(
        items,
        lambda item: localize_item(item, lang),
        page=page,
        per_page=per_page,
    ))


@v1_bp.route("/resources/<int:item_id>", methods=["GET"])
def get_resource(item_id):
    item = get_repository().get_resource(item_id)
    if item is None:
        abort(404, description=f"Resource {item_id} not found")
    return jsonify(localize_item(item, _requested_language()))


# ------------------------
# Publications (read-only catalog)
# ------------------------

@v1_bp.route("/publications", methods=["GET"])
def list_publications():
    lang = _requested_language()
    items = filter_items(
        PUBLICATIONS,
        lang or current_app.config.get("DEFAULT_LANGUAGE", "fr"),
        query=request.args.get("q", ""),
        text_fields=("title", "excerpt"),
    )
    return jsonify(normalize_pagination(items, lambda item: localize_item(item, lang)))


# ------------------------
# Global content & structure
# ------------------------

@v1_bp.route("/global-content", methods=["GET"])
def list_global_content():
    repository = get_repository()
    category = request.args.get("category")

    if category:
        return jsonify(repository.get_category_content(category))
    return jsonify(repository.get_global_content())


@v1_bp.route("/global-content/<category>/<key>", methods=["GET"])
def get_global_content_item(category, key):
    item = get_repository().get_global_content_item(category, key)
    if item is None:
        abort(404, description=f"No global content for {category}/{key}")
    return jsonify(item)


@v1_bp.route("/structure", methods=["GET"])
def get_structure():
    structure = get_repository().get_website_structure()
    if structure is None:
        abort(404, description="Website structure not initialized")
    return jsonify(structure)
