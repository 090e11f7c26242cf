# fondation_cms/api/v1/admin.py
from flask import abort, current_app, g, jsonify, request

from fondation_cms.application.cms import (
    add_section,
    delete_section,
    get_exact_page_content,
    move_section,
    save_page,
    save_page_draft,
    set_section_image,
)
from fondation_cms.domain.records import LANGUAGES
from fondation_cms.normalizers.page import normalize_page_summary
from fondation_cms.services import get_repository
from fondation_cms.utils.decorators import admin_required
from . import v1_bp


def _editor_language():
    lang = request.args.get("lang") or current_app.config.get("DEFAULT_LANGUAGE", "fr")
    if lang not in LANGUAGES:
        abort(400, description=f"Unsupported language '{lang}'")
    return lang


def _json_body():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        abort(400, description="Request body must be a JSON object")
    return data


# ------------------------
# Pages
# ------------------------

@v1_bp.route("/admin/pages", methods=["GET"])
@admin_required
def admin_list_pages():
    pages = get_repository().get_all_pages()
    return jsonify([normalize_page_summary(page) for page in pages])


@v1_bp.route("/admin/pages/<page_id>", methods=["GET"])
@admin_required
def admin_get_page(page_id):
    return jsonify(get_exact_page_content(get_repository(), page_id))


@v1_bp.route("/admin/pages/<page_id>", methods=["PUT"])
@admin_required
def admin_save_page(page_id):
    saved, message = save_page(
        repository=get_repository(),
        page_id=page_id,
        data=_json_body(),
        actor=g.current_user,
        language=_editor_language(),
        success_message_seconds=current_app.config.get("SUCCESS_MESSAGE_SECONDS", 3),
    )

    if not saved:
        current_app.logger.error(f"Failed to save content for page {page_id}")
        return jsonify({"error": "Failed to save content"}), 500

    current_app.logger.info(f"Page {page_id} saved by {g.current_user}")
    return jsonify({
        "message": message,
        "page": get_repository().get_page_content(page_id),
    }), 200


@v1_bp.route("/admin/pages/<page_id>/draft", methods=["PUT"])
@admin_required
def admin_save_draft(page_id):
    if not save_page_draft(repository=get_repository(), page_id=page_id, data=_json_body()):
        return jsonify({"error": "Failed to save draft"}), 500

    return jsonify({"message": "Draft saved"}), 200


@v1_bp.route("/admin/pages/<page_id>/apply", methods=["POST"])
@admin_required
def admin_apply_draft(page_id):
    repository = get_repository()
    if not repository.get_editor_page_content(page_id):
        abort(404, description=f"No draft to apply for page '{page_id}'")

    if not repository.apply_editor_changes(page_id):
        abort(500, description=f"Could not apply draft for page '{page_id}'")

    return jsonify({
        "message": "Draft applied",
        "page": repository.get_page_content(page_id),
    }), 200


# ------------------------
# Sections (staged on the draft)
# ------------------------

@v1_bp.route("/admin/pages/<page_id>/sections", methods=["POST"])
@admin_required
def admin_add_section(page_id):
    section = add_section(
        repository=get_repository(),
        page_id=page_id,
        language=_editor_language(),
    )
    return jsonify(section), 201


@v1_bp.route("/admin/pages/<page_id>/sections/<section_id>", methods=["DELETE"])
@admin_required
def admin_delete_section(page_id, section_id):
    confirmed = request.args.get("confirm", "").lower() in ("1", "true", "yes")

    prompt = delete_section(
        repository=get_repository(),
        page_id=page_id,
        section_id=section_id,
        confirmed=confirmed,
        language=_editor_language(),
    )

    if prompt is not None:
        return jsonify({
            "error": "Confirmation required",
            "confirm": prompt,
        }), 409

    return jsonify({"message": "Section deleted"}), 200


@v1_bp.route("/admin/pages/<page_id>/sections/<section_id>/move", methods=["POST"])
@admin_required
def admin_move_section(page_id, section_id):
    direction = _json_body().get("direction")

    editor = move_section(
        repository=get_repository(),
        page_id=page_id,
        section_id=section_id,
        direction=direction,
        language=_editor_language(),
    )

    return jsonify({"section_ids": [s["id"] for s in editor.sections]}), 200


@v1_bp.route("/admin/pages/<page_id>/sections/<section_id>/image", methods=["POST"])
@admin_required
def admin_section_image(page_id, section_id):
    file = request.files.get("file")
    if file is None or not file.filename:
        return jsonify({"error": "No file provided"}), 400

    data_uri = set_section_image(
        repository=get_repository(),
        page_id=page_id,
        section_id=section_id,
        file=file,
        language=_editor_language(),
    )
    return jsonify({"image": data_uri}), 200


# ------------------------
# Resources
# ------------------------

@v1_bp.route("/admin/resources/<int:item_id>", methods=["PUT"])
@admin_required
def admin_update_resource(item_id):
    data = {**_json_body(), "id": item_id}

    if not get_repository().update_resource(data):
        abort(404, description=f"Resource {item_id} not found")

    return jsonify(data), 200


@v1_bp.route("/admin/resources/<int:item_id>", methods=["DELETE"])
@admin_required
def admin_delete_resource(item_id):
    repository = get_repository()
    if repository.get_resource(item_id) is None:
        abort(404, description=f"Resource {item_id} not found")

    repository.delete_resource(item_id)
    return jsonify({"message": "Resource deleted"}), 200


# ------------------------
# Global content
# ------------------------

@v1_bp.route("/admin/global-content/<item_id>", methods=["PUT"])
@admin_required
def admin_upsert_global_content(item_id):
    data = {**_json_body(), "id": item_id}

    missing = [field for field in ("category", "key", "text") if not data.get(field)]
    if missing:
        return jsonify({"error": f"Missing fields: {', '.join(missing)}"}), 400

    if not get_repository().update_global_content_item(data):
        return jsonify({"error": "Failed to save global content"}), 500

    return jsonify(data), 200


@v1_bp.route("/admin/global-content/<item_id>", methods=["DELETE"])
@admin_required
def admin_delete_global_content(item_id):
    get_repository().delete_global_content_item(item_id)
    return jsonify({"message": "Global content deleted"}), 200


# ------------------------
# Media library
# ------------------------

@v1_bp.route("/admin/media", methods=["GET"])
@admin_required
def admin_list_media():
    return jsonify(get_repository().get_media_library())


@v1_bp.route("/admin/media/<item_id>", methods=["PUT"])
@admin_required
def admin_upsert_media(item_id):
    data = {**_json_body(), "id": item_id}

    if not data.get("path") and not data.get("url"):
        return jsonify({"error": "Either path or url is required"}), 400

    if not get_repository().update_media_item(data):
        return jsonify({"error": "Failed to save media item"}), 500

    return jsonify(data), 200


@v1_bp.route("/admin/media/<item_id>", methods=["DELETE"])
@admin_required
def admin_delete_media(item_id):
    repository = get_repository()
    if repository.get_media_item(item_id) is None:
        abort(404, description=f"Media item '{item_id}' not found")

    repository.delete_media_item(item_id)
    return jsonify({"message": "Media item deleted"}), 200


# ------------------------
# Editor workspace
# ------------------------

@v1_bp.route("/admin/sync", methods=["POST"])
@admin_required
def admin_sync():
    if not get_repository().sync_content_to_editor():
        return jsonify({"error": "Sync failed"}), 500
    return jsonify({"message": "Content synced to editor"}), 200


@v1_bp.route("/admin/recent-edits", methods=["GET"])
@admin_required
def admin_recent_edits():
    return jsonify(get_repository().get_recent_edits())
