# nexacms/api/v1/cms.py
from flask import request, jsonify
from flask_jwt_extended import jwt_required
from dateutil.parser import parse, ParserError
from nexacms.utils.decorators import roles_required, current_role
from nexacms.utils.optimistic_lock import enforce_optimistic_lock
from nexacms.domain.errors import BadInput, NotFound
from nexacms.application.validation import parse_input
from nexacms.application.cms.schemas import SectionCreate, SectionUpdate, SectionReorder
from nexacms.application.cms.queries import get_page, list_pages as query_pages, get_sections
from nexacms.application.cms.create_page import create_page as create_page_service
from nexacms.application.cms.update_page import update_page as update_page_service
from nexacms.application.cms.delete_page import delete_page as delete_page_service
from nexacms.application.cms.publish_page import (
    publish_page as publish_page_service,
    schedule_page as schedule_page_service,
)
from nexacms.application.cms.unpublish_page import unpublish_page as unpublish_page_service
from nexacms.application.cms.add_section import add_section as add_section_service
from nexacms.application.cms.update_section import update_section as update_section_service
from nexacms.application.cms.reorder_sections import reorder_sections as reorder_sections_service
from nexacms.application.cms.remove_section import remove_section as remove_section_service
from nexacms.application.site.site_config import get_theme
from nexacms.normalizers.page import normalize_page
from nexacms.normalizers.section import normalize_section
from nexacms.normalizers.pagination import normalize_pagination
from nexacms.normalizers.template import normalize_template
from nexacms.sections import registry
from nexacms.sections.editors import editor_schema
from nexacms.sections.renderer import RENDER_MODES, render
from . import v1_bp # import the versioned blueprint

WRITERS = ("ADMIN", "EDITOR")


# ------------------------
# Pages
# ------------------------

@v1_bp.route("/pages", methods=["POST"])
@jwt_required()
@roles_required(*WRITERS)
def create_page():
    data = request.get_json(silent=True) or {}
    page = create_page_service(role=current_role(), data=data)

    return jsonify(normalize_page(page, admin=True)), 201


@v1_bp.route("/pages", methods=["GET"])
@jwt_required()
def list_pages():
    status = request.args.get("status")  # DRAFT | PUBLISHED | SCHEDULED | None
    page_num = request.args.get("page", 1, type=int)
    per_page = request.args.get("per_page", 10, type=int)

    pagination = query_pages(status=status, page=page_num, per_page=per_page)

    return jsonify(
        normalize_pagination(
            pagination,
            lambda p: normalize_page(p, admin=True, include_sections=False)
        )
    )


@v1_bp.route("/pages/<page_id>", methods=["GET"])
@jwt_required()
def get_page_by_id(page_id):
    return jsonify(normalize_page(get_page(page_id), admin=True))


@v1_bp.route("/pages/<page_id>", methods=["PUT"])
@jwt_required()
@roles_required(*WRITERS)
def update_page(page_id):
    # -----------------------
    # Optimistic Locking Check
    # -----------------------
    enforce_optimistic_lock(get_page(page_id))

    data = request.get_json(silent=True) or {}
    page = update_page_service(role=current_role(), page_id=page_id, data=data)

    return jsonify(normalize_page(page, admin=True)), 200


@v1_bp.route("/pages/<page_id>", methods=["DELETE"])
@jwt_required()
@roles_required("ADMIN")
def delete_page(page_id):
    delete_page_service(role=current_role(), page_id=page_id)
    return jsonify({"message": "Page deleted successfully"}), 200


@v1_bp.route("/pages/<page_id>/publish", methods=["POST"])
@jwt_required()
@roles_required("ADMIN")
def publish_page(page_id):
    page = publish_page_service(role=current_role(), page_id=page_id)
    return jsonify(normalize_page(page, admin=True, include_sections=False)), 200


@v1_bp.route("/pages/<page_id>/unpublish", methods=["POST"])
@jwt_required()
@roles_required("ADMIN")
def unpublish_page(page_id):
    page = unpublish_page_service(role=current_role(), page_id=page_id)
    return jsonify(normalize_page(page, admin=True, include_sections=False)), 200


@v1_bp.route("/pages/<page_id>/schedule", methods=["POST"])
@jwt_required()
@roles_required("ADMIN")
def schedule_page(page_id):
    data = request.get_json(silent=True) or {}

    try:
        publish_at = parse(data.get("publish_at") or "")
    except (ParserError, OverflowError) as exc:
        raise BadInput("publish_at must be an ISO-8601 timestamp") from exc

    page = schedule_page_service(role=current_role(), page_id=page_id, publish_at=publish_at)
    return jsonify(normalize_page(page, admin=True, include_sections=False)), 200


@v1_bp.route("/pages/<page_id>/preview", methods=["GET"])
@jwt_required()
def preview_page(page_id):
    mode = request.args.get("mode", "preview")
    if mode not in RENDER_MODES:
        raise BadInput(f"Unknown render mode: {mode}")

    page = get_page(page_id)
    document = render(page.sections, theme=get_theme(), mode=mode)

    if mode == "editor":
        return jsonify({"page_id": page.id, "sections": document.editor})

    return jsonify({
        "page_id": page.id,
        "html": str(document.html),
        "theme": document.theme.to_dict(),
        "sections": [
            {
                "id": s.id,
                "section_template_id": s.template_id,
                "component_name": s.component_name,
                "order": s.order,
                "fallback": s.fallback,
            }
            for s in document.sections
        ],
    })


# ------------------------
# Sections
# ------------------------

@v1_bp.route("/pages/<page_id>/sections", methods=["GET"])
@jwt_required()
def list_sections(page_id):
    sections = get_sections(page_id)
    return jsonify([normalize_section(s, admin=True) for s in sections])


@v1_bp.route("/pages/<page_id>/sections", methods=["POST"])
@jwt_required()
@roles_required(*WRITERS)
def create_section(page_id):
    payload = parse_input(SectionCreate, request.get_json(silent=True))

    section = add_section_service(
        role=current_role(),
        page_id=page_id,
        template_id=payload.section_template_id,
        props=payload.props,
        order=payload.order,
    )

    return jsonify(normalize_section(section, admin=True)), 201


@v1_bp.route("/pages/<page_id>/sections/<section_id>", methods=["PATCH"])
@jwt_required()
@roles_required(*WRITERS)
def update_section(page_id, section_id):
    payload = parse_input(SectionUpdate, request.get_json(silent=True))

    section = update_section_service(
        role=current_role(),
        section_id=section_id,
        props=payload.props,
        order=payload.order,
        page_id=page_id,
    )

    return jsonify(normalize_section(section, admin=True)), 200


@v1_bp.route("/pages/<page_id>/sections/<section_id>", methods=["DELETE"])
@jwt_required()
@roles_required(*WRITERS)
def delete_section(page_id, section_id):
    remove_section_service(role=current_role(), section_id=section_id, page_id=page_id)
    return jsonify({"message": "Section deleted"}), 200


@v1_bp.route("/pages/<page_id>/sections/order", methods=["PUT"])
@jwt_required()
@roles_required(*WRITERS)
def reorder_sections(page_id):
    payload = parse_input(SectionReorder, request.get_json(silent=True))

    sections = reorder_sections_service(
        role=current_role(),
        page_id=page_id,
        section_ids=payload.section_ids,
    )

    return jsonify([normalize_section(s, admin=True) for s in sections]), 200


# ------------------------
# Section templates
# ------------------------

@v1_bp.route("/section-templates", methods=["GET"])
@jwt_required()
def list_section_templates():
    category = request.args.get("category")
    tag = request.args.get("tag")
    query = request.args.get("q")

    if query:
        templates = registry.search(query)
    elif tag:
        templates = registry.get_by_tag(tag)
    elif category:
        templates = registry.get_by_category(category)
    else:
        templates = registry.get_active()

    return jsonify({
        "items": [normalize_template(t, include_defaults=False) for t in templates],
        "categories": registry.all_categories(),
        "total": len(templates),
    })


@v1_bp.route("/section-templates/<template_id>", methods=["GET"])
@jwt_required()
def get_section_template(template_id):
    template = registry.get_template(template_id)
    if template is None:
        raise NotFound("Section template not found")

    data = normalize_template(template)
    data["editor"] = editor_schema(template.component_name, template.props_model)
    return jsonify(data)
