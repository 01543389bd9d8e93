# Unauthenticated read API: published content only
from flask import request, jsonify
from nexacms.domain.errors import BadInput
from nexacms.models.navigation import MENU_LOCATIONS
from nexacms.application.cms.queries import get_published_page
from nexacms.application.navigation.queries import get_active_menu
from nexacms.application.navigation.resolve_tree import resolve_tree
from nexacms.application.site.search import search_pages
from nexacms.application.site.site_config import get_site_config, get_theme
from nexacms.normalizers.navigation import normalize_menu, normalize_tree_node
from nexacms.normalizers.page import normalize_page
from nexacms.normalizers.site_config import normalize_site_config
from nexacms.sections.renderer import render
from . import v1_bp


@v1_bp.route("/public/pages/", defaults={"path": ""}, methods=["GET"])
@v1_bp.route("/public/pages/<path:path>", methods=["GET"])
def public_page(path):
    page = get_published_page("/" + path.strip("/"))

    data = normalize_page(page)
    if request.args.get("render", "").lower() in ("1", "true"):
        data["html"] = str(render(page.sections, theme=get_theme(), mode="public").html)

    return jsonify(data)


@v1_bp.route("/public/search", methods=["GET"])
def public_search():
    query = request.args.get("q", "")
    results = search_pages(query)

    return jsonify({
        "query": query,
        "results": [
            {
                "id": r.page.id,
                "title": r.page.title,
                "slug": r.page.slug,
                "score": r.score,
                "excerpt": str(r.excerpt),
            }
            for r in results
        ],
    })


@v1_bp.route("/public/navigation/<location>", methods=["GET"])
def public_navigation(location):
    location = location.upper()
    if location not in MENU_LOCATIONS:
        raise BadInput(f"Unknown menu location: {location}")

    menu = get_active_menu(location)
    if menu is None:
        return jsonify({"menu": None, "items": []})

    return jsonify({
        "menu": normalize_menu(menu),
        "items": [normalize_tree_node(n) for n in resolve_tree(menu.id, visible_only=True)],
    })


@v1_bp.route("/public/site-config", methods=["GET"])
def public_site_config():
    return jsonify(normalize_site_config(get_site_config()))
