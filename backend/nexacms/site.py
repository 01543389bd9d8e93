"""
Storefront: published pages as full HTML documents.

Section bodies come from the section renderer; the document chrome (head,
header and footer menus) is a Flask template.
"""
from flask import Blueprint, render_template
from nexacms.application.cms.queries import get_published_page
from nexacms.application.navigation.queries import get_active_menu
from nexacms.application.navigation.resolve_tree import resolve_tree
from nexacms.application.site.site_config import get_site_config
from nexacms.domain.errors import NotFound
from nexacms.models.navigation import MAX_DISPLAY_DEPTH
from nexacms.sections.renderer import render
from nexacms.sections.theme import Theme

site_bp = Blueprint("site", __name__)


def _menu_tree(location):
    menu = get_active_menu(location)
    if menu is None:
        return []
    return resolve_tree(menu.id, visible_only=True)


@site_bp.route("/", defaults={"path": ""}, methods=["GET"])
@site_bp.route("/<path:path>", methods=["GET"])
def storefront_page(path):
    config = get_site_config()
    theme = Theme.from_config(config)

    try:
        page = get_published_page("/" + path.strip("/"))
    except NotFound:
        return render_template(
            "site/not_found.html",
            theme=theme,
            header=_menu_tree("HEADER_PRIMARY"),
            footer=_menu_tree("FOOTER_PRIMARY"),
            max_depth=MAX_DISPLAY_DEPTH,
        ), 404

    document = render(page.sections, theme=theme, mode="public")

    return render_template(
        "site/page.html",
        page=page,
        document=document,
        theme=theme,
        site_description=config.site_description,
        header=_menu_tree("HEADER_PRIMARY"),
        footer=_menu_tree("FOOTER_PRIMARY"),
        max_depth=MAX_DISPLAY_DEPTH,
    )
