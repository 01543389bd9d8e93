"""
Preview renderers: one Jinja2 template per section component.

The environment is standalone (not the Flask app's) so rendering stays a
pure function of its inputs and works outside a request context.
"""
from typing import Dict, Optional

from jinja2 import Environment, PackageLoader, select_autoescape
from markupsafe import Markup

from .components import ComponentName
from .props import BackgroundConfig, PropsModel
from .theme import Theme


PREVIEW_TEMPLATES: Dict[ComponentName, str] = {
    ComponentName.HERO_SECTION: "hero_section.html",
    ComponentName.TEXT_BLOCK: "text_block.html",
    ComponentName.IMAGE_TEXT: "image_text.html",
    ComponentName.HERO_CENTERED: "hero_centered.html",
    ComponentName.HERO_SPLIT_SCREEN: "hero_split_screen.html",
    ComponentName.HERO_VIDEO: "hero_video.html",
    ComponentName.HERO_MINIMAL: "hero_minimal.html",
    ComponentName.HERO_FEATURE: "hero_feature.html",
    ComponentName.HERO_TESTIMONIAL: "hero_testimonial.html",
    ComponentName.HERO_PRODUCT: "hero_product.html",
    ComponentName.HERO_SERVICE: "hero_service.html",
    ComponentName.HERO_CTA: "hero_cta.html",
    ComponentName.HERO_GALLERY: "hero_gallery.html",
}

FALLBACK_TEMPLATE = "fallback.html"


def background_style(background: Optional[BackgroundConfig]) -> str:
    """Inline CSS for a section background."""
    if background is None or background.type == "none":
        return ""

    if background.type == "color" and background.color:
        return f"background-color: {background.color};"

    if background.type == "gradient" and background.gradient:
        gradient = background.gradient
        stops = ", ".join(f"{c.color} {c.stop}%" for c in gradient.colors)
        if gradient.type == "radial":
            return f"background: radial-gradient(circle, {stops});"
        return f"background: linear-gradient({gradient.direction}, {stops});"

    if background.type == "image" and background.image and background.image.url:
        return (
            f"background-image: url('{background.image.url}'); "
            "background-size: cover; background-position: center;"
        )

    return ""


_env = Environment(
    loader=PackageLoader("nexacms", "templates/sections"),
    autoescape=select_autoescape(["html"]),
    trim_blocks=True,
    lstrip_blocks=True,
)
_env.filters["background_style"] = background_style


def has_preview(component: ComponentName) -> bool:
    return component in PREVIEW_TEMPLATES


def render_preview(component: ComponentName, props: PropsModel, theme: Theme) -> Markup:
    template = _env.get_template(PREVIEW_TEMPLATES[component])
    return Markup(template.render(props=props, theme=theme).strip())


def render_fallback(name: str, raw_props: str) -> Markup:
    template = _env.get_template(FALLBACK_TEMPLATE)
    return Markup(template.render(name=name, raw_props=raw_props).strip())
