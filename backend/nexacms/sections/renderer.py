"""
Section renderer.

Turns an ordered list of section instances into HTML (preview and public
contexts) or into editor form payloads. Rendering never raises for bad
persisted data: unparseable props become ``{}``, props that fail validation
keep whatever keys still validate, and unknown templates render a visible
fallback block.
"""
import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from markupsafe import Markup
from pydantic import ValidationError

from . import registry
from .editors import editor_schema, has_editor
from .previews import has_preview, render_fallback, render_preview
from .props import PropsModel
from .theme import Theme

logger = logging.getLogger(__name__)

RENDER_MODES = ("preview", "public", "editor")


@dataclass(frozen=True)
class RenderedSection:
    id: Optional[str]
    template_id: str
    component_name: Optional[str]
    order: int
    html: Markup
    fallback: bool = False


@dataclass(frozen=True)
class Document:
    html: Markup
    sections: List[RenderedSection] = field(default_factory=list)
    theme: Theme = field(default_factory=Theme.default)
    # Populated only in editor mode
    editor: List[Dict[str, Any]] = field(default_factory=list)


# ------------------------
# Input normalization
# ------------------------

def _get(section: Any, key: str, default=None):
    if isinstance(section, Mapping):
        return section.get(key, default)
    return getattr(section, key, default)


def _template_id(section: Any) -> str:
    return _get(section, "section_template_id") or ""


def parse_props(raw: Union[str, Mapping, None], section_id: Optional[str] = None) -> Dict[str, Any]:
    """Props arrive as a dict or as a JSON string; anything else is `{}`."""
    if raw is None:
        return {}

    if isinstance(raw, Mapping):
        return dict(raw)

    if isinstance(raw, (str, bytes)):
        try:
            value = json.loads(raw)
        except ValueError:
            logger.warning("Section %s: props are not valid JSON, rendering defaults", section_id)
            return {}
        if isinstance(value, dict):
            return value

    logger.warning("Section %s: props are not an object, rendering defaults", section_id)
    return {}


def sort_sections(sections: Iterable[Any]) -> List[Any]:
    # sorted() is stable: equal orders keep input order
    return sorted(sections, key=lambda s: _get(s, "order", 0) or 0)


def coerce_props(template: registry.SectionTemplate, props: Dict[str, Any],
                 section_id: Optional[str] = None) -> PropsModel:
    """
    Validate props into the template's model.

    Top-level keys that fail validation are dropped so their defaults apply;
    the rest of the author's content survives.
    """
    try:
        return template.validate_props(props)
    except ValidationError as exc:
        bad_keys = {err["loc"][0] for err in exc.errors() if err.get("loc")}
        logger.warning(
            "Section %s (%s): invalid props %s, using defaults for them",
            section_id, template.id, sorted(str(k) for k in bad_keys),
        )

    cleaned = {k: v for k, v in props.items() if k not in bad_keys}
    try:
        return template.validate_props(cleaned)
    except ValidationError:
        return template.props_model()


def _dump(props: Dict[str, Any]) -> str:
    return json.dumps(props, sort_keys=True, indent=2, ensure_ascii=False, default=str)


def _wrap(section_id: Optional[str], template_id: str, inner: Markup, fallback: bool) -> Markup:
    classes = "cms-section cms-section--fallback" if fallback else "cms-section"
    return Markup(
        '<div class="{}" data-section-id="{}" data-template="{}">\n{}\n</div>'
    ).format(classes, section_id or "", template_id, inner)


# ------------------------
# Rendering
# ------------------------

def render_section(section: Any, theme: Optional[Theme] = None) -> RenderedSection:
    theme = theme or Theme.default()
    section_id = _get(section, "id")
    template_id = _template_id(section)
    order = _get(section, "order", 0) or 0
    props = parse_props(_get(section, "props"), section_id)

    template = registry.get_template(template_id)

    if template is None or not has_preview(template.component_name):
        name = template.name if template else template_id or "Unknown section"
        logger.warning("Section %s: no renderer for template %r", section_id, template_id)
        return RenderedSection(
            id=section_id,
            template_id=template_id,
            component_name=template.component_name.value if template else None,
            order=order,
            html=_wrap(section_id, template_id, render_fallback(name, _dump(props)), True),
            fallback=True,
        )

    model = coerce_props(template, props, section_id)
    inner = render_preview(template.component_name, model, theme)

    return RenderedSection(
        id=section_id,
        template_id=template_id,
        component_name=template.component_name.value,
        order=order,
        html=_wrap(section_id, template_id, inner, False),
    )


def render(sections: Iterable[Any], theme: Optional[Theme] = None, mode: str = "preview") -> Document:
    """
    Render sections in ascending `order`.

    `sections` may be model rows or dicts with `id`, `section_template_id`,
    `order` and `props`. The output is byte-identical for identical input.
    """
    if mode not in RENDER_MODES:
        raise ValueError(f"Unknown render mode: {mode}")

    theme = theme or Theme.default()

    if mode == "editor":
        return Document(html=Markup(""), theme=theme, editor=render_editor(sections))

    rendered = [render_section(s, theme) for s in sort_sections(sections)]
    html = Markup("\n").join(r.html for r in rendered)

    return Document(html=html, sections=rendered, theme=theme)


def render_editor(sections: Iterable[Any]) -> List[Dict[str, Any]]:
    """
    Editor payload per section: the form schema for its component plus the
    current props with defaults filled in.
    """
    payload: List[Dict[str, Any]] = []

    for section in sort_sections(sections):
        section_id = _get(section, "id")
        template_id = _template_id(section)
        props = parse_props(_get(section, "props"), section_id)
        template = registry.get_template(template_id)

        if template is None or not has_editor(template.component_name):
            payload.append({
                "id": section_id,
                "section_template_id": template_id,
                "component_name": template.component_name.value if template else None,
                "order": _get(section, "order", 0),
                "schema": None,
                "props": props,
                "fallback": True,
            })
            continue

        model = coerce_props(template, props, section_id)
        payload.append({
            "id": section_id,
            "section_template_id": template_id,
            "component_name": template.component_name.value,
            "order": _get(section, "order", 0),
            "schema": editor_schema(template.component_name, template.props_model),
            "props": model.to_props(),
            "fallback": False,
        })

    return payload

