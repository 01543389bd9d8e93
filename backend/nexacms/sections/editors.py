"""
Editor form schemas.

Field definitions are derived from each component's props model, so the
form can never drift from what the write path validates. The only
hand-written part is the grouping: which top-level props appear under which
heading.
"""
import types
import typing
from typing import Any, Dict, List, Optional, Sequence, Set, Tuple, Type

from pydantic import BaseModel
from pydantic.fields import FieldInfo

from .components import ComponentName
from .props import PropsModel


# (group id, label, top-level field names)
Group = Tuple[str, str, Sequence[str]]

EDITOR_LAYOUTS: Dict[ComponentName, List[Group]] = {
    ComponentName.HERO_SECTION: [
        ("content", "Content", ("title", "subtitle", "text_align")),
        ("button", "Button", ("button_text", "button_link")),
        ("background", "Background", ("background_image",)),
    ],
    ComponentName.TEXT_BLOCK: [
        ("content", "Content", ("content",)),
        ("layout", "Layout", ("text_align", "max_width")),
    ],
    ComponentName.IMAGE_TEXT: [
        ("media", "Image", ("image", "image_alt", "image_width")),
        ("content", "Content", ("title", "content")),
        ("layout", "Layout", ("layout",)),
    ],
    ComponentName.HERO_CENTERED: [
        ("content", "Content", ("title", "subtitle", "description", "text_align")),
        ("buttons", "Buttons", ("primary_button", "secondary_button")),
        ("background", "Background", ("background",)),
    ],
    ComponentName.HERO_SPLIT_SCREEN: [
        ("content", "Content", ("content",)),
        ("media", "Media", ("media",)),
        ("layout", "Layout", ("layout", "content_alignment", "media_alignment")),
        ("background", "Background", ("background",)),
    ],
    ComponentName.HERO_VIDEO: [
        ("video", "Video", ("video",)),
        ("overlay", "Overlay", ("overlay",)),
        ("content", "Content", ("content",)),
    ],
    ComponentName.HERO_MINIMAL: [
        ("content", "Content", ("title", "subtitle")),
        ("button", "Button", ("button",)),
        ("layout", "Layout", ("spacing", "background")),
    ],
    ComponentName.HERO_FEATURE: [
        ("content", "Content", ("title", "subtitle", "description")),
        ("features", "Features", ("features", "layout", "columns")),
        ("buttons", "Buttons", ("primary_button",)),
        ("background", "Background", ("background",)),
    ],
    ComponentName.HERO_TESTIMONIAL: [
        ("content", "Content", ("title", "subtitle")),
        ("testimonials", "Testimonials", (
            "testimonials", "layout", "auto_rotate", "rotation_interval", "show_ratings",
        )),
        ("buttons", "Buttons", ("primary_button",)),
        ("background", "Background", ("background",)),
    ],
    ComponentName.HERO_PRODUCT: [
        ("product", "Product", ("product",)),
        ("display", "Display", ("layout", "show_gallery", "show_features", "show_pricing")),
        ("buttons", "Buttons", ("primary_button", "secondary_button")),
        ("background", "Background", ("background",)),
    ],
    ComponentName.HERO_SERVICE: [
        ("content", "Content", ("title", "subtitle", "description")),
        ("services", "Services", ("services", "layout")),
        ("trust", "Trust Indicators", ("trust_badges", "show_trust_badges")),
        ("buttons", "Buttons", ("primary_button", "contact_button")),
        ("background", "Background", ("background",)),
    ],
    ComponentName.HERO_CTA: [
        ("content", "Content", ("title", "subtitle", "description", "urgency_text")),
        ("buttons", "Buttons", ("primary_button", "secondary_button")),
        ("benefits", "Benefits", ("benefits", "show_benefits")),
        ("layout", "Layout", ("layout", "background")),
    ],
    ComponentName.HERO_GALLERY: [
        ("content", "Content", ("title", "subtitle")),
        ("gallery", "Gallery", (
            "gallery", "layout", "columns", "show_captions",
            "lightbox", "autoplay", "autoplay_interval",
        )),
        ("buttons", "Buttons", ("primary_button",)),
        ("background", "Background", ("background",)),
    ],
}


def missing_fields(component: ComponentName, model: Type[PropsModel]) -> Set[str]:
    placed = {name for _, _, names in EDITOR_LAYOUTS.get(component, []) for name in names}
    return set(model.model_fields) - placed


# ------------------------
# Field introspection
# ------------------------

def _label(name: str) -> str:
    return name.replace("_", " ").title()


def _unwrap_optional(annotation) -> Tuple[Any, bool]:
    origin = typing.get_origin(annotation)
    if origin is typing.Union or origin is getattr(types, "UnionType", None):
        args = [a for a in typing.get_args(annotation) if a is not type(None)]
        if len(args) == 1:
            return args[0], True
    return annotation, False


def _is_model(annotation) -> bool:
    return isinstance(annotation, type) and issubclass(annotation, BaseModel)


def _lookup(defaults: Any, path: Sequence[str]) -> Any:
    value = defaults
    for key in path:
        if not isinstance(value, dict):
            return None
        value = value.get(key)
    return value


def _constraints(info: FieldInfo) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for meta in info.metadata:
        for attr, key in (("ge", "min"), ("gt", "min"), ("le", "max"), ("lt", "max")):
            value = getattr(meta, attr, None)
            if value is not None:
                out[key] = value
    return out


def _widget(info: FieldInfo) -> Optional[str]:
    extra = info.json_schema_extra
    if isinstance(extra, dict):
        return extra.get("widget")
    return None


def _model_fields(model: Type[BaseModel], path: Tuple[str, ...], labels: Tuple[str, ...],
                  defaults: Any) -> List[Dict[str, Any]]:
    fields: List[Dict[str, Any]] = []
    for name, info in model.model_fields.items():
        fields.extend(_field(name, info, path, labels, defaults))
    return fields


def _field(name: str, info: FieldInfo, path: Tuple[str, ...], labels: Tuple[str, ...],
           defaults: Any) -> List[Dict[str, Any]]:
    alias = info.alias or name
    field_path = path + (alias,)
    field_labels = labels + (_label(name),)
    annotation, optional = _unwrap_optional(info.annotation)

    if _is_model(annotation):
        # Nested objects flatten into dotted ids: "primaryButton.text"
        return _model_fields(annotation, field_path, field_labels, defaults)

    schema: Dict[str, Any] = {
        "id": ".".join(field_path),
        "label": " ".join(field_labels),
        "required": info.is_required() or not optional,
        "default": _lookup(defaults, field_path),
    }

    origin = typing.get_origin(annotation)

    if origin is typing.Literal:
        schema["type"] = "select"
        schema["options"] = [
            {"label": str(value).replace("-", " ").title(), "value": value}
            for value in typing.get_args(annotation)
        ]
    elif origin in (list, List):
        (item_type,) = typing.get_args(annotation) or (str,)
        schema["type"] = "repeater"
        if _is_model(item_type):
            item_defaults = item_type().to_props() if issubclass(item_type, PropsModel) else {}
            schema["item_fields"] = _model_fields(item_type, (), (), item_defaults)
        else:
            schema["item_fields"] = [{"id": "value", "label": "Value", "type": "text"}]
    elif annotation is bool:
        schema["type"] = "boolean"
    elif annotation in (int, float):
        schema["type"] = "number"
        schema.update(_constraints(info))
    else:
        schema["type"] = _widget(info) or "text"
        if schema["type"] == "slider":
            schema.update(_constraints(info))

    return [schema]


# ------------------------
# Public API
# ------------------------

def has_editor(component: ComponentName) -> bool:
    return component in EDITOR_LAYOUTS


def editor_schema(component: ComponentName, model: Type[PropsModel]) -> Dict[str, Any]:
    """
    Grouped form definition for one component.

    Shape::

        {"component_name": "HeroCentered",
         "groups": [{"id": "content", "label": "Content", "fields": [...]}, ...]}
    """
    defaults = model().to_props()
    groups = []

    for group_id, label, names in EDITOR_LAYOUTS[component]:
        fields: List[Dict[str, Any]] = []
        for name in names:
            fields.extend(_field(name, model.model_fields[name], (), (), defaults))
        groups.append({"id": group_id, "label": label, "fields": fields})

    return {"component_name": component.value, "groups": groups}
