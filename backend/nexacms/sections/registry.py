"""
In-memory catalog of section templates.

Templates are code, not data: the catalog is built once at import time and
never mutated. Every filtered query is a predicate applied to
`get_active()`, which is the single canonical listing.
"""
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, FrozenSet, List, Optional, Type

from .components import ComponentName
from . import props as p


SECTION_CATEGORIES = {
    "HERO": "Hero",
    "CONTENT": "Content",
    "LAYOUT": "Layout",
    "MEDIA": "Media",
    "FORMS": "Forms",
    "NAVIGATION": "Navigation",
    "FOOTER": "Footer",
    "ECOMMERCE": "E-commerce",
    "TESTIMONIALS": "Testimonials",
    "PRICING": "Pricing",
    "TEAM": "Team",
    "FEATURES": "Features",
    "CTA": "Call to Action",
    "GALLERY": "Gallery",
    "BLOG": "Blog",
    "CONTACT": "Contact",
    "SOCIAL": "Social Media",
    "STATS": "Statistics",
    "FAQ": "FAQ",
    "TIMELINE": "Timeline",
}


class RegistryError(RuntimeError):
    pass


@dataclass(frozen=True)
class SectionTemplate:
    id: str
    name: str
    category: str
    component_name: ComponentName
    props_model: Type[p.PropsModel]
    description: str = ""
    icon: str = ""
    tags: FrozenSet[str] = field(default_factory=frozenset)
    is_active: bool = True
    version: str = "1.0.0"
    variant: Optional[str] = None

    @property
    def default_props(self) -> Dict[str, Any]:
        # Fresh dict per call; callers may mutate it
        return self.props_model().to_props()

    def validate_props(self, props: Dict[str, Any]) -> p.PropsModel:
        """Raises pydantic.ValidationError when `props` do not fit the variant."""
        return self.props_model.model_validate(props)


def _hero(variant, component_name, props_model, name, description, icon, tags):
    return SectionTemplate(
        id=f"hero-{variant}",
        name=name,
        category=SECTION_CATEGORIES["HERO"],
        component_name=component_name,
        props_model=props_model,
        description=description,
        icon=icon,
        tags=frozenset(tags),
        variant=variant,
    )


_CATALOG: List[SectionTemplate] = [
    _hero(
        "centered", ComponentName.HERO_CENTERED, p.HeroCenteredProps,
        "Hero Centered",
        "Traditional centered hero with title, subtitle, and call-to-action buttons",
        "🎯", ["hero", "centered", "landing", "cta", "traditional"],
    ),
    _hero(
        "split-screen", ComponentName.HERO_SPLIT_SCREEN, p.HeroSplitScreenProps,
        "Hero Split Screen",
        "Two-column layout with content on one side and media on the other",
        "📱", ["hero", "split-screen", "two-column", "media", "modern"],
    ),
    _hero(
        "video", ComponentName.HERO_VIDEO, p.HeroVideoProps,
        "Hero Video",
        "Full-screen video background with overlay content",
        "🎥", ["hero", "video", "background", "multimedia", "engaging"],
    ),
    _hero(
        "minimal", ComponentName.HERO_MINIMAL, p.HeroMinimalProps,
        "Hero Minimal",
        "Clean, typography-focused design with minimal elements",
        "✨", ["hero", "minimal", "clean", "typography", "simple"],
    ),
    _hero(
        "feature", ComponentName.HERO_FEATURE, p.HeroFeatureProps,
        "Hero Feature",
        "Showcase key features or benefits prominently",
        "⚡", ["hero", "features", "benefits", "grid", "showcase"],
    ),
    _hero(
        "testimonial", ComponentName.HERO_TESTIMONIAL, p.HeroTestimonialProps,
        "Hero Testimonial",
        "Social proof integration with customer testimonials and ratings",
        "💬", ["hero", "testimonial", "social-proof", "reviews", "customers"],
    ),
    _hero(
        "product", ComponentName.HERO_PRODUCT, p.HeroProductProps,
        "Hero Product",
        "Product showcase with gallery functionality and e-commerce features",
        "🛍️", ["hero", "product", "e-commerce", "gallery", "showcase"],
    ),
    _hero(
        "service", ComponentName.HERO_SERVICE, p.HeroServiceProps,
        "Hero Service",
        "Service-oriented layout with trust indicators and value proposition",
        "🏢", ["hero", "service", "business", "trust", "professional", "b2b"],
    ),
    _hero(
        "cta", ComponentName.HERO_CTA, p.HeroCtaProps,
        "Hero CTA",
        "Conversion-focused hero section with prominent call-to-action elements and urgency indicators",
        "🚀", ["hero", "cta", "conversion", "landing", "marketing", "urgency"],
    ),
    _hero(
        "gallery", ComponentName.HERO_GALLERY, p.HeroGalleryProps,
        "Hero Gallery",
        "Visual storytelling through image collections with lightbox and carousel functionality",
        "🖼️", ["hero", "gallery", "images", "lightbox", "carousel", "visual", "portfolio"],
    ),
    SectionTemplate(
        id="hero-section",
        name="Hero Section (Legacy)",
        category=SECTION_CATEGORIES["HERO"],
        component_name=ComponentName.HERO_SECTION,
        props_model=p.LegacyHeroProps,
        description="A hero section with title, subtitle, and call-to-action button",
        icon="🎯",
        tags=frozenset(["hero", "banner", "landing", "cta", "legacy"]),
        # Superseded by the hero variants; kept so persisted sections still render
        is_active=False,
    ),
    SectionTemplate(
        id="text-block",
        name="Text Block",
        category=SECTION_CATEGORIES["CONTENT"],
        component_name=ComponentName.TEXT_BLOCK,
        props_model=p.TextBlockProps,
        description="A simple text block with rich text editing",
        icon="📝",
        tags=frozenset(["text", "content", "paragraph", "rich-text"]),
    ),
    SectionTemplate(
        id="image-text",
        name="Image & Text",
        category=SECTION_CATEGORIES["CONTENT"],
        component_name=ComponentName.IMAGE_TEXT,
        props_model=p.ImageTextProps,
        description="Image with text content side by side",
        icon="🖼️",
        tags=frozenset(["image", "text", "media", "layout"]),
    ),
]

SECTION_REGISTRY: Dict[str, SectionTemplate] = {t.id: t for t in _CATALOG}


# ------------------------
# Queries
# ------------------------

def get_template(template_id: str) -> Optional[SectionTemplate]:
    return SECTION_REGISTRY.get(template_id)


def get_active() -> List[SectionTemplate]:
    return [t for t in SECTION_REGISTRY.values() if t.is_active]


def _filter_active(predicate: Callable[[SectionTemplate], bool]) -> List[SectionTemplate]:
    return [t for t in get_active() if predicate(t)]


def get_by_category(category: str) -> List[SectionTemplate]:
    return _filter_active(lambda t: t.category == category)


def get_by_tag(tag: str) -> List[SectionTemplate]:
    tag = tag.lower()
    return _filter_active(lambda t: tag in t.tags)


def search(query: str) -> List[SectionTemplate]:
    """Case-insensitive match over name, description and tags."""
    needle = (query or "").strip().lower()
    if not needle:
        return get_active()

    return _filter_active(
        lambda t: needle in t.name.lower()
        or needle in t.description.lower()
        or any(needle in tag for tag in t.tags)
    )


def get_hero_variants() -> List[str]:
    return [t.variant for t in get_by_category(SECTION_CATEGORIES["HERO"]) if t.variant]


def all_categories() -> List[str]:
    categories: List[str] = []
    for template in get_active():
        if template.category not in categories:
            categories.append(template.category)
    return sorted(categories)


def active_count() -> int:
    return len(get_active())


# ------------------------
# Consistency
# ------------------------

def validate_registry(logger=None) -> None:
    """
    Every active template must have a preview and an editor layout for its
    component, and the editor layout must place every top-level prop.
    """
    from .editors import EDITOR_LAYOUTS, missing_fields
    from .previews import PREVIEW_TEMPLATES

    problems: List[str] = []

    for template in get_active():
        component = template.component_name

        if component not in PREVIEW_TEMPLATES:
            problems.append(f"{template.id}: no preview for {component.value}")

        if component not in EDITOR_LAYOUTS:
            problems.append(f"{template.id}: no editor layout for {component.value}")
            continue

        unplaced = missing_fields(component, template.props_model)
        if unplaced:
            problems.append(
                f"{template.id}: editor layout misses {', '.join(sorted(unplaced))}"
            )

    if problems:
        if logger is not None:
            for problem in problems:
                logger.error("Section registry: %s", problem)
        raise RegistryError("; ".join(problems))


# ------------------------
# Legacy migration
# ------------------------

def migrate_legacy_hero(props: Dict[str, Any]) -> Dict[str, Any]:
    """
    Map flat `hero-section` props onto the `hero-centered` shape.

    Values missing from the legacy props fall back to the legacy defaults,
    so the migrated section reads the same as the one it replaces.
    """
    legacy = p.LegacyHeroProps.model_validate(props or {})

    if legacy.background_image:
        background = p.BackgroundConfig(
            type="image",
            image=p.MediaConfig(
                id="hero-bg",
                url=legacy.background_image,
                alt="Hero background",
            ),
        )
    else:
        background = p.BackgroundConfig(
            type="gradient",
            gradient=p.Gradient(
                direction="45deg",
                colors=[
                    p.GradientStop(color="#3b82f6", stop=0),
                    p.GradientStop(color="#8b5cf6", stop=100),
                ],
            ),
        )

    migrated = p.HeroCenteredProps(
        title=p.TextContent(text=legacy.title, tag="h1"),
        subtitle=p.TextContent(text=legacy.subtitle, tag="p"),
        description=None,
        primary_button=p.ButtonConfig(
            text=legacy.button_text,
            url=legacy.button_link,
            style="primary",
            size="lg",
        ),
        secondary_button=None,
        background=background,
        text_align=legacy.text_align,
    )

    return migrated.to_props()
