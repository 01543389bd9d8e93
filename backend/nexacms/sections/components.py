from enum import Enum


class ComponentName(str, Enum):
    """
    Closed set of section components.

    Every registry entry names one of these; previews and editor layouts are
    keyed by them, so adding a member without both is caught by
    `validate_registry()`.
    """
    HERO_SECTION = "HeroSection"
    TEXT_BLOCK = "TextBlock"
    IMAGE_TEXT = "ImageText"

    HERO_CENTERED = "HeroCentered"
    HERO_SPLIT_SCREEN = "HeroSplitScreen"
    HERO_VIDEO = "HeroVideo"
    HERO_MINIMAL = "HeroMinimal"
    HERO_FEATURE = "HeroFeature"
    HERO_TESTIMONIAL = "HeroTestimonial"
    HERO_PRODUCT = "HeroProduct"
    HERO_SERVICE = "HeroService"
    HERO_CTA = "HeroCta"
    HERO_GALLERY = "HeroGallery"
