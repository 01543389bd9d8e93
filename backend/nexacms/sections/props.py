"""
Typed props for every section component.

Props are persisted as camelCase JSON (``textAlign``, ``primaryButton``) and
exposed to Python as snake_case attributes. Each model's field defaults are
the template's default props, so the registry, the editor schema and the
renderer all read from one definition.

Widget hints for the editor live in ``json_schema_extra={"widget": ...}``.
"""
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


def _widget(name: str, **extra):
    return {"widget": name, **extra}


class PropsModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )

    def to_props(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


TextAlign = Literal["left", "center", "right"]
ContentTag = Literal["h1", "h2", "h3", "h4", "h5", "h6", "p", "span", "div"]
Alignment = Literal["start", "center", "end"]

# Values interpolated into inline `style` attributes are pattern-checked
HEX_COLOR = r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$"
CSS_ANGLE = r"^(?:-?\d{1,3}(?:\.\d+)?deg|to (?:top|bottom|left|right)(?: (?:top|bottom|left|right))?)$"
SAFE_URL = r"""^[^\s;()'"\\]*$"""


def _color(default):
    return Field(default, pattern=HEX_COLOR, json_schema_extra=_widget("color"))


# ------------------------
# Shared building blocks
# ------------------------

class TextContent(PropsModel):
    text: str = ""
    tag: ContentTag = "p"


def _text(text: str, tag: str = "p"):
    return Field(default_factory=lambda: TextContent(text=text, tag=tag))


class ButtonConfig(PropsModel):
    text: str = ""
    url: str = Field("#", json_schema_extra=_widget("url"))
    style: Literal["primary", "secondary", "outline", "ghost", "link"] = "primary"
    size: Literal["sm", "md", "lg", "xl"] = "lg"
    icon: Optional[str] = None
    icon_position: Literal["left", "right"] = "right"
    target: Literal["_self", "_blank", "_parent", "_top"] = "_self"


def _button(text: str, style: str = "primary", **kwargs):
    return Field(default_factory=lambda: ButtonConfig(text=text, style=style, **kwargs))


class MediaConfig(PropsModel):
    id: str = ""
    url: str = Field("", pattern=SAFE_URL, json_schema_extra=_widget("image"))
    type: Literal["image", "video"] = "image"
    alt: Optional[str] = None
    caption: Optional[str] = None
    object_fit: Literal["cover", "contain", "fill", "none", "scale-down"] = "cover"
    loading: Literal["lazy", "eager"] = "lazy"


class VideoConfig(MediaConfig):
    url: str = Field("", pattern=SAFE_URL, json_schema_extra=_widget("video"))
    type: Literal["image", "video"] = "video"
    autoplay: bool = True
    loop: bool = True
    muted: bool = True
    controls: bool = False
    poster: Optional[str] = Field(None, pattern=SAFE_URL, json_schema_extra=_widget("image"))


class GradientStop(PropsModel):
    color: str = _color("#3b82f6")
    stop: int = Field(0, ge=0, le=100)


class Gradient(PropsModel):
    type: Literal["linear", "radial"] = "linear"
    direction: str = Field("45deg", pattern=CSS_ANGLE)
    colors: List[GradientStop] = Field(
        default_factory=lambda: [
            GradientStop(color="#3b82f6", stop=0),
            GradientStop(color="#8b5cf6", stop=100),
        ]
    )


class Overlay(PropsModel):
    enabled: bool = False
    color: str = _color("#000000")
    opacity: float = Field(0.4, ge=0, le=1, json_schema_extra=_widget("slider"))


class BackgroundConfig(PropsModel):
    type: Literal["none", "color", "gradient", "image", "video"] = "none"
    color: Optional[str] = _color(None)
    gradient: Optional[Gradient] = None
    image: Optional[MediaConfig] = None
    overlay: Optional[Overlay] = None


def _gradient_background(start: str, end: str, direction: str = "45deg"):
    return Field(
        default_factory=lambda: BackgroundConfig(
            type="gradient",
            gradient=Gradient(
                direction=direction,
                colors=[GradientStop(color=start, stop=0), GradientStop(color=end, stop=100)],
            ),
        )
    )


def _color_background(color: str):
    return Field(default_factory=lambda: BackgroundConfig(type="color", color=color))


class FeatureItem(PropsModel):
    id: str = ""
    icon: Optional[str] = None
    title: str = ""
    description: str = Field("", json_schema_extra=_widget("textarea"))
    link: Optional[str] = Field(None, json_schema_extra=_widget("url"))


class TestimonialItem(PropsModel):
    id: str = ""
    quote: str = Field("", json_schema_extra=_widget("textarea"))
    author: str = ""
    company: Optional[str] = None
    role: Optional[str] = None
    avatar: Optional[MediaConfig] = None
    rating: Optional[int] = Field(None, ge=1, le=5)


class ProductItem(PropsModel):
    id: str = ""
    name: str = ""
    description: str = Field("", json_schema_extra=_widget("textarea"))
    price: Optional[str] = None
    original_price: Optional[str] = None
    currency: str = "$"
    images: List[MediaConfig] = Field(default_factory=list)
    features: List[str] = Field(default_factory=list)
    badge: Optional[str] = None
    link: Optional[str] = Field(None, json_schema_extra=_widget("url"))


class ServiceItem(PropsModel):
    id: str = ""
    title: str = ""
    description: str = Field("", json_schema_extra=_widget("textarea"))
    icon: Optional[str] = None
    features: List[str] = Field(default_factory=list)
    link: Optional[str] = Field(None, json_schema_extra=_widget("url"))


class TrustBadge(PropsModel):
    id: str = ""
    name: str = ""
    image: Optional[MediaConfig] = None
    link: Optional[str] = Field(None, json_schema_extra=_widget("url"))


class GalleryItem(PropsModel):
    id: str = ""
    image: MediaConfig = Field(default_factory=MediaConfig)
    caption: Optional[str] = None
    link: Optional[str] = Field(None, json_schema_extra=_widget("url"))


# ------------------------
# Content sections
# ------------------------

class TextBlockProps(PropsModel):
    content: str = Field("<p>Add your content here...</p>", json_schema_extra=_widget("rich-text"))
    text_align: TextAlign = "left"
    max_width: Literal["600px", "800px", "1000px", "100%"] = "800px"


class ImageTextProps(PropsModel):
    image: str = Field("", json_schema_extra=_widget("image"))
    image_alt: str = ""
    title: str = "Your Title Here"
    content: str = Field("<p>Your content here...</p>", json_schema_extra=_widget("rich-text"))
    layout: Literal["left", "right"] = "left"
    image_width: Literal["33%", "40%", "50%", "60%"] = "50%"


class LegacyHeroProps(PropsModel):
    title: str = "Welcome to Your Website"
    subtitle: str = "Build amazing experiences with our platform"
    button_text: str = "Get Started"
    button_link: str = Field("#", json_schema_extra=_widget("url"))
    background_image: str = Field("", pattern=SAFE_URL, json_schema_extra=_widget("image"))
    text_align: TextAlign = "center"


# ------------------------
# Hero variants
# ------------------------

class HeroCenteredProps(PropsModel):
    title: TextContent = _text("Welcome to Your Website", "h1")
    subtitle: Optional[TextContent] = _text("Build amazing experiences with our platform")
    description: Optional[TextContent] = _text(
        "Discover the power of our innovative solutions designed to help you succeed."
    )
    primary_button: Optional[ButtonConfig] = _button("Get Started")
    secondary_button: Optional[ButtonConfig] = _button("Learn More", "outline", icon_position="left")
    background: BackgroundConfig = _gradient_background("#3b82f6", "#8b5cf6")
    text_align: TextAlign = "center"


class SplitScreenContent(PropsModel):
    title: TextContent = _text("Innovative Solutions", "h1")
    subtitle: Optional[TextContent] = _text("Transform Your Business", "h2")
    description: Optional[TextContent] = _text(
        "Discover how our cutting-edge technology can revolutionize your workflow."
    )
    buttons: List[ButtonConfig] = Field(
        default_factory=lambda: [ButtonConfig(text="Start Free Trial")]
    )


class HeroSplitScreenProps(PropsModel):
    content: SplitScreenContent = Field(default_factory=SplitScreenContent)
    media: MediaConfig = Field(
        default_factory=lambda: MediaConfig(
            id="hero-media", url="/assets/hero/hero-image.jpg", alt="Hero image", loading="eager"
        )
    )
    layout: Literal["left", "right"] = "left"
    content_alignment: Alignment = "center"
    media_alignment: Alignment = "center"
    background: BackgroundConfig = _color_background("#ffffff")


class VideoContent(PropsModel):
    title: TextContent = _text("Experience Innovation", "h1")
    subtitle: Optional[TextContent] = _text("See Our Product in Action", "h2")
    description: Optional[TextContent] = _text(
        "Watch how our solution transforms businesses worldwide."
    )
    buttons: List[ButtonConfig] = Field(
        default_factory=lambda: [ButtonConfig(text="Watch Demo", icon_position="left")]
    )
    position: Literal["center", "top-left", "top-right", "bottom-left", "bottom-right"] = "center"


class HeroVideoProps(PropsModel):
    video: VideoConfig = Field(
        default_factory=lambda: VideoConfig(
            id="hero-video",
            url="/assets/hero/hero-video.mp4",
            poster="/assets/hero/video-poster.jpg",
            loading="eager",
        )
    )
    overlay: Overlay = Field(default_factory=lambda: Overlay(enabled=True))
    content: VideoContent = Field(default_factory=VideoContent)


class HeroMinimalProps(PropsModel):
    title: TextContent = _text("Simple. Elegant. Effective.", "h1")
    subtitle: Optional[TextContent] = _text("Less is more", "h2")
    button: Optional[ButtonConfig] = _button("Explore", "link")
    background: BackgroundConfig = _color_background("#ffffff")
    spacing: Literal["compact", "normal", "spacious"] = "normal"


class HeroFeatureProps(PropsModel):
    title: TextContent = _text("Powerful Features", "h1")
    subtitle: Optional[TextContent] = _text("Everything you need to succeed", "h2")
    description: Optional[TextContent] = _text(
        "Discover the comprehensive set of tools designed to accelerate your growth."
    )
    features: List[FeatureItem] = Field(
        default_factory=lambda: [
            FeatureItem(id="1", icon="🚀", title="Lightning Fast", description="Optimized for speed and performance"),
            FeatureItem(id="2", icon="🔒", title="Secure", description="Enterprise-grade security built-in"),
            FeatureItem(id="3", icon="📱", title="Responsive", description="Works perfectly on all devices"),
        ]
    )
    layout: Literal["grid", "list", "carousel"] = "grid"
    columns: Literal[2, 3, 4] = 3
    background: BackgroundConfig = _gradient_background("#667eea", "#764ba2", "135deg")
    primary_button: Optional[ButtonConfig] = _button("Get Started")


class HeroTestimonialProps(PropsModel):
    title: TextContent = _text("What Our Customers Say", "h1")
    subtitle: Optional[TextContent] = _text("Trusted by thousands of businesses worldwide", "h2")
    testimonials: List[TestimonialItem] = Field(
        default_factory=lambda: [
            TestimonialItem(
                id="testimonial-1",
                quote="This product has completely transformed our business operations.",
                author="Sarah Johnson",
                company="TechCorp Inc.",
                role="CEO",
                rating=5,
            ),
            TestimonialItem(
                id="testimonial-2",
                quote="Outstanding service and incredible results.",
                author="Michael Chen",
                company="Design Studio",
                role="Creative Director",
                rating=5,
            ),
        ]
    )
    layout: Literal["single", "carousel", "grid"] = "single"
    auto_rotate: bool = False
    rotation_interval: int = Field(5000, ge=1000)
    show_ratings: bool = True
    background: BackgroundConfig = _gradient_background("#667eea", "#764ba2", "135deg")
    primary_button: Optional[ButtonConfig] = None


class HeroProductProps(PropsModel):
    product: ProductItem = Field(
        default_factory=lambda: ProductItem(
            id="product-1",
            name="Amazing Product",
            description="Discover our flagship product with innovative features and exceptional quality.",
            price="99.99",
            original_price="149.99",
            badge="Best Seller",
            images=[
                MediaConfig(id="product-image-1", url="/assets/hero/product-main.jpg",
                            alt="Amazing Product - Main View", loading="eager"),
            ],
            features=["Premium materials", "2-year warranty", "Free shipping"],
        )
    )
    layout: Literal["left", "right", "center"] = "left"
    show_gallery: bool = True
    show_features: bool = True
    show_pricing: bool = True
    background: BackgroundConfig = _color_background("#f8fafc")
    primary_button: Optional[ButtonConfig] = _button("Buy Now")
    secondary_button: Optional[ButtonConfig] = _button("Learn More", "outline")


class HeroServiceProps(PropsModel):
    title: TextContent = _text("Professional Services", "h1")
    subtitle: Optional[TextContent] = _text("Expert solutions tailored to your business needs", "h2")
    description: Optional[TextContent] = _text(
        "We provide comprehensive services designed to help your business grow."
    )
    services: List[ServiceItem] = Field(
        default_factory=lambda: [
            ServiceItem(id="service-1", title="Consulting", icon="💼",
                        description="Strategic business consulting to drive growth",
                        features=["Expert analysis", "Custom strategies"]),
            ServiceItem(id="service-2", title="Development", icon="💻",
                        description="Custom software development solutions",
                        features=["Web applications", "API integration"]),
        ]
    )
    trust_badges: List[TrustBadge] = Field(default_factory=list)
    layout: Literal["grid", "list"] = "grid"
    show_trust_badges: bool = True
    background: BackgroundConfig = _color_background("#ffffff")
    primary_button: Optional[ButtonConfig] = _button("Get a Quote")
    contact_button: Optional[ButtonConfig] = _button("Contact Us", "outline")


class HeroCtaProps(PropsModel):
    title: TextContent = _text("Ready to Get Started?", "h1")
    subtitle: Optional[TextContent] = _text("Join thousands of satisfied customers today", "h2")
    description: Optional[TextContent] = None
    primary_button: ButtonConfig = _button("Start Now", size="xl")
    secondary_button: Optional[ButtonConfig] = None
    urgency_text: Optional[TextContent] = _text("Limited time offer", "p")
    benefits: List[str] = Field(
        default_factory=lambda: ["No credit card required", "Cancel anytime", "24/7 support"]
    )
    background: BackgroundConfig = _gradient_background("#f59e0b", "#ef4444")
    layout: Literal["center", "split"] = "center"
    show_benefits: bool = True


class HeroGalleryProps(PropsModel):
    title: TextContent = _text("Our Portfolio", "h1")
    subtitle: Optional[TextContent] = _text("A selection of our recent work", "h2")
    gallery: List[GalleryItem] = Field(
        default_factory=lambda: [
            GalleryItem(id="gallery-1", image=MediaConfig(id="g1", url="/assets/gallery/1.jpg", alt="Project one")),
            GalleryItem(id="gallery-2", image=MediaConfig(id="g2", url="/assets/gallery/2.jpg", alt="Project two")),
            GalleryItem(id="gallery-3", image=MediaConfig(id="g3", url="/assets/gallery/3.jpg", alt="Project three")),
        ]
    )
    layout: Literal["grid", "masonry", "carousel"] = "grid"
    columns: Literal[2, 3, 4, 5] = 3
    show_captions: bool = True
    lightbox: bool = True
    autoplay: bool = False
    autoplay_interval: int = Field(5000, ge=1000)
    background: BackgroundConfig = _color_background("#ffffff")
    primary_button: Optional[ButtonConfig] = None
