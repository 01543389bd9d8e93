from nexacms.extensions import db
from .base import BaseModel

THEMES = ("LIGHT", "DARK", "AUTO")
DIRECTIONS = ("LTR", "RTL")

# Fixed primary key: the table holds at most one row
SITE_CONFIG_ID = "site"

DEFAULT_SITE_CONFIG = {
    "site_name": "My Website",
    "site_description": None,
    "logo_url": None,
    "primary_color": "#3b82f6",
    "secondary_color": "#64748b",
    "accent_color": "#10b981",
    "background_color": "#ffffff",
    "text_color": "#1f2937",
    "border_color": "#e5e7eb",
    "theme": "LIGHT",
    "language": "en",
    "direction": "LTR",
}


class SiteConfig(BaseModel):
    __tablename__ = "site_config"

    site_name = db.Column(db.String(200), nullable=False, default=DEFAULT_SITE_CONFIG["site_name"])
    site_description = db.Column(db.Text, nullable=True)
    logo_url = db.Column(db.String(512), nullable=True)

    primary_color = db.Column(db.String(7), nullable=False, default=DEFAULT_SITE_CONFIG["primary_color"])
    secondary_color = db.Column(db.String(7), nullable=False, default=DEFAULT_SITE_CONFIG["secondary_color"])
    accent_color = db.Column(db.String(7), nullable=False, default=DEFAULT_SITE_CONFIG["accent_color"])
    background_color = db.Column(db.String(7), nullable=False, default=DEFAULT_SITE_CONFIG["background_color"])
    text_color = db.Column(db.String(7), nullable=False, default=DEFAULT_SITE_CONFIG["text_color"])
    border_color = db.Column(db.String(7), nullable=False, default=DEFAULT_SITE_CONFIG["border_color"])

    theme = db.Column(db.String(10), nullable=False, default="LIGHT")
    language = db.Column(db.String(10), nullable=False, default="en")
    direction = db.Column(db.String(3), nullable=False, default="LTR")
