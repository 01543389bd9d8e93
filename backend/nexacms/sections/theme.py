from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional

from nexacms.models.site_config import DEFAULT_SITE_CONFIG


@dataclass(frozen=True)
class Theme:
    """
    Immutable rendering theme.

    Renderers receive it explicitly; `Theme.default()` is a valid input, not
    an error case.
    """
    site_name: str = DEFAULT_SITE_CONFIG["site_name"]
    primary_color: str = DEFAULT_SITE_CONFIG["primary_color"]
    secondary_color: str = DEFAULT_SITE_CONFIG["secondary_color"]
    accent_color: str = DEFAULT_SITE_CONFIG["accent_color"]
    background_color: str = DEFAULT_SITE_CONFIG["background_color"]
    text_color: str = DEFAULT_SITE_CONFIG["text_color"]
    border_color: str = DEFAULT_SITE_CONFIG["border_color"]
    mode: str = DEFAULT_SITE_CONFIG["theme"]
    language: str = DEFAULT_SITE_CONFIG["language"]
    direction: str = DEFAULT_SITE_CONFIG["direction"]
    logo_url: Optional[str] = None

    @classmethod
    def default(cls) -> "Theme":
        return cls()

    @classmethod
    def from_config(cls, config) -> "Theme":
        if config is None:
            return cls.default()

        return cls(
            site_name=config.site_name,
            primary_color=config.primary_color,
            secondary_color=config.secondary_color,
            accent_color=config.accent_color,
            background_color=config.background_color,
            text_color=config.text_color,
            border_color=config.border_color,
            mode=config.theme,
            language=config.language,
            direction=config.direction,
            logo_url=config.logo_url,
        )

    def css_variables(self) -> str:
        return (
            f"--cms-primary: {self.primary_color}; "
            f"--cms-secondary: {self.secondary_color}; "
            f"--cms-accent: {self.accent_color}; "
            f"--cms-background: {self.background_color}; "
            f"--cms-text: {self.text_color}; "
            f"--cms-border: {self.border_color};"
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
