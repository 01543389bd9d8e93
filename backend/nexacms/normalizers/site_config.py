def normalize_site_config(config):
    return {
        "site_name": config.site_name,
        "site_description": config.site_description,
        "logo_url": config.logo_url,
        "colors": {
            "primary": config.primary_color,
            "secondary": config.secondary_color,
            "accent": config.accent_color,
            "background": config.background_color,
            "text": config.text_color,
            "border": config.border_color,
        },
        "theme": config.theme,
        "language": config.language,
        "direction": config.direction,
        "updated_at": config.updated_at.isoformat() if config.updated_at else None,
    }
