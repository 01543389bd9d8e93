from typing import Any, Dict
from flask import current_app
from sqlalchemy.exc import IntegrityError
from nexacms.extensions import db
from nexacms.models.site_config import DEFAULT_SITE_CONFIG, SITE_CONFIG_ID, SiteConfig
from nexacms.domain.access import require
from nexacms.domain.errors import BadInput
from nexacms.application.validation import parse_input
from nexacms.sections.theme import Theme
from nexacms.utils.transaction import transactional
from .schemas import SiteConfigUpdate

# Cleared back to None with an explicit null; everything else keeps its value
NULLABLE_FIELDS = {"site_description", "logo_url"}


def _load_site_config():
    return db.session.get(SiteConfig, SITE_CONFIG_ID)


def get_site_config() -> SiteConfig:
    """
    The single configuration row, created with defaults on first read.

    Concurrent first reads race on the fixed primary key; the loser rolls
    back and reads the winner's row.
    """
    config = _load_site_config()
    if config:
        return config

    try:
        with transactional():
            config = SiteConfig(id=SITE_CONFIG_ID, **DEFAULT_SITE_CONFIG)
            db.session.add(config)
            db.session.flush()

            current_app.logger.info("site_config.create id=%s", config.id)
    except IntegrityError:
        current_app.logger.info("site_config.create lost race, reloading")
        return _load_site_config()

    return config


def get_theme() -> Theme:
    return Theme.from_config(get_site_config())


def update_site_config(
    *,
    role: str,
    data: Dict[str, Any],
) -> SiteConfig:
    require(role, "site_config.update")
    fields = parse_input(SiteConfigUpdate, data).model_dump(exclude_unset=True)
    fields = {k: v for k, v in fields.items() if v is not None or k in NULLABLE_FIELDS}

    if not fields:
        raise BadInput("No valid fields provided for update")

    config = get_site_config()

    with transactional():
        for field, value in fields.items():
            setattr(config, field, value)

        current_app.logger.info("site_config.update fields=%s", ",".join(sorted(fields)))

    return config
