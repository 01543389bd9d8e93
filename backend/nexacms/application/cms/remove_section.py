from typing import Optional
from flask import current_app
from nexacms.extensions import db
from nexacms.domain.access import require
from nexacms.utils.transaction import transactional
from .queries import get_section


def remove_section(
    *,
    role: str,
    section_id: str,
    page_id: Optional[str] = None,
) -> None:
    """Deletes one section. Remaining orders are left as they are; readers sort."""
    require(role, "section.write")
    section = get_section(section_id, page_id)

    with transactional():
        db.session.delete(section)

        current_app.logger.info("section.remove id=%s page=%s", section_id, section.page_id)
