from typing import List, Sequence
from flask import current_app
from nexacms.models.section import PageSection
from nexacms.domain.access import require
from nexacms.domain.errors import BadInput, NotFound
from nexacms.utils.transaction import transactional
from .queries import get_page


def reorder_sections(
    *,
    role: str,
    page_id: str,
    section_ids: Sequence[str],
) -> List[PageSection]:
    """
    Listed sections take orders 1..N in list order; sections left out follow
    them, keeping their current relative order. All or nothing.
    """
    require(role, "section.write")

    if len(set(section_ids)) != len(section_ids):
        raise BadInput("Duplicate section ids in reorder request")

    page = get_page(page_id)
    sections = (
        PageSection.query
        .filter_by(page_id=page.id)
        .order_by(PageSection.order.asc(), PageSection.created_at.asc())
        .all()
    )
    by_id = {s.id: s for s in sections}

    unknown = [sid for sid in section_ids if sid not in by_id]
    if unknown:
        raise NotFound(f"Sections not on this page: {', '.join(unknown)}")

    listed = set(section_ids)
    ordered = [by_id[sid] for sid in section_ids] + [s for s in sections if s.id not in listed]

    with transactional():
        for index, section in enumerate(ordered, start=1):
            section.order = index

        current_app.logger.info("section.reorder page=%s count=%s", page.id, len(section_ids))

    return ordered
