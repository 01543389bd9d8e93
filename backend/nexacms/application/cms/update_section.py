from typing import Any, Dict, Optional
from flask import current_app
from nexacms.models.section import PageSection
from nexacms.domain.access import require
from nexacms.domain.errors import BadInput
from nexacms.domain.invariants.section import assert_section_order
from nexacms.utils.transaction import transactional
from .add_section import resolve_template, validate_props
from .queries import get_section


def update_section(
    *,
    role: str,
    section_id: str,
    props: Optional[Dict[str, Any]] = None,
    order: Optional[int] = None,
    page_id: Optional[str] = None,
) -> PageSection:
    """
    Partial update: only the arguments given change.
    When `page_id` is given the section must belong to that page.
    """
    require(role, "section.write")
    section = get_section(section_id, page_id)

    if props is None and order is None:
        raise BadInput("Nothing to update: provide props and/or order")

    if props is not None:
        props = validate_props(resolve_template(section.section_template_id), props)

    if order is not None and order < 1:
        raise BadInput("Section order must be a positive integer")

    with transactional():
        if props is not None:
            # Reassign so the JSON column registers the change
            section.props = dict(props)
        if order is not None:
            section.order = order

        assert_section_order([section])

        current_app.logger.info(
            "section.update id=%s props=%s order=%s",
            section.id, props is not None, order,
        )

    return section
