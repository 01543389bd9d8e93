from typing import Any, Dict, Optional
from flask import current_app
from pydantic import ValidationError
from nexacms.extensions import db
from nexacms.models.section import PageSection
from nexacms.domain.access import require
from nexacms.domain.errors import BadInput
from nexacms.domain.invariants.section import assert_section, assert_section_order
from nexacms.sections.registry import SectionTemplate, get_template
from nexacms.application.validation import describe_errors
from nexacms.utils.order import next_order
from nexacms.utils.transaction import transactional
from .queries import get_page


def resolve_template(template_id: str) -> SectionTemplate:
    template = get_template(template_id)
    if template is None:
        raise BadInput(f"Unknown section template: {template_id}")
    return template


def validate_props(template: SectionTemplate, props: Any) -> Dict[str, Any]:
    """
    Checks `props` against the variant's model and returns them as sent.
    Omitted keys keep falling back to template defaults at render time.
    """
    if not isinstance(props, dict):
        raise BadInput("Section props must be a JSON object")

    try:
        template.validate_props(props)
    except ValidationError as exc:
        raise BadInput(f"Invalid props for {template.id}: {describe_errors(exc)}") from exc

    return props


def add_section(
    *,
    role: str,
    page_id: str,
    template_id: str,
    props: Optional[Dict[str, Any]] = None,
    order: Optional[int] = None,
) -> PageSection:
    """
    Append a section instance to a page.

    - unknown or retired template: BadInput, nothing written
    - props omitted: the template's default props
    - order omitted: max(order) + 1 on the page, 1 for an empty page
    """
    require(role, "section.write")

    template = resolve_template(template_id)
    if not template.is_active:
        raise BadInput(f"Section template {template_id} is no longer available")

    page = get_page(page_id)
    values = template.default_props if props is None else validate_props(template, props)

    if order is not None and order < 1:
        raise BadInput("Section order must be a positive integer")

    with transactional():
        section = PageSection()
        section.page_id = page.id
        section.section_template_id = template.id
        section.props = values
        section.order = order if order is not None else next_order(
            PageSection.order, PageSection.page_id == page.id
        )

        assert_section(section)
        assert_section_order([section])

        db.session.add(section)
        db.session.flush()

        current_app.logger.info(
            "section.add id=%s page=%s template=%s order=%s",
            section.id, page.id, template.id, section.order,
        )

    return section
