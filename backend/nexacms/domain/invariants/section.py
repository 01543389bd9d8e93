from nexacms.sections.registry import get_template
from .exceptions import InvariantViolation


def assert_section_order(sections) -> None:
    """
    Section orders are positive. Gaps and transient duplicates are allowed;
    readers always sort.
    """
    for section in sections:
        if section.order is None or section.order < 1:
            raise InvariantViolation(
                f"Section order must be a positive integer: {section.order!r}"
            )


def assert_section(section) -> None:
    if get_template(section.section_template_id) is None:
        raise InvariantViolation(
            f"Unknown section template: {section.section_template_id}"
        )

    if not isinstance(section.props, dict):
        raise InvariantViolation("Section props must be a JSON object.")
