from typing import Any, Dict
from flask import current_app
from sqlalchemy.exc import IntegrityError
from nexacms.models.page import Page
from nexacms.domain.access import require
from nexacms.domain.errors import BadInput, Conflict
from nexacms.domain.invariants.page import assert_page
from nexacms.application.validation import parse_input
from nexacms.utils.transaction import transactional
from .create_page import assert_slug_available
from .queries import get_page
from .schemas import PageUpdate


def update_page(
    *,
    role: str,
    page_id: str,
    data: Dict[str, Any],
) -> Page:
    """
    Update mutable fields on a page.

    Design rules:
    - Only whitelisted fields are mutable; status moves through publish/unpublish
    - A payload with no recognised fields is rejected
    - Invariants always revalidated
    """
    require(role, "page.update")
    payload = parse_input(PageUpdate, data)
    fields = payload.model_dump(exclude_unset=True)

    if not fields:
        raise BadInput("No valid fields provided for update")

    page = get_page(page_id)

    if "slug" in fields and fields["slug"] != page.slug:
        assert_slug_available(fields["slug"], exclude_page_id=page.id)

    changed_fields: list[str] = []

    try:
        with transactional():
            for field, value in fields.items():
                if getattr(page, field) != value:
                    setattr(page, field, value)
                    changed_fields.append(field)

            assert_page(page)

            current_app.logger.info(
                "page.update id=%s fields=%s", page.id, ",".join(changed_fields) or "-"
            )
    except IntegrityError as exc:
        raise Conflict("A page with this slug already exists") from exc

    return page
