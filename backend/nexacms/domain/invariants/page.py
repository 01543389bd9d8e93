from nexacms.models.page import PAGE_STATUSES
from .exceptions import InvariantViolation


def assert_slug(slug: str) -> None:
    if not slug or not slug.startswith("/"):
        raise InvariantViolation(f"Slug must start with '/': {slug!r}")

    if slug != "/" and (slug.endswith("/") or "//" in slug):
        raise InvariantViolation(f"Slug has empty path segments: {slug!r}")

    if any(ch.isspace() for ch in slug):
        raise InvariantViolation(f"Slug must not contain whitespace: {slug!r}")


def assert_page(page) -> None:
    if not page.title or not page.title.strip():
        raise InvariantViolation("Page title is required.")

    assert_slug(page.slug)

    if page.status not in PAGE_STATUSES:
        raise InvariantViolation(f"Unknown page status: {page.status}")

    if page.status == "PUBLISHED" and page.published_at is None:
        raise InvariantViolation("Published page has no publish timestamp.")
