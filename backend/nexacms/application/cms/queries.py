from typing import List, Optional

from nexacms.domain.errors import BadInput, NotFound
from nexacms.models.page import Page, PAGE_STATUSES
from nexacms.models.section import PageSection

MAX_PER_PAGE = 100


def get_page(page_id: str) -> Page:
    page = Page.query.filter_by(id=page_id).first()
    if not page:
        raise NotFound("Page not found")
    return page


def get_page_by_slug(slug: str) -> Optional[Page]:
    return Page.query.filter_by(slug=slug).first()


def list_pages(*, status: Optional[str] = None, page: int = 1, per_page: int = 10):
    """Offset pagination, newest first. Returns a Flask-SQLAlchemy Pagination."""
    if status and status not in PAGE_STATUSES:
        raise BadInput(f"Unknown page status: {status}")

    query = Page.query
    if status:
        query = query.filter_by(status=status)

    return query.order_by(Page.created_at.desc()).paginate(
        page=max(page, 1),
        per_page=min(max(per_page, 1), MAX_PER_PAGE),
        error_out=False,
    )


def get_published_page(slug: str) -> Page:
    """Public read path: anything not PUBLISHED is indistinguishable from missing."""
    page = Page.query.filter_by(slug=slug, status="PUBLISHED").first()
    if not page:
        raise NotFound("Page not found")
    return page


def get_section(section_id: str, page_id: Optional[str] = None) -> PageSection:
    section = PageSection.query.filter_by(id=section_id).first()
    if not section or (page_id is not None and section.page_id != page_id):
        raise NotFound("Section not found")
    return section


def get_sections(page_id: str) -> List[PageSection]:
    get_page(page_id)
    return (
        PageSection.query
        .filter_by(page_id=page_id)
        .order_by(PageSection.order.asc(), PageSection.created_at.asc())
        .all()
    )
