from nexacms.extensions import db
from .base import BaseModel

PAGE_STATUSES = ("DRAFT", "PUBLISHED", "SCHEDULED")
HOMEPAGE_SLUG = "/"


class Page(BaseModel):
    __tablename__ = "pages"

    title = db.Column(db.String(200), nullable=False)
    slug = db.Column(db.String(200), nullable=False, unique=True, index=True)
    status = db.Column(db.String(20), nullable=False, default="DRAFT", index=True)

    seo_title = db.Column(db.String(200), nullable=True)
    seo_description = db.Column(db.Text, nullable=True)
    seo_keywords = db.Column(db.String(500), nullable=True)

    published_at = db.Column(db.DateTime(timezone=True), nullable=True)

    # Relationship to Sections (ordered, cascade deletes)
    sections = db.relationship(
        "PageSection",
        back_populates="page",
        order_by="PageSection.order",
        cascade="all, delete-orphan",
    )

    @property
    def is_homepage(self) -> bool:
        return self.slug == HOMEPAGE_SLUG

    def __repr__(self):
        return f"<Page {self.slug}>"
