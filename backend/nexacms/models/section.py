from nexacms.extensions import db
from .base import BaseModel


class PageSection(BaseModel):
    __tablename__ = "page_sections"

    page_id = db.Column(
        db.String(36),
        db.ForeignKey("pages.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    # Key into the in-memory section registry, not a database FK
    section_template_id = db.Column(db.String(100), nullable=False)
    order = db.Column(db.Integer, nullable=False, default=0)
    props = db.Column(db.JSON, nullable=False, default=dict)

    page = db.relationship("Page", back_populates="sections")

    __table_args__ = (
        db.Index("idx_page_section_order", "page_id", "order"),
    )

    def __repr__(self):
        return f"<PageSection {self.section_template_id} #{self.order}>"
