from nexacms.extensions import db
from .base import BaseModel

MENU_LOCATIONS = (
    "HEADER_PRIMARY",
    "HEADER_SECONDARY",
    "FOOTER_PRIMARY",
    "FOOTER_SECONDARY",
    "SIDEBAR",
)
LINK_TARGETS = ("SELF", "BLANK")

# Display nesting limit for header/footer chrome; structure is not capped
MAX_DISPLAY_DEPTH = 3


class NavigationMenu(BaseModel):
    __tablename__ = "navigation_menus"

    name = db.Column(db.String(100), nullable=False)
    location = db.Column(db.String(30), nullable=False, index=True)
    is_active = db.Column(db.Boolean, nullable=False, default=True)

    items = db.relationship(
        "NavigationItem",
        back_populates="menu",
        cascade="all, delete-orphan",
    )

    __table_args__ = (
        db.UniqueConstraint("name", "location", name="uq_menu_name_location"),
    )

    def __repr__(self):
        return f"<NavigationMenu {self.name}@{self.location}>"


class NavigationItem(BaseModel):
    __tablename__ = "navigation_items"

    menu_id = db.Column(
        db.String(36),
        db.ForeignKey("navigation_menus.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    parent_id = db.Column(
        db.String(36),
        db.ForeignKey("navigation_items.id", ondelete="CASCADE"),
        nullable=True,
        index=True,
    )
    title = db.Column(db.String(100), nullable=False)
    url = db.Column(db.String(500), nullable=True)
    page_id = db.Column(
        db.String(36),
        db.ForeignKey("pages.id", ondelete="SET NULL"),
        nullable=True,
    )
    target = db.Column(db.String(10), nullable=False, default="SELF")
    order = db.Column(db.Integer, nullable=False, default=0)
    is_visible = db.Column(db.Boolean, nullable=False, default=True)
    css_class = db.Column(db.String(200), nullable=True)
    icon = db.Column(db.String(100), nullable=True)

    menu = db.relationship("NavigationMenu", back_populates="items")
    page = db.relationship("Page", lazy="joined")

    __table_args__ = (
        db.Index("idx_nav_item_siblings", "menu_id", "parent_id", "order"),
    )

    def __repr__(self):
        return f"<NavigationItem {self.title}>"
