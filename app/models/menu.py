from sqlalchemy import Boolean, Column, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship

from app.db import Base


class MenuItem(Base):
    __tablename__ = "menu_item"
    id = Column(Integer, primary_key=True)
    parent_id = Column(
        Integer, ForeignKey("menu_item.id", ondelete="CASCADE"), nullable=True
    )
    position = Column(String(20), nullable=False, default="header")  # header|footer|both
    item_type = Column(String(20), nullable=False, default="link")  # link|service|blog
    url = Column(String(255), nullable=True)
    service_id = Column(Integer, ForeignKey("service.id", ondelete="SET NULL"), nullable=True)
    blog_id = Column(Integer, ForeignKey("blog.id", ondelete="SET NULL"), nullable=True)
    open_in_new_tab = Column(Boolean, nullable=False, default=False)
    sort_order = Column(Integer, nullable=False, default=0)
    is_active = Column(Boolean, nullable=False, default=True)
    icon = Column(String(64))

    parent = relationship(
        "MenuItem", remote_side=[id], backref="children"
    )
    translations = relationship(
        "MenuItemTranslation",
        back_populates="menu_item",
        cascade="all, delete-orphan",
    )
    service = relationship("Service")
    blog = relationship("Blog")

    def get_translation(self, lang: str):
        return next((tr for tr in self.translations if tr.language_code == lang), None)


class MenuItemTranslation(Base):
    __tablename__ = "menu_item_tr"
    __table_args__ = (
        UniqueConstraint("menu_item_id", "language_code", name="uq_menu_item_tr"),
    )

    id = Column(Integer, primary_key=True)
    menu_item_id = Column(
        Integer,
        ForeignKey("menu_item.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    language_code = Column(String(10), nullable=False)
    label = Column(String(100), nullable=False)

    menu_item = relationship("MenuItem", back_populates="translations")
