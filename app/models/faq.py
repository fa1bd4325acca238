from sqlalchemy import Boolean, Column, ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import relationship

from app.db import Base


class Faq(Base):
    """Home page FAQ entry."""

    __tablename__ = "faq"

    id = Column(Integer, primary_key=True)
    order = Column(Integer, nullable=False, default=0)
    is_published = Column(Boolean, nullable=False, default=True)

    translations = relationship(
        "FaqTranslation",
        back_populates="faq",
        cascade="all, delete-orphan",
    )

    def get_translation(self, lang: str):
        return next((tr for tr in self.translations if tr.language_code == lang), None)


class FaqTranslation(Base):
    __tablename__ = "faq_tr"
    __table_args__ = (UniqueConstraint("faq_id", "language_code", name="uq_faq_tr"),)

    id = Column(Integer, primary_key=True)
    faq_id = Column(Integer, ForeignKey("faq.id", ondelete="CASCADE"), nullable=False, index=True)
    language_code = Column(String(10), nullable=False)
    question = Column(Text, nullable=False, default="")
    answer = Column(Text, nullable=False, default="")

    faq = relationship("Faq", back_populates="translations")
