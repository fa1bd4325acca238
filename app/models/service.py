from sqlalchemy import (
    JSON,
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from app.db import Base


class Service(Base):
    """A treatment page. Text lives in ServiceTranslation, one row per language."""

    __tablename__ = "service"

    id = Column(Integer, primary_key=True, index=True)
    published = Column(Boolean, nullable=False, default=False)
    hero_image_url = Column(String(255), nullable=True)
    hero_image_alt = Column(String(255), nullable=True)
    why_background_image_url = Column(String(255), nullable=True)
    cta_background_image_url = Column(String(255), nullable=True)
    cta_main_image_url = Column(String(255), nullable=True)
    cta_main_image_alt = Column(String(255), nullable=True)
    intro_video_id = Column(String(50), nullable=True)
    # raw per-section flags as written by the admin, e.g. {"toc": {...}, "faqSection": {...}}
    module_states = Column(JSON, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
    )

    translations = relationship(
        "ServiceTranslation",
        back_populates="service",
        cascade="all, delete-orphan",
    )
    images = relationship(
        "ServiceImage",
        back_populates="service",
        cascade="all, delete-orphan",
    )
    overview_tabs = relationship(
        "ServiceOverviewTab", back_populates="service", cascade="all, delete-orphan"
    )
    why_items = relationship(
        "ServiceWhyItem", back_populates="service", cascade="all, delete-orphan"
    )
    testimonials = relationship(
        "ServiceTestimonial", back_populates="service", cascade="all, delete-orphan"
    )
    recovery_items = relationship(
        "ServiceRecoveryItem", back_populates="service", cascade="all, delete-orphan"
    )
    expert_items = relationship(
        "ServiceExpertItem", back_populates="service", cascade="all, delete-orphan"
    )
    pricing_packages = relationship(
        "ServicePricingPackage", back_populates="service", cascade="all, delete-orphan"
    )

    def get_translation(self, lang: str):
        return next((tr for tr in self.translations if tr.language_code == lang), None)


class ServiceImage(Base):
    __tablename__ = "service_image"

    id = Column(Integer, primary_key=True)
    service_id = Column(
        Integer, ForeignKey("service.id", ondelete="CASCADE"), nullable=False, index=True
    )
    kind = Column(String(20), nullable=False)  # marquee|gallery|cta_avatar
    src = Column(String(255), nullable=False)
    alt = Column(String(255), nullable=False, default="")
    order = Column(Integer, nullable=False, default=0)

    service = relationship("Service", back_populates="images")


class ServiceTranslation(Base):
    __tablename__ = "service_tr"
    __table_args__ = (
        UniqueConstraint("slug", "language_code", name="uq_service_tr_slug_lang"),
        UniqueConstraint("service_id", "language_code", name="uq_service_tr_service_lang"),
    )

    id = Column(Integer, primary_key=True, index=True)
    service_id = Column(
        Integer, ForeignKey("service.id", ondelete="CASCADE"), nullable=False, index=True
    )
    language_code = Column(String(10), nullable=False, index=True)
    slug = Column(String(255), nullable=False, index=True)
    breadcrumb = Column(String(255), nullable=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)

    toc_title = Column(String(255), nullable=True)
    toc_author_info = Column(Text, nullable=True)
    toc_cta_description = Column(Text, nullable=True)

    intro_title = Column(String(255), nullable=True)
    intro_description = Column(Text, nullable=True)
    intro_primary_button_text = Column(String(100), nullable=True)
    intro_primary_button_link = Column(String(255), nullable=True)
    intro_secondary_button_text = Column(String(100), nullable=True)
    intro_secondary_button_link = Column(String(255), nullable=True)

    overview_section_title = Column(String(255), nullable=True)
    overview_section_description = Column(Text, nullable=True)
    why_section_title = Column(String(255), nullable=True)
    gallery_section_title = Column(String(255), nullable=True)
    gallery_section_description = Column(Text, nullable=True)
    testimonials_section_title = Column(String(255), nullable=True)
    steps_section_title = Column(String(255), nullable=True)
    steps_section_description = Column(Text, nullable=True)
    recovery_section_title = Column(String(255), nullable=True)
    recovery_section_description = Column(Text, nullable=True)

    cta_tagline = Column(String(255), nullable=True)
    cta_title = Column(String(255), nullable=True)
    cta_description = Column(Text, nullable=True)
    cta_button_text = Column(String(100), nullable=True)
    cta_button_link = Column(String(255), nullable=True)
    cta_avatar_text = Column(String(255), nullable=True)

    pricing_section_title = Column(String(255), nullable=True)
    pricing_section_description = Column(Text, nullable=True)
    experts_section_title = Column(String(255), nullable=True)
    experts_tagline = Column(String(255), nullable=True)
    faq_section_title = Column(String(255), nullable=True)
    faq_section_description = Column(Text, nullable=True)

    meta_title = Column(String(255), nullable=True)
    meta_description = Column(String(255), nullable=True)
    meta_keywords = Column(String(255), nullable=True)

    service = relationship("Service", back_populates="translations")
    toc_items = relationship(
        "ServiceTocItem", back_populates="translation", cascade="all, delete-orphan"
    )
    intro_links = relationship(
        "ServiceIntroLink", back_populates="translation", cascade="all, delete-orphan"
    )
    steps = relationship(
        "ServiceStep", back_populates="translation", cascade="all, delete-orphan"
    )
    faqs = relationship(
        "ServiceFaq", back_populates="translation", cascade="all, delete-orphan"
    )


class ServiceTocItem(Base):
    __tablename__ = "service_toc_item"

    id = Column(Integer, primary_key=True)
    translation_id = Column(
        Integer, ForeignKey("service_tr.id", ondelete="CASCADE"), nullable=False, index=True
    )
    text = Column(String(255), nullable=False)
    is_bold = Column(Boolean, nullable=False, default=False)
    level = Column(Integer, nullable=True)
    order = Column(Integer, nullable=False, default=0)

    translation = relationship("ServiceTranslation", back_populates="toc_items")


class ServiceIntroLink(Base):
    __tablename__ = "service_intro_link"

    id = Column(Integer, primary_key=True)
    translation_id = Column(
        Integer, ForeignKey("service_tr.id", ondelete="CASCADE"), nullable=False, index=True
    )
    target_id = Column(String(100), nullable=False)
    number = Column(String(10), nullable=False)
    text = Column(String(255), nullable=False)
    order = Column(Integer, nullable=False, default=0)

    translation = relationship("ServiceTranslation", back_populates="intro_links")


class ServiceStep(Base):
    __tablename__ = "service_step"

    id = Column(Integer, primary_key=True)
    translation_id = Column(
        Integer, ForeignKey("service_tr.id", ondelete="CASCADE"), nullable=False, index=True
    )
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    link_text = Column(String(255), nullable=True)
    order = Column(Integer, nullable=False, default=0)

    translation = relationship("ServiceTranslation", back_populates="steps")


class ServiceFaq(Base):
    __tablename__ = "service_faq"

    id = Column(Integer, primary_key=True)
    translation_id = Column(
        Integer, ForeignKey("service_tr.id", ondelete="CASCADE"), nullable=False, index=True
    )
    question = Column(Text, nullable=False)
    answer = Column(Text, nullable=False)
    order = Column(Integer, nullable=False, default=0)

    translation = relationship("ServiceTranslation", back_populates="faqs")


# Definition/translation pairs: structure on the definition, text per language.


class ServiceOverviewTab(Base):
    __tablename__ = "service_overview_tab"

    id = Column(Integer, primary_key=True)
    service_id = Column(
        Integer, ForeignKey("service.id", ondelete="CASCADE"), nullable=False, index=True
    )
    value = Column(String(100), nullable=False)
    image_path = Column(String(255), nullable=True)
    image_alt = Column(String(255), nullable=True)
    order = Column(Integer, nullable=False, default=0)

    service = relationship("Service", back_populates="overview_tabs")
    translations = relationship(
        "ServiceOverviewTabTranslation",
        back_populates="definition",
        cascade="all, delete-orphan",
    )


class ServiceOverviewTabTranslation(Base):
    __tablename__ = "service_overview_tab_tr"
    __table_args__ = (
        UniqueConstraint("definition_id", "language_code", name="uq_service_overview_tab_tr"),
    )

    id = Column(Integer, primary_key=True)
    definition_id = Column(
        Integer,
        ForeignKey("service_overview_tab.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    language_code = Column(String(10), nullable=False)
    trigger_text = Column(String(255), nullable=False, default="")
    title = Column(String(255), nullable=False, default="")
    content = Column(Text, nullable=False, default="")
    button_text = Column(String(100), nullable=False, default="")
    button_link = Column(String(255), nullable=True)

    definition = relationship("ServiceOverviewTab", back_populates="translations")


class ServiceWhyItem(Base):
    __tablename__ = "service_why_item"

    id = Column(Integer, primary_key=True)
    service_id = Column(
        Integer, ForeignKey("service.id", ondelete="CASCADE"), nullable=False, index=True
    )
    number = Column(String(10), nullable=False)
    order = Column(Integer, nullable=False, default=0)

    service = relationship("Service", back_populates="why_items")
    translations = relationship(
        "ServiceWhyItemTranslation",
        back_populates="definition",
        cascade="all, delete-orphan",
    )


class ServiceWhyItemTranslation(Base):
    __tablename__ = "service_why_item_tr"
    __table_args__ = (
        UniqueConstraint("definition_id", "language_code", name="uq_service_why_item_tr"),
    )

    id = Column(Integer, primary_key=True)
    definition_id = Column(
        Integer,
        ForeignKey("service_why_item.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    language_code = Column(String(10), nullable=False)
    title = Column(String(255), nullable=False, default="")
    description = Column(Text, nullable=False, default="")

    definition = relationship("ServiceWhyItem", back_populates="translations")


class ServiceTestimonial(Base):
    __tablename__ = "service_testimonial"

    id = Column(Integer, primary_key=True)
    service_id = Column(
        Integer, ForeignKey("service.id", ondelete="CASCADE"), nullable=False, index=True
    )
    stars = Column(Integer, nullable=False, default=5)
    image_url = Column(String(255), nullable=True)
    order = Column(Integer, nullable=False, default=0)

    service = relationship("Service", back_populates="testimonials")
    translations = relationship(
        "ServiceTestimonialTranslation",
        back_populates="definition",
        cascade="all, delete-orphan",
    )


class ServiceTestimonialTranslation(Base):
    __tablename__ = "service_testimonial_tr"
    __table_args__ = (
        UniqueConstraint("definition_id", "language_code", name="uq_service_testimonial_tr"),
    )

    id = Column(Integer, primary_key=True)
    definition_id = Column(
        Integer,
        ForeignKey("service_testimonial.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    language_code = Column(String(10), nullable=False)
    text = Column(Text, nullable=False, default="")
    author = Column(String(255), nullable=False, default="")
    treatment = Column(String(255), nullable=True)

    definition = relationship("ServiceTestimonial", back_populates="translations")


class ServiceRecoveryItem(Base):
    __tablename__ = "service_recovery_item"

    id = Column(Integer, primary_key=True)
    service_id = Column(
        Integer, ForeignKey("service.id", ondelete="CASCADE"), nullable=False, index=True
    )
    image_url = Column(String(255), nullable=False)
    image_alt = Column(String(255), nullable=False, default="")
    order = Column(Integer, nullable=False, default=0)

    service = relationship("Service", back_populates="recovery_items")
    translations = relationship(
        "ServiceRecoveryItemTranslation",
        back_populates="definition",
        cascade="all, delete-orphan",
    )


class ServiceRecoveryItemTranslation(Base):
    __tablename__ = "service_recovery_item_tr"
    __table_args__ = (
        UniqueConstraint("definition_id", "language_code", name="uq_service_recovery_item_tr"),
    )

    id = Column(Integer, primary_key=True)
    definition_id = Column(
        Integer,
        ForeignKey("service_recovery_item.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    language_code = Column(String(10), nullable=False)
    title = Column(String(255), nullable=False, default="")
    description = Column(Text, nullable=False, default="")

    definition = relationship("ServiceRecoveryItem", back_populates="translations")


class ServiceExpertItem(Base):
    __tablename__ = "service_expert_item"

    id = Column(Integer, primary_key=True)
    service_id = Column(
        Integer, ForeignKey("service.id", ondelete="CASCADE"), nullable=False, index=True
    )
    image_url = Column(String(255), nullable=False)
    image_alt = Column(String(255), nullable=False, default="")
    order = Column(Integer, nullable=False, default=0)

    service = relationship("Service", back_populates="expert_items")
    translations = relationship(
        "ServiceExpertItemTranslation",
        back_populates="definition",
        cascade="all, delete-orphan",
    )


class ServiceExpertItemTranslation(Base):
    __tablename__ = "service_expert_item_tr"
    __table_args__ = (
        UniqueConstraint("definition_id", "language_code", name="uq_service_expert_item_tr"),
    )

    id = Column(Integer, primary_key=True)
    definition_id = Column(
        Integer,
        ForeignKey("service_expert_item.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    language_code = Column(String(10), nullable=False)
    name = Column(String(255), nullable=False, default="")
    title = Column(String(255), nullable=False, default="")
    description = Column(Text, nullable=False, default="")
    cta_text = Column(String(100), nullable=True)

    definition = relationship("ServiceExpertItem", back_populates="translations")


class ServicePricingPackage(Base):
    __tablename__ = "service_pricing_package"

    id = Column(Integer, primary_key=True)
    service_id = Column(
        Integer, ForeignKey("service.id", ondelete="CASCADE"), nullable=False, index=True
    )
    is_featured = Column(Boolean, nullable=False, default=False)
    order = Column(Integer, nullable=False, default=0)

    service = relationship("Service", back_populates="pricing_packages")
    translations = relationship(
        "ServicePricingPackageTranslation",
        back_populates="definition",
        cascade="all, delete-orphan",
    )


class ServicePricingPackageTranslation(Base):
    __tablename__ = "service_pricing_package_tr"
    __table_args__ = (
        UniqueConstraint(
            "definition_id", "language_code", name="uq_service_pricing_package_tr"
        ),
    )

    id = Column(Integer, primary_key=True)
    definition_id = Column(
        Integer,
        ForeignKey("service_pricing_package.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    language_code = Column(String(10), nullable=False)
    title = Column(String(255), nullable=False, default="")
    price = Column(String(100), nullable=False, default="")
    features = Column(JSON, nullable=True)  # list of strings

    definition = relationship("ServicePricingPackage", back_populates="translations")
