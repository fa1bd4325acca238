from sqlalchemy import select
from sqlalchemy.orm import selectinload

from app.models.blog import BlogTranslation
from app.models.service import (
    Service,
    ServiceExpertItem,
    ServiceOverviewTab,
    ServicePricingPackage,
    ServiceRecoveryItem,
    ServiceTestimonial,
    ServiceTranslation,
    ServiceWhyItem,
)
from app.services.module_state import log_adjustment, normalize_module_states
from app.services.resolver import (
    DefinitionRecord,
    ResolvedContent,
    SqlContentStore,
    row_to_dict,
)

SERVICE_TEXT_FIELDS = (
    "breadcrumb",
    "title",
    "description",
    "toc_title",
    "toc_author_info",
    "toc_cta_description",
    "intro_title",
    "intro_description",
    "intro_primary_button_text",
    "intro_primary_button_link",
    "intro_secondary_button_text",
    "intro_secondary_button_link",
    "overview_section_title",
    "overview_section_description",
    "why_section_title",
    "gallery_section_title",
    "gallery_section_description",
    "testimonials_section_title",
    "steps_section_title",
    "steps_section_description",
    "recovery_section_title",
    "recovery_section_description",
    "cta_tagline",
    "cta_title",
    "cta_description",
    "cta_button_text",
    "cta_button_link",
    "cta_avatar_text",
    "pricing_section_title",
    "pricing_section_description",
    "experts_section_title",
    "experts_tagline",
    "faq_section_title",
    "faq_section_description",
    "meta_title",
    "meta_description",
    "meta_keywords",
)

SERVICE_ITEM_FIELDS = (
    "hero_image_url",
    "hero_image_alt",
    "why_background_image_url",
    "cta_background_image_url",
    "cta_main_image_url",
    "cta_main_image_alt",
    "intro_video_id",
)

IMAGE_GROUPS = {
    "marquee": "marquee_images",
    "gallery": "gallery_images",
    "cta_avatar": "cta_avatars",
}

# view key -> (translation relationship, columns)
TRANSLATION_COLLECTIONS = {
    "toc_items": ("toc_items", ("id", "text", "is_bold", "level", "order")),
    "intro_links": ("intro_links", ("id", "target_id", "number", "text", "order")),
    "steps": ("steps", ("id", "title", "description", "link_text", "order")),
    "faqs": ("faqs", ("id", "question", "answer", "order")),
}

# view key -> (service relationship, structural columns, text defaults)
DEFINITION_GROUPS = {
    "overview_tabs": (
        "overview_tabs",
        ("id", "value", "image_path", "image_alt", "order"),
        {"trigger_text": "", "title": "", "content": "", "button_text": "", "button_link": ""},
    ),
    "why_items": (
        "why_items",
        ("id", "number", "order"),
        {"title": "", "description": ""},
    ),
    "testimonials": (
        "testimonials",
        ("id", "stars", "image_url", "order"),
        {"text": "", "author": "", "treatment": ""},
    ),
    "recovery_items": (
        "recovery_items",
        ("id", "image_url", "image_alt", "order"),
        {"title": "", "description": ""},
    ),
    "expert_items": (
        "expert_items",
        ("id", "image_url", "image_alt", "order"),
        {"name": "", "title": "", "description": "", "cta_text": ""},
    ),
    "pricing_packages": (
        "pricing_packages",
        ("id", "is_featured", "order"),
        {"title": "", "price": "", "features": []},
    ),
}

DEFINITION_RELATIONS = (
    (Service.overview_tabs, ServiceOverviewTab),
    (Service.why_items, ServiceWhyItem),
    (Service.testimonials, ServiceTestimonial),
    (Service.recovery_items, ServiceRecoveryItem),
    (Service.expert_items, ServiceExpertItem),
    (Service.pricing_packages, ServicePricingPackage),
)


class ServiceStore(SqlContentStore):
    translation_model = ServiceTranslation
    item_fk = "service_id"

    def _load_options(self):
        return (
            selectinload(ServiceTranslation.service),
            selectinload(ServiceTranslation.toc_items),
            selectinload(ServiceTranslation.intro_links),
            selectinload(ServiceTranslation.steps),
            selectinload(ServiceTranslation.faqs),
        )

    def published_flag(self, translation) -> bool:
        return translation.service.published

    def _load_service(self, service_id: int) -> Service:
        options = [selectinload(Service.images)]
        for relation, definition_model in DEFINITION_RELATIONS:
            options.append(selectinload(relation).selectinload(definition_model.translations))
        return self.db.execute(
            select(Service).options(*options).where(Service.id == service_id)
        ).scalar_one()

    def build(self, translation, requested_locale: str) -> ResolvedContent:
        locale = translation.language_code
        service = self._load_service(translation.service_id)

        assets = {name: [] for name in IMAGE_GROUPS.values()}
        for image in service.images:
            group = IMAGE_GROUPS.get(image.kind)
            if group:
                assets[group].append(row_to_dict(image, ("id", "src", "alt", "order")))

        collections = {
            name: [row_to_dict(row, columns) for row in getattr(translation, relation)]
            for name, (relation, columns) in TRANSLATION_COLLECTIONS.items()
        }

        definitions = {}
        for name, (relation, columns, text_defaults) in DEFINITION_GROUPS.items():
            records = []
            for definition in getattr(service, relation):
                match = next(
                    (tr for tr in definition.translations if tr.language_code == locale),
                    None,
                )
                records.append(
                    DefinitionRecord(
                        fields=row_to_dict(definition, columns),
                        translation=row_to_dict(match, text_defaults) if match else None,
                        text_defaults=text_defaults,
                    )
                )
            definitions[name] = records

        return ResolvedContent(
            item_id=service.id,
            slug=translation.slug,
            locale=locale,
            requested_locale=requested_locale,
            is_fallback=locale != requested_locale,
            fields=row_to_dict(translation, SERVICE_TEXT_FIELDS),
            item_fields=row_to_dict(service, SERVICE_ITEM_FIELDS),
            assets=assets,
            collections=collections,
            definitions=definitions,
            module_states=normalize_module_states(service.module_states, log_adjustment),
        )


class BlogStore(SqlContentStore):
    translation_model = BlogTranslation
    item_fk = "blog_id"

    def _load_options(self):
        return (selectinload(BlogTranslation.blog),)

    def published_flag(self, translation) -> bool:
        return translation.blog.is_published

    def build(self, translation, requested_locale: str) -> ResolvedContent:
        blog = translation.blog
        locale = translation.language_code
        published_at = blog.published_at.isoformat() if blog.published_at else None
        return ResolvedContent(
            item_id=blog.id,
            slug=translation.slug,
            locale=locale,
            requested_locale=requested_locale,
            is_fallback=locale != requested_locale,
            fields=row_to_dict(translation, ("title", "full_description", "content")),
            item_fields={"cover_image_url": blog.cover_image_url, "published_at": published_at},
            collections={"toc_items": list(translation.toc_items or [])},
        )
