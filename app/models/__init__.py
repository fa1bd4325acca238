from .language import Language
from .service import (
    Service,
    ServiceImage,
    ServiceTranslation,
    ServiceTocItem,
    ServiceIntroLink,
    ServiceStep,
    ServiceFaq,
    ServiceOverviewTab,
    ServiceOverviewTabTranslation,
    ServiceWhyItem,
    ServiceWhyItemTranslation,
    ServiceTestimonial,
    ServiceTestimonialTranslation,
    ServiceRecoveryItem,
    ServiceRecoveryItemTranslation,
    ServiceExpertItem,
    ServiceExpertItemTranslation,
    ServicePricingPackage,
    ServicePricingPackageTranslation,
)
from .blog import Blog, BlogTranslation
from .faq import Faq, FaqTranslation
from .menu import MenuItem, MenuItemTranslation
