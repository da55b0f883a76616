"""Application service for the public pages: home, collection, product detail, about, contact."""

import re

from delfina_home.application.schemas.pages import (
    AboutPage,
    CategoryOption,
    CollectionPage,
    ContactPage,
    HomePage,
    ProductCard,
    ProductDetailPage,
    SocialLinks,
)
from delfina_home.application.services.language_context import LanguageContext
from delfina_home.application.services.storage_gateway import StorageGateway
from delfina_home.config import Settings
from delfina_home.domain.entities import LocalizedString, Product, category_label
from delfina_home.domain.exceptions import EntityNotFoundError

ALL_CATEGORIES = "All"
FEATURED_LIMIT = 3

_ALL_LABEL = LocalizedString(sq="Të Gjitha", en="All")


def visible_products(products: list[Product]) -> list[Product]:
    return [p for p in products if p.is_visible]


def select_featured(products: list[Product], limit: int = FEATURED_LIMIT) -> list[Product]:
    """Featured and visible products, in the given order, capped at ``limit``."""
    return [p for p in products if p.is_featured and p.is_visible][:limit]


def derive_categories(products: list[Product]) -> list[str]:
    """``All`` followed by each category of a visible product, first-seen order."""
    seen = dict.fromkeys(p.category for p in products if p.is_visible)
    return [ALL_CATEGORIES, *seen]


def filter_by_category(products: list[Product], selected: str) -> list[Product]:
    """Exact category match; ``All`` leaves the list untouched."""
    if selected == ALL_CATEGORIES:
        return products
    return [p for p in products if p.category == selected]


def whatsapp_link(number: str) -> str | None:
    digits = re.sub(r"\D", "", number or "")
    return f"https://wa.me/{digits}" if digits else None


class CatalogService:
    """Builds localized page payloads from the storage gateway and site settings."""

    def __init__(self, gateway: StorageGateway, language: LanguageContext, settings: Settings):
        self._gateway = gateway
        self._language = language
        self._settings = settings

    def _t(self, sq: str, en: str) -> str:
        return self._language.select(LocalizedString(sq=sq, en=en))

    def _card(self, product: Product) -> ProductCard:
        return ProductCard(
            id=product.id,
            title=self._language.select(product.title),
            category=product.category,
            category_label=category_label(product.category, self._language.language),
            thumbnail=product.thumbnail,
        )

    def _category_option(self, category: str) -> CategoryOption:
        if category == ALL_CATEGORIES:
            label = self._language.select(_ALL_LABEL)
        else:
            label = category_label(category, self._language.language)
        return CategoryOption(value=category, label=label)

    async def home_page(self) -> HomePage:
        s = self._settings
        featured = select_featured(await self._gateway.list_products())
        return HomePage(
            language=self._language.language,
            tagline=self._t(s.hero_tagline_sq, s.hero_tagline_en),
            subtagline=self._t(s.hero_subtagline_sq, s.hero_subtagline_en),
            hero_image=s.hero_image,
            about_main_image=s.about_main_image or None,
            about_detail_image=s.about_detail_image or None,
            featured=[self._card(p) for p in featured],
        )

    async def collection_page(self, category: str = ALL_CATEGORIES) -> CollectionPage:
        """Visible products filtered by ``category``.

        A category that no visible product carries yields an empty page.
        """
        products = visible_products(await self._gateway.list_products())
        items = filter_by_category(products, category)
        return CollectionPage(
            language=self._language.language,
            categories=[self._category_option(c) for c in derive_categories(products)],
            selected=category,
            count=len(items),
            items=[self._card(p) for p in items],
        )

    async def product_page(self, product_id: str) -> ProductDetailPage:
        """Detail view by id. Hidden products stay reachable here."""
        product = await self._gateway.get_product(product_id)
        if product is None:
            raise EntityNotFoundError("Product", product_id)

        select = self._language.select
        return ProductDetailPage(
            language=self._language.language,
            id=product.id,
            title=select(product.title),
            description=select(product.description),
            category=product.category,
            category_label=category_label(product.category, self._language.language),
            dimensions=select(product.specifications.dimensions),
            materials=select(product.specifications.materials),
            images=list(product.images),
            inquire_url="/contact",
            whatsapp_url=whatsapp_link(self._settings.whatsapp_number),
        )

    def about_page(self) -> AboutPage:
        s = self._settings
        return AboutPage(
            language=self._language.language,
            site_name=s.site_name,
            main_image=s.about_main_image or None,
            detail_image=s.about_detail_image or None,
        )

    def contact_page(self) -> ContactPage:
        s = self._settings
        return ContactPage(
            language=self._language.language,
            address=self._t(s.contact_address_sq, s.contact_address_en),
            phone=s.contact_phone.strip(),
            email=s.contact_email,
            hours=self._t(s.contact_hours_sq, s.contact_hours_en),
            whatsapp_url=whatsapp_link(s.whatsapp_number),
            social=SocialLinks(
                instagram=s.instagram_url or None,
                facebook=s.facebook_url or None,
            ),
        )
