"""Pydantic DTOs for the public pages, already resolved to one language."""

from pydantic import BaseModel

from delfina_home.domain.entities import Language


class ProductCard(BaseModel):
    """A product tile in the home highlights or the collection grid."""

    id: str
    title: str
    category: str
    category_label: str
    thumbnail: str | None


class CategoryOption(BaseModel):
    value: str
    label: str


class HomePage(BaseModel):
    language: Language
    tagline: str
    subtagline: str
    hero_image: str
    about_main_image: str | None
    about_detail_image: str | None
    featured: list[ProductCard]


class CollectionPage(BaseModel):
    language: Language
    categories: list[CategoryOption]
    selected: str
    count: int
    items: list[ProductCard]


class ProductDetailPage(BaseModel):
    language: Language
    id: str
    title: str
    description: str
    category: str
    category_label: str
    dimensions: str
    materials: str
    images: list[str]
    inquire_url: str
    whatsapp_url: str | None


class SocialLinks(BaseModel):
    instagram: str | None
    facebook: str | None


class ContactPage(BaseModel):
    language: Language
    address: str
    phone: str
    email: str
    hours: str
    whatsapp_url: str | None
    social: SocialLinks


class AboutPage(BaseModel):
    language: Language
    site_name: str
    main_image: str | None
    detail_image: str | None


class LanguagePreference(BaseModel):
    language: Language
