"""Concrete repository implementation for Product backed by SQLAlchemy."""

from datetime import datetime, timezone

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from delfina_home.application.interfaces import ProductRepository
from delfina_home.domain.entities import LocalizedString, Product, ProductSpecifications
from delfina_home.infrastructure.database.models import ProductModel
from delfina_home.infrastructure.database.repositories._timestamps import to_millis


class SQLAlchemyProductRepository(ProductRepository):
    """Implements the ProductRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: ProductModel) -> Product:
        """Map flat ORM row → nested bilingual entity."""
        return Product(
            id=model.id,
            title=LocalizedString(sq=model.title_sq, en=model.title_en),
            description=LocalizedString(sq=model.description_sq, en=model.description_en),
            specifications=ProductSpecifications(
                dimensions=LocalizedString(sq=model.dimensions_sq, en=model.dimensions_en),
                materials=LocalizedString(sq=model.materials_sq, en=model.materials_en),
            ),
            price=model.price,
            category=model.category,
            images=list(model.images or []),
            is_featured=model.is_featured,
            is_visible=model.is_visible,
            created_at=to_millis(model.created_at),
        )

    def _apply(self, model: ProductModel, entity: Product) -> None:
        """Copy every replaceable field of the entity onto the flat row."""
        model.title_sq = entity.title.sq
        model.title_en = entity.title.en
        model.description_sq = entity.description.sq
        model.description_en = entity.description.en
        model.dimensions_sq = entity.specifications.dimensions.sq
        model.dimensions_en = entity.specifications.dimensions.en
        model.materials_sq = entity.specifications.materials.sq
        model.materials_en = entity.specifications.materials.en
        model.price = entity.price
        model.category = entity.category
        model.images = list(entity.images)
        model.is_featured = entity.is_featured
        model.is_visible = entity.is_visible

    def _to_model(self, entity: Product) -> ProductModel:
        """Map domain entity → ORM model (for creation)."""
        model = ProductModel(
            id=entity.id,
            created_at=datetime.now(timezone.utc),
        )
        self._apply(model, entity)
        return model

    async def get_by_id(self, product_id: str) -> Product | None:
        result = await self._session.get(ProductModel, product_id)
        return self._to_entity(result) if result else None

    async def get_all(self) -> list[Product]:
        stmt = select(ProductModel).order_by(ProductModel.created_at.desc())
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def exists(self, product_id: str) -> bool:
        stmt = select(ProductModel.id).where(ProductModel.id == product_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def create(self, product: Product) -> Product:
        model = self._to_model(product)
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def update(self, product: Product) -> Product:
        model = await self._session.get(ProductModel, product.id)
        if model is None:
            raise ValueError(f"Product {product.id} not found in database")
        self._apply(model, product)
        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, product_id: str) -> None:
        await self._session.execute(
            delete(ProductModel).where(ProductModel.id == product_id)
        )
        await self._session.flush()
