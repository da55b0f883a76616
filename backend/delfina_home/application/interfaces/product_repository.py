"""Abstract repository interface (port) for Product persistence."""

from abc import ABC, abstractmethod

from delfina_home.domain.entities import Product


class ProductRepository(ABC):
    """Port for product persistence: implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_id(self, product_id: str) -> Product | None:
        """Retrieve a single product by its UUID."""
        ...

    @abstractmethod
    async def get_all(self) -> list[Product]:
        """Retrieve every product, newest first."""
        ...

    @abstractmethod
    async def exists(self, product_id: str) -> bool:
        """Check whether a row with this id is stored."""
        ...

    @abstractmethod
    async def create(self, product: Product) -> Product:
        """Insert a new product; the stored creation time is assigned here."""
        ...

    @abstractmethod
    async def update(self, product: Product) -> Product:
        """Replace every field of an existing product except its creation time."""
        ...

    @abstractmethod
    async def delete(self, product_id: str) -> None:
        """Delete a product by id. Deleting a missing id is not an error."""
        ...
