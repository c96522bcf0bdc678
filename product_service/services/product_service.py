# product_service/services/product_service.py
from product_service.data.models.product import ProductModel
from product_service.domain.schemas import ProductIn, ProductOut
from product_service.repos.product_repo import ProductRepo
from product_service.utils.logging import get_logger

logger = get_logger(__name__)


class ProductNotFoundError(ValueError):
    def __init__(self, product_id: int):
        super().__init__(f"Product {product_id} not found")
        self.product_id = product_id


class ProductService:
    """
    Use Case'y dla domeny Product.
    Repozytorium przekazywane w konstruktorze, serwis nie trzyma stanu miedzy requestami.
    """

    def __init__(self, repo: ProductRepo):
        self.repo = repo

    # =====================================================
    # QUERY
    # =====================================================
    def list_products(self) -> list[ProductOut]:
        return [ProductOut.model_validate(p) for p in self.repo.find_all()]

    def get_product(self, product_id: int) -> ProductOut:
        return ProductOut.model_validate(self._require(product_id))

    # =====================================================
    # COMMANDS
    # =====================================================
    def create_product(self, payload: ProductIn) -> ProductOut:
        created = self.repo.save(ProductModel(**payload.model_dump()))
        logger.info(f"Product {created.id} created")
        return ProductOut.model_validate(created)

    def update_product(self, product_id: int, payload: ProductIn) -> ProductOut:
        """
        Use Case: Nadpisanie produktu.
        Wszystkie pola z payloadu (brakujace jako None), id wymuszone ze sciezki.
        Brak produktu -> not found, nigdy upsert.
        """
        self._require(product_id)

        updated = self.repo.save(ProductModel(id=product_id, **payload.model_dump()))
        logger.info(f"Product {product_id} updated")
        return ProductOut.model_validate(updated)

    def delete_product(self, product_id: int) -> None:
        product = self._require(product_id)
        self.repo.delete(product)
        logger.info(f"Product {product_id} deleted")

    def _require(self, product_id: int) -> ProductModel:
        product = self.repo.find_by_id(product_id)
        if product is None:
            logger.info(f"Product {product_id} not found")
            raise ProductNotFoundError(product_id)
        return product
