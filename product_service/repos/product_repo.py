# product_service/repos/product_repo.py
from sqlalchemy import select
from sqlalchemy.orm import Session

from product_service.data.models.product import ProductModel


class ProductRepo:
    def __init__(self, db: Session):
        self.db = db

    def find_all(self) -> list[ProductModel]:
        return list(self.db.scalars(select(ProductModel).order_by(ProductModel.id)))

    def find_by_id(self, product_id: int) -> ProductModel | None:
        return self.db.get(ProductModel, product_id)

    def save(self, product: ProductModel) -> ProductModel:
        """Insert gdy brak id, w przeciwnym razie nadpisanie wiersza o tym id."""
        if product.id is None:
            self.db.add(product)
        else:
            product = self.db.merge(product)
        self.db.commit()
        self.db.refresh(product)
        return product

    def delete(self, product: ProductModel) -> None:
        self.db.delete(product)
        self.db.commit()
