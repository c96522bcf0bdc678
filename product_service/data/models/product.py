from sqlalchemy import Column, Integer, String, Numeric

from product_service.data.database import Base


class ProductModel(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, autoincrement=True)

    name = Column(String, nullable=True)
    description = Column(String, nullable=True)
    price = Column(Numeric(10, 2, asdecimal=False), nullable=True)
