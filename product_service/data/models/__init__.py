#import wszystkich modeli zeby SQLAlchemy je zarejestrowal w base metadata

from product_service.data.models.product import ProductModel

__all__ = ["ProductModel"]
