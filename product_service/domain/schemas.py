# product_service/domain/schemas.py
from pydantic import BaseModel, ConfigDict


class ProductIn(BaseModel):
    """Schema dla tworzenia i nadpisywania produktu (request).

    Pole id z body jest ignorowane; id nadaje baza albo sciezka URL.
    """

    name: str | None = None
    description: str | None = None
    price: float | None = None


class ProductOut(BaseModel):
    """Schema dla produktu (response)."""

    id: int
    name: str | None = None
    description: str | None = None
    price: float | None = None

    model_config = ConfigDict(from_attributes=True)
