# product_service/api/routers/products.py
from fastapi import APIRouter, Depends, Path, Response
from sqlalchemy.orm import Session

from product_service.data.database import get_db
from product_service.domain.schemas import ProductIn, ProductOut
from product_service.repos.product_repo import ProductRepo
from product_service.services.product_service import ProductService

router = APIRouter(prefix="/api/products", tags=["products"])

# zakres kolumny INTEGER (64 bit), wieksze id -> 422 zamiast bledu bazy
MAX_PRODUCT_ID = 2**63 - 1


def get_service(db: Session):
    return ProductService(ProductRepo(db))


# ProductNotFoundError -> pusty 404, handler rejestrowany w create_app

# /api/products i /api/products/ bez przekierowania 307
@router.get("", response_model=list[ProductOut])
@router.get("/", response_model=list[ProductOut], include_in_schema=False)
def list_products(db: Session = Depends(get_db)):
    svc = get_service(db)
    return svc.list_products()


@router.get("/{product_id}", response_model=ProductOut)
def get_product(product_id: int = Path(..., le=MAX_PRODUCT_ID), db: Session = Depends(get_db)):
    svc = get_service(db)
    return svc.get_product(product_id)


@router.post("", response_model=ProductOut)
@router.post("/", response_model=ProductOut, include_in_schema=False)
def create_product(payload: ProductIn, db: Session = Depends(get_db)):
    svc = get_service(db)
    return svc.create_product(payload)


@router.put("/{product_id}", response_model=ProductOut)
def update_product(
    payload: ProductIn,
    product_id: int = Path(..., le=MAX_PRODUCT_ID),
    db: Session = Depends(get_db),
):
    """
    Nadpisuje produkt; id ze sciezki ma pierwszenstwo przed id w body.
    """
    svc = get_service(db)
    return svc.update_product(product_id, payload)


@router.delete("/{product_id}")
def delete_product(product_id: int = Path(..., le=MAX_PRODUCT_ID), db: Session = Depends(get_db)):
    svc = get_service(db)
    svc.delete_product(product_id)
    return Response(status_code=200)
