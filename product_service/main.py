# product_service/main.py
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
import uvicorn

from product_service.api.routers import health, products
from product_service.data.database import SessionLocal, engine, init_db
from product_service.data.seed import seed
from product_service.services.product_service import ProductNotFoundError
from product_service.utils.settings import APP_HOST, APP_PORT, SEED_DEMO_DATA
from product_service.utils.logging import get_logger

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    tables = init_db(bind=engine)
    logger.info(f"Database tables ready: {tables}")

    if SEED_DEMO_DATA:
        db = SessionLocal()
        try:
            seed(db)
        finally:
            db.close()

    yield


async def product_not_found_handler(request: Request, exc: ProductNotFoundError) -> Response:
    return Response(status_code=404)


def create_app() -> FastAPI:
    app = FastAPI(
        title="Product Service",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_exception_handler(ProductNotFoundError, product_not_found_handler)

    # Include routers
    app.include_router(health.router)
    app.include_router(products.router)

    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run(app, host=APP_HOST, port=APP_PORT)
