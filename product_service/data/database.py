# product_service/data/database.py
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from product_service.utils.settings import DATABASE_URL

# sqlite: sesje uzywane z threadpoola FastAPI
connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(DATABASE_URL, connect_args=connect_args, pool_pre_ping=True)

SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)

Base = declarative_base()


def get_db():
    """Sesja per request, zamykana po zakonczeniu obslugi."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind=None):
    # import modeli, zeby zarejestrowaly sie w Base.metadata
    from product_service.data import models  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)
    return list(Base.metadata.tables.keys())
