"""Pytest fixtures: in-memory SQLite database and a FastAPI test client."""

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

import models.product  # noqa: F401
from database import Base, get_db
from main import app
from models.product import Product
from repositories.product_repository import ProductRepository
from services.product_service import ProductService

# StaticPool keeps a single connection so every session sees the same memory DB
TEST_DATABASE_URL = "sqlite://"


@pytest.fixture
def engine() -> Generator[Engine, None, None]:
    test_engine = create_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=test_engine)
    yield test_engine
    Base.metadata.drop_all(bind=test_engine)
    test_engine.dispose()


@pytest.fixture
def session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory: sessionmaker) -> Generator[Session, None, None]:
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def repository(db: Session) -> ProductRepository:
    return ProductRepository(db)


@pytest.fixture
def service(repository: ProductRepository) -> ProductService:
    return ProductService(repository)


@pytest.fixture
def client(session_factory: sessionmaker) -> Generator[TestClient, None, None]:
    """TestClient whose requests each get a fresh session on the test database."""

    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def make_product(db: Session):
    """Insert a product row directly, bypassing the API."""

    def _make(name="Test Product", description="Test Description", price=100.0, quantity=10):
        product = Product(name=name, description=description, price=price, quantity=quantity)
        db.add(product)
        db.commit()
        db.refresh(product)
        return product

    return _make
