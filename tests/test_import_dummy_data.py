"""Tests for the DummyJSON product import script."""

from unittest.mock import Mock, patch

from models.product import Product
from utils.import_dummy_data import import_dummy_products

DUMMY_PRODUCTS = {
    "products": [
        {"id": 1, "title": "Essence Mascara Lash Princess", "description": "Popular mascara known for volume",
         "price": 9.99, "stock": 5},
        {"id": 2, "title": "Eyeshadow Palette with Mirror", "description": "Versatile range of shades",
         "price": 19.99, "stock": 44},
        # Out of stock, fails the quantity constraint
        {"id": 3, "title": "Powder Canister", "description": "Fine setting powder", "price": 14.99, "stock": 0},
        # Description too short
        {"id": 4, "title": "Red Lipstick", "description": "Red", "price": 12.99, "stock": 10},
    ]
}


def _response(payload):
    response = Mock()
    response.json.return_value = payload
    response.raise_for_status.return_value = None
    return response


def test_imports_only_valid_products(db):
    with patch("utils.import_dummy_data.requests.get", return_value=_response(DUMMY_PRODUCTS)) as get:
        count = import_dummy_products(db, limit=4)

    get.assert_called_once()
    assert get.call_args.kwargs["params"] == {"limit": 4}
    assert count == 2
    names = [p.name for p in db.query(Product).order_by(Product.id).all()]
    assert names == ["Essence Mascara Lash Princess", "Eyeshadow Palette with Mirror"]


def test_second_import_skips_existing_names(db):
    with patch("utils.import_dummy_data.requests.get", return_value=_response(DUMMY_PRODUCTS)):
        import_dummy_products(db)
        count = import_dummy_products(db)

    assert count == 0
    assert db.query(Product).count() == 2


def test_long_titles_are_truncated(db):
    payload = {"products": [{"title": "A" * 40, "description": "Long enough description",
                             "price": 1.0, "stock": 1}]}
    with patch("utils.import_dummy_data.requests.get", return_value=_response(payload)):
        import_dummy_products(db)

    assert db.query(Product).one().name == "A" * 30
