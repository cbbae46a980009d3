from decimal import Decimal

from myshop.domain.schemas import ErrorOut, HealthResponse, Product, ResultOut


def test_product_model_accepts_alias_and_field_name():
    by_alias = Product.model_validate({"id": 1, "name": "Milk", "price": "1.20", "isActive": True})
    by_name = Product(id=1, name="Milk", price=Decimal("1.20"), is_active=True)
    assert by_alias == by_name
    assert by_alias.price == Decimal("1.20")


def test_product_is_active_defaults_to_false():
    product = Product.model_validate({"id": 7, "name": "Bread", "price": 2})
    assert product.is_active is False


def test_product_json_uses_alias_and_exact_price_text():
    product = Product(id=2, name="RedBull 0.5 aluminium", price=Decimal("2.05"), is_active=True)
    assert product.model_dump(mode="json", by_alias=True) == {
        "id": 2,
        "name": "RedBull 0.5 aluminium",
        "price": "2.05",
        "isActive": True,
    }


def test_result_out_error_shape():
    result = ResultOut(error=ErrorOut(description="No product with id 5"))
    assert result.model_dump(exclude_none=True) == {"error": {"description": "No product with id 5"}}


def test_health_response():
    health = HealthResponse(status="ok", service="test")
    assert health.status == "ok"


def test_product_price_keeps_full_precision():
    product = Product.model_validate_json(
        '{"id": 9, "name": "Precise", "price": "1.123456789012345678901", "isActive": true}'
    )
    assert product.price == Decimal("1.123456789012345678901")
    assert product.model_dump(mode="json", by_alias=True)["price"] == "1.123456789012345678901"
