"""Product repository tests: field validation, supplier references and the supplier join."""

import math
import uuid

import pytest

from stockroom.core.exceptions import NotFoundError, ValidationError
from stockroom.repositories.product import ProductRepository
from stockroom.repositories.supplier import SupplierRepository

from conftest import ACME


@pytest.fixture
async def acme(session):
    return await SupplierRepository(session).create(ACME)


@pytest.mark.asyncio
async def test_create_from_form_strings_attaches_supplier(session, acme):
    product = await ProductRepository(session).create(
        {"name": " Widget ", "price": "9.99", "quantity": "10", "supplierId": acme.id}
    )
    assert product.name == "Widget"
    assert math.isclose(product.price, 9.99)
    assert product.quantity == 10
    assert product.supplier_id == acme.id
    assert (product.supplier.name, product.supplier.address, product.supplier.phone) == (
        "Acme", "1 Main St", "+1-555-0100",
    )


@pytest.mark.asyncio
@pytest.mark.parametrize("quantity", [None, ""])
async def test_quantity_defaults_to_zero(session, acme, quantity):
    fields = {"name": "Widget", "price": 1, "supplier_id": acme.id}
    if quantity is not None:
        fields["quantity"] = quantity
    product = await ProductRepository(session).create(fields)
    assert product.quantity == 0


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "overrides, field",
    [
        ({"name": ""}, "name"),
        ({"name": "x" * 101}, "name"),
        ({"price": -0.01}, "price"),
        ({"price": "nan"}, "price"),
        ({"price": "abc"}, "price"),
        ({"quantity": -1}, "quantity"),
        ({"quantity": "1.5"}, "quantity"),
    ],
)
async def test_invalid_fields_are_rejected(session, acme, overrides, field):
    repo = ProductRepository(session)
    fields = {"name": "Widget", "price": 9.99, "quantity": 1, "supplier_id": acme.id, **overrides}
    with pytest.raises(ValidationError) as excinfo:
        await repo.create(fields)
    assert field in excinfo.value.fields
    assert await repo.count() == 0


@pytest.mark.asyncio
@pytest.mark.parametrize("supplier_id", [str(uuid.uuid4()), "not-an-id", ""])
async def test_unknown_supplier_is_a_validation_error(session, acme, supplier_id):
    repo = ProductRepository(session)
    with pytest.raises(ValidationError) as excinfo:
        await repo.create({"name": "Widget", "price": 1, "quantity": 1, "supplierId": supplier_id})
    assert "supplier_id" in excinfo.value.fields
    assert await repo.count() == 0


@pytest.mark.asyncio
async def test_list_is_newest_first_with_current_supplier_fields(session, acme):
    suppliers = SupplierRepository(session)
    repo = ProductRepository(session)
    other = await suppliers.create({"name": "Globex", "address": "9 Elm St", "phone": "555 0199"})
    for i, supplier in enumerate([acme, other, acme]):
        await repo.create({"name": f"Item {i}", "price": i, "quantity": i, "supplier_id": supplier.id})
    await suppliers.update(acme.id, {"name": "Acme Renamed", "address": "3 Oak St", "phone": "555 0000"})

    products = await repo.list()
    stamps = [p.created_at for p in products]
    assert len(products) == 3
    assert stamps == sorted(stamps, reverse=True)
    for product in products:
        current = await suppliers.get(product.supplier_id)
        assert (product.supplier.name, product.supplier.address, product.supplier.phone) == (
            current.name, current.address, current.phone,
        )


@pytest.mark.asyncio
async def test_get_malformed_or_missing_id_is_not_found(session):
    repo = ProductRepository(session)
    for bad_id in ["xyz", str(uuid.uuid4())]:
        with pytest.raises(NotFoundError):
            await repo.get(bad_id)


@pytest.mark.asyncio
async def test_update_can_move_product_to_another_supplier(session, acme):
    other = await SupplierRepository(session).create({**ACME, "name": "Globex"})
    repo = ProductRepository(session)
    product = await repo.create({"name": "Widget", "price": 1, "quantity": 1, "supplier_id": acme.id})

    updated = await repo.update(
        product.id, {"name": "Widget v2", "price": 2.5, "quantity": 4, "supplier_id": other.id}
    )
    assert updated.id == product.id
    assert (updated.name, updated.price, updated.quantity) == ("Widget v2", 2.5, 4)
    assert updated.supplier_id == other.id
    assert updated.supplier.name == "Globex"


@pytest.mark.asyncio
async def test_update_rechecks_supplier(session, acme):
    repo = ProductRepository(session)
    product = await repo.create({"name": "Widget", "price": 1, "quantity": 1, "supplier_id": acme.id})
    with pytest.raises(ValidationError) as excinfo:
        await repo.update(
            product.id, {"name": "Widget", "price": 1, "quantity": 1, "supplier_id": str(uuid.uuid4())}
        )
    assert "supplier_id" in excinfo.value.fields
    assert (await repo.get(product.id)).supplier_id == acme.id


@pytest.mark.asyncio
async def test_update_unknown_product_is_not_found(session, acme):
    with pytest.raises(NotFoundError):
        await ProductRepository(session).update(
            str(uuid.uuid4()), {"name": "Widget", "price": 1, "supplier_id": acme.id}
        )


@pytest.mark.asyncio
async def test_delete_twice(session, acme):
    repo = ProductRepository(session)
    product = await repo.create({"name": "Widget", "price": 1, "quantity": 1, "supplier_id": acme.id})

    removed = await repo.delete(product.id)
    assert removed.id == product.id
    with pytest.raises(NotFoundError):
        await repo.delete(product.id)
