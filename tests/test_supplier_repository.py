"""Supplier repository tests: validation, lookups and the product delete guard."""

import uuid

import pytest

from stockroom.core.exceptions import NotFoundError, SupplierInUseError, ValidationError
from stockroom.repositories.product import ProductRepository
from stockroom.repositories.supplier import SupplierRepository

from conftest import ACME


@pytest.mark.asyncio
async def test_create_then_get_returns_submitted_fields(session):
    repo = SupplierRepository(session)
    created = await repo.create({"name": "  Acme ", "address": " 1 Main St", "phone": "+1-555-0100 "})

    fetched = await repo.get(created.id)
    assert fetched.name == "Acme"
    assert fetched.address == "1 Main St"
    assert fetched.phone == "+1-555-0100"
    assert uuid.UUID(fetched.id)
    assert fetched.created_at is not None
    assert fetched.updated_at is not None


@pytest.mark.asyncio
@pytest.mark.parametrize("phone", ["555-CALL-NOW", "12#34", "call me", "+1 555 0100 ext. 2", "   "])
async def test_invalid_phone_is_rejected_and_not_persisted(session, phone):
    repo = SupplierRepository(session)
    with pytest.raises(ValidationError) as excinfo:
        await repo.create({**ACME, "phone": phone})
    assert "phone" in excinfo.value.fields
    assert await repo.count() == 0


@pytest.mark.asyncio
async def test_phone_accepts_digits_spaces_and_punctuation(session):
    supplier = await SupplierRepository(session).create({**ACME, "phone": "(028) 1234 5678"})
    assert supplier.phone == "(028) 1234 5678"


@pytest.mark.asyncio
async def test_phone_has_no_length_limit(session):
    phone = "+44 (0)20 7946 0000 - " * 3 + "(0) 123 456 789"
    assert len(phone) > 60
    supplier = await SupplierRepository(session).create({**ACME, "phone": phone})
    assert (await SupplierRepository(session).get(supplier.id)).phone == phone


@pytest.mark.asyncio
async def test_missing_fields_are_all_reported(session):
    with pytest.raises(ValidationError) as excinfo:
        await SupplierRepository(session).create({})
    assert set(excinfo.value.fields) == {"name", "address", "phone"}
    assert excinfo.value.fields["name"] == "This field is required"


@pytest.mark.asyncio
async def test_length_limits(session):
    repo = SupplierRepository(session)
    await repo.create({**ACME, "name": "n" * 100, "address": "a" * 255})
    with pytest.raises(ValidationError) as excinfo:
        await repo.create({**ACME, "name": "n" * 101, "address": "a" * 256})
    assert set(excinfo.value.fields) == {"name", "address"}


@pytest.mark.asyncio
@pytest.mark.parametrize("bad_id", ["not-a-uuid", "123", ""])
async def test_malformed_id_is_not_found(session, bad_id):
    with pytest.raises(NotFoundError):
        await SupplierRepository(session).get(bad_id)


@pytest.mark.asyncio
async def test_unknown_id_is_not_found(session):
    with pytest.raises(NotFoundError):
        await SupplierRepository(session).get(str(uuid.uuid4()))


@pytest.mark.asyncio
async def test_list_is_newest_first(session):
    repo = SupplierRepository(session)
    for i in range(3):
        await repo.create({**ACME, "name": f"Supplier {i}"})
    suppliers = await repo.list()
    stamps = [s.created_at for s in suppliers]
    assert len(suppliers) == 3
    assert stamps == sorted(stamps, reverse=True)


@pytest.mark.asyncio
async def test_list_by_name_is_alphabetical(session):
    repo = SupplierRepository(session)
    for name in ["Zeta", "Alpha", "Mid"]:
        await repo.create({**ACME, "name": name})
    assert [s.name for s in await repo.list_by_name()] == ["Alpha", "Mid", "Zeta"]


@pytest.mark.asyncio
async def test_update_replaces_fields(session):
    repo = SupplierRepository(session)
    supplier = await repo.create(ACME)
    updated = await repo.update(
        supplier.id, {"name": "Acme Ltd", "address": "2 High St", "phone": "555 0101"}
    )
    assert updated.id == supplier.id
    assert (updated.name, updated.address, updated.phone) == ("Acme Ltd", "2 High St", "555 0101")


@pytest.mark.asyncio
async def test_invalid_update_leaves_supplier_untouched(session):
    repo = SupplierRepository(session)
    supplier = await repo.create(ACME)
    with pytest.raises(ValidationError):
        await repo.update(supplier.id, {**ACME, "phone": "not a phone"})
    assert (await repo.get(supplier.id)).phone == ACME["phone"]


@pytest.mark.asyncio
async def test_update_unknown_id_is_not_found(session):
    with pytest.raises(NotFoundError):
        await SupplierRepository(session).update(str(uuid.uuid4()), ACME)


@pytest.mark.asyncio
async def test_delete_blocked_while_products_reference_supplier(session):
    suppliers = SupplierRepository(session)
    products = ProductRepository(session)
    supplier = await suppliers.create(ACME)
    for name in ["Widget", "Gadget"]:
        await products.create({"name": name, "price": 1, "quantity": 1, "supplier_id": supplier.id})

    with pytest.raises(SupplierInUseError) as excinfo:
        await suppliers.delete(supplier.id)
    assert excinfo.value.product_count == 2
    assert "2 product(s)" in excinfo.value.message
    assert await suppliers.get(supplier.id) is not None


@pytest.mark.asyncio
async def test_delete_without_products_removes_supplier(session):
    repo = SupplierRepository(session)
    supplier = await repo.create(ACME)

    removed = await repo.delete(supplier.id)
    assert removed.id == supplier.id
    with pytest.raises(NotFoundError):
        await repo.get(supplier.id)
    # Second delete is a plain not-found, not a crash
    with pytest.raises(NotFoundError):
        await repo.delete(supplier.id)


@pytest.mark.asyncio
async def test_products_for_returns_only_that_suppliers_products(session):
    suppliers = SupplierRepository(session)
    products = ProductRepository(session)
    acme = await suppliers.create(ACME)
    other = await suppliers.create({**ACME, "name": "Other"})
    await products.create({"name": "Widget", "price": 1, "supplier_id": acme.id})
    await products.create({"name": "Gizmo", "price": 2, "supplier_id": other.id})

    found = await suppliers.products_for(acme.id)
    assert [p.name for p in found] == ["Widget"]
    assert found[0].supplier.id == acme.id
    assert found[0].supplier.name == "Acme"
