"""Unit tests for the AdminDashboardService against an in-memory database."""

import pytest

from conftest import make_broken_gateway, make_product
from delfina_home.application.services import AdminDashboardService, DraftRegistry
from delfina_home.domain.entities import ImageUpload, LocalizedString, is_valid_product_id
from delfina_home.domain.exceptions import EntityNotFoundError


async def fake_encode(upload: ImageUpload) -> str:
    return f"data:{upload.mime_type};base64,{upload.filename}"


@pytest.fixture
def service(gateway) -> AdminDashboardService:
    return AdminDashboardService(gateway, DraftRegistry(), fake_encode)


@pytest.mark.asyncio
async def test_refresh_loads_products_and_unread_count(service, gateway):
    await gateway.save_product(make_product())
    await gateway.save_message(name="Art", email="a@b.com", message="Hi")
    await gateway.save_message(name="Ema", email="e@b.com", message="Hello")
    [first, _] = await gateway.list_messages()
    await gateway.mark_message_read(first.id)

    snapshot = await service.refresh()

    assert len(snapshot.products) == 1
    assert len(snapshot.messages) == 2
    assert snapshot.unread_count == 1


@pytest.mark.asyncio
async def test_new_draft_has_fresh_id_and_defaults(service):
    editor = service.open_new_draft()

    assert is_valid_product_id(editor.draft.id)
    assert editor.is_new is True
    assert editor.draft.images == []
    assert editor.draft.is_visible is True
    assert service.get_draft(editor.draft.id) is editor


@pytest.mark.asyncio
async def test_create_product_through_draft(service):
    editor = service.open_new_draft()
    editor.update_fields(title=LocalizedString(sq="Shtrat", en="Bed"), category="Dhomat e Gjumit")
    await editor.add_images([ImageUpload("bed.png", "image/png", b"\x89PNG")])

    result = await service.commit_draft(editor.draft.id)

    assert result.saved is True
    assert [p.id for p in result.products] == [editor.draft.id]
    assert result.products[0].images == ["data:image/png;base64,bed.png"]
    with pytest.raises(EntityNotFoundError):
        service.get_draft(editor.draft.id)


@pytest.mark.asyncio
async def test_edit_existing_product_keeps_creation_time(service, gateway):
    product = make_product(images=["A", "B", "C"])
    await gateway.save_product(product)
    [stored] = await gateway.list_products()

    editor = await service.open_draft(product.id)
    editor.reorder(0, 2)
    result = await service.commit_draft(product.id)

    assert result.saved is True
    [updated] = result.products
    assert updated.images == ["B", "C", "A"]
    assert updated.created_at == stored.created_at


@pytest.mark.asyncio
async def test_open_draft_for_missing_product(service):
    with pytest.raises(EntityNotFoundError):
        await service.open_draft("00000000-0000-4000-8000-000000000000")


@pytest.mark.asyncio
async def test_cancel_draft_discards_changes(service, gateway):
    product = make_product(images=["A", "B"])
    await gateway.save_product(product)

    editor = await service.open_draft(product.id)
    editor.remove_image(0)
    service.cancel_draft(product.id)

    stored = await gateway.get_product(product.id)
    assert stored.images == ["A", "B"]
    with pytest.raises(EntityNotFoundError):
        service.cancel_draft(product.id)


@pytest.mark.asyncio
async def test_failed_commit_keeps_draft_open():
    service = AdminDashboardService(make_broken_gateway(), DraftRegistry(), fake_encode)
    editor = service.open_new_draft()
    editor.update_fields(title=LocalizedString(sq="Shtrat", en="Bed"))
    editor.draft.images.append("A")

    result = await service.commit_draft(editor.draft.id)

    assert result.saved is False
    assert result.error == "Failed to save product. Please try again."
    assert service.get_draft(editor.draft.id) is editor


@pytest.mark.asyncio
async def test_delete_product_discards_its_draft(service, gateway):
    product = make_product()
    await gateway.save_product(product)
    await service.open_draft(product.id)

    assert await service.delete_product(product.id) is True

    assert await service.list_products() == []
    with pytest.raises(EntityNotFoundError):
        service.get_draft(product.id)


@pytest.mark.asyncio
async def test_mark_message_read(service, gateway):
    await gateway.save_message(name="Art", email="a@b.com", message="Hi")
    [message] = await service.list_messages()

    assert await service.mark_message_read(message.id) is True

    [message] = await service.list_messages()
    assert message.read is True
