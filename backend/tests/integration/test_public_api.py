"""Integration tests for the public site endpoints: pages, language, contact form."""

import pytest

from conftest import make_broken_gateway, make_product
from delfina_home.infrastructure.dependencies import get_storage_gateway
from delfina_home.main import app


@pytest.mark.asyncio
async def test_home_page_defaults_to_albanian(client, gateway):
    await gateway.save_product(make_product(is_featured=True))

    response = await client.get("/api/v1/pages/home")

    assert response.status_code == 200
    data = response.json()
    assert data["language"] == "sq"
    assert [card["title"] for card in data["featured"]] == ["Divan Roma"]


@pytest.mark.asyncio
async def test_language_switch_sets_cookie(client):
    response = await client.put("/api/v1/language", json={"language": "en"})

    assert response.status_code == 200
    assert response.json() == {"language": "en"}
    assert "delfina_lang=en" in response.headers["set-cookie"]


@pytest.mark.asyncio
async def test_pages_follow_language_cookie(client, gateway):
    await gateway.save_product(make_product(is_featured=True))

    response = await client.get("/api/v1/pages/home", headers={"Cookie": "delfina_lang=en"})

    assert response.json()["featured"][0]["title"] == "Roma Sofa"


@pytest.mark.asyncio
async def test_language_rejects_unknown_code(client):
    response = await client.put("/api/v1/language", json={"language": "de"})
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_collection_filter(client, gateway):
    await gateway.save_product(make_product(category="Kuzhinat"))
    await gateway.save_product(make_product(category="Dhoma e Ditës"))
    await gateway.save_product(make_product(category="Dhomat e Gjumit", is_visible=False))

    response = await client.get("/api/v1/pages/collection", params={"category": "Kuzhinat"})

    data = response.json()
    assert data["count"] == 1
    assert data["items"][0]["category"] == "Kuzhinat"
    assert [c["value"] for c in data["categories"]][0] == "All"
    assert "Dhomat e Gjumit" not in [c["value"] for c in data["categories"]]


@pytest.mark.asyncio
async def test_product_detail_and_missing_product(client, gateway):
    product = make_product(is_visible=False)
    await gateway.save_product(product)

    found = await client.get(f"/api/v1/pages/products/{product.id}")
    missing = await client.get("/api/v1/pages/products/00000000-0000-4000-8000-000000000000")

    assert found.status_code == 200
    assert found.json()["images"] == product.images
    assert missing.status_code == 404


@pytest.mark.asyncio
async def test_contact_and_about_pages(client):
    contact = await client.get("/api/v1/pages/contact")
    about = await client.get("/api/v1/pages/about")

    assert contact.status_code == 200
    assert contact.json()["email"]
    assert about.json()["site_name"] == "Delfina Home"


@pytest.mark.asyncio
async def test_contact_form_stores_message(client, gateway):
    response = await client.post(
        "/api/v1/contact", json={"name": "Art", "email": "a@b.com", "message": "Hi"}
    )

    assert response.status_code == 201
    assert response.json() == {"name": "", "email": "", "message": "", "sent": True, "error": None}
    [stored] = await gateway.list_messages()
    assert (stored.name, stored.read) == ("Art", False)


@pytest.mark.asyncio
async def test_contact_form_failure_keeps_input(client):
    app.dependency_overrides[get_storage_gateway] = make_broken_gateway

    response = await client.post(
        "/api/v1/contact", json={"name": "Art", "email": "a@b.com", "message": "Hi"}
    )

    assert response.status_code == 502
    data = response.json()
    assert (data["name"], data["email"], data["message"]) == ("Art", "a@b.com", "Hi")
    assert data["sent"] is False
    assert data["error"] == "Failed to send message. Please try again."


@pytest.mark.asyncio
async def test_contact_form_validates_email(client):
    response = await client.post(
        "/api/v1/contact", json={"name": "Art", "email": "not-an-email", "message": "Hi"}
    )
    assert response.status_code == 422
