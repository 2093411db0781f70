"""
Тесты API остальных ресурсов: галерея, партнёры, отзывы, экскурсии,
контакты, PDF документы и загрузка изображений.
"""

import pytest

from shelter.core.settings import settings

from .conftest import JPEG_DATA_URL, PNG_DATA_URL

API = "/api/v1"

SVG_DATA_URL = (
    "data:image/svg+xml;base64,"
    "PHN2ZyB4bWxucz0iaHR0cDovL3d3dy53My5vcmcvMjAwMC9zdmciLz4="
)


class TestGallery:

    async def test_create_and_list(self, client, anonymous_client, storage):
        response = await client.post(f"{API}/gallery", json={"image_data": PNG_DATA_URL})

        assert response.status_code == 201
        image_url = response.json()["data"]["image_url"]
        assert storage.keys("gallery") == [storage.extract_object_key(image_url)]

        data = (await anonymous_client.get(f"{API}/gallery")).json()["data"]
        assert [item["image_url"] for item in data] == [image_url]

    async def test_image_required(self, client, storage):
        response = await client.post(f"{API}/gallery", json={})

        assert response.status_code == 400
        assert storage.upload_calls == 0

    async def test_image_cannot_be_cleared(self, client, storage):
        item = (await client.post(f"{API}/gallery", json={"image_data": PNG_DATA_URL})).json()["data"]

        response = await client.patch(f"{API}/gallery/{item['id']}", json={"image_data": None})

        assert response.status_code == 400
        assert storage.deleted == []

    async def test_replace_image(self, client, storage):
        item = (await client.post(f"{API}/gallery", json={"image_data": PNG_DATA_URL})).json()["data"]

        response = await client.put(f"{API}/gallery/{item['id']}", json={"image_data": JPEG_DATA_URL})

        assert response.status_code == 200
        assert response.json()["data"]["image_url"].endswith(".jpeg")
        assert storage.deleted == [storage.extract_object_key(item["image_url"])]

    async def test_delete(self, client, storage):
        item = (await client.post(f"{API}/gallery", json={"image_data": PNG_DATA_URL})).json()["data"]

        assert (await client.delete(f"{API}/gallery/{item['id']}")).status_code == 200
        assert storage.keys("gallery") == []


class TestPartners:

    async def test_create_with_svg_logo(self, client, storage):
        response = await client.post(
            f"{API}/partners",
            json={"name": "Farm", "link": "https://farm.org", "logo_data": SVG_DATA_URL},
        )

        assert response.status_code == 201
        data = response.json()["data"]
        assert data["name"] == "Farm"
        assert data["logo"].endswith(".svg")
        assert storage.keys("partners") == [storage.extract_object_key(data["logo"])]

    async def test_logo_required(self, client):
        response = await client.post(f"{API}/partners", json={"name": "Farm"})
        assert response.status_code == 400

    async def test_update_name_only(self, client, storage):
        partner = (
            await client.post(f"{API}/partners", json={"name": "Farm", "logo_data": PNG_DATA_URL})
        ).json()["data"]

        response = await client.patch(f"{API}/partners/{partner['id']}", json={"name": "Dairy"})

        assert response.json()["data"]["name"] == "Dairy"
        assert response.json()["data"]["logo"] == partner["logo"]
        assert storage.upload_calls == 1

    async def test_name_cannot_be_empty(self, client):
        partner = (
            await client.post(f"{API}/partners", json={"name": "Farm", "logo_data": PNG_DATA_URL})
        ).json()["data"]

        response = await client.patch(f"{API}/partners/{partner['id']}", json={"name": None})

        assert response.status_code == 400


class TestReviews:

    @pytest.fixture
    def review(self):
        return {
            "name_en": "Olena",
            "name_ua": "Олена",
            "review_en": "Lovely place",
            "review_ua": "Чудове місце",
        }

    async def test_crud(self, client, anonymous_client, storage, review):
        created = (await client.post(f"{API}/reviews", json=review)).json()["data"]

        updated = await client.patch(
            f"{API}/reviews/{created['id']}", json={"review_en": "  Wonderful place  "}
        )
        assert updated.json()["data"]["review_en"] == "Wonderful place"
        assert updated.json()["data"]["name_ua"] == "Олена"

        assert (await client.delete(f"{API}/reviews/{created['id']}")).status_code == 200
        assert (await anonymous_client.get(f"{API}/reviews/{created['id']}")).status_code == 404
        assert storage.upload_calls == 0

    async def test_missing_fields(self, client, review):
        del review["review_ua"]
        response = await client.post(f"{API}/reviews", json=review)
        assert response.status_code == 400


class TestExcursions:

    @pytest.fixture
    def excursion(self):
        return {
            "title_en": "Farm tour",
            "description_en": "Walk with the herd",
            "time_from": "10:00",
            "time_to": "12:00",
            "amount_of_persons": "10-15",
        }

    async def test_create_with_image(self, client, storage, excursion):
        response = await client.post(
            f"{API}/excursions", json={**excursion, "image_data": PNG_DATA_URL}
        )

        assert response.status_code == 201
        assert response.json()["data"]["amount_of_persons"] == "10-15"
        assert len(storage.keys("excursions")) == 1

    async def test_pagination(self, client, anonymous_client, excursion):
        for index in range(3):
            await client.post(f"{API}/excursions", json={**excursion, "title_en": f"Tour {index}"})

        body = (
            await anonymous_client.get(f"{API}/excursions/pagination", params={"page": 2, "limit": 2})
        ).json()

        assert [item["title_en"] for item in body["data"]] == ["Tour 2"]
        assert body["total_pages"] == 2


class TestContacts:

    @pytest.fixture
    def contact(self):
        return {"name": "Office", "email": "info@cows-shelter.org", "phone": "+380501234567"}

    async def test_duplicate_email(self, client, contact):
        assert (await client.post(f"{API}/contacts", json=contact)).status_code == 201

        response = await client.post(f"{API}/contacts", json={**contact, "name": "Other"})

        assert response.status_code == 409
        assert response.json()["error"]["type"] == "conflict"

    async def test_invalid_email(self, client, contact):
        response = await client.post(f"{API}/contacts", json={**contact, "email": "not-an-email"})
        assert response.status_code == 400

    async def test_update_to_taken_email(self, client, contact):
        await client.post(f"{API}/contacts", json=contact)
        other = (
            await client.post(f"{API}/contacts", json={**contact, "email": "help@cows-shelter.org"})
        ).json()["data"]

        response = await client.patch(
            f"{API}/contacts/{other['id']}", json={"email": contact["email"]}
        )

        assert response.status_code == 409

    async def test_update_keeps_own_email(self, client, contact):
        created = (await client.post(f"{API}/contacts", json=contact)).json()["data"]

        response = await client.put(
            f"{API}/contacts/{created['id']}", json={"email": contact["email"], "phone": "123"}
        )

        assert response.status_code == 200
        assert response.json()["data"]["phone"] == "123"

    async def test_hard_delete_frees_email(self, client, contact):
        created = (await client.post(f"{API}/contacts", json=contact)).json()["data"]

        await client.delete(f"{API}/contacts/{created['id']}")
        response = await client.post(f"{API}/contacts", json=contact)

        assert response.status_code == 201


class TestPdf:

    async def upload(self, client, title="Annual report", content=b"%PDF-1.4 test", content_type="application/pdf"):
        return await client.post(
            f"{API}/pdf",
            data={"title": title},
            files={"document": ("report.pdf", content, content_type)},
        )

    async def test_upload(self, client, anonymous_client, storage):
        response = await self.upload(client)

        assert response.status_code == 201
        data = response.json()["data"]
        assert data["title"] == "Annual report"
        key = storage.extract_object_key(data["document_url"])
        assert key.startswith("pdfs/") and key.endswith(".pdf")
        assert storage.objects[key] == (b"%PDF-1.4 test", "application/pdf")

        listed = (await anonymous_client.get(f"{API}/pdf")).json()["data"]
        assert [item["id"] for item in listed] == [data["id"]]

    async def test_wrong_type(self, client, storage):
        response = await self.upload(client, content=b"hello", content_type="text/plain")

        assert response.status_code == 400
        assert response.json()["error"]["type"] == "file_type_validation_error"
        assert storage.upload_calls == 0

    async def test_too_large(self, client, storage, monkeypatch):
        monkeypatch.setattr(settings, "DOCUMENT_MAX_FILE_SIZE", 4)

        response = await self.upload(client)

        assert response.status_code == 400
        assert response.json()["error"]["type"] == "file_size_exceeded"
        assert storage.upload_calls == 0

    async def test_blank_title(self, client, storage):
        response = await self.upload(client, title="   ")

        assert response.status_code == 400
        assert storage.upload_calls == 0

    async def test_replace_document(self, client, storage):
        created = (await self.upload(client)).json()["data"]

        response = await client.patch(
            f"{API}/pdf/{created['id']}",
            files={"document": ("new.pdf", b"%PDF-1.7 new", "application/pdf")},
        )

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["title"] == "Annual report"
        assert data["document_url"] != created["document_url"]
        assert storage.deleted == [storage.extract_object_key(created["document_url"])]

    async def test_rename(self, client, storage):
        created = (await self.upload(client)).json()["data"]

        response = await client.put(f"{API}/pdf/{created['id']}", data={"title": "Renamed"})

        assert response.json()["data"]["title"] == "Renamed"
        assert response.json()["data"]["document_url"] == created["document_url"]
        assert storage.deleted == []

    async def test_delete(self, client, storage):
        created = (await self.upload(client)).json()["data"]

        assert (await client.delete(f"{API}/pdf/{created['id']}")).status_code == 200
        assert storage.keys("pdfs") == []
        assert (await client.get(f"{API}/pdf/{created['id']}")).status_code == 404


class TestUploadImage:

    async def test_upload(self, client, storage):
        response = await client.post(
            f"{API}/upload-image",
            files={"image": ("cow.png", b"\x89PNG\r\n\x1a\n", "image/png")},
        )

        assert response.status_code == 201
        url = response.json()["data"]["image_url"]
        key = storage.extract_object_key(url)
        assert key.startswith("uploads/") and key.endswith(".png")

    async def test_rejects_svg(self, client, storage):
        response = await client.post(
            f"{API}/upload-image",
            files={"image": ("logo.svg", b"<svg/>", "image/svg+xml")},
        )

        assert response.status_code == 400
        assert storage.upload_calls == 0

    async def test_rejects_non_image_extension(self, client, storage):
        response = await client.post(
            f"{API}/upload-image",
            files={"image": ("cow.exe", b"\x89PNG\r\n\x1a\n", "image/png")},
        )

        assert response.status_code == 400
        assert response.json()["error"]["type"] == "file_type_validation_error"
        assert storage.upload_calls == 0

    async def test_extension_case_insensitive(self, client, storage):
        response = await client.post(
            f"{API}/upload-image",
            files={"image": ("COW.JPG", b"\xff\xd8\xff\xe0", "image/jpeg")},
        )

        assert response.status_code == 201
        assert storage.upload_calls == 1

    async def test_storage_not_configured(self, app, client):
        app.state.storage = None

        response = await client.post(
            f"{API}/upload-image",
            files={"image": ("cow.png", b"\x89PNG\r\n\x1a\n", "image/png")},
        )

        assert response.status_code == 503

    async def test_requires_token(self, anonymous_client, storage):
        response = await anonymous_client.post(
            f"{API}/upload-image",
            files={"image": ("cow.png", b"\x89PNG", "image/png")},
        )

        assert response.status_code == 401
        assert storage.upload_calls == 0
