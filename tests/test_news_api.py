"""
Тесты API новостей: CRUD, пагинация и согласованность записей с хранилищем.
"""

import pytest
from sqlalchemy.exc import SQLAlchemyError

from shelter.repository.v1.news import NewsRepository

from .conftest import JPEG_DATA_URL, PNG_DATA_URL

NEWS_URL = "/api/v1/news"


def news_payload(**overrides):
    payload = {
        "title_en": "Open day",
        "title_ua": "День відкритих дверей",
        "content_en": "Come and meet our cows",
        "content_ua": "Приходьте познайомитися з нашими коровами",
    }
    payload.update(overrides)
    return payload


async def create_news(client, **overrides):
    response = await client.post(NEWS_URL, json=news_payload(**overrides))
    assert response.status_code == 201, response.text
    return response.json()["data"]


class TestCreate:

    async def test_create_without_image(self, client, storage):
        news = await create_news(client)

        assert news["id"] > 0
        assert news["title_en"] == "Open day"
        assert news["image_url"] is None
        assert storage.upload_calls == 0

    async def test_create_with_image(self, client, storage):
        news = await create_news(client, image_data=PNG_DATA_URL)

        keys = storage.keys("news")
        assert len(keys) == 1
        assert keys[0].endswith(".png")
        assert news["image_url"] == storage.get_object_url(keys[0])
        assert storage.objects[keys[0]][1] == "image/png"

    async def test_missing_required_field(self, client, storage):
        response = await client.post(NEWS_URL, json={"title_en": "Only title"})

        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert body["error"]["type"] == "validation_error"
        assert storage.upload_calls == 0

    async def test_malformed_data_url_rejected_before_upload(self, client, storage):
        response = await client.post(
            NEWS_URL, json=news_payload(image_data="data:image/png;base64,@@@")
        )

        assert response.status_code == 400
        assert response.json()["error"]["type"] == "invalid_data_url"
        assert storage.upload_calls == 0
        assert (await client.get(NEWS_URL)).json()["data"] == []

    async def test_non_image_data_url_rejected(self, client, storage):
        response = await client.post(
            NEWS_URL, json=news_payload(image_data="data:text/plain;base64,aGVsbG8=")
        )

        assert response.status_code == 400
        assert response.json()["error"]["type"] == "file_type_validation_error"
        assert storage.upload_calls == 0

    async def test_upload_failure_leaves_no_record(self, client, storage):
        storage.fail_uploads = True

        response = await client.post(NEWS_URL, json=news_payload(image_data=PNG_DATA_URL))

        assert response.status_code == 500
        assert response.json()["error"]["type"] == "storage_error"
        assert (await client.get(NEWS_URL)).json()["data"] == []

    async def test_database_failure_removes_uploaded_file(self, client, storage, monkeypatch):
        async def broken_create(self, data):
            raise SQLAlchemyError("connection lost")

        monkeypatch.setattr(NewsRepository, "create_item", broken_create)

        response = await client.post(NEWS_URL, json=news_payload(image_data=PNG_DATA_URL))

        assert response.status_code == 500
        assert response.json()["error"]["type"] == "database_error"
        assert "connection lost" in response.json()["error"]["detail"]
        assert storage.upload_calls == 1
        assert len(storage.deleted) == 1
        assert storage.keys("news") == []

    async def test_storage_not_configured(self, app, client):
        app.state.storage = None

        response = await client.post(NEWS_URL, json=news_payload(image_data=PNG_DATA_URL))

        assert response.status_code == 503
        assert response.json()["error"]["type"] == "service_unavailable"


class TestRead:

    async def test_list_empty(self, anonymous_client):
        response = await anonymous_client.get(NEWS_URL)

        assert response.status_code == 200
        assert response.json()["data"] == []

    async def test_list_sorted_by_id(self, client, anonymous_client):
        first = await create_news(client, title_en="First")
        second = await create_news(client, title_en="Second")

        data = (await anonymous_client.get(NEWS_URL)).json()["data"]

        assert [item["id"] for item in data] == [first["id"], second["id"]]

    async def test_get_by_id(self, client, anonymous_client):
        news = await create_news(client)

        response = await anonymous_client.get(f"{NEWS_URL}/{news['id']}")

        assert response.status_code == 200
        assert response.json()["data"]["content_en"] == "Come and meet our cows"

    async def test_get_missing(self, anonymous_client):
        response = await anonymous_client.get(f"{NEWS_URL}/999")

        assert response.status_code == 404
        assert response.json()["error"]["type"] == "content_not_found"

    async def test_get_invalid_id(self, anonymous_client):
        response = await anonymous_client.get(f"{NEWS_URL}/abc")
        assert response.status_code == 400


class TestPagination:

    @pytest.fixture
    async def seven_news(self, client):
        return [await create_news(client, title_en=f"News {index}") for index in range(7)]

    async def test_first_page(self, anonymous_client, seven_news):
        response = await anonymous_client.get(f"{NEWS_URL}/pagination", params={"page": 1, "limit": 3})

        body = response.json()
        assert response.status_code == 200
        assert [item["title_en"] for item in body["data"]] == ["News 0", "News 1", "News 2"]
        assert body["total"] == 7
        assert body["page"] == 1
        assert body["limit"] == 3
        assert body["total_pages"] == 3

    async def test_last_page(self, anonymous_client, seven_news):
        body = (
            await anonymous_client.get(f"{NEWS_URL}/pagination", params={"page": 3, "limit": 3})
        ).json()

        assert [item["title_en"] for item in body["data"]] == ["News 6"]

    async def test_page_out_of_range(self, anonymous_client, seven_news):
        body = (
            await anonymous_client.get(f"{NEWS_URL}/pagination", params={"page": 10, "limit": 3})
        ).json()

        assert body["data"] == []
        assert body["total"] == 7

    async def test_defaults(self, anonymous_client, seven_news):
        body = (await anonymous_client.get(f"{NEWS_URL}/pagination")).json()

        assert body["page"] == 1
        assert body["limit"] == 10
        assert body["total_pages"] == 1
        assert len(body["data"]) == 7

    async def test_large_limit_single_page(self, anonymous_client, seven_news):
        response = await anonymous_client.get(
            f"{NEWS_URL}/pagination", params={"page": 1, "limit": 150}
        )

        body = response.json()
        assert response.status_code == 200
        assert body["limit"] == 150
        assert body["total_pages"] == 1
        assert len(body["data"]) == 7

    @pytest.mark.parametrize("params", [{"page": 0}, {"limit": 0}, {"page": "x"}])
    async def test_invalid_params(self, anonymous_client, params):
        response = await anonymous_client.get(f"{NEWS_URL}/pagination", params=params)
        assert response.status_code == 400

    async def test_deleted_not_counted(self, client, anonymous_client, seven_news):
        await client.delete(f"{NEWS_URL}/{seven_news[0]['id']}")

        body = (await anonymous_client.get(f"{NEWS_URL}/pagination")).json()

        assert body["total"] == 6
        assert seven_news[0]["id"] not in [item["id"] for item in body["data"]]


class TestUpdate:

    @pytest.mark.parametrize("method", ["put", "patch"])
    async def test_partial_update_keeps_other_fields(self, client, method):
        news = await create_news(client)

        response = await getattr(client, method)(
            f"{NEWS_URL}/{news['id']}", json={"title_en": "Updated"}
        )

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["title_en"] == "Updated"
        assert data["content_en"] == news["content_en"]
        assert data["title_ua"] == news["title_ua"]

    async def test_replace_image_deletes_old(self, client, storage):
        news = await create_news(client, image_data=PNG_DATA_URL)
        old_key = storage.extract_object_key(news["image_url"])

        response = await client.patch(
            f"{NEWS_URL}/{news['id']}", json={"image_data": JPEG_DATA_URL}
        )

        new_url = response.json()["data"]["image_url"]
        assert response.status_code == 200
        assert new_url != news["image_url"]
        assert storage.deleted == [old_key]
        assert storage.keys("news") == [storage.extract_object_key(new_url)]

    async def test_update_without_image_keeps_file(self, client, storage):
        news = await create_news(client, image_data=PNG_DATA_URL)

        response = await client.patch(f"{NEWS_URL}/{news['id']}", json={"title_en": "New"})

        assert response.json()["data"]["image_url"] == news["image_url"]
        assert storage.deleted == []
        assert storage.upload_calls == 1

    async def test_null_image_clears_file(self, client, storage):
        news = await create_news(client, image_data=PNG_DATA_URL)

        response = await client.patch(f"{NEWS_URL}/{news['id']}", json={"image_data": None})

        assert response.status_code == 200
        assert response.json()["data"]["image_url"] is None
        assert storage.keys("news") == []

    @pytest.mark.parametrize("method", ["put", "patch"])
    async def test_empty_image_keeps_file(self, client, storage, method):
        news = await create_news(client, image_data=PNG_DATA_URL)

        response = await getattr(client, method)(
            f"{NEWS_URL}/{news['id']}", json={"image_data": "", "title_en": "New"}
        )

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["image_url"] == news["image_url"]
        assert data["title_en"] == "New"
        assert storage.deleted == []
        assert storage.upload_calls == 1

    async def test_null_optional_field_clears_it(self, client):
        news = await create_news(client)

        response = await client.patch(f"{NEWS_URL}/{news['id']}", json={"title_ua": None})

        assert response.json()["data"]["title_ua"] is None

    async def test_null_required_field_rejected(self, client):
        news = await create_news(client)

        response = await client.patch(f"{NEWS_URL}/{news['id']}", json={"title_en": None})

        assert response.status_code == 400
        stored = (await client.get(f"{NEWS_URL}/{news['id']}")).json()["data"]
        assert stored["title_en"] == news["title_en"]

    async def test_update_missing(self, client, storage):
        response = await client.patch(f"{NEWS_URL}/999", json={"image_data": PNG_DATA_URL})

        assert response.status_code == 404
        assert storage.upload_calls == 0

    async def test_database_failure_keeps_old_image(self, client, storage, monkeypatch):
        news = await create_news(client, image_data=PNG_DATA_URL)

        async def broken_update(self, item_id, data):
            raise SQLAlchemyError("deadlock")

        monkeypatch.setattr(NewsRepository, "update_item", broken_update)

        response = await client.patch(
            f"{NEWS_URL}/{news['id']}", json={"image_data": JPEG_DATA_URL}
        )

        assert response.status_code == 500
        assert storage.keys("news") == [storage.extract_object_key(news["image_url"])]


class TestDelete:

    async def test_delete_removes_file_and_record(self, client, storage):
        news = await create_news(client, image_data=PNG_DATA_URL)

        response = await client.delete(f"{NEWS_URL}/{news['id']}")

        assert response.status_code == 200
        assert response.json()["success"] is True
        assert response.json()["data"] is None
        assert storage.keys("news") == []
        assert (await client.get(f"{NEWS_URL}/{news['id']}")).status_code == 404

    async def test_delete_twice(self, client):
        news = await create_news(client)

        await client.delete(f"{NEWS_URL}/{news['id']}")
        response = await client.delete(f"{NEWS_URL}/{news['id']}")

        assert response.status_code == 404


class TestAuthorization:

    @pytest.mark.parametrize(
        "method, path",
        [
            ("post", NEWS_URL),
            ("put", f"{NEWS_URL}/1"),
            ("patch", f"{NEWS_URL}/1"),
            ("delete", f"{NEWS_URL}/1"),
        ],
    )
    async def test_writes_require_token(self, anonymous_client, storage, method, path):
        kwargs = {} if method == "delete" else {"json": news_payload(image_data=PNG_DATA_URL)}

        response = await getattr(anonymous_client, method)(path, **kwargs)

        assert response.status_code == 401
        assert response.json()["error"]["type"] == "token_missing"
        assert storage.upload_calls == 0

    async def test_invalid_token(self, anonymous_client):
        response = await anonymous_client.post(
            NEWS_URL,
            json=news_payload(),
            headers={"Authorization": "Bearer not-a-jwt"},
        )

        assert response.status_code == 401
        assert response.json()["error"]["type"] == "token_invalid"
