"""
Тесты storage backend'ов S3 и MinIO поверх замоканного клиента aioboto3.
"""

from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest
from botocore.exceptions import ClientError
from fastapi import UploadFile
from io import BytesIO
from starlette.datastructures import Headers

from shelter.core.exceptions import InvalidDataURLError, StorageError
from shelter.core.integrations.storages import (MinioStorage, S3Storage,
                                                create_storage_backend,
                                                extension_from_content_type,
                                                generate_object_key,
                                                parse_data_url)
from shelter.core.settings import Settings

from .conftest import PNG_DATA_URL

BUCKET = "cows-shelter"


def client_error(code: str, operation: str = "HeadBucket") -> ClientError:
    return ClientError({"Error": {"Code": code, "Message": code}}, operation)


@pytest.fixture
def s3_client():
    return AsyncMock()


@pytest.fixture
def aws_storage(s3_client):
    return S3Storage(s3_client, bucket_name=BUCKET, region="eu-central-1")


@pytest.fixture
def minio_storage(s3_client):
    return MinioStorage(
        s3_client, bucket_name=BUCKET, endpoint="localhost:9000", use_ssl=False
    )


class TestDataURL:

    def test_parse_valid(self):
        content_type, data = parse_data_url(PNG_DATA_URL)
        assert content_type == "image/png"
        assert data.startswith(b"\x89PNG")

    @pytest.mark.parametrize(
        "value",
        [
            "data:image/png;base64",  # нет запятой
            "image/png;base64,iVBORw0KGgo=",  # нет префикса data:
            "data:image/png,iVBORw0KGgo=",  # нет ;base64
            "data:image/png;base64,@@@not-base64@@@",
            "data:image/png;base64,",
            "",
        ],
    )
    def test_parse_invalid(self, value):
        with pytest.raises(InvalidDataURLError):
            parse_data_url(value)

    @pytest.mark.parametrize(
        "content_type, extension",
        [
            ("image/png", ".png"),
            ("image/jpeg", ".jpeg"),
            ("image/svg+xml", ".svg"),
            ("application/pdf", ".pdf"),
        ],
    )
    def test_extension(self, content_type, extension):
        assert extension_from_content_type(content_type) == extension

    def test_object_key_with_folder(self):
        key = generate_object_key("news/", ".png")
        folder, filename = key.split("/")
        assert folder == "news"
        assert filename.endswith(".png")
        assert len(filename) == 36 + 4

    def test_object_key_without_folder(self):
        key = generate_object_key("", ".png")
        assert "/" not in key

    def test_object_keys_unique(self):
        assert generate_object_key("a", ".png") != generate_object_key("a", ".png")


class TestObjectURL:

    def test_aws_virtual_hosted(self, aws_storage):
        assert (
            aws_storage.get_object_url("news/a.png")
            == "https://cows-shelter.s3.eu-central-1.amazonaws.com/news/a.png"
        )

    def test_s3_custom_endpoint_path_style(self, s3_client):
        storage = S3Storage(
            s3_client, bucket_name=BUCKET, region="us-east-1", endpoint="s3.local:9000", use_ssl=False
        )
        assert storage.get_object_url("news/a.png") == "http://s3.local:9000/cows-shelter/news/a.png"

    def test_minio_path_style(self, minio_storage):
        assert (
            minio_storage.get_object_url("/gallery/b.webp")
            == "http://localhost:9000/cows-shelter/gallery/b.webp"
        )

    def test_public_url_wins(self, s3_client):
        storage = S3Storage(
            s3_client,
            bucket_name=BUCKET,
            region="us-east-1",
            public_url="https://cdn.cows-shelter.org/",
        )
        assert storage.get_object_url("news/a.png") == "https://cdn.cows-shelter.org/news/a.png"
        assert storage.extract_object_key("https://cdn.cows-shelter.org/news/a.png") == "news/a.png"

    def test_full_url_returned_unchanged(self, aws_storage):
        url = "https://example.org/picture.png"
        assert aws_storage.get_object_url(url) == url

    def test_extract_from_bare_key(self, minio_storage):
        assert minio_storage.extract_object_key("news/a.png") == "news/a.png"

    def test_extract_unknown_url_unchanged(self, minio_storage):
        url = "https://example.org/other/a.png"
        assert minio_storage.extract_object_key(url) == url

    def test_extract_foreign_url_with_bucket_in_path_unchanged(self, minio_storage):
        url = "https://example.org/cows-shelter/news/a.png"
        assert minio_storage.extract_object_key(url) == url

    def test_extract_path_style_from_own_endpoint(self, minio_storage):
        url = "http://localhost:9000/cows-shelter/news/a.png"
        assert minio_storage.extract_object_key(url) == "news/a.png"

    @pytest.mark.parametrize("folder", ["news", "partners", ""])
    def test_round_trip(self, aws_storage, minio_storage, folder):
        key = generate_object_key(folder, ".png")
        for storage in (aws_storage, minio_storage):
            url = storage.get_object_url(key)
            assert storage.extract_object_key(url) == key
            assert storage.get_object_url(storage.extract_object_key(url)) == url


class TestOperations:

    async def test_upload_base64(self, aws_storage, s3_client):
        url = await aws_storage.upload_base64(PNG_DATA_URL, "news")

        s3_client.put_object.assert_awaited_once()
        params = s3_client.put_object.call_args.kwargs
        assert params["Bucket"] == BUCKET
        assert params["ContentType"] == "image/png"
        assert params["Key"].startswith("news/") and params["Key"].endswith(".png")
        assert url == aws_storage.get_object_url(params["Key"])

    async def test_upload_base64_rejected_before_network(self, aws_storage, s3_client):
        with pytest.raises(InvalidDataURLError):
            await aws_storage.upload_base64("not a data url", "news")
        s3_client.put_object.assert_not_awaited()

    async def test_upload_file(self, minio_storage, s3_client):
        upload = UploadFile(
            file=BytesIO(b"%PDF-1.4"),
            filename="Report.PDF",
            headers=Headers({"content-type": "application/pdf"}),
        )
        url = await minio_storage.upload_file(upload, "pdfs")

        params = s3_client.put_object.call_args.kwargs
        assert params["Key"].startswith("pdfs/") and params["Key"].endswith(".pdf")
        assert params["Body"] == b"%PDF-1.4"
        assert params["ContentType"] == "application/pdf"
        assert url.startswith("http://localhost:9000/cows-shelter/pdfs/")

    async def test_upload_error(self, aws_storage, s3_client):
        s3_client.put_object.side_effect = client_error("AccessDenied", "PutObject")
        with pytest.raises(StorageError) as exc_info:
            await aws_storage.upload_base64(PNG_DATA_URL, "news")
        assert exc_info.value.status_code == 500
        assert "AccessDenied" in exc_info.value.detail

    async def test_delete_by_url(self, minio_storage, s3_client):
        await minio_storage.delete_file("http://localhost:9000/cows-shelter/news/a.png")
        s3_client.delete_object.assert_awaited_once_with(Bucket=BUCKET, Key="news/a.png")

    async def test_delete_error(self, minio_storage, s3_client):
        s3_client.delete_object.side_effect = client_error("InternalError", "DeleteObject")
        with pytest.raises(StorageError):
            await minio_storage.delete_file("news/a.png")

    @pytest.mark.parametrize("requested, expected", [(0, 1), (50, 50), (5000, 1000)])
    async def test_list_objects_clamps_max_keys(self, aws_storage, s3_client, requested, expected):
        modified = datetime(2024, 5, 1, tzinfo=timezone.utc)
        s3_client.list_objects_v2.return_value = {
            "Contents": [{"Key": "news/a.png", "Size": 10, "LastModified": modified}]
        }

        objects = await aws_storage.list_objects("news/", requested)

        assert s3_client.list_objects_v2.call_args.kwargs["MaxKeys"] == expected
        assert objects[0].key == "news/a.png"
        assert objects[0].size == 10
        assert objects[0].last_modified == modified

    async def test_check_connection_missing_bucket(self, aws_storage, s3_client):
        s3_client.head_bucket.side_effect = client_error("404")
        with pytest.raises(StorageError):
            await aws_storage.check_connection()


class TestStartup:

    async def test_minio_creates_bucket_with_policy(self, minio_storage, s3_client):
        s3_client.head_bucket.side_effect = client_error("404")

        await minio_storage.startup()

        s3_client.create_bucket.assert_awaited_once_with(Bucket=BUCKET)
        policy = s3_client.put_bucket_policy.call_args.kwargs["Policy"]
        assert "s3:GetObject" in policy
        assert f"arn:aws:s3:::{BUCKET}/*" in policy

    async def test_minio_existing_bucket(self, minio_storage, s3_client):
        await minio_storage.startup()
        s3_client.create_bucket.assert_not_awaited()
        s3_client.put_bucket_policy.assert_awaited_once()

    async def test_s3_does_not_create_bucket(self, aws_storage, s3_client):
        s3_client.head_bucket.side_effect = client_error("404")
        with pytest.raises(StorageError):
            await aws_storage.startup()
        s3_client.create_bucket.assert_not_awaited()


class TestFactory:

    def test_minio(self, s3_client):
        settings = Settings(
            STORAGE_TYPE="MinIO",
            MINIO_ENDPOINT="http://localhost:9000",
            STORAGE_USE_SSL=False,
        )
        storage = create_storage_backend(settings, s3_client)
        assert isinstance(storage, MinioStorage)
        assert storage.get_object_url("a.png") == "http://localhost:9000/cows-shelter/a.png"

    def test_minio_by_endpoint(self, s3_client):
        settings = Settings(MINIO_ENDPOINT="minio:9000", MINIO_BUCKET="images")
        storage = create_storage_backend(settings, s3_client)
        assert isinstance(storage, MinioStorage)
        assert storage.bucket_name == "images"

    def test_s3(self, s3_client):
        settings = Settings(STORAGE_TYPE="s3", AWS_REGION="eu-west-1", STORAGE_BUCKET="media")
        storage = create_storage_backend(settings, s3_client)
        assert isinstance(storage, S3Storage)
        assert storage.get_object_url("a.png") == "https://media.s3.eu-west-1.amazonaws.com/a.png"

    def test_unknown(self, s3_client):
        with pytest.raises(ValueError):
            create_storage_backend(Settings(STORAGE_TYPE="ftp"), s3_client)
