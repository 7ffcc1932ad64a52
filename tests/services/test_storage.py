"""
Tests de la subida de logos e imágenes a S3 (cliente boto3 simulado).
"""
from unittest.mock import MagicMock, patch

import pytest
from botocore.exceptions import ClientError

from app.core.exceptions import BadRequestError
from app.schemas.club import ClubCreate, ClubUpdate
from app.services.club import club_service
from app.services.storage import FileUpload, S3UploadService, StorageError, s3_upload_service


@pytest.fixture
def s3_service():
    service = S3UploadService(client=MagicMock())
    service.bucket = "club-assets"
    service.region = "eu-west-1"
    return service


class TestS3UploadService:
    def test_upload_file_returns_public_url(self, s3_service):
        url = s3_service.upload_file("logo.png", b"png-bytes", "image/png")

        params = s3_service.client.put_object.call_args.kwargs
        assert params["Bucket"] == "club-assets"
        assert params["Key"].endswith("-logo.png")
        assert params["Body"] == b"png-bytes"
        assert params["ACL"] == "public-read"
        assert params["ContentDisposition"] == "inline"
        assert params["ContentType"] == "image/png"
        assert url == f"https://club-assets.s3.eu-west-1.amazonaws.com/{params['Key']}"

    def test_upload_without_content_type(self, s3_service):
        s3_service.upload_file("logo.png", b"x")

        assert "ContentType" not in s3_service.client.put_object.call_args.kwargs

    def test_upload_keys_are_unique(self, s3_service):
        first = s3_service.upload_file("logo.png", b"x")
        second = s3_service.upload_file("logo.png", b"x")

        assert first != second

    def test_upload_without_bucket(self, s3_service):
        s3_service.bucket = None

        with pytest.raises(StorageError):
            s3_service.upload_file("logo.png", b"x")

        s3_service.client.put_object.assert_not_called()

    def test_upload_too_large(self, s3_service):
        s3_service.max_upload_size = 3

        with pytest.raises(StorageError):
            s3_service.upload_file("logo.png", b"1234")

    def test_upload_client_error(self, s3_service):
        s3_service.client.put_object.side_effect = ClientError(
            {"Error": {"Code": "AccessDenied", "Message": "Access Denied"}}, "PutObject"
        )

        with pytest.raises(StorageError) as exc_info:
            s3_service.upload_file("logo.png", b"x")

        assert "Failed to upload file to S3" in str(exc_info.value)

    def test_delete_file(self, s3_service):
        assert s3_service.delete_file("abc-logo.png") is True
        s3_service.client.delete_object.assert_called_once_with(Bucket="club-assets", Key="abc-logo.png")

    def test_get_signed_url(self, s3_service):
        s3_service.client.generate_presigned_url.return_value = "https://signed"

        assert s3_service.get_signed_url("abc-logo.png", expires_in=60) == "https://signed"


class TestClubUploads:
    def test_create_club_with_logo_and_gallery(self, db):
        urls = iter(["https://cdn/logo.png", "https://cdn/g1.jpg", "https://cdn/g2.jpg"])

        with patch.object(s3_upload_service, "upload_file", side_effect=lambda *args: next(urls)) as upload:
            club = club_service.create_club(
                db,
                ClubCreate(title="Con logo"),
                logo=FileUpload("logo.png", b"logo", "image/png"),
                gallery_images=[FileUpload("g1.jpg", b"1", "image/jpeg"), FileUpload("g2.jpg", b"2", "image/jpeg")],
            )

        assert upload.call_count == 3
        assert club.logo == "https://cdn/logo.png"
        assert club.gallery_images == ["https://cdn/g1.jpg", "https://cdn/g2.jpg"]

    def test_create_club_upload_failure(self, db):
        with patch.object(s3_upload_service, "upload_file", side_effect=StorageError("boom")):
            with pytest.raises(BadRequestError) as exc_info:
                club_service.create_club(db, ClubCreate(title="Sin logo"), logo=FileUpload("logo.png", b"x"))

        assert exc_info.value.message == "Failed to upload logo"
        assert club_service.find_all(db) == []

    def test_update_club_replaces_logo(self, db, club):
        with patch.object(s3_upload_service, "upload_file", return_value="https://cdn/nuevo.png"):
            updated = club_service.update_club(db, club.id, ClubUpdate(), logo=FileUpload("nuevo.png", b"x"))

        assert updated.logo == "https://cdn/nuevo.png"
        assert updated.title == club.title

    def test_without_files_no_upload(self, db):
        with patch.object(s3_upload_service, "upload_file") as upload:
            club_service.create_club(db, ClubCreate(title="Sin archivos"))

        upload.assert_not_called()
