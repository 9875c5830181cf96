from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock, patch

import pytest
from sqlalchemy.exc import OperationalError

from app.core.exceptions import InvalidProspectDataError, ProspectNotFoundError
from app.schemas.activity import ActivityCreate
from app.schemas.photo import PhotoUpload
from app.services.activity_service import ActivityService
from app.services.photo_service import PhotoService, decode_photo_data
from app.services.photo_storage import PhotoStorage

_PNG_B64 = "iVBORw0KGgo="  # PNG magic bytes, 8 bytes


async def _prospect(prospect_repo):
    prospect = await prospect_repo.create(
        first_name="Siti",
        last_name="Rahayu",
        email="siti@example.com",
        status="new",
        priority="medium",
    )
    await prospect_repo.commit()
    return prospect


class TestDecodePhotoData:
    def test_plain_base64(self):
        assert decode_photo_data(_PNG_B64, 1024) == b"\x89PNG\r\n\x1a\n"

    def test_data_url_prefix_is_stripped(self):
        data = decode_photo_data(f"data:image/png;base64,{_PNG_B64}", 1024)
        assert data.startswith(b"\x89PNG")

    def test_invalid_base64_raises(self):
        with pytest.raises(InvalidProspectDataError, match="not valid base64"):
            decode_photo_data("***not base64***", 1024)

    def test_empty_payload_raises(self):
        with pytest.raises(InvalidProspectDataError, match="empty"):
            decode_photo_data("data:image/png;base64,", 1024)

    def test_oversized_payload_raises(self):
        with pytest.raises(InvalidProspectDataError, match="maximum size"):
            decode_photo_data(_PNG_B64, 4)


class TestPhotoStorage:
    def test_filename_keeps_original_extension(self):
        name = PhotoStorage.build_filename(7, "Profile.JPG", "image/jpeg")
        assert name.startswith("prospect_7_")
        assert name.endswith(".jpg")

    def test_filename_falls_back_to_mime_type(self):
        assert PhotoStorage.build_filename(7, "blob", "image/png").endswith(".png")

    @pytest.mark.asyncio
    async def test_save_and_remove(self, photo_storage):
        stored = await photo_storage.save(1, b"abc", "a.png", "image/png")
        assert stored.file_size == 3
        assert stored.file_path == f"/uploads/{stored.filename}"
        assert photo_storage.path_for(stored.filename).read_bytes() == b"abc"

        assert await photo_storage.remove(stored.filename) is True
        assert await photo_storage.remove(stored.filename) is False

    def test_public_path_does_not_expose_upload_dir(self, tmp_path):
        storage = PhotoStorage(upload_dir=str(tmp_path), url_prefix="/media/")
        assert storage.public_path("a.png") == "/media/a.png"
        assert storage.path_for("a.png") == tmp_path / "a.png"


class TestPhotoService:
    @pytest.mark.asyncio
    async def test_upload_records_metadata(
        self, photo_storage, prospect_repo, photo_repo
    ):
        prospect = await _prospect(prospect_repo)
        service = PhotoService(storage=photo_storage)

        photo = await service.upload_photo(
            prospect.id,
            PhotoUpload(
                original_name="card.png", mime_type="image/png", photo_data=_PNG_B64
            ),
            prospect_repo,
            photo_repo,
        )

        assert photo.id is not None
        assert photo.prospect_id == prospect.id
        assert photo.original_name == "card.png"
        assert photo.file_size == 8
        assert photo.uploaded_at is not None

    @pytest.mark.asyncio
    async def test_upload_for_missing_prospect_raises(
        self, photo_storage, prospect_repo, photo_repo
    ):
        with pytest.raises(ProspectNotFoundError):
            await PhotoService(storage=photo_storage).upload_photo(
                99,
                PhotoUpload(
                    original_name="a.png", mime_type="image/png", photo_data=_PNG_B64
                ),
                prospect_repo,
                photo_repo,
            )

    @pytest.mark.asyncio
    async def test_list_is_newest_first(
        self, photo_storage, prospect_repo, photo_repo
    ):
        prospect = await _prospect(prospect_repo)
        service = PhotoService(storage=photo_storage)
        upload = PhotoUpload(
            original_name="a.png", mime_type="image/png", photo_data=_PNG_B64
        )
        first = await service.upload_photo(
            prospect.id, upload, prospect_repo, photo_repo
        )
        second = await service.upload_photo(
            prospect.id, upload, prospect_repo, photo_repo
        )

        photos = await service.list_photos(prospect.id, prospect_repo, photo_repo)
        assert [p.id for p in photos] == [second.id, first.id]

    @pytest.mark.asyncio
    async def test_delete_photo(self, photo_storage, prospect_repo, photo_repo):
        prospect = await _prospect(prospect_repo)
        service = PhotoService(storage=photo_storage)
        photo = await service.upload_photo(
            prospect.id,
            PhotoUpload(
                original_name="a.png", mime_type="image/png", photo_data=_PNG_B64
            ),
            prospect_repo,
            photo_repo,
        )
        photo_id, filename = photo.id, photo.filename

        assert await service.delete_photo(photo_id, photo_repo) is True
        assert await photo_repo.get_by_id(photo_id) is None
        assert await photo_storage.remove(filename) is False
        assert await service.delete_photo(photo_id, photo_repo) is False

    @pytest.mark.asyncio
    async def test_failed_insert_removes_stored_file(
        self, photo_storage, prospect_repo, photo_repo, tmp_path
    ):
        prospect = await _prospect(prospect_repo)
        failure = OperationalError("INSERT", {}, Exception("disk full"))

        with patch.object(photo_repo, "create", AsyncMock(side_effect=failure)):
            with pytest.raises(OperationalError):
                await PhotoService(storage=photo_storage).upload_photo(
                    prospect.id,
                    PhotoUpload(
                        original_name="a.png",
                        mime_type="image/png",
                        photo_data=_PNG_B64,
                    ),
                    prospect_repo,
                    photo_repo,
                )

        assert list((tmp_path / "uploads").iterdir()) == []


class TestActivityService:
    @pytest.mark.asyncio
    async def test_activity_date_defaults_to_now(self, prospect_repo, activity_repo):
        prospect = await _prospect(prospect_repo)
        before = datetime.now(timezone.utc)

        activity = await ActivityService().create_activity(
            prospect.id,
            ActivityCreate(activity_type="call", title="Intro call"),
            prospect_repo,
            activity_repo,
        )

        assert activity.activity_date >= before
        assert activity.activity_date == activity.created_at
        assert activity.description is None

    @pytest.mark.asyncio
    async def test_explicit_activity_date_is_kept(self, prospect_repo, activity_repo):
        prospect = await _prospect(prospect_repo)
        when = datetime(2024, 2, 20, 9, 30, tzinfo=timezone.utc)

        activity = await ActivityService().create_activity(
            prospect.id,
            ActivityCreate(activity_type="meeting", title="Demo", activity_date=when),
            prospect_repo,
            activity_repo,
        )

        assert activity.activity_date == when
        assert activity.created_at > when

    @pytest.mark.asyncio
    async def test_list_orders_by_activity_date_desc(
        self, prospect_repo, activity_repo
    ):
        prospect = await _prospect(prospect_repo)
        service = ActivityService()
        now = datetime.now(timezone.utc)
        for days, title in [(3, "oldest"), (0, "latest"), (1, "middle")]:
            await service.create_activity(
                prospect.id,
                ActivityCreate(
                    activity_type="note",
                    title=title,
                    activity_date=now - timedelta(days=days),
                ),
                prospect_repo,
                activity_repo,
            )

        activities = await service.list_activities(
            prospect.id, prospect_repo, activity_repo
        )
        assert [a.title for a in activities] == ["latest", "middle", "oldest"]

    @pytest.mark.asyncio
    async def test_missing_prospect_raises(self, prospect_repo, activity_repo):
        with pytest.raises(ProspectNotFoundError):
            await ActivityService().create_activity(
                3,
                ActivityCreate(activity_type="note", title="x"),
                prospect_repo,
                activity_repo,
            )
