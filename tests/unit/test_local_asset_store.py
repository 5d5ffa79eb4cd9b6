"""
Unit tests for LocalAssetStore.
"""
import pytest
from feed_backend.infrastructure.storage import LocalAssetStore


class TestLocalAssetStore:

    @pytest.mark.asyncio
    async def test_store_writes_file_under_upload_dir(self, tmp_path):
        store = LocalAssetStore(tmp_path / "images")

        reference = await store.store(b"\x89PNG", "photo.PNG")

        files = list((tmp_path / "images").iterdir())
        assert reference.endswith(".png")
        assert len(files) == 1
        assert files[0].name == reference.rsplit("/", 1)[-1]
        assert files[0].read_bytes() == b"\x89PNG"

    @pytest.mark.asyncio
    async def test_store_rejects_other_types(self, tmp_path):
        store = LocalAssetStore(tmp_path)
        with pytest.raises(ValueError, match="Invalid image"):
            await store.store(b"data", "script.sh")

    @pytest.mark.asyncio
    async def test_delete_removes_file(self, tmp_path):
        store = LocalAssetStore(tmp_path)
        reference = await store.store(b"data", "a.jpg")

        await store.delete(reference)

        assert list(tmp_path.iterdir()) == []

    @pytest.mark.asyncio
    async def test_delete_missing_file_does_not_raise(self, tmp_path):
        store = LocalAssetStore(tmp_path)
        await store.delete(str(tmp_path / "missing.png"))

    @pytest.mark.asyncio
    async def test_delete_outside_upload_dir_is_ignored(self, tmp_path):
        upload_dir = tmp_path / "images"
        upload_dir.mkdir()
        outside = tmp_path / "secret.txt"
        outside.write_text("keep me")
        store = LocalAssetStore(upload_dir)

        await store.delete(str(upload_dir / ".." / "secret.txt"))
        await store.delete("")

        assert outside.read_text() == "keep me"
