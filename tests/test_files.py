"""Tests for uploads and ownership-checked file deletion."""
from pathlib import Path

from sqlalchemy.exc import OperationalError

from studyhub.services import files as file_service


def _upload(client, subject="Ethics", uploader="ana", name="notes.txt", data=b"hello"):
    form = {"subject": subject}
    if uploader is not None:
        form["uploader"] = uploader
    return client.post("/upload", data=form, files={"file": (name, data, "text/plain")})


def _stored(settings, record) -> Path:
    return Path(settings.upload_dir) / Path(record["filePath"]).name


class TestUpload:
    def test_upload_records_metadata_and_serves_file(self, client, settings):
        resp = _upload(client)
        assert resp.status_code == 200
        record = resp.json()
        assert record["originalName"] == "notes.txt"
        assert record["uploader"] == "ana"
        assert record["filePath"].startswith("/uploads/")
        assert record["filePath"].endswith("-notes.txt")
        assert _stored(settings, record).read_bytes() == b"hello"

        served = client.get(record["filePath"])
        assert served.status_code == 200
        assert served.content == b"hello"

    def test_uploader_defaults_to_unknown(self, client):
        assert _upload(client, uploader=None).json()["uploader"] == "Unknown"

    def test_client_directories_are_stripped(self, client, settings):
        record = _upload(client, name="../../evil.txt").json()
        assert record["filePath"].endswith("-evil.txt")
        assert _stored(settings, record).exists()
        assert not (Path(settings.upload_dir).parent.parent / "evil.txt").exists()

    def test_upload_without_file(self, client):
        resp = client.post("/upload", data={"subject": "Ethics"})
        assert resp.status_code == 400
        assert resp.json() == {"error": "No file uploaded"}

    def test_upload_without_subject(self, client):
        resp = client.post("/upload", files={"file": ("a.txt", b"x", "text/plain")})
        assert resp.status_code == 400

    def test_list_newest_first(self, client):
        first = _upload(client, name="a.txt").json()
        second = _upload(client, name="b.txt").json()
        _upload(client, subject="Logic", name="c.txt")

        listed = client.get("/files", params={"subject": "Ethics"}).json()
        assert [f["id"] for f in listed] == [second["id"], first["id"]]

    def test_failed_metadata_insert_leaves_no_stored_file(self, client, settings, monkeypatch):
        async def failing_insert(*args, **kwargs):
            raise OperationalError("INSERT INTO files", {}, Exception("disk full"))

        monkeypatch.setattr(file_service, "store_file_metadata", failing_insert)

        resp = _upload(client)
        assert resp.status_code == 500
        assert "error" in resp.json()
        upload_dir = Path(settings.upload_dir)
        assert not upload_dir.exists() or list(upload_dir.iterdir()) == []
        assert client.get("/files", params={"subject": "Ethics"}).json() == []


class TestDeleteFile:
    def test_non_owner_is_refused_and_nothing_changes(self, client, settings):
        record = _upload(client).json()

        resp = client.delete(f"/files/{record['id']}", params={"user": "mallory"})
        assert resp.status_code == 403
        assert "error" in resp.json()
        assert _stored(settings, record).exists()
        assert len(client.get("/files", params={"subject": "Ethics"}).json()) == 1

    def test_owner_deletes_row_and_stored_file(self, client, settings):
        record = _upload(client).json()

        resp = client.delete(f"/files/{record['id']}", params={"user": "ana"})
        assert resp.json() == {"success": True}
        assert client.get("/files", params={"subject": "Ethics"}).json() == []
        assert not _stored(settings, record).exists()

    def test_admin_may_delete_any_file(self, client):
        record = _upload(client).json()
        resp = client.delete(f"/files/{record['id']}", params={"user": "admin"})
        assert resp.status_code == 200

    def test_missing_stored_file_does_not_fail_delete(self, client, settings):
        record = _upload(client).json()
        _stored(settings, record).unlink()

        resp = client.delete(f"/files/{record['id']}", params={"user": "ana"})
        assert resp.status_code == 200
        assert resp.json() == {"success": True}

    def test_unknown_file(self, client):
        resp = client.delete("/files/999", params={"user": "admin"})
        assert resp.status_code == 404
        assert resp.json() == {"error": "File not found"}

    def test_user_is_required(self, client):
        record = _upload(client).json()
        assert client.delete(f"/files/{record['id']}").status_code == 400
