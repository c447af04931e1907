"""Tests for the API layer — envelopes, status codes and error mapping.

Uses httpx.AsyncClient over ASGITransport. Services are mocked to isolate the
API layer from the database.
"""

from __future__ import annotations

import uuid
from datetime import date, datetime
from unittest.mock import AsyncMock, MagicMock

import pytest
import structlog
from httpx import ASGITransport, AsyncClient

from rme.api import create_app, deps
from rme.core.pagination import PaginationMeta, PaginationParams
from rme.models.doctor import Doctor
from rme.models.file import File
from rme.models.medical_record import MedicalRecord
from rme.services import ConflictError, NotFoundError, StorageError, ValidationError

# ---------------------------------------------------------------------------
# Shared helpers
# ---------------------------------------------------------------------------

NOW = datetime(2025, 1, 15, 12, 0, 0)
NIK = "3171234567890001"


def _record(record_id: uuid.UUID | None = None) -> MedicalRecord:
    return MedicalRecord(
        id=record_id or uuid.uuid4(),
        nrme="RM-0001",
        nik=NIK,
        name="Budi",
        dob=date(1990, 5, 1),
        gender="male",
        hp="081234567890",
        email="budi@example.com",
        last_visit_date=date(2025, 1, 15),
        created_at=NOW,
        updated_at=NOW,
    )


def _doctor(doctor_id: uuid.UUID | None = None) -> Doctor:
    return Doctor(
        id=doctor_id or uuid.uuid4(),
        name="dr. Sari",
        nip="198001012005011001",
        sip="SIP-001",
        specialization="general",
        status="active",
        created_at=NOW,
        updated_at=NOW,
    )


def _file(file_id: uuid.UUID | None = None) -> File:
    return File(
        id=file_id or uuid.uuid4(),
        name="scan.pdf",
        type="application/pdf",
        extension="pdf",
        size=4,
        path="files/20250115_120000_scan.pdf",
        url="https://rme-files.s3.amazonaws.com/files/20250115_120000_scan.pdf",
        uploader="dr-sari",
        created_at=NOW,
        updated_at=NOW,
    )


RECORD_BODY = {
    "nik": NIK,
    "nrme": "RM-0001",
    "name": "Budi",
    "dob": "1990-05-01",
    "gender": "male",
    "hp": "081234567890",
    "email": "budi@example.com",
}


@pytest.fixture
def app():
    """The real app; lifespan does not run under ASGITransport."""
    mock_session = AsyncMock()
    application = create_app()

    async def _mock_session():
        yield mock_session

    application.dependency_overrides[deps.get_session] = _mock_session
    application.dependency_overrides[deps.get_object_storage] = lambda: MagicMock()
    return application


@pytest.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


def _assert_error(resp, status: int, code: str) -> dict:
    assert resp.status_code == status
    body = resp.json()
    assert set(body) == {"success", "status", "error", "timestamp"}
    assert body["success"] is False
    assert body["status"] == status
    assert body["error"]["code"] == code
    return body


# ---------------------------------------------------------------------------
# Ops
# ---------------------------------------------------------------------------


class TestOps:
    async def test_health(self, client):
        resp = await client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok"}
        assert "X-Request-ID" in resp.headers

    async def test_request_id_echoed(self, client):
        rid = str(uuid.uuid4())
        resp = await client.get("/health", headers={"X-Request-ID": rid})
        assert resp.headers["X-Request-ID"] == rid

    async def test_docs_under_prefix(self, client):
        resp = await client.get("/api/v1/openapi.json")
        assert resp.status_code == 200
        assert "/api/v1/medical-records/" in resp.json()["paths"]

    async def test_unknown_route_envelope(self, client):
        resp = await client.get("/api/v1/nope")
        _assert_error(resp, 404, "NOT_FOUND")

    async def test_log_context_released_after_request(self, client):
        await client.get("/health")
        assert "request_id" not in structlog.contextvars.get_contextvars()

    async def test_unexpected_exception_envelope(self, app):
        mock_svc = AsyncMock()
        mock_svc.get_all_paginated = AsyncMock(side_effect=RuntimeError("boom"))
        app.dependency_overrides[deps.get_doctor_service] = lambda: mock_svc

        transport = ASGITransport(app=app, raise_app_exceptions=False)
        async with AsyncClient(transport=transport, base_url="http://test") as c:
            resp = await c.get("/api/v1/doctors/")

        body = _assert_error(resp, 500, "INTERNAL_ERROR")
        assert body["error"]["details"] == "Internal server error"
        assert "boom" not in resp.text


# ---------------------------------------------------------------------------
# Medical records
# ---------------------------------------------------------------------------


class TestMedicalRecordsRouter:
    @pytest.mark.asyncio
    async def test_list(self, app, client):
        params = PaginationParams(page=2, limit=10)
        mock_svc = AsyncMock()
        mock_svc.get_all_paginated = AsyncMock(
            return_value=([_record() for _ in range(10)], PaginationMeta.build(params, 25))
        )
        app.dependency_overrides[deps.get_medical_record_service] = lambda: mock_svc

        resp = await client.get("/api/v1/medical-records/?page=2&limit=10")
        assert resp.status_code == 200
        body = resp.json()
        assert set(body) == {"success", "status", "message", "data", "pagination", "timestamp"}
        assert body["success"] is True
        assert len(body["data"]) == 10
        assert body["pagination"] == {
            "current_page": 2,
            "per_page": 10,
            "total": 25,
            "total_pages": 3,
            "has_next": True,
            "has_prev": True,
        }
        assert mock_svc.get_all_paginated.call_args.args[1] == params

    @pytest.mark.asyncio
    async def test_list_out_of_range_params_corrected(self, app, client):
        mock_svc = AsyncMock()
        mock_svc.get_all_paginated = AsyncMock(
            return_value=([], PaginationMeta.build(PaginationParams(1, 100), 0))
        )
        app.dependency_overrides[deps.get_medical_record_service] = lambda: mock_svc

        resp = await client.get("/api/v1/medical-records/?page=-5&limit=500")
        assert resp.status_code == 200
        assert mock_svc.get_all_paginated.call_args.args[1] == PaginationParams(1, 100)
        assert resp.json()["pagination"]["per_page"] == 100

    @pytest.mark.asyncio
    async def test_list_non_numeric_params_default(self, app, client):
        mock_svc = AsyncMock()
        mock_svc.get_all_paginated = AsyncMock(
            return_value=([], PaginationMeta.build(PaginationParams(), 0))
        )
        app.dependency_overrides[deps.get_medical_record_service] = lambda: mock_svc

        resp = await client.get("/api/v1/medical-records/?page=abc&limit=xyz")
        assert resp.status_code == 200
        assert mock_svc.get_all_paginated.call_args.args[1] == PaginationParams(1, 10)

    @pytest.mark.asyncio
    async def test_create(self, app, client):
        mock_svc = AsyncMock()
        mock_svc.create = AsyncMock(return_value=_record())
        app.dependency_overrides[deps.get_medical_record_service] = lambda: mock_svc

        resp = await client.post("/api/v1/medical-records/", json=RECORD_BODY)
        assert resp.status_code == 201
        body = resp.json()
        assert set(body) == {"success", "status", "message", "data", "timestamp"}
        assert body["status"] == 201
        assert body["data"]["nik"] == NIK
        assert mock_svc.create.call_args.kwargs["dob"] == date(1990, 5, 1)

    @pytest.mark.asyncio
    async def test_create_duplicate_nik(self, app, client):
        mock_svc = AsyncMock()
        mock_svc.create = AsyncMock(side_effect=ConflictError("NIK already exists"))
        app.dependency_overrides[deps.get_medical_record_service] = lambda: mock_svc

        resp = await client.post("/api/v1/medical-records/", json=RECORD_BODY)
        body = _assert_error(resp, 409, "CONFLICT")
        assert body["error"]["details"] == "NIK already exists"

    @pytest.mark.asyncio
    async def test_create_invalid_nik(self, app, client):
        mock_svc = AsyncMock()
        mock_svc.create = AsyncMock(side_effect=ValidationError("NIK must contain only digits"))
        app.dependency_overrides[deps.get_medical_record_service] = lambda: mock_svc

        resp = await client.post("/api/v1/medical-records/", json=RECORD_BODY)
        _assert_error(resp, 400, "BAD_REQUEST")

    @pytest.mark.asyncio
    async def test_create_invalid_payload(self, app, client):
        mock_svc = AsyncMock()
        app.dependency_overrides[deps.get_medical_record_service] = lambda: mock_svc

        resp = await client.post(
            "/api/v1/medical-records/", json={**RECORD_BODY, "email": "not-an-email", "name": " "}
        )
        body = _assert_error(resp, 400, "BAD_REQUEST")
        assert "email" in body["error"]["details"]
        mock_svc.create.assert_not_called()

    @pytest.mark.parametrize("email", ["@.", "budi@", "budi.example.com", "a@b."])
    async def test_create_malformed_email(self, app, client, email):
        mock_svc = AsyncMock()
        app.dependency_overrides[deps.get_medical_record_service] = lambda: mock_svc

        resp = await client.post("/api/v1/medical-records/", json={**RECORD_BODY, "email": email})
        body = _assert_error(resp, 400, "BAD_REQUEST")
        assert "email" in body["error"]["details"]
        mock_svc.create.assert_not_called()

    @pytest.mark.asyncio
    async def test_get(self, app, client):
        record_id = uuid.uuid4()
        mock_svc = AsyncMock()
        mock_svc.get_by_id = AsyncMock(return_value=_record(record_id))
        app.dependency_overrides[deps.get_medical_record_service] = lambda: mock_svc

        resp = await client.get(f"/api/v1/medical-records/{record_id}")
        assert resp.status_code == 200
        assert resp.json()["data"]["id"] == str(record_id)

    @pytest.mark.asyncio
    async def test_get_not_found(self, app, client):
        mock_svc = AsyncMock()
        mock_svc.get_by_id = AsyncMock(return_value=None)
        app.dependency_overrides[deps.get_medical_record_service] = lambda: mock_svc

        resp = await client.get(f"/api/v1/medical-records/{uuid.uuid4()}")
        body = _assert_error(resp, 404, "NOT_FOUND")
        assert body["error"]["details"] == "Medical record not found"

    @pytest.mark.asyncio
    async def test_get_malformed_id(self, app, client):
        mock_svc = AsyncMock()
        app.dependency_overrides[deps.get_medical_record_service] = lambda: mock_svc

        resp = await client.get("/api/v1/medical-records/not-a-uuid")
        _assert_error(resp, 400, "BAD_REQUEST")
        mock_svc.get_by_id.assert_not_called()

    @pytest.mark.asyncio
    async def test_update_sends_only_provided_fields(self, app, client):
        record_id = uuid.uuid4()
        mock_svc = AsyncMock()
        mock_svc.update = AsyncMock(return_value=_record(record_id))
        app.dependency_overrides[deps.get_medical_record_service] = lambda: mock_svc

        resp = await client.put(f"/api/v1/medical-records/{record_id}", json={"name": "Budi S."})
        assert resp.status_code == 200
        assert mock_svc.update.call_args.kwargs == {"name": "Budi S."}

    @pytest.mark.asyncio
    async def test_delete(self, app, client):
        mock_svc = AsyncMock()
        mock_svc.delete = AsyncMock(return_value=None)
        app.dependency_overrides[deps.get_medical_record_service] = lambda: mock_svc

        resp = await client.delete(f"/api/v1/medical-records/{uuid.uuid4()}")
        assert resp.status_code == 204
        assert resp.content == b""

    @pytest.mark.asyncio
    async def test_delete_missing(self, app, client):
        mock_svc = AsyncMock()
        mock_svc.delete = AsyncMock(side_effect=NotFoundError("Medical record not found"))
        app.dependency_overrides[deps.get_medical_record_service] = lambda: mock_svc

        resp = await client.delete(f"/api/v1/medical-records/{uuid.uuid4()}")
        _assert_error(resp, 404, "NOT_FOUND")

    @pytest.mark.asyncio
    async def test_storage_error(self, app, client):
        mock_svc = AsyncMock()
        mock_svc.get_all_paginated = AsyncMock(side_effect=StorageError("find failed: gone"))
        app.dependency_overrides[deps.get_medical_record_service] = lambda: mock_svc

        resp = await client.get("/api/v1/medical-records/")
        _assert_error(resp, 500, "INTERNAL_ERROR")


# ---------------------------------------------------------------------------
# Doctors (representative of the other CRUD routers)
# ---------------------------------------------------------------------------


class TestDoctorsRouter:
    @pytest.mark.asyncio
    async def test_create_defaults_status(self, app, client):
        mock_svc = AsyncMock()
        mock_svc.create = AsyncMock(return_value=_doctor())
        app.dependency_overrides[deps.get_doctor_service] = lambda: mock_svc

        resp = await client.post(
            "/api/v1/doctors/",
            json={
                "name": "dr. Sari",
                "nip": "198001012005011001",
                "sip": "SIP-001",
                "specialization": "general",
            },
        )
        assert resp.status_code == 201
        assert mock_svc.create.call_args.kwargs["status"] == "active"

    @pytest.mark.asyncio
    async def test_duplicate_nip(self, app, client):
        mock_svc = AsyncMock()
        mock_svc.update = AsyncMock(side_effect=ConflictError("NIP already exists"))
        app.dependency_overrides[deps.get_doctor_service] = lambda: mock_svc

        resp = await client.put(f"/api/v1/doctors/{uuid.uuid4()}", json={"nip": "1"})
        _assert_error(resp, 409, "CONFLICT")

    @pytest.mark.parametrize(
        "path",
        ["nurses", "medicines", "appointments", "services", "insurances", "files"],
    )
    async def test_routes_mounted(self, client, path):
        resp = await client.get(f"/api/v1/{path}/not-a-uuid")
        _assert_error(resp, 400, "BAD_REQUEST")


# ---------------------------------------------------------------------------
# Files
# ---------------------------------------------------------------------------


class TestFilesRouter:
    @pytest.mark.asyncio
    async def test_upload(self, app, client):
        mock_svc = AsyncMock()
        mock_svc.upload = AsyncMock(return_value=_file())
        app.dependency_overrides[deps.get_file_service] = lambda: mock_svc

        resp = await client.post(
            "/api/v1/files/",
            files={"file": ("scan.pdf", b"%PDF", "application/pdf")},
            data={"uploader": "dr-sari"},
        )
        assert resp.status_code == 201
        assert resp.json()["data"]["extension"] == "pdf"
        kwargs = mock_svc.upload.call_args.kwargs
        assert kwargs == {"filename": "scan.pdf", "content": b"%PDF", "uploader": "dr-sari"}

    @pytest.mark.asyncio
    async def test_upload_default_uploader(self, app, client):
        mock_svc = AsyncMock()
        mock_svc.upload = AsyncMock(return_value=_file())
        app.dependency_overrides[deps.get_file_service] = lambda: mock_svc

        resp = await client.post(
            "/api/v1/files/", files={"file": ("scan.pdf", b"%PDF", "application/pdf")}
        )
        assert resp.status_code == 201
        assert mock_svc.upload.call_args.kwargs["uploader"] == "unknown"

    @pytest.mark.asyncio
    async def test_upload_missing_file_part(self, app, client):
        mock_svc = AsyncMock()
        app.dependency_overrides[deps.get_file_service] = lambda: mock_svc

        resp = await client.post("/api/v1/files/", data={"uploader": "x"})
        _assert_error(resp, 400, "BAD_REQUEST")

    @pytest.mark.asyncio
    async def test_upload_rejected(self, app, client):
        mock_svc = AsyncMock()
        mock_svc.upload = AsyncMock(side_effect=ValidationError("File size cannot be empty"))
        app.dependency_overrides[deps.get_file_service] = lambda: mock_svc

        resp = await client.post(
            "/api/v1/files/", files={"file": ("scan.pdf", b"", "application/pdf")}
        )
        body = _assert_error(resp, 400, "BAD_REQUEST")
        assert body["error"]["details"] == "File size cannot be empty"

    @pytest.mark.asyncio
    async def test_upload_bucket_failure(self, app, client):
        mock_svc = AsyncMock()
        mock_svc.upload = AsyncMock(side_effect=StorageError("Failed to upload to S3: boom"))
        app.dependency_overrides[deps.get_file_service] = lambda: mock_svc

        resp = await client.post(
            "/api/v1/files/", files={"file": ("scan.pdf", b"%PDF", "application/pdf")}
        )
        _assert_error(resp, 500, "INTERNAL_ERROR")

    @pytest.mark.asyncio
    async def test_delete(self, app, client):
        mock_svc = AsyncMock()
        mock_svc.delete = AsyncMock(return_value=None)
        app.dependency_overrides[deps.get_file_service] = lambda: mock_svc

        resp = await client.delete(f"/api/v1/files/{uuid.uuid4()}")
        assert resp.status_code == 204
        assert resp.content == b""
