"""Format checks for identifiers and uploads."""

from __future__ import annotations

from rme.services import ValidationError

MAX_UPLOAD_BYTES = 256 * 1024
ALLOWED_EXTENSIONS = frozenset(
    {"pdf", "jpg", "jpeg", "png", "gif", "bmp", "webp", "xlsx", "xls", "csv"}
)


def validate_nik(nik: str) -> None:
    """NIK (national ID number): exactly 16 ASCII digits."""
    if len(nik) != 16:
        raise ValidationError("NIK must be exactly 16 characters")
    if not (nik.isascii() and nik.isdigit()):
        raise ValidationError("NIK must contain only digits")


def validate_nip(nip: str) -> None:
    """NIP (staff registration number): non-empty, digits only."""
    if not nip:
        raise ValidationError("NIP cannot be empty")
    if not (nip.isascii() and nip.isdigit()):
        raise ValidationError("NIP must contain only digits")


def file_extension(filename: str) -> str:
    return filename.rsplit(".", 1)[-1].lower() if "." in filename else ""


def validate_upload(filename: str, size: int) -> None:
    if size == 0:
        raise ValidationError("File size cannot be empty")
    if size > MAX_UPLOAD_BYTES:
        raise ValidationError(f"File size exceeds maximum of {MAX_UPLOAD_BYTES // 1024} KB")
    if file_extension(filename) not in ALLOWED_EXTENSIONS:
        raise ValidationError(
            "File type not allowed. Allowed: PDF, Images (JPG, PNG, GIF, BMP, WebP), "
            "Excel (XLSX, XLS), CSV"
        )
