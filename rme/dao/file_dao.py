"""FileDAO — files table operations."""

from rme.dao.base import BaseDAO
from rme.models.file import File


class FileDAO(BaseDAO[File]):
    model = File
