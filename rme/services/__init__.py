"""Service layer — business rules between the routers and the DAOs."""


class ServiceError(Exception):
    """Base service exception."""


class ValidationError(ServiceError):
    """Malformed or missing input (-> HTTP 400)."""


class NotFoundError(ServiceError):
    """No record with the requested id (-> HTTP 404)."""


class ConflictError(ServiceError):
    """Natural-key uniqueness violation (-> HTTP 409)."""


class StorageError(ServiceError):
    """Database or object-storage failure (-> HTTP 500)."""
