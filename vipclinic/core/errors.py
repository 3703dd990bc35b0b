from typing import Any, Dict, Optional

from fastapi import status


class ClinicError(Exception):
    """Base error rendered as ``{success: false, message, error?}``."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, error: Optional[str] = None):
        self.message = message
        self.error = error
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        content: Dict[str, Any] = {"success": False, "message": self.message}
        if self.error is not None:
            content["error"] = self.error
        return content


class InvalidRequestError(ClinicError):
    """Required request field missing; raised before any database access."""

    status_code = status.HTTP_400_BAD_REQUEST


class ConflictError(ClinicError):
    """A uniqueness constraint rejected the insert."""

    status_code = status.HTTP_409_CONFLICT


class InfrastructureError(ClinicError):
    """Connectivity, pool or unexpected database failure."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
