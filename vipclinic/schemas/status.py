from typing import Literal

from pydantic import BaseModel


class RootResponse(BaseModel):
    success: bool = True
    message: str
    timestamp: str
    database: str


class HealthResponse(BaseModel):
    status: Literal["healthy", "degraded"]
    service: str
    database: Literal["connected", "disconnected"]
    timestamp: str
