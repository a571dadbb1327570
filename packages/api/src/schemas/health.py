# This project was developed with assistance from AI tools.
"""Health and service info schemas."""

from datetime import datetime

from pydantic import BaseModel


class HealthStatus(BaseModel):
    status: str
    timestamp: datetime
    version: str
    environment: str


class ServiceInfo(BaseModel):
    """Public description of the API surface."""

    name: str
    version: str
    description: str
    endpoints: dict[str, str]
    features: list[str]
