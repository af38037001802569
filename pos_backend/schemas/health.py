"""
Pydantic schemas for service status.
"""
from datetime import datetime
from pydantic import BaseModel


class HealthCheck(BaseModel):
    """Health check response."""
    status: str  # 'healthy', 'degraded'
    version: str
    database: bool
    timestamp: datetime
