from typing import Optional
from datetime import datetime
from ninja import Schema


class DatabaseHealthOut(Schema):
    status: str
    database: str
    error: Optional[str] = None


class HealthOut(Schema):
    status: str
    timestamp: datetime
    version: str
    environment: str
    database: DatabaseHealthOut
