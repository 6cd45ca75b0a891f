from pydantic import BaseModel


class HealthStatus(BaseModel):
    name: str
    status: str
    version: str
