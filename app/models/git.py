from pydantic import BaseModel, Field, field_validator
from app.models.message import as_dict, as_string

class Repository(BaseModel):
    name: str = ""
    url: str = ""

    @field_validator("name", "url", mode="before")
    @classmethod
    def coerce_strings(cls, v):
        return as_string(v)

class Pusher(BaseModel):
    name: str = ""

    @field_validator("name", mode="before")
    @classmethod
    def coerce_name(cls, v):
        return as_string(v)

class GitPushPayload(BaseModel):
    """Notificación de push del proveedor de git (solo los campos que usamos)."""
    repository: Repository = Field(default_factory=Repository)
    pusher: Pusher = Field(default_factory=Pusher)

    @field_validator("repository", "pusher", mode="before")
    @classmethod
    def coerce_objects(cls, v):
        return as_dict(v)
