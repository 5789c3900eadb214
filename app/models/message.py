from pydantic import BaseModel, Field, field_validator
from typing import List, Any, Optional

# Los webhooks se leen "best effort": un campo con tipo inesperado
# se trata como ausente en lugar de rechazar todo el payload.

def as_string(value: Any) -> str:
    return value if isinstance(value, str) else ""

def as_dict(value: Any) -> Any:
    # Los modelos ya construidos pasan sin cambios
    return value if isinstance(value, (dict, BaseModel)) else {}

def as_list_of_dicts(value: Any) -> List[Any]:
    if not isinstance(value, list):
        return []
    return [as_dict(item) for item in value]

class Participant(BaseModel):
    id: str = ""

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v):
        return as_string(v)

class QuickReply(BaseModel):
    payload: str = ""

    @field_validator("payload", mode="before")
    @classmethod
    def coerce_payload(cls, v):
        return as_string(v)

class IncomingMessage(BaseModel):
    mid: Optional[str] = None
    text: str = ""                               # vacío para adjuntos o stickers
    quick_reply: Optional[QuickReply] = None

    @field_validator("mid", mode="before")
    @classmethod
    def coerce_mid(cls, v):
        return v if isinstance(v, str) else None

    @field_validator("text", mode="before")
    @classmethod
    def coerce_text(cls, v):
        return as_string(v)

    @field_validator("quick_reply", mode="before")
    @classmethod
    def coerce_quick_reply(cls, v):
        return v if isinstance(v, (dict, BaseModel)) else None

class MessagingEvent(BaseModel):
    sender: Participant = Field(default_factory=Participant)
    recipient: Participant = Field(default_factory=Participant)
    timestamp: Optional[int] = None

    # Sub-payloads mutuamente excluyentes; cuenta la presencia de la llave
    optin: Any = None
    message: Optional[IncomingMessage] = None
    delivery: Any = None
    postback: Any = None
    read: Any = None
    account_linking: Any = None

    @field_validator("sender", "recipient", "message", mode="before")
    @classmethod
    def coerce_objects(cls, v):
        return as_dict(v)

    @field_validator("timestamp", mode="before")
    @classmethod
    def coerce_timestamp(cls, v):
        if isinstance(v, bool) or not isinstance(v, int):
            return None
        return v

    def has_payload(self, name: str) -> bool:
        """True si el evento trajo la llave `name`, aunque venga vacía o con otro tipo."""
        return name in self.model_fields_set

class Entry(BaseModel):
    id: Optional[str] = None
    time: Optional[int] = None
    messaging: List[MessagingEvent] = Field(default_factory=list)

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v):
        return v if isinstance(v, str) else None

    @field_validator("time", mode="before")
    @classmethod
    def coerce_time(cls, v):
        if isinstance(v, bool) or not isinstance(v, int):
            return None
        return v

    @field_validator("messaging", mode="before")
    @classmethod
    def coerce_messaging(cls, v):
        # Un evento que no es objeto queda vacío y se clasifica como UNKNOWN
        return as_list_of_dicts(v)

class WebhookPayload(BaseModel):
    object: str = ""                             # "page" para Messenger
    entry: List[Entry] = Field(default_factory=list)

    @field_validator("object", mode="before")
    @classmethod
    def coerce_object(cls, v):
        return as_string(v)

    @field_validator("entry", mode="before")
    @classmethod
    def coerce_entry(cls, v):
        return as_list_of_dicts(v)
