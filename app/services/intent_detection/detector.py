import logging
from enum import Enum, auto
from typing import Tuple

from app.models.message import MessagingEvent

logger = logging.getLogger(__name__)

class Intent(Enum):
    """Enum para los tipos de evento de Messenger."""
    AUTH_OPTIN = auto()
    INCOMING_MESSAGE = auto()
    DELIVERY_RECEIPT = auto()
    POSTBACK = auto()
    READ_RECEIPT = auto()
    ACCOUNT_LINKING = auto()
    UNKNOWN = auto()

class EventClassifier:
    """
    Clasifica un evento de Messenger según el sub-payload que trae.
    """

    # El orden importa: si un evento trae varias llaves gana la primera
    PRIORITY: Tuple[Tuple[str, Intent], ...] = (
        ("optin", Intent.AUTH_OPTIN),
        ("message", Intent.INCOMING_MESSAGE),
        ("delivery", Intent.DELIVERY_RECEIPT),
        ("postback", Intent.POSTBACK),
        ("read", Intent.READ_RECEIPT),
        ("account_linking", Intent.ACCOUNT_LINKING),
    )

    def classify(self, event: MessagingEvent) -> Intent:
        """
        Detecta la intención del evento.

        Args:
            event: Evento individual del arreglo `messaging`

        Returns:
            Intent: La primera coincidencia en orden de prioridad, o UNKNOWN
        """
        for field_name, intent in self.PRIORITY:
            if event.has_payload(field_name):
                logger.debug(f"[INTENT] Evento clasificado como {intent.name}")
                return intent

        logger.info("[INTENT] Webhook received unknown event")
        return Intent.UNKNOWN
