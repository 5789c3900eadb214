import logging
from typing import Dict, Optional

from app.core.timezone_helper import TimezoneHelper
from app.models.message import MessagingEvent, WebhookPayload
from app.services.conversation.reply_composer import ReplyComposer
from app.services.intent_detection.detector import EventClassifier, Intent
from app.services.messenger import DeliveryResult, MessengerClient

logger = logging.getLogger(__name__)

class EventProcessor:
    """
    Responsabilidad única: Orquestar el procesamiento de eventos de Messenger.
    Recorre entries y eventos, clasifica cada uno y responde a los mensajes.
    """

    def __init__(
        self,
        composer: Optional[ReplyComposer] = None,
        messenger: Optional[MessengerClient] = None,
        classifier: Optional[EventClassifier] = None
    ):
        self.composer = composer or ReplyComposer()
        self.messenger = messenger or MessengerClient()
        self.classifier = classifier or EventClassifier()

    async def process_payload(self, payload: WebhookPayload) -> Dict[str, int]:
        """
        Procesa todos los eventos de un webhook.

        Un evento que falla se registra y no detiene a los demás.

        Returns:
            Dict[str, int]: {"events": total, "replies": mensajes respondidos, "errors": fallidos}
        """
        summary = {"events": 0, "replies": 0, "errors": 0}

        for entry in payload.entry:
            for event in entry.messaging:
                summary["events"] += 1
                try:
                    if await self.process_event(event) is not None:
                        summary["replies"] += 1
                except Exception as e:
                    summary["errors"] += 1
                    logger.error(f"[EVENTS] Error procesando evento de {event.sender.id}: {e}", exc_info=True)

        logger.debug(f"[EVENTS] Resumen: {summary}")
        return summary

    async def process_event(self, event: MessagingEvent) -> Optional[DeliveryResult]:
        """
        Procesa un evento individual.

        Returns:
            DeliveryResult si se envió una respuesta, None si el evento no requiere acción
        """
        intent = self.classifier.classify(event)

        if intent is Intent.INCOMING_MESSAGE:
            return await self._reply_to_message(event)

        if intent is not Intent.UNKNOWN:
            # optin, delivery, postback, read y account_linking aún no tienen flujo
            logger.info(f"[EVENTS] Evento {intent.name} de {event.sender.id} recibido, sin acción")
        return None

    async def _reply_to_message(self, event: MessagingEvent) -> DeliveryResult:
        sender_id = event.sender.id
        text = event.message.text if event.message else ""
        logger.info(
            f"[EVENTS] Message received - user: {sender_id}, message: '{text}', "
            f"fecha: {TimezoneHelper.format_event_timestamp(event.timestamp)}"
        )

        reply = await self.composer.compose(text)
        logger.debug(f"[EVENTS] Estrategia '{reply.strategy}' para {sender_id}")

        return await self.messenger.send_message(sender_id, reply.message)
