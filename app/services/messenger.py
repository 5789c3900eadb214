import httpx, logging
from typing import Dict, Any, Optional
from pydantic import BaseModel
from app.core.config import get_settings
from app.shared.messenger import MessengerHelper
logger = logging.getLogger(__name__)
settings = get_settings()

class DeliveryResult(BaseModel):
    """Resultado de un envío a la Send API. Nunca se propaga al webhook."""
    status_code: Optional[int] = None
    response: str = ""
    error: Optional[str] = None

    @property
    def delivered(self) -> bool:
        return self.error is None and self.status_code is not None and self.status_code < 400

class MessengerClient:
    """
    Encapsula las llamadas a la Send API de Messenger.
    Responsabilidad única: enviar mensajes salientes.
    """
    def __init__(self, client: Optional[httpx.AsyncClient] = None):
        self.url = settings.MESSENGER_POST_URL
        self.params = {"access_token": settings.PAGE_ACCESS_TOKEN}
        self.headers = {
            "Content-Type": "application/json"
        }
        self.client = client or httpx.AsyncClient(
            timeout=httpx.Timeout(settings.HTTP_TIMEOUT_SECONDS, connect=5.0)
        )

    @staticmethod
    def build_envelope(recipient_id: str, message: Dict[str, Any]) -> Dict[str, Any]:
        """Envelope estándar de la Send API, igual para cualquier tipo de mensaje."""
        return {
            "recipient": {"id": recipient_id},
            "message": message
        }

    async def send_message(self, recipient_id: str, message: Dict[str, Any]) -> DeliveryResult:
        """
        Envía un objeto `message` al usuario.

        Args:
            recipient_id: PSID del destinatario
            message: Objeto `message` (texto, quick replies o template)

        Returns:
            DeliveryResult: status, cuerpo de respuesta y error, si hubo
        """
        payload = self.build_envelope(recipient_id, message)
        logger.debug(f"[MESSENGER] Enviando {MessengerHelper.describe(message)} a {recipient_id}")

        try:
            r = await self.client.post(self.url, params=self.params, headers=self.headers, json=payload)
            result = DeliveryResult(status_code=r.status_code, response=r.text)
        except httpx.HTTPError as exc:
            # Sin reintentos: se registra y se sigue
            result = DeliveryResult(error=str(exc) or exc.__class__.__name__)

        logger.info(f"[MESSENGER] Request sent - status: {result.status_code}, response: {result.response}, err: {result.error}")
        if result.status_code is not None and result.status_code >= 400:
            logger.error("Messenger %s – %s", result.status_code, result.response)
        return result

    async def close(self):
        """Cierra el cliente HTTP."""
        await self.client.aclose()
