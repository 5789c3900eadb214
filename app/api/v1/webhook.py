from fastapi import APIRouter, Query, Request, Response, status
from fastapi.responses import PlainTextResponse
from app.core.config import get_settings
from app.models.message import WebhookPayload
from app.services.conversation import EventProcessor
import logging

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/webhook")
settings = get_settings()

# Instancia global del procesador de eventos
event_processor = EventProcessor()

# ============================================================================
# ENDPOINTS PRINCIPALES
# ============================================================================

@router.get("")
async def verify_webhook(
    hub_mode: str = Query("", alias="hub.mode"),
    hub_challenge: str = Query("", alias="hub.challenge"),
    hub_verify_token: str = Query("", alias="hub.verify_token"),
):
    """Verifica la suscripción del webhook de Messenger."""
    if hub_mode == "subscribe" and hub_verify_token == settings.VERIFY_TOKEN:
        return PlainTextResponse(content=hub_challenge, status_code=status.HTTP_200_OK)

    logger.error(f"[WEBHOOK] Validation failed - verify_token: '{hub_verify_token}'")
    return Response(status_code=status.HTTP_403_FORBIDDEN)


@router.post("")
async def receive_update(request: Request):
    """
    Endpoint principal para recibir eventos de Messenger.
    Responde 200 siempre que el objeto sea "page", sin importar el resultado del envío.
    """
    body = await _read_json(request)
    if not isinstance(body, dict) or body.get("object") != "page":
        return Response(status_code=status.HTTP_400_BAD_REQUEST)

    try:
        await event_processor.process_payload(WebhookPayload.model_validate(body))
    except Exception as e:
        # El webhook siempre se confirma para que Messenger no lo reintente
        logger.error(f"[WEBHOOK] Error procesando webhook: {e}", exc_info=True)

    return Response(status_code=status.HTTP_200_OK)

# ============================================================================
# FUNCIONES PRIVADAS
# ============================================================================

async def _read_json(request: Request):
    """Decodifica el cuerpo una sola vez; None si no es JSON."""
    try:
        return await request.json()
    except ValueError as e:
        logger.warning(f"[WEBHOOK] Payload no reconocido: {e}")
        return None
