import logging
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel

from app.services.external import ExternalApis, LookupResult
from app.shared.messenger import MessengerHelper, MessengerQuickReplies, MessengerTemplates

logger = logging.getLogger(__name__)

# Procesos legales del menú de inicio, en orden de despliegue
LEGAL_PROCESS_OPTIONS: Tuple[Tuple[str, str], ...] = (
    ("Divorce", "DIVORCE_LEGAL_PROCESS"),
    ("Adoption", "ADOPTION_LEGAL_PROCESS"),
    ("Testament", "TESTAMENT_LEGAL_PROCESS"),
    ("Corruption", "CORRUPTION_LEGAL_PROCESS"),
    ("Other", "OTHER_LEGAL_PROCESS"),
)

START_COMMAND = "start"
WEATHER_PREFIX = "weather"
IMAGE_PREFIX = "image me"

START_PROMPT = "Pick a legal process I can help you with:"
WEATHER_TEMPLATE = "The weather for today in %s is %s"
IMAGE_ELEMENT_TITLE = "Image"

class ComposedReply(BaseModel):
    """
    Respuesta lista para enviar.

    - strategy: "start", "weather", "image" o "echo"
    - message: objeto `message` de la Send API
    - enrichment: resultado de la API externa, solo para weather/image
    """
    strategy: str
    message: Dict[str, Any]
    enrichment: Optional[LookupResult] = None

    @property
    def enriched(self) -> bool:
        return self.enrichment is not None and self.enrichment.ok

class ReplyComposer:
    """
    Responsabilidad única: construir la respuesta para un mensaje de texto.
    Las reglas se evalúan en orden y la primera que aplica gana.
    """

    def __init__(self, external_apis: ExternalApis = None):
        self.external_apis = external_apis or ExternalApis()

    async def compose(self, text: str) -> ComposedReply:
        """
        Elige la estrategia según el texto exacto del usuario (sin normalizar).

        Args:
            text: Texto recibido en `message.text`

        Returns:
            ComposedReply: Estrategia usada y objeto `message` a enviar
        """
        if text == START_COMMAND:
            return self._compose_start()
        if text.startswith(WEATHER_PREFIX):
            return await self._compose_weather(text)
        if text.startswith(IMAGE_PREFIX):
            return await self._compose_image(text)
        return self._compose_echo(text)

    # ==================== ESTRATEGIAS ====================

    def _compose_start(self) -> ComposedReply:
        message = MessengerQuickReplies.create_simple_quick_replies(START_PROMPT, LEGAL_PROCESS_OPTIONS)
        return ComposedReply(strategy="start", message=message)

    async def _compose_weather(self, text: str) -> ComposedReply:
        # Solo se soportan ciudades de una palabra
        city = _token(text, 1)
        result = await self.external_apis.get_current_weather(city)
        if not result.ok:
            logger.warning(f"[COMPOSER] Clima sin enriquecer para '{city}', se envía igual")

        message = MessengerHelper.create_text_response(build_weather_text(result.data))
        return ComposedReply(strategy="weather", message=message, enrichment=result)

    async def _compose_image(self, text: str) -> ComposedReply:
        query = _token(text, 2)
        result = await self.external_apis.search_images(query)
        if not result.ok:
            logger.warning(f"[COMPOSER] Búsqueda de imágenes sin resultados para '{query}', se envía igual")

        message = MessengerTemplates.create_generic_template(build_image_elements(result.data))
        return ComposedReply(strategy="image", message=message, enrichment=result)

    def _compose_echo(self, text: str) -> ComposedReply:
        return ComposedReply(strategy="echo", message=MessengerHelper.create_text_response(text))

# ==================== CONSTRUCCIÓN DE CONTENIDO ====================

def build_weather_text(weather_data: Dict[str, Any]) -> str:
    """Arma la frase de clima; los campos que falten quedan como cadena vacía."""
    conditions = weather_data.get("weather")
    condition = ""
    if isinstance(conditions, list) and conditions and isinstance(conditions[0], dict):
        condition = _string(conditions[0].get("main"))
    city = _string(weather_data.get("name"))
    return WEATHER_TEMPLATE % (city, condition)

def build_image_elements(image_data: Dict[str, Any]) -> List[Dict]:
    """
    Un elemento por resultado: item_url sale de `pageURL` e image_url de `previewURL`.
    """
    hits = image_data.get("hits")
    if not isinstance(hits, list):
        return []

    elements = []
    for hit in hits:
        # Un resultado malformado igual produce su elemento, con URLs vacías
        if not isinstance(hit, dict):
            hit = {}
        elements.append(MessengerTemplates.create_element(
            title=IMAGE_ELEMENT_TITLE,
            item_url=_string(hit.get("pageURL")),
            image_url=_string(hit.get("previewURL"))
        ))
    return elements

def _token(text: str, index: int) -> str:
    parts = text.split(" ")
    return parts[index] if len(parts) > index else ""

def _string(value: Any) -> str:
    return value if isinstance(value, str) else ""
