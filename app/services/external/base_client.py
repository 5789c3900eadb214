import httpx
import logging
from typing import Dict, Any, Optional
from pydantic import BaseModel, Field
from app.core.config import get_settings

logger = logging.getLogger(__name__)
settings = get_settings()

class ExternalApiError(Exception):
    """Error al llamar a una API externa."""
    pass

class LookupResult(BaseModel):
    """
    Resultado de una consulta de enriquecimiento.
    `ok=False` significa que se continúa con `data` vacío.
    """
    ok: bool
    data: Dict[str, Any] = Field(default_factory=dict)
    status_code: Optional[int] = None
    error: Optional[str] = None

class BaseClient:
    """
    Cliente HTTP base para las APIs de enriquecimiento.
    Responsabilidad única: configuración HTTP y manejo de errores.
    """

    def __init__(self, client: Optional[httpx.AsyncClient] = None):
        # Cliente HTTP reutilizable con configuración optimizada
        self.client = client or httpx.AsyncClient(
            timeout=httpx.Timeout(settings.HTTP_TIMEOUT_SECONDS, connect=5.0),
            limits=httpx.Limits(max_keepalive_connections=5, max_connections=10)
        )

    async def _make_request(self, method: str, url: str, **kwargs) -> httpx.Response:
        """
        Método centralizado para hacer requests con manejo de errores.

        Args:
            method: Método HTTP (GET, POST)
            url: URL absoluta del endpoint
            **kwargs: Argumentos adicionales para httpx

        Returns:
            httpx.Response: Respuesta del servidor

        Raises:
            ExternalApiError: Error de comunicación con la API
        """
        try:
            logger.debug(f"[API] {method} {url}")

            response = await self.client.request(method, url, **kwargs)
            logger.debug(f"[API] {method} {url} -> {response.status_code}")

            if response.status_code >= 400:
                logger.error(f"[API] Error {response.status_code}: {response.text}")

            return response

        except httpx.TimeoutException:
            logger.error(f"[API] Timeout en {method} {url}")
            raise ExternalApiError("Timeout al comunicarse con la API")
        except httpx.RequestError as e:
            logger.error(f"[API] Error de conexión en {method} {url}: {e}")
            raise ExternalApiError(f"Error de conexión: {str(e)}")

    async def _get_json(self, url: str, params: Dict[str, Any]) -> LookupResult:
        """
        Hace un GET y devuelve el cuerpo JSON como LookupResult.
        Nunca lanza: cualquier falla queda en `error` con `data` vacío.
        """
        try:
            response = await self._make_request("GET", url, params=params)
        except ExternalApiError as e:
            return LookupResult(ok=False, error=str(e))

        if response.status_code >= 400:
            return LookupResult(ok=False, status_code=response.status_code, error=response.text)

        try:
            body = response.json()
        except ValueError as e:
            logger.error(f"[API] Respuesta no es JSON en GET {url}: {e}")
            return LookupResult(ok=False, status_code=response.status_code, error="invalid_json")

        if not isinstance(body, dict):
            return LookupResult(ok=False, status_code=response.status_code, error="unexpected_shape")

        return LookupResult(ok=True, data=body, status_code=response.status_code)

    async def close(self):
        """Cierra el cliente HTTP."""
        try:
            await self.client.aclose()
            logger.debug("[API] Cliente HTTP cerrado")
        except Exception as e:
            logger.error(f"[API] Error cerrando cliente: {e}")
