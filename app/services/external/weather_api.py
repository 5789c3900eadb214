import logging
from .base_client import BaseClient, LookupResult, settings

logger = logging.getLogger(__name__)

class WeatherApi(BaseClient):
    """
    Cliente para la API de clima (formato OpenWeatherMap).
    Responsabilidad única: consultar el clima actual de una ciudad.
    """

    async def get_current_weather(self, city: str) -> LookupResult:
        """
        Consulta el clima actual.

        Args:
            city: Nombre de la ciudad, tal como lo escribió el usuario

        Returns:
            LookupResult: `data` trae `weather[0].main` y `name` si todo salió bien
        """
        params = {
            "APPID": settings.WEATHER_API_KEY,
            "q": city
        }
        result = await self._get_json(settings.WEATHER_ENDPOINT, params)

        if result.ok:
            logger.debug(f"[WEATHER] Clima obtenido para '{city}'")
        else:
            logger.warning(f"[WEATHER] Sin datos de clima para '{city}': {result.error}")
        return result
