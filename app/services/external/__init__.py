"""
Módulo de clientes externos para las APIs de enriquecimiento.
Proporciona una interfaz unificada para el compositor de respuestas.
"""

from .base_client import ExternalApiError, LookupResult
from .weather_api import WeatherApi
from .image_api import ImageSearchApi

class ExternalApis:
    """
    Interfaz unificada para todos los clientes de enriquecimiento.
    """

    def __init__(self, weather: WeatherApi = None, images: ImageSearchApi = None):
        self._weather = weather or WeatherApi()
        self._images = images or ImageSearchApi()

    async def get_current_weather(self, city: str) -> LookupResult:
        """Consulta el clima actual de una ciudad."""
        return await self._weather.get_current_weather(city)

    async def search_images(self, query: str) -> LookupResult:
        """Busca imágenes para un término."""
        return await self._images.search_images(query)

    async def close(self):
        """Cierra todos los clientes HTTP."""
        await self._weather.close()
        await self._images.close()

__all__ = [
    "ExternalApis",
    "ExternalApiError",
    "LookupResult",
    "WeatherApi",
    "ImageSearchApi"
]
