import logging
from .base_client import BaseClient, LookupResult, settings

logger = logging.getLogger(__name__)

class ImageSearchApi(BaseClient):
    """
    Cliente para la API de búsqueda de imágenes (formato Pixabay).
    Responsabilidad única: buscar imágenes por texto.
    """

    RESULTS_PER_PAGE = 3

    async def search_images(self, query: str) -> LookupResult:
        """
        Busca imágenes.

        Args:
            query: Término de búsqueda

        Returns:
            LookupResult: `data["hits"]` con `pageURL` y `previewURL` por resultado
        """
        params = {
            "key": settings.IMAGE_API_KEY,
            "q": query,
            "per_page": str(self.RESULTS_PER_PAGE)
        }
        result = await self._get_json(settings.IMAGE_ENDPOINT, params)

        if result.ok:
            hits = result.data.get("hits") or []
            logger.debug(f"[IMAGE] {len(hits)} imágenes para '{query}'")
        else:
            logger.warning(f"[IMAGE] Búsqueda fallida para '{query}': {result.error}")
        return result
