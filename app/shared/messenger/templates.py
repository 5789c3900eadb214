import logging
from typing import List, Dict, Optional

logger = logging.getLogger(__name__)

class MessengerTemplates:
    """
    Factory para crear templates estructurados de Messenger.
    Responsabilidad única: generar attachments de tipo template para la Send API.
    """

    MAX_ELEMENTS = 10         # Messenger limita a 10 elementos por generic template
    MAX_BUTTONS = 3           # Máximo 3 botones por elemento
    MAX_BUTTON_TITLE_LENGTH = 20

    @staticmethod
    def create_generic_template(elements: List[Dict]) -> Dict:
        """
        Envuelve una lista de elementos en un generic template.

        Una lista vacía es válida: la Send API decide qué hacer con ella.
        Si llegan más de MAX_ELEMENTS se envían solo los primeros.
        """
        if len(elements) > MessengerTemplates.MAX_ELEMENTS:
            logger.warning(
                f"[TEMPLATES] {len(elements)} elementos, Messenger admite {MessengerTemplates.MAX_ELEMENTS}; "
                f"se descartan {len(elements) - MessengerTemplates.MAX_ELEMENTS}"
            )
        return {
            "attachment": {
                "type": "template",
                "payload": {
                    "template_type": "generic",
                    "elements": list(elements[:MessengerTemplates.MAX_ELEMENTS])
                }
            }
        }

    @staticmethod
    def create_element(
        title: str,
        item_url: Optional[str] = None,
        image_url: Optional[str] = None,
        buttons: Optional[List[Dict]] = None
    ) -> Dict:
        """
        Crea un elemento de generic template.

        Args:
            title: Título del elemento
            item_url: URL que se abre al tocar el elemento
            image_url: URL de la imagen del elemento
            buttons: Botones ya construidos con create_web_url_button

        Raises:
            ValueError: Si hay más de 3 botones
        """
        element = {"title": title}
        if item_url is not None:
            element["item_url"] = item_url
        if image_url is not None:
            element["image_url"] = image_url
        if buttons:
            if len(buttons) > MessengerTemplates.MAX_BUTTONS:
                raise ValueError(f"Messenger permite máximo {MessengerTemplates.MAX_BUTTONS} botones, recibidos: {len(buttons)}")
            element["buttons"] = buttons
        return element

    @staticmethod
    def create_web_url_button(url: str, title: str) -> Dict:
        """Crea un botón que abre una URL."""
        return {
            "type": "web_url",
            "url": url,
            "title": title[:MessengerTemplates.MAX_BUTTON_TITLE_LENGTH]
        }
