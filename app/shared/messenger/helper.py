from typing import Dict

class MessengerHelper:
    """
    Helpers para inspeccionar y construir mensajes simples de Messenger.
    """

    @staticmethod
    def create_text_response(text: str) -> Dict:
        """Mensaje de texto plano, sin ninguna transformación."""
        return {"text": text}

    @staticmethod
    def describe(message: Dict) -> str:
        """
        Devuelve el tipo de un objeto `message` para logging.

        Returns:
            str: "quick_replies", "template:<tipo>", "text" o "unknown"
        """
        if "quick_replies" in message:
            return "quick_replies"
        attachment = message.get("attachment")
        if isinstance(attachment, dict):
            template_type = attachment.get("payload", {}).get("template_type", "unknown")
            return f"template:{template_type}"
        if "text" in message:
            return "text"
        return "unknown"
