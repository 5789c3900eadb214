from typing import List, Dict, Sequence, Tuple

class MessengerQuickReplies:
    """
    Factory para crear quick replies de Messenger.
    Responsabilidad única: generar estructuras de quick replies válidas para la Send API.
    """

    MAX_QUICK_REPLIES = 13  # Messenger limita a 13 quick replies por mensaje
    MAX_TITLE_LENGTH = 20   # Máximo 20 caracteres para el título
    MAX_PAYLOAD_LENGTH = 1000

    @staticmethod
    def create_quick_replies_response(text: str, options: List[Dict]) -> Dict:
        """
        Crea un mensaje de texto con quick replies.

        Args:
            text: Texto del mensaje
            options: Lista de opciones con formato [{"title": "Opción 1", "payload": "OPCION_1"}, ...]

        Returns:
            Dict: Objeto `message` para la Send API

        Raises:
            ValueError: Si no hay opciones, hay más de 13 o faltan campos
        """
        if not options:
            raise ValueError("Debe proporcionar al menos una quick reply")

        if len(options) > MessengerQuickReplies.MAX_QUICK_REPLIES:
            raise ValueError(f"Messenger permite máximo {MessengerQuickReplies.MAX_QUICK_REPLIES} quick replies, recibidas: {len(options)}")

        validated_replies = []
        for opt in options:
            if not opt.get("title") or not opt.get("payload"):
                raise ValueError("Cada quick reply debe tener 'title' y 'payload'")

            validated_replies.append({
                "content_type": "text",
                "title": opt["title"][:MessengerQuickReplies.MAX_TITLE_LENGTH],
                "payload": opt["payload"][:MessengerQuickReplies.MAX_PAYLOAD_LENGTH]
            })

        return {
            "text": text,
            "quick_replies": validated_replies
        }

    @staticmethod
    def create_simple_quick_replies(text: str, items: Sequence[Tuple[str, str]]) -> Dict:
        """
        Crea quick replies de forma simplificada usando tuplas.

        Args:
            text: Texto del mensaje
            items: Secuencia de tuplas (title, payload); el orden se respeta

        Example:
            menu = create_simple_quick_replies(
                "Elige una opción:",
                [("Divorce", "DIVORCE_LEGAL_PROCESS"), ("Other", "OTHER_LEGAL_PROCESS")]
            )
        """
        options = [
            {"title": title, "payload": payload}
            for title, payload in items
        ]
        return MessengerQuickReplies.create_quick_replies_response(text, options)
