import logging
from typing import Dict, Optional

from app.core.config import get_settings
from app.models.git import GitPushPayload
from app.services.messenger import DeliveryResult, MessengerClient
from app.shared.messenger import MessengerTemplates

logger = logging.getLogger(__name__)
settings = get_settings()

class GitPushNotifier:
    """
    Avisa por Messenger cada vez que alguien hace push a un repositorio.
    """

    def __init__(self, messenger: Optional[MessengerClient] = None, recipient_id: Optional[str] = None):
        self.messenger = messenger or MessengerClient()
        self.recipient_id = recipient_id or settings.GIT_NOTIFY_RECIPIENT_ID

    @staticmethod
    def build_message(push: GitPushPayload) -> Dict:
        """Generic template con un elemento y un botón hacia el repositorio."""
        button = MessengerTemplates.create_web_url_button(push.repository.url, "View repo")
        element = MessengerTemplates.create_element(
            title=f"{push.pusher.name} has pushed to repo: {push.repository.name}",
            buttons=[button]
        )
        return MessengerTemplates.create_generic_template([element])

    async def notify(self, push: GitPushPayload) -> DeliveryResult:
        logger.info(f"[GIT] Push de '{push.pusher.name}' a '{push.repository.name}'")
        return await self.messenger.send_message(self.recipient_id, self.build_message(push))
