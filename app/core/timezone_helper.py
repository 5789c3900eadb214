import logging
from datetime import datetime
from typing import Optional
import pytz

from app.core.config import get_settings

logger = logging.getLogger(__name__)

APP_TZ = pytz.timezone(get_settings().APP_TIMEZONE)

class TimezoneHelper:
    """
    Helper para mostrar fechas de eventos en la zona horaria de la app.
    Responsabilidad única: conversiones de timestamps de Messenger a texto legible.
    """

    @staticmethod
    def get_local_now() -> datetime:
        """Obtiene la fecha y hora actual en la zona horaria configurada."""
        return datetime.now(APP_TZ)

    @staticmethod
    def format_event_timestamp(timestamp_ms: Optional[int]) -> str:
        """
        Convierte el timestamp de un evento de Messenger a texto.

        Args:
            timestamp_ms: Epoch en milisegundos, tal como lo envía Messenger

        Returns:
            str: Fecha formateada "19/10/2026 14:05:00 -05", o "sin fecha"
        """
        if not timestamp_ms:
            return "sin fecha"

        try:
            dt = datetime.fromtimestamp(timestamp_ms / 1000, tz=pytz.utc)
            return dt.astimezone(APP_TZ).strftime('%d/%m/%Y %H:%M:%S %Z')
        except (OverflowError, OSError, ValueError) as e:
            logger.warning(f"[TIMEZONE] Timestamp inválido {timestamp_ms}: {e}")
            return "sin fecha"
