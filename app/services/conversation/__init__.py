"""
Módulo de procesamiento de conversaciones para el bot de Messenger.

"""

# Importación principal usada por el webhook
from .event_processor import EventProcessor

# Componentes internos (para testing o uso avanzado)
from .reply_composer import ReplyComposer, ComposedReply, LEGAL_PROCESS_OPTIONS

__all__ = [
    # Clase principal - usada por webhook
    "EventProcessor",

    # Componentes internos - para testing/debugging
    "ReplyComposer",
    "ComposedReply",
    "LEGAL_PROCESS_OPTIONS"
]
