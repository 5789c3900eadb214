"""
Módulo de componentes compartidos para el bot de Messenger.
Contiene helpers reutilizables para diferentes partes de la aplicación.
"""

from .messenger import (
    MessengerQuickReplies,
    MessengerTemplates,
    MessengerHelper,
    create_text,
    create_quick_replies,
    create_generic_template
)

__all__ = [
    'MessengerQuickReplies',
    'MessengerTemplates',
    'MessengerHelper',
    'create_text',
    'create_quick_replies',
    'create_generic_template'
]
