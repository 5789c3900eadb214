"""
Módulo para generar objetos `message` de la Send API de Messenger.
Automatiza la creación de quick replies y templates respetando los límites de la API.
"""

from .quick_replies import MessengerQuickReplies
from .templates import MessengerTemplates
from .helper import MessengerHelper

# Exports principales para uso directo
__all__ = [
    'MessengerQuickReplies',
    'MessengerTemplates',
    'MessengerHelper'
]

# Funciones de conveniencia para importación rápida
create_text = MessengerHelper.create_text_response
create_quick_replies = MessengerQuickReplies.create_simple_quick_replies
create_generic_template = MessengerTemplates.create_generic_template
