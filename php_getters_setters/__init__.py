# php_getters_setters/__init__.py

__version__ = "0.1.0"

from .property import Property
from .property_parser import PropertyParser, from_position
from .template_renderer import TemplateRenderer, render_getter, render_setter
from .configuration import Configuration
from .editor import EditorContext, EditorHost, Insertion
from .resolver import AccessorKind, Resolver, run_command
from .exceptions import (
    GettersSettersError,
    NotApplicableDocument,
    PropertyNotFound,
    MissingTemplate,
    InsertionPointNotFound,
    EditApplicationFailed,
)

__all__ = [
    'Property',
    'PropertyParser',
    'from_position',
    'TemplateRenderer',
    'render_getter',
    'render_setter',
    'Configuration',
    'EditorContext',
    'EditorHost',
    'Insertion',
    'AccessorKind',
    'Resolver',
    'run_command',
    'GettersSettersError',
    'NotApplicableDocument',
    'PropertyNotFound',
    'MissingTemplate',
    'InsertionPointNotFound',
    'EditApplicationFailed',
]
