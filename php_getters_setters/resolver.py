"""
Accessor commands.
Parses the property at each selection, renders the templates and inserts
them above the class closing brace.
"""

import enum
import logging

from .configuration import Configuration
from .editor import EditorContext, EditorHost, Insertion
from .exceptions import (
    EditApplicationFailed,
    GettersSettersError,
    InsertionPointNotFound,
    MissingTemplate,
    NotApplicableDocument,
    PropertyNotFound,
)
from .messages import Messenger
from .property import Property
from .property_parser import PropertyParser
from .template_renderer import TemplateRenderer

logger = logging.getLogger(__name__)

LANGUAGE_ID = "php"


class AccessorKind(enum.Enum):
    GETTER = "getter"
    SETTER = "setter"
    BOTH = "both"


class Resolver:
    """Runs the insert commands against one editor context."""

    def __init__(self, context: EditorContext, config: Configuration | None = None):
        if context.language_id != LANGUAGE_ID:
            raise NotApplicableDocument("Not a PHP file.")

        self.context = context
        self.config = config or Configuration()
        self.renderer = TemplateRenderer(self.config)

    def closing_class_line(self) -> int | None:
        """The last line whose text starts with a closing brace."""
        lines = self.context.lines
        for line_number in range(len(lines) - 1, -1, -1):
            if lines[line_number].strip().startswith("}"):
                return line_number
        return None

    def insert_line(self) -> int | None:
        return self.closing_class_line()

    def render(self, prop: Property, kind: AccessorKind) -> str:
        if kind is AccessorKind.GETTER:
            return self.renderer.render_getter(prop)
        if kind is AccessorKind.SETTER:
            return self.renderer.render_setter(prop)
        return self.renderer.render_getter(prop) + self.renderer.render_setter(prop)

    def collect(self, kind: AccessorKind, messenger: Messenger) -> str:
        """
        Render every selection in document order.

        A selection without a property is reported and skipped; the others
        still contribute their templates.
        """
        content = ""
        for cursor_line in self.context.ordered_selections():
            try:
                prop = PropertyParser.from_position(self.context.lines, cursor_line)
            except PropertyNotFound as e:
                logger.warning("Skipping selection on line %d: %s", cursor_line, e)
                messenger.error(str(e))
                continue

            content += self.render(prop, kind)
        return content

    def build(self, kind: AccessorKind, messenger: Messenger) -> Insertion:
        content = self.collect(kind, messenger)
        if not content:
            raise MissingTemplate("Missing template to render.")

        line = self.insert_line()
        if line is None:
            raise InsertionPointNotFound("Unable to detect insert line for template.")

        return Insertion(line, content)

    def prepare(self, kind: AccessorKind, messenger: Messenger) -> Insertion | None:
        """Build the insertion, reporting and returning None if there is nothing to insert."""
        try:
            return self.build(kind, messenger)
        except (MissingTemplate, InsertionPointNotFound) as e:
            messenger.error(str(e))
            return None

    def run(self, kind: AccessorKind, host: EditorHost) -> bool:
        """Insert the accessors through the host. Returns True if the document changed."""
        messenger = Messenger(host)
        insertion = self.prepare(kind, messenger)
        if insertion is None:
            return False

        try:
            if not host.insert_text(insertion.line, insertion.text):
                raise EditApplicationFailed("the edit was rejected")
        except EditApplicationFailed as e:
            logger.warning("Edit failed: %s", e)
            messenger.error(f"Error generating functions: {e}")
            return False

        if self.config.redirect:
            host.go_to_line(insertion.redirect_line)
        return True

    def insert_getter(self, host: EditorHost) -> bool:
        return self.run(AccessorKind.GETTER, host)

    def insert_setter(self, host: EditorHost) -> bool:
        return self.run(AccessorKind.SETTER, host)

    def insert_getter_and_setter(self, host: EditorHost) -> bool:
        return self.run(AccessorKind.BOTH, host)


def run_command(
    kind: AccessorKind,
    context: EditorContext,
    host: EditorHost,
    config: Configuration | None = None,
) -> bool:
    """Run one command end to end; every error is reported to the host, none is raised."""
    try:
        resolver = Resolver(context, config)
    except GettersSettersError as e:
        Messenger(host).error(str(e))
        return False
    return resolver.run(kind, host)
