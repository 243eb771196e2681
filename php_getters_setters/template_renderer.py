import logging

from .configuration import Configuration
from .property import Property
from .templates import GETTER_TEMPLATE, SETTER_TEMPLATE

logger = logging.getLogger(__name__)

DEFAULT_TYPE = "mixed"


def compile_template(template: str, mapping: dict[str, str]) -> str:
    """Replace each `%key%` marker with its value."""
    for key, value in mapping.items():
        template = template.replace(f"%{key}%", value)
    return template


def indent(text: str, indentation: str) -> str:
    """Prefix every non-empty line; empty lines stay empty."""
    return "\n".join(
        indentation + line if line else ""
        for line in text.split("\n")
    )


class TemplateRenderer:
    """Fills the getter and setter templates for a property."""

    def __init__(self, config: Configuration | None = None):
        self.config = config or Configuration()

    def render_getter(self, prop: Property) -> str:
        mapping = {
            "description": prop.description or f"Get the value of {prop.name}",
            "type": prop.type or DEFAULT_TYPE,
            "getter_name": prop.method_name("get"),
            "name": prop.name,
        }
        spaces_after_return = self.config.spaces("spacesAfterReturn")

        text = (
            compile_template(GETTER_TEMPLATE, mapping)
            .replace("@return ", "@return" + spaces_after_return, 1)
        )
        logger.debug("Rendered getter %s", mapping["getter_name"])
        return indent(text, prop.indentation)

    def render_setter(self, prop: Property) -> str:
        mapping = {
            "description": prop.description or f"Set the value of {prop.name}",
            "setter_name": prop.method_name("set"),
            "type_hint": f"{prop.type_hint} " if prop.type_hint else "",
            "name": prop.name,
        }
        param_type = prop.type or DEFAULT_TYPE
        spaces_after_param = self.config.spaces("spacesAfterParam")
        spaces_after_param_var = self.config.spaces("spacesAfterParamVar")
        spaces_after_return = self.config.spaces("spacesAfterReturn")

        text = (
            compile_template(SETTER_TEMPLATE, mapping)
            .replace("@param type ", "@param " + param_type + spaces_after_param_var, 1)
            .replace("@param ", "@param" + spaces_after_param, 1)
            .replace("@return ", "@return" + spaces_after_return, 1)
        )
        logger.debug("Rendered setter %s", mapping["setter_name"])
        return indent(text, prop.indentation)


def render_getter(prop: Property, config: Configuration | None = None) -> str:
    return TemplateRenderer(config).render_getter(prop)


def render_setter(prop: Property, config: Configuration | None = None) -> str:
    return TemplateRenderer(config).render_setter(prop)
