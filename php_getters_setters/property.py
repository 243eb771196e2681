from dataclasses import dataclass


@dataclass(frozen=True)
class Property:
    """A class property recovered from a single declaration line.

    Only what the source states is stored here. Fallback text ("mixed",
    "Get the value of ...") is chosen by the renderer so the same property
    can be rendered as both a getter and a setter.
    """

    name: str
    type_hint: str | None = None
    type: str | None = None
    description: str | None = None
    indentation: str = ""

    def __post_init__(self):
        if not self.name:
            raise ValueError("Property name must not be empty")

    def method_name(self, prefix: str) -> str:
        """Build an accessor name, e.g. 'get' + 'age' -> 'getAge'."""
        return prefix + self.name[0].upper() + self.name[1:]
