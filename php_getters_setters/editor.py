"""
The editor as seen by the commands: an explicit document-and-selection
context plus the host operations the commands call back into.
"""

from dataclasses import dataclass, field
from typing import Protocol


@dataclass(frozen=True)
class EditorContext:
    """Snapshot of the active document and the lines holding a cursor."""

    lines: list[str]
    language_id: str = "php"
    selections: list[int] = field(default_factory=lambda: [0])
    uri: str | None = None

    @classmethod
    def from_text(cls, text: str, selections: list[int], language_id: str = "php", uri: str | None = None):
        return cls(text.splitlines(), language_id, list(selections), uri)

    def ordered_selections(self) -> list[int]:
        """Selections in document order."""
        return sorted(self.selections)


@dataclass(frozen=True)
class Insertion:
    """Text to insert at column 0 of a line."""

    line: int
    text: str

    @property
    def redirect_line(self) -> int:
        """The line just above the closing brace once the text is in place."""
        return self.line + self.text.count("\n") - 1


class EditorHost(Protocol):
    """Operations provided by the editor that owns the document."""

    def insert_text(self, line: int, text: str) -> bool:
        """Insert text at column 0 of line; False or EditApplicationFailed if rejected."""
        ...

    def go_to_line(self, line: int) -> None:
        ...

    def show_error_message(self, message: str) -> None:
        ...

    def show_information_message(self, message: str) -> None:
        ...
