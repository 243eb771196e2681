import logging
import pathlib
import sys

from .editor import EditorContext
from .exceptions import EditApplicationFailed

logger = logging.getLogger(__name__)

PHP_SUFFIXES = (".php", ".phtml", ".inc")


class FileWriter:
    """Editor host backed by a PHP file on disk."""

    def __init__(self, path: str | pathlib.Path, dry_run: bool = False):
        self.path = pathlib.Path(path)
        self.dry_run = dry_run
        self.cursor_line: int | None = None
        self.errors: list[str] = []

    @property
    def language_id(self) -> str:
        suffix = self.path.suffix.lower()
        return "php" if suffix in PHP_SUFFIXES else suffix.lstrip(".")

    def _read(self) -> str:
        try:
            with open(self.path, 'r', encoding='utf-8', newline='') as f:
                return f.read()
        except OSError as e:
            raise EditApplicationFailed(f"Could not read {self.path}: {e}") from e

    def context(self, selections: list[int]) -> EditorContext:
        """Build an editor context for the file with cursors on the given lines."""
        return EditorContext(
            lines=self._read().splitlines(),
            language_id=self.language_id,
            selections=list(selections),
            uri=self.path.resolve().as_uri(),
        )

    def insert_text(self, line: int, text: str) -> bool:
        """Insert text above the given line, keeping the file's line endings."""
        content = self._read()
        lines = content.splitlines(keepends=True)

        if line > len(lines):
            raise EditApplicationFailed(f"Line {line} is past the end of {self.path}")

        if "\r\n" in content:
            text = text.replace("\n", "\r\n")

        if self.dry_run:
            sys.stdout.write(text)
            return True

        new_content = "".join(lines[:line]) + text + "".join(lines[line:])
        try:
            with open(self.path, 'w', encoding='utf-8', newline='') as f:
                f.write(new_content)
        except OSError as e:
            raise EditApplicationFailed(f"Could not write {self.path}: {e}") from e

        print(f'Accessors generated and saved to {self.path}')
        return True

    def go_to_line(self, line: int):
        self.cursor_line = line
        logger.info("Cursor moved to line %d", line + 1)

    def show_error_message(self, message: str):
        self.errors.append(message)
        print(message, file=sys.stderr)

    def show_information_message(self, message: str):
        print(message)
