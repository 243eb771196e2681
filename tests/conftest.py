"""Pytest configuration and fixtures."""

import logging

import pytest

from php_getters_setters.editor import EditorContext

USER_CLASS = """<?php

namespace App\\Model;

class User
{
    /**
     * The user's login name
     *
     * @var string
     */
    private $username;

    protected int $age = 18;

    public static ?Address $address = null;

    private $notes = [];

    public function __construct()
    {
        $this->notes = [];
    }
}
"""


class FakeHost:
    """Editor host that records every call."""

    def __init__(self, accept: bool = True):
        self.accept = accept
        self.inserted: list[tuple[int, str]] = []
        self.cursor_line: int | None = None
        self.errors: list[str] = []
        self.infos: list[str] = []

    def insert_text(self, line: int, text: str) -> bool:
        if self.accept:
            self.inserted.append((line, text))
        return self.accept

    def go_to_line(self, line: int) -> None:
        self.cursor_line = line

    def show_error_message(self, message: str) -> None:
        self.errors.append(message)

    def show_information_message(self, message: str) -> None:
        self.infos.append(message)


@pytest.fixture
def user_lines() -> list[str]:
    """Lines of a small PHP class."""
    return USER_CLASS.splitlines()


@pytest.fixture
def user_context(user_lines):
    """Factory for a context over the sample class with cursors on the given lines."""
    def make(*selections: int, language_id: str = "php") -> EditorContext:
        return EditorContext(user_lines, language_id, list(selections))
    return make


@pytest.fixture
def host() -> FakeHost:
    return FakeHost()


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo handlers installed by setup_logging."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
