"""User-facing messages, prefixed with the tool name."""

import re

PREFIX = "phpGettersSetters"

# Codicon markup such as "$(alert)  " is meaningless outside the editor's status bar
_CODICON = re.compile(r"\$\(.+?\)\s\s")


def _clean(message: str) -> str:
    return _CODICON.sub("", message, count=1)


def format_error(message: str) -> str:
    return f"{PREFIX} error: {_clean(message)}"


def format_info(message: str) -> str:
    return f"{PREFIX} info: {_clean(message)}"


class Messenger:
    """Sends formatted messages to an editor host."""

    def __init__(self, host):
        self.host = host

    def error(self, message: str):
        self.host.show_error_message(format_error(message))

    def info(self, message: str):
        self.host.show_information_message(format_info(message))
