"""Language Server Protocol (LSP) server for php_getters_setters.

Exposes the accessor commands through `workspace/executeCommand` so any
LSP-capable editor can bind them:

- phpGettersSetters.insertGetter
- phpGettersSetters.insertSetter
- phpGettersSetters.insertGetterAndSetter

Each command takes one argument object::

    {"textDocument": {"uri": "file:///..."}, "selections": [12, 14]}

where selections are zero-based line numbers, LSP positions, or LSP
selections/ranges.

Usage:
    # Start server with stdio transport
    php-getters-setters lsp

    # Or programmatically
    from php_getters_setters.lsp_server import create_server
    server = create_server()
    server.start_io()
"""

from __future__ import annotations

import logging
from typing import Any

from lsprotocol import types as lsp
from pygls.exceptions import JsonRpcException
from pygls.lsp.server import LanguageServer

from . import __version__
from .configuration import SECTION, Configuration
from .editor import EditorContext, Insertion
from .exceptions import GettersSettersError
from .messages import Messenger
from .resolver import AccessorKind, Resolver

logger = logging.getLogger(__name__)

COMMAND_INSERT_GETTER = "phpGettersSetters.insertGetter"
COMMAND_INSERT_SETTER = "phpGettersSetters.insertSetter"
COMMAND_INSERT_GETTER_AND_SETTER = "phpGettersSetters.insertGetterAndSetter"

COMMANDS = {
    COMMAND_INSERT_GETTER: AccessorKind.GETTER,
    COMMAND_INSERT_SETTER: AccessorKind.SETTER,
    COMMAND_INSERT_GETTER_AND_SETTER: AccessorKind.BOTH,
}


class GettersSettersLanguageServer(LanguageServer):
    """LSP server providing the accessor commands."""

    def __init__(self) -> None:
        super().__init__("php-getters-setters", __version__)


class ServerMessages:
    """Shows messages through `window/showMessage`."""

    def __init__(self, server: LanguageServer) -> None:
        self.server = server

    def show_error_message(self, message: str) -> None:
        self.server.window_show_message(
            lsp.ShowMessageParams(type=lsp.MessageType.Error, message=message)
        )

    def show_information_message(self, message: str) -> None:
        self.server.window_show_message(
            lsp.ShowMessageParams(type=lsp.MessageType.Info, message=message)
        )


def _selection_line(selection: Any) -> int:
    """Line of an int, Position, Range or Selection given as JSON."""
    if isinstance(selection, bool):
        raise TypeError(f"Unsupported selection: {selection!r}")
    if isinstance(selection, int):
        return selection
    if isinstance(selection, dict):
        for key in ("active", "start"):
            if key in selection:
                return _selection_line(selection[key])
        return int(selection["line"])
    raise TypeError(f"Unsupported selection: {selection!r}")


def parse_command_arguments(args: tuple | list) -> tuple[str, list[int]]:
    """Extract the document uri and selection lines from executeCommand arguments."""
    # Older clients and servers pass the argument list as a single value
    if len(args) == 1 and isinstance(args[0], list):
        args = args[0]
    if not args or not isinstance(args[0], dict):
        raise ValueError("expected an object with textDocument and selections")

    payload = args[0]
    document = payload.get("textDocument") or {}
    uri = document.get("uri") or payload.get("uri")
    if not uri:
        raise ValueError("missing document uri")

    selections = [_selection_line(s) for s in payload.get("selections", [])]
    if not selections and "position" in payload:
        selections = [_selection_line(payload["position"])]
    if not selections:
        raise ValueError("missing selections")

    return uri, selections


def document_context(server: LanguageServer, uri: str, selections: list[int]) -> EditorContext:
    doc = server.workspace.get_text_document(uri)
    language_id = doc.language_id
    if not language_id and uri.lower().endswith(".php"):
        language_id = "php"

    return EditorContext(
        lines=[line.rstrip("\r\n") for line in doc.lines],
        language_id=language_id or "",
        selections=selections,
        uri=uri,
    )


def workspace_edit(uri: str, insertion: Insertion) -> lsp.WorkspaceEdit:
    position = lsp.Position(line=insertion.line, character=0)
    return lsp.WorkspaceEdit(
        changes={
            uri: [
                lsp.TextEdit(
                    range=lsp.Range(start=position, end=position),
                    new_text=insertion.text,
                )
            ]
        }
    )


async def fetch_configuration(server: LanguageServer, uri: str) -> Configuration:
    """Ask the client for the settings section; defaults if it cannot answer."""
    try:
        result = await server.workspace_configuration_async(
            lsp.ConfigurationParams(
                items=[lsp.ConfigurationItem(scope_uri=uri, section=SECTION)]
            )
        )
    except JsonRpcException as e:
        logger.warning(f"Configuration request failed, using defaults: {e}")
        return Configuration()

    settings = result[0] if result else None
    return Configuration(settings if isinstance(settings, dict) else None)


async def execute(server: LanguageServer, kind: AccessorKind, args: tuple | list) -> bool:
    """Run one accessor command. Every failure is shown to the user, none is raised."""
    messenger = Messenger(ServerMessages(server))

    try:
        uri, selections = parse_command_arguments(args)
    except (KeyError, TypeError, ValueError) as e:
        messenger.error(f"Invalid command arguments: {e}")
        return False

    config = await fetch_configuration(server, uri)

    try:
        resolver = Resolver(document_context(server, uri, selections), config)
    except GettersSettersError as e:
        messenger.error(str(e))
        return False

    insertion = resolver.prepare(kind, messenger)
    if insertion is None:
        return False

    try:
        result = await server.workspace_apply_edit_async(
            lsp.ApplyWorkspaceEditParams(
                edit=workspace_edit(uri, insertion),
                label="Insert accessors",
            )
        )
    except JsonRpcException as e:
        messenger.error(f"Error generating functions: {e}")
        return False

    if not result.applied:
        reason = result.failure_reason or "the edit was rejected"
        logger.warning(f"Edit rejected for {uri}: {reason}")
        messenger.error(f"Error generating functions: {reason}")
        return False

    if config.redirect:
        position = lsp.Position(line=insertion.redirect_line, character=0)
        try:
            await server.window_show_document_async(
                lsp.ShowDocumentParams(
                    uri=uri,
                    selection=lsp.Range(start=position, end=position),
                    take_focus=True,
                )
            )
        except JsonRpcException as e:
            logger.debug(f"Cursor redirect failed: {e}")

    return True


# =============================================================================
# Server Factory and Setup
# =============================================================================


def create_server() -> GettersSettersLanguageServer:
    """Create the server and register the accessor commands."""
    server = GettersSettersLanguageServer()

    @server.command(COMMAND_INSERT_GETTER)
    async def insert_getter(*args: Any) -> bool:
        return await execute(server, AccessorKind.GETTER, args)

    @server.command(COMMAND_INSERT_SETTER)
    async def insert_setter(*args: Any) -> bool:
        return await execute(server, AccessorKind.SETTER, args)

    @server.command(COMMAND_INSERT_GETTER_AND_SETTER)
    async def insert_getter_and_setter(*args: Any) -> bool:
        return await execute(server, AccessorKind.BOTH, args)

    return server


def start_server(transport: str = "stdio") -> None:
    """Start the server.

    Args:
        transport: "stdio" or "tcp:host:port"
    """
    server = create_server()

    if transport == "stdio":
        server.start_io()
    elif transport.startswith("tcp:"):
        parts = transport.split(":")
        host = parts[1] if len(parts) > 1 else "127.0.0.1"
        port = int(parts[2]) if len(parts) > 2 else 2087
        server.start_tcp(host, port)
    else:
        raise ValueError(f"Unknown transport: {transport}")
