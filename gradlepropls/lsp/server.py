from __future__ import annotations

from lsprotocol.types import (
    INITIALIZE,
    TEXT_DOCUMENT_COMPLETION,
    TEXT_DOCUMENT_HOVER,
    CompletionList,
    CompletionOptions,
    CompletionParams,
    HoverParams,
    InitializeParams,
    LogMessageParams,
    MessageType,
)

from gradlepropls import __version__
from gradlepropls.config import ServerSettings
from gradlepropls.lsp.capabilities.capabilities import CapabilityManager
from gradlepropls.lsp.gradle_language_server import GradlePropertiesLanguageServer
from gradlepropls.properties.catalog import PropertyCatalog, load_catalog
from gradlepropls.properties.responder import CompletionResponder, TraceSink


def create_server(
    catalog: PropertyCatalog | None = None,
    settings: ServerSettings | None = None,
) -> GradlePropertiesLanguageServer:
    """
    Creates and returns a configured Language Server instance.

    The LanguageServer class from pygls handles:
    - JSON-RPC communication with clients (editors)
    - Request/response lifecycle
    - Document synchronization (ls.workspace)

    Args:
        catalog: Property catalog to serve. Loaded from settings.catalog_path
            (or the packaged catalog) when None.
        settings: Server settings. Read from the environment when None.

    Raises:
        CatalogUnavailable: No catalog was given and none could be loaded.
    """
    if settings is None:
        settings = ServerSettings.from_env()
    if catalog is None:
        catalog = load_catalog(settings.catalog_path)

    server = GradlePropertiesLanguageServer("gradlepropls", __version__)
    server.settings = settings
    server.catalog = catalog
    server.responder = CompletionResponder(
        catalog, trace=_fragment_trace(server) if settings.trace else None
    )
    server.capability_manager = CapabilityManager(server)

    @server.feature(INITIALIZE)
    def initialize(ls: GradlePropertiesLanguageServer, params: InitializeParams):
        """Report the loaded catalog to the client."""
        ls.window_log_message(
            LogMessageParams(
                MessageType.Info, f"Loaded {len(ls.catalog)} Gradle properties"
            )
        )

    @server.feature(
        TEXT_DOCUMENT_COMPLETION, CompletionOptions(trigger_characters=["."])
    )
    async def completion(ls: GradlePropertiesLanguageServer, params: CompletionParams):
        if ls.capability_manager:
            return await ls.capability_manager.handle_completion(params)
        return CompletionList(is_incomplete=False, items=[])

    @server.feature(TEXT_DOCUMENT_HOVER)
    async def hover(ls: GradlePropertiesLanguageServer, params: HoverParams):
        if ls.capability_manager:
            return await ls.capability_manager.handle_hover(params)
        return None

    return server


def _fragment_trace(server: GradlePropertiesLanguageServer) -> TraceSink:
    """Trace sink that logs completion fragments to the client."""

    def trace(fragment: str) -> None:
        server.window_log_message(
            LogMessageParams(MessageType.Log, f"Completion fragment: '{fragment}'")
        )

    return trace
