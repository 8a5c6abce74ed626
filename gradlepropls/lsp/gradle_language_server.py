from __future__ import annotations

from pygls.lsp.server import LanguageServer

from gradlepropls.config import ServerSettings
from gradlepropls.lsp.capabilities.capabilities import CapabilityManager
from gradlepropls.properties.catalog import PropertyCatalog
from gradlepropls.properties.responder import CompletionResponder


class GradlePropertiesLanguageServer(LanguageServer):
    """
    Custom Language Server with gradle.properties attributes.

    Attributes:
        catalog: Recognized property keys, loaded once at startup
        responder: Answers completion requests against the catalog
        capability_manager: Dispatches LSP requests to capabilities
        settings: Settings the server was created with
    """

    def __init__(self, name: str, version: str):
        super().__init__(name, version)

        self.catalog: PropertyCatalog | None = None
        self.responder: CompletionResponder | None = None
        self.capability_manager: CapabilityManager | None = None
        self.settings: ServerSettings = ServerSettings()
