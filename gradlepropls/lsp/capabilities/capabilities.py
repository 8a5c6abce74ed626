"""
Capability plugins for the gradle.properties server.

Each LSP request (completion, hover) is answered by the capabilities
registered for it. The manager asks every capability whether it applies
and combines the answers, so new key sources can be added as plugins.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from lsprotocol.types import (
    CompletionList,
    CompletionParams,
    Hover,
    HoverParams,
    LogMessageParams,
    MessageType,
)


if TYPE_CHECKING:
    from gradlepropls.lsp.gradle_language_server import GradlePropertiesLanguageServer


class Capability(ABC):
    """A plugin answering one kind of LSP request for gradle.properties files."""

    def __init__(self, server: GradlePropertiesLanguageServer) -> None:
        self.server = server

    @property
    def catalog(self):
        return self.server.catalog

    def document_text(self, uri: str) -> str:
        """Full text of an open document with line endings normalized to "\\n"."""
        doc = self.server.workspace.get_text_document(uri)
        return doc.source.replace("\r\n", "\n")

    @property
    @abstractmethod
    def name(self) -> str:
        """Key of the capability in the manager."""

    @property
    @abstractmethod
    def description(self) -> str:
        """One-line summary shown in logs."""

    @abstractmethod
    async def can_handle(self, params) -> bool:
        """Whether this capability applies to the request."""


class CompletionCapability(Capability):
    """Base class for completion capabilities."""

    @abstractmethod
    async def can_handle(self, params: CompletionParams) -> bool:
        """Whether completions should be offered for this cursor."""

    @abstractmethod
    async def complete(self, params: CompletionParams) -> CompletionList:
        """Completion items for the cursor; called after can_handle()."""


class HoverCapability(Capability):
    """Base class for hover capabilities."""

    @abstractmethod
    async def can_handle(self, params: HoverParams) -> bool:
        """Whether hover help applies to this cursor."""

    @abstractmethod
    async def hover(self, params: HoverParams) -> Hover | None:
        """Hover help for the cursor, or None."""


class CapabilityManager:
    """
    Routes completion and hover requests to the registered capabilities.

    Usage:
        # In server initialization
        manager = CapabilityManager(server)

        # In feature handlers
        await manager.handle_completion(params)
    """

    def __init__(
        self,
        server: GradlePropertiesLanguageServer,
        capabilities: dict[str, Capability] | None = None,
    ):
        self.server = server

        # Default capabilities
        if capabilities is None:
            from gradlepropls.lsp.capabilities.properties_capabilities import (
                PropertiesCompletionCapability,
                PropertiesHoverCapability,
            )

            capabilities = {
                "properties_completion": PropertiesCompletionCapability(server),
                "properties_hover": PropertiesHoverCapability(server),
            }

        self.capabilities = capabilities

    def get_capability(self, name: str) -> Capability | None:
        """Look up a capability by its key."""
        return self.capabilities.get(name)

    def get_capabilities_by_type(self, capability_type: type) -> list[Capability]:
        """Capabilities that are instances of capability_type."""
        return [
            cap
            for cap in self.capabilities.values()
            if isinstance(cap, capability_type)
        ]

    async def handle_completion(self, params: CompletionParams) -> CompletionList:
        """
        Merge the items of every applicable completion capability.

        A capability that raises is logged and contributes no items.
        """
        all_items = []

        for capability in self.get_capabilities_by_type(CompletionCapability):
            try:
                if await capability.can_handle(params):
                    result = await capability.complete(params)  # pyright: ignore
                    all_items.extend(result.items)
            except Exception as e:
                self._log_error(f"Completion error in {capability.name}: {e}")

        return CompletionList(is_incomplete=False, items=all_items)

    async def handle_hover(self, params: HoverParams) -> Hover | None:
        """First hover returned by an applicable capability, or None."""
        for capability in self.get_capabilities_by_type(HoverCapability):
            try:
                if await capability.can_handle(params):
                    result = await capability.hover(params)  # pyright: ignore
                    if result:
                        return result
            except Exception as e:
                self._log_error(f"Hover error in {capability.name}: {e}")

        return None

    def _log_error(self, message: str) -> None:
        self.server.window_log_message(
            LogMessageParams(type=MessageType.Error, message=message)
        )
