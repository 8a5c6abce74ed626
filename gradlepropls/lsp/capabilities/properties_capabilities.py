"""
Property-related LSP capabilities.

Provides completion and hover for gradle.properties keys.
"""

from __future__ import annotations

import re

from lsprotocol.types import (
    CompletionList,
    CompletionParams,
    Hover,
    HoverParams,
    MarkupContent,
    MarkupKind,
)

from gradlepropls.lsp.capabilities.capabilities import (
    CompletionCapability,
    HoverCapability,
)

# Characters that can appear in a property key
KEY_START_PATTERN = re.compile(r"[A-Za-z0-9_.\-]*$")
KEY_END_PATTERN = re.compile(r"^[A-Za-z0-9_.\-]*")


class PropertiesCompletionCapability(CompletionCapability):
    """Provides completion for gradle.properties keys."""

    @property
    def name(self) -> str:
        return "properties_completion"

    @property
    def description(self) -> str:
        return "Autocomplete Gradle property keys from the catalog"

    async def can_handle(self, params: CompletionParams) -> bool:
        return self.server.responder is not None

    async def complete(self, params: CompletionParams) -> CompletionList:
        """Provide property key completions for the word before the cursor."""
        text = self.document_text(params.text_document.uri)
        items = self.server.responder.get_completions(text, params.position)

        return CompletionList(is_incomplete=False, items=items)


class PropertiesHoverCapability(HoverCapability):
    """Provides hover documentation for gradle.properties keys."""

    @property
    def name(self) -> str:
        return "properties_hover"

    @property
    def description(self) -> str:
        return "Show documentation of Gradle property keys on hover"

    async def can_handle(self, params: HoverParams) -> bool:
        return self.catalog is not None

    async def hover(self, params: HoverParams) -> Hover | None:
        """Provide hover information for the key under the cursor."""
        doc = self.server.workspace.get_text_document(params.text_document.uri)

        word = doc.word_at_position(
            params.position,
            re_start_word=KEY_START_PATTERN,
            re_end_word=KEY_END_PATTERN,
        )
        if not word:
            return None

        definition = self.catalog.get(word)
        if definition is None:
            return None

        lines = [f"**Gradle property:** `{definition.key}`"]
        if definition.description:
            lines.append("")
            lines.append(definition.description)
        if definition.default is not None:
            lines.append("")
            lines.append(f"**Default:** `{definition.default}`")
        if definition.since is not None:
            lines.append("")
            lines.append(f"**Since:** Gradle {definition.since}")

        return Hover(
            contents=MarkupContent(kind=MarkupKind.Markdown, value="\n".join(lines))
        )
