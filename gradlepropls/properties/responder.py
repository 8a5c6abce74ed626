"""
Completion Responder

Turns (document text, cursor position) into completion items by running
the resolver and the matcher against the server's property catalog.
"""

from __future__ import annotations

from typing import Callable

from lsprotocol.types import (
    CompletionItem,
    CompletionItemKind,
    MarkupContent,
    MarkupKind,
    Position,
)

from gradlepropls.errors import PositionOutOfRange
from gradlepropls.properties.catalog import PropertyCatalog
from gradlepropls.properties.matcher import matched_properties
from gradlepropls.properties.resolver import extract_word

# Receives the resolved fragment of every request
TraceSink = Callable[[str], None]


class CompletionResponder:
    """
    Answers completion requests for gradle.properties documents.

    Usage:
        responder = CompletionResponder(catalog, trace=print)
        items = responder.get_completions("org.gradle.par", Position(0, 14))
        [item.label for item in items]   # ['org.gradle.parallel']
    """

    def __init__(
        self, catalog: PropertyCatalog, trace: TraceSink | None = None
    ) -> None:
        self.catalog = catalog
        self.trace = trace

    def get_completions(
        self, document: str, position: Position
    ) -> list[CompletionItem]:
        """
        Provide completion items for the word in front of the cursor.

        A cursor on a line that does not exist yields no items.
        """
        try:
            fragment = extract_word(document, position)
        except PositionOutOfRange:
            return []

        self._emit_trace(fragment)

        return [
            self._to_completion_item(key)
            for key in matched_properties(fragment, self.catalog)
        ]

    def _to_completion_item(self, key: str) -> CompletionItem:
        definition = self.catalog.get(key)
        detail = None
        documentation = None
        if definition is not None:
            if definition.default is not None:
                detail = f"Default: {definition.default}"
            if definition.description:
                documentation = MarkupContent(
                    kind=MarkupKind.Markdown, value=definition.description
                )

        return CompletionItem(
            label=key,
            kind=CompletionItemKind.Property,
            detail=detail,
            documentation=documentation,
        )

    def _emit_trace(self, fragment: str) -> None:
        if self.trace is None:
            return
        try:
            self.trace(fragment)
        except Exception:
            # Tracing is diagnostic only and never fails a request
            pass
