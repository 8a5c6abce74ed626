"""
Tests for gradlepropls/properties/responder.py
"""
from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from unittest.mock import Mock

import pytest
from lsprotocol.types import CompletionItemKind, MarkupContent, Position

from gradlepropls.properties.catalog import (
    PropertyCatalog,
    PropertyDefinition,
    load_catalog,
)
from gradlepropls.properties.responder import CompletionResponder


@pytest.fixture
def catalog() -> PropertyCatalog:
    return PropertyCatalog.from_keys(
        ["org.gradle.parallel", "org.gradle.caching", "org.gradle.workers.max"]
    )


def _labels(items) -> list[str]:
    return [item.label for item in items]


class TestGetCompletions:

    def test_single_match(self, catalog):
        responder = CompletionResponder(catalog)

        items = responder.get_completions("org.gradle.par", Position(line=0, character=14))

        assert _labels(items) == ["org.gradle.parallel"]

    def test_empty_line_offers_whole_catalog(self, catalog):
        responder = CompletionResponder(catalog)

        items = responder.get_completions("", Position(line=0, character=0))

        assert _labels(items) == [
            "org.gradle.caching",
            "org.gradle.parallel",
            "org.gradle.workers.max",
        ]

    def test_no_match_is_empty_list(self, catalog):
        responder = CompletionResponder(catalog)

        items = responder.get_completions("android.use", Position(line=0, character=11))

        assert items == []

    def test_line_out_of_range_is_empty_list(self, catalog):
        responder = CompletionResponder(catalog)

        items = responder.get_completions("org.gradle.par", Position(line=3, character=0))

        assert items == []

    def test_multiline_document(self, catalog):
        responder = CompletionResponder(catalog)
        document = "org.gradle.parallel=true\norg.gradle.w"

        items = responder.get_completions(document, Position(line=1, character=12))

        assert _labels(items) == ["org.gradle.workers.max"]

    def test_idempotent(self, catalog):
        responder = CompletionResponder(catalog)
        position = Position(line=0, character=11)

        first = responder.get_completions("org.gradle.", position)
        second = responder.get_completions("org.gradle.", position)

        assert _labels(first) == _labels(second)
        assert first == second

    def test_item_shape(self):
        catalog = PropertyCatalog(
            [
                PropertyDefinition(
                    key="org.gradle.caching",
                    description="Enables the build cache.",
                    default="false",
                ),
                PropertyDefinition(key="org.gradle.debug.host"),
            ]
        )
        responder = CompletionResponder(catalog)

        caching, host = responder.get_completions("org", Position(line=0, character=3))

        assert caching.label == "org.gradle.caching"
        assert caching.kind == CompletionItemKind.Property
        assert caching.detail == "Default: false"
        assert isinstance(caching.documentation, MarkupContent)
        assert caching.documentation.value == "Enables the build cache."
        assert host.label == "org.gradle.debug.host"
        assert host.detail is None
        assert host.documentation is None


class TestTrace:

    def test_trace_receives_fragment(self, catalog):
        trace = Mock()
        responder = CompletionResponder(catalog, trace=trace)

        responder.get_completions("a = org.gradle.c", Position(line=0, character=16))

        trace.assert_called_once_with("org.gradle.c")

    def test_trace_receives_empty_fragment(self, catalog):
        trace = Mock()
        responder = CompletionResponder(catalog, trace=trace)

        responder.get_completions("   ", Position(line=0, character=3))

        trace.assert_called_once_with("")

    def test_failing_trace_does_not_affect_result(self, catalog):
        trace = Mock(side_effect=RuntimeError("sink closed"))
        responder = CompletionResponder(catalog, trace=trace)

        items = responder.get_completions("org.gradle.par", Position(line=0, character=14))

        assert _labels(items) == ["org.gradle.parallel"]
        trace.assert_called_once()

    def test_no_trace_when_position_out_of_range(self, catalog):
        trace = Mock()
        responder = CompletionResponder(catalog, trace=trace)

        assert responder.get_completions("", Position(line=1, character=0)) == []
        trace.assert_not_called()


class TestConcurrency:

    def test_concurrent_requests_match_sequential(self):
        catalog = load_catalog()
        responder = CompletionResponder(catalog)
        requests = [
            ("org.gradle.", Position(line=0, character=11)),
            ("org.gradle.c", Position(line=0, character=12)),
            ("a=b\norg.gradle.debug", Position(line=1, character=16)),
            ("", Position(line=0, character=0)),
            ("org.gradle.par", Position(line=4, character=0)),
        ] * 40
        expected = [_labels(responder.get_completions(*request)) for request in requests]

        with ThreadPoolExecutor(max_workers=8) as executor:
            results = list(
                executor.map(
                    lambda request: _labels(responder.get_completions(*request)),
                    requests,
                )
            )

        assert results == expected
        assert catalog.all() == tuple(sorted(catalog.all()))
