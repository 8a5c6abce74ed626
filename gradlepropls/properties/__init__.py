"""gradle.properties completion core."""
from .catalog import PropertyCatalog, PropertyDefinition, load_catalog
from .matcher import matched_properties
from .resolver import extract_word
from .responder import CompletionResponder

__all__ = [
    'PropertyCatalog',
    'PropertyDefinition',
    'load_catalog',
    'matched_properties',
    'extract_word',
    'CompletionResponder',
]
