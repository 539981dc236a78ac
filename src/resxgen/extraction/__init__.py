"""Extraction of key/value entries from .resx resource documents."""

from resxgen.extraction.reader import ResourceEntry, TypedEntryPolicy, read_resources

__all__ = ["ResourceEntry", "TypedEntryPolicy", "read_resources"]
