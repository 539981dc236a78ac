"""Sinks receiving generated source text."""

from resxgen.output.sink import DirectorySink, MemorySink, SourceSink

__all__ = ["DirectorySink", "MemorySink", "SourceSink"]
