from resxgen._version import __version__
from resxgen.config import GeneratorOptions, ToolConfig, load_config
from resxgen.consistency import ConsistencyReport, check_consistency
from resxgen.exceptions import (
    ConsistencyError,
    InputFormatError,
    ResourceUnavailableError,
    ResxGenError,
)
from resxgen.extraction.reader import ResourceEntry, TypedEntryPolicy, read_resources
from resxgen.generator import (
    GenerationResult,
    Generator,
    generate_file,
    generate_source,
)
from resxgen.output.sink import DirectorySink, MemorySink, SourceSink

__all__ = [
    "__version__",
    "ConsistencyError",
    "ConsistencyReport",
    "DirectorySink",
    "GenerationResult",
    "Generator",
    "GeneratorOptions",
    "InputFormatError",
    "MemorySink",
    "ResourceEntry",
    "ResourceUnavailableError",
    "ResxGenError",
    "SourceSink",
    "ToolConfig",
    "TypedEntryPolicy",
    "check_consistency",
    "generate_file",
    "generate_source",
    "load_config",
    "read_resources",
]
