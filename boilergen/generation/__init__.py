"""Generation run: configuration, body computation and file writing."""

from boilergen.generation.config import GeneratorConfig, load_config
from boilergen.generation.generator import (
    BoilerplateGenerator,
    GeneratedFile,
    generate,
    write_text,
)

__all__ = [
    "BoilerplateGenerator",
    "GeneratedFile",
    "GeneratorConfig",
    "generate",
    "load_config",
    "write_text",
]
