"""Template expansion engine for arity boilerplate."""

from boilergen.engine.block import (
    Marker,
    TaggedLine,
    block,
    instance,
    postamble,
    preamble,
)
from boilergen.engine.errors import (
    ArityRangeError,
    BoilerplateError,
    GenerationWriteError,
    MalformedTemplateError,
    TemplateConfigurationError,
    UnknownPatternError,
)
from boilergen.engine.template import (
    HEADER,
    MAX_ARITY,
    MIN_ARITY,
    ArityRange,
    PatternTemplate,
    assemble,
)
from boilergen.engine.vocabulary import ArityVocabulary

__all__ = [
    "ArityVocabulary",
    "ArityRange",
    "PatternTemplate",
    "Marker",
    "TaggedLine",
    "block",
    "preamble",
    "instance",
    "postamble",
    "assemble",
    "HEADER",
    "MIN_ARITY",
    "MAX_ARITY",
    "BoilerplateError",
    "ArityRangeError",
    "TemplateConfigurationError",
    "UnknownPatternError",
    "MalformedTemplateError",
    "GenerationWriteError",
]
