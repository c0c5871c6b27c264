"""Pattern templates and per-arity body assembly."""

from dataclasses import dataclass
from itertools import dropwhile, takewhile
from pathlib import Path
from typing import Iterator

from boilergen.engine.block import Marker, TaggedLine
from boilergen.engine.errors import (
    ArityRangeError,
    MalformedTemplateError,
    TemplateConfigurationError,
)
from boilergen.engine.vocabulary import ArityVocabulary

HEADER = """
// Auto-generated boilerplate
// $COVERAGE-OFF$Disabling coverage for generated code
"""

MIN_ARITY = 2
MAX_ARITY = 22


@dataclass(frozen=True)
class ArityRange:
    """Inclusive range of arities, iterated in ascending order."""

    min_arity: int = MIN_ARITY
    max_arity: int = MAX_ARITY

    def __post_init__(self) -> None:
        if self.min_arity < 0:
            raise ArityRangeError(f"min_arity must be >= 0, got {self.min_arity}")
        if self.max_arity < self.min_arity:
            raise ArityRangeError(
                f"max_arity ({self.max_arity}) is smaller than min_arity ({self.min_arity})"
            )

    def __iter__(self) -> Iterator[int]:
        return iter(range(self.min_arity, self.max_arity + 1))

    def __len__(self) -> int:
        return self.max_arity - self.min_arity + 1


class PatternTemplate:
    """Base class for boilerplate templates.

    Subclasses set ``file_name`` and implement :meth:`content`, which renders
    the tagged lines for one arity. The first arity's preamble and postamble
    frame the instance lines collected from every arity.
    """

    file_name: str = ""

    def __init__(self, template_id: str, description: str) -> None:
        self.template_id = template_id
        self.description = description

    def filename(self, root: Path) -> Path:
        """Output path of this template under ``root``."""
        if not self.file_name:
            raise TemplateConfigurationError(f"Template {self.template_id!r} has no file_name")
        return Path(root) / self.file_name

    def content(self, tv: ArityVocabulary, max_arity: int) -> list[TaggedLine]:
        """Render the tagged lines for one arity.

        Args:
            tv: Vocabulary for the arity being rendered
            max_arity: Highest arity of the run, for patterns that chain
                one arity to the next

        Returns:
            Tagged lines, emitted as given; a line with empty text becomes
            an empty output line
        """
        raise NotImplementedError

    def render(self, arity: int, max_arity: int) -> list[TaggedLine]:
        """Render one arity and check every line is tagged."""
        try:
            lines = list(self.content(ArityVocabulary.derive(arity), max_arity))
        except MalformedTemplateError as e:
            raise MalformedTemplateError(
                f"Template {self.template_id!r} at arity {arity}: {e}"
            ) from e
        for line in lines:
            if not isinstance(line, TaggedLine):
                raise MalformedTemplateError(
                    f"Template {self.template_id!r} rendered an untagged line "
                    f"at arity {arity}: {line!r}"
                )
        if not lines:
            raise TemplateConfigurationError(
                f"Template {self.template_id!r} rendered nothing at arity {arity}"
            )
        return lines

    def body(self, header: str = HEADER, arity_range: ArityRange | None = None) -> str:
        """Assemble the full file body over ``arity_range``."""
        arity_range = arity_range or ArityRange()
        return self.assemble_lines(header, self.render_all(arity_range))

    def render_all(self, arity_range: ArityRange) -> list[list[TaggedLine]]:
        """Render every arity of ``arity_range``, lowest first."""
        return [self.render(n, arity_range.max_arity) for n in arity_range]

    def assemble_lines(self, header: str, line_sets: list[list[TaggedLine]]) -> str:
        """Assemble already rendered line sets into a file body."""
        try:
            return assemble(header, line_sets)
        except TemplateConfigurationError as e:
            raise TemplateConfigurationError(f"Template {self.template_id!r}: {e}") from e

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.template_id!r})"


def _is(marker: Marker):
    return lambda line: line.marker is marker


def assemble(header: str, line_sets: list[list[TaggedLine]]) -> str:
    """Join header, preamble, per-arity instances and postamble.

    Args:
        header: Text placed verbatim before everything else
        line_sets: Rendered lines per arity, lowest arity first

    Returns:
        The file body, lines joined with newlines
    """
    if not line_sets:
        raise TemplateConfigurationError("No arities were rendered")

    first = line_sets[0]
    if not any(line.marker is Marker.INSTANCE for line in first):
        raise TemplateConfigurationError("Lowest arity rendered no instance lines")

    header_lines = header.split("\n")
    pre_body = [line.text for line in takewhile(_is(Marker.PREAMBLE), first)]
    instances = [
        line.text for lines in line_sets for line in lines if line.marker is Marker.INSTANCE
    ]
    # Re-scan the first arity positionally; whatever follows its instance run
    # is the postamble.
    rest = dropwhile(_is(Marker.INSTANCE), dropwhile(_is(Marker.PREAMBLE), first))
    post_body = [line.text for line in rest]

    return "\n".join(header_lines + pre_body + instances + post_body)
