"""Tagged-line protocol for template output.

Every line a template renders carries a :class:`Marker` telling the
assembler where it belongs in the generated file:

- ``PREAMBLE``: emitted once, taken from the lowest arity only
- ``INSTANCE``: emitted once per arity, in ascending order
- ``POSTAMBLE``: emitted once, taken from the lowest arity only

Templates usually write their text with :func:`block`, which reads the
marker from the first character of each line (``|`` or ``-``).
"""

from dataclasses import dataclass
from enum import Enum

from boilergen.engine.errors import MalformedTemplateError


class Marker(Enum):
    """Structural zone of a rendered line."""

    PREAMBLE = "preamble"
    INSTANCE = "instance"
    POSTAMBLE = "postamble"


@dataclass(frozen=True)
class TaggedLine:
    """One rendered line with its marker stripped off."""

    marker: Marker
    text: str

    def __repr__(self) -> str:
        return f"{self.marker.name}:{self.text!r}"


FRAME_PREFIX = "|"
INSTANCE_PREFIX = "-"


def block(text: str) -> list[TaggedLine]:
    """Parse marker-prefixed template text into tagged lines.

    Leading whitespace before the marker is removed so templates can be
    indented to match the surrounding Python code. Text after the marker is
    kept verbatim. Lines that are blank after stripping are dropped.

    A ``|`` line is a preamble line until the first ``-`` line has been
    seen, and a postamble line afterwards.

    Args:
        text: Template text, typically an f-string

    Returns:
        Tagged lines in source order

    Raises:
        MalformedTemplateError: If a non-blank line starts with neither marker
    """
    lines = []
    seen_instance = False

    for raw in text.split("\n"):
        line = raw.lstrip()
        if not line:
            continue

        prefix, body = line[0], line[1:]
        if prefix == INSTANCE_PREFIX:
            seen_instance = True
            lines.append(TaggedLine(Marker.INSTANCE, body))
        elif prefix == FRAME_PREFIX:
            marker = Marker.POSTAMBLE if seen_instance else Marker.PREAMBLE
            lines.append(TaggedLine(marker, body))
        else:
            raise MalformedTemplateError(f"Line has no marker: {line!r}")

    return lines


def preamble(*texts: str) -> list[TaggedLine]:
    """Tag each argument as a preamble line."""
    return [TaggedLine(Marker.PREAMBLE, t) for t in texts]


def instance(*texts: str) -> list[TaggedLine]:
    """Tag each argument as an instance line."""
    return [TaggedLine(Marker.INSTANCE, t) for t in texts]


def postamble(*texts: str) -> list[TaggedLine]:
    """Tag each argument as a postamble line."""
    return [TaggedLine(Marker.POSTAMBLE, t) for t in texts]
