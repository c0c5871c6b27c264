"""Drives templates across the arity range and writes the generated files."""

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable

from boilergen.engine import (
    HEADER,
    ArityRange,
    GenerationWriteError,
    Marker,
    PatternTemplate,
)
from boilergen.generation.config import DEFAULT_NAMESPACE

Writer = Callable[[Path, str], None]


@dataclass(frozen=True)
class GeneratedFile:
    """A generated file body and where it goes."""

    path: Path
    body: str


def write_text(path: Path, text: str) -> None:
    """Write ``text`` to ``path``, creating parents and replacing any content."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(text)


class BoilerplateGenerator:
    """Expands every template over an arity range.

    Computing bodies is kept separate from writing them: :meth:`compute`
    touches no filesystem, so a configuration error in any template aborts
    the run before the first file is written.
    """

    def __init__(
        self,
        templates: list[PatternTemplate] | None = None,
        arity_range: ArityRange | None = None,
        header: str = HEADER,
        namespace: Iterable[str] = DEFAULT_NAMESPACE,
        verbose: bool = False,
    ) -> None:
        if templates is None:
            from boilergen.patterns import default_templates

            templates = default_templates()

        self.templates = templates
        self.arity_range = arity_range or ArityRange()
        self.header = header
        self.namespace = tuple(namespace)
        self.verbose = verbose

        # Per-template line counts from the last compute()
        self.template_stats: dict[str, dict[str, int]] = {}

    def target_dir(self, output_root: Path) -> Path:
        """Directory the templates' path rules are applied to."""
        return Path(output_root).joinpath(*self.namespace)

    def compute(self, output_root: Path) -> list[GeneratedFile]:
        """Assemble every template's path and body without writing anything."""
        target = self.target_dir(output_root)
        files = []
        self.template_stats = {}

        for template in self.templates:
            line_sets = template.render_all(self.arity_range)
            body = template.assemble_lines(self.header, line_sets)
            files.append(GeneratedFile(template.filename(target), body))
            self.template_stats[template.template_id] = {
                "lines": body.count("\n") + 1,
                "instance_lines": sum(
                    1 for lines in line_sets for line in lines if line.marker is Marker.INSTANCE
                ),
                "arities": len(line_sets),
            }

        return files

    def write_all(
        self,
        files: Iterable[GeneratedFile],
        writer: Writer = write_text,
    ) -> list[Path]:
        """Write files in order, stopping at the first failure.

        Files written before a failure are left in place.

        Raises:
            GenerationWriteError: If ``writer`` raises OSError
        """
        written = []
        for generated in files:
            try:
                writer(generated.path, generated.body)
            except OSError as e:
                raise GenerationWriteError(generated.path, str(e)) from e
            written.append(generated.path)
        return written

    def generate(self, output_root: Path, writer: Writer = write_text) -> list[Path]:
        """Compute all bodies, then write them.

        Returns:
            Written paths, in template order
        """
        files = self.compute(output_root)
        paths = self.write_all(files, writer)

        if self.verbose:
            self.print_stats(paths)

        return paths

    def print_stats(self, paths: list[Path]) -> None:
        print("\n=== Boilerplate Statistics ===")
        print(f"Arity range: {self.arity_range.min_arity}..{self.arity_range.max_arity}")
        print(f"Files written: {len(paths)}")
        for template_id, stats in self.template_stats.items():
            print(
                f"  {template_id}: {stats['lines']} lines, "
                f"{stats['instance_lines']} instance lines over {stats['arities']} arities"
            )


def generate(output_root: Path) -> list[Path]:
    """Generate every registered pattern under ``output_root`` with default settings."""
    return BoilerplateGenerator().generate(Path(output_root))
