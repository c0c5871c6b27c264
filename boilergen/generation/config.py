"""YAML configuration for boilerplate generation."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from boilergen.engine import MAX_ARITY, MIN_ARITY, ArityRange, TemplateConfigurationError

DEFAULT_OUTPUT_ROOT = Path("target/src_managed/main")
DEFAULT_NAMESPACE = ("jto", "validation")

KNOWN_SECTIONS = {"arity", "output", "patterns"}


@dataclass(frozen=True)
class GeneratorConfig:
    """Settings for one generation run."""

    min_arity: int = MIN_ARITY
    max_arity: int = MAX_ARITY
    output_root: Path = DEFAULT_OUTPUT_ROOT
    namespace: tuple[str, ...] = DEFAULT_NAMESPACE
    patterns: tuple[str, ...] | None = None

    @property
    def arity_range(self) -> ArityRange:
        return ArityRange(self.min_arity, self.max_arity)

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "GeneratorConfig":
        """Build a config from parsed YAML, filling in defaults.

        Expected layout::

            arity: {min: 2, max: 22}
            output: {root: target/src_managed/main, namespace: [jto, validation]}
            patterns: [invariant, functor, contravariant]
        """
        data = data or {}
        if not isinstance(data, dict):
            raise TemplateConfigurationError(f"Config must be a mapping, got {type(data).__name__}")

        unknown = set(data) - KNOWN_SECTIONS
        if unknown:
            raise TemplateConfigurationError(f"Unknown config sections: {sorted(unknown)}")

        arity = data.get("arity") or {}
        output = data.get("output") or {}
        patterns = data.get("patterns")
        for name, section in (("arity", arity), ("output", output)):
            if not isinstance(section, dict):
                raise TemplateConfigurationError(f"Config section {name!r} must be a mapping")

        try:
            min_arity = int(arity.get("min", MIN_ARITY))
            max_arity = int(arity.get("max", MAX_ARITY))
        except (TypeError, ValueError) as e:
            raise TemplateConfigurationError(f"Arity bounds must be integers: {e}") from e

        namespace = output.get("namespace", DEFAULT_NAMESPACE)
        if isinstance(namespace, str):
            namespace = namespace.split(".")
        if not isinstance(namespace, (list, tuple)) or not all(
            isinstance(segment, str) and segment for segment in namespace
        ):
            raise TemplateConfigurationError(
                f"output.namespace must be a dotted string or a list of names, got {namespace!r}"
            )

        root = output.get("root", DEFAULT_OUTPUT_ROOT)
        if not isinstance(root, (str, Path)) or not str(root):
            raise TemplateConfigurationError(f"output.root must be a path, got {root!r}")

        if isinstance(patterns, str):
            patterns = [patterns]
        if patterns is not None:
            if not isinstance(patterns, (list, tuple)) or not all(
                isinstance(p, str) for p in patterns
            ):
                raise TemplateConfigurationError(f"patterns must be a list of ids, got {patterns!r}")
            if not patterns:
                raise TemplateConfigurationError("patterns must not be empty; omit it to generate all")

        config = cls(
            min_arity=min_arity,
            max_arity=max_arity,
            output_root=Path(root),
            namespace=tuple(namespace),
            patterns=tuple(patterns) if patterns is not None else None,
        )
        # Validate the range eagerly
        config.arity_range
        return config


def load_config(config_path: Path) -> GeneratorConfig:
    """Load configuration from YAML file."""
    with open(config_path) as f:
        return GeneratorConfig.from_dict(yaml.safe_load(f))
