"""Registered boilerplate patterns."""

from boilergen.engine import PatternTemplate, UnknownPatternError
from boilergen.patterns.syntax_templates import (
    ContravariantSyntaxTemplate,
    FunctorSyntaxTemplate,
    InvariantSyntaxTemplate,
    SyntaxTemplate,
)

# id -> (template class, description); order is generation order
PATTERN_REGISTRY: dict[str, tuple[type[PatternTemplate], str]] = {
    "invariant": (InvariantSyntaxTemplate, "Invariant builder syntax"),
    "functor": (FunctorSyntaxTemplate, "Functor builder syntax"),
    "contravariant": (ContravariantSyntaxTemplate, "Contravariant builder syntax"),
}


def register_pattern(template_id: str, template_cls: type[PatternTemplate], description: str) -> None:
    """Add a template class to the registry under ``template_id``."""
    PATTERN_REGISTRY[template_id] = (template_cls, description)


def get_templates(template_ids: list[str] | None = None) -> list[PatternTemplate]:
    """Instantiate registered templates.

    Args:
        template_ids: Ids to build, in the order given. All registered
            templates in registry order if None.

    Returns:
        Fresh template instances
    """
    if template_ids is None:
        template_ids = list(PATTERN_REGISTRY)

    templates = []
    for template_id in template_ids:
        if template_id not in PATTERN_REGISTRY:
            known = ", ".join(PATTERN_REGISTRY)
            raise UnknownPatternError(f"Unknown pattern {template_id!r} (known: {known})")
        template_cls, description = PATTERN_REGISTRY[template_id]
        templates.append(template_cls(template_id, description))
    return templates


def default_templates() -> list[PatternTemplate]:
    """All registered templates in registry order."""
    return get_templates()


__all__ = [
    "PATTERN_REGISTRY",
    "register_pattern",
    "get_templates",
    "default_templates",
    "SyntaxTemplate",
    "InvariantSyntaxTemplate",
    "FunctorSyntaxTemplate",
    "ContravariantSyntaxTemplate",
]
