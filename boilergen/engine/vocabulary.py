"""Per-arity naming vocabulary used by boilerplate templates."""

from dataclasses import dataclass
from functools import reduce

from boilergen.engine.errors import ArityRangeError


@dataclass(frozen=True)
class ArityVocabulary:
    """Substitution tokens derived from a single arity.

    Slot ``i`` is always the type ``A{i}`` and the value ``a{i}``, so every
    field of one instance refers to the same names in the same order.
    Build instances with :meth:`derive` rather than the constructor.
    """

    arity: int
    type_slots: tuple[str, ...]
    value_slots: tuple[str, ...]
    types: str
    values: str
    wildcards: str
    typed_params: str
    tuple_type: str
    tuple_value: str
    wildcard_tuple: str
    combined_type: str
    combined_type_init: str
    combined_values: str
    combined_value_expr: str
    tuple_accessors: str

    COMBINATOR = "~"
    WILDCARD = "_"

    @classmethod
    def derive(cls, arity: int) -> "ArityVocabulary":
        """Derive every token for ``arity``.

        Args:
            arity: Number of type/value slots, must be non-negative

        Returns:
            Immutable vocabulary for this arity
        """
        if arity < 0:
            raise ArityRangeError(f"Arity must be non-negative, got {arity}")

        type_slots = tuple(f"A{n}" for n in range(arity))
        value_slots = tuple(f"a{n}" for n in range(arity))
        wildcard_slots = (cls.WILDCARD,) * arity
        joiner = f" {cls.COMBINATOR} "

        return cls(
            arity=arity,
            type_slots=type_slots,
            value_slots=value_slots,
            types=", ".join(type_slots),
            values=", ".join(value_slots),
            wildcards=", ".join(wildcard_slots),
            typed_params=", ".join(f"{v}: {t}" for v, t in zip(value_slots, type_slots)),
            tuple_type=_tuple_type(type_slots),
            tuple_value=_tuple_value(value_slots),
            wildcard_tuple=_tuple_type(wildcard_slots),
            combined_type=joiner.join(type_slots),
            combined_type_init=joiner.join(type_slots[:-1]),
            combined_values=joiner.join(value_slots),
            combined_value_expr=_fold_values(value_slots, cls.COMBINATOR),
            tuple_accessors=", ".join(f"a._{n}" for n in range(1, arity + 1)),
        )

    def __repr__(self) -> str:
        return f"ArityVocabulary(arity={self.arity}, types=[{self.types}])"


def _tuple_type(slots: tuple[str, ...]) -> str:
    # (A0) is just a parenthesised A0, not a tuple
    if len(slots) == 1:
        return f"Tuple1[{slots[0]}]"
    return "(" + ", ".join(slots) + ")"


def _tuple_value(slots: tuple[str, ...]) -> str:
    if len(slots) == 1:
        return f"Tuple1({slots[0]})"
    return "(" + ", ".join(slots) + ")"


def _fold_values(slots: tuple[str, ...], combinator: str) -> str:
    """Left fold: a0, a1, a2 -> new ~(new ~(a0, a1), a2)."""
    if not slots:
        return ""
    return reduce(lambda acc, el: f"new {combinator}({acc}, {el})", slots)
