"""Applicative-builder syntax templates.

Each template emits one Scala file with a ``<Name>N`` class per arity. Every
class carries a ``~`` method that chains one more value into ``<Name>N+1``,
except at the highest arity where there is nothing to chain into.
"""

from boilergen.engine import ArityVocabulary, PatternTemplate, TaggedLine, block


class SyntaxTemplate(PatternTemplate):
    """Shared naming for the ``*Syntax`` templates."""

    syntax_name: str = ""
    package: str = "jto.validation"

    @property
    def file_name(self) -> str:
        return f"{self.syntax_name}.scala"

    def continuation(self, tv: ArityVocabulary, max_arity: int) -> str:
        """``~`` method building the next arity, empty at ``max_arity``."""
        n = tv.arity
        if n >= max_arity:
            return ""
        return (
            f"def ~[A{n}](m3: M[A{n}]) = "
            f"new {self.syntax_name}{n + 1}[{tv.types}, A{n}](combine(m1, m2), m3)"
        )


class InvariantSyntaxTemplate(SyntaxTemplate):
    """Builder combining with both ``imap`` directions."""

    syntax_name = "InvariantSyntax"

    def content(self, tv: ArityVocabulary, max_arity: int) -> list[TaggedLine]:
        n = tv.arity
        return block(f"""
            |package {self.package}
            |
            |import cats.functor.Invariant
            |
            |class InvariantSyntax[M[_]](combine: SyntaxCombine[M]) {{
            |
            -  class InvariantSyntax{n}[{tv.types}](m1: M[{tv.combined_type_init}], m2: M[A{n - 1}]) {{
            -    {self.continuation(tv, max_arity)}
            -
            -    def apply[B](f1: {tv.tuple_type} => B, f2: B => {tv.tuple_type})(implicit fu: Invariant[M]): M[B] =
            -      fu.imap[{tv.combined_type}, B](
            -        combine(m1, m2))({{ case {tv.combined_values} => f1({tv.values}) }})(
            -        (b: B) => {{ val {tv.tuple_value} = f2(b); {tv.combined_value_expr} }}
            -      )
            -
            -    def tupled(implicit fu: Invariant[M]): M[{tv.tuple_type}] =
            -      apply[{tv.tuple_type}]({{ ({tv.typed_params}) => {tv.tuple_value} }}, {{ (a: {tv.tuple_type}) => ({tv.tuple_accessors}) }})
            -  }}
            -
            |}}
        """)


class FunctorSyntaxTemplate(SyntaxTemplate):
    """Builder mapping the combined value forward."""

    syntax_name = "FunctorSyntax"

    def content(self, tv: ArityVocabulary, max_arity: int) -> list[TaggedLine]:
        n = tv.arity
        return block(f"""
            |package {self.package}
            |
            |import cats.Functor
            |
            |class FunctorSyntax[M[_]](combine: SyntaxCombine[M]) {{
            |
            -  class FunctorSyntax{n}[{tv.types}](m1: M[{tv.combined_type_init}], m2: M[A{n - 1}]) {{
            -    {self.continuation(tv, max_arity)}
            -
            -    def apply[B](f: {tv.tuple_type} => B)(implicit fu: Functor[M]): M[B] =
            -      fu.map[{tv.combined_type}, B](combine(m1, m2))({{ case {tv.combined_values} => f({tv.values}) }})
            -
            -    def tupled(implicit fu: Functor[M]): M[{tv.tuple_type}] =
            -      apply[{tv.tuple_type}]({{ ({tv.typed_params}) => {tv.tuple_value} }})
            -  }}
            -
            |}}
        """)


class ContravariantSyntaxTemplate(SyntaxTemplate):
    """Builder splitting a value back into its parts."""

    syntax_name = "ContravariantSyntax"

    def content(self, tv: ArityVocabulary, max_arity: int) -> list[TaggedLine]:
        n = tv.arity
        return block(f"""
            |package {self.package}
            |
            |import cats.functor.Contravariant
            |
            |class ContravariantSyntax[M[_]](combine: SyntaxCombine[M]) {{
            |
            -  class ContravariantSyntax{n}[{tv.types}](m1: M[{tv.combined_type_init}], m2: M[A{n - 1}]) {{
            -    {self.continuation(tv, max_arity)}
            -
            -    def apply[B](f: B => {tv.tuple_type})(implicit fu: Contravariant[M]): M[B] =
            -      fu.contramap(combine(m1, m2))((b: B) => {{ val {tv.tuple_value} = f(b); {tv.combined_value_expr} }})
            -
            -    def tupled(implicit fu: Contravariant[M]): M[{tv.tuple_type}] =
            -      apply[{tv.tuple_type}]({{ (a: {tv.tuple_type}) => ({tv.tuple_accessors}) }})
            -  }}
            -
            |}}
        """)
