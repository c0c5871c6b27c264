"""Arity boilerplate generator."""

from boilergen.generation import generate

__all__ = ["generate"]
