"""Intermediate representation, assembly tree, backend symbol table and DOT printer for a small C compiler."""

__version__ = "1.0.0"