"""Regex-driven lexing, grammar-driven parsing into syntax trees, and helpers."""

__version__ = "0.1.0"

__all__ = ["cli", "fileutil", "lexer", "linkedlist", "parser", "tokens"]