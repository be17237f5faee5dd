"""Tokens, syntax tree, parser and evaluator for a small B-like language."""

__version__ = "0.1.0"

__all__ = ["tokens", "nodes", "sources", "parser", "interpreter"]