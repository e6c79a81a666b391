"""Larger than Life cellular automata: rules, neighbourhoods and a square board."""

__version__ = "0.1.0"
__all__ = ["board", "chunks", "config", "neighbourhood", "neighbours"]