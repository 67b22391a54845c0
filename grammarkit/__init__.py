"""Context-free grammars and pushdown automata: CYK membership, LL(1) tables, PDA-to-CFG."""

__version__ = "0.1.0"