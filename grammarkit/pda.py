"""Push-down automata and their conversion to context-free grammars."""

from __future__ import annotations

import json
from collections.abc import Iterator, Mapping, Sequence
from itertools import product
from os import PathLike
from typing import Any

from grammarkit.cfg import CFG

Transition = tuple[str, str, str]
Move = tuple[str, tuple[str, ...]]


def _triple(state: str, symbol: str, other: str) -> str:
    return f"[{state},{symbol},{other}]"


def _bodies(
    prefix: str,
    target: str,
    final: str,
    replacement: Sequence[str],
    states: Sequence[str],
) -> Iterator[str]:
    """Every production body for a move pushing ``replacement`` and ending in ``final``."""
    for middle in product(states, repeat=len(replacement) - 1):
        path = (target, *middle, final)
        parts = [
            _triple(start, symbol, end)
            for symbol, start, end in zip(replacement, path, path[1:])
        ]
        yield " ".join(([prefix] if prefix else []) + parts)


class PDA:
    """A push-down automaton with transitions keyed by (state, input, stack top)."""

    def __init__(self) -> None:
        self.states: set[str] = set()
        self.input_alphabet: set[str] = set()
        self.stack_alphabet: set[str] = set()
        self.start_state: str = ""
        self.start_symbol: str = ""
        self.accepting_states: set[str] = set()
        self.transitions: dict[Transition, set[Move]] = {}

    @classmethod
    def from_file(cls, filename: str | PathLike[str]) -> PDA:
        """Load an automaton from a JSON file."""
        with open(filename, encoding="utf-8") as handle:
            return cls.from_dict(json.load(handle))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> PDA:
        """Build an automaton from its JSON description."""
        pda = cls()
        pda.start_state = data["StartState"]
        pda.start_symbol = data["StartStack"]
        pda.states = set(data["States"])
        pda.input_alphabet = set(data["Alphabet"])
        pda.stack_alphabet = set(data["StackAlphabet"])
        for transition in data.get("Transitions") or ():
            key = (transition["from"], transition["input"], transition["stacktop"])
            move = (transition["to"], tuple(transition["replacement"]))
            pda.transitions.setdefault(key, set()).add(move)
        return pda

    def to_cfg(self) -> CFG:
        """An equivalent grammar built with the triple construction."""
        cfg = CFG()
        cfg.start_symbol = "S"
        cfg.terminals = set(self.input_alphabet)
        cfg.add_variable("S")
        states = sorted(self.states)
        for first, symbol, second in product(states, sorted(self.stack_alphabet), states):
            cfg.add_variable(_triple(first, symbol, second))
        for state in states:
            cfg.add_production_rule("S", _triple(self.start_state, self.start_symbol, state))

        for (state, letter, top), moves in sorted(self.transitions.items()):
            for target, replacement in sorted(moves):
                if not replacement:
                    cfg.add_production_rule(_triple(state, top, target), letter)
                    continue
                for final in states:
                    head = _triple(state, top, final)
                    for body in _bodies(letter, target, final, replacement, states):
                        cfg.add_production_rule(head, body)
        return cfg