"""Context-free grammars: loading, CYK membership testing and LL(1) tables."""

from __future__ import annotations

import json
import sys
from collections.abc import Iterable, Mapping
from os import PathLike
from typing import Any

from grammarkit.logger import (
    format_acceptance_table,
    format_productions,
    format_table,
    set_to_string,
)
from grammarkit.tables import (
    END_OF_STREAM,
    EPSILON,
    AssociationGroup,
    ParseTable,
    TableObject,
    cartesian_product,
    find_existing_rule,
)


def _join_body(symbols: Iterable[str]) -> str:
    body = ""
    for symbol in symbols:
        body = body + " " + symbol if body else body + symbol
    return body


class CFG:
    """A context-free grammar whose production bodies are space-separated symbols."""

    def __init__(self) -> None:
        self.variables: set[str] = set()
        self.terminals: set[str] = set()
        self.production_rules: dict[str, set[str]] = {}
        self.start_symbol: str = ""

    @classmethod
    def from_file(cls, filename: str | PathLike[str]) -> CFG:
        """Load a grammar from a JSON file."""
        with open(filename, encoding="utf-8") as handle:
            return cls.from_dict(json.load(handle))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> CFG:
        """Build a grammar from a mapping with Variables, Terminals, Start and Productions."""
        cfg = cls()
        cfg.variables = set(data["Variables"])
        cfg.terminals = set(data["Terminals"])
        cfg.start_symbol = data["Start"]
        for production in data.get("Productions") or ():
            cfg.add_production_rule(production["head"], _join_body(production["body"]))
        return cfg

    def add_variable(self, variable: str) -> None:
        self.variables.add(variable)

    def add_production_rule(self, head: str, body: str) -> None:
        self.production_rules.setdefault(head, set()).add(body)

    def describe(self) -> str:
        """A textual description of the grammar's four components."""
        return "\n".join(
            [
                f"V = {set_to_string(self.variables)}",
                f"T = {set_to_string(self.terminals)}",
                format_productions(self.production_rules),
                f"S = {self.start_symbol}",
            ]
        )

    def print(self) -> None:
        """Write the grammar's description to standard output."""
        sys.stdout.write(self.describe() + "\n")

    # CYK

    def acceptance_table(self, input_string: str) -> list[list[TableObject]]:
        """Run the CYK algorithm; row i holds the substrings of length i + 1."""
        if not input_string:
            raise ValueError("input string must not be empty")
        length = len(input_string)
        table = [
            [TableObject(token=input_string[j : j + i + 1]) for j in range(length - i)]
            for i in range(length)
        ]
        group = AssociationGroup()
        for cell in table[0]:
            cell.variables = find_existing_rule(cell.token, self.production_rules)
            group.associate(cell.token, cell.variables)

        for row in table[1:]:
            for cell in row:
                bodies: set[str] = set()
                for left, right in cell.token_combinations():
                    bodies |= cartesian_product(
                        group.variables_for(left), group.variables_for(right)
                    )
                found: set[str] = set()
                for body in bodies:
                    found |= find_existing_rule(body, self.production_rules)
                group.associate(cell.token, found)
                cell.variables = found
        return table

    def accepts(self, input_string: str) -> bool:
        """Print the CYK table and whether the string is in the language; return that result."""
        table = self.acceptance_table(input_string)
        print(format_acceptance_table(table))
        result = self.start_symbol in table[-1][0].variables
        print("true" if result else "false")
        return result

    # LL(1)

    def _first(self, variable: str, table: ParseTable) -> set[str]:
        first: set[str] = set()
        for body in sorted(self.production_rules.get(variable, ())):
            epsilon_included = True
            for symbol in body.split():
                if symbol in self.terminals:
                    first.add(symbol)
                    table.set_parse_rule(variable, symbol, f"`{body}`")
                    epsilon_included = False
                    break
                sub_first = self._first(symbol, table)
                for item in sorted(sub_first):
                    if item != EPSILON:
                        first.add(item)
                        table.set_parse_rule(variable, item, f"`{body}`")
                if EPSILON not in sub_first:
                    epsilon_included = False
                    break
            if epsilon_included:
                first.add(EPSILON)
                table.set_follow_rule(variable, f"`{body}`" if body else EPSILON)
        return first

    def _follow(
        self,
        variable: str,
        first_set: dict[str, set[str]],
        follow_set: dict[str, set[str]],
    ) -> set[str]:
        known = follow_set.setdefault(variable, set())
        if known:
            return set(known)
        if variable == self.start_symbol:
            known.add(END_OF_STREAM)

        for head, bodies in sorted(self.production_rules.items()):
            for body in sorted(bodies):
                symbols = body.split()
                for position, symbol in enumerate(symbols):
                    if symbol != variable:
                        continue
                    if position + 1 < len(symbols):
                        following = symbols[position + 1]
                        if following in self.terminals:
                            known.add(following)
                            continue
                        for item in sorted(first_set.setdefault(following, set())):
                            if item != EPSILON:
                                known.add(item)
                            else:
                                known |= self._follow(following, first_set, follow_set)
                    else:
                        known |= self._follow(head, first_set, follow_set)
        return set(known)

    def build_ll_table(self) -> ParseTable:
        """Compute FIRST and FOLLOW sets and the LL(1) parse table."""
        table = ParseTable(self.variables, set(self.terminals) | {END_OF_STREAM})
        first_set = {variable: self._first(variable, table) for variable in sorted(self.variables)}
        table.set_first_set(first_set)
        follow_set: dict[str, set[str]] = {}
        for variable in sorted(self.variables):
            follow_set[variable] = self._follow(variable, first_set, follow_set)
        table.set_follow_set(follow_set)
        return table

    def ll(self) -> ParseTable:
        """Build the LL(1) table, print the sets and the table, and return it."""
        print(">>> Building LL(1) Table")
        table = self.build_ll_table()
        print(" >> FIRST:")
        for variable in sorted(self.variables):
            print(f"    {variable}: {set_to_string(table.first_set.get(variable, ()))}")
        print(" >> FOLLOW:")
        for variable in sorted(self.variables):
            print(f"    {variable}: {set_to_string(table.follow_set.get(variable, ()))}")
        print(">>> Table is built.\n")
        print("-------------------------------------\n")
        print(format_table(table))
        return table