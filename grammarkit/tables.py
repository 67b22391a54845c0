"""Data structures shared by the CYK and LL(1) algorithms."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

ERROR_ENTRY = "<ERR>"
END_OF_STREAM = "<EOS>"
EPSILON = " "


class ParseTable:
    """An LL(1) parse table together with the FIRST and FOLLOW sets it was built from."""

    def __init__(self, variables: Iterable[str], symbols: Iterable[str]) -> None:
        self.variables: set[str] = set(variables)
        self.symbols: set[str] = set(symbols)
        self.table: dict[str, dict[str, str]] = {}
        self.follow_rule: dict[str, set[str]] = {}
        self.first_set: dict[str, set[str]] = {}
        self.follow_set: dict[str, set[str]] = {}
        self.first_set_added = False

    def set_parse_rule(self, variable: str, symbol: str, production: str) -> None:
        """Store a production in a cell, marking the cell as an error on conflict."""
        row = self.table.setdefault(variable, {})
        current = row.get(symbol, "")
        if current and current != production:
            row[symbol] = ERROR_ENTRY
        else:
            row[symbol] = production

    def set_first_set(self, first_set: Mapping[str, Iterable[str]]) -> None:
        """Record the FIRST sets of the grammar."""
        self.first_set = {key: set(values) for key, values in first_set.items()}
        self.first_set_added = True

    def set_follow_set(self, follow_set: Mapping[str, Iterable[str]]) -> None:
        """Record the FOLLOW sets, apply pending follow rules and fill empty cells."""
        if not self.first_set_added:
            raise RuntimeError(
                "ParseTable error::function setFirstSet has to be called before setFollowSet"
            )
        self.follow_set = {key: set(values) for key, values in follow_set.items()}
        for variable, bodies in sorted(self.follow_rule.items()):
            for body in sorted(bodies):
                for value in sorted(self.follow_set.get(variable, ())):
                    self.set_parse_rule(variable, value, body)
        for variable in self.variables:
            row = self.table.setdefault(variable, {})
            for symbol in self.symbols:
                if not row.get(symbol):
                    row[symbol] = ERROR_ENTRY

    def set_follow_rule(self, variable: str, rule: str) -> None:
        """Remember a production that must be placed under FOLLOW(variable)."""
        self.follow_rule.setdefault(variable, set()).add(rule)


@dataclass
class TableObject:
    """One cell of the CYK table: a substring and the variables deriving it."""

    token: str = ""
    variables: set[str] = field(default_factory=set)

    def token_combinations(self) -> set[tuple[str, str]]:
        """All ways of splitting the token into a non-empty prefix and suffix."""
        if len(self.token) == 1:
            return {(self.token, "")}
        return {
            (self.token[: i + 1], self.token[i + 1 :])
            for i in range(len(self.token) - 1)
        }


class AssociationGroup:
    """Maps substrings to the set of variables that derive them."""

    def __init__(self) -> None:
        self._associations: dict[str, set[str]] = {}

    def associate(self, string: str, variables: Iterable[str]) -> None:
        self._associations[string] = set(variables)

    def variables_for(self, string: str) -> set[str]:
        return self._associations.setdefault(string, set())


def cartesian_product(set1: Iterable[str], set2: Iterable[str]) -> set[str]:
    """Every space-joined pair of a variable from set1 and one from set2."""
    second = list(set2)
    return {f"{first} {other}" for first in set1 for other in second}


def find_existing_rule(terminal: str, productions: Mapping[str, Iterable[str]]) -> set[str]:
    """The heads of all productions having the given body."""
    return {head for head, bodies in productions.items() if terminal in bodies}