import pytest

from grammarkit.tables import (
    AssociationGroup,
    ParseTable,
    TableObject,
    cartesian_product,
    find_existing_rule,
)


def test_cartesian_product_pairs_every_element():
    left = {"A", "B", "C"}
    right = {"X", "Y"}
    result = cartesian_product(left, right)
    assert len(result) == len(left) * len(right)
    for item in result:
        first, second = item.split(" ")
        assert first in left
        assert second in right


def test_cartesian_product_single():
    assert cartesian_product({"A"}, {"B"}) == {"A B"}


def test_cartesian_product_with_empty_set():
    assert cartesian_product({"A"}, set()) == set()
    assert cartesian_product(set(), {"A"}) == set()


def test_find_existing_rule_collects_heads():
    productions = {"A": {"a", "B C"}, "B": {"b"}, "C": {"a"}}
    assert find_existing_rule("a", productions) == {"A", "C"}
    assert find_existing_rule("B C", productions) == {"A"}
    assert find_existing_rule("z", productions) == set()


def test_token_combinations_single_character():
    assert TableObject("a").token_combinations() == {("a", "")}


def test_token_combinations_rejoin_to_token():
    token = "abcd"
    combos = TableObject(token).token_combinations()
    assert len(combos) == len(token) - 1
    for prefix, suffix in combos:
        assert prefix + suffix == token
        assert prefix and suffix


def test_token_combinations_three():
    assert TableObject("abc").token_combinations() == {("a", "bc"), ("ab", "c")}


def test_association_group_round_trip():
    group = AssociationGroup()
    group.associate("ab", {"A", "B"})
    assert group.variables_for("ab") == {"A", "B"}
    assert group.variables_for("missing") == set()


def test_association_group_overwrites():
    group = AssociationGroup()
    group.associate("a", {"A"})
    group.associate("a", {"B"})
    assert group.variables_for("a") == {"B"}


def test_set_parse_rule_conflict_becomes_error():
    table = ParseTable({"S"}, {"a"})
    table.set_parse_rule("S", "a", "`a`")
    assert table.table["S"]["a"] == "`a`"
    table.set_parse_rule("S", "a", "`a`")
    assert table.table["S"]["a"] == "`a`"
    table.set_parse_rule("S", "a", "`a S`")
    assert table.table["S"]["a"] == "<ERR>"
    table.set_parse_rule("S", "a", "`a`")
    assert table.table["S"]["a"] == "<ERR>"


def test_follow_set_requires_first_set():
    table = ParseTable({"S"}, {"a"})
    with pytest.raises(RuntimeError):
        table.set_follow_set({"S": {"<EOS>"}})


def test_follow_set_applies_rules_and_fills_errors():
    table = ParseTable({"S", "A"}, {"a", "<EOS>"})
    table.set_parse_rule("S", "a", "`a S`")
    table.set_follow_rule("S", " ")
    table.set_first_set({"S": {"a", " "}, "A": set()})
    table.set_follow_set({"S": {"<EOS>"}, "A": set()})
    assert table.table["S"]["a"] == "`a S`"
    assert table.table["S"]["<EOS>"] == " "
    assert table.table["A"] == {"a": "<ERR>", "<EOS>": "<ERR>"}
    assert table.first_set["S"] == {"a", " "}
    assert table.follow_set["S"] == {"<EOS>"}


def test_follow_rule_conflict_with_first_rule():
    table = ParseTable({"S"}, {"a"})
    table.set_parse_rule("S", "a", "`a`")
    table.set_follow_rule("S", " ")
    table.set_first_set({"S": {"a", " "}})
    table.set_follow_set({"S": {"a"}})
    assert table.table["S"]["a"] == "<ERR>"