# grammarkit

Tools for working with context-free grammars (CFGs) and pushdown automata (PDAs):

- read a grammar or an automaton from a JSON description,
- decide whether a string belongs to a grammar's language with the CYK algorithm,
- compute the FIRST and FOLLOW sets and the LL(1) parse table of a grammar,
- convert a PDA into an equivalent CFG with the triple construction.

It has no dependencies outside the standard library.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
grammarkit [PATH] [--cfg | --cyk STRING | --ll]
```

- `grammarkit pda.json` reads a pushdown automaton, converts it to a grammar
  and prints that grammar. Without `PATH`, the file `input-pda2cfg1.json` in
  the current directory is read.
- `grammarkit grammar.json --cfg` reads a grammar and prints it.
- `grammarkit grammar.json --cyk accbb` reads a grammar, prints the CYK table
  for the string (longest substrings on top) and then `true` or `false`.
- `grammarkit grammar.json --ll` reads a grammar and prints its FIRST and
  FOLLOW sets followed by the LL(1) parse table.

A grammar is printed as:

```
V = {A, S}
T = {a, b}
P = {
    A -> ``
    A -> `b`
    S -> `a A`
}
S = S
```

If the file cannot be read, is not valid JSON, lacks a required key, or the
CYK string is empty, the command prints `grammarkit: <error>` to standard
error and exits with status 1.

## Input formats

A grammar:

```json
{
  "Variables": ["S", "A"],
  "Terminals": ["a", "b"],
  "Start": "S",
  "Productions": [
    {"head": "S", "body": ["a", "A"]},
    {"head": "A", "body": ["b"]},
    {"head": "A", "body": []}
  ]
}
```

Production bodies are lists of symbols; they are stored joined by single
spaces, and an empty list is an epsilon production.

A pushdown automaton:

```json
{
  "States": ["q", "p"],
  "Alphabet": ["0", "1"],
  "StackAlphabet": ["Z0", "X"],
  "StartState": "q",
  "StartStack": "Z0",
  "Transitions": [
    {"from": "q", "input": "0", "stacktop": "Z0", "to": "q", "replacement": ["X", "Z0"]},
    {"from": "q", "input": "1", "stacktop": "X", "to": "p", "replacement": []}
  ]
}
```

The resulting grammar has start symbol `S`, the automaton's input alphabet as
terminals, and variables of the form `[state,stacksymbol,state]`.

## Library use

```python
from grammarkit.cfg import CFG
from grammarkit.pda import PDA

# PDA to CFG
grammar = PDA.from_file("pda.json").to_cfg()
grammar.print()

# CYK: prints the table and the verdict, and returns the verdict
cfg = CFG.from_file("grammar.json")
accepted = cfg.accepts("accbb")

# LL(1): prints FIRST, FOLLOW and the parse table, and returns the table
table = cfg.ll()
```

- `CFG.from_dict` and `PDA.from_dict` build from already-loaded data;
  `CFG.add_variable` and `CFG.add_production_rule` assemble a grammar by hand.
- `CFG.describe` returns the grammar's description as text instead of
  printing it.
- `CFG.acceptance_table` returns the CYK table as a list of rows of
  `grammarkit.tables.TableObject`, row `i` holding the substrings of length
  `i + 1`; it raises `ValueError` for an empty string.
- `CFG.build_ll_table` returns a `grammarkit.tables.ParseTable` without
  printing anything. Its `table`, `first_set` and `follow_set` attributes hold
  the results; `<EOS>` marks the end of input, `<ERR>` a cell that is empty or
  in conflict, and a single space stands for epsilon.
- `grammarkit.logger` renders these structures as text: `set_to_string`,
  `format_productions`, `format_acceptance_table`, `format_table`, and
  `format_json` for FIRST, FOLLOW and the LL(1) table as indented JSON.

## What it does not do

- It does not run a pushdown automaton on input; automata can only be
  converted to grammars. Accepting states are not read from the JSON
  description.
- It builds the LL(1) parse table but does not parse strings with it.
- The CYK check matches terminals character by character, so it expects a
  grammar in Chomsky normal form with single-character terminals; it does not
  convert grammars to that form.