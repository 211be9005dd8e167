# fastwild

Wildcard matching for text. A pattern may hold `*`, which matches any run of
characters (including none), and `?`, which matches exactly one character.
Every other character must match exactly. Matching is case-sensitive, and the
pattern must account for the whole text, not just part of it.

After each `*` the matcher looks ahead for the next possible match and keeps
a single fallback position. It never backtracks further than the most recent
`*`, so it stays fast on long inputs with many wildcards.

The package has no dependencies beyond the standard library.

## Installation

```
pip install fastwild
```

## Usage

```python
from fastwild.matching import fast_wild_compare_ascii, fast_wild_compare_utf8

fast_wild_compare_ascii("Hi*", "Hi")                      # True
fast_wild_compare_ascii("ab*d", "abc")                    # False
fast_wild_compare_ascii("*issip*ss*", "mississipissippi") # True
fast_wild_compare_ascii("bL?h", "bLah")                   # True

fast_wild_compare_utf8("*☂🐉", "🐂🚀♥☂🐉")                   # True
fast_wild_compare_utf8("𓋍𓋔?", "𓋍𓋔𓎍")                      # True
```

The pattern always comes first and the text to test second. Both functions
return a `bool`.

- `fast_wild_compare_ascii(wild, tame)` takes `str`, `bytes` or `bytearray`.
  A `str` is encoded as UTF-8 and compared one byte at a time, so `?` stands
  for exactly one byte. Use it for ASCII text. Any other argument type raises
  `TypeError`.
- `fast_wild_compare_utf8(wild, tame)` takes strings or sequences of
  single-character strings (such as `list("text")`) and compares one code
  point at a time, so `?` stands for one whole character, whatever its
  script. Passing `bytes` or `bytearray` raises `TypeError`.

Neither function folds case. To match without regard to case, lower-case
both arguments before you pass them in.

A `*` or `?` in the text to test is an ordinary character there. Only the
pattern gives these characters their wildcard meaning.

## Reference suites

`fastwild.suites` holds known pattern/text pairs and the expected result for
each, as frozen `Case(tame, wild, expected)` records:

- `tame_cases()`: patterns with no `*`.
- `wild_cases(include_extra=True)`: patterns using `*` and `?`;
  `include_extra` adds the `("caaab", "*a?b")` case.
- `empty_cases()`: the text, the pattern or both are empty.
- `utf8_cases()`: international text and symbols, meant to be checked
  without regard to case.

`Mode` chooses which matchers check a case: `"ascii"`, `"utf8"`,
`"caseless"` (the code-point matcher on lower-cased inputs) or `"both"`
(the byte matcher and the code-point matcher).

`check_case(case, mode="ascii")` returns `True` when every selected matcher
gives the expected result.

`run_suite(name, cases, reps=1, mode="ascii")` checks every case `reps` times
and returns a `SuiteResult` with:

- `name`
- `checked`: the number of checks made
- `failures`: the failing cases, each listed once
- `timings`: cumulative seconds per matcher, counted only for checks that
  passed
- `passed`
- `summary`, such as `"Passed wildcard tests"`

## Command line

The `fastwild` command runs the reference suites and prints one verdict line
per suite. It exits with status 0 when every suite passed, and 1 otherwise.

```
fastwild [--performance] [--reps N] [--no-tame] [--no-empty] [--no-wild] [--utf8]
```

- By default it runs the tame, empty and wildcard suites once each, with the
  byte matcher.
- `--performance` checks every case with both matchers, repeats the tame
  and empty suites 1,000,000 times, adds the extra wildcard case, and prints
  the cumulative time of each matcher in whole seconds.
- `--reps N` sets how many times the tame and empty suites run (N ≥ 1).
- `--no-tame`, `--no-empty` and `--no-wild` skip a suite.
- `--utf8` also runs the UTF-8 suite, checked without regard to case.

To list the options:

```
fastwild --help
```

## What it does not do

The only wildcards are `*` and `?`. There are no character classes (`[a-z]`),
no escape for a literal `*` or `?` in a pattern, and no case folding. The
package matches strings only; it does not expand patterns against file names
on disk.