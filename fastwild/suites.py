"""Reference cases for the wildcard matchers and a runner that checks them."""

from __future__ import annotations

import time
from collections import defaultdict
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from enum import Enum

from fastwild.matching import fast_wild_compare_ascii, fast_wild_compare_utf8

__all__ = [
    "Case",
    "Mode",
    "SuiteResult",
    "tame_cases",
    "wild_cases",
    "empty_cases",
    "utf8_cases",
    "check_case",
    "run_suite",
]


@dataclass(frozen=True)
class Case:
    """One comparison: ``tame`` text, ``wild`` pattern and the expected outcome."""

    tame: str
    wild: str
    expected: bool


class Mode(str, Enum):
    """Which matchers a case is checked with."""

    ASCII = "ascii"
    UTF8 = "utf8"
    CASELESS = "caseless"
    BOTH = "both"


@dataclass(frozen=True)
class SuiteResult:
    """Outcome of running a suite of cases one or more times."""

    name: str
    checked: int
    failures: tuple[Case, ...] = ()
    timings: dict[str, float] = field(default_factory=dict)

    @property
    def passed(self) -> bool:
        return not self.failures

    @property
    def summary(self) -> str:
        verdict = "Passed" if self.passed else "Failed"
        return f"{verdict} {self.name} tests"


_AAB = (
    "aaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaa"
    "aaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaab"
)
_ABAB = (
    "abababababababababababababababababababaacacacacaca"
    "cacadaeafagahaiajakalaaaaaaaaaaaaaaaaaffafagaagggagaaaaaaaab"
)
_ABC_STARS = (
    "abc*abcd*abcde*abcdef*abcdefg*abcdefgh*abcdefghi*a"
    "bcdefghij*abcdefghijk*abcdefghijkl*abcdefghijklm*abcdefghijklmn"
)
_ABC_RUN = (
    "abcabcdabcdeabcdefabcdefgabcdefghabcdefghia"
    "bcdefghijabcdefghijkabcdefghijklabcdefghijklmabcdefghijklmn"
)

_WILD_HEAD = (
    # First wildcard after a total match.
    ("Hi", "Hi*", True),
    # Mismatch after '*'.
    ("abc", "ab*d", False),
    # Repeating character sequences.
    ("abcccd", "*ccd", True),
    ("mississipissippi", "*issip*ss*", True),
    ("xxxx*zzzzzzzzy*f", "xxxx*zzy*fffff", False),
    ("xxxx*zzzzzzzzy*f", "xxx*zzy*f", True),
    ("xxxxzzzzzzzzyf", "xxxx*zzy*fffff", False),
    ("xxxxzzzzzzzzyf", "xxxx*zzy*f", True),
    ("xyxyxyzyxyz", "xy*z*xyz", True),
    ("mississippi", "*sip*", True),
    ("xyxyxyxyz", "xy*xyz", True),
    ("mississippi", "mi*sip*", True),
    ("ababac", "*abac*", True),
    ("ababac", "*abac*", True),
    ("aaazz", "a*zz*", True),
    ("a12b12", "*12*23", False),
    ("a12b12", "a12b", False),
    ("a12b12", "*12*12*", True),
)

_WILD_EXTRA = (("caaab", "*a?b", True),)

_WILD_TAIL = (
    # '*' appearing in the tame text.
    ("*", "*", True),
    ("a*abab", "a*b", True),
    ("a*r", "a*", True),
    ("a*ar", "a*aar", False),
    # More double wildcard scenarios.
    ("XYXYXYZYXYz", "XY*Z*XYz", True),
    ("missisSIPpi", "*SIP*", True),
    ("mississipPI", "*issip*PI", True),
    ("xyxyxyxyz", "xy*xyz", True),
    ("miSsissippi", "mi*sip*", True),
    ("miSsissippi", "mi*Sip*", False),
    ("abAbac", "*Abac*", True),
    ("abAbac", "*Abac*", True),
    ("aAazz", "a*zz*", True),
    ("A12b12", "*12*23", False),
    ("a12B12", "*12*12*", True),
    ("oWn", "*oWn*", True),
    # Completely tame.
    ("bLah", "bLah", True),
    ("bLah", "bLaH", False),
    # Simple mixed wildcards.
    ("a", "*?", True),
    ("ab", "*?", True),
    ("abc", "*?", True),
    # Mixed wildcards including false positives.
    ("a", "??", False),
    ("ab", "?*?", True),
    ("ab", "*?*?*", True),
    ("abc", "?**?*?", True),
    ("abc", "?**?*&?", False),
    ("abcd", "?b*??", True),
    ("abcd", "?a*??", False),
    ("abcd", "?**?c?", True),
    ("abcd", "?**?d?", False),
    ("abcde", "?*b*?*d*?", True),
    # Single-character matches.
    ("bLah", "bL?h", True),
    ("bLaaa", "bLa?", False),
    ("bLah", "bLa?", True),
    ("bLaH", "?Lah", False),
    ("bLaH", "?LaH", True),
    # Many wildcards.
    (_AAB, "a*a*a*a*a*a*aa*aaa*a*a*b", True),
    (_ABAB, "*a*b*ba*ca*a*aa*aaa*fa*ga*b*", True),
    (_ABAB, "*a*b*ba*ca*a*x*aaa*fa*ga*b*", False),
    (_ABAB, "*a*b*ba*ca*aaaa*fa*ga*gggg*b*", False),
    (_ABAB, "*a*b*ba*ca*aaaa*fa*ga*ggg*b*", True),
    ("aaabbaabbaab", "*aabbaa*a*", True),
    (
        "a*a*a*a*a*a*a*a*a*a*a*a*a*a*a*a*a*",
        "a*a*a*a*a*a*a*a*a*a*a*a*a*a*a*a*a*",
        True,
    ),
    ("aaaaaaaaaaaaaaaaa", "*a*a*a*a*a*a*a*a*a*a*a*a*a*a*a*a*a*", True),
    ("aaaaaaaaaaaaaaaa", "*a*a*a*a*a*a*a*a*a*a*a*a*a*a*a*a*a*", False),
    (
        _ABC_STARS,
        "abc*abc*abc*abc*abc*abc*abc*abc*abc*abc*abc*abc*abc*abc*abc*abc*abc*",
        False,
    ),
    (_ABC_STARS, "abc*abc*abc*abc*abc*abc*abc*abc*abc*abc*abc*abc*", True),
    ("abc*abcd*abcd*abc*abcd", "abc*abc*abc*abc*abc", False),
    (
        "abc*abcd*abcd*abc*abcd*abcd*abc*abcd*abc*abc*abcd",
        "abc*abc*abc*abc*abc*abc*abc*abc*abc*abc*abcd",
        True,
    ),
    ("abc", "********a********b********c********", True),
    ("********a********b********c********", "abc", False),
    ("abc", "********a********b********b********", False),
    ("*abc*", "***a*b*c***", True),
    # Empty-input edge cases.
    ("", "?", False),
    ("", "*?", False),
    ("", "", True),
    ("a", "", False),
)

_TAME = (
    ("abc", "abd", False),
    ("abcccd", "abcccd", True),
    ("mississipissippi", "mississipissippi", True),
    ("xxxxzzzzzzzzyf", "xxxxzzzzzzzzyfffff", False),
    ("xxxxzzzzzzzzyf", "xxxxzzzzzzzzyf", True),
    ("xxxxzzzzzzzzyf", "xxxxzzy.fffff", False),
    ("xxxxzzzzzzzzyf", "xxxxzzzzzzzzyf", True),
    ("xyxyxyzyxyz", "xyxyxyzyxyz", True),
    ("mississippi", "mississippi", True),
    ("xyxyxyxyz", "xyxyxyxyz", True),
    ("m ississippi", "m ississippi", True),
    ("ababac", "ababac?", False),
    ("dababac", "ababac", False),
    ("aaazz", "aaazz", True),
    ("a12b12", "1212", False),
    ("a12b12", "a12b", False),
    ("a12b12", "a12b12", True),
    ("n", "n", True),
    ("aabab", "aabab", True),
    ("ar", "ar", True),
    ("aar", "aaar", False),
    ("XYXYXYZYXYz", "XYXYXYZYXYz", True),
    ("missisSIPpi", "missisSIPpi", True),
    ("mississipPI", "mississipPI", True),
    ("xyxyxyxyz", "xyxyxyxyz", True),
    ("miSsissippi", "miSsissippi", True),
    ("miSsissippi", "miSsisSippi", False),
    ("abAbac", "abAbac", True),
    ("abAbac", "abAbac", True),
    ("aAazz", "aAazz", True),
    ("A12b12", "A12b123", False),
    ("a12B12", "a12B12", True),
    ("oWn", "oWn", True),
    ("bLah", "bLah", True),
    ("bLah", "bLaH", False),
    ("a", "a", True),
    ("ab", "a?", True),
    ("abc", "ab?", True),
    ("a", "??", False),
    ("ab", "??", True),
    ("abc", "???", True),
    ("abcd", "????", True),
    ("abc", "????", False),
    ("abcd", "?b??", True),
    ("abcd", "?a??", False),
    ("abcd", "??c?", True),
    ("abcd", "??d?", False),
    ("abcde", "?b?d*?", True),
    (_AAB, _AAB, True),
    (_ABAB, _ABAB, True),
    (
        _ABAB,
        "abababababababababababababababababababaacacacacaca"
        "cacadaeafagahaiajaxalaaaaaaaaaaaaaaaaaffafagaagggagaaaaaaaab",
        False,
    ),
    (
        _ABAB,
        "abababababababababababababababababababaacacacacaca"
        "cacadaeafagahaiajakalaaaaaaaaaaaaaaaaaffafagaggggagaaaaaaaab",
        False,
    ),
    (_ABAB, _ABAB, True),
    ("aaabbaabbaab", "aaabbaabbaab", True),
    ("aaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaa", "aaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaa", True),
    ("aaaaaaaaaaaaaaaaa", "aaaaaaaaaaaaaaaaa", True),
    ("aaaaaaaaaaaaaaaa", "aaaaaaaaaaaaaaaaa", False),
    (_ABC_RUN, "abcabcabcabcabcabcabcabcabcabcabcabcabcabcabcabcabc", False),
    (_ABC_RUN, _ABC_RUN, True),
    ("abcabcdabcdabcabcd", "abcabc?abcabcabc", False),
    (
        "abcabcdabcdabcabcdabcdabcabcdabcabcabcd",
        "abcabc?abc?abcabc?abc?abc?bc?abc?bc?bcd",
        True,
    ),
    ("?abc?", "?abc?", True),
)

_EMPTY_TAME_PATTERNS = (
    "abd",
    "abcccd",
    "mississipissippi",
    "xxxxzzzzzzzzyfffff",
    "xxxxzzzzzzzzyf",
    "xxxxzzy.fffff",
    "xxxxzzzzzzzzyf",
    "xyxyxyzyxyz",
    "mississippi",
    "xyxyxyxyz",
    "m ississippi",
    "ababac*",
    "ababac",
    "aaazz",
    "1212",
    "a12b",
    "a12b12",
    "n",
    "aabab",
    "ar",
    "aaar",
    "XYXYXYZYXYz",
    "missisSIPpi",
    "mississipPI",
    "xyxyxyxyz",
    "miSsissippi",
    "miSsisSippi",
    "abAbac",
    "abAbac",
    "aAazz",
    "A12b123",
    "a12B12",
    "oWn",
    "bLah",
    "bLaH",
)

_EMPTY_WILD_TEXTS = (
    "abc",
    "abcccd",
    "mississipissippi",
    "xxxxzzzzzzzzyf",
    "xxxxzzzzzzzzyf",
    "xxxxzzzzzzzzyf",
    "xxxxzzzzzzzzyf",
    "xyxyxyzyxyz",
    "mississippi",
    "xyxyxyxyz",
    "m ississippi",
    "ababac",
    "dababac",
    "aaazz",
    "a12b12",
    "a12b12",
    "a12b12",
    "n",
    "aabab",
    "ar",
    "aar",
    "XYXYXYZYXYz",
    "missisSIPpi",
    "mississipPI",
    "xyxyxyxyz",
    "miSsissippi",
    "miSsissippi",
    "abAbac",
    "abAbac",
    "aAazz",
    "A12b12",
    "a12B12",
    "oWn",
    "bLah",
    "bLah",
)

_GUJARATI = "ગિન્સબર્ગની શ્રેષ્ઠ પ્રશંસા કરવા માટે મારે અંગ્રેજી શીખવું પડશે."

_UTF8 = (
    ("🐂🚀♥🍀貔貅🦁★□√🚦€¥☯🐴😊🍓🐕🎺🧊☀☂🐉", "*☂🐉", True),
    ("AbCD", "abc?", True),
    ("AbC★", "abc?", True),
    ("▲●🐎✗🤣🐶♫🌻ॐ", "▲●☂*", False),
    ("𓋍𓋔𓎍", "𓋍𓋔?", True),
    ("𓋍𓋔𓎍", "𓋍?𓋔𓎍", False),
    ("♅☌♇", "♅☌♇", True),
    ("⚛⚖☁", "⚛🍄☁", False),
    ("⚛⚖☁o", "⚛⚖☁O", True),
    ("⚛⚖☁O", "⚛⚖☁0", False),
    (
        "गते गते पारगते पारसंगते बोधि स्वाहा",
        "गते गते पारगते प????गते बोधि स्वाहा",
        True,
    ),
    (
        "Мне нужно выучить русский язык, чтобы лучше оценить Пушкина.",
        "Мне нужно выучить * язык, чтобы лучше оценить *.",
        True,
    ),
    (
        "אני צריך ללמוד אנגלית כדי להעריך את גינסברג",
        " אני צריך ללמוד אנגלית כדי להעריך את ???????",
        False,
    ),
    (_GUJARATI, "* શ્રેષ્ઠ પ્રશંસા કરવા માટે મારે * શીખવું પડશે.", True),
    (_GUJARATI, "??????????? શ્રેષ્ઠ પ્રશંસા કરવા માટે મારે * શીખવું પડશે.", True),
    (
        _GUJARATI,
        "ગિન્સબર્ગની શ્રેષ્ઠ પ્રશંસા કરવા માટે મારે હિબ્રુ ભાષા શીખવી પડશે.",
        False,
    ),
    # Multi-byte code points containing the bytes of '*' and '?'.
    ("ḪؿꜪἪꜿ", "ḪؿꜪἪꜿ", True),
    ("ḪؿUἪꜿ", "ḪؿꜪἪꜿ", False),
    ("ḪؿꜪἪꜿ", "ḪؿꜪἪꜿЖ", False),
    ("ḪؿꜪἪꜿ", "ЬḪؿꜪἪꜿ", False),
    ("ḪؿꜪἪꜿ", "?ؿꜪ*ꜿ", True),
)


def _cases(rows: Iterable[tuple[str, str, bool]]) -> list[Case]:
    return [Case(tame, wild, expected) for tame, wild, expected in rows]


def tame_cases() -> list[Case]:
    """Cases whose patterns hold no '*' wildcard."""
    return _cases(_TAME)


def wild_cases(include_extra: bool = True) -> list[Case]:
    """Cases exercising '*' and '?'; ``include_extra`` adds the "*a?b" case."""
    rows = _WILD_HEAD + (_WILD_EXTRA if include_extra else ()) + _WILD_TAIL
    return _cases(rows)


def empty_cases() -> list[Case]:
    """Cases where the text, the pattern, or both are empty."""
    cases = [Case("", wild, False) for wild in _EMPTY_TAME_PATTERNS]
    cases.append(Case("", "", True))
    cases.extend(Case(tame, "", False) for tame in _EMPTY_WILD_TEXTS)
    return cases


def utf8_cases() -> list[Case]:
    """Case-insensitive cases with international text and symbols."""
    return _cases(_UTF8)


_Routine = Callable[[Case], bool]


def _ascii(case: Case) -> bool:
    return fast_wild_compare_ascii(case.wild, case.tame)


def _utf8(case: Case) -> bool:
    return fast_wild_compare_utf8(list(case.wild), list(case.tame))


def _caseless(case: Case) -> bool:
    return fast_wild_compare_utf8(list(case.wild.lower()), list(case.tame.lower()))


_ROUTINES: dict[Mode, tuple[tuple[str, _Routine], ...]] = {
    Mode.ASCII: (("fast_wild_compare_ascii", _ascii),),
    Mode.UTF8: (("fast_wild_compare_utf8", _utf8),),
    Mode.CASELESS: (("fast_wild_compare_utf8", _caseless),),
    Mode.BOTH: (
        ("fast_wild_compare_ascii", _ascii),
        ("fast_wild_compare_utf8", _utf8),
    ),
}


def _check(case: Case, mode: Mode, timings: dict[str, float]) -> bool:
    for name, routine in _ROUTINES[mode]:
        start = time.perf_counter()
        if routine(case) != case.expected:
            return False
        timings[name] += time.perf_counter() - start
    return True


def check_case(case: Case, mode: Mode | str = Mode.ASCII) -> bool:
    """Return True if every matcher selected by ``mode`` gives the expected result."""
    return _check(case, Mode(mode), defaultdict(float))


def run_suite(
    name: str,
    cases: Iterable[Case],
    reps: int = 1,
    mode: Mode | str = Mode.ASCII,
) -> SuiteResult:
    """Check every case ``reps`` times and collect failures and timings."""
    mode = Mode(mode)
    cases = list(cases)
    timings: dict[str, float] = defaultdict(float)
    failures: dict[Case, None] = {}
    checked = 0
    for _ in range(reps):
        for case in cases:
            checked += 1
            if not _check(case, mode, timings):
                failures.setdefault(case)
    return SuiteResult(
        name=name,
        checked=checked,
        failures=tuple(failures),
        timings=dict(timings),
    )