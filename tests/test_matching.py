import pytest

from fastwild.matching import fast_wild_compare_ascii, fast_wild_compare_utf8

LONG_AB = (
    "abababababababababababababababababababaacacacacaca"
    "cacadaeafagahaiajakalaaaaaaaaaaaaaaaaaffafagaagggagaaaaaaaab"
)
LONG_A = (
    "aaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaa"
    "aaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaab"
)
ABC_STARS = (
    "abc*abcd*abcde*abcdef*abcdefg*abcdefgh*abcdefghi*a"
    "bcdefghij*abcdefghijk*abcdefghijkl*abcdefghijklm*abcdefghijklmn"
)
ABC_RUN = (
    "abcabcdabcdeabcdefabcdefgabcdefghabcdefghia"
    "bcdefghijabcdefghijkabcdefghijklabcdefghijklmabcdefghijklmn"
)

# Each case is (tame, wild, expected).
WILD_CASES = [
    ("Hi", "Hi*", True),
    ("abc", "ab*d", False),
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
    ("aaazz", "a*zz*", True),
    ("a12b12", "*12*23", False),
    ("a12b12", "a12b", False),
    ("a12b12", "*12*12*", True),
    ("caaab", "*a?b", True),
    ("*", "*", True),
    ("a*abab", "a*b", True),
    ("a*r", "a*", True),
    ("a*ar", "a*aar", False),
    ("XYXYXYZYXYz", "XY*Z*XYz", True),
    ("missisSIPpi", "*SIP*", True),
    ("mississipPI", "*issip*PI", True),
    ("miSsissippi", "mi*sip*", True),
    ("miSsissippi", "mi*Sip*", False),
    ("abAbac", "*Abac*", True),
    ("aAazz", "a*zz*", True),
    ("A12b12", "*12*23", False),
    ("a12B12", "*12*12*", True),
    ("oWn", "*oWn*", True),
    ("bLah", "bLah", True),
    ("bLah", "bLaH", False),
    ("a", "*?", True),
    ("ab", "*?", True),
    ("abc", "*?", True),
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
    ("bLah", "bL?h", True),
    ("bLaaa", "bLa?", False),
    ("bLah", "bLa?", True),
    ("bLaH", "?Lah", False),
    ("bLaH", "?LaH", True),
    (LONG_A, "a*a*a*a*a*a*aa*aaa*a*a*b", True),
    (LONG_AB, "*a*b*ba*ca*a*aa*aaa*fa*ga*b*", True),
    (LONG_AB, "*a*b*ba*ca*a*x*aaa*fa*ga*b*", False),
    (LONG_AB, "*a*b*ba*ca*aaaa*fa*ga*gggg*b*", False),
    (LONG_AB, "*a*b*ba*ca*aaaa*fa*ga*ggg*b*", True),
    ("aaabbaabbaab", "*aabbaa*a*", True),
    (
        "a*a*a*a*a*a*a*a*a*a*a*a*a*a*a*a*a*",
        "a*a*a*a*a*a*a*a*a*a*a*a*a*a*a*a*a*",
        True,
    ),
    ("aaaaaaaaaaaaaaaaa", "*a*a*a*a*a*a*a*a*a*a*a*a*a*a*a*a*a*", True),
    ("aaaaaaaaaaaaaaaa", "*a*a*a*a*a*a*a*a*a*a*a*a*a*a*a*a*a*", False),
    (
        ABC_STARS,
        "abc*abc*abc*abc*abc*abc*abc*abc*abc*abc*abc*abc*abc*abc*abc*abc*a"
        "bc*",
        False,
    ),
    (ABC_STARS, "abc*abc*abc*abc*abc*abc*abc*abc*abc*abc*abc*abc*", True),
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
    ("", "?", False),
    ("", "*?", False),
    ("", "", True),
    ("a", "", False),
]

TAME_CASES = [
    ("abc", "abd", False),
    ("abcccd", "abcccd", True),
    ("mississipissippi", "mississipissippi", True),
    ("xxxxzzzzzzzzyf", "xxxxzzzzzzzzyfffff", False),
    ("xxxxzzzzzzzzyf", "xxxxzzzzzzzzyf", True),
    ("xxxxzzzzzzzzyf", "xxxxzzy.fffff", False),
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
    ("miSsissippi", "miSsissippi", True),
    ("miSsissippi", "miSsisSippi", False),
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
    (LONG_A, LONG_A, True),
    (LONG_AB, LONG_AB, True),
    (
        LONG_AB,
        "abababababababababababababababababababaacacacacaca"
        "cacadaeafagahaiajaxalaaaaaaaaaaaaaaaaaffafagaagggagaaaaaaaab",
        False,
    ),
    (
        LONG_AB,
        "abababababababababababababababababababaacacacacaca"
        "cacadaeafagahaiajakalaaaaaaaaaaaaaaaaaffafagaggggagaaaaaaaab",
        False,
    ),
    ("aaabbaabbaab", "aaabbaabbaab", True),
    ("aaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaa", "aaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaa", True),
    ("aaaaaaaaaaaaaaaaa", "aaaaaaaaaaaaaaaaa", True),
    ("aaaaaaaaaaaaaaaa", "aaaaaaaaaaaaaaaaa", False),
    (ABC_RUN, "abcabcabcabcabcabcabcabcabcabcabcabcabcabcabcabcabc", False),
    (ABC_RUN, ABC_RUN, True),
    ("abcabcdabcdabcabcd", "abcabc?abcabcabc", False),
    (
        "abcabcdabcdabcabcdabcdabcabcdabcabcabcd",
        "abcabc?abc?abcabc?abc?abc?bc?abc?bc?bcd",
        True,
    ),
    ("?abc?", "?abc?", True),
]

_EMPTY_OTHERS = [
    "abd", "abcccd", "mississipissippi", "xxxxzzzzzzzzyfffff",
    "xxxxzzzzzzzzyf", "xxxxzzy.fffff", "xyxyxyzyxyz", "mississippi",
    "xyxyxyxyz", "m ississippi", "ababac*", "ababac", "aaazz", "1212",
    "a12b", "a12b12", "n", "aabab", "ar", "aaar", "XYXYXYZYXYz",
    "missisSIPpi", "mississipPI", "miSsissippi", "miSsisSippi", "abAbac",
    "aAazz", "A12b123", "a12B12", "oWn", "bLah", "bLaH",
]
_EMPTY_TAMES = [
    "abc", "abcccd", "mississipissippi", "xxxxzzzzzzzzyf", "xyxyxyzyxyz",
    "mississippi", "xyxyxyxyz", "m ississippi", "ababac", "dababac",
    "aaazz", "a12b12", "n", "aabab", "ar", "aar", "XYXYXYZYXYz",
    "missisSIPpi", "mississipPI", "miSsissippi", "abAbac", "aAazz",
    "A12b12", "a12B12", "oWn", "bLah",
]
EMPTY_CASES = (
    [("", wild, False) for wild in _EMPTY_OTHERS]
    + [("", "", True)]
    + [(tame, "", False) for tame in _EMPTY_TAMES]
)

ALL_CASES = WILD_CASES + TAME_CASES + EMPTY_CASES

# Case-insensitive comparisons: both sides are lowercased first.
UTF8_CASES = [
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
    (
        "ગિન્સબર્ગની શ્રેષ્ઠ પ્રશંસા કરવા માટે મારે અંગ્રેજી શીખવું પડશે.",
        "* શ્રેષ્ઠ પ્રશંસા કરવા માટે મારે * શીખવું પડશે.",
        True,
    ),
    (
        "ગિન્સબર્ગની શ્રેષ્ઠ પ્રશંસા કરવા માટે મારે અંગ્રેજી શીખવું પડશે.",
        "??????????? શ્રેષ્ઠ પ્રશંસા કરવા માટે મારે * શીખવું પડશે.",
        True,
    ),
    (
        "ગિન્સબર્ગની શ્રેષ્ઠ પ્રશંસા કરવા માટે મારે અંગ્રેજી શીખવું પડશે.",
        "ગિન્સબર્ગની શ્રેષ્ઠ પ્રશંસા કરવા માટે મારે હિબ્રુ ભાષા શીખવી પડશે.",
        False,
    ),
    ("ḪؿꜪἪꜿ", "ḪؿꜪἪꜿ", True),
    ("ḪؿUἪꜿ", "ḪؿꜪἪꜿ", False),
    ("ḪؿꜪἪꜿ", "ḪؿꜪἪꜿЖ", False),
    ("ḪؿꜪἪꜿ", "ЬḪؿꜪἪꜿ", False),
    ("ḪؿꜪἪꜿ", "?ؿꜪ*ꜿ", True),
]


@pytest.mark.parametrize("tame,wild,expected", ALL_CASES)
def test_ascii(tame, wild, expected):
    assert fast_wild_compare_ascii(wild, tame) is expected


@pytest.mark.parametrize("tame,wild,expected", ALL_CASES)
def test_utf8_on_ascii_cases(tame, wild, expected):
    assert fast_wild_compare_utf8(wild, tame) is expected


@pytest.mark.parametrize("tame,wild,expected", ALL_CASES)
def test_ascii_accepts_bytes(tame, wild, expected):
    assert fast_wild_compare_ascii(wild.encode(), tame.encode()) is expected


@pytest.mark.parametrize("tame,wild,expected", UTF8_CASES)
def test_utf8_case_insensitive(tame, wild, expected):
    assert fast_wild_compare_utf8(wild.lower(), tame.lower()) is expected


@pytest.mark.parametrize("tame,wild,expected", UTF8_CASES)
def test_utf8_accepts_character_lists(tame, wild, expected):
    assert fast_wild_compare_utf8(list(wild.lower()), list(tame.lower())) is expected


def test_utf8_case_sensitive_without_lowering():
    assert fast_wild_compare_utf8("abc?", "AbCD") is False


def test_ascii_question_mark_matches_one_byte():
    assert fast_wild_compare_ascii("?", "é") is False
    assert fast_wild_compare_ascii("??", "é") is True


def test_utf8_question_mark_matches_one_code_point():
    assert fast_wild_compare_utf8("?", "é") is True
    assert fast_wild_compare_utf8("??", "é") is False


def test_ascii_rejects_non_text():
    with pytest.raises(TypeError):
        fast_wild_compare_ascii(["*"], "abc")


def test_utf8_rejects_bytes():
    with pytest.raises(TypeError):
        fast_wild_compare_utf8(b"*", "abc")


@pytest.mark.parametrize("text", ["", "a", "abc", "mississippi", "*?*"])
def test_star_matches_anything(text):
    assert fast_wild_compare_ascii("*", text) is True
    assert fast_wild_compare_utf8("*", text) is True


@pytest.mark.parametrize("text", ["a", "abc", "mississippi", "x y z"])
def test_text_matches_itself(text):
    assert fast_wild_compare_ascii(text, text) is True
    assert fast_wild_compare_utf8(text, text) is True