"""Boundary rules and constant tables for the sentence splitter."""

import re


# Sentence enders (Latin and CJK full-width)
LATIN_ENDERS = ".!?"
CJK_ENDERS = "\u3002\uff01\uff1f"  # 。！？
SENTENCE_ENDERS = LATIN_ENDERS + CJK_ENDERS

# Protected abbreviations (compared case-insensitively against the last token)
ABBREVIATIONS = frozenset(
    abbr.lower()
    for abbr in (
        # Titles
        "Mr.", "Mrs.", "Ms.", "Dr.", "Prof.", "Sr.", "Jr.",
        # Academic / degrees
        "Ph.D.", "M.D.", "B.A.", "M.A.",
        # Countries / organisations
        "U.S.A.", "U.K.", "U.S.", "Inc.", "Corp.", "Ltd.",
        # Misc
        "vs.", "etc.", "e.g.", "i.e.", "St.", "Ave.", "Blvd.", "Rd.",
        "No.", "Vol.", "pp.", "a.m.", "p.m.", "A.M.", "P.M.",
    )
)

# Opening and closing quotation marks (straight, curly and CJK corner brackets)
OPENING_QUOTES = "\"'\u201c\u2018\u300c\u300e"  # " ' “ ‘ 「 『
CLOSING_QUOTES = "\"'\u201d\u2019\u300d\u300f"  # " ' ” ’ 」 』

CJK_PATTERN = re.compile(r"[\u4e00-\u9fa5]")
UPPERCASE_PATTERN = re.compile(r"[A-Z]")

ORDINAL_PATTERN = re.compile(r"^\d+\.$")
INITIAL_PATTERN = re.compile(r"^[A-Z]\.$")
ACRONYM_PATTERN = re.compile(r"^[A-Z]{1,5}\.$")
NUMBERED_LINE_PATTERN = re.compile(r"^(\d+\.\s*)")  # marker plus the spacing after it

PUNCTUATION_ONLY_PATTERN = re.compile(r"^[^\w\u4e00-\u9fa5]+$")
NUMERIC_ONLY_PATTERN = re.compile(r"^[\d\s\-.,()]+$")


def is_cjk(char: str | None) -> bool:
    """Return True for a single CJK unified ideograph."""
    return bool(char) and CJK_PATTERN.match(char) is not None


def is_uppercase_latin(char: str | None) -> bool:
    return bool(char) and UPPERCASE_PATTERN.match(char) is not None


def last_token(text: str) -> str:
    """Return the last whitespace-delimited token of text."""
    tokens = text.split()
    return tokens[-1] if tokens else ""


def is_abbreviation(text: str, abbreviations: frozenset = ABBREVIATIONS) -> bool:
    """Check whether the trailing token of text is a non-terminal period.

    Covers the protected abbreviation table, ordinals such as ``12.``,
    initials such as ``J.`` and short acronyms such as ``NASA.``.

    Args:
        text: Current sentence buffer, ending with the punctuation just seen
        abbreviations: Lower-cased abbreviation table

    Returns:
        True if the period must not end the sentence
    """
    token = last_token(text)
    if not token:
        return False

    if token.lower() in abbreviations:
        return True

    if ORDINAL_PATTERN.match(token):
        return True

    if INITIAL_PATTERN.match(token):
        return True

    if ACRONYM_PATTERN.match(token):
        return True

    return False


def is_cjk_boundary(char: str, next_char: str | None) -> bool:
    """CJK sentence-final punctuation directly followed by a CJK character."""
    return char in CJK_ENDERS and is_cjk(next_char)


def is_boundary_lookahead(char: str, next_char: str | None) -> bool:
    """Decide a boundary from the character following a sentence ender.

    A boundary is confirmed at end of text, before whitespace, before an
    uppercase Latin letter, or when any ender runs straight into CJK text.
    """
    if not next_char:
        return True
    if next_char.isspace():
        return True
    if is_uppercase_latin(next_char):
        return True
    return char in SENTENCE_ENDERS and is_cjk(next_char)


def ends_with_terminal(sentence: str) -> bool:
    return bool(sentence) and sentence[-1] in SENTENCE_ENDERS


def is_valid_sentence(sentence: str) -> bool:
    """Reject degenerate sentences (too short, punctuation-only, numeric-only)."""
    if len(sentence) < 3:
        return False
    if PUNCTUATION_ONLY_PATTERN.match(sentence):
        return False
    if NUMERIC_ONLY_PATTERN.match(sentence):
        return False
    return True


def opens_unclosed_quote(sentence: str) -> bool:
    return (
        bool(sentence)
        and sentence[0] in OPENING_QUOTES
        and sentence[-1] not in CLOSING_QUOTES
    )


def should_merge(current: str, following: str, short_fragment_length: int = 15) -> bool:
    """Decide whether two adjacent sentences belong together.

    Rule a: current opens a quotation that the following sentence closes.
    Rule b: current is a short fragment without terminal punctuation.
    """
    if opens_unclosed_quote(current) and following and following[-1] in CLOSING_QUOTES:
        return True

    if len(current) < short_fragment_length and not ends_with_terminal(current):
        return True

    return False
