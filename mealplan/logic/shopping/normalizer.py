"""Ingredient name normalization.

Turns a raw recipe line such as ``"2 large boneless chicken breasts, diced"``
into a comparison key (``"chicken breast"``) and a display form
(``"Chicken breast"``). Best effort only: the singular rules cover common
grocery plurals, not English in general.
"""
import re
from typing import NamedTuple

from mealplan.utilities.constants import (
    IRREGULAR_PLURALS, MEASURE_UNITS, PLURAL_EXCEPTIONS, PREPARATION_QUALIFIERS
)

_NUMBER = r'(?:\d+(?:[.,/]\d+)?|[¼-¾⅐-⅞])'
_UNIT = r'(?:' + '|'.join(sorted((re.escape(u) for u in MEASURE_UNITS), key=len, reverse=True)) + r')\.?'
_LEADING_AMOUNT_RE = re.compile(
    rf'^{_NUMBER}(?:\s*{_NUMBER})*(?:\s*(?:-|to)\s*{_NUMBER})?\s*(?:{_UNIT}(?=\s|$)\s*)?(?:of\s+)?'
)
_QUALIFIER_RE = re.compile(
    r'\b(?:[a-z]+-)?(?:' + '|'.join(re.escape(q) for q in PREPARATION_QUALIFIERS) + r')\b', re.IGNORECASE
)
# A hyphen no longer joining two words ("sun- tomatoes" after a qualifier went away)
_LONE_HYPHEN_RE = re.compile(r"(?<![\w'])-|-(?![\w'])")
_PARENS_RE = re.compile(r'\([^)]*\)|\[[^\]]*\]')
_PUNCT_RE = re.compile(r"[^\w\s'-]")
_SPACE_RE = re.compile(r'\s+')
_CJK_RE = re.compile(r'[一-鿿]')


class NormalizedName(NamedTuple):
    key: str
    display: str


def contains_chinese(text: str) -> bool:
    return bool(_CJK_RE.search(text or ''))


def singularize(word: str) -> str:
    """Singular form of a single lower-case word (ASCII words only)."""
    if len(word) <= 3 or not word.isascii() or not word.isalpha():
        return word
    if word in PLURAL_EXCEPTIONS:
        return word
    if word in IRREGULAR_PLURALS:
        return IRREGULAR_PLURALS[word]
    if word.endswith('ies'):
        return word[:-3] + 'y'  # berries -> berry
    if word.endswith('oes'):
        return word[:-2]  # tomatoes -> tomato
    if word.endswith(('sses', 'ches', 'shes', 'xes', 'zzes')):
        return word[:-2]  # glasses -> glass, peaches -> peach
    if word.endswith(('ss', 'us', 'is')):
        return word
    if word.endswith('s'):
        return word[:-1]
    return word


def _strip(text: str) -> str:
    s = (text or '').lower().strip()
    s = _PARENS_RE.sub(' ', s)
    # "onion, finely chopped": the part after the first comma describes preparation
    head, sep, _ = s.partition(',')
    if sep and head.strip():
        s = head
    # Repeat until stable: "1 cup 2 tbsp sugar" and "fresh 2 cloves garlic" need more than one pass
    previous = None
    while s != previous:
        previous = s
        s = _LEADING_AMOUNT_RE.sub('', s.strip())
        s = _QUALIFIER_RE.sub(' ', s)
        s = _PUNCT_RE.sub(' ', s)
        s = _LONE_HYPHEN_RE.sub(' ', s)
        s = _SPACE_RE.sub(' ', s).strip(" -'")
        if s.startswith('of '):
            s = s[3:]
    return s


def normalize_ingredient(raw: str) -> NormalizedName:
    """Normalize a raw ingredient or food name.

    Never raises; empty or qualifier-only input yields ``NormalizedName('', '')``.
    """
    s = _strip(raw)
    if not s:
        return NormalizedName('', '')
    words = s.split(' ')
    words[-1] = singularize(words[-1])
    key = ' '.join(words)
    return NormalizedName(key, key[:1].upper() + key[1:])


def name_key(name: str) -> str:
    """Deduplication key used everywhere two names are compared."""
    return normalize_ingredient(name).key


def title_case(name: str) -> str:
    """Upper-case the first letter of every word, leaving the rest untouched."""
    return ' '.join(w[:1].upper() + w[1:] for w in (name or '').strip().split(' ') if w)
