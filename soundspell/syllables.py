# -*- coding: utf-8 -*-
"""
Syllable segmentation of a mapped SoundSpelling string.

1) split after every nucleus (42 vowel forms, bare before stressed),
2) leave a trailing vowel-less fragment alone (it is the previous syllable's coda),
3) put a hyphen before the onset of every other non-initial fragment, picking the
   first onset-catalog entry that matches (priority order, not longest match).
"""

from __future__ import annotations
from typing import List, Tuple

from .errors import EmptyInput
from .graphemes import Graphemes, as_pattern, contains, find, graphemes, insert_after_each
from .stress import SYLLABLE_SEP

BASE_VOWELS: Tuple[str, ...] = (
    "ŏ", "ē", "o͞o", "ĕ", "ĭ", "o͝o", "ŭ", "ă", "ā", "ī", "ō", "ow", "oy", "ur",
)

# bare forms, then primary-stress forms, then secondary-stress forms
VOWEL_CATALOG: Tuple[str, ...] = (
    BASE_VOWELS
    + tuple(v + "1" for v in BASE_VOWELS)
    + tuple(v + "2" for v in BASE_VOWELS)
)

# glide + rounded vowel; these already contain their nucleus
GLIDE_ONSETS: Tuple[str, ...] = ("pyo͞o", "byo͞o", "myo͞o", "fyo͞o", "kyo͞o", "hyo͞o")

# only accepted when directly followed by a base vowel
CONSONANT_ONSETS: Tuple[str, ...] = (
    "spl", "spr", "str", "skr", "skw",
    "tw", "kw", "sw",
    "pr", "br", "fr", "thr", "tr", "dr", "shr", "kr", "gr",
    "pl", "bl", "fl", "kl", "gl", "sl",
    "sp", "sm", "st", "sn", "sk",
    "ch", "th", "dh", "sh", "zh", "ng",
    "h", "p", "b", "t", "d", "k", "g", "j", "f", "v", "s", "z",
    "m", "n", "l", "r", "w", "y",
)

_VOWEL_PATTERNS: Tuple[Graphemes, ...] = tuple(as_pattern(v) for v in VOWEL_CATALOG)
_BASE_VOWEL_PATTERNS: Tuple[Graphemes, ...] = tuple(as_pattern(v) for v in BASE_VOWELS)
_GLIDE_PATTERNS: Tuple[Graphemes, ...] = tuple(as_pattern(o) for o in GLIDE_ONSETS)
_ONSET_VOWEL_PATTERNS: Tuple[Tuple[Graphemes, ...], ...] = tuple(
    tuple(as_pattern(o) + v for v in _BASE_VOWEL_PATTERNS) for o in CONSONANT_ONSETS
)

_SPLIT = " "


def split_nuclei(symbols: str) -> List[List[str]]:
    """Fragments (as grapheme lists), each ending right after a nucleus, plus any tail."""
    seq = graphemes(symbols)
    for pat in _VOWEL_PATTERNS:
        if contains(seq, pat):
            seq = insert_after_each(seq, pat, _SPLIT)
    fragments: List[List[str]] = []
    cur: List[str] = []
    for g in seq:
        if g.isspace():
            if cur:
                fragments.append(cur)
            cur = []
        else:
            cur.append(g)
    if cur:
        fragments.append(cur)
    return fragments


def has_nucleus(fragment: List[str]) -> bool:
    return any(contains(fragment, v) for v in _BASE_VOWEL_PATTERNS)


def onset_boundary(fragment: List[str]) -> int:
    """Grapheme index where the syllable boundary goes inside `fragment`."""
    for pat in _GLIDE_PATTERNS:
        j = find(fragment, pat)
        if j != -1:
            return j
    for candidates in _ONSET_VOWEL_PATTERNS:
        for pat in candidates:
            j = find(fragment, pat)
            if j != -1:
                return j
    return 0


def segment(symbols: str) -> str:
    if not symbols or not symbols.strip():
        raise EmptyInput("sound spelling string")
    fragments = split_nuclei(symbols.strip())

    bound = len(fragments)
    if not has_nucleus(fragments[-1]):
        # bare coda: emitted as-is, glued to the previous syllable
        bound -= 1

    for i in range(1, bound):
        j = onset_boundary(fragments[i])
        fragments[i] = fragments[i][:j] + [SYLLABLE_SEP] + fragments[i][j:]

    return "".join("".join(f) for f in fragments)
