# -*- coding: utf-8 -*-
"""
Grapheme-cluster helpers.

Symbols such as o͞o carry combining marks, so every search and insertion in the
segmenter runs over lists of extended grapheme clusters (regex ``\\X``) rather
than over code points.
"""

from __future__ import annotations
from typing import List, Sequence, Tuple
import regex

_GRAPHEME = regex.compile(r"\X")

Graphemes = Tuple[str, ...]


def graphemes(s: str) -> List[str]:
    return _GRAPHEME.findall(s)


def as_pattern(s: str) -> Graphemes:
    return tuple(graphemes(s))


def find(seq: Sequence[str], pattern: Sequence[str], start: int = 0) -> int:
    """Index of the first occurrence of `pattern` in `seq` at or after `start`, or -1."""
    n, m = len(seq), len(pattern)
    if m == 0:
        return -1
    first = pattern[0]
    for i in range(start, n - m + 1):
        if seq[i] == first and tuple(seq[i:i + m]) == tuple(pattern):
            return i
    return -1


def contains(seq: Sequence[str], pattern: Sequence[str]) -> bool:
    return find(seq, pattern) != -1


def insert_after_each(seq: Sequence[str], pattern: Sequence[str], mark: str) -> List[str]:
    """Insert `mark` right after every non-overlapping occurrence of `pattern`."""
    out: List[str] = []
    i, n, m = 0, len(seq), len(pattern)
    while i < n:
        j = find(seq, pattern, i)
        if j == -1:
            out.extend(seq[i:])
            break
        out.extend(seq[i:j + m])
        out.append(mark)
        i = j + m
    return out


def insert_before_first(seq: Sequence[str], pattern: Sequence[str], mark: str) -> List[str]:
    j = find(seq, pattern)
    if j == -1:
        return list(seq)
    return list(seq[:j]) + [mark] + list(seq[j:])
