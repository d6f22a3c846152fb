# -*- coding: utf-8 -*-
from __future__ import annotations

PRIMARY_MARK = "ˈ"
SYLLABLE_SEP = "-"


def _annotate_syllable(syl: str) -> str:
    # "1" wins over a co-occurring "2", which is then left untouched.
    if "1" in syl:
        return (PRIMARY_MARK + syl.replace("1", "")).upper()
    if "2" in syl:
        return syl.replace("2", "").upper()
    return syl


def annotate(syllables: str) -> str:
    """Primary stress: ˈ + uppercase; secondary: uppercase; unstressed: unchanged."""
    return SYLLABLE_SEP.join(_annotate_syllable(s) for s in syllables.split(SYLLABLE_SEP))
