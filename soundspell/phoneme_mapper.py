# -*- coding: utf-8 -*-
from __future__ import annotations
from typing import List, Mapping, Sequence
import re

from .errors import EmptyInput, UnknownPhoneme

_WS = re.compile(r"\s+")


def split_phonemes(text: str) -> List[str]:
    text = (text or "").strip()
    if not text:
        raise EmptyInput()
    return _WS.split(text)


def map_phonemes(tokens: Sequence[str], table: Mapping[str, str]) -> str:
    """
    Concatenate the table symbol of every token, in order, with no delimiter.
    Lookup is exact (case-sensitive); the first unknown token aborts the call.
    """
    if not tokens:
        raise EmptyInput()
    out = []
    for tok in tokens:
        sym = table.get(tok)
        if sym is None:
            raise UnknownPhoneme(tok)
        out.append(sym)
    return "".join(out)
