# -*- coding: utf-8 -*-
"""
ARPABET -> SoundSpelling conversion.

    >>> convert("B AH1 T ER0")
    'ˈBŬ-tur'

Stages: split on whitespace -> map_phonemes -> segment -> annotate.
Any stage error propagates unchanged; nothing partial is ever returned.
"""

from __future__ import annotations
from typing import Mapping, Optional
import logging

from .phoneme_mapper import map_phonemes, split_phonemes
from .stress import annotate
from .symbol_table import SymbolTable, table_from_env
from .syllables import segment

logger = logging.getLogger(__name__)


class SoundSpeller:
    def __init__(self, table: Optional[Mapping[str, str]] = None):
        self.table = SymbolTable.default() if table is None else SymbolTable.from_mapping(table)

    def replace_table(self, mapping: Mapping[str, str]) -> "SoundSpeller":
        """Returns a new speller over `mapping`; this one keeps its table."""
        return SoundSpeller(SymbolTable.from_mapping(mapping))

    def convert(self, phonemes: str) -> str:
        tokens = split_phonemes(phonemes)
        mapped = map_phonemes(tokens, self.table)
        syllables = segment(mapped)
        out = annotate(syllables)
        logger.debug("%s -> %s -> %s -> %s", phonemes, mapped, syllables, out)
        return out

    __call__ = convert


_default: Optional[SoundSpeller] = None


def default_speller() -> SoundSpeller:
    """Speller over $SOUNDSPELL_TABLE when set, else the built-in table. Built once."""
    global _default
    if _default is None:
        _default = SoundSpeller(table_from_env())
    return _default


def convert(phonemes: str) -> str:
    return default_speller().convert(phonemes)
