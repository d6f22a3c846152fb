# -*- coding: utf-8 -*-
from .converter import SoundSpeller, convert, default_speller
from .errors import EmptyInput, InvalidTable, SoundSpellError, UnknownPhoneme
from .phoneme_mapper import map_phonemes, split_phonemes
from .stress import annotate
from .symbol_table import DEFAULT_TABLE, SymbolTable, load_table_json, table_from_env
from .syllables import segment

__all__ = [
    "SoundSpeller",
    "convert",
    "default_speller",
    "EmptyInput",
    "InvalidTable",
    "SoundSpellError",
    "UnknownPhoneme",
    "map_phonemes",
    "split_phonemes",
    "annotate",
    "DEFAULT_TABLE",
    "SymbolTable",
    "load_table_json",
    "table_from_env",
    "segment",
]
