# -*- coding: utf-8 -*-
from __future__ import annotations
from typing import Dict, Iterator, Mapping, Optional
from types import MappingProxyType
import json
import logging
import os

from .errors import InvalidTable

logger = logging.getLogger(__name__)

TABLE_ENV_VAR = "SOUNDSPELL_TABLE"

# Stress digit 0 (and no digit) map to the bare symbol; 1 and 2 are appended.
VOWEL_SYMBOLS: Dict[str, str] = {
    # Monophthongs
    "AO": "ŏ", "AA": "ŏ", "IY": "ē", "UW": "o͞o",
    "EH": "ĕ", "IH": "ĭ", "UH": "o͝o", "AH": "ŭ",
    "AE": "ă", "AX": "ŭ",
    # Diphthongs
    "EY": "ā", "AY": "ī", "OW": "ō", "AW": "ow", "OY": "oy",
    # R-colored
    "ER": "ur", "AXR": "ur",
}

CONSONANT_SYMBOLS: Dict[str, str] = {
    # Stops
    "P": "p", "B": "b", "T": "t", "D": "d", "K": "k", "G": "g",
    # Affricates
    "CH": "ch", "JH": "j",
    # Fricatives
    "F": "f", "V": "v", "TH": "th", "DH": "dh", "S": "s", "Z": "z",
    "SH": "sh", "ZH": "zh", "HH": "h",
    # Nasals
    "M": "m", "N": "n", "NG": "ng",
    # Liquids
    "L": "l", "R": "r",
    # Semivowels
    "W": "w", "Y": "y",
}


def _with_stress_variants(vowels: Mapping[str, str]) -> Dict[str, str]:
    out: Dict[str, str] = {}
    for code, sym in vowels.items():
        out[code] = sym
        out[code + "0"] = sym
        out[code + "1"] = sym + "1"
        out[code + "2"] = sym + "2"
    return out


DEFAULT_TABLE: Dict[str, str] = {**_with_stress_variants(VOWEL_SYMBOLS), **CONSONANT_SYMBOLS}


class SymbolTable(Mapping[str, str]):
    """
    Read-only ARPABET -> SoundSpelling symbol mapping.
    Build one with `from_mapping` (validated) or `default()`; there is no way
    to change an instance after construction.
    """

    __slots__ = ("_data",)

    def __init__(self, data: Mapping[str, str]):
        self._data = MappingProxyType(dict(data))

    @classmethod
    def default(cls) -> "SymbolTable":
        return _DEFAULT

    @classmethod
    def from_mapping(cls, mapping: Optional[Mapping[str, str]]) -> "SymbolTable":
        if mapping is None:
            raise InvalidTable("conversion table cannot be None")
        if isinstance(mapping, SymbolTable):
            return mapping
        if not isinstance(mapping, Mapping):
            raise InvalidTable(
                f"conversion table must be an explicit key/value mapping, got {type(mapping).__name__}"
            )
        if not mapping:
            raise InvalidTable("conversion table cannot be empty")
        for key, value in mapping.items():
            if not isinstance(key, str) or not key.strip():
                raise InvalidTable(f"invalid phoneme key {key!r}")
            if not isinstance(value, str) or not value:
                raise InvalidTable(f"invalid symbol {value!r} for phoneme {key!r}")
        return cls(mapping)

    def __getitem__(self, key: str) -> str:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"SymbolTable({len(self)} phonemes)"


_DEFAULT = SymbolTable(DEFAULT_TABLE)


def load_table_json(path: str) -> SymbolTable:
    """Load a replacement table from a JSON object {"ARPABET": "symbol", ...}."""
    try:
        with open(path, "rt", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        raise InvalidTable(f"could not read conversion table {path}: {e}") from e
    return SymbolTable.from_mapping(data)


def table_from_env() -> SymbolTable:
    path = os.environ.get(TABLE_ENV_VAR, "").strip()
    if not path:
        return SymbolTable.default()
    logger.debug("loading conversion table from %s", path)
    return load_table_json(path)
