# -*- coding: utf-8 -*-
import json
import pytest

from soundspell.errors import InvalidTable
from soundspell.phoneme_mapper import map_phonemes
from soundspell.symbol_table import (
    DEFAULT_TABLE, TABLE_ENV_VAR, VOWEL_SYMBOLS, SymbolTable, load_table_json, table_from_env,
)


def test_every_default_token_maps_to_its_own_symbol():
    table = SymbolTable.default()
    for token, symbol in DEFAULT_TABLE.items():
        assert map_phonemes([token], table) == symbol


def test_vowel_stress_variants():
    table = SymbolTable.default()
    for code, sym in VOWEL_SYMBOLS.items():
        assert table[code] == sym
        assert table[code + "0"] == sym
        assert table[code + "1"] == sym + "1"
        assert table[code + "2"] == sym + "2"


def test_known_symbols():
    table = SymbolTable.default()
    assert table["AE1"] == "ă1"
    assert table["AH1"] == "ŭ1"
    assert table["ER0"] == "ur"
    assert table["UW"] == "o͞o"
    assert table["HH"] == "h"


def test_table_is_read_only():
    table = SymbolTable.default()
    with pytest.raises(TypeError):
        table["AE1"] = "x"


@pytest.mark.parametrize("bad", [
    None,
    {},
    [("K", "k"), ("AE1", "ă1")],
    ["k", "ă1"],
    "K k",
    {"K": ""},
    {"K": 1},
    {"": "k"},
    {1: "k"},
])
def test_from_mapping_rejects_malformed_tables(bad):
    with pytest.raises(InvalidTable):
        SymbolTable.from_mapping(bad)


def test_from_mapping_copies_its_input():
    src = {"K": "k"}
    table = SymbolTable.from_mapping(src)
    src["K"] = "c"
    assert table["K"] == "k"


def test_load_table_json(tmp_path):
    path = tmp_path / "table.json"
    path.write_text(json.dumps({"K": "c", "AE1": "ă1"}, ensure_ascii=False), encoding="utf-8")
    table = load_table_json(str(path))
    assert dict(table) == {"K": "c", "AE1": "ă1"}


@pytest.mark.parametrize("content", ['[["K", "k"]]', "{}", "{not json", '{"K": null}'])
def test_load_table_json_rejects_bad_files(tmp_path, content):
    path = tmp_path / "table.json"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(InvalidTable):
        load_table_json(str(path))


def test_load_table_json_missing_file(tmp_path):
    with pytest.raises(InvalidTable):
        load_table_json(str(tmp_path / "nope.json"))


def test_table_from_env(tmp_path, monkeypatch):
    monkeypatch.delenv(TABLE_ENV_VAR, raising=False)
    assert table_from_env() is SymbolTable.default()

    path = tmp_path / "table.json"
    path.write_text('{"K": "c"}', encoding="utf-8")
    monkeypatch.setenv(TABLE_ENV_VAR, str(path))
    assert dict(table_from_env()) == {"K": "c"}
