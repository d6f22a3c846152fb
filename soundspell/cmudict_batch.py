# -*- coding: utf-8 -*-
"""
Convert a CMU pronouncing dictionary to SoundSpelling.

Reads `WORD  PHONEMES...` records (cmudict-0.7b layout, or the bundled
dictionary of the `cmudict` package) and writes one `WORD<TAB>RESPELLING` line
per entry. Entries the converter rejects are logged and skipped unless
--strict is given.

    python -m soundspell.cmudict_batch cmudict-0.7b.txt -o EngSS.txt
"""

from __future__ import annotations
from typing import Dict, Iterable, Iterator, List, Optional, Tuple
import argparse
import logging
import re

import cmudict
from tqdm.auto import tqdm
from wordfreq import zipf_frequency

from .converter import SoundSpeller, default_speller
from .errors import SoundSpellError

logger = logging.getLogger(__name__)

_RECORD_SEP = re.compile(r"\s{2,}")
_WORD_RE = re.compile(r"^([A-Za-z']+)(\(\d+\))?$")

Entry = Tuple[str, str]


def parse_record(line: str) -> Optional[Entry]:
    line = line.strip()
    if not line or line.startswith(";;;"):
        return None
    parts = _RECORD_SEP.split(line, maxsplit=1)
    if len(parts) < 2:
        parts = line.split(maxsplit=1)
    if len(parts) < 2:
        return None
    return parts[0], parts[1]


def iter_cmudict_file(path: str, encoding: str = "latin-1") -> Iterator[Entry]:
    with open(path, "rt", encoding=encoding) as f:
        for line in f:
            rec = parse_record(line)
            if rec is not None:
                yield rec


def iter_cmudict_package(min_zipf: Optional[float] = None,
                         max_words: Optional[int] = None) -> Iterator[Entry]:
    """
    Entries of the `cmudict` package, uppercased like the 0.7b file.
    With min_zipf, words below that wordfreq frequency are dropped and the rest
    come out most frequent first; max_words caps the number of words.
    """
    items: List[Tuple[str, List[List[str]]]] = []
    for w, prons in cmudict.dict().items():
        if min_zipf is not None:
            m = _WORD_RE.match(w)
            if not m or zipf_frequency(m.group(1), "en") < min_zipf:
                continue
        items.append((w, prons))
    if min_zipf is not None:
        items.sort(key=lambda x: zipf_frequency(x[0], "en"), reverse=True)
    if max_words is not None:
        items = items[:max_words]
    for w, prons in items:
        for n, pron in enumerate(prons):
            word = w.upper() if n == 0 else f"{w.upper()}({n})"
            yield word, " ".join(pron)


def convert_entries(entries: Iterable[Entry],
                    speller: Optional[SoundSpeller] = None,
                    skip_errors: bool = True) -> Iterator[Entry]:
    speller = speller or default_speller()
    for word, phonemes in entries:
        try:
            yield word, speller.convert(phonemes)
        except SoundSpellError as e:
            if not skip_errors:
                raise
            logger.warning("skipping %s: %s", word, e)


def save_respellings_tsv(rows: Iterable[Entry], path: str) -> int:
    """Write WORD<TAB>RESPELLING lines; returns the number written."""
    n = 0
    with open(path, "wt", encoding="utf-8", newline="\n") as f:
        for word, respelling in rows:
            f.write(f"{word}\t{respelling}\n")
            n += 1
    return n


def load_respellings_tsv(path: str) -> Dict[str, str]:
    out: Dict[str, str] = {}
    with open(path, "rt", encoding="utf-8") as f:
        for line in f:
            line = line.rstrip("\n")
            if not line:
                continue
            word, respelling = line.split("\t", 1)
            out[word] = respelling
    return out


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__,
                                     formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument("input", nargs="?", default=None,
        help="cmudict-0.7b style file. Omit to use the dictionary bundled with the cmudict package.")
    parser.add_argument("-o", "--output", default="EngSS.txt",
        help="Where to write WORD<TAB>RESPELLING lines.")
    parser.add_argument("--encoding", default="latin-1",
        help="Encoding of the input file.")
    parser.add_argument("--min-zipf", type=float, default=None,
        help="Bundled dictionary only: drop words rarer than this wordfreq zipf value.")
    parser.add_argument("--max-words", type=int, default=None,
        help="Bundled dictionary only: keep at most this many words.")
    parser.add_argument("--strict", action="store_true",
        help="Abort on the first entry that cannot be converted instead of skipping it.")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")
    if args.input:
        entries = iter_cmudict_file(args.input, encoding=args.encoding)
    else:
        entries = iter_cmudict_package(min_zipf=args.min_zipf, max_words=args.max_words)
    rows = convert_entries(tqdm(entries, "converting", unit=" entries"),
                           skip_errors=not args.strict)
    n = save_respellings_tsv(rows, args.output)
    print(f"Saved {n} entries to {args.output}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
