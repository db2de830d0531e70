# wordlist.py - read word lists ("word" or "word <count>" per line) into a Trie

from __future__ import annotations

import logging
from typing import Iterable, Iterator, List, Optional, Union

from freq_trie.core.mutations import Entry
from freq_trie.trie import Trie
from freq_trie.utils.logger_utils import Log

logger = logging.getLogger(__name__)


def parse_wordlist(lines: Iterable[str], separator: Optional[str] = None) -> Iterator[Entry]:
    """
    Yield trie entries from word list lines.
     - "word"          -> "word" (frequency 1)
     - "word<sep>12"   -> ("word", 12)
    Blank lines and lines starting with '#' are skipped. The count is taken
    from the last field, so with the default separator (whitespace) words
    cannot contain spaces. Raises ValueError naming the line for bad counts.
    """
    for lineno, raw in enumerate(lines, 1):
        line = raw.rstrip("\r\n")
        if not line.strip() or line.lstrip().startswith("#"):
            continue
        if separator is None:
            line = line.strip()
            parts: List[str] = line.rsplit(None, 1)
        else:
            parts = line.rsplit(separator, 1)
        if len(parts) == 1:
            yield parts[0]
            continue
        word, count = parts
        try:
            frequency = int(count)
        except ValueError:
            raise ValueError(f"line {lineno}: bad count {count!r} for {word!r}") from None
        yield (word, frequency)


def load_wordlist(
    path: str, separator: Optional[str] = None, trie: Union[Trie, None] = None
) -> Trie:
    """Load a UTF-8 word list file into `trie` (a new empty Trie by default)."""
    base = trie if trie is not None else Trie()
    with Log.time_block(f"load {path}"):
        with open(path, "r", encoding="utf-8") as f:
            entries = list(parse_wordlist(f, separator))
        result = base.add_all(entries)
    logger.info("loaded %d entries from %s (%d words)", len(entries), path, len(result))
    return result
