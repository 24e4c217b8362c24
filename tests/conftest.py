import pytest

from wordle_hybrid.dictionary import parse_entry
from wordle_hybrid.entropy import recompute_full
from wordle_hybrid.pool import WordPool


TEN_WORD_LINES = [
    "CRANE090SP",
    "TRACE070SP",
    "SLATE060SP",
    "CRATE075SN",
    "GRACE080SN",
    "BRACE050SP",
    "PLANT085SP",
    "SHINE065NP",
    "MOUNT055SP",
    "GHOST072SN",
]


@pytest.fixture
def ten_word_pool():
    pool = WordPool(parse_entry(line) for line in TEN_WORD_LINES)
    recompute_full(pool)
    pool.checkpoint()
    return pool


@pytest.fixture
def dictionary_file(tmp_path):
    path = tmp_path / "AllWords.txt"
    path.write_text("\n".join(TEN_WORD_LINES + ["", "short"]) + "\n")
    return str(path)
