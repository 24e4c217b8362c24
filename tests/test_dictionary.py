import pytest

from wordle_hybrid.__main__ import main
from wordle_hybrid.dictionary import load_dictionary, load_used_words, parse_entry
from wordle_hybrid.pool import NounClass, VerbClass


def test_parse_entry():
    e = parse_entry("CRANE090SP\n")
    assert e.word == "CRANE"
    assert e.frequency_rank == 90
    assert e.noun_class is NounClass.SINGULAR
    assert e.verb_class is VerbClass.PRESENT
    assert not e.eliminated


def test_parse_entry_skips_short_lines():
    assert parse_entry("") is None
    assert parse_entry("CRANE09   \n") is None


def test_parse_entry_rejects_bad_fields():
    with pytest.raises(ValueError):
        parse_entry("CRANEXYZSP")
    with pytest.raises(ValueError):
        parse_entry("CRANE090QP")


def test_load_dictionary(dictionary_file):
    pool = load_dictionary(dictionary_file)
    assert len(pool) == 10
    assert pool.words()[0] == "CRANE"
    assert all(e.entropy > 0 for e in pool)
    # entropy survives a reset
    h = pool.find("CRANE").entropy
    pool.reset()
    assert pool.find("CRANE").entropy == h


def test_load_dictionary_without_entropy(dictionary_file):
    pool = load_dictionary(dictionary_file, compute_entropy=False)
    assert all(e.entropy == 0.0 for e in pool)


def test_used_words_are_dropped(dictionary_file, tmp_path):
    used_path = tmp_path / "used.txt"
    used_path.write_text("crane, trace\nghost\nnotaword\n")
    used = load_used_words(str(used_path))
    assert used == {"CRANE", "TRACE", "GHOST"}

    pool = load_dictionary(dictionary_file, used_words=used)
    assert len(pool) == 7
    assert "CRANE" not in pool


def test_empty_dictionary_raises(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_text("\nabc\n")
    with pytest.raises(ValueError):
        load_dictionary(str(path))


def test_missing_file_raises(tmp_path):
    with pytest.raises(OSError):
        load_dictionary(str(tmp_path / "nope.txt"))


# ---------- command line ----------

def test_cli_list(capsys):
    main(["list"])
    out = capsys.readouterr().out
    assert "Entropy Linguist (Strict)" in out
    assert "Double Barrel (Salet/Courd)" in out


def test_cli_suggest(dictionary_file, capsys):
    main(["suggest", dictionary_file, "SHINE=BBBBG"])
    out = capsys.readouterr().out
    assert "4 candidates" in out
    assert "Entropy Raw (Max Info)" in out
    assert "plays:" in out


def test_cli_suggest_rejects_more_than_six_turns(dictionary_file, capsys):
    with pytest.raises(SystemExit) as exc:
        main(["suggest", dictionary_file] + ["ZZZZZ=BBBBB"] * 7)
    assert exc.value.code == 2
    assert "at most 6" in capsys.readouterr().err


def test_cli_simulate(dictionary_file, capsys):
    main(["simulate", dictionary_file, "--strategies", "0", "1", "--processes", "1", "--limit", "4"])
    out = capsys.readouterr().out
    assert "TOURNAMENT CHAMPION" in out
