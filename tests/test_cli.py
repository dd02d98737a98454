import json

import pytest

from apps.cli import play, run
from packages.solver import Solver
from script.build_wordlist import build_wordlist, main as build_main

WORDS = ["crane", "slate", "train", "trace", "grape"]


def _solver():
    return Solver.from_words(WORDS)


def test_play_quit_help_and_unknown():
    s = _solver()
    assert play.handle("q", s) is None
    assert play.handle("QUIT", s) is None
    assert play.handle("h", s) == play.HELP
    assert play.handle("", s) == ""
    assert play.handle("xyz", s) == "Invalid command"


def test_play_guess_lists_suggestions():
    s = _solver()
    out = play.handle("g", s, top=3)
    assert len(out.splitlines()) == 3
    out = play.handle("guess rn", s)
    assert out.splitlines()[0].startswith("slate = (")


def test_play_feedback_and_reset():
    s = _solver()
    assert play.handle("f crane", s) == play.feedback_help(5)
    assert play.handle("f cran 00000", s) == "Word must be 5 letters."
    assert play.handle("f crane 00x00", s) == "Score must only contain digits between 0 and 2"
    assert s.remaining_count() == 5

    out = play.handle("F crane 00000", s)
    assert out == "0 word(s) remain\nNo candidates left."
    assert "crane 00000" in play.handle("s", s)
    assert play.handle("r", s) == "5 word(s) remain"
    assert play.handle("status", s) == "5 of 5 word(s) remain"


def test_play_main_reads_commands(tmp_path, monkeypatch, capsys):
    words = tmp_path / "words.txt"
    words.write_text("\n".join(WORDS) + "\n", encoding="utf-8")
    lines = iter(["g", "f crane 02200", "q"])
    monkeypatch.setattr("builtins.input", lambda _prompt="": next(lines))

    play.main(["--words", str(words)])
    out = capsys.readouterr().out
    assert "Loaded 5 words." in out
    assert "word(s) remain" in out
    assert out.rstrip().endswith("Goodbye.")


def test_run_main_writes_reports(tmp_path, capsys):
    words = tmp_path / "words.txt"
    words.write_text("\n".join(WORDS) + "\n", encoding="utf-8")
    outdir = tmp_path / "reports"

    run.main(["--words", str(words), "--outdir", str(outdir), "--progress", "off"])

    manifests = list(outdir.glob("run_*_manifest.json"))
    assert len(manifests) == 1 and len(list(outdir.glob("run_*.csv"))) == 1
    m = json.loads(manifests[0].read_text(encoding="utf-8"))
    assert m["num_cases"] == 5 and m["solved"] == 5
    assert m["wordlist"]["passed"] is True
    assert "Solved 5/5" in capsys.readouterr().out


def test_build_wordlist_filters_and_dedupes():
    raw = ["Crane", "crane", "abc", "it's", " SLATE ", "train", ""]
    assert build_wordlist(raw, 5) == ["crane", "slate", "train"]
    assert build_wordlist(["trace", "crane"], 5, sort=True) == ["crane", "trace"]


def test_build_wordlist_main(tmp_path):
    inp = tmp_path / "raw.txt"
    inp.write_text("Zebra\nquick\nfoxes\nquick\nno\n", encoding="utf-8")
    out = tmp_path / "words_5.txt"
    build_main(["--in", str(inp), "--out", str(out), "--sort"])
    assert out.read_text(encoding="utf-8").splitlines() == ["foxes", "quick", "zebra"]


def test_run_main_validates_bundled_list_by_name(tmp_path, capsys):
    outdir = tmp_path / "reports"
    run.main(["--words", "words_5.txt", "--outdir", str(outdir),
              "--progress", "off", "--sample", "3"])

    m = json.loads(next(outdir.glob("run_*_manifest.json")).read_text(encoding="utf-8"))
    assert m["wordlist"]["passed"] is True
    assert m["wordlist"]["count"] == 2309
    assert len(m["wordlist"]["sha256"]) == 64
    assert m["num_cases"] == 3
    assert "words=2309" in capsys.readouterr().out


@pytest.mark.parametrize("cli", [play, run])
def test_unknown_log_level_is_a_usage_error(cli, capsys):
    with pytest.raises(SystemExit) as e:
        cli.main(["--log-level", "loud"])
    assert e.value.code == 2
    assert "invalid choice" in capsys.readouterr().err


def test_log_level_is_case_insensitive(tmp_path, monkeypatch):
    words = tmp_path / "words.txt"
    words.write_text("\n".join(WORDS) + "\n", encoding="utf-8")
    monkeypatch.setattr("builtins.input", lambda _prompt="": "q")
    play.main(["--words", str(words), "--log-level", "debug"])
