# tests/test_cli.py - drive the CLI loop with scripted answers
import io

import pytest
from rich.console import Console

from bigram_drill.cli import cli as cli_mod
from bigram_drill.cli.cli import CLI, build_parser, build_session, main
from bigram_drill.core.session import PracticeSession
from bigram_drill.core.word_source import ListWordSource
from bigram_drill.utils.config_manager import Config
from bigram_drill.utils.logger_utils import Log


def scripted(answers):
    it = iter(answers)

    def ask(prompt, default=""):
        try:
            return next(it)
        except StopIteration:
            raise EOFError
    return ask


@pytest.fixture
def out():
    return Console(file=io.StringIO(), width=100, color_system=None)


@pytest.fixture
def session():
    return PracticeSession(ListWordSource(["the"], seed=0))


def make_cli(session, out, answers, tmp_path, rounds=0):
    return CLI(session, out=out, ask=scripted(answers),
               log=Log(str(tmp_path / "drill.log"), echo=False), rounds=rounds)


def test_attempts_and_commands(session, out, tmp_path):
    c = make_cli(session, out, ["tge", "/stats", "/dump", "/bogus", "the", "/quit"], tmp_path)
    c.run()
    text = out.file.getvalue()

    assert session.store.misses_of("th") == 1
    assert len(c.history) == 2
    assert c.history[0]["mistakes"] == 1
    assert "Weak Bigrams" in text
    assert "Bigram Scores" in text
    assert "Unknown command" in text
    assert "Session Summary" in text
    assert c.running is False


def test_stats_without_mistakes(session, out, tmp_path):
    make_cli(session, out, ["/stats"], tmp_path).run()
    assert "no mistakes yet" in out.file.getvalue()


def test_commands_with_surrounding_spaces(session, out, tmp_path):
    c = make_cli(session, out, ["  /stats", " /quit "], tmp_path)
    c.run()
    assert c.history == []
    assert len(session.store) == 0
    assert "no mistakes yet" in out.file.getvalue()
    assert "Unknown command" not in out.file.getvalue()


def test_rounds_limit(session, out, tmp_path):
    c = make_cli(session, out, ["the", "th", "the", "the"], tmp_path, rounds=2)
    c.run()
    assert len(c.history) == 2
    assert session.store.misses_of("he") == 1
    # one word shown per attempt
    assert session.words_served == 2


def test_eof_exits_cleanly(session, out, tmp_path):
    c = make_cli(session, out, [], tmp_path)
    c.run()
    assert c.running is False
    assert c.history == []


def test_parser_defaults():
    args = build_parser().parse_args([])
    assert args.rounds == 0
    assert args.words is None
    assert args.verbose is False


def test_build_session_from_config(tmp_path):
    words = tmp_path / "words.txt"
    words.write_text("alpha\nbeta\n", encoding="utf-8")
    cfg = Config(str(tmp_path / "cfg.json"))
    cfg.set("word_list", str(words))
    cfg.set("sample_floor", 1)
    s = build_session(cfg, seed=4)
    assert s.source.words() == ("alpha", "beta")
    assert s.selector.cfg.sample_floor == 1


def test_main_missing_word_list(tmp_path):
    rc = main(["--words", str(tmp_path / "missing.txt"), "--config", str(tmp_path / "cfg.json")])
    assert rc == 1


def test_main_empty_word_list(tmp_path):
    words = tmp_path / "empty.txt"
    words.write_text("# nothing here\n", encoding="utf-8")
    rc = main(["--words", str(words), "--config", str(tmp_path / "cfg.json")])
    assert rc == 1


def test_main_runs_rounds(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(cli_mod.Prompt, "ask", lambda *a, **k: "zzz")
    rc = main(["--seed", "1", "--rounds", "3", "--config", str(tmp_path / "cfg.json")])
    assert rc == 0
    assert (tmp_path / "logs" / "bigram_drill.log").exists()
