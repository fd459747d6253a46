import logging

import pytest

from gridsudoku.core.errors import ParseError
from gridsudoku.io.config import SolverConfig, load_config


def test_defaults():
    cfg = load_config(None)
    assert cfg == SolverConfig()
    assert cfg.strategy == "smart"
    assert cfg.max_solutions == 1
    assert cfg.logging_level == logging.WARNING


def test_load_config(tmp_path):
    path = tmp_path / "cfg.yaml"
    path.write_text("strategy: bruteforce\nmax_solutions: 0\nlog_level: debug\n", encoding="utf-8")
    cfg = load_config(path)
    assert cfg.strategy == "bruteforce"
    assert cfg.max_solutions == 0
    assert cfg.log_level == "DEBUG"


def test_empty_file_gives_defaults(tmp_path):
    path = tmp_path / "cfg.yaml"
    path.write_text("", encoding="utf-8")
    assert load_config(path) == SolverConfig()


@pytest.mark.parametrize(
    "document",
    [
        "colour: red\n",
        "max_solutions: -1\n",
        "max_solutions: many\n",
        "log_level: loud\n",
        "- strategy\n",
        "strategy: [a\n",
    ],
)
def test_invalid_config(tmp_path, document):
    path = tmp_path / "cfg.yaml"
    path.write_text(document, encoding="utf-8")
    with pytest.raises(ParseError):
        load_config(path)


def test_override_skips_none():
    cfg = SolverConfig().override(strategy=None, max_solutions=5, log_level="info")
    assert cfg == SolverConfig(strategy="smart", max_solutions=5, log_level="INFO")
