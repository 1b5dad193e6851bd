import importlib.util
from pathlib import Path

import pytest

SCRIPT_PATH = Path(__file__).resolve().parents[1] / "scripts" / "correct_word.py"


def _load_script():
    spec = importlib.util.spec_from_file_location("correct_word", SCRIPT_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_prints_ranked_candidates(tmp_path: Path, capsys) -> None:
    permanent = tmp_path / "permanent.txt"
    permanent.write_text("help\nhello\nhallo\n")
    temporary = tmp_path / "temporary.txt"
    temporary.write_text("helot\n")

    _load_script().main(
        ["helo", "--dictionary", str(permanent), "--temporary", str(temporary), "--strategy", "damerau_levenshtein"]
    )

    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "helot\t0.0\ttrue",
        "help\t0.0\ttrue",
        "hello\t0.0\ttrue",
        "hallo\t-1.0\ttrue",
    ]


def test_rejects_negative_distance(tmp_path: Path) -> None:
    permanent = tmp_path / "permanent.txt"
    permanent.write_text("help\n")

    with pytest.raises(SystemExit):
        _load_script().main(
            ["helo", "--dictionary", str(permanent), "--strategy", "damerau_levenshtein", "--max-distance", "-1"]
        )
