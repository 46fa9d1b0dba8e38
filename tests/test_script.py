from __future__ import annotations

from pathlib import Path

import pytest

from pencil import Pencil
from pencil.script import (
    DEMO_SETTINGS,
    DEMO_STEPS,
    Step,
    load_script,
    parse_script,
    parse_steps,
    run_steps,
)
from pencil.utils.errors import ScriptError


def test_parse_steps() -> None:
    steps = parse_steps([{"write": "hi"}, "sharpen", {"sharpen": None}, {"erase": "h"}])
    assert steps == [Step("write", "hi"), Step("sharpen"), Step("sharpen"), Step("erase", "h")]


@pytest.mark.parametrize(
    "entry",
    ["write", {"write": 3}, {"write": "a", "erase": "b"}, {"fold": "x"}, 42],
)
def test_parse_steps_rejects_bad_entries(entry: object) -> None:
    with pytest.raises(ScriptError):
        parse_steps([entry])


def test_parse_script_with_pencil_block() -> None:
    script = parse_script(
        {"pencil": {"durability": 4, "length": 1}, "steps": [{"write": "abcde"}]}
    )
    assert script.pencil is not None
    assert script.pencil.durability == 4
    pencil = run_steps(Pencil.from_settings(script.pencil), script.steps)
    assert pencil.text == "abcd "


def test_parse_script_rejects_unknown_keys() -> None:
    with pytest.raises(ScriptError):
        parse_script({"steps": [], "colour": "red"})


def test_parse_script_rejects_bad_pencil_block() -> None:
    with pytest.raises(ScriptError):
        parse_script({"pencil": {"durability": -3}, "steps": []})


def test_parse_script_rejects_non_mapping() -> None:
    with pytest.raises(ScriptError):
        parse_script(["write"])


def test_demo_sequence() -> None:
    pencil = run_steps(Pencil.from_settings(DEMO_SETTINGS), DEMO_STEPS)
    assert pencil.text == "Hello WorMa"
    assert pencil.length == 2
    assert pencil.durability == 10
    assert pencil.eraser_durability == 5


def test_load_script(tmp_path: Path) -> None:
    path = tmp_path / "ops.yml"
    path.write_text(
        "steps:\n"
        "  - write: \"erase me\"\n"
        "  - erase: \"me\"\n",
        encoding="utf-8",
    )
    script = load_script(path)
    assert script.pencil is None
    assert [s.op for s in script.steps] == ["write", "erase"]


def test_load_script_invalid_yaml(tmp_path: Path) -> None:
    path = tmp_path / "ops.yml"
    path.write_text("steps: [unclosed\n", encoding="utf-8")
    with pytest.raises(ScriptError):
        load_script(path)


def test_load_script_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_script(tmp_path / "missing.yml")
