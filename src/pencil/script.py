"""Operation scripts: replay a sequence of pencil operations.

A script is a YAML document with an optional ``pencil`` block overriding the
configured :class:`~pencil.config.schema.PencilSettings` and a ``steps`` list.
Each step is either the bare string ``sharpen`` or a single-key mapping such
as ``{write: "Hello"}``, ``{erase: "World"}`` or ``{edit: "Mars"}``.
"""

from __future__ import annotations

import os
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import ValidationError

from pencil.config.schema import PencilSettings
from pencil.model import Pencil
from pencil.utils.errors import ScriptError
from pencil.utils.logging import get_logger

__all__ = [
    "DEMO_SETTINGS",
    "DEMO_STEPS",
    "Script",
    "Step",
    "load_script",
    "parse_script",
    "parse_steps",
    "run_steps",
]

Operation = Literal["write", "erase", "edit", "sharpen"]

TEXT_OPERATIONS: frozenset[str] = frozenset({"write", "erase", "edit"})

logger = get_logger(__name__)


@dataclass(slots=True, frozen=True)
class Step:
    """A single pencil operation and its text argument."""

    op: Operation
    arg: str = ""

    def apply(self, pencil: Pencil) -> None:
        if self.op == "sharpen":
            pencil.sharpen()
        else:
            getattr(pencil, self.op)(self.arg)


@dataclass(slots=True, frozen=True)
class Script:
    """Parsed script: optional pencil settings plus the steps to replay."""

    steps: list[Step] = field(default_factory=list)
    pencil: PencilSettings | None = None


DEMO_SETTINGS = PencilSettings(durability=10, length=3, eraser_durability=5)

DEMO_STEPS: tuple[Step, ...] = (
    Step("write", "Hello World"),
    Step("erase", "World"),
    Step("sharpen"),
    Step("edit", "Mars"),
)


def _parse_step(index: int, entry: Any) -> Step:
    if entry == "sharpen":
        return Step("sharpen")
    if isinstance(entry, dict) and len(entry) == 1:
        ((op, arg),) = entry.items()
        if op == "sharpen" and arg is None:
            return Step("sharpen")
        if op in TEXT_OPERATIONS:
            if not isinstance(arg, str):
                msg = f"step {index}: {op} expects a string, got {type(arg).__name__}"
                raise ScriptError(msg)
            return Step(op, arg)
    raise ScriptError(f"step {index}: unrecognised entry {entry!r}")


def parse_steps(raw: Iterable[Any]) -> list[Step]:
    """Convert raw YAML step entries into :class:`Step` objects."""

    return [_parse_step(idx, entry) for idx, entry in enumerate(raw)]


def parse_script(data: Any) -> Script:
    """Validate a loaded YAML document and return a :class:`Script`."""

    if not isinstance(data, dict):
        raise ScriptError("script must be a mapping with a 'steps' list")
    unknown = set(data) - {"pencil", "steps"}
    if unknown:
        raise ScriptError(f"unknown script keys: {', '.join(sorted(unknown))}")

    raw_steps = data.get("steps") or []
    if not isinstance(raw_steps, list):
        raise ScriptError("'steps' must be a list")

    settings = None
    if data.get("pencil") is not None:
        try:
            settings = PencilSettings.model_validate(data["pencil"])
        except ValidationError as exc:
            raise ScriptError(f"invalid pencil block: {exc}") from exc

    return Script(steps=parse_steps(raw_steps), pencil=settings)


def load_script(path: str | os.PathLike[str]) -> Script:
    """Read and parse the script at ``path``.

    :class:`FileNotFoundError` and other :class:`OSError` subclasses propagate
    unchanged so callers can tell I/O failures from malformed content.
    """

    with Path(path).open("r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as exc:
            raise ScriptError(f"{path}: invalid YAML: {exc}") from exc
    return parse_script(data)


def run_steps(pencil: Pencil, steps: Iterable[Step]) -> Pencil:
    """Apply ``steps`` to ``pencil`` in order and return it."""

    for idx, step in enumerate(steps):
        step.apply(pencil)
        logger.debug(
            "step %d %s(%r): durability=%d length=%d eraser=%s",
            idx,
            step.op,
            step.arg,
            pencil.durability,
            pencil.length,
            pencil.eraser_durability,
        )
    return pencil
