"""Typer-based command line interface for the pencil model.

``pencil demo`` replays the built-in demonstration and ``pencil run`` replays
an operation script read from YAML.  Both print the final text, or the full
pencil state as JSON with ``--json``.

Exit codes
----------
0 success
3 I/O error (missing or unreadable script)
4 configuration error
5 script error (malformed script)
"""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path
from typing import Optional

import typer

from .config import load_config
from .model import Pencil
from .script import DEMO_SETTINGS, DEMO_STEPS, load_script, run_steps
from .utils.errors import ConfigError, ScriptError
from .utils.logging import configure_logging, get_logger

if not sys.stdout.isatty():  # pragma: no cover - CLI test context
    os.environ.setdefault("NO_COLOR", "1")
    os.environ.setdefault("RICH_DISABLE_NO_COLOR", "1")

app = typer.Typer(
    name="pencil",
    help="Pencil durability model. Try 'pencil run --in SCRIPT'.",
)

logger = get_logger(__name__)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _safe_exit(code: int, msg: str | None = None) -> None:
    """Exit the CLI with ``code`` emitting ``msg`` to stderr if provided."""

    if msg:
        typer.echo(msg, err=True)
    raise typer.Exit(code)


def _emit(pencil: Pencil, as_json: bool) -> None:
    if as_json:
        typer.echo(json.dumps(pencil.snapshot().to_dict(), sort_keys=True))
    else:
        typer.echo(pencil.text)


@app.callback()
def main() -> None:
    """Entry point for the pencil command group."""
    pass


@app.command()
def demo(
    as_json: bool = typer.Option(  # noqa: B008
        False, "--json", help="Print the final pencil state as JSON"
    ),
) -> None:
    """Write, erase, sharpen and edit with a small demonstration pencil."""

    pencil = run_steps(Pencil.from_settings(DEMO_SETTINGS), DEMO_STEPS)
    _emit(pencil, as_json)


@app.command()
def run(
    in_path: Path = typer.Option(  # noqa: B008
        ..., "--in", "--input", help="YAML operation script"
    ),
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
    as_json: bool = typer.Option(  # noqa: B008
        False, "--json", help="Print the final pencil state as JSON"
    ),
    verbose: bool = typer.Option(  # noqa: B008
        False, "--verbose", "-v", help="Log every step to stderr"
    ),
) -> None:
    """Replay the operation script at ``in_path`` and print the result."""

    try:
        cfg = load_config(config_path)
    except (ConfigError, OSError) as exc:
        _safe_exit(4, str(exc).splitlines()[0])
    configure_logging("DEBUG" if verbose else cfg.logging.level)
    logger.debug("loaded config (schema_version=%d)", cfg.schema_version)

    try:
        script = load_script(in_path)
    except OSError as exc:
        _safe_exit(3, str(exc))
    except ScriptError as exc:
        _safe_exit(5, str(exc).splitlines()[0])

    settings = script.pencil if script.pencil is not None else cfg.pencil
    pencil = run_steps(Pencil.from_settings(settings), script.steps)
    logger.debug("replayed %d step(s)", len(script.steps))
    _emit(pencil, as_json)
