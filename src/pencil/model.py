"""Core pencil model.

A :class:`Pencil` accumulates text under a consumable point durability.
Writing letters dulls the point, sharpening restores it at the cost of one
unit of length, and the eraser blanks the last occurrence of a word.  Editing
writes new text into the blank space an erasure left behind.

None of the operations raise for domain input: an exhausted point writes
spaces, a missing word or exhausted eraser leaves the text alone and a pencil
with no length left simply stays dull.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import TYPE_CHECKING, Any

from pencil.utils.logging import get_logger
from pencil.utils.textspan import find_blank_run, find_last, is_blank

if TYPE_CHECKING:  # pragma: no cover - typing only
    from pencil.config.schema import PencilSettings

__all__ = ["COLLISION_CHAR", "Pencil", "PencilState", "write_cost"]

COLLISION_CHAR = "@"

logger = get_logger(__name__)


def write_cost(char: str) -> int:
    """Return the point durability spent writing ``char``.

    Only ASCII letters cost anything: uppercase letters cost 2 and lowercase
    letters 1.  Digits, punctuation and other characters are free.
    """

    if "A" <= char <= "Z":
        return 2
    if "a" <= char <= "z":
        return 1
    return 0


@dataclass(slots=True, frozen=True)
class PencilState:
    """Immutable snapshot of a pencil."""

    text: str
    durability: int
    initial_durability: int
    length: int
    eraser_durability: int | None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


class Pencil:
    """A pencil with a point, a finite length and an optional eraser.

    Parameters
    ----------
    durability:
        Initial point durability.  Sharpening restores the point to this value.
    length:
        Number of times the pencil can be sharpened.
    eraser_durability:
        Number of characters the eraser can blank.  ``None`` means the eraser
        never wears out.

    Negative values are clamped to ``0``.
    """

    def __init__(
        self,
        durability: int,
        length: int = 0,
        eraser_durability: int | None = None,
    ) -> None:
        self._chars: list[str] = []
        self._durability = max(0, int(durability))
        self._initial_durability = self._durability
        self._length = max(0, int(length))
        self._eraser = None if eraser_durability is None else max(0, int(eraser_durability))
        self._edit_gap: int | None = None

    @classmethod
    def from_settings(cls, settings: PencilSettings) -> Pencil:
        """Build a pencil from validated :class:`PencilSettings`."""

        return cls(
            settings.durability,
            length=settings.length,
            eraser_durability=settings.eraser_durability,
        )

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(durability={self._durability}, "
            f"length={self._length}, eraser_durability={self._eraser}, "
            f"text={self.text!r})"
        )

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def text(self) -> str:
        return "".join(self._chars)

    @property
    def durability(self) -> int:
        return self._durability

    @property
    def initial_durability(self) -> int:
        return self._initial_durability

    @property
    def length(self) -> int:
        return self._length

    @property
    def eraser_durability(self) -> int | None:
        return self._eraser

    def snapshot(self) -> PencilState:
        """Return the current state as a :class:`PencilState`."""

        return PencilState(
            text=self.text,
            durability=self._durability,
            initial_durability=self._initial_durability,
            length=self._length,
            eraser_durability=self._eraser,
        )

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def write(self, text: str) -> None:
        """Append ``text``, spending point durability on letters.

        Spaces and newlines are always written for free.  Once the point is
        dull every other character is written as a space.
        """

        for char in text:
            if is_blank(char):
                self._chars.append(char)
            elif self._durability > 0:
                self._chars.append(char)
                self._durability = max(0, self._durability - write_cost(char))
            else:
                self._chars.append(" ")

    def sharpen(self) -> None:
        """Restore the point to its initial durability, using one unit of length."""

        if self._length <= 0:
            logger.debug("sharpen ignored: no length left")
            return
        self._durability = self._initial_durability
        self._length -= 1

    def erase(self, word: str) -> None:
        """Blank the last occurrence of ``word``, right to left.

        Each non-blank character costs one unit of eraser durability; erasing
        stops as soon as the eraser is worn out.
        """

        span = find_last(self.text, word)
        if span is None:
            logger.debug("erase ignored: %r not found", word)
            return

        start, end = span
        erased_from: int | None = None
        for idx in range(end - 1, start - 1, -1):
            if self._eraser is not None and self._eraser <= 0:
                break
            if is_blank(self._chars[idx]):
                continue
            self._chars[idx] = " "
            erased_from = idx
            if self._eraser is not None:
                self._eraser -= 1

        if erased_from is None:
            logger.debug("erase of %r blanked nothing", word)
            return
        self._edit_gap = erased_from

    def edit(self, replacement: str) -> None:
        """Write ``replacement`` into the blank space left by an erasure.

        Writing starts at the leftmost position blanked by the last erase,
        or at the first run of two spaces when no erase is pending.  Letters
        landing on existing characters become ``@``; text past the end of the
        page is dropped and line breaks are kept.  Editing does not dull the
        point.
        """

        start = self._edit_gap
        if start is None:
            start = find_blank_run(self.text)
        if start is None:
            logger.debug("edit ignored: no blank space to write into")
            return
        self._edit_gap = None

        for offset, char in enumerate(replacement):
            idx = start + offset
            if idx >= len(self._chars):
                logger.debug("edit truncated %d character(s)", len(replacement) - offset)
                break
            if char == " " or self._chars[idx] == "\n":
                continue
            self._chars[idx] = char if self._chars[idx] == " " else COLLISION_CHAR
