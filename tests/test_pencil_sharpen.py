from __future__ import annotations

from pencil import Pencil


def test_sharpen_restores_durability_and_shortens_pencil() -> None:
    pencil = Pencil(10, 3)
    pencil.write("hello")
    assert pencil.durability == 5
    pencil.sharpen()
    assert pencil.durability == 10
    assert pencil.length == 2


def test_sharpen_is_a_no_op_at_zero_length() -> None:
    pencil = Pencil(10, 3)
    pencil.write("hello")
    pencil.sharpen()
    for _ in range(3):
        pencil.sharpen()
    assert pencil.length == 0
    assert pencil.durability == 10

    pencil.write("abc")
    pencil.sharpen()
    assert pencil.length == 0
    assert pencil.durability == 7


def test_default_length_cannot_be_sharpened() -> None:
    pencil = Pencil(5)
    pencil.write("ab")
    pencil.sharpen()
    assert pencil.length == 0
    assert pencil.durability == 3


def test_sharpen_never_exceeds_initial_durability() -> None:
    pencil = Pencil(4, 2)
    pencil.sharpen()
    assert pencil.durability == pencil.initial_durability == 4
    assert pencil.length == 1


def test_sharpened_pencil_writes_again() -> None:
    pencil = Pencil(2, 1)
    pencil.write("abc")
    assert pencil.text == "ab "
    pencil.sharpen()
    pencil.write("d")
    assert pencil.text == "ab d"
    assert pencil.durability == 1
