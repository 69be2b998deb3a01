"""Bit helpers for cron field masks — bit ``i`` set means value ``i`` is allowed."""

from __future__ import annotations


def set_bit(field: int, pos: int) -> int:
    """Return ``field`` with bit ``pos`` set."""
    return field | (1 << pos)


def is_set(field: int, pos: int) -> bool:
    """Whether bit ``pos`` is set in ``field``."""
    return field & (1 << pos) != 0


def count_bits(field: int) -> int:
    return bin(field).count("1")
