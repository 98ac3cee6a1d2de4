"""Testes do rodízio de tokens."""

from __future__ import annotations

from app.infra.github.token_rotator import TokenRotator


def test_returns_each_token_once_then_wraps() -> None:
    rotator = TokenRotator(["t1", "t2", "t3"])

    first_cycle = [rotator.next() for _ in range(3)]

    assert first_cycle == ["t1", "t2", "t3"]
    assert rotator.next() == "t1"


def test_single_token_is_always_returned() -> None:
    rotator = TokenRotator(["only"])

    assert [rotator.next() for _ in range(3)] == ["only", "only", "only"]


def test_empty_pool_returns_none() -> None:
    rotator = TokenRotator([])

    assert rotator.next() is None
    assert len(rotator) == 0
