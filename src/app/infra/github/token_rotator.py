"""Rodízio round-robin de tokens GitHub."""

from __future__ import annotations

import threading
from collections.abc import Iterable


class TokenRotator:
    """Devolve o próximo token a cada chamada, voltando ao início no fim.

    O cursor é compartilhado por todas as requisições do processo: com
    chamadas intercaladas a ordem por requisição não é determinística, mas o
    pool inteiro continua sendo percorrido de forma justa.
    """

    def __init__(self, tokens: Iterable[str]) -> None:
        self._tokens: tuple[str, ...] = tuple(tokens)
        self._index = 0
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._tokens)

    def next(self) -> str | None:
        """Token corrente (None se a lista estiver vazia)."""
        if not self._tokens:
            return None
        with self._lock:
            token = self._tokens[self._index]
            self._index = (self._index + 1) % len(self._tokens)
        return token
