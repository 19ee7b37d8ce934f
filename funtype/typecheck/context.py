from __future__ import annotations

import dataclasses
import enum
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator


class ConflictPolicy(enum.Enum):
    """What merging does when a variable gets two different bindings."""

    # fill each binding's wildcards from the other; raise TypeMismatch where
    # both are concrete and disagree
    REJECT = 'reject'
    # silently keep whichever binding was seen first
    KEEP_FIRST = 'keep-first'


@dataclasses.dataclass(frozen=True)
class Settings:
    conflict_policy: ConflictPolicy = ConflictPolicy.REJECT


current_settings: ContextVar[Settings] = ContextVar(
    'settings', default=Settings()
)


@contextmanager
def change_settings(**changes: object) -> Iterator[Settings]:
    settings = dataclasses.replace(current_settings.get(), **changes)
    token = current_settings.set(settings)
    try:
        yield settings
    finally:
        current_settings.reset(token)
