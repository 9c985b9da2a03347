from __future__ import annotations

from dataclasses import dataclass

DEFAULT_COMBINATORS: tuple[str, ...] = (" ", "+", "~", ">")


@dataclass(frozen=True)
class BuilderConfig:
    combinators: tuple[str, ...] = DEFAULT_COMBINATORS
    validate_combinators: bool = True
    log_level: str = "WARNING"
