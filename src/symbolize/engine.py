from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class SymbolGrid:
    """Rendered text art, one string per image row.

    The rows, the newline-joined string and its UTF-8 bytes are three views
    of the same value.
    """

    rows: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "rows", tuple(self.rows))

    @property
    def height(self) -> int:
        return len(self.rows)

    def to_rows(self) -> list[str]:
        return list(self.rows)

    def to_string(self) -> str:
        return "\n".join(self.rows)

    def to_bytes(self) -> bytes:
        return self.to_string().encode("utf-8")

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self):
        return iter(self.rows)

    def __str__(self) -> str:
        return self.to_string()

    def __bytes__(self) -> bytes:
        return self.to_bytes()
