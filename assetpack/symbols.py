"""Offset symbol table and C header rendering."""

from __future__ import annotations

from dataclasses import dataclass, field

from assetpack.errors import MalformedInputError


@dataclass(frozen=True)
class MemorySummary:
    used: int
    available: int
    percent_used: int
    load_seconds: int
    baud_rate: int

    @classmethod
    def compute(cls, used: int, capacity: int, baud_rate: int) -> MemorySummary:
        return cls(
            used=used,
            available=capacity - used,
            percent_used=100 * used // capacity,
            load_seconds=8 * used // baud_rate,
            baud_rate=baud_rate,
        )

    def render(self) -> list[str]:
        return [
            f"#define TOTAL_MEMORY_USED {self.used}",
            f"#define TOTAL_MEMORY_AVAILABLE {self.available}",
            f"#define TOTAL_MEMORY_PERCENT_USED {self.percent_used}",
            f"// Time to load all data at {self.baud_rate} baud: {self.load_seconds} seconds",
        ]


@dataclass(slots=True)
class SymbolTable:
    """Ordered (symbol, offset) pairs for one packing run."""

    _entries: list[tuple[str, int]] = field(default_factory=list)
    _names: set[str] = field(default_factory=set)

    def add(self, name: str, offset: int) -> None:
        if name in self._names:
            raise MalformedInputError(f"Duplicate asset symbol '{name}'")
        self._names.add(name)
        self._entries.append((name, offset))

    @property
    def symbols(self) -> list[tuple[str, int]]:
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def render(self, summary: MemorySummary) -> str:
        lines = [f"#define {name}_OFFSET {offset}" for name, offset in self._entries]
        lines.append("")
        lines.extend(summary.render())
        return "\n".join(lines) + "\n"
