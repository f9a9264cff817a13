"""Library members with their borrowing priority."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterator

_RULE = "=" * 50


class Priority(IntEnum):
    """Borrowing priority; a higher value is served first."""

    MASYARAKAT_UMUM = 1
    MAHASISWA = 2
    DOSEN = 3

    def label(self) -> str:
        """Human-readable name of the priority."""
        return _LABELS[self]


_LABELS = {
    Priority.DOSEN: "Dosen",
    Priority.MAHASISWA: "Mahasiswa",
    Priority.MASYARAKAT_UMUM: "Masyarakat Umum",
}


class MemberNotFoundError(LookupError):
    """Raised when no member with the requested name is registered."""

    def __init__(self, name: str, message: str | None = None) -> None:
        self.name = name
        super().__init__(message or f"Anggota '{name}' tidak ditemukan")


@dataclass(frozen=True)
class Member:
    """A registered member."""

    name: str
    priority: Priority


class MemberList:
    """Ordered collection of members; new members go to the end."""

    def __init__(self) -> None:
        self._members: list[Member] = []

    def __iter__(self) -> Iterator[Member]:
        return iter(self._members)

    def __len__(self) -> int:
        return len(self._members)

    def add(self, name: str, priority: Priority) -> Member:
        """Append a new member and return it."""
        member = Member(name, Priority(priority))
        self._members.append(member)
        return member

    def find(self, name: str) -> Member | None:
        """Return the first member with this name, or None."""
        return next((m for m in self._members if m.name == name), None)

    def remove(self, name: str) -> Member:
        """Remove and return the first member with this name."""
        if not self._members:
            raise MemberNotFoundError(name, "List anggota kosong")
        for index, member in enumerate(self._members):
            if member.name == name:
                return self._members.pop(index)
        raise MemberNotFoundError(name)

    def clear(self) -> None:
        """Drop every member."""
        self._members.clear()

    def render(self) -> str:
        """Return the member table as text."""
        if not self._members:
            return "List anggota kosong\n"
        lines = [
            "",
            _RULE,
            "|                DAFTAR ANGGOTA                  |",
            _RULE,
            "| No |       Nama        |       Prioritas       |",
            "-" * 50,
        ]
        lines.extend(
            f"| {number:<2} | {member.name:<17} | {member.priority.label():<21} |"
            for number, member in enumerate(self._members, start=1)
        )
        lines.append(_RULE)
        return "\n".join(lines) + "\n\n"