"""Counting of repeated request lines."""

from __future__ import annotations

from dataclasses import dataclass

MAX_REQUEST_LENGTH = 255


@dataclass
class _Entry:
    request: str
    count: int = 1


class RequestCounter:
    """Counts requests in the order they are first seen.

    A request is stored cut to 255 characters, but matched on its full
    text, so a longer request never matches an earlier one.
    """

    def __init__(self) -> None:
        self._entries: list[_Entry] = []
        self._index: dict[str, _Entry] = {}

    def add(self, request: str) -> None:
        """Count one occurrence of ``request``."""
        entry = self._index.get(request)
        if entry is not None:
            entry.count += 1
            return
        entry = _Entry(request[:MAX_REQUEST_LENGTH])
        self._entries.append(entry)
        self._index.setdefault(entry.request, entry)

    def most_common(self, limit: int) -> list[tuple[str, int]]:
        """Return up to ``limit`` ``(request, count)`` pairs, most frequent first.

        Ties put the later-seen request first. The least frequent entry of
        the ranking is never reported.
        """
        ranked = sorted(self._entries, key=lambda entry: entry.count)
        ranked.reverse()
        reported = ranked[:-1][: max(limit, 0)]
        return [(entry.request, entry.count) for entry in reported]

    def __len__(self) -> int:
        return len(self._entries)