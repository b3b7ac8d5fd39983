"""Mutable store of headers sent with every request."""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence


class HeaderStore:
    """Header name to value mapping injected into every request.

    Names are stored as given (no case folding). The store is not
    synchronized: mutating it from one thread while another thread has a
    request in flight is the caller's responsibility. Use one client per
    thread, or guard ``add``/``remove`` with an external lock.
    """

    def __init__(self, initial: Mapping[str, str] | None = None) -> None:
        self._headers: dict[str, str] = dict(initial or {})

    def add(self, name: str, value: str) -> None:
        """Insert a header, overwriting any previous value."""
        self._headers[name] = value

    def remove(self, name: str) -> None:
        """Remove a header. No-op if it was never added."""
        self._headers.pop(name, None)

    def get(self, name: str) -> str | None:
        return self._headers.get(name)

    def snapshot(self, overrides: Mapping[str, str] | None = None) -> dict[str, str]:
        """Copy of the stored headers with per-request overrides applied."""
        merged = dict(self._headers)
        if overrides:
            merged.update(overrides)
        return merged

    def flatten(self) -> list[str]:
        """Serialize to ``[name, value, name, value, ...]``."""
        flat: list[str] = []
        for name, value in self._headers.items():
            flat.append(name)
            flat.append(value)
        return flat

    @classmethod
    def from_flat(cls, flat: Sequence[str]) -> HeaderStore:
        """Rebuild a store from a sequence produced by ``flatten``."""
        if len(flat) % 2:
            raise ValueError("Flat header sequence must have an even length")
        return cls(dict(zip(flat[::2], flat[1::2])))

    def __contains__(self, name: object) -> bool:
        return name in self._headers

    def __iter__(self) -> Iterator[str]:
        return iter(self._headers)

    def __len__(self) -> int:
        return len(self._headers)

    def __repr__(self) -> str:
        return f"HeaderStore({self._headers!r})"
