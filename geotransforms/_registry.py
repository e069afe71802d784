"""
Per-kind lookup tables.

Every operation that differs between solids (construction, containment,
parameter box, transform) keeps one ``ShapeRegistry`` keyed by the shape's
``kind`` string. Lookup happens once per call site, so dispatch over the
closed catalog stays a dictionary access.

Usage
-----
    contains_methods = ShapeRegistry("contains")
    contains_methods.register("sphere", _contains_sphere)
    contains_methods["sphere"](s, 0.0, 0.0, 0.5)
    contains_methods.available()  # ["sphere"]
"""

from typing import Any


class ShapeRegistry:
    """Table from shape kind (``"sphere"``, ``"torus"``, ...) to an entry.

    Entries are whatever the owning module dispatches on: a class, a
    predicate or a ``(low, high)`` box.

    Parameters
    ----------
    name : str
        What the table holds, used in lookup errors (e.g. "contains").
    """

    def __init__(self, name: str):
        self.name = name
        self._by_kind: dict[str, Any] = {}

    def register(self, kind: str, entry: Any) -> None:
        """Store ``entry`` for shapes of ``kind``, replacing any previous one."""
        self._by_kind[kind] = entry

    def __getitem__(self, kind: str) -> Any:
        try:
            return self._by_kind[kind]
        except KeyError:
            raise KeyError(
                f"No {self.name} entry for shape kind {kind!r}; "
                f"known kinds: {self.available()}"
            ) from None

    def __contains__(self, kind: str) -> bool:
        return kind in self._by_kind

    def __len__(self) -> int:
        return len(self._by_kind)

    def available(self) -> list[str]:
        """Sorted kind names with an entry."""
        return sorted(self._by_kind)
