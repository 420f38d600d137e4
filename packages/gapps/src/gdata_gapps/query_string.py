"""QueryParameters — ordered query-string parameters shared by all queries."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, MutableMapping
from urllib.parse import urlencode


class QueryParameters(MutableMapping[str, str]):
    """Ordered mapping of query-string parameters.

    Keys listed in ``order`` are rendered first, in that order; any other
    key follows in insertion order. Keys starting with ``_`` are private
    to the owning query and never rendered. Assigning ``None``, through
    :meth:`set` or item assignment, removes the key.

    Values are form-encoded with :func:`urllib.parse.quote_plus`, so a
    space becomes ``+``. Unlike PHP's ``urlencode``, ``~`` is left as is.

    Example:
        ```python
        params = QueryParameters()
        params.set("start", "abc")
        params.render()  # "?start=abc"
        params.set("start", None)
        params.render()  # ""
        ```
    """

    def __init__(
        self,
        initial: dict[str, str] | None = None,
        *,
        order: Iterable[str] = (),
    ) -> None:
        self._params: dict[str, str] = {}
        self._order = tuple(order)
        for name, value in (initial or {}).items():
            self.set(name, value)

    def __getitem__(self, name: str) -> str:
        return self._params[name]

    def __setitem__(self, name: str, value: str | None) -> None:  # type: ignore[override]
        self.set(name, value)

    def __delitem__(self, name: str) -> None:
        del self._params[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._params)

    def __len__(self) -> int:
        return len(self._params)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._params!r})"

    def set(self, name: str, value: str | None) -> None:
        """Store ``value`` under ``name``; ``None`` removes the key."""
        if value is not None:
            self._params[name] = value
        else:
            self._params.pop(name, None)

    def render(self) -> str:
        """Return ``?k1=v1&k2=v2`` for the public parameters, or ``""``."""
        names = [k for k in self._order if k in self._params]
        names += [k for k in self._params if k not in self._order]
        public = {k: self._params[k] for k in names if not k.startswith("_")}
        return "?" + urlencode(public) if public else ""
