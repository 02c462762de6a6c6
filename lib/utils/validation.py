"""Validation helpers used while assembling the service registry."""
from typing import Any, Iterable, List


def ensure(condition: bool, message: str) -> None:
    if not condition:
        raise ValueError(message)


def duplicates(names: Iterable[str]) -> List[str]:
    """Return the names that occur more than once, in first-seen order."""
    seen = set()
    dup: List[str] = []
    for n in names:
        if n in seen and n not in dup:
            dup.append(n)
        seen.add(n)
    return dup


def ensure_instance(obj: Any, cls: type, what: str) -> None:
    ensure(isinstance(obj, cls), f"{what} is not a {cls.__name__}: {obj!r}")
