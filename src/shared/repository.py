"""In-process repositories.

All SPM Café state lives in memory, one repository per aggregate class.
Restarting the process loses everything.
"""

from collections.abc import Callable, Iterable
from typing import Any

from shared.exceptions import ObjectNotFoundError


class InMemoryRepository:
    """Dict-backed store keyed by each record's identity attribute."""

    def __init__(self, name: str, identity: str = "id") -> None:
        self.name = name
        self.identity = identity
        self._records: dict[str, Any] = {}

    def _key(self, record) -> str:
        return str(getattr(record, self.identity))

    def add(self, record):
        self._records[self._key(record)] = record
        return record

    def get(self, identifier):
        try:
            return self._records[str(identifier)]
        except KeyError:
            raise ObjectNotFoundError(f"{self.name} `{identifier}` was not found") from None

    def find(self, identifier):
        return self._records.get(str(identifier))

    def exists(self, identifier) -> bool:
        return str(identifier) in self._records

    def all(self) -> list:
        return list(self._records.values())

    def filter(self, predicate: Callable[[Any], bool]) -> list:
        return [record for record in self._records.values() if predicate(record)]

    def remove(self, identifier) -> bool:
        return self._records.pop(str(identifier), None) is not None

    def extend(self, records: Iterable) -> None:
        for record in records:
            self.add(record)

    def reset(self) -> None:
        self._records.clear()

    def __len__(self) -> int:
        return len(self._records)


_repositories: dict[type, InMemoryRepository] = {}


def repository_for(cls: type) -> InMemoryRepository:
    """Return the repository for ``cls``, creating it on first use.

    Records are keyed by ``cls.identity_field`` when the class declares one,
    otherwise by ``id``.
    """
    repo = _repositories.get(cls)
    if repo is None:
        repo = InMemoryRepository(cls.__name__, identity=getattr(cls, "identity_field", "id"))
        _repositories[cls] = repo
    return repo


def reset_repositories() -> None:
    """Clear every repository (used between tests)."""
    for repo in _repositories.values():
        repo.reset()
