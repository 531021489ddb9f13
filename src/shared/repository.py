"""Repository port and its protean-backed implementation.

Aggregates are persisted through four operations: create, update, find and
find_all. Lookups that miss raise ``NotFoundError`` whatever the storage
underneath reports.
"""

from abc import ABC, abstractmethod

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from shared.exceptions import NotFoundError


class Repository(ABC):
    """Abstract persistence contract for one aggregate type."""

    @abstractmethod
    def create(self, entity) -> None: ...

    @abstractmethod
    def update(self, entity) -> None: ...

    @abstractmethod
    def find(self, identifier):
        """Return the aggregate with ``identifier`` or raise ``NotFoundError``."""
        ...

    @abstractmethod
    def find_all(self) -> list: ...


class DomainRepository(Repository):
    """Repository backed by the active domain's provider for ``aggregate_cls``."""

    aggregate_cls = None

    @property
    def _repo(self):
        return current_domain.repository_for(self.aggregate_cls)

    def create(self, entity) -> None:
        self._repo.add(entity)

    def update(self, entity) -> None:
        # Only aggregates that already exist can be updated
        self.find(entity.id)
        self._repo.add(entity)

    def find(self, identifier):
        try:
            return self._repo.get(identifier)
        except ObjectNotFoundError as exc:
            raise NotFoundError(self.aggregate_cls.__name__, identifier) from exc

    def find_all(self) -> list:
        return list(self._repo._dao.query.limit(None).all().items)
