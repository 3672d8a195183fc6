"""Link registry: relation name to absolute URL for one resource snapshot."""

from collections.abc import Iterable, Iterator
from urllib.parse import urljoin

from ..models.links import LinkDescriptor
from .errors import LinkNotFoundError


class LinkRegistry:
    """Relation name to absolute URL map for one resource snapshot.

    Relation names are case sensitive. When a payload repeats a relation the
    last descriptor wins.
    """

    def __init__(self, links: dict[str, LinkDescriptor] | None = None) -> None:
        self._links: dict[str, LinkDescriptor] = dict(links or {})

    @classmethod
    def from_descriptors(
        cls, descriptors: Iterable[LinkDescriptor], base_url: str | None = None
    ) -> "LinkRegistry":
        """Build a registry, resolving relative hrefs against base_url."""
        links: dict[str, LinkDescriptor] = {}
        for descriptor in descriptors:
            href = urljoin(base_url, descriptor.href) if base_url else descriptor.href
            links[descriptor.rel] = descriptor.model_copy(update={"href": href})
        return cls(links)

    def has(self, relation: str) -> bool:
        return relation in self._links

    def url_for(self, relation: str) -> str:
        """Return the absolute URL for a relation or raise LinkNotFoundError."""
        try:
            return self._links[relation].href
        except KeyError:
            raise LinkNotFoundError(relation) from None

    def method_for(self, relation: str) -> str:
        try:
            return self._links[relation].method
        except KeyError:
            raise LinkNotFoundError(relation) from None

    def relations(self) -> list[str]:
        return list(self._links)

    def __contains__(self, relation: object) -> bool:
        return relation in self._links

    def __iter__(self) -> Iterator[str]:
        return iter(self._links)

    def __len__(self) -> int:
        return len(self._links)

    def __repr__(self) -> str:
        return f"LinkRegistry({sorted(self._links)!r})"
