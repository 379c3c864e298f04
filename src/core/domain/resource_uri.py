"""Access pointers printed in rendered text, and their parsing."""

from dataclasses import dataclass
from enum import Enum

from .exceptions import InvalidResourceURIError


class ResourceKind(Enum):
    """URI scheme of an access pointer."""

    DOCUMENT = "docs"
    CATEGORY = "docs-category"
    SUBCATEGORY = "docs-subcategory"


@dataclass(frozen=True)
class ResourceURI:
    """A parsed ``docs://``, ``docs-category://`` or ``docs-subcategory://`` pointer."""

    kind: ResourceKind
    path: str

    def __str__(self) -> str:
        return f"{self.kind.value}://{self.path}"

    @classmethod
    def parse(cls, uri: str) -> "ResourceURI":
        """Parse a pointer string.

        Raises:
            InvalidResourceURIError: On an unknown scheme, an empty path, or a
                subcategory pointer without both parts.
        """
        scheme, sep, path = uri.strip().partition("://")
        if not sep:
            raise InvalidResourceURIError(f"Not a resource URI: {uri}", uri=uri)

        try:
            kind = ResourceKind(scheme)
        except ValueError as e:
            raise InvalidResourceURIError(
                f"Unknown resource scheme: {scheme}",
                uri=uri,
                cause=e,
                context={"supported": [k.value for k in ResourceKind]},
            ) from e

        path = path.strip("/")
        if not path:
            raise InvalidResourceURIError(f"Resource URI has no path: {uri}", uri=uri)

        if kind is ResourceKind.SUBCATEGORY:
            category, _, subcategory = path.partition("/")
            if not category or not subcategory:
                raise InvalidResourceURIError(
                    f"Expected docs-subcategory://<category>/<subcategory>, got {uri}",
                    uri=uri,
                )

        return cls(kind=kind, path=path)

    @property
    def parts(self) -> tuple[str, str]:
        """``(category, subcategory)`` of a subcategory pointer."""
        category, _, subcategory = self.path.partition("/")
        return category, subcategory


def document_uri(doc_id: str) -> str:
    return f"{ResourceKind.DOCUMENT.value}://{doc_id}"


def category_uri(category: str) -> str:
    return f"{ResourceKind.CATEGORY.value}://{category}"


def subcategory_uri(category: str, subcategory: str) -> str:
    return f"{ResourceKind.SUBCATEGORY.value}://{category}/{subcategory}"
