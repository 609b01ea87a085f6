"""Description of how vertex attributes are packed in a vertex buffer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class ElementType(IntEnum):
    """Attribute component types, with their GL enumeration values."""

    UNSIGNED_BYTE = 0x1401
    UNSIGNED_INT = 0x1405
    FLOAT = 0x1406


_SIZES = {
    ElementType.FLOAT: 4,
    ElementType.UNSIGNED_INT: 4,
    ElementType.UNSIGNED_BYTE: 1,
}


def size_of_type(gl_type: int) -> int:
    """Size in bytes of one component of ``gl_type``."""
    try:
        return _SIZES[ElementType(gl_type)]
    except ValueError:
        raise ValueError(f"unsupported element type: {gl_type!r}") from None


@dataclass(frozen=True)
class VertexBufferElement:
    """One vertex attribute: its component type, count and normalisation."""

    type: ElementType
    count: int
    normalized: bool

    @property
    def size(self) -> int:
        return self.count * size_of_type(self.type)


class VertexBufferLayout:
    """Ordered list of attributes with the resulting stride."""

    def __init__(self) -> None:
        self._elements: list[VertexBufferElement] = []
        self._stride = 0

    def push(self, element_type: int, count: int) -> None:
        """Append an attribute of ``count`` components of ``element_type``."""
        try:
            kind = ElementType(element_type)
        except ValueError:
            raise ValueError(f"unsupported element type: {element_type!r}") from None
        element = VertexBufferElement(kind, count, kind is ElementType.UNSIGNED_BYTE)
        self._elements.append(element)
        self._stride += element.size

    @property
    def elements(self) -> tuple[VertexBufferElement, ...]:
        return tuple(self._elements)

    @property
    def stride(self) -> int:
        """Bytes from one vertex to the next."""
        return self._stride