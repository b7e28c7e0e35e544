"""Data models for documentation records parsed from JSDoc comments."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class DocMember:
    """A documented parameter or property."""

    name: str
    type: str
    description: str | None = None


@dataclass(frozen=True)
class DocReturn:
    """A documented return value."""

    type: str
    description: str | None = None


@dataclass(frozen=True)
class DocRecord:
    """Everything one doc comment declares (typedef, callback, class, etc.)."""

    kind: str = ""  # typedef type / callback / class / function
    name: str = ""
    description: str = ""
    extends_type: str | None = None
    parameters: tuple[DocMember, ...] = field(default_factory=tuple)
    properties: tuple[DocMember, ...] = field(default_factory=tuple)
    returns: tuple[DocReturn, ...] = field(default_factory=tuple)

    @property
    def is_class(self) -> bool:
        """Check if the record documents a class."""
        return self.kind == "class"
