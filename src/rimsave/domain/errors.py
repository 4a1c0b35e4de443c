"""Exceptions raised while building the domain model from a save document."""

from __future__ import annotations

from collections.abc import Mapping


class SaveFormatError(Exception):
    """Base class for every failure that aborts a build."""


class StructuralError(SaveFormatError):
    """Raised when a node does not have the shape the builder expects."""


class MissingRootError(StructuralError):
    """Raised when the document has no top-level game container."""

    def __init__(self, container: str) -> None:
        super().__init__(f"no <{container}> container found under the document root")
        self.container = container


class MissingFieldError(StructuralError):
    """Raised when a required field is absent or empty on a node."""

    def __init__(self, field: str, context: str) -> None:
        super().__init__(f"required field {field!r} missing on {context}")
        self.field = field
        self.context = context


class InvalidFieldError(StructuralError):
    """Raised when a field is present but cannot be interpreted."""

    def __init__(self, field: str, value: str, context: str) -> None:
        super().__init__(f"field {field!r} on {context} has invalid value {value!r}")
        self.field = field
        self.value = value
        self.context = context


class UnknownVariantError(StructuralError):
    """Raised when a name node matches none of the known name shapes."""

    def __init__(self, attributes: Mapping[str, str], context: str) -> None:
        super().__init__(f"unknown name node type on {context} (attributes: {dict(attributes)})")
        self.attributes = dict(attributes)
        self.context = context


class DocumentParseError(SaveFormatError):
    """Raised when the raw document cannot be parsed as markup."""


class MissingPlayerFactionError(SaveFormatError):
    """Raised when no faction carries the player colony category."""

    def __init__(self, player_def: str) -> None:
        super().__init__(f"couldn't find a faction with def {player_def!r}")
        self.player_def = player_def


class RelationNotFoundError(LookupError):
    """Raised by the strict relation query when no entry exists."""

    def __init__(self, faction: str, other: str) -> None:
        super().__init__(f"{faction} has no relation to {other}")
        self.faction = faction
        self.other = other
