"""Value Objects for the Page Model Context.

ArtifactIdentity is the immutable name + aliases pair shared by every
artifact (applications, pages, regions, controls). NamedArtifact embeds
an identity and the optional presence verifier that backs
verify_presence().
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional, Sequence, Tuple

from robotpages.domains.page_model.errors import PresenceError, ValidationError

logger = logging.getLogger(__name__)

PresenceCheck = Callable[[], Any]


@dataclass(frozen=True)
class ArtifactIdentity:
    """Canonical name plus alternate lookup keys of an artifact.

    The first key returned by keys() is always the name, followed by the
    aliases in declaration order.
    """
    name: str
    aliases: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Validate name and aliases on creation."""
        if self.name is None:
            raise ValidationError("Artifact requires a name to be defined")
        if not isinstance(self.name, str):
            raise ValidationError(
                f"Artifact name must be a string, got {type(self.name).__name__}"
            )
        if not self.name.strip():
            raise ValidationError("Artifact name cannot be empty")
        if self.aliases is None:
            object.__setattr__(self, "aliases", ())
        elif isinstance(self.aliases, (list, tuple)):
            object.__setattr__(self, "aliases", tuple(self.aliases))
        else:
            raise ValidationError(
                f"Aliases must be a list of strings, got {type(self.aliases).__name__}"
            )
        for alias in self.aliases:
            if not isinstance(alias, str):
                raise ValidationError(
                    f"Each alias of '{self.name}' must be a string, "
                    f"got {type(alias).__name__}"
                )
            if not alias.strip():
                raise ValidationError(f"Aliases of '{self.name}' cannot be empty")

    @classmethod
    def create(
        cls,
        name: Any,
        aliases: Optional[Sequence[str]] = None,
    ) -> "ArtifactIdentity":
        """Build an identity from loosely typed input.

        Args:
            name: The canonical name
            aliases: A list or tuple of alias strings, or None

        Returns:
            A validated ArtifactIdentity

        Raises:
            ValidationError: If name or aliases are malformed
        """
        return cls(name=name, aliases=aliases)

    def keys(self) -> Tuple[str, ...]:
        """Return every lookup key for this identity (name first)."""
        return (self.name,) + self.aliases

    def __str__(self) -> str:
        return self.name


class NamedArtifact:
    """Base for every addressable element of an application under test.

    Holds an ArtifactIdentity and an optional presence check. The presence
    check is a zero-argument callable returning a truthy value when the
    artifact is currently displayed; see robotpages.adapters for
    implementations backed by Browser Library and SeleniumLibrary.
    """

    kind = "artifact"

    def __init__(
        self,
        name: Any = None,
        aliases: Optional[Sequence[str]] = None,
        presence: Optional[PresenceCheck] = None,
    ) -> None:
        self._identity = ArtifactIdentity.create(name, aliases)
        self._presence: Optional[PresenceCheck] = None
        if presence is not None:
            self.set_presence(presence)

    @property
    def identity(self) -> ArtifactIdentity:
        return self._identity

    @property
    def name(self) -> str:
        return self._identity.name

    @property
    def aliases(self) -> Tuple[str, ...]:
        return self._identity.aliases

    @property
    def presence(self) -> Optional[PresenceCheck]:
        return self._presence

    def set_presence(self, presence: Optional[PresenceCheck]) -> "NamedArtifact":
        """Set (or clear with None) the presence check of this artifact."""
        if presence is not None and not callable(presence):
            raise ValidationError(
                f"Presence check of {self.kind} '{self.name}' must be callable"
            )
        self._presence = presence
        return self

    def verify_presence(self, failure_message: str) -> None:
        """Confirm this artifact is currently present.

        Args:
            failure_message: Message carried by the PresenceError on failure

        Raises:
            PresenceError: If the presence check reports the artifact absent
        """
        if self._presence is None:
            logger.debug(
                "No presence check defined for %s '%s', assuming present",
                self.kind, self.name,
            )
            return
        if not self._presence():
            logger.info("Presence check failed for %s '%s'", self.kind, self.name)
            raise PresenceError(failure_message)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(name={self.name!r}, "
            f"aliases={list(self.aliases)!r})"
        )
