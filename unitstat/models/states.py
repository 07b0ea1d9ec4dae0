from enum import IntEnum
from typing import Self


class UnitStateEnum(IntEnum):
    """Integer enum of a unit state with a lowercase string token.

    The integer value is what gets serialized; the token is the
    lowercase member name.
    """

    @property
    def token(self) -> str:
        """Canonical lowercase token of the member.
        """
        return self.name.lower()

    def __str__(self) -> str:
        return self.token

    @classmethod
    def from_token(cls, token: str) -> Self:
        """Look up a member by its exact lowercase token.

        Args:
            token: State token, e.g. 'active' or 'not_found'

        Returns:
            The matching member, or UNKNOWN when nothing matches
        """
        for member in cls:
            if member.token == token:
                return member
        return cls.UNKNOWN  # type: ignore[attr-defined]


class SystemdUnitActiveState(UnitStateEnum):
    """Systemd unit active states.
    """

    UNKNOWN = 0
    ACTIVE = 1
    RELOADING = 2
    INACTIVE = 3
    FAILED = 4
    ACTIVATING = 5
    DEACTIVATING = 6


class SystemdUnitLoadState(UnitStateEnum):
    """Systemd unit load states.
    """

    UNKNOWN = 0
    LOADED = 1
    ERROR = 2
    MASKED = 3
    NOT_FOUND = 4

    @classmethod
    def from_wire(cls, token: str) -> Self:
        """Parse a load state as systemd reports it on D-Bus.

        Systemd uses hyphens ('not-found') where the tokens use
        underscores.
        """
        return cls.from_token(token.replace('-', '_'))
