from dataclasses import dataclass
from enum import Enum


class KnownRole(Enum):
    """Suggested role vocabulary of the console"""

    USER = "ROLE_USER"
    ADMIN = "ROLE_ADMIN"
    MANAGER = "ROLE_MANAGER"
    EDITOR = "ROLE_EDITOR"
    GUEST = "ROLE_GUEST"
    SUPPORT = "ROLE_SUPPORT"
    AUDITOR = "ROLE_AUDITOR"

    @property
    def trusted(self) -> bool:
        return True

    @property
    def description(self) -> str:
        return ROLE_DESCRIPTIONS[self]

    @classmethod
    def get_all_roles(cls) -> list[str]:
        """Get all known role values"""
        return [role.value for role in cls]

    @classmethod
    def from_string(cls, role_str: str) -> "KnownRole":
        """Convert string to KnownRole, case insensitive"""
        try:
            return cls(role_str.strip().upper())
        except ValueError:
            raise ValueError(f"Invalid role: {role_str}")


ROLE_DESCRIPTIONS = {
    KnownRole.USER: "Standard access to application features.",
    KnownRole.ADMIN: "Full control over the application, including user and role management.",
    KnownRole.MANAGER: "Can manage teams and projects, oversee user activity within their scope.",
    KnownRole.EDITOR: "Can create and modify content within the application.",
    KnownRole.GUEST: "Limited access, typically for viewing public information.",
    KnownRole.SUPPORT: "Access to support tools and user information for troubleshooting.",
    KnownRole.AUDITOR: "Read-only access to logs and system configurations for auditing purposes.",
}

CUSTOM_ROLE_DESCRIPTION = "Custom role with specific permissions."


@dataclass(frozen=True)
class SuggestedRole:
    """A role string outside the known vocabulary, e.g. from AI suggestions."""

    value: str

    @property
    def trusted(self) -> bool:
        return False

    @property
    def description(self) -> str:
        return CUSTOM_ROLE_DESCRIPTION


Role = KnownRole | SuggestedRole


def parse_role(role_str: str) -> Role:
    """Return the KnownRole matching role_str, or a SuggestedRole wrapping it."""
    try:
        return KnownRole.from_string(role_str)
    except ValueError:
        return SuggestedRole(role_str.strip())


def split_roles(roles: str) -> list[str]:
    """Split a comma-separated roles string, trimming and dropping empty entries."""
    return [r.strip() for r in roles.split(",") if r.strip()]


def join_roles(roles: list[str]) -> str:
    return ",".join(split_roles(",".join(roles)))
