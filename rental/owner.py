"""Owner class and owner code validation."""

from .exceptions import ValidationError

MIN_OWNER_CODE_LENGTH = 3


class Owner:
    """The rental agency an invoice is issued for."""

    def __init__(self, code: str, name: str = ""):
        self.code = code
        self.name = name

    @property
    def display_name(self) -> str:
        """Human-readable owner banner, e.g. 'FastRentals (OWN001)'."""
        return f"{self.name} ({self.code})"


def validate_owner_code(owner: Owner) -> None:
    """Raise ValidationError if the owner code is empty or too short."""
    if not owner.code or len(owner.code) < MIN_OWNER_CODE_LENGTH:
        raise ValidationError()
