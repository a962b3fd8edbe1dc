"""Email value object"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Email:
    value: str

    def __post_init__(self):
        normalized = self.value.strip().lower()
        if "@" not in normalized:
            raise ValueError("Invalid email address")
        # Emails are compared case-insensitively everywhere
        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value
