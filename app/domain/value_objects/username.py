"""Username value object"""

import re
from dataclasses import dataclass

USERNAME_PATTERN = re.compile(r"[A-Za-z0-9_-]{3,20}")


@dataclass(frozen=True)
class Username:
    value: str

    def __post_init__(self):
        if not USERNAME_PATTERN.fullmatch(self.value):
            raise ValueError("Username must be 3-20 characters (letters, numbers, _ -).")
        object.__setattr__(self, "value", self.value.lower())

    def __str__(self) -> str:
        return self.value
