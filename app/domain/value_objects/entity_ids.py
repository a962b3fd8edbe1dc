"""Entity ID value objects"""

from dataclasses import dataclass

# Largest value an INTEGER primary key column can hold
MAX_ENTITY_ID = 2**31 - 1


@dataclass(frozen=True)
class UserId:
    value: int

    def __post_init__(self):
        if not isinstance(self.value, int) or self.value <= 0:
            raise ValueError("User ID must be a positive integer")


@dataclass(frozen=True)
class ListingId:
    value: int

    def __post_init__(self):
        if not isinstance(self.value, int) or self.value <= 0:
            raise ValueError("Listing ID must be a positive integer")


@dataclass(frozen=True)
class InquiryId:
    value: int

    def __post_init__(self):
        if not isinstance(self.value, int) or self.value <= 0:
            raise ValueError("Inquiry ID must be a positive integer")
