"""
Design (models.py)
- Purpose: Define simple, typed data structures for domain entities (Store).
- Inputs: Field values (str).
- Outputs: Dataclass instances.
- Side effects: None.
"""

from dataclasses import dataclass, field
from typing import List

from .config import CONTINUOUS_HOURS, DOMESTIC_MOBILE_PREFIX, SHORT_PHONE_MAX_LEN


@dataclass
class Store:
    """
    Design (Store)
    - Purpose: Represents a single retail location in the registry.
    - Fields:
        name: lookup/delete key (matched case-insensitively); never renamed.
        address: free-form text.
        specialization: free-form text.
        working_hours: free-form text; "24/7" means the store never closes.
        phones: phone numbers in the order they were added (may be empty).
    """
    name: str
    address: str
    specialization: str
    working_hours: str
    phones: List[str] = field(default_factory=list)

    def add_phone(self, phone: str) -> None:
        self.phones.append(phone)

    def matches_name(self, name: str) -> bool:
        return self.name.casefold() == name.casefold()

    def works_continuously(self) -> bool:
        return self.working_hours.casefold() == CONTINUOUS_HOURS.casefold()

    def has_short_phone_number(self) -> bool:
        return any(len(phone) < SHORT_PHONE_MAX_LEN for phone in self.phones)

    def has_domestic_mobile_number(self) -> bool:
        return any(phone.startswith(DOMESTIC_MOBILE_PREFIX) for phone in self.phones)

    def is_featured(self) -> bool:
        """True for stores returned by the "Find specific stores" query."""
        return (
            self.works_continuously()
            and self.has_short_phone_number()
            and self.has_domestic_mobile_number()
        )

    def render(self) -> str:
        phones = ", ".join(self.phones)
        return (
            f"Store(name='{self.name}', address='{self.address}', phones=[{phones}], "
            f"specialization='{self.specialization}', working_hours='{self.working_hours}')"
        )

    def __str__(self) -> str:
        return self.render()
