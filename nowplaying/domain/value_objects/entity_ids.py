"""Entity ID value objects"""

from dataclasses import dataclass
from uuid import UUID, uuid4


@dataclass(frozen=True)
class SubscriberId:
    value: UUID

    def __post_init__(self):
        if not isinstance(self.value, UUID):
            raise ValueError("Subscriber ID must be a valid UUID")

    @classmethod
    def generate(cls) -> 'SubscriberId':
        """Generate a new random UUID"""
        return cls(uuid4())

    def __str__(self) -> str:
        return str(self.value)
