"""
Player class representing a roster member.
"""

import uuid
from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass(frozen=True)
class Player:
    """A named participant. Identity is the id, not the name."""
    name: str
    id: uuid.UUID = field(default_factory=uuid.uuid4)
    
    def __str__(self) -> str:
        return self.name
    
    def to_dict(self) -> Dict[str, Any]:
        """Serialize for the roster blob."""
        return {"id": str(self.id), "name": self.name}
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Player":
        """
        Rebuild a player from the roster blob.
        
        Raises:
            KeyError: If 'id' or 'name' is missing
            ValueError: If 'id' is not a valid UUID
        """
        return cls(name=str(data["name"]), id=uuid.UUID(str(data["id"])))
