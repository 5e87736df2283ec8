"""
User Model
==========

Domain model representing a user owned by the upstream API.
"""
from typing import Optional
from dataclasses import dataclass


@dataclass
class User:
    """User domain model. ``id`` is ``None`` until the upstream assigns it."""
    name: str
    username: str
    email: str
    id: Optional[int] = None
    
    def update_profile(self, name: str, username: str, email: str) -> None:
        """Overwrite every mutable field."""
        self.name = name
        self.username = username
        self.email = email
