"""
Post Model
==========

Domain model representing a post owned by the upstream API.
This is a pure domain object with no infrastructure dependencies.
"""
from typing import Optional
from dataclasses import dataclass


@dataclass
class Post:
    """
    Post domain model.
    
    The upstream API is the system of record: ``id`` is assigned by the
    upstream on create and is ``None`` until then.
    """
    title: str
    body: str
    user_id: int
    id: Optional[int] = None
    
    def word_count(self) -> int:
        """Count whitespace-delimited, non-empty tokens of the body."""
        return len(self.body.split())
    
    def rewrite(self, title: str, body: str) -> None:
        """Replace title and body; the author is left untouched."""
        self.title = title
        self.body = body
