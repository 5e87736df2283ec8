"""
Delete Outcome
==============

Result of a delete against the upstream API.

Deletes never raise for request-level failures. The outcome keeps
"not found" and "upstream failure" apart while still evaluating as a
boolean: only ``DELETED`` is truthy.
"""
from enum import Enum


class DeleteOutcome(str, Enum):
    DELETED = "deleted"
    NOT_FOUND = "not_found"
    UPSTREAM_FAILURE = "upstream_failure"
    
    def __bool__(self) -> bool:
        return self is DeleteOutcome.DELETED
