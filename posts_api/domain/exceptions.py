"""
Domain Exceptions
=================

Error taxonomy shared by repositories, services and controllers.

- UpstreamError: the upstream call failed (network fault, timeout,
  unexpected status, unparseable payload). Surfaced as HTTP 500.
- NotFoundError: the targeted record does not exist. Surfaced as HTTP 404.

A read that finds nothing is not an error: repositories and services
return ``None`` and the controller decides what to do with it.
"""
from typing import Optional, Union


class PostsApiError(Exception):
    """Base class for every error raised by this service."""


class UpstreamError(PostsApiError):
    """The upstream API could not serve the request."""
    
    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class NotFoundError(PostsApiError):
    """A record addressed by id does not exist."""
    
    def __init__(self, resource: str, resource_id: Union[int, str]) -> None:
        self.resource = resource
        self.resource_id = resource_id
        self.message = f"{resource} with id {resource_id} not found"
        super().__init__(self.message)
