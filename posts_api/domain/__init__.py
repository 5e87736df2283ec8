"""
Domain Layer
============

Core records and contracts of the service.
This layer has no dependencies on external frameworks or infrastructure.

Contains:
- Models: Post and User records as served by the upstream API
- Repository Interfaces: Abstract contracts for upstream data access
- Exceptions: Error taxonomy shared by every layer
"""
