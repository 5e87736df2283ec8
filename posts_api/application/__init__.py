"""
Application Layer
=================

Application services and use cases.
This layer orchestrates domain records and repositories.

Contains:
- Use Cases: Write operations (create post, update post, update user)
- Services: Application services that join, enrich and reshape records
- DTOs: Pydantic request and response shapes
"""
