"""
API/Presentation Layer
======================

HTTP API layer using FastAPI.
This layer handles HTTP requests and responses.

Contains:
- Controllers: FastAPI route handlers for posts and users
- Dependencies: Service lookups backed by the DI container
- Error handlers: Translation of domain errors to HTTP responses
"""
