"""
Infrastructure Layer
====================

Concrete implementations of the domain repository interfaces,
backed by the upstream JSON API over HTTP.
"""
