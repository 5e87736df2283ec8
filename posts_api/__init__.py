"""
Posts API
=========

HTTP facade that reshapes posts and users from an upstream JSON API
into enriched responses for frontend consumers.
"""

__version__ = "1.0.0"
