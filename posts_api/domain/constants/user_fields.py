"""Constants for User payload field names"""


class UserFields:
    """Field name constants for upstream user payloads"""
    ID = "id"
    NAME = "name"
    USERNAME = "username"
    EMAIL = "email"
