"""Constants for Post payload field names"""


class PostFields:
    """Field name constants for upstream post payloads"""
    ID = "id"
    TITLE = "title"
    BODY = "body"
    USER_ID = "userId"
    
    # Query string filter understood by the upstream posts resource
    USER_ID_FILTER = "userId"
