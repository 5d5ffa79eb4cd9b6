"""Constants for Post model field names and realtime actions"""


class PostFields:
    """Field name constants for Post model"""
    ID = "id"
    TITLE = "title"
    CONTENT = "content"
    IMAGE_URL = "image_url"
    CREATOR = "creator"
    CREATED_AT = "created_at"
    UPDATED_AT = "updated_at"

    # MongoDB specific
    MONGO_ID = "_id"


class PostActions:
    """Actions carried by realtime post events"""
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"

    ALL = (CREATE, UPDATE, DELETE)

    # Realtime channel all post events are broadcast on
    TOPIC = "posts"
