"""Constants for Post model field names"""


class PostFields:
    """Field name constants for Post model and its embedded likes/comments"""
    ID = "id"
    USER_ID = "user_id"
    NAME = "name"
    AVATAR = "avatar"
    TEXT = "text"
    LIKES = "likes"
    COMMENTS = "comments"
    CREATED_AT = "created_at"
    VERSION = "version"
    
    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field
