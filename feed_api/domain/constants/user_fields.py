"""Constants for User model field names"""


class UserFields:
    """Field name constants for User model"""
    ID = "id"
    EMAIL = "email"
    NAME = "name"
    HASHED_PASSWORD = "password"
    STATUS = "status"
    POSTS = "posts"

    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field
