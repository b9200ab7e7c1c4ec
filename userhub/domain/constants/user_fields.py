"""Constants for User model field names"""


class UserFields:
    """Stored document field names for the User model"""
    ID = "id"
    FULL_NAME = "fullName"
    AGE = "age"
    ADDRESS = "address"
    EMAIL = "email"
    CONTACT_NUMBER = "contactNumber"
    USERNAME = "username"
    HASHED_PASSWORD = "password"

    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field

    # Fields backed by a unique index, mapped to their user-facing label
    UNIQUE_LABELS = {
        EMAIL: "Email",
        USERNAME: "Username",
    }
