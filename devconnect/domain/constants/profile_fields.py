"""Constants for Profile model field names"""


class ProfileFields:
    """Field name constants for Profile model and its embedded entries"""
    ID = "id"
    USER_ID = "user_id"
    COMPANY = "company"
    WEBSITE = "website"
    LOCATION = "location"
    BIO = "bio"
    STATUS = "status"
    SKILLS = "skills"
    GITHUB_USERNAME = "github_username"
    SOCIAL = "social"
    EXPERIENCE = "experience"
    EDUCATION = "education"
    CREATED_AT = "created_at"
    VERSION = "version"
    
    # Scalar fields an upsert may overwrite individually
    SCALAR_FIELDS = (COMPANY, WEBSITE, LOCATION, BIO, STATUS, SKILLS, GITHUB_USERNAME)
    
    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field


class SocialFields:
    """Keys of the Profile.social sub-document"""
    YOUTUBE = "youtube"
    TWITTER = "twitter"
    FACEBOOK = "facebook"
    LINKEDIN = "linkedin"
    INSTAGRAM = "instagram"
    
    ALL = (YOUTUBE, TWITTER, FACEBOOK, LINKEDIN, INSTAGRAM)


class EntryFields:
    """Field names shared by embedded Experience and Education entries"""
    ID = "id"
    TITLE = "title"
    COMPANY = "company"
    SCHOOL = "school"
    DEGREE = "degree"
    FIELD_OF_STUDY = "fieldofstudy"
    LOCATION = "location"
    FROM_DATE = "from"
    TO_DATE = "to"
    CURRENT = "current"
    DESCRIPTION = "description"
