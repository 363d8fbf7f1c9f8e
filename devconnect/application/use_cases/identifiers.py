# Standard library imports
import secrets


def generate_entry_id() -> str:
    """
    Generate an ID for an embedded entry (experience, education, comment)

    Returns:
        24 character lowercase hex string, the same shape as a Mongo ObjectId
    """
    return secrets.token_hex(12)
