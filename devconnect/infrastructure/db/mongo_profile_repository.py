# Standard library imports
import logging
from typing import Optional, List, Dict, Any

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo.errors import PyMongoError

# Local application imports
from ...core.errors import NotFound, StorageFailure
from ...domain.repositories.profile_repository import ProfileRepository
from ...domain.models.profile import Profile, Experience, Education, SocialLinks
from ...domain.constants import ProfileFields, SocialFields, EntryFields
from ...utils.datetime_utils import date_to_datetime, datetime_to_date, ensure_utc
from .mongo_connection import get_profile_collection
from .mongo_user_repository import to_object_id
from .versioned_write import replace_versioned, upsert_versioned

logger = logging.getLogger(__name__)


class MongoProfileRepository(ProfileRepository):
    """MongoDB implementation of ProfileRepository"""

    def __init__(self, profile_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.profile_collection = profile_collection if profile_collection is not None else get_profile_collection()

    async def find_by_user(self, user_id: str) -> Optional[Profile]:
        """
        Find the profile owned by a user

        Args:
            user_id: Owner user ID

        Returns:
            Profile domain model if found, None otherwise
        """
        if not user_id:
            return None

        try:
            document = await self.profile_collection.find_one({ProfileFields.USER_ID: user_id})
        except PyMongoError as e:
            logger.error(f"Error finding profile for user {user_id}: {e}", exc_info=True)
            raise StorageFailure(f"Error finding profile for user: {str(e)}") from e

        if document is None:
            return None
        return self._document_to_profile(document)

    async def list_all(self) -> List[Profile]:
        try:
            cursor = self.profile_collection.find({})
            profiles = []
            async for document in cursor:
                profiles.append(self._document_to_profile(document))
            return profiles
        except PyMongoError as e:
            logger.error(f"Error listing profiles: {e}", exc_info=True)
            raise StorageFailure(f"Error listing profiles: {str(e)}") from e

    async def save(self, profile: Profile) -> Profile:
        """
        Save profile (create new or versioned replace of an existing one)

        Args:
            profile: Profile domain model to save

        Returns:
            Saved Profile domain model with ID and new version set
        """
        document = self._profile_to_dict(profile)

        if profile.id is None:
            # Keyed on user_id so a second profile for the same user is never inserted
            stored = await upsert_versioned(
                self.profile_collection,
                {ProfileFields.USER_ID: profile.user_id},
                document,
                "Profile",
            )
            return self._document_to_profile(stored)

        object_id = to_object_id(profile.id)
        if object_id is None:
            raise NotFound("Profile not found")
        stored = await replace_versioned(
            self.profile_collection, object_id, profile.version, document, "Profile"
        )
        return self._document_to_profile(stored)

    async def delete_by_user(self, user_id: str, session: Optional[Any] = None) -> bool:
        try:
            result = await self.profile_collection.delete_one(
                {ProfileFields.USER_ID: user_id}, session=session
            )
        except PyMongoError as e:
            logger.error(f"Error deleting profile for user {user_id}: {e}", exc_info=True)
            raise StorageFailure(f"Error deleting profile: {str(e)}") from e
        return result.deleted_count > 0

    def _document_to_profile(self, document: Dict[str, Any]) -> Profile:
        """
        Convert MongoDB document to Profile domain model

        Args:
            document: MongoDB document dictionary

        Returns:
            Profile domain model
        """
        if not document or ProfileFields.MONGO_ID not in document:
            raise StorageFailure("Invalid profile document: missing _id field")

        social = document.get(ProfileFields.SOCIAL) or {}
        return Profile(
            id=str(document[ProfileFields.MONGO_ID]),
            user_id=document.get(ProfileFields.USER_ID, ""),
            status=document.get(ProfileFields.STATUS, ""),
            skills=list(document.get(ProfileFields.SKILLS) or []),
            company=document.get(ProfileFields.COMPANY),
            website=document.get(ProfileFields.WEBSITE),
            location=document.get(ProfileFields.LOCATION),
            bio=document.get(ProfileFields.BIO),
            github_username=document.get(ProfileFields.GITHUB_USERNAME),
            social=SocialLinks(**{name: social.get(name) for name in SocialFields.ALL}),
            experience=[
                self._document_to_experience(entry)
                for entry in document.get(ProfileFields.EXPERIENCE) or []
            ],
            education=[
                self._document_to_education(entry)
                for entry in document.get(ProfileFields.EDUCATION) or []
            ],
            created_at=ensure_utc(document.get(ProfileFields.CREATED_AT)),
            version=int(document.get(ProfileFields.VERSION, 0)),
        )

    def _document_to_experience(self, entry: Dict[str, Any]) -> Experience:
        return Experience(
            id=entry[EntryFields.ID],
            title=entry.get(EntryFields.TITLE, ""),
            company=entry.get(EntryFields.COMPANY, ""),
            location=entry.get(EntryFields.LOCATION),
            from_date=datetime_to_date(entry.get(EntryFields.FROM_DATE)),
            to_date=datetime_to_date(entry.get(EntryFields.TO_DATE)),
            current=bool(entry.get(EntryFields.CURRENT, False)),
            description=entry.get(EntryFields.DESCRIPTION),
        )

    def _document_to_education(self, entry: Dict[str, Any]) -> Education:
        return Education(
            id=entry[EntryFields.ID],
            school=entry.get(EntryFields.SCHOOL, ""),
            degree=entry.get(EntryFields.DEGREE, ""),
            fieldofstudy=entry.get(EntryFields.FIELD_OF_STUDY, ""),
            from_date=datetime_to_date(entry.get(EntryFields.FROM_DATE)),
            to_date=datetime_to_date(entry.get(EntryFields.TO_DATE)),
            current=bool(entry.get(EntryFields.CURRENT, False)),
            description=entry.get(EntryFields.DESCRIPTION),
        )

    def _profile_to_dict(self, profile: Profile) -> Dict[str, Any]:
        """
        Convert Profile domain model to MongoDB document

        Embedded lists are written in their in-memory order (newest first).
        """
        return {
            ProfileFields.USER_ID: profile.user_id,
            ProfileFields.STATUS: profile.status,
            ProfileFields.SKILLS: list(profile.skills),
            ProfileFields.COMPANY: profile.company,
            ProfileFields.WEBSITE: profile.website,
            ProfileFields.LOCATION: profile.location,
            ProfileFields.BIO: profile.bio,
            ProfileFields.GITHUB_USERNAME: profile.github_username,
            ProfileFields.SOCIAL: profile.social.to_dict(),
            ProfileFields.EXPERIENCE: [
                {
                    EntryFields.ID: entry.id,
                    EntryFields.TITLE: entry.title,
                    EntryFields.COMPANY: entry.company,
                    EntryFields.LOCATION: entry.location,
                    EntryFields.FROM_DATE: date_to_datetime(entry.from_date),
                    EntryFields.TO_DATE: date_to_datetime(entry.to_date),
                    EntryFields.CURRENT: entry.current,
                    EntryFields.DESCRIPTION: entry.description,
                }
                for entry in profile.experience
            ],
            ProfileFields.EDUCATION: [
                {
                    EntryFields.ID: entry.id,
                    EntryFields.SCHOOL: entry.school,
                    EntryFields.DEGREE: entry.degree,
                    EntryFields.FIELD_OF_STUDY: entry.fieldofstudy,
                    EntryFields.FROM_DATE: date_to_datetime(entry.from_date),
                    EntryFields.TO_DATE: date_to_datetime(entry.to_date),
                    EntryFields.CURRENT: entry.current,
                    EntryFields.DESCRIPTION: entry.description,
                }
                for entry in profile.education
            ],
            ProfileFields.CREATED_AT: profile.created_at,
        }
