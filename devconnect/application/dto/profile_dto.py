# Standard library imports
from datetime import date, datetime
from typing import Dict, List, Optional, Union

# External package imports
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

# Local application imports
from ...domain.models.profile import Profile, Experience, Education, normalize_skills
from ...domain.models.user import User


class ProfileUpsertRequest(BaseModel):
    """
    DTO for creating or updating the caller's profile.

    ``status`` and ``skills`` are always required; every other field is
    optional and only written when supplied. ``skills`` accepts a comma
    separated string or a list and is normalized to an ordered set.
    """
    model_config = ConfigDict(str_strip_whitespace=True, populate_by_name=True)

    status: str
    skills: Union[str, List[str]]
    company: Optional[str] = None
    website: Optional[str] = None
    location: Optional[str] = None
    bio: Optional[str] = None
    github_username: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("github_username", "githubusername"),
    )
    youtube: Optional[str] = None
    twitter: Optional[str] = None
    facebook: Optional[str] = None
    linkedin: Optional[str] = None
    instagram: Optional[str] = None

    @field_validator("status")
    @classmethod
    def _require_status(cls, value: str) -> str:
        if not value:
            raise ValueError("Status is required")
        return value

    @field_validator("skills")
    @classmethod
    def _split_skills(cls, value: Union[str, List[str]]) -> List[str]:
        skills = normalize_skills(value)
        if not skills:
            raise ValueError("Skills is required")
        return skills


class ExperienceCreateRequest(BaseModel):
    """DTO for adding an experience entry; title, company and from are required"""
    model_config = ConfigDict(str_strip_whitespace=True, populate_by_name=True)

    title: str = Field(min_length=1, max_length=200)
    company: str = Field(min_length=1, max_length=200)
    location: Optional[str] = None
    from_date: date = Field(alias="from")
    to_date: Optional[date] = Field(default=None, alias="to")
    current: bool = False
    description: Optional[str] = None


class EducationCreateRequest(BaseModel):
    """DTO for adding an education entry; school, degree, fieldofstudy and from are required"""
    model_config = ConfigDict(str_strip_whitespace=True, populate_by_name=True)

    school: str = Field(min_length=1, max_length=200)
    degree: str = Field(min_length=1, max_length=200)
    fieldofstudy: str = Field(min_length=1, max_length=200)
    from_date: date = Field(alias="from")
    to_date: Optional[date] = Field(default=None, alias="to")
    current: bool = False
    description: Optional[str] = None


class ExperienceResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str
    company: str
    location: Optional[str] = None
    from_date: date = Field(alias="from")
    to_date: Optional[date] = Field(default=None, alias="to")
    current: bool = False
    description: Optional[str] = None

    @classmethod
    def from_domain(cls, entry: Experience) -> "ExperienceResponse":
        return cls(
            id=entry.id,
            title=entry.title,
            company=entry.company,
            location=entry.location,
            from_date=entry.from_date,
            to_date=entry.to_date,
            current=entry.current,
            description=entry.description,
        )


class EducationResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    school: str
    degree: str
    fieldofstudy: str
    from_date: date = Field(alias="from")
    to_date: Optional[date] = Field(default=None, alias="to")
    current: bool = False
    description: Optional[str] = None

    @classmethod
    def from_domain(cls, entry: Education) -> "EducationResponse":
        return cls(
            id=entry.id,
            school=entry.school,
            degree=entry.degree,
            fieldofstudy=entry.fieldofstudy,
            from_date=entry.from_date,
            to_date=entry.to_date,
            current=entry.current,
            description=entry.description,
        )


class ProfileOwner(BaseModel):
    """Public identity of a profile owner (populated on read endpoints)"""
    id: str
    name: str
    avatar_url: str = ""


class ProfileResponse(BaseModel):
    """DTO for profile response; experience and education are newest first"""
    id: str
    user_id: str
    user: Optional[ProfileOwner] = None
    status: str
    skills: List[str]
    company: Optional[str] = None
    website: Optional[str] = None
    location: Optional[str] = None
    bio: Optional[str] = None
    github_username: Optional[str] = None
    social: Dict[str, str] = Field(default_factory=dict)
    experience: List[ExperienceResponse] = Field(default_factory=list)
    education: List[EducationResponse] = Field(default_factory=list)
    created_at: Optional[datetime] = None

    @classmethod
    def from_domain(cls, profile: Profile, owner: Optional[User] = None) -> "ProfileResponse":
        return cls(
            id=profile.id or "",
            user_id=profile.user_id,
            user=ProfileOwner(id=owner.id or "", name=owner.name, avatar_url=owner.avatar_url)
            if owner is not None
            else None,
            status=profile.status,
            skills=list(profile.skills),
            company=profile.company,
            website=profile.website,
            location=profile.location,
            bio=profile.bio,
            github_username=profile.github_username,
            social=profile.social.to_dict(),
            experience=[ExperienceResponse.from_domain(entry) for entry in profile.experience],
            education=[EducationResponse.from_domain(entry) for entry in profile.education],
            created_at=profile.created_at,
        )


class DeleteAccountResponse(BaseModel):
    msg: str = "User deleted"
    posts_deleted: int = 0
