# Standard library imports
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Dict, Iterable, List, Optional, Union

# Local application imports
from ...core.errors import ValidationError
from ..constants import ProfileFields, SocialFields


def normalize_skills(raw: Union[str, Iterable[str], None]) -> List[str]:
    """
    Turn a comma separated string (or a list of strings) into an ordered set.

    Entries are trimmed, blanks dropped, and later duplicates discarded so the
    first occurrence keeps its position.
    """
    if raw is None:
        return []
    parts = raw.split(",") if isinstance(raw, str) else raw
    skills: List[str] = []
    for part in parts:
        skill = str(part).strip()
        if skill and skill not in skills:
            skills.append(skill)
    return skills


def _check_date_range(from_date: Optional[date], to_date: Optional[date]) -> None:
    if from_date is None:
        raise ValidationError.for_field("from", "From date is required")
    if to_date is not None and to_date < from_date:
        raise ValidationError.for_field("to", "To date must not be before from date")


@dataclass
class Experience:
    """Work history entry embedded in a Profile"""
    id: str
    title: str
    company: str
    from_date: date
    location: Optional[str] = None
    to_date: Optional[date] = None
    current: bool = False
    description: Optional[str] = None

    def __post_init__(self) -> None:
        """Business validations"""
        if not self.title or not self.title.strip():
            raise ValidationError.for_field("title", "Title is required")
        if not self.company or not self.company.strip():
            raise ValidationError.for_field("company", "Company is required")
        _check_date_range(self.from_date, self.to_date)


@dataclass
class Education:
    """Education entry embedded in a Profile"""
    id: str
    school: str
    degree: str
    fieldofstudy: str
    from_date: date
    to_date: Optional[date] = None
    current: bool = False
    description: Optional[str] = None

    def __post_init__(self) -> None:
        """Business validations"""
        if not self.school or not self.school.strip():
            raise ValidationError.for_field("school", "School is required")
        if not self.degree or not self.degree.strip():
            raise ValidationError.for_field("degree", "Degree is required")
        if not self.fieldofstudy or not self.fieldofstudy.strip():
            raise ValidationError.for_field("fieldofstudy", "Field of study is required")
        _check_date_range(self.from_date, self.to_date)


@dataclass
class SocialLinks:
    youtube: Optional[str] = None
    twitter: Optional[str] = None
    facebook: Optional[str] = None
    linkedin: Optional[str] = None
    instagram: Optional[str] = None

    def to_dict(self) -> Dict[str, str]:
        """Only the links that are set."""
        return {
            name: getattr(self, name)
            for name in SocialFields.ALL
            if getattr(self, name)
        }


@dataclass
class Profile:
    """
    Profile aggregate: one per user.

    Experience and education are embedded, newest first, and only change
    through the methods below so the ordering invariant holds.
    ``version`` is the optimistic-concurrency counter maintained by the
    repository; domain code never edits it.
    """
    id: Optional[str]
    user_id: str
    status: str
    skills: List[str]
    company: Optional[str] = None
    website: Optional[str] = None
    location: Optional[str] = None
    bio: Optional[str] = None
    github_username: Optional[str] = None
    social: SocialLinks = field(default_factory=SocialLinks)
    experience: List[Experience] = field(default_factory=list)
    education: List[Education] = field(default_factory=list)
    created_at: Optional[datetime] = None
    version: int = 0

    def __post_init__(self) -> None:
        """Business validations"""
        if not self.user_id:
            raise ValueError("Owner user ID is required")
        self._validate_required()

    def _validate_required(self) -> None:
        problems = []
        if not self.status or not self.status.strip():
            problems.append((ProfileFields.STATUS, "Status is required"))
        if not self.skills:
            problems.append((ProfileFields.SKILLS, "Skills is required"))
        if problems:
            raise ValidationError.for_fields(problems)

    @classmethod
    def create(cls, user_id: str, fields: Dict[str, Any], created_at: Optional[datetime] = None) -> "Profile":
        """Build a new profile from the fields supplied on first upsert."""
        scalars = {
            name: fields[name]
            for name in ProfileFields.SCALAR_FIELDS
            if fields.get(name) is not None
        }
        scalars[ProfileFields.SKILLS] = normalize_skills(scalars.get(ProfileFields.SKILLS))
        social = SocialLinks(**{
            name: fields[name] for name in SocialFields.ALL if fields.get(name)
        })
        return cls(
            id=None,
            user_id=user_id,
            status=scalars.pop(ProfileFields.STATUS, ""),
            skills=scalars.pop(ProfileFields.SKILLS),
            social=social,
            created_at=created_at,
            **scalars,
        )

    def apply_update(self, fields: Dict[str, Any]) -> None:
        """
        Partial update: only keys present (and not None) are written.

        Social links are merged one by one, so an update that only sends
        ``twitter`` keeps the stored ``linkedin``.
        """
        for name in ProfileFields.SCALAR_FIELDS:
            if fields.get(name) is None:
                continue
            value = fields[name]
            if name == ProfileFields.SKILLS:
                value = normalize_skills(value)
            setattr(self, name, value)
        for name in SocialFields.ALL:
            if fields.get(name):
                setattr(self.social, name, fields[name])
        self._validate_required()

    # Experience -------------------------------------------------------------

    def add_experience(self, entry: Experience) -> None:
        self.experience.insert(0, entry)

    def remove_experience(self, experience_id: str) -> bool:
        """Remove the entry with this id. Returns False when no entry matches."""
        return _remove_by_id(self.experience, experience_id)

    # Education --------------------------------------------------------------

    def add_education(self, entry: Education) -> None:
        self.education.insert(0, entry)

    def remove_education(self, education_id: str) -> bool:
        """Remove the entry with this id. Returns False when no entry matches."""
        return _remove_by_id(self.education, education_id)


def _remove_by_id(entries: List[Any], entry_id: str) -> bool:
    for index, entry in enumerate(entries):
        if entry.id == entry_id:
            del entries[index]
            return True
    return False
