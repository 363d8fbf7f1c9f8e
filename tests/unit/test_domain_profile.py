"""
Unit tests for the Profile aggregate and its embedded entries.
"""
from datetime import date

import pytest
from devconnect.core.errors import ValidationError
from devconnect.domain.models import Education, Experience, Profile, normalize_skills


def _experience(entry_id: str, title: str = "Engineer") -> Experience:
    return Experience(id=entry_id, title=title, company="Acme", from_date=date(2020, 1, 1))


def _education(entry_id: str) -> Education:
    return Education(
        id=entry_id,
        school="MIT",
        degree="BSc",
        fieldofstudy="Computer Science",
        from_date=date(2014, 9, 1),
        to_date=date(2018, 6, 1),
    )


@pytest.fixture
def profile():
    return Profile.create("user-1", {"status": "Developer", "skills": "python, go"})


class TestNormalizeSkills:
    """Tests for normalize_skills"""

    def test_splits_and_trims(self):
        assert normalize_skills(" HTML , CSS,JavaScript ") == ["HTML", "CSS", "JavaScript"]

    def test_drops_blanks_and_duplicates_keeping_first(self):
        assert normalize_skills("go,,python, go ,rust,python") == ["go", "python", "rust"]

    def test_accepts_list(self):
        assert normalize_skills(["a", " b", "a"]) == ["a", "b"]

    def test_none_is_empty(self):
        assert normalize_skills(None) == []


class TestProfileCreate:
    """Tests for Profile.create"""

    def test_normalizes_skills_and_collects_social(self):
        profile = Profile.create(
            "user-1",
            {
                "status": "Developer",
                "skills": "python, go",
                "company": "Acme",
                "twitter": "https://twitter.com/me",
            },
        )
        assert profile.id is None
        assert profile.skills == ["python", "go"]
        assert profile.company == "Acme"
        assert profile.social.to_dict() == {"twitter": "https://twitter.com/me"}

    def test_missing_status_and_skills_reports_both(self):
        with pytest.raises(ValidationError) as exc_info:
            Profile.create("user-1", {"skills": " , "})
        fields = {detail["field"] for detail in exc_info.value.details}
        assert fields == {"status", "skills"}


class TestProfileApplyUpdate:
    """Partial update semantics"""

    def test_omitted_fields_keep_stored_values(self, profile):
        profile.apply_update({"status": "Developer", "skills": "python", "bio": "Hi"})
        profile.apply_update({"status": "Senior Developer", "skills": "python"})
        assert profile.status == "Senior Developer"
        assert profile.bio == "Hi"

    def test_social_links_merge_per_field(self, profile):
        profile.apply_update({"status": "Dev", "skills": "x", "linkedin": "li"})
        profile.apply_update({"status": "Dev", "skills": "x", "twitter": "tw"})
        assert profile.social.to_dict() == {"linkedin": "li", "twitter": "tw"}

    def test_blank_status_rejected(self, profile):
        with pytest.raises(ValidationError):
            profile.apply_update({"status": "   ", "skills": "x"})


class TestEmbeddedEntries:
    """Experience/education ordering and removal"""

    def test_add_experience_prepends(self, profile):
        profile.add_experience(_experience("first"))
        profile.add_experience(_experience("second"))
        assert [entry.id for entry in profile.experience] == ["second", "first"]

    def test_remove_experience_by_id(self, profile):
        profile.add_experience(_experience("first"))
        profile.add_experience(_experience("second"))
        assert profile.remove_experience("first") is True
        assert [entry.id for entry in profile.experience] == ["second"]

    def test_remove_unknown_experience_leaves_list_untouched(self, profile):
        profile.add_experience(_experience("first"))
        profile.add_experience(_experience("second"))
        assert profile.remove_experience("missing") is False
        assert [entry.id for entry in profile.experience] == ["second", "first"]

    def test_education_add_and_remove(self, profile):
        profile.add_education(_education("e1"))
        profile.add_education(_education("e2"))
        assert [entry.id for entry in profile.education] == ["e2", "e1"]
        assert profile.remove_education("e2") is True
        assert profile.remove_education("e2") is False
        assert [entry.id for entry in profile.education] == ["e1"]


class TestEntryValidation:
    """Required fields and date ranges"""

    def test_experience_requires_title(self):
        with pytest.raises(ValidationError) as exc_info:
            Experience(id="x", title="", company="Acme", from_date=date(2020, 1, 1))
        assert exc_info.value.details[0]["field"] == "title"

    def test_experience_requires_from(self):
        with pytest.raises(ValidationError):
            Experience(id="x", title="Dev", company="Acme", from_date=None)

    def test_to_before_from_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            Experience(
                id="x",
                title="Dev",
                company="Acme",
                from_date=date(2020, 1, 1),
                to_date=date(2019, 1, 1),
            )
        assert exc_info.value.details[0]["field"] == "to"

    def test_education_requires_fieldofstudy(self):
        with pytest.raises(ValidationError):
            Education(
                id="x",
                school="MIT",
                degree="BSc",
                fieldofstudy=" ",
                from_date=date(2014, 9, 1),
            )
