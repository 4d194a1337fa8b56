# Copyright 2026 Justin Cook
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Data models for the CV Builder application.

The CV record arrives from the form wizard as camelCase JSON. Every
``from_dict`` here is tolerant: missing or null collections become empty
lists and missing strings become "", so renderers only ever need to check
for emptiness.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional


def _text(raw: Dict[str, Any], *keys: str) -> str:
    """Returns the first non-null value among keys as a string."""
    for key in keys:
        value = raw.get(key)
        if value is not None:
            return str(value)
    return ""


def _flag(raw: Dict[str, Any], *keys: str) -> bool:
    for key in keys:
        value = raw.get(key)
        if value is not None:
            return bool(value)
    return False


def _strings(raw: Dict[str, Any], *keys: str) -> List[str]:
    for key in keys:
        value = raw.get(key)
        if value is not None:
            if isinstance(value, str):
                return [value]
            return [str(v) for v in value if v is not None]
    return []


def _records(raw: Dict[str, Any], key: str, record_type) -> list:
    return [record_type.from_dict(item) for item in (raw.get(key) or []) if isinstance(item, dict)]


def _timestamp(value: Any) -> Optional[datetime]:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    try:
        return datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    except ValueError:
        return None


class SkillLevel(str, Enum):
    """Fixed, ordered proficiency scale used by the skills form."""
    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"
    EXPERT = "Expert"


@dataclass
class PersonalInfo:
    """Header block of the CV. Only the name is expected to be present."""
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone: str = ""
    address: str = ""
    city: str = ""
    country: str = ""
    linkedin: str = ""
    website: str = ""
    github: str = ""
    profile_image: str = ""

    @classmethod
    def from_dict(cls, raw: Optional[Dict[str, Any]]) -> "PersonalInfo":
        raw = raw or {}
        return cls(
            first_name=_text(raw, "firstName", "first_name"),
            last_name=_text(raw, "lastName", "last_name"),
            email=_text(raw, "email"),
            phone=_text(raw, "phone"),
            address=_text(raw, "address"),
            city=_text(raw, "city"),
            country=_text(raw, "country"),
            linkedin=_text(raw, "linkedIn", "linkedin"),
            website=_text(raw, "website"),
            github=_text(raw, "github"),
            profile_image=_text(raw, "profileImage", "profile_image"),
        )


@dataclass
class ExperienceEntry:
    """A single job. When is_current is set the stored end_date is ignored."""
    job_title: str = ""
    company: str = ""
    location: str = ""
    start_date: str = ""
    end_date: str = ""
    is_current: bool = False
    description: str = ""
    achievements: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "ExperienceEntry":
        return cls(
            job_title=_text(raw, "jobTitle", "job_title", "title"),
            company=_text(raw, "company"),
            location=_text(raw, "location"),
            start_date=_text(raw, "startDate", "start_date"),
            end_date=_text(raw, "endDate", "end_date"),
            is_current=_flag(raw, "isCurrentJob", "is_current"),
            description=_text(raw, "description"),
            achievements=_strings(raw, "achievements"),
        )


@dataclass
class EducationEntry:
    degree: str = ""
    field_of_study: str = ""
    institution: str = ""
    location: str = ""
    start_date: str = ""
    end_date: str = ""
    is_current: bool = False
    gpa: str = ""
    achievements: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "EducationEntry":
        return cls(
            degree=_text(raw, "degree"),
            field_of_study=_text(raw, "fieldOfStudy", "field_of_study"),
            institution=_text(raw, "institution"),
            location=_text(raw, "location"),
            start_date=_text(raw, "startDate", "start_date"),
            end_date=_text(raw, "endDate", "end_date"),
            is_current=_flag(raw, "isCurrentlyStudying", "is_current"),
            gpa=_text(raw, "gpa"),
            achievements=_strings(raw, "achievements"),
        )


@dataclass
class SkillEntry:
    """
    A named skill. ``level`` is kept as the raw string so that values outside
    SkillLevel survive the round trip; renderers map it to a weight.
    """
    name: str = ""
    level: str = SkillLevel.INTERMEDIATE.value
    category: str = ""

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "SkillEntry":
        level = raw.get("level")
        if isinstance(level, SkillLevel):
            level = level.value
        return cls(
            name=_text(raw, "name"),
            level="" if level is None else str(level),
            category=_text(raw, "category"),
        )


@dataclass
class ProjectEntry:
    name: str = ""
    description: str = ""
    technologies: List[str] = field(default_factory=list)
    start_date: str = ""
    end_date: str = ""
    is_ongoing: bool = False
    project_url: str = ""
    repository_url: str = ""
    highlights: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "ProjectEntry":
        return cls(
            name=_text(raw, "name"),
            description=_text(raw, "description"),
            technologies=_strings(raw, "technologies"),
            start_date=_text(raw, "startDate", "start_date"),
            end_date=_text(raw, "endDate", "end_date"),
            is_ongoing=_flag(raw, "isOngoing", "is_ongoing"),
            project_url=_text(raw, "projectUrl", "project_url"),
            repository_url=_text(raw, "githubUrl", "repository_url"),
            highlights=_strings(raw, "highlights"),
        )


@dataclass
class CertificationEntry:
    """Professional certification. never_expires suppresses the expiry date."""
    name: str = ""
    issuer: str = ""
    issue_date: str = ""
    expiry_date: str = ""
    never_expires: bool = False
    credential_id: str = ""
    credential_url: str = ""

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "CertificationEntry":
        return cls(
            name=_text(raw, "name"),
            issuer=_text(raw, "issuer"),
            issue_date=_text(raw, "issueDate", "issue_date"),
            expiry_date=_text(raw, "expiryDate", "expiry_date"),
            never_expires=_flag(raw, "neverExpires", "never_expires"),
            credential_id=_text(raw, "credentialId", "credential_id"),
            credential_url=_text(raw, "credentialUrl", "credential_url"),
        )


@dataclass
class AchievementEntry:
    title: str = ""
    description: str = ""
    date: str = ""
    category: str = ""
    organization: str = ""

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "AchievementEntry":
        return cls(
            title=_text(raw, "title"),
            description=_text(raw, "description"),
            date=_text(raw, "date"),
            category=_text(raw, "category"),
            organization=_text(raw, "organization"),
        )


@dataclass
class CV:
    """
    Structured data representing a complete CV.
    This is the single object every renderer and exporter consumes.
    """
    id: Optional[int] = None
    user_id: Optional[int] = None
    title: str = ""
    template_id: int = 1
    is_public: bool = False
    summary: str = ""
    personal_info: PersonalInfo = field(default_factory=PersonalInfo)
    experience: List[ExperienceEntry] = field(default_factory=list)
    education: List[EducationEntry] = field(default_factory=list)
    skills: List[SkillEntry] = field(default_factory=list)
    projects: List[ProjectEntry] = field(default_factory=list)
    certifications: List[CertificationEntry] = field(default_factory=list)
    achievements: List[AchievementEntry] = field(default_factory=list)
    created_at: Optional[datetime] = None
    last_modified: Optional[datetime] = None

    def touch(self):
        """Stamps the record as modified now."""
        self.last_modified = datetime.now()

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "CV":
        template_id = raw.get("templateId", raw.get("template_id"))
        cv_id = raw.get("id")
        user_id = raw.get("userId", raw.get("user_id"))
        return cls(
            id=int(cv_id) if cv_id is not None else None,
            user_id=int(user_id) if user_id is not None else None,
            title=_text(raw, "title"),
            template_id=int(template_id) if template_id is not None else 1,
            is_public=_flag(raw, "isPublic", "is_public"),
            summary=_text(raw, "summary"),
            personal_info=PersonalInfo.from_dict(raw.get("personalInfo", raw.get("personal_info"))),
            experience=_records(raw, "experience", ExperienceEntry),
            education=_records(raw, "education", EducationEntry),
            skills=_records(raw, "skills", SkillEntry),
            projects=_records(raw, "projects", ProjectEntry),
            certifications=_records(raw, "certifications", CertificationEntry),
            achievements=_records(raw, "achievements", AchievementEntry),
            created_at=_timestamp(raw.get("createdAt", raw.get("created_at"))),
            last_modified=_timestamp(raw.get("lastModified", raw.get("last_modified"))),
        )


@dataclass(frozen=True)
class Template:
    """
    A named, versioned presentation definition.

    html_template is Jinja2 markup rendered against the CV view context;
    css_styles is inlined into the final document. Instances are immutable so
    a lookup doubles as a render-time snapshot.
    """
    name: str
    html_template: str
    css_styles: str = ""
    category: str = "professional"
    description: str = ""
    id: Optional[int] = None
    version: int = 1
    is_active: bool = True
