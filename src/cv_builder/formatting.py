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
Display rules shared by the HTML and DOCX render paths.

The two paths build their output independently; they agree on what a CV
looks like only because both go through these helpers.
"""

import re
from typing import Iterable, List, Optional, Tuple

from cv_builder.models import CV, PersonalInfo, SkillEntry, SkillLevel

MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
          "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

PRESENT = "Present"

SKILL_WEIGHTS = {
    SkillLevel.BEGINNER.value: 25,
    SkillLevel.INTERMEDIATE.value: 50,
    SkillLevel.ADVANCED.value: 75,
    SkillLevel.EXPERT.value: 100,
}
DEFAULT_SKILL_WEIGHT = 50

UNCATEGORISED = "Other"

# Section keys in output order
SECTION_ORDER = (
    "summary",
    "experience",
    "projects",
    "education",
    "skills",
    "certifications",
    "achievements",
)

SECTION_TITLES = {
    "summary": "Professional Summary",
    "experience": "Work Experience",
    "projects": "Projects",
    "education": "Education",
    "skills": "Skills",
    "certifications": "Certifications",
    "achievements": "Achievements",
}

_DATE_RE = re.compile(r"^(\d{4})(?:-(\d{1,2}))?(?:-\d{1,2})?(?:T.*)?$")


def format_date(value: Optional[str]) -> str:
    """
    Formats a year-month string as 'Jan 2020'.

    Accepts 'YYYY-MM' and 'YYYY-MM-DD'; a bare year is returned as is. Blank
    input gives '' and anything unparseable is returned stripped rather than
    raising.
    """
    if not value:
        return ""
    text = str(value).strip()
    match = _DATE_RE.match(text)
    if not match:
        return text
    year, month = match.group(1), match.group(2)
    if month is None:
        return year
    index = int(month)
    if not 1 <= index <= 12:
        return text
    return f"{MONTHS[index - 1]} {year}"


def format_date_range(start: Optional[str], end: Optional[str], ongoing: bool = False) -> str:
    """Returns '{start} - {end}', with 'Present' as the end whenever ongoing is set."""
    end_label = PRESENT if ongoing else format_date(end)
    return f"{format_date(start)} - {end_label}"


def has_date_range(start: Optional[str], end: Optional[str], ongoing: bool = False) -> bool:
    """False when a range would render as a bare ' - '."""
    return bool(ongoing or format_date(start) or format_date(end))


def non_blank(items: Optional[Iterable[str]]) -> List[str]:
    """Drops whitespace-only strings and trims the rest."""
    return [item.strip() for item in (items or []) if item and item.strip()]


def skill_level_weight(level) -> int:
    """Maps a proficiency level to a 0-100 bar width; unknown levels weigh 50."""
    if isinstance(level, SkillLevel):
        level = level.value
    return SKILL_WEIGHTS.get(level, DEFAULT_SKILL_WEIGHT)


def group_skills(skills: Iterable[SkillEntry]) -> List[Tuple[str, List[SkillEntry]]]:
    """Groups skills by category, keeping the order categories are first seen."""
    groups = {}
    for skill in skills or []:
        category = (skill.category or "").strip() or UNCATEGORISED
        groups.setdefault(category, []).append(skill)
    return list(groups.items())


def full_name(personal: PersonalInfo) -> str:
    return " ".join(part.strip() for part in (personal.first_name, personal.last_name) if part and part.strip())


def location_line(*parts: str) -> str:
    return ", ".join(p.strip() for p in parts if p and p.strip())


def contact_items(personal: PersonalInfo) -> List[Tuple[str, str]]:
    """Ordered (label, value) pairs for the contact block, blanks omitted."""
    candidates = [
        ("Email", personal.email),
        ("Phone", personal.phone),
        ("Location", location_line(personal.address, personal.city, personal.country)),
        ("LinkedIn", personal.linkedin),
        ("Website", personal.website),
        ("GitHub", personal.github),
    ]
    return [(label, value.strip()) for label, value in candidates if value and value.strip()]


def present_sections(cv: CV) -> List[str]:
    """Keys of the sections that have content, in output order."""
    present = []
    for key in SECTION_ORDER:
        value = getattr(cv, key)
        if key == "summary":
            if value and value.strip():
                present.append(key)
        elif value:
            present.append(key)
    return present


def safe_filename(title: Optional[str], extension: str) -> str:
    """Builds a download filename from the CV title."""
    safe_title = re.sub(r'[^\w\s-]', '', title or '')
    safe_title = re.sub(r'[-\s]+', '_', safe_title).strip('-_')
    if not safe_title:
        safe_title = "CV"
    return f"{safe_title[:60]}.{extension}"
