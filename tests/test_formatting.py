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

import unittest

from cv_builder.formatting import (
    contact_items,
    format_date,
    format_date_range,
    group_skills,
    has_date_range,
    non_blank,
    present_sections,
    safe_filename,
    skill_level_weight,
)
from cv_builder.models import CV, PersonalInfo, SkillEntry, SkillLevel


class TestFormatDate(unittest.TestCase):

    def test_year_month(self):
        self.assertEqual(format_date("2020-01"), "Jan 2020")
        self.assertEqual(format_date("2023-12"), "Dec 2023")

    def test_full_date_and_timestamp(self):
        self.assertEqual(format_date("2021-03-15"), "Mar 2021")
        self.assertEqual(format_date("2021-03-15T00:00:00Z"), "Mar 2021")

    def test_bare_year(self):
        self.assertEqual(format_date("2019"), "2019")

    def test_blank(self):
        self.assertEqual(format_date(""), "")
        self.assertEqual(format_date(None), "")

    def test_unparseable_is_returned_as_is(self):
        self.assertEqual(format_date(" Spring 2020 "), "Spring 2020")
        self.assertEqual(format_date("2020-13"), "2020-13")


class TestDateRange(unittest.TestCase):

    def test_closed_range(self):
        self.assertEqual(format_date_range("2020-01", "2023-12"), "Jan 2020 - Dec 2023")

    def test_ongoing_ignores_end(self):
        self.assertEqual(format_date_range("2020-01", "2023-12", ongoing=True), "Jan 2020 - Present")
        self.assertEqual(format_date_range("2020-01", "", ongoing=True), "Jan 2020 - Present")

    def test_has_date_range(self):
        self.assertFalse(has_date_range("", "", False))
        self.assertTrue(has_date_range("", "", True))
        self.assertTrue(has_date_range("2020-01", "", False))


class TestSkills(unittest.TestCase):

    def test_weights(self):
        self.assertEqual(skill_level_weight("Beginner"), 25)
        self.assertEqual(skill_level_weight("Intermediate"), 50)
        self.assertEqual(skill_level_weight("Advanced"), 75)
        self.assertEqual(skill_level_weight(SkillLevel.EXPERT), 100)

    def test_unknown_level_is_intermediate(self):
        self.assertEqual(skill_level_weight("Guru"), 50)
        self.assertEqual(skill_level_weight(""), 50)
        self.assertEqual(skill_level_weight(None), 50)

    def test_grouping_keeps_first_seen_order(self):
        skills = [
            SkillEntry(name="Go", category="Languages"),
            SkillEntry(name="Postgres", category="Databases"),
            SkillEntry(name="Python", category="Languages"),
            SkillEntry(name="Mentoring", category="  "),
        ]
        groups = group_skills(skills)
        self.assertEqual([c for c, _ in groups], ["Languages", "Databases", "Other"])
        self.assertEqual([s.name for s in groups[0][1]], ["Go", "Python"])


class TestSections(unittest.TestCase):

    def test_empty_cv_has_no_sections(self):
        self.assertEqual(present_sections(CV()), [])

    def test_whitespace_summary_is_absent(self):
        self.assertEqual(present_sections(CV(summary="   ")), [])

    def test_order(self):
        cv = CV(summary="Hi", skills=[SkillEntry(name="Go")])
        self.assertEqual(present_sections(cv), ["summary", "skills"])


class TestMisc(unittest.TestCase):

    def test_non_blank(self):
        self.assertEqual(non_blank(["a", "", "  ", " b "]), ["a", "b"])
        self.assertEqual(non_blank(None), [])

    def test_contact_items_skip_blanks(self):
        personal = PersonalInfo(email="a@b.c", city="Paris", country="", github=" ")
        self.assertEqual(contact_items(personal), [("Email", "a@b.c"), ("Location", "Paris")])

    def test_contact_location_includes_address(self):
        personal = PersonalInfo(address="1 Main St", city="Springfield", country="USA")
        self.assertEqual(contact_items(personal), [("Location", "1 Main St, Springfield, USA")])

    def test_safe_filename(self):
        self.assertEqual(safe_filename("My CV: 2024!", "pdf"), "My_CV_2024.pdf")
        self.assertEqual(safe_filename("", "docx"), "CV.docx")
        self.assertEqual(safe_filename(None, "docx"), "CV.docx")


if __name__ == '__main__':
    unittest.main()
