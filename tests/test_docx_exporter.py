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

import io
import json
import os
import unittest
import zipfile
from unittest.mock import patch

from docx import Document

from cv_builder.docx_exporter import DOCXExporter, _normalise_archive
from cv_builder.errors import ExportFailedError
from cv_builder.models import CV, EducationEntry, ExperienceEntry, PersonalInfo, SkillEntry

SAMPLE = os.path.join(os.path.dirname(__file__), "..", "samples", "sample_cv.json")


def load_sample():
    with open(SAMPLE, encoding="utf-8") as f:
        return CV.from_dict(json.load(f))


def open_docx(content):
    return Document(io.BytesIO(content))


class TestDOCXExporter(unittest.TestCase):

    def setUp(self):
        self.exporter = DOCXExporter()

    def test_headings(self):
        doc = open_docx(self.exporter.to_docx(load_sample()))
        headings = [p.text for p in doc.paragraphs if p.style.name == "Heading 1"]
        self.assertEqual(headings, [
            "Professional Summary", "Work Experience", "Projects", "Education",
            "Skills", "Certifications", "Achievements",
        ])
        self.assertEqual(doc.paragraphs[0].text, "John Doe")
        self.assertEqual(doc.paragraphs[0].style.name, "Title")

    def test_empty_cv(self):
        cv = CV(personal_info=PersonalInfo(first_name="Jane", last_name="Roe"))
        doc = open_docx(self.exporter.to_docx(cv))
        self.assertEqual([p for p in doc.paragraphs if p.style.name == "Heading 1"], [])
        self.assertEqual(doc.paragraphs[0].text, "Jane Roe")

    def test_experience_line(self):
        cv = CV(experience=[ExperienceEntry(job_title="Senior Software Engineer", company="Tech Corp",
                                            start_date="2020-01", end_date="2023-12")])
        texts = [p.text for p in open_docx(self.exporter.to_docx(cv)).paragraphs]
        self.assertIn("Senior Software Engineer at Tech Corp (Jan 2020 - Dec 2023)", texts)

    def test_current_job(self):
        cv = CV(experience=[ExperienceEntry(job_title="Lead", company="Co", start_date="2021-05",
                                            end_date="2022-01", is_current=True)])
        texts = [p.text for p in open_docx(self.exporter.to_docx(cv)).paragraphs]
        self.assertIn("Lead at Co (May 2021 - Present)", texts)

    def test_blank_bullets_dropped(self):
        cv = CV(experience=[ExperienceEntry(job_title="Dev", company="Co", achievements=["Shipped", "", "  "])])
        bullets = [p.text for p in open_docx(self.exporter.to_docx(cv)).paragraphs
                   if p.style.name == "List Bullet"]
        self.assertEqual(bullets, ["Shipped"])

    def test_education(self):
        cv = CV(education=[EducationEntry(degree="Bachelor's Degree", field_of_study="Computer Science",
                                          institution="University of Technology", gpa="3.8/4.0")])
        text = "\n".join(p.text for p in open_docx(self.exporter.to_docx(cv)).paragraphs)
        self.assertIn("Bachelor's Degree in Computer Science", text)
        self.assertIn("University of Technology", text)
        self.assertIn("GPA: 3.8/4.0", text)

    def test_skills_grouped(self):
        cv = CV(skills=[
            SkillEntry(name="Python", category="Languages"),
            SkillEntry(name="Go", category="Languages"),
            SkillEntry(name="Mentoring"),
        ])
        texts = [p.text for p in open_docx(self.exporter.to_docx(cv)).paragraphs]
        self.assertIn("Languages: Python, Go", texts)
        self.assertIn("Other: Mentoring", texts)

    def test_headings_keep_with_next(self):
        doc = open_docx(self.exporter.to_docx(load_sample()))
        for p in doc.paragraphs:
            if p.style.name == "Heading 1":
                self.assertTrue(p.paragraph_format.keep_with_next)

    def test_deterministic_output(self):
        cv = load_sample()
        first = self.exporter.to_docx(cv)
        second = DOCXExporter().to_docx(cv)
        self.assertEqual(first, second)

        archive = zipfile.ZipFile(io.BytesIO(first))
        self.assertIn("word/document.xml", archive.namelist())
        self.assertEqual({i.date_time for i in archive.infolist()}, {(1980, 1, 1, 0, 0, 0)})

    def test_normalised_archive_closes_source(self):
        raw = io.BytesIO()
        with zipfile.ZipFile(raw, "w") as archive:
            archive.writestr("word/document.xml", "<w:document/>")

        opened = []

        class TrackingZipFile(zipfile.ZipFile):
            def __init__(self, *args, **kwargs):
                super().__init__(*args, **kwargs)
                opened.append(self)

        with patch('cv_builder.docx_exporter.zipfile.ZipFile', TrackingZipFile):
            content = _normalise_archive(raw.getvalue())

        self.assertEqual(len(opened), 2)
        for archive in opened:
            self.assertIsNone(archive.fp)
        self.assertEqual(zipfile.ZipFile(io.BytesIO(content)).namelist(), ["word/document.xml"])

    def test_core_properties(self):
        props = open_docx(self.exporter.to_docx(load_sample())).core_properties
        self.assertEqual(props.title, "Software Engineer CV")
        self.assertEqual(props.author, "John Doe")

    @patch('cv_builder.docx_exporter.Document')
    def test_assembly_failure(self, mock_document_class):
        mock_document_class.return_value.save.side_effect = IOError("disk full")
        with self.assertRaises(ExportFailedError) as ctx:
            self.exporter.to_docx(CV())
        self.assertEqual(ctx.exception.public_message, "Failed to export DOCX")


if __name__ == '__main__':
    unittest.main()
