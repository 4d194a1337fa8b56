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
Handles the generation of the MS Word (DOCX) export.

Walks the CV data directly rather than the HTML, so quirks of one format
cannot leak into the other. Date ranges, blank filtering, skill grouping and
section titles come from cv_builder.formatting, the same rules the HTML
templates use.
"""

import io
import logging
import zipfile
from datetime import datetime

from docx import Document
from docx.enum.text import WD_BREAK
from docx.shared import Pt

from cv_builder.errors import ExportFailedError
from cv_builder.formatting import (
    SECTION_TITLES,
    contact_items,
    format_date,
    format_date_range,
    full_name,
    group_skills,
    has_date_range,
    non_blank,
    present_sections,
)
from cv_builder.models import CV

logger = logging.getLogger(__name__)

# Fixed timestamps keep identical input byte-identical on output
FIXED_TIMESTAMP = datetime(2000, 1, 1)
ZIP_TIMESTAMP = (1980, 1, 1, 0, 0, 0)


def _normalise_archive(raw: bytes) -> bytes:
    """Rewrites the OPC zip container with fixed member timestamps."""
    out = io.BytesIO()
    with zipfile.ZipFile(io.BytesIO(raw)) as source, zipfile.ZipFile(out, "w", zipfile.ZIP_DEFLATED) as target:
        for info in source.infolist():
            member = zipfile.ZipInfo(info.filename, date_time=ZIP_TIMESTAMP)
            member.compress_type = zipfile.ZIP_DEFLATED
            member.external_attr = info.external_attr
            target.writestr(member, source.read(info.filename))
    return out.getvalue()


class DOCXExporter:
    """
    Builds a styled DOCX resume from structured CV data.
    """
    def __init__(self):
        self.styles = {
            'title': 'Title',
            'h1': 'Heading 1',
            'body': 'Normal',
            'bullet': 'List Bullet'
        }

    def to_docx(self, cv: CV) -> bytes:
        """
        Assembles and serialises the document in one pass.

        Raises:
            ExportFailedError: If assembly or serialisation fails.
        """
        try:
            document = self._build(cv)
            buffer = io.BytesIO()
            document.save(buffer)
            content = _normalise_archive(buffer.getvalue())
        except Exception as e:
            logger.error(f"DOCX generation failed: {e}")
            raise ExportFailedError("docx", str(e)) from e

        logger.info(f"DOCX generated ({len(content)} bytes)")
        return content

    def _build(self, cv: CV):
        document = Document()
        self._setup_styles(document)
        self._set_properties(document, cv)

        self._add_header(document, cv)

        builders = {
            'summary': self._add_summary,
            'experience': self._add_experience,
            'projects': self._add_projects,
            'education': self._add_education,
            'skills': self._add_skills,
            'certifications': self._add_certifications,
            'achievements': self._add_achievements,
        }
        for key in present_sections(cv):
            p = document.add_paragraph(SECTION_TITLES[key], style=self.styles['h1'])
            p.paragraph_format.keep_with_next = True
            builders[key](document, cv)

        return document

    def _setup_styles(self, document):
        style = document.styles['Normal']
        font = style.font
        font.name = 'Calibri'
        font.size = Pt(11)

    def _set_properties(self, document, cv: CV):
        props = document.core_properties
        stamp = cv.last_modified or FIXED_TIMESTAMP
        props.title = cv.title or "CV"
        props.author = full_name(cv.personal_info)
        props.last_modified_by = "cv-builder"
        props.revision = 1
        props.created = stamp
        props.modified = stamp

    # --- Sections -------------------------------------------------------------

    def _add_header(self, document, cv: CV):
        document.add_paragraph(full_name(cv.personal_info), style=self.styles['title'])

        items = contact_items(cv.personal_info)
        if items:
            p = document.add_paragraph(style=self.styles['body'])
            for i, (label, value) in enumerate(items):
                run = p.add_run(f"{label}: {value}")
                if i < len(items) - 1:
                    run.add_break(WD_BREAK.LINE)
            p.paragraph_format.space_after = Pt(12)

    def _add_entry_heading(self, document, title: str, detail: str = "", dates: str = ""):
        p = document.add_paragraph()
        p.add_run(title).bold = True
        if detail:
            p.add_run(detail)
        if dates:
            p.add_run(f" ({dates})").italic = True
        p.paragraph_format.keep_with_next = True
        return p

    def _add_body(self, document, text: str):
        p = document.add_paragraph(text)
        p.paragraph_format.widow_control = True
        return p

    def _add_bullets(self, document, items):
        for item in non_blank(items):
            p = document.add_paragraph(item, style=self.styles['bullet'])
            p.paragraph_format.widow_control = True

    def _add_summary(self, document, cv: CV):
        self._add_body(document, cv.summary.strip())

    def _add_experience(self, document, cv: CV):
        for job in cv.experience:
            dates = ""
            if has_date_range(job.start_date, job.end_date, job.is_current):
                dates = format_date_range(job.start_date, job.end_date, job.is_current)
            detail = f" at {job.company}" if job.company else ""
            self._add_entry_heading(document, job.job_title, detail, dates)

            if job.location:
                self._add_body(document, f"Location: {job.location}")
            if job.description:
                self._add_body(document, job.description)
            self._add_bullets(document, job.achievements)

    def _add_projects(self, document, cv: CV):
        for project in cv.projects:
            dates = ""
            if has_date_range(project.start_date, project.end_date, project.is_ongoing):
                dates = format_date_range(project.start_date, project.end_date, project.is_ongoing)
            self._add_entry_heading(document, project.name, dates=dates)

            if project.description:
                self._add_body(document, project.description)

            technologies = non_blank(project.technologies)
            if technologies:
                p = document.add_paragraph()
                p.add_run('Technologies: ').bold = True
                p.add_run(', '.join(technologies))

            self._add_bullets(document, project.highlights)

            links = [url for url in (project.project_url, project.repository_url) if url]
            if links:
                self._add_body(document, " | ".join(links))

    def _add_education(self, document, cv: CV):
        for edu in cv.education:
            detail = f" in {edu.field_of_study}" if edu.field_of_study else ""
            p = self._add_entry_heading(document, edu.degree, detail)

            institution = ", ".join(x for x in (edu.institution, edu.location) if x)
            if institution:
                p.add_run().add_break(WD_BREAK.LINE)
                p.add_run(institution)
            if has_date_range(edu.start_date, edu.end_date, edu.is_current):
                p.add_run().add_break(WD_BREAK.LINE)
                p.add_run(format_date_range(edu.start_date, edu.end_date, edu.is_current)).italic = True
            if edu.gpa:
                p.add_run(f" | GPA: {edu.gpa}")
            p.paragraph_format.keep_with_next = bool(non_blank(edu.achievements))

            self._add_bullets(document, edu.achievements)

    def _add_skills(self, document, cv: CV):
        for category, skills in group_skills(cv.skills):
            p = document.add_paragraph()
            p.add_run(f"{category}: ").bold = True
            p.add_run(", ".join(skill.name for skill in skills))
            p.paragraph_format.widow_control = True

    def _add_certifications(self, document, cv: CV):
        for cert in cv.certifications:
            detail = f" - {cert.issuer}" if cert.issuer else ""
            dates = format_date(cert.issue_date)
            self._add_entry_heading(document, cert.name, detail, dates)

            extra = []
            if cert.expiry_date and not cert.never_expires:
                extra.append(f"Expires: {format_date(cert.expiry_date)}")
            if cert.credential_id:
                extra.append(f"Credential ID: {cert.credential_id}")
            if cert.credential_url:
                extra.append(cert.credential_url)
            if extra:
                self._add_body(document, " | ".join(extra))

    def _add_achievements(self, document, cv: CV):
        for achievement in cv.achievements:
            detail = f" - {achievement.organization}" if achievement.organization else ""
            self._add_entry_heading(document, achievement.title, detail, format_date(achievement.date))
            if achievement.description:
                self._add_body(document, achievement.description)
