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
Binds a CV to a Template and produces a finished HTML document.

The output serves both the on-screen preview and the PDF capture. Rendering
is a pure function of (cv, template): no network access, no clock.
"""

import logging
from dataclasses import replace
from typing import Dict

from jinja2 import Environment
from markupsafe import Markup

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
    skill_level_weight,
)
from cv_builder.models import CV, Template

logger = logging.getLogger(__name__)

BASE_CSS = """
* { margin: 0; padding: 0; box-sizing: border-box; }
body { font-family: Arial, sans-serif; line-height: 1.6; color: #333; font-size: 14px; }
.cv-container { max-width: 800px; margin: 0 auto; padding: 20px; }
.cv-section { margin-bottom: 22px; }
h3 { font-size: 1.05em; margin-bottom: 4px; }
h4 { font-size: 0.95em; margin: 8px 0 4px; }
.item-header { display: flex; justify-content: space-between; align-items: baseline; }
.date-range, .date { font-size: 0.9em; color: #666; font-style: italic; white-space: nowrap; }
.experience-item, .education-item, .project-item, .certification-item, .achievement-item { margin-bottom: 14px; page-break-inside: avoid; }
.description { margin: 4px 0 6px; text-align: justify; }
.achievements, .highlights { margin: 6px 0; padding-left: 20px; }
.technologies { font-style: italic; color: #7f8c8d; font-size: 0.9em; margin: 4px 0; }
.skill-item { margin-bottom: 6px; }
@media print { body { font-size: 12px; } .cv-container { padding: 0; } }
"""

DOCUMENT_SHELL = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="UTF-8">
<title>{{ title }}</title>
<style>{{ css }}</style>
</head>
<body>
{{ body }}
</body>
</html>
"""


def _view(cv: CV) -> CV:
    """
    Copy of the CV with bullet lists blank-filtered, so no template (built-in
    or custom) can emit an empty list item.
    """
    return replace(
        cv,
        summary=(cv.summary or "").strip(),
        experience=[replace(e, achievements=non_blank(e.achievements)) for e in cv.experience],
        education=[replace(e, achievements=non_blank(e.achievements)) for e in cv.education],
        projects=[
            replace(p, highlights=non_blank(p.highlights), technologies=non_blank(p.technologies))
            for p in cv.projects
        ],
    )


class HTMLRenderer:
    """
    Renders CV data through Jinja2 presentation definitions.
    """
    def __init__(self):
        self.env = Environment(
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters['month_year'] = format_date
        self.env.filters['skill_weight'] = skill_level_weight
        self.env.globals['date_range'] = format_date_range
        self.env.globals['has_dates'] = has_date_range
        self._shell = self.env.from_string(DOCUMENT_SHELL)
        self._compiled: Dict[str, object] = {}

    def _compile(self, template: Template):
        # Keyed on the markup itself
        compiled = self._compiled.get(template.html_template)
        if compiled is None:
            logger.debug(f"Compiling template '{template.name}' v{template.version}")
            compiled = self.env.from_string(template.html_template)
            self._compiled[template.html_template] = compiled
        return compiled

    def context(self, cv: CV) -> dict:
        """The variables a presentation definition is rendered against."""
        view = _view(cv)
        present = set(present_sections(view))
        return {
            'cv': view,
            'personal': view.personal_info,
            'full_name': full_name(view.personal_info),
            'contact': contact_items(view.personal_info),
            'skill_groups': group_skills(view.skills),
            'titles': SECTION_TITLES,
            'sections': {key: key in present for key in SECTION_TITLES},
        }

    def render(self, cv: CV, template: Template) -> str:
        """
        Returns a complete HTML document for the CV in the given template.

        Raises:
            jinja2.TemplateError: If the presentation definition is malformed.
        """
        context = self.context(cv)
        body = self._compile(template).render(**context)
        return self._shell.render(
            title=context['full_name'] or cv.title or "CV",
            css=Markup(BASE_CSS + (template.css_styles or "")),
            body=Markup(body),
        )
