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
Template registry: named, versioned presentation definitions.

Built-in templates are seeded on construction. Custom definitions can be
registered at runtime (or ingested from a directory) without code changes.
"""

import logging
from dataclasses import replace
from typing import Dict, Iterable, List, Optional, Union

from cv_builder.builtin_templates import BUILTIN_TEMPLATES
from cv_builder.errors import TemplateNotFoundError
from cv_builder.models import Template

logger = logging.getLogger(__name__)

TemplateRef = Union[int, str]


class TemplateRegistry:
    """
    In-process store of Template definitions keyed by id.

    Lookups accept the numeric id (or its string form) or the template name,
    case-insensitively. Templates are frozen, so whatever get() returns is a
    stable snapshot even if the definition is replaced afterwards.
    """
    def __init__(self, templates: Optional[Iterable[Template]] = None, seed_builtins: bool = True):
        self._templates: Dict[int, Template] = {}
        if seed_builtins:
            for template in BUILTIN_TEMPLATES:
                self._templates[template.id] = template
            logger.debug(f"Seeded {len(BUILTIN_TEMPLATES)} built-in templates")
        for template in templates or []:
            self.register(template)

    def __len__(self) -> int:
        return len(self._templates)

    def __contains__(self, ref) -> bool:
        return self._find(ref) is not None

    def _find(self, ref: TemplateRef) -> Optional[Template]:
        if isinstance(ref, int):
            return self._templates.get(ref)
        text = str(ref).strip()
        if text.isdigit():
            return self._templates.get(int(text))
        wanted = text.lower()
        for template in self._templates.values():
            if template.name.lower() == wanted:
                return template
        return None

    def get(self, ref: TemplateRef) -> Template:
        """Returns the template for an id or name, or raises TemplateNotFoundError."""
        template = self._find(ref)
        if template is None:
            raise TemplateNotFoundError(ref)
        return template

    def register(self, template: Template) -> Template:
        """
        Adds a template definition.

        A template whose name is already registered replaces the existing one,
        keeping its id and bumping its version. A template without an id gets
        the next free one.
        """
        existing = self._find(template.name)
        if existing is not None:
            template = replace(template, id=existing.id, version=existing.version + 1)
            logger.info(f"Replacing template '{template.name}' (v{template.version})")
        elif template.id is None or template.id in self._templates:
            next_id = max(self._templates, default=0) + 1
            template = replace(template, id=next_id)
            logger.info(f"Registered template '{template.name}' as id {next_id}")
        else:
            logger.info(f"Registered template '{template.name}' as id {template.id}")
        self._templates[template.id] = template
        return template

    def list(self, active_only: bool = True) -> List[Template]:
        """All templates ordered by id."""
        templates = sorted(self._templates.values(), key=lambda t: t.id)
        if active_only:
            templates = [t for t in templates if t.is_active]
        return templates
