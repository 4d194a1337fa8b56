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
Export orchestration: picks the exporter for a requested format, feeds it the
CV and its template, and packages the bytes for download.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from cv_builder.access import AccessPolicy
from cv_builder.docx_exporter import DOCXExporter
from cv_builder.errors import CVNotFoundError, ExportFailedError, NotPermittedError
from cv_builder.formatting import safe_filename
from cv_builder.html_renderer import HTMLRenderer
from cv_builder.models import CV
from cv_builder.pdf_exporter import PDFExporter
from cv_builder.templates import TemplateRef, TemplateRegistry

logger = logging.getLogger(__name__)


class ExportFormat(str, Enum):
    PDF = "pdf"
    DOCX = "docx"


CONTENT_TYPES = {
    ExportFormat.PDF: "application/pdf",
    ExportFormat.DOCX: "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
}


@dataclass(frozen=True)
class ExportResult:
    content: bytes
    content_type: str
    filename: str


class ExportService:
    """
    Request-level coordinator for previews and exports.

    Both formats are fed from the same CV independently: PDF goes through the
    HTML renderer and the browser, DOCX is assembled straight from the data.
    Exports are read-only against the repository and are never retried.
    """
    def __init__(self, repository, registry: Optional[TemplateRegistry] = None,
                 access_policy: Optional[AccessPolicy] = None,
                 html_renderer: Optional[HTMLRenderer] = None,
                 pdf_exporter: Optional[PDFExporter] = None,
                 docx_exporter: Optional[DOCXExporter] = None):
        self.repository = repository
        self.registry = registry or TemplateRegistry()
        self.access_policy = access_policy or AccessPolicy()
        self.html_renderer = html_renderer or HTMLRenderer()
        self.pdf_exporter = pdf_exporter or PDFExporter()
        self.docx_exporter = docx_exporter or DOCXExporter()

    def _load(self, cv_id: int, requester_id: Optional[int]) -> CV:
        cv = self.repository.get(cv_id)
        if cv is None:
            raise CVNotFoundError(cv_id)
        if not self.access_policy.may_export(requester_id, cv.user_id, cv.is_public):
            logger.warning(f"Requester {requester_id} not permitted to access CV {cv_id}")
            raise NotPermittedError(f"Requester {requester_id} may not access CV {cv_id}")
        return cv

    def preview(self, cv_id: int, requester_id: Optional[int], template_id: Optional[TemplateRef] = None) -> str:
        """Renders the CV to HTML for on-screen preview."""
        cv = self._load(cv_id, requester_id)
        template = self.registry.get(template_id if template_id is not None else cv.template_id)
        return self.html_renderer.render(cv, template)

    def export(self, cv_id: int, fmt: Union[ExportFormat, str], requester_id: Optional[int]) -> ExportResult:
        """
        Exports a stored CV on behalf of a requester.

        Raises:
            CVNotFoundError / TemplateNotFoundError: Unknown CV or template.
            NotPermittedError: Requester may not export this CV.
            ExportFailedError: Rendering or assembly failed.
        """
        fmt = ExportFormat(fmt)
        cv = self._load(cv_id, requester_id)
        logger.info(f"Exporting CV {cv_id} as {fmt.value.upper()}")
        return self.export_cv(cv, fmt)

    def export_cv(self, cv: CV, fmt: Union[ExportFormat, str], template_id: Optional[TemplateRef] = None) -> ExportResult:
        """Exports an already-loaded CV. No access check is made here."""
        fmt = ExportFormat(fmt)

        template = None
        if fmt is ExportFormat.PDF:
            template = self.registry.get(template_id if template_id is not None else cv.template_id)

        try:
            if fmt is ExportFormat.PDF:
                html = self.html_renderer.render(cv, template)
                content = self.pdf_exporter.to_pdf(html)
            else:
                content = self.docx_exporter.to_docx(cv)
        except Exception as e:
            logger.exception(f"{fmt.value.upper()} export of CV {cv.id} failed: {e}")
            if isinstance(e, ExportFailedError):
                raise
            raise ExportFailedError(fmt.value, str(e)) from e

        return ExportResult(
            content=content,
            content_type=CONTENT_TYPES[fmt],
            filename=safe_filename(cv.title, fmt.value),
        )
