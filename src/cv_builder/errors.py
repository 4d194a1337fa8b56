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
Error taxonomy for the export pipeline.

Only ``public_message`` is ever shown to API clients; the original cause of an
export failure stays in the operator log.
"""

from typing import Any, Optional


class CVBuilderError(Exception):
    """Base class for all pipeline errors."""
    public_message = "Request failed"


class CVNotFoundError(CVBuilderError):
    public_message = "CV not found"

    def __init__(self, cv_id: Any):
        super().__init__(f"CV not found: {cv_id}")
        self.cv_id = cv_id


class TemplateNotFoundError(CVBuilderError):
    public_message = "Template not found"

    def __init__(self, template_id: Any):
        super().__init__(f"Template not found: {template_id}")
        self.template_id = template_id


class NotPermittedError(CVBuilderError):
    """The requester may not read or export this CV."""
    public_message = "Access denied"


class ExportFailedError(CVBuilderError):
    """Rendering engine launch/timeout/crash or DOCX assembly failure."""

    def __init__(self, fmt: str, detail: Optional[str] = None):
        super().__init__(detail or f"Failed to export {fmt.upper()}")
        self.fmt = fmt

    @property
    def public_message(self) -> str:
        return f"Failed to export {self.fmt.upper()}"
