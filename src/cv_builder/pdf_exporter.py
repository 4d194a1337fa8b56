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
Captures rendered CV HTML as a paginated PDF using headless Chromium.
"""

import logging
from typing import Optional

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import sync_playwright

from cv_builder.config import Settings
from cv_builder.errors import ExportFailedError

logger = logging.getLogger(__name__)


class PDFExporter:
    """
    Prints HTML documents to PDF with Playwright.

    Each call launches its own browser and always closes it before returning,
    whether the capture succeeded, timed out or crashed. Failures surface as
    ExportFailedError and never yield partial output.
    """
    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or Settings()

    def to_pdf(self, html: str) -> bytes:
        settings = self.settings
        try:
            with sync_playwright() as p:
                browser = None
                try:
                    browser = p.chromium.launch(headless=True, args=list(settings.browser_args))
                    page = browser.new_page()
                    page.set_content(html, wait_until="networkidle", timeout=settings.pdf_timeout_ms)
                    pdf = page.pdf(
                        format=settings.page_format,
                        print_background=True,
                        margin=dict(settings.pdf_margins),
                    )
                finally:
                    if browser is not None:
                        self._close(browser)
        except PlaywrightError as e:
            logger.error(f"PDF rendering failed: {e}")
            raise ExportFailedError("pdf", str(e)) from e

        if not pdf:
            raise ExportFailedError("pdf", "Rendering engine returned an empty document")

        logger.info(f"PDF generated ({len(pdf)} bytes)")
        return pdf

    def _close(self, browser):
        try:
            browser.close()
        except PlaywrightError as e:
            logger.warning(f"Error closing browser: {e}")
