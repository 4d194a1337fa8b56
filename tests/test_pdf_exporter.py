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
from unittest.mock import MagicMock, patch

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from cv_builder.config import Settings
from cv_builder.errors import ExportFailedError
from cv_builder.pdf_exporter import PDFExporter


class TestPDFExporter(unittest.TestCase):

    def setUp(self):
        patcher = patch('cv_builder.pdf_exporter.sync_playwright')
        self.mock_sync_playwright = patcher.start()
        self.addCleanup(patcher.stop)

        self.context = self.mock_sync_playwright.return_value
        self.context.__exit__.return_value = False
        self.playwright = MagicMock()
        self.context.__enter__.return_value = self.playwright

        self.browser = self.playwright.chromium.launch.return_value
        self.page = self.browser.new_page.return_value
        self.page.pdf.return_value = b"%PDF-1.4 fake"

    def test_success(self):
        settings = Settings(pdf_timeout_ms=5000)
        pdf = PDFExporter(settings).to_pdf("<html><body>Hi</body></html>")

        self.assertEqual(pdf, b"%PDF-1.4 fake")
        self.playwright.chromium.launch.assert_called_once_with(
            headless=True, args=["--no-sandbox", "--disable-setuid-sandbox"])
        self.page.set_content.assert_called_once_with(
            "<html><body>Hi</body></html>", wait_until="networkidle", timeout=5000)
        self.page.pdf.assert_called_once_with(
            format="A4",
            print_background=True,
            margin={"top": "20mm", "right": "15mm", "bottom": "20mm", "left": "15mm"},
        )
        self.browser.close.assert_called_once()

    def test_timeout_closes_browser(self):
        self.page.set_content.side_effect = PlaywrightTimeoutError("Timeout 30000ms exceeded")

        with self.assertRaises(ExportFailedError) as ctx:
            PDFExporter().to_pdf("<html></html>")

        self.assertEqual(ctx.exception.public_message, "Failed to export PDF")
        self.browser.close.assert_called_once()
        self.page.pdf.assert_not_called()

    def test_launch_failure(self):
        self.playwright.chromium.launch.side_effect = PlaywrightError("Executable doesn't exist")

        with self.assertRaises(ExportFailedError):
            PDFExporter().to_pdf("<html></html>")

        self.browser.close.assert_not_called()
        self.context.__exit__.assert_called_once()

    def test_close_error_does_not_mask_result(self):
        self.browser.close.side_effect = PlaywrightError("Target closed")
        self.assertEqual(PDFExporter().to_pdf("<html></html>"), b"%PDF-1.4 fake")

    def test_empty_output(self):
        self.page.pdf.return_value = b""
        with self.assertRaises(ExportFailedError):
            PDFExporter().to_pdf("<html></html>")
        self.browser.close.assert_called_once()


if __name__ == '__main__':
    unittest.main()
