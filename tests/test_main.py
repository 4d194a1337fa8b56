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

import os
import shutil
import tempfile
import unittest
from unittest.mock import patch

from docx import Document

from cv_builder import main as cli
from cv_builder.config import Settings

SAMPLE = os.path.join(os.path.dirname(__file__), "..", "samples", "sample_cv.json")


@patch('cv_builder.main.setup_logging')
class TestCLI(unittest.TestCase):

    def setUp(self):
        self.test_dir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.test_dir)

    def test_export_docx(self, mock_logging):
        output = os.path.join(self.test_dir, "out.docx")
        code = cli._main_cli(["export", SAMPLE, "--format", "docx", "--output", output])
        self.assertEqual(code, 0)
        doc = Document(output)
        self.assertEqual(doc.paragraphs[0].text, "John Doe")

    @patch('cv_builder.main.PDFExporter')
    def test_export_pdf_default_output(self, mock_exporter_class, mock_logging):
        mock_exporter_class.return_value.to_pdf.return_value = b"%PDF-1.4 fake"
        with patch('cv_builder.main.Settings.from_env') as mock_from_env:
            mock_from_env.return_value = Settings(export_dir=self.test_dir)
            code = cli._main_cli(["export", SAMPLE, "--format", "pdf", "--template", "Modern"])

        self.assertEqual(code, 0)
        with open(os.path.join(self.test_dir, "Software_Engineer_CV.pdf"), "rb") as f:
            self.assertEqual(f.read(), b"%PDF-1.4 fake")
        html = mock_exporter_class.return_value.to_pdf.call_args[0][0]
        self.assertIn("modern", html)

    def test_preview_to_file(self, mock_logging):
        output = os.path.join(self.test_dir, "cv.html")
        self.assertEqual(cli._main_cli(["preview", SAMPLE, "--template", "3", "--output", output]), 0)
        with open(output, encoding="utf-8") as f:
            html = f.read()
        self.assertIn("executive", html)
        self.assertIn("Jan 2020 - Dec 2023", html)

    def test_unknown_template_fails(self, mock_logging):
        output = os.path.join(self.test_dir, "cv.html")
        self.assertEqual(cli._main_cli(["preview", SAMPLE, "--template", "Nope", "--output", output]), 1)
        self.assertFalse(os.path.exists(output))

    def test_missing_source_fails(self, mock_logging):
        self.assertEqual(cli._main_cli(["export", os.path.join(self.test_dir, "none.json")]), 1)

    def test_templates_lists_custom(self, mock_logging):
        with open(os.path.join(self.test_dir, "plain.html"), "w", encoding="utf-8") as f:
            f.write("<h1>{{ full_name }}</h1>")

        with patch('cv_builder.main.Console') as mock_console:
            cli._main_cli(["--templates-dir", self.test_dir, "templates"])
            table = mock_console.return_value.print.call_args[0][0]
        self.assertEqual(table.row_count, 6)


class TestMain(unittest.TestCase):

    @patch('cv_builder.main._main_cli', side_effect=KeyboardInterrupt)
    def test_keyboard_interrupt(self, mock_cli):
        with self.assertRaises(SystemExit) as ctx:
            cli.main([])
        self.assertEqual(ctx.exception.code, 130)


if __name__ == '__main__':
    unittest.main()
