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
Renders a CV through both export paths and compares their section headings.

Usage: python scripts/compare_exports.py [cv.json] [template]
"""

import io
import sys

from bs4 import BeautifulSoup
from docx import Document

from cv_builder.docx_exporter import DOCXExporter
from cv_builder.html_renderer import HTMLRenderer
from cv_builder.ingest import load_cv
from cv_builder.templates import TemplateRegistry


def html_headings(html):
    soup = BeautifulSoup(html, "html.parser")
    return [h.get_text(strip=True) for h in soup.find_all("h2")]


def docx_headings(content):
    doc = Document(io.BytesIO(content))
    return [p.text for p in doc.paragraphs if p.style.name == "Heading 1"]


def compare(source, template_ref=None):
    cv = load_cv(source)
    template = TemplateRegistry().get(template_ref or cv.template_id)

    html = html_headings(HTMLRenderer().render(cv, template))
    docx = docx_headings(DOCXExporter().to_docx(cv))

    print(f"Template: {template.name}")
    print(f"  HTML: {html}")
    print(f"  DOCX: {docx}")
    if sorted(html) != sorted(docx):
        print("MISMATCH")
        return 1
    print("OK")
    return 0


if __name__ == "__main__":
    path = sys.argv[1] if len(sys.argv) > 1 else "samples/sample_cv.json"
    ref = sys.argv[2] if len(sys.argv) > 2 else None
    sys.exit(compare(path, ref))
