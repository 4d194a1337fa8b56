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
Main entry point for the CV Builder CLI.
"""

import argparse
import logging
import os
import sys
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from cv_builder.access import AccessPolicy
from cv_builder.config import Settings
from cv_builder.errors import CVBuilderError
from cv_builder.exporter import ExportFormat, ExportService
from cv_builder.ingest import ingest_templates, load_cv
from cv_builder.pdf_exporter import PDFExporter
from cv_builder.storage import InMemoryCVRepository, JsonCVRepository
from cv_builder.templates import TemplateRegistry

logger = logging.getLogger(__name__)


def setup_logging(verbosity: int, quiet: bool = False, log_dir: str = "user_content/logs"):
    """
    Configures logging:
    - File: <log_dir>/cv.log (DEBUG)
    - Console: Default=WARNING, -q=ERROR, -v=INFO, -vv=DEBUG
    """
    log_path = Path(log_dir)
    log_path.mkdir(parents=True, exist_ok=True)
    log_file = log_path / "cv.log"

    # Root Logger
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    # File Handler (Always DEBUG)
    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
    root.addHandler(file_handler)

    if quiet:
        level = logging.ERROR
    elif verbosity <= 0:
        level = logging.WARNING
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.DEBUG

    console_handler = RichHandler(console=Console(stderr=True), show_path=False)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter('%(message)s'))
    root.addHandler(console_handler)

    # Silence some noisy libs if not in super debug
    if verbosity < 2:
        for name in ("httpx", "httpcore", "urllib3", "asyncio"):
            logging.getLogger(name).setLevel(logging.WARNING)


def build_settings(args) -> Settings:
    settings = Settings.from_env()
    if getattr(args, 'ca_bundle', None):
        settings.ca_bundle = args.ca_bundle
    if getattr(args, 'templates_dir', None):
        settings.templates_dir = args.templates_dir
    if getattr(args, 'data', None):
        settings.data_file = args.data
    if getattr(args, 'owner_only', False):
        settings.allow_public_export = False
    return settings


def build_registry(settings: Settings) -> TemplateRegistry:
    registry = TemplateRegistry()
    if settings.templates_dir:
        logger.info(f"Loading custom templates from: {settings.templates_dir}")
        for template in ingest_templates(settings.templates_dir):
            registry.register(template)
    return registry


def build_service(settings: Settings, repository=None) -> ExportService:
    if repository is None:
        if settings.data_file:
            repository = JsonCVRepository(settings.data_file)
        else:
            repository = InMemoryCVRepository()
    return ExportService(
        repository,
        registry=build_registry(settings),
        access_policy=AccessPolicy(settings.allow_public_export),
        pdf_exporter=PDFExporter(settings),
    )


def _default_output(settings: Settings, filename: str) -> str:
    os.makedirs(settings.export_dir, exist_ok=True)
    return os.path.join(settings.export_dir, filename)


def cmd_templates(args, settings: Settings) -> int:
    registry = build_registry(settings)
    table = Table(title="CV Templates")
    table.add_column("ID", justify="right")
    table.add_column("Name")
    table.add_column("Category")
    table.add_column("Version", justify="right")
    table.add_column("Description")
    for t in registry.list(active_only=False):
        table.add_row(str(t.id), t.name, t.category, str(t.version), t.description)
    Console().print(table)
    return 0


def cmd_preview(args, settings: Settings) -> int:
    cv = load_cv(args.source, verify=settings.resolve_ca_bundle())
    service = build_service(settings)
    template = service.registry.get(args.template if args.template else cv.template_id)
    html = service.html_renderer.render(cv, template)

    if args.output:
        with open(args.output, 'w', encoding='utf-8') as f:
            f.write(html)
        logger.info(f"Preview written to: {args.output}")
    else:
        sys.stdout.write(html)
    return 0


def cmd_export(args, settings: Settings) -> int:
    cv = load_cv(args.source, verify=settings.resolve_ca_bundle())
    service = build_service(settings)

    logger.info(f"Exporting '{cv.title or 'CV'}' as {args.format.upper()}")
    result = service.export_cv(cv, ExportFormat(args.format), template_id=args.template)

    output = args.output or _default_output(settings, result.filename)
    with open(output, 'wb') as f:
        f.write(result.content)
    logger.info(f"Export written to: {output}")
    print(output)
    return 0


def cmd_serve(args, settings: Settings) -> int:
    import uvicorn
    from cv_builder.api import create_app

    if not settings.data_file:
        logger.warning("No --data file given; the service starts with an empty CV store.")
    app = create_app(build_service(settings))
    uvicorn.run(app, host=args.host, port=args.port)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="CV Builder: preview and export CVs")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase output verbosity (-v=INFO, -vv=DEBUG)")
    parser.add_argument("-q", "--quiet", action="store_true", help="Suppress status output (ERROR only)")
    parser.add_argument("--ca-bundle", help="Path to a custom CA certificate bundle for HTTPS downloads (proxy environments)")
    parser.add_argument("--templates-dir", help="Directory of custom template definitions (<name>.html/.css/.json)")

    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("templates", help="List available templates")
    p.set_defaults(func=cmd_templates)

    p = sub.add_parser("preview", help="Render a CV to HTML")
    p.add_argument("source", help="Path or URL of the CV JSON")
    p.add_argument("--template", help="Template id or name (default: the CV's own)")
    p.add_argument("--output", help="Output HTML file (default: stdout)")
    p.set_defaults(func=cmd_preview)

    p = sub.add_parser("export", help="Export a CV as PDF or DOCX")
    p.add_argument("source", help="Path or URL of the CV JSON")
    p.add_argument("--format", choices=[f.value for f in ExportFormat], default=ExportFormat.PDF.value)
    p.add_argument("--template", help="Template id or name for PDF (default: the CV's own)")
    p.add_argument("--output", help="Output filename (default: user_content/exports/<title>.<ext>)")
    p.set_defaults(func=cmd_export)

    p = sub.add_parser("serve", help="Run the export API")
    p.add_argument("--host", default="127.0.0.1")
    p.add_argument("--port", type=int, default=8000)
    p.add_argument("--data", help="JSON file with the CV records to serve")
    p.add_argument("--owner-only", action="store_true", help="Only owners may export, even public CVs")
    p.set_defaults(func=cmd_serve)

    return parser


def main(argv=None):
    try:
        sys.exit(_main_cli(argv))
    except KeyboardInterrupt:
        # Use stderr so it captures attention even if stdout is redirected
        sys.stderr.write("\n\033[31m[-] Cancelled by user\033[0m\n")
        sys.exit(130)


def _main_cli(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    settings = build_settings(args)
    setup_logging(args.verbose, quiet=args.quiet, log_dir=settings.log_dir)

    try:
        return args.func(args, settings)
    except (CVBuilderError, ValueError) as e:
        logger.error(f"Error: {e}")
        return 1


if __name__ == "__main__":
    main()
