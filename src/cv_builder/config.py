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
Runtime configuration.

Settings is an explicit object handed to the collaborators that need it.
Values come from defaults, then CV_BUILDER_* environment variables, then
CLI flags.

CA bundle resolution for outbound HTTPS (in priority order):
  1. Explicit override via --ca-bundle CLI arg
  2. REQUESTS_CA_BUNDLE environment variable
  3. CURL_CA_BUNDLE environment variable
  4. SSL_CERT_FILE environment variable
  5. System defaults (True - delegates to certifi / OS trust store)
"""

import os
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union

logger = logging.getLogger(__name__)

ENV_PREFIX = "CV_BUILDER_"


def _default_margins() -> Dict[str, str]:
    return {"top": "20mm", "right": "15mm", "bottom": "20mm", "left": "15mm"}


def _default_browser_args() -> List[str]:
    return ["--no-sandbox", "--disable-setuid-sandbox"]


def _env_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class Settings:
    """Configuration for rendering, export and the local service."""
    pdf_timeout_ms: int = 30000
    page_format: str = "A4"
    pdf_margins: Dict[str, str] = field(default_factory=_default_margins)
    browser_args: List[str] = field(default_factory=_default_browser_args)
    allow_public_export: bool = True
    data_file: Optional[str] = None
    templates_dir: Optional[str] = None
    log_dir: str = "user_content/logs"
    export_dir: str = "user_content/exports"
    ca_bundle: Optional[str] = None

    @classmethod
    def from_env(cls, environ=None) -> "Settings":
        environ = os.environ if environ is None else environ
        settings = cls()

        timeout = environ.get(ENV_PREFIX + "PDF_TIMEOUT_MS")
        if timeout:
            try:
                settings.pdf_timeout_ms = int(timeout)
            except ValueError:
                logger.warning(f"Ignoring invalid {ENV_PREFIX}PDF_TIMEOUT_MS: {timeout}")

        page_format = environ.get(ENV_PREFIX + "PAGE_FORMAT")
        if page_format:
            settings.page_format = page_format

        public_export = environ.get(ENV_PREFIX + "ALLOW_PUBLIC_EXPORT")
        if public_export:
            settings.allow_public_export = _env_bool(public_export)

        settings.data_file = environ.get(ENV_PREFIX + "DATA_FILE") or settings.data_file
        settings.templates_dir = environ.get(ENV_PREFIX + "TEMPLATES_DIR") or settings.templates_dir
        settings.log_dir = environ.get(ENV_PREFIX + "LOG_DIR") or settings.log_dir
        return settings

    def resolve_ca_bundle(self, environ=None) -> Union[str, bool]:
        """
        Resolve the CA bundle to use for outbound HTTPS requests.

        Returns:
            str: Path to a CA bundle file, or
            bool: True to use the default system/certifi trust store.
        """
        if self.ca_bundle:
            return self.ca_bundle

        environ = os.environ if environ is None else environ
        for var in ("REQUESTS_CA_BUNDLE", "CURL_CA_BUNDLE", "SSL_CERT_FILE"):
            value = environ.get(var)
            if value:
                logger.debug(f"Using CA bundle from {var}: {value}")
                return value

        return True
