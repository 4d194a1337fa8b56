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
Handles ingestion of CV records and custom template definitions.
"""

import json
import logging
import os
from typing import Any, Dict, List, Union

import requests

from cv_builder.models import CV, Template

logger = logging.getLogger(__name__)


def read_url(url: str, verify: Union[str, bool] = True) -> Dict[str, Any]:
    """
    Fetches a CV record published as JSON over HTTP(S).

    Raises:
        ValueError: If the download fails or the body is not JSON.
    """
    logger.info(f"Downloading CV data from: {url}")
    try:
        response = requests.get(url, headers={'Accept': 'application/json'}, timeout=15, verify=verify)
        response.raise_for_status()
        return response.json()
    except requests.exceptions.RequestException as e:
        raise ValueError(f"Failed to download CV data from {url}: {e}") from e
    except json.JSONDecodeError as e:
        raise ValueError(f"CV data at {url} is not valid JSON: {e}") from e


def read_json(file_path: str) -> Dict[str, Any]:
    """
    Reads a CV record from a local JSON file.

    Raises:
        ValueError: If the file is missing or not JSON.
    """
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            return json.load(f)
    except OSError as e:
        raise ValueError(f"Cannot read CV file {file_path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ValueError(f"CV file {file_path} is not valid JSON: {e}") from e


def load_cv(source: str, verify: Union[str, bool] = True) -> CV:
    """Loads a CV from a file path or an http(s) URL."""
    if source.startswith(("http://", "https://")):
        raw = read_url(source, verify=verify)
    else:
        raw = read_json(source)

    # Tolerate API responses that wrap the record
    if isinstance(raw, dict) and isinstance(raw.get("cv"), dict):
        raw = raw["cv"]
    if not isinstance(raw, dict):
        raise ValueError(f"Expected a JSON object for a CV record in {source}")
    return CV.from_dict(raw)


def read_template(html_path: str) -> Template:
    """
    Builds a Template from '<slug>.html' plus optional '<slug>.css' and
    '<slug>.json' (name, category, description, id) beside it.
    """
    base, _ = os.path.splitext(html_path)
    with open(html_path, 'r', encoding='utf-8') as f:
        markup = f.read()

    css = ""
    if os.path.exists(base + ".css"):
        with open(base + ".css", 'r', encoding='utf-8') as f:
            css = f.read()

    meta = {}
    if os.path.exists(base + ".json"):
        with open(base + ".json", 'r', encoding='utf-8') as f:
            meta = json.load(f)

    slug = os.path.basename(base)
    return Template(
        id=meta.get("id"),
        name=meta.get("name") or slug.replace("_", " ").replace("-", " ").title(),
        category=meta.get("category", "professional"),
        description=meta.get("description", ""),
        html_template=markup,
        css_styles=css,
    )


def ingest_templates(directory: str) -> List[Template]:
    """
    Scans a directory for template definitions. Unreadable definitions are
    logged and skipped.
    """
    templates = []
    if not os.path.isdir(directory):
        logger.error(f"Templates directory not found: {directory}")
        return templates

    for file in sorted(os.listdir(directory)):
        if not file.lower().endswith(".html"):
            continue
        full_path = os.path.join(directory, file)
        try:
            templates.append(read_template(full_path))
            logger.debug(f"Ingested template definition: {file}")
        except (OSError, ValueError) as e:
            logger.error(f"Error reading template {full_path}: {e}")

    return templates
