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
CV lookup used by the export pipeline.

The real relational store lives outside this package; anything with a
``get(cv_id)`` method can stand in for it. The repositories here back the
CLI and local API runs.
"""

import json
import logging
from pathlib import Path
from typing import Dict, List, Optional

from cv_builder.models import CV

logger = logging.getLogger(__name__)


class InMemoryCVRepository:
    """Dictionary-backed CV store."""
    def __init__(self, cvs: Optional[List[CV]] = None):
        self._cvs: Dict[int, CV] = {}
        for cv in cvs or []:
            self._put(cv)

    def _put(self, cv: CV) -> CV:
        if cv.id is None:
            cv.id = max(self._cvs, default=0) + 1
        self._cvs[cv.id] = cv
        return cv

    def get(self, cv_id: int) -> Optional[CV]:
        return self._cvs.get(cv_id)

    def save(self, cv: CV) -> CV:
        """Inserts or replaces a CV, stamping its modification time."""
        cv.touch()
        if cv.created_at is None:
            cv.created_at = cv.last_modified
        return self._put(cv)

    def delete(self, cv_id: int) -> bool:
        return self._cvs.pop(cv_id, None) is not None

    def list_for_user(self, user_id: int) -> List[CV]:
        cvs = [cv for cv in self._cvs.values() if cv.user_id == user_id]
        return sorted(cvs, key=lambda cv: cv.id)

    def __len__(self) -> int:
        return len(self._cvs)


class JsonCVRepository(InMemoryCVRepository):
    """
    Read-mostly store seeded from a JSON file holding a list of CV records
    (or a single record) in the wizard's format.
    """
    def __init__(self, path: str):
        self.path = Path(path)
        with open(self.path, 'r', encoding='utf-8') as f:
            raw = json.load(f)
        records = raw if isinstance(raw, list) else [raw]
        super().__init__([CV.from_dict(record) for record in records])
        logger.info(f"Loaded {len(self)} CV(s) from {self.path}")
