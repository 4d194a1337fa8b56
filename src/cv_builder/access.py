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
Access-control decision for reading and exporting CVs.
"""

import logging
from typing import Optional

logger = logging.getLogger(__name__)


class AccessPolicy:
    """
    Decides whether a requester may view or export a CV.

    Owners always may. Anyone else only when the CV is public and public
    export is enabled; with allow_public_export off, export is owner-only.
    """
    def __init__(self, allow_public_export: bool = True):
        self.allow_public_export = allow_public_export

    def may_export(self, requester_id: Optional[int], owner_id: Optional[int], is_public: bool) -> bool:
        if requester_id is not None and owner_id is not None and requester_id == owner_id:
            return True
        if is_public and self.allow_public_export:
            return True
        logger.debug(f"Export denied for requester {requester_id} (owner {owner_id}, public={is_public})")
        return False
