# Copyright 2025 Google LLC
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

"""Server-side store for the API key chosen in each browser session.

Mesop state is serialized to the client, so keys never live in page state.
"""

import threading

from common.analytics import get_logger
from config.default import Default

logger = get_logger(__name__)


class CredentialStore:
    """Thread-safe mapping of session id to the selected API key."""

    def __init__(self, default_api_key: str = ""):
        self._default_api_key = default_api_key
        self._keys: dict[str, str] = {}
        self._lock = threading.Lock()

    def select(self, session_id: str, api_key: str) -> bool:
        """Records the key for a session. Returns False for a blank key."""
        api_key = (api_key or "").strip()
        if not api_key:
            return False
        with self._lock:
            self._keys[session_id] = api_key
        logger.info(f"Credential selected for session {session_id}")
        return True

    def revoke(self, session_id: str):
        with self._lock:
            self._keys.pop(session_id, None)

    def has_selected(self, session_id: str) -> bool:
        with self._lock:
            return session_id in self._keys

    def get(self, session_id: str) -> str:
        """Returns the session's key, falling back to the configured default."""
        with self._lock:
            return self._keys.get(session_id) or self._default_api_key


credential_store = CredentialStore(default_api_key=Default().GEMINI_API_KEY)
