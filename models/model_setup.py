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


from google import genai

from common.error_handling import CredentialError, INVALID_KEY_MESSAGE


class GenAIModelSetup:
    """Builds google-genai clients."""

    @staticmethod
    def init(api_key: str) -> genai.Client:
        """Creates a client for one call so the latest selected key is always used."""
        if not api_key:
            raise CredentialError(INVALID_KEY_MESSAGE)
        return genai.Client(api_key=api_key)
