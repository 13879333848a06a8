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


import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv(override=True)


@dataclass
class Default:
    """Defaults class"""

    # Credential used for every provider call. The UI can replace it per session.
    GEMINI_API_KEY: str = os.environ.get("GEMINI_API_KEY", os.environ.get("API_KEY", ""))

    # Models
    IMAGEN_MODEL: str = os.environ.get("IMAGEN_MODEL", "imagen-4.0-generate-001")
    GEMINI_IMAGE_GEN_MODEL: str = os.environ.get(
        "GEMINI_IMAGE_GEN_MODEL", "gemini-2.5-flash-image"
    )
    VEO_MODEL_ID: str = os.environ.get("VEO_MODEL_ID", "veo-3.1-fast-generate-preview")

    # Video generation
    VIDEO_RESOLUTION: str = os.environ.get("VIDEO_RESOLUTION", "720p")
    VIDEO_POLL_INTERVAL_SECONDS: int = int(
        os.environ.get("VIDEO_POLL_INTERVAL_SECONDS", "10")
    )
    VIDEO_POLL_TIMEOUT_SECONDS: int = int(
        os.environ.get("VIDEO_POLL_TIMEOUT_SECONDS", "1800")
    )
    VIDEO_DOWNLOAD_TIMEOUT_SECONDS: int = int(
        os.environ.get("VIDEO_DOWNLOAD_TIMEOUT_SECONDS", "120")
    )

    # Mesop delivers a click while another handler is still streaming only when
    # concurrent updates are on. Web sockets mode turns them on as well.
    CONCURRENT_UPDATES_ENABLED: bool = (
        os.environ.get("MESOP_CONCURRENT_UPDATES_ENABLED", "false").lower() == "true"
        or os.environ.get("MESOP_WEB_SOCKETS_ENABLED", "false").lower() == "true"
    )

    APP_TITLE: str = os.environ.get("APP_TITLE", "Creative Studio")
