# Copyright 2025 Google LLC.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     https://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

from __future__ import annotations

import base64
import io
import re

from PIL import Image

from common.analytics import get_logger

logger = get_logger(__name__)

DEFAULT_IMAGE_MIME_TYPE = "image/jpeg"

_MIME_TYPE_PATTERN = re.compile(r":(.*?);")


def data_uri_to_payload(data_uri: str) -> tuple[str, str]:
    """Splits a data URI into the (base64 payload, MIME type) pair the API expects.

    Args:
        data_uri: A string of the form ``data:<mime>;base64,<payload>``.

    Returns:
        The payload after the first comma (empty if there is none) and the
        declared MIME type. Falls back to ``image/jpeg`` when the header has
        no recognizable MIME type; malformed input never raises.
    """
    parts = (data_uri or "").split(",")
    header = parts[0]
    data = parts[1] if len(parts) > 1 else ""
    match = _MIME_TYPE_PATTERN.search(header)
    mime_type = match.group(1) if match and match.group(1) else DEFAULT_IMAGE_MIME_TYPE
    return data, mime_type


def payload_to_data_uri(payload: bytes | str, mime_type: str) -> str:
    """Builds a data URI from raw bytes or an already base64-encoded string."""
    if isinstance(payload, bytes):
        payload = base64.b64encode(payload).decode("utf-8")
    return f"data:{mime_type};base64,{payload}"


def get_image_dimensions_from_base64(base64_string: str) -> tuple[int, int] | None:
    """Retrieves the width and height of an image from a base64 encoded string.

    Args:
        base64_string: The base64 encoded image data, optionally as a data URI.

    Returns:
        A tuple (width, height) if successful, or None if an error occurs.
    """
    try:
        # Remove the data URL prefix if it exists.
        if base64_string.startswith("data:image"):
            base64_string, _ = data_uri_to_payload(base64_string)

        image_data = base64.b64decode(base64_string)
        img = Image.open(io.BytesIO(image_data))
        width, height = img.size
        return width, height
    except Exception as e:
        logger.info(f"App: Error getting image dimensions: {e}")
        return None
