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

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class ImageModelConfig:
    """Configuration for an image generation or image editing model."""

    version_id: str  # Short ID for UI/Logic (e.g., "2.5-flash", "imagen-4")
    model_name: str  # Full API Model ID (e.g., "gemini-2.5-flash-image")
    display_name: str  # Human-readable name (e.g., "Gemini 2.5 Flash")

    # Images accepted alongside the instruction; 0 for text-to-image only.
    max_input_images: int
    output_mime_type: str = "image/png"

    supported_aspect_ratios: List[str] = field(
        default_factory=lambda: ["1:1", "16:9", "9:16"]
    )


# Single source of truth
IMAGE_MODELS: List[ImageModelConfig] = [
    ImageModelConfig(
        version_id="imagen-4",
        model_name="imagen-4.0-generate-001",
        display_name="Imagen 4",
        max_input_images=0,
    ),
    ImageModelConfig(
        version_id="2.5-flash",
        model_name="gemini-2.5-flash-image",
        display_name="Gemini 2.5 Flash",
        max_input_images=3,
    ),
    ImageModelConfig(
        version_id="3.0-pro-preview",
        model_name="gemini-3-pro-image-preview",
        display_name="Gemini 3.0 Pro Preview",
        max_input_images=6,
    ),
]


def get_image_model_config(
    model_name_or_version: str,
) -> Optional[ImageModelConfig]:
    """Finds config by either full model name or short version ID."""
    for model in IMAGE_MODELS:
        if (
            model.model_name == model_name_or_version
            or model.version_id == model_name_or_version
        ):
            return model
    return None
