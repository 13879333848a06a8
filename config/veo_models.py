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


from dataclasses import dataclass
from typing import List, Optional


@dataclass
class VeoModelConfig:
    """Configuration for a specific VEO model version."""

    version_id: str
    model_name: str
    display_name: str
    supported_aspect_ratios: List[str]
    resolutions: List[str]
    default_resolution: str = "720p"
    supports_image_input: bool = True


# This list is the single source of truth for all VEO model configurations.
VEO_MODELS: List[VeoModelConfig] = [
    VeoModelConfig(
        version_id="3.1-fast-preview",
        model_name="veo-3.1-fast-generate-preview",
        display_name="Veo 3.1 Fast Preview",
        supported_aspect_ratios=["16:9", "9:16", "1:1"],
        resolutions=["720p", "1080p"],
    ),
    VeoModelConfig(
        version_id="3.1-preview",
        model_name="veo-3.1-generate-preview",
        display_name="Veo 3.1 Preview",
        supported_aspect_ratios=["16:9", "9:16", "1:1"],
        resolutions=["720p", "1080p"],
    ),
    VeoModelConfig(
        version_id="3.0-fast",
        model_name="veo-3.0-fast-generate-001",
        display_name="Veo 3.0 Fast",
        supported_aspect_ratios=["16:9", "9:16"],
        resolutions=["720p", "1080p"],
    ),
]


def get_veo_model_config(model_name_or_version: str) -> Optional[VeoModelConfig]:
    """Finds config by either full model name or short version ID."""
    for model in VEO_MODELS:
        if (
            model.model_name == model_name_or_version
            or model.version_id == model_name_or_version
        ):
            return model
    return None
