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
from enum import Enum
from typing import Dict, List


class AppView(str, Enum):
    """Top-level views shown in the navigation bar."""

    PHOTO = "Photo"
    VIDEO = "Video"
    CARTOON = "Cartoon"
    THUMBNAIL = "Thumbnail"
    TEMPLATES = "Templates"


class EditMode(str, Enum):
    """Sub-modes of the Photo view."""

    GENERATE = "Generate"
    EDIT = "Edit"
    ENHANCE = "Enhance"
    COMBINE = "Combine"


class CreativeMode(str, Enum):
    """The operation a submission resolves to."""

    GENERATE = "generate"
    EDIT = "edit"
    ENHANCE = "enhance"
    COMBINE = "combine"
    THUMBNAIL = "thumbnail"
    VIDEO = "video"
    CARTOON = "cartoon"
    TEMPLATE = "template"


MIN_VIDEO_DURATION = 1
MAX_VIDEO_DURATION = 20
DEFAULT_VIDEO_DURATION = 1


@dataclass(frozen=True)
class ViewConfig:
    """Per-view UI defaults."""

    view: AppView
    default_aspect_ratio: str
    aspect_ratio_options: List[str]
    requires_credential: bool = False
    produces_video: bool = False
    shows_duration: bool = False


VIEW_CONFIGS: Dict[AppView, ViewConfig] = {
    AppView.PHOTO: ViewConfig(
        view=AppView.PHOTO,
        default_aspect_ratio="1:1",
        aspect_ratio_options=["1:1", "16:9", "9:16"],
    ),
    AppView.VIDEO: ViewConfig(
        view=AppView.VIDEO,
        default_aspect_ratio="16:9",
        aspect_ratio_options=["16:9", "9:16", "1:1"],
        requires_credential=True,
        produces_video=True,
        shows_duration=True,
    ),
    AppView.CARTOON: ViewConfig(
        view=AppView.CARTOON,
        default_aspect_ratio="16:9",
        aspect_ratio_options=["16:9", "9:16", "1:1"],
        requires_credential=True,
        produces_video=True,
        shows_duration=True,
    ),
    AppView.THUMBNAIL: ViewConfig(
        view=AppView.THUMBNAIL,
        default_aspect_ratio="16:9",
        aspect_ratio_options=["16:9", "9:16", "1:1"],
    ),
    AppView.TEMPLATES: ViewConfig(
        view=AppView.TEMPLATES,
        default_aspect_ratio="16:9",
        # Template videos are always rendered at 16:9.
        aspect_ratio_options=[],
        produces_video=True,
    ),
}


def get_view_config(view: AppView | str) -> ViewConfig:
    """Returns the UI defaults for a view."""
    return VIEW_CONFIGS[AppView(view)]


def resolve_creative_mode(view: AppView | str, photo_mode: EditMode | str) -> CreativeMode:
    """Maps the selected view (and photo sub-mode) to the operation to run."""
    view = AppView(view)
    if view == AppView.PHOTO:
        return CreativeMode(EditMode(photo_mode).value.lower())
    return {
        AppView.VIDEO: CreativeMode.VIDEO,
        AppView.CARTOON: CreativeMode.CARTOON,
        AppView.THUMBNAIL: CreativeMode.THUMBNAIL,
        AppView.TEMPLATES: CreativeMode.TEMPLATE,
    }[view]
