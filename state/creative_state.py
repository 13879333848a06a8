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


import uuid
from dataclasses import dataclass, field

import mesop as me

from config.creative_modes import (
    DEFAULT_VIDEO_DURATION,
    AppView,
    EditMode,
    get_view_config,
)


@dataclass
class UploadedImage:
    """An image the user uploaded, kept as a data URI."""

    filename: str = ""
    mime_type: str = ""
    data_uri: str = ""


@dataclass
class CreativeSession:
    """Everything describing the user's current creative request.

    The orchestrator receives this object by reference and is the only
    writer of the result, error and loading fields.
    """

    # pylint: disable=E3701:invalid-field-call

    session_id: str = field(default_factory=lambda: uuid.uuid4().hex)

    view: str = AppView.PHOTO.value
    photo_mode: str = EditMode.GENERATE.value
    aspect_ratio: str = "1:1"
    video_duration: int = DEFAULT_VIDEO_DURATION

    prompt: str = ""
    thumbnail_title: str = ""
    thumbnail_clone_url: str = ""
    video_prompt: str = ""
    cartoon_prompt: str = ""
    selected_template: str = ""

    image1: UploadedImage | None = None
    image2: UploadedImage | None = None

    result_image: str = ""
    result_video: str = ""

    is_loading: bool = False
    progress_message: str = ""
    error_message: str = ""
    credential_error: bool = False

    # Set once the user has chosen an API key for the gated views.
    credential_selected: bool = False

    def reset_for_view(self, view: AppView | str):
        """Clears every field tied to the previous view."""
        view_config = get_view_config(view)
        self.view = view_config.view.value
        self.prompt = ""
        self.thumbnail_title = ""
        self.thumbnail_clone_url = ""
        self.video_prompt = ""
        self.cartoon_prompt = ""
        self.selected_template = ""
        self.image1 = None
        self.image2 = None
        self.result_image = ""
        self.result_video = ""
        self.error_message = ""
        self.credential_error = False
        self.video_duration = DEFAULT_VIDEO_DURATION
        self.aspect_ratio = view_config.default_aspect_ratio

    def clear_outcome(self):
        self.result_image = ""
        self.result_video = ""
        self.error_message = ""
        self.credential_error = False

    def set_result_image(self, data_uri: str):
        self.result_image = data_uri
        self.result_video = ""
        self.error_message = ""

    def set_result_video(self, data_uri: str):
        self.result_video = data_uri
        self.result_image = ""
        self.error_message = ""

    def set_error(self, message: str, credential_error: bool = False):
        self.error_message = message
        self.credential_error = credential_error
        self.result_image = ""
        self.result_video = ""
        if credential_error:
            # Force the user back through the credential gate.
            self.credential_selected = False

    def set_upload(self, slot: str, image: UploadedImage):
        if slot not in ("image1", "image2"):
            raise ValueError(f"Unknown upload slot: {slot}")
        setattr(self, slot, image)

    def clear_upload(self, slot: str):
        if slot not in ("image1", "image2"):
            raise ValueError(f"Unknown upload slot: {slot}")
        setattr(self, slot, None)


@me.stateclass
class PageState:
    """Mesop Page State"""

    # pylint: disable=E3701:invalid-field-call

    session: CreativeSession = field(default_factory=CreativeSession)

    # Credential gate input
    api_key_input: str = ""

    prompt_textarea_key: int = 0
