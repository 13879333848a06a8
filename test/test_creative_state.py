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
import sys

# Add the project root to the Python path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import pytest

from config.creative_modes import AppView, CreativeMode, EditMode, resolve_creative_mode
from services.generation_service import switch_view
from state.creative_state import CreativeSession, UploadedImage

IMAGE = UploadedImage(filename="a.png", mime_type="image/png", data_uri="data:image/png;base64,QUFB")


def _filled_session():
    return CreativeSession(
        view=AppView.PHOTO.value,
        aspect_ratio="9:16",
        video_duration=7,
        prompt="p",
        thumbnail_title="t",
        thumbnail_clone_url="u",
        video_prompt="v",
        cartoon_prompt="c",
        selected_template="Retro VHS",
        image1=IMAGE,
        image2=IMAGE,
        result_image="data:image/png;base64,QUFB",
        error_message="old",
        credential_error=True,
    )


@pytest.mark.parametrize(
    "view, aspect_ratio",
    [
        (AppView.PHOTO, "1:1"),
        (AppView.VIDEO, "16:9"),
        (AppView.CARTOON, "16:9"),
        (AppView.THUMBNAIL, "16:9"),
        (AppView.TEMPLATES, "16:9"),
    ],
)
def test_switching_view_resets_session(view, aspect_ratio):
    session = _filled_session()
    switch_view(session, view)

    assert session.view == view.value
    assert session.aspect_ratio == aspect_ratio
    assert session.video_duration == 1
    assert (session.prompt, session.thumbnail_title, session.thumbnail_clone_url) == ("", "", "")
    assert (session.video_prompt, session.cartoon_prompt, session.selected_template) == ("", "", "")
    assert session.image1 is None and session.image2 is None
    assert session.result_image == "" and session.result_video == ""
    assert session.error_message == ""
    assert not session.credential_error


def test_switching_view_accepts_plain_strings():
    session = CreativeSession()
    switch_view(session, "Cartoon")
    assert session.view == "Cartoon"
    assert session.aspect_ratio == "16:9"


def test_results_are_mutually_exclusive():
    session = CreativeSession()
    session.set_result_image("data:image/png;base64,QUFB")
    session.set_result_video("data:video/mp4;base64,QUFB")
    assert session.result_image == ""
    assert session.result_video

    session.set_result_image("data:image/png;base64,QUFB")
    assert session.result_video == ""


def test_error_clears_result_and_result_clears_error():
    session = CreativeSession()
    session.set_result_image("data:image/png;base64,QUFB")
    session.set_error("An error occurred: boom")
    assert session.result_image == ""

    session.set_result_video("data:video/mp4;base64,QUFB")
    assert session.error_message == ""


def test_credential_error_closes_the_gate():
    session = CreativeSession(credential_selected=True)
    session.set_error("bad key", credential_error=True)
    assert session.credential_error
    assert not session.credential_selected


def test_upload_slots():
    session = CreativeSession()
    session.set_upload("image2", IMAGE)
    assert session.image2 == IMAGE
    session.clear_upload("image2")
    assert session.image2 is None
    with pytest.raises(ValueError):
        session.set_upload("image3", IMAGE)


@pytest.mark.parametrize(
    "view, photo_mode, expected",
    [
        (AppView.PHOTO, EditMode.GENERATE, CreativeMode.GENERATE),
        (AppView.PHOTO, EditMode.EDIT, CreativeMode.EDIT),
        (AppView.PHOTO, EditMode.ENHANCE, CreativeMode.ENHANCE),
        (AppView.PHOTO, EditMode.COMBINE, CreativeMode.COMBINE),
        (AppView.THUMBNAIL, EditMode.EDIT, CreativeMode.THUMBNAIL),
        (AppView.VIDEO, EditMode.GENERATE, CreativeMode.VIDEO),
        (AppView.CARTOON, EditMode.GENERATE, CreativeMode.CARTOON),
        (AppView.TEMPLATES, EditMode.GENERATE, CreativeMode.TEMPLATE),
    ],
)
def test_resolve_creative_mode(view, photo_mode, expected):
    assert resolve_creative_mode(view.value, photo_mode.value) == expected
