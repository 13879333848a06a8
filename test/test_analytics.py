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

import logging

import pytest

from common.analytics import log_page_view, log_ui_click, track_model_call


def _events(caplog):
    return [record.extra_data for record in caplog.records if hasattr(record, "extra_data")]


def test_optional_fields_default_to_none(caplog):
    with caplog.at_level(logging.INFO, logger="creative_studio.analytics"):
        log_page_view("creative_studio")
        log_ui_click(element_id="generate_button", page_name="Photo")

    page_view, click = _events(caplog)
    assert page_view == {"event_type": "page_view", "page_name": "creative_studio", "session_id": None}
    assert click["session_id"] is None
    assert click["element_id"] == "generate_button"


def test_click_extras_are_merged(caplog):
    with caplog.at_level(logging.INFO, logger="creative_studio.analytics"):
        log_ui_click(element_id="view_Video", page_name="Photo", session_id="s1", extras={"view": "Video"})

    (click,) = _events(caplog)
    assert click["view"] == "Video"
    assert click["session_id"] == "s1"


def test_model_call_failure_is_logged_and_reraised(caplog):
    with caplog.at_level(logging.INFO, logger="creative_studio.analytics"):
        with pytest.raises(RuntimeError, match="quota"):
            with track_model_call("veo-test", aspect_ratio="16:9"):
                raise RuntimeError("quota exceeded")

    (call,) = _events(caplog)
    assert call["status"] == "failure"
    assert call["details"] == {"error": "quota exceeded", "aspect_ratio": "16:9"}
