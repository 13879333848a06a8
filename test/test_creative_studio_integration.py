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


import pytest
import os
import sys

# Setup sys.path to allow imports from the parent directory.
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from config.default import Default
from models.provider import GenAIProvider
from models.request_builders import build_generate_request, build_video_request
from models.requests import GenerateRequest, VideoRequest
from models.veo import VideoOperationPoller

config = Default()

requires_key = pytest.mark.skipif(
    not config.GEMINI_API_KEY, reason="GEMINI_API_KEY is not set"
)


@pytest.mark.integration
@requires_key
def test_generate_image_live():
    """Generates one square image with the configured Imagen model."""
    provider = GenAIProvider(config.GEMINI_API_KEY, config)
    request = build_generate_request(
        GenerateRequest(prompt="a red bicycle leaning on a brick wall", aspect_ratio="1:1"),
        config,
    )

    data_uri = provider.generate_image(request)

    assert data_uri.startswith("data:image/")
    print(f"SUCCESS: image generated ({len(data_uri)} chars)")


@pytest.mark.integration
@requires_key
def test_generate_video_live():
    """Runs a full submit, poll and download cycle against Veo."""
    provider = GenAIProvider(config.GEMINI_API_KEY, config)
    request = build_video_request(
        VideoRequest(prompt="waves rolling onto a beach at sunset", aspect_ratio="16:9", duration_minutes=1),
        config,
    )
    poller = VideoOperationPoller(
        provider,
        poll_interval=config.VIDEO_POLL_INTERVAL_SECONDS,
        timeout=config.VIDEO_POLL_TIMEOUT_SECONDS,
    )

    print(f"\nStarting video generation with {request.model}...")
    result = poller.wait(request, on_progress=print)

    assert result.data_uri.startswith("data:video/mp4;base64,")
    assert result.video_uri
    print(f"SUCCESS: video downloaded from {result.video_uri}")
