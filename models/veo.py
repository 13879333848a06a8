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


import base64
import threading
import time

import requests
from google import genai
from google.genai import types

from common.analytics import get_logger
from common.error_handling import (
    INVALID_KEY_MESSAGE,
    CredentialError,
    GenerationCancelledError,
    GenerationError,
    NoResultError,
    PollingTimeoutError,
    ProviderError,
)
from common.utils import payload_to_data_uri
from models.requests import VideoGenerationRequest, VideoResult

logger = get_logger(__name__)

# Progress messages, in the order the poller emits them.
PROGRESS_SUBMITTING = "Sending request to AI..."
PROGRESS_POLLING = "AI is directing your scene... (this may take a few minutes)"
PROGRESS_RENDERING = "Rendering final frames..."
PROGRESS_DOWNLOADING = "Downloading video..."


def start_video_generation(client: genai.Client, request: VideoGenerationRequest):
    """Submits a Veo job and returns its operation handle."""
    image_input = None
    if request.image:
        image_input = types.Image(
            image_bytes=base64.b64decode(request.image.data),
            mime_type=request.image.mime_type,
        )
        logger.info(f"Mode: Image-to-Video ({request.image.mime_type})")
    else:
        logger.info("Mode: Text-to-Video")

    gen_config = types.GenerateVideosConfig(
        number_of_videos=request.video_count,
        resolution=request.resolution,
        aspect_ratio=request.aspect_ratio,
    )
    logger.info(f"Calling generate_videos with model: {request.model}")
    return client.models.generate_videos(
        model=request.model,
        prompt=request.prompt,
        image=image_input,
        config=gen_config,
    )


def refresh_video_operation(client: genai.Client, operation):
    """Exchanges an operation handle for its current state."""
    return client.operations.get(operation)


def extract_video_uri(operation) -> str | None:
    """Returns the media locator of the first generated video, if any."""
    response = getattr(operation, "response", None)
    if not response:
        return None
    generated_videos = getattr(response, "generated_videos", None)
    if not generated_videos:
        return None
    video = getattr(generated_videos[0], "video", None)
    return getattr(video, "uri", None) or None


def download_video(video_uri: str, api_key: str, timeout: float = 120, http_get=requests.get) -> bytes:
    """Fetches the finished video, authenticating with the key as a query parameter.

    A 404 here means the key cannot see the file, so it is reported as a
    credential error rather than a missing resource.
    """
    response = http_get(video_uri, params={"key": api_key}, timeout=timeout)
    if not response.ok:
        if response.status_code == 404:
            raise CredentialError(INVALID_KEY_MESSAGE)
        raise ProviderError(f"Failed to download video: {response.reason}")
    return response.content


class VideoOperationPoller:
    """Drives one video generation from submission to a playable result.

    ``run`` is a generator: it yields a progress message at each phase
    boundary and returns a :class:`VideoResult`. Callers that do not need
    progress can use :meth:`wait`.
    """

    def __init__(self, provider, poll_interval: float = 10, timeout: float | None = None, clock=time.monotonic):
        self.provider = provider
        self.poll_interval = poll_interval
        self.timeout = timeout
        self._clock = clock

    def run(self, request: VideoGenerationRequest, cancel_event: threading.Event | None = None):
        cancel_event = cancel_event or threading.Event()

        yield PROGRESS_SUBMITTING
        try:
            operation = self.provider.start_video_generation(request)
        except GenerationError:
            raise
        except Exception as e:
            if "API key not valid" in str(e):
                raise CredentialError(INVALID_KEY_MESSAGE) from e
            raise

        yield PROGRESS_POLLING
        started = self._clock()
        polls = 0
        while not operation.done:
            # wait() returns early, and True, once the caller cancels.
            if cancel_event.wait(self.poll_interval):
                raise GenerationCancelledError("Video generation was cancelled.")
            if self.timeout is not None and self._clock() - started > self.timeout:
                raise PollingTimeoutError(
                    f"Video generation timed out after {self.timeout} seconds."
                )
            operation = self.provider.refresh_video_operation(operation)
            polls += 1
            logger.info(f"Operation in progress: {getattr(operation, 'name', '')} (poll {polls})")

        yield PROGRESS_RENDERING
        if getattr(operation, "error", None):
            raise ProviderError(f"API Error: {operation.error}")

        video_uri = extract_video_uri(operation)
        if not video_uri:
            raise NoResultError("Video generation failed: no download link provided.")

        yield PROGRESS_DOWNLOADING
        video_bytes = self.provider.download_video(video_uri)
        logger.info(f"Downloaded {len(video_bytes)} bytes from {video_uri}")
        return VideoResult(
            video_uri=video_uri,
            data_uri=payload_to_data_uri(video_bytes, "video/mp4"),
        )

    def wait(self, request: VideoGenerationRequest, cancel_event: threading.Event | None = None, on_progress=None) -> VideoResult:
        """Runs the poller to completion, forwarding progress to an optional sink."""
        runner = self.run(request, cancel_event)
        while True:
            try:
                message = next(runner)
            except StopIteration as done:
                return done.value
            if on_progress:
                on_progress(message)
