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

"""Test doubles for the generative-AI provider and its long-running operations."""

from types import SimpleNamespace


def pending_operation(name="operations/video-1"):
    return SimpleNamespace(name=name, done=False, response=None, error=None)


def done_operation(video_uri="https://example.com/files/video-1:download?alt=media", name="operations/video-1"):
    response = SimpleNamespace(
        generated_videos=[SimpleNamespace(video=SimpleNamespace(uri=video_uri))]
    )
    return SimpleNamespace(name=name, done=True, response=response, error=None)


def done_operation_without_locator(name="operations/video-1"):
    return SimpleNamespace(
        name=name, done=True, response=SimpleNamespace(generated_videos=[]), error=None
    )


class FakeProvider:
    """Scripted stand-in for GenAIProvider."""

    def __init__(self, operations=None, video_bytes=b"fake-mp4", image_data_uri="data:image/png;base64,aW1hZ2U=", error=None, download_error=None):
        self.operations = list(operations or [])
        self.video_bytes = video_bytes
        self.image_data_uri = image_data_uri
        self.error = error
        self.download_error = download_error
        self.image_requests = []
        self.edit_requests = []
        self.video_requests = []
        self.refresh_calls = 0
        self.downloads = []
        self._last_operation = None

    def generate_image(self, request):
        self.image_requests.append(request)
        if self.error:
            raise self.error
        return self.image_data_uri

    def edit_image(self, request):
        self.edit_requests.append(request)
        if self.error:
            raise self.error
        return self.image_data_uri

    def start_video_generation(self, request):
        self.video_requests.append(request)
        if self.error:
            raise self.error
        self._last_operation = self.operations.pop(0)
        return self._last_operation

    def refresh_video_operation(self, operation):
        """Returns the next queued operation, then keeps returning the last one."""
        self.refresh_calls += 1
        if self.operations:
            self._last_operation = self.operations.pop(0)
        return self._last_operation

    def download_video(self, video_uri):
        self.downloads.append(video_uri)
        if self.download_error:
            raise self.download_error
        return self.video_bytes


def drain(generator):
    """Runs a generator to completion, returning (yielded values, return value)."""
    yielded = []
    while True:
        try:
            yielded.append(next(generator))
        except StopIteration as done:
            return yielded, done.value
