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


import requests

from common.analytics import track_model_call
from config.default import Default
from models import gemini, veo
from models.model_setup import GenAIModelSetup
from models.requests import ImageEditRequest, ImageGenerationRequest, VideoGenerationRequest


class GenAIProvider:
    """The remote generative-AI service, bound to one credential.

    A provider is created per submission so that a newly selected key takes
    effect on the next call.
    """

    def __init__(self, api_key: str, config: Default | None = None, client_factory=GenAIModelSetup.init, http_get=requests.get):
        self.api_key = api_key
        self.config = config or Default()
        self._client_factory = client_factory
        self._http_get = http_get
        self._client = None

    @property
    def client(self):
        if self._client is None:
            self._client = self._client_factory(self.api_key)
        return self._client

    def generate_image(self, request: ImageGenerationRequest) -> str:
        with track_model_call(request.model, aspect_ratio=request.aspect_ratio):
            return gemini.generate_image(self.client, request)

    def edit_image(self, request: ImageEditRequest) -> str:
        with track_model_call(request.model, image_count=len(request.images)):
            return gemini.edit_image(self.client, request)

    def start_video_generation(self, request: VideoGenerationRequest):
        with track_model_call(
            request.model,
            aspect_ratio=request.aspect_ratio,
            resolution=request.resolution,
            has_image=request.image is not None,
        ):
            return veo.start_video_generation(self.client, request)

    def refresh_video_operation(self, operation):
        return veo.refresh_video_operation(self.client, operation)

    def download_video(self, video_uri: str) -> bytes:
        return veo.download_video(
            video_uri,
            self.api_key,
            timeout=self.config.VIDEO_DOWNLOAD_TIMEOUT_SECONDS,
            http_get=self._http_get,
        )
