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


from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, Field

from config.creative_modes import CreativeMode, MAX_VIDEO_DURATION, MIN_VIDEO_DURATION

AspectRatio = Literal["1:1", "16:9", "9:16"]


class ImagePayload(BaseModel):
    """An image in the transport form the API expects."""

    data: str  # base64, no data URI header
    mime_type: str


# Validated creative requests, one variant per mode. Each carries only the
# fields that mode needs.


class GenerateRequest(BaseModel):
    mode: Literal[CreativeMode.GENERATE] = CreativeMode.GENERATE
    prompt: str
    aspect_ratio: AspectRatio


class EditRequest(BaseModel):
    mode: Literal[CreativeMode.EDIT] = CreativeMode.EDIT
    prompt: str
    image: ImagePayload


class EnhanceRequest(BaseModel):
    mode: Literal[CreativeMode.ENHANCE] = CreativeMode.ENHANCE
    image: ImagePayload


class CombineRequest(BaseModel):
    mode: Literal[CreativeMode.COMBINE] = CreativeMode.COMBINE
    prompt: str
    image1: ImagePayload
    image2: ImagePayload
    aspect_ratio: AspectRatio


class ThumbnailRequest(BaseModel):
    mode: Literal[CreativeMode.THUMBNAIL] = CreativeMode.THUMBNAIL
    instructions: str = ""
    title: str = ""
    clone_url: str = ""
    image: ImagePayload
    aspect_ratio: AspectRatio


class VideoRequest(BaseModel):
    mode: Literal[CreativeMode.VIDEO] = CreativeMode.VIDEO
    prompt: str
    image: Optional[ImagePayload] = None
    aspect_ratio: AspectRatio
    duration_minutes: int = Field(..., ge=MIN_VIDEO_DURATION, le=MAX_VIDEO_DURATION)


class CartoonRequest(BaseModel):
    mode: Literal[CreativeMode.CARTOON] = CreativeMode.CARTOON
    story: str
    aspect_ratio: AspectRatio
    duration_minutes: int = Field(..., ge=MIN_VIDEO_DURATION, le=MAX_VIDEO_DURATION)


class TemplateRequest(BaseModel):
    mode: Literal[CreativeMode.TEMPLATE] = CreativeMode.TEMPLATE
    template_name: str
    style_prompt: str
    prompt: str
    duration_minutes: int = Field(..., ge=MIN_VIDEO_DURATION, le=MAX_VIDEO_DURATION)


CreativeRequest = Annotated[
    Union[
        GenerateRequest,
        EditRequest,
        EnhanceRequest,
        CombineRequest,
        ThumbnailRequest,
        VideoRequest,
        CartoonRequest,
        TemplateRequest,
    ],
    Field(discriminator="mode"),
]


# Provider requests, built right before a call and never retained.


class ImageGenerationRequest(BaseModel):
    """Text-to-image call."""

    model: str
    prompt: str
    number_of_images: int = 1
    output_mime_type: str = "image/png"
    aspect_ratio: AspectRatio


class ImageEditRequest(BaseModel):
    """Image edit / compose call: one or more images plus an instruction."""

    model: str
    images: List[ImagePayload] = Field(..., min_length=1)
    instruction: str


class VideoGenerationRequest(BaseModel):
    """
    Defines the contract for a video generation request.
    Built by the request builders and submitted by the operation poller.
    """

    model: str
    prompt: str
    image: Optional[ImagePayload] = None
    aspect_ratio: AspectRatio
    resolution: str = "720p"
    video_count: int = 1


class VideoResult(BaseModel):
    """A finished video, ready to render."""

    video_uri: str  # provider media locator
    data_uri: str  # locally renderable form
    mime_type: str = "video/mp4"
