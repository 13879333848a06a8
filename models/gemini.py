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

"""Imagen text-to-image and Gemini image edit calls."""

import base64

from google import genai
from google.genai import types

from common.analytics import get_logger
from common.error_handling import ProviderError
from common.utils import payload_to_data_uri
from models.requests import ImageEditRequest, ImageGenerationRequest

logger = get_logger(__name__)


def generate_image(client: genai.Client, request: ImageGenerationRequest) -> str:
    """Generates an image from a text prompt using Imagen.

    Returns:
        The generated image as a data URI.
    """
    logger.info(f"Calling generate_images with model: {request.model}")
    response = client.models.generate_images(
        model=request.model,
        prompt=request.prompt,
        config=types.GenerateImagesConfig(
            number_of_images=request.number_of_images,
            output_mime_type=request.output_mime_type,
            aspect_ratio=request.aspect_ratio,
        ),
    )

    if not response.generated_images:
        raise ProviderError("Image generation failed, no images returned.")
    image = response.generated_images[0].image
    if not image or not image.image_bytes:
        raise ProviderError("Image generation failed, no images returned.")
    return payload_to_data_uri(image.image_bytes, request.output_mime_type)


def edit_image(client: genai.Client, request: ImageEditRequest) -> str:
    """Edits, combines or composes images following a text instruction.

    The images come first, then the instruction, in a single user turn.

    Returns:
        The resulting image as a data URI.
    """
    parts = [
        types.Part.from_bytes(
            data=base64.b64decode(image.data), mime_type=image.mime_type
        )
        for image in request.images
    ]
    parts.append(types.Part.from_text(text=request.instruction))

    logger.info(
        f"Calling generate_content with model: {request.model}, images: {len(request.images)}"
    )
    response = client.models.generate_content(
        model=request.model,
        contents=[types.Content(role="user", parts=parts)],
        config=types.GenerateContentConfig(response_modalities=["IMAGE"]),
    )

    for candidate in response.candidates or []:
        content = candidate.content
        if not content:
            continue
        for part in content.parts or []:
            if part.inline_data and part.inline_data.data:
                return payload_to_data_uri(
                    part.inline_data.data, part.inline_data.mime_type or "image/png"
                )
    raise ProviderError("Image editing failed. No image data in response.")
