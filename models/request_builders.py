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

"""Validation of the session and one pure request builder per operation."""

import pydantic

from common.error_handling import ValidationError
from common.utils import data_uri_to_payload
from config import prompts
from config.creative_modes import (
    MAX_VIDEO_DURATION,
    MIN_VIDEO_DURATION,
    CreativeMode,
    get_view_config,
    resolve_creative_mode,
)
from config.creative_presets import get_video_template
from config.default import Default
from config.gemini_image_models import get_image_model_config
from config.veo_models import get_veo_model_config
from models.requests import (
    CartoonRequest,
    CombineRequest,
    CreativeRequest,
    EditRequest,
    EnhanceRequest,
    GenerateRequest,
    ImageEditRequest,
    ImageGenerationRequest,
    ImagePayload,
    TemplateRequest,
    ThumbnailRequest,
    VideoGenerationRequest,
    VideoRequest,
)
from state.creative_state import CreativeSession, UploadedImage

# Template videos are rendered at a fixed aspect ratio, whatever the session holds.
TEMPLATE_ASPECT_RATIO = "16:9"


def _to_payload(image: UploadedImage) -> ImagePayload:
    data, mime_type = data_uri_to_payload(image.data_uri)
    return ImagePayload(data=data, mime_type=mime_type)


def _require(condition, message: str):
    if not condition:
        raise ValidationError(message)


def validate_session(session: CreativeSession) -> CreativeRequest:
    """Checks the required fields of the active mode and returns its request.

    Raises:
        ValidationError: with a mode-specific message when a field is missing.
    """
    mode = resolve_creative_mode(session.view, session.photo_mode)

    if get_view_config(session.view).requires_credential:
        _require(session.credential_selected, "Please select an API key to continue.")

    try:
        if mode == CreativeMode.TEMPLATE:
            template = get_video_template(session.selected_template)
            _require(
                template and session.prompt,
                "Please select a template and enter a prompt.",
            )
            _require_duration(session.video_duration)
            return TemplateRequest(
                template_name=template.name,
                style_prompt=template.style_prompt,
                prompt=session.prompt,
                duration_minutes=session.video_duration,
            )

        if mode == CreativeMode.CARTOON:
            _require(
                session.cartoon_prompt,
                "Please enter a story prompt to generate a cartoon.",
            )
            _require_duration(session.video_duration)
            return CartoonRequest(
                story=session.cartoon_prompt,
                aspect_ratio=session.aspect_ratio,
                duration_minutes=session.video_duration,
            )

        if mode == CreativeMode.VIDEO:
            _require(session.video_prompt, "Please enter a prompt to generate a video.")
            _require_duration(session.video_duration)
            return VideoRequest(
                prompt=session.video_prompt,
                image=_to_payload(session.image1) if session.image1 else None,
                aspect_ratio=session.aspect_ratio,
                duration_minutes=session.video_duration,
            )

        if mode == CreativeMode.THUMBNAIL:
            _require(session.image1, "Please upload an image for the thumbnail.")
            _require(
                session.prompt.strip() or session.thumbnail_title.strip(),
                "Please provide a title or instructions.",
            )
            return ThumbnailRequest(
                instructions=session.prompt,
                title=session.thumbnail_title,
                clone_url=session.thumbnail_clone_url,
                image=_to_payload(session.image1),
                aspect_ratio=session.aspect_ratio,
            )

        if mode == CreativeMode.GENERATE:
            _require(session.prompt, "Please enter a prompt to generate an image.")
            return GenerateRequest(prompt=session.prompt, aspect_ratio=session.aspect_ratio)

        if mode == CreativeMode.EDIT:
            _require(
                session.prompt and session.image1,
                "Please upload an image and provide an editing prompt.",
            )
            return EditRequest(prompt=session.prompt, image=_to_payload(session.image1))

        if mode == CreativeMode.ENHANCE:
            _require(session.image1, "Please upload an image to enhance.")
            return EnhanceRequest(image=_to_payload(session.image1))

        if mode == CreativeMode.COMBINE:
            _require(
                session.prompt and session.image1 and session.image2,
                "Please upload two images and provide a prompt.",
            )
            return CombineRequest(
                prompt=session.prompt,
                image1=_to_payload(session.image1),
                image2=_to_payload(session.image2),
                aspect_ratio=session.aspect_ratio,
            )
    except pydantic.ValidationError as e:
        raise ValidationError(f"Invalid request: {e.errors()[0]['msg']}") from e

    raise ValidationError(f"Unsupported mode: {mode}")


def _require_duration(duration: int):
    _require(
        isinstance(duration, int) and MIN_VIDEO_DURATION <= duration <= MAX_VIDEO_DURATION,
        f"Video duration must be between {MIN_VIDEO_DURATION} and {MAX_VIDEO_DURATION} minutes.",
    )


def duration_clause(duration_minutes: int) -> str:
    plural = "s" if duration_minutes > 1 else ""
    return prompts.VIDEO_DURATION_CLAUSE.format(duration=duration_minutes, plural=plural)


# Image builders


def _check_image_model(model_name: str, aspect_ratio: str | None = None, image_count: int = 0):
    """Checks a request against the model's capabilities, when the model is known."""
    model = get_image_model_config(model_name)
    if not model:
        return None
    if aspect_ratio and aspect_ratio not in model.supported_aspect_ratios:
        raise ValidationError(
            f"Aspect ratio {aspect_ratio} is not supported by {model.display_name}."
        )
    if image_count > model.max_input_images:
        raise ValidationError(
            f"{model.display_name} accepts at most {model.max_input_images} input images."
        )
    return model


def build_generate_request(
    request: GenerateRequest, config: Default
) -> ImageGenerationRequest:
    model = _check_image_model(config.IMAGEN_MODEL, aspect_ratio=request.aspect_ratio)
    return ImageGenerationRequest(
        model=config.IMAGEN_MODEL,
        prompt=f"{request.prompt}. {prompts.GENERATE_QUALITY_SUFFIX}",
        aspect_ratio=request.aspect_ratio,
        output_mime_type=model.output_mime_type if model else "image/png",
    )


def build_edit_request(
    instruction: str, image: ImagePayload, config: Default
) -> ImageEditRequest:
    _check_image_model(config.GEMINI_IMAGE_GEN_MODEL, image_count=1)
    return ImageEditRequest(
        model=config.GEMINI_IMAGE_GEN_MODEL,
        images=[image],
        instruction=instruction,
    )


def build_enhance_request(request: EnhanceRequest, config: Default) -> ImageEditRequest:
    """Enhancement ignores any user prompt and reuses the edit call."""
    return build_edit_request(prompts.ENHANCE_INSTRUCTION, request.image, config)


def build_combine_request(request: CombineRequest, config: Default) -> ImageEditRequest:
    _check_image_model(
        config.GEMINI_IMAGE_GEN_MODEL, aspect_ratio=request.aspect_ratio, image_count=2
    )
    clause = prompts.COMBINE_ASPECT_RATIO_CLAUSE.format(aspect_ratio=request.aspect_ratio)
    return ImageEditRequest(
        model=config.GEMINI_IMAGE_GEN_MODEL,
        images=[request.image1, request.image2],
        instruction=f"{request.prompt}. {clause}",
    )


def build_thumbnail_request(
    request: ThumbnailRequest, config: Default
) -> ImageEditRequest:
    """Clone-style and title clauses go ahead of the free-text instructions."""
    instructions = request.instructions
    if request.title:
        title = prompts.THUMBNAIL_TITLE_CLAUSE.format(title=request.title)
        instructions = f"{title} {instructions}"
    if request.clone_url:
        clone = prompts.THUMBNAIL_CLONE_STYLE_CLAUSE.format(url=request.clone_url)
        instructions = f"{clone} {instructions}"
    return build_edit_request(
        prompts.THUMBNAIL_FRAMING.format(
            aspect_ratio=request.aspect_ratio, instructions=instructions
        ),
        request.image,
        config,
    )


# Video builders


def _video_generation_request(
    prompt: str, aspect_ratio: str, duration_minutes: int, config: Default, image=None
) -> VideoGenerationRequest:
    resolution = config.VIDEO_RESOLUTION
    model = get_veo_model_config(config.VEO_MODEL_ID)
    if model:
        if aspect_ratio not in model.supported_aspect_ratios:
            raise ValidationError(
                f"Aspect ratio {aspect_ratio} is not supported by {model.display_name}."
            )
        if image is not None and not model.supports_image_input:
            raise ValidationError(
                f"{model.display_name} does not accept a starting image."
            )
        if resolution not in model.resolutions:
            resolution = model.default_resolution
    return VideoGenerationRequest(
        model=config.VEO_MODEL_ID,
        prompt=f"{duration_clause(duration_minutes)} {prompt}",
        image=image,
        aspect_ratio=aspect_ratio,
        resolution=resolution,
    )


def build_video_request(request: VideoRequest, config: Default) -> VideoGenerationRequest:
    return _video_generation_request(
        request.prompt,
        request.aspect_ratio,
        request.duration_minutes,
        config,
        image=request.image,
    )


def build_cartoon_request(
    request: CartoonRequest, config: Default
) -> VideoGenerationRequest:
    return _video_generation_request(
        prompts.CARTOON_FRAMING.format(story=request.story),
        request.aspect_ratio,
        request.duration_minutes,
        config,
    )


def build_template_request(
    request: TemplateRequest, config: Default
) -> VideoGenerationRequest:
    # TODO: confirm with product whether templates should honor the selected aspect ratio.
    return _video_generation_request(
        prompts.TEMPLATE_FRAMING.format(
            style_prompt=request.style_prompt, prompt=request.prompt
        ),
        TEMPLATE_ASPECT_RATIO,
        request.duration_minutes,
        config,
    )
