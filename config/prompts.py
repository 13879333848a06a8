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

"""Fixed prompt texts wrapped around user input before each provider call."""

GENERATE_QUALITY_SUFFIX = "Style: realistic, 4k, ultra detail."

ENHANCE_INSTRUCTION = (
    "Enhance this image to 4K resolution. Sharpen all details, improve "
    "lighting, and make it ultra-clear. Do not change the original content, "
    "composition, or colors. Only improve the quality and resolution."
)

COMBINE_ASPECT_RATIO_CLAUSE = "The final image must have a {aspect_ratio} aspect ratio."

THUMBNAIL_TITLE_CLAUSE = 'Title to include: "{title}".'
THUMBNAIL_CLONE_STYLE_CLAUSE = "Clone the style from this thumbnail: {url}."
THUMBNAIL_FRAMING = (
    "Create a viral YouTube thumbnail ({aspect_ratio} aspect ratio) using the "
    "provided image as the main subject. Instructions: {instructions}"
)

VIDEO_DURATION_CLAUSE = "Generate a video, approximately {duration} minute{plural} long."

CARTOON_FRAMING = (
    "Generate a Pixar-style animated cartoon clip based on this story: {story}. "
    "The animation should be vibrant, with expressive characters, smooth "
    "movement, and cinematic backgrounds."
)

TEMPLATE_FRAMING = "{style_prompt}. The video should be about: {prompt}."
