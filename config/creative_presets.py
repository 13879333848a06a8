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


from dataclasses import dataclass
from typing import List, Optional


@dataclass(frozen=True)
class VideoTemplate:
    """A fixed video style the user can pick in the Templates view."""

    name: str
    description: str
    style_prompt: str
    thumbnail: str


VIDEO_TEMPLATES: List[VideoTemplate] = [
    VideoTemplate(
        name="Cinematic Vlog",
        description="Dramatic, smooth shots with high contrast and teal-orange color grading.",
        style_prompt="Create a cinematic vlog style video. Use slow, sweeping camera movements, a shallow depth of field, and a teal and orange color grade. The mood should be thoughtful and epic.",
        thumbnail="https://images.pexels.com/photos/1040881/pexels-photo-1040881.jpeg?auto=compress&cs=tinysrgb&w=1260&h=750&dpr=1",
    ),
    VideoTemplate(
        name="Sci-Fi Trailer",
        description="Futuristic, high-tech visuals with neon glows and digital glitch effects.",
        style_prompt="Generate a high-energy sci-fi trailer. Include futuristic cityscapes, neon lighting, lens flares, and quick cuts. Use digital glitch transitions and an intense, suspenseful tone.",
        thumbnail="https://images.pexels.com/photos/3861969/pexels-photo-3861969.jpeg?auto=compress&cs=tinysrgb&w=1260&h=750&dpr=1",
    ),
    VideoTemplate(
        name="Retro VHS",
        description="A nostalgic, 90s home video look with tape grain and tracking lines.",
        style_prompt="Produce a video with a retro VHS aesthetic. The footage should have a 4:3 aspect ratio, visible scan lines, color bleeding, a soft focus, and a timestamp in the corner. Emulate the look of an old camcorder.",
        thumbnail="https://images.pexels.com/photos/7130498/pexels-photo-7130498.jpeg?auto=compress&cs=tinysrgb&w=1260&h=750&dpr=1",
    ),
    VideoTemplate(
        name="Viral TikTok Short",
        description="Fast-paced, engaging content with trending music and quick text overlays.",
        style_prompt="Make a vertical, fast-paced video suitable for TikTok or Reels. Use quick cuts, punchy zoom effects, and engaging text captions that appear on screen. The energy should be high and attention-grabbing.",
        thumbnail="https://images.pexels.com/photos/7674643/pexels-photo-7674643.jpeg?auto=compress&cs=tinysrgb&w=1260&h=750&dpr=1",
    ),
]


def get_video_template(name: str) -> Optional[VideoTemplate]:
    """Finds a template by its display name."""
    for template in VIDEO_TEMPLATES:
        if template.name == name:
            return template
    return None


PROMPT_IDEAS: List[str] = [
    "Change my shirt to a red jacket",
    "Add a superhero cape",
    "Make the background a cyberpunk city",
    "Turn me into a game character",
    "Surprised face with exploding background",
    'Add glowing text: "INSANE!"',
    "Clone MrBeast thumbnail style",
    "A dragon reading a book",
]
