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

"""Creative Studio Mesop UI page."""

from dataclasses import dataclass
from typing import Callable

import mesop as me

from common.analytics import log_ui_click, track_click
from common.credentials import credential_store
from common.utils import get_image_dimensions_from_base64, payload_to_data_uri
from config.creative_modes import AppView, EditMode, get_view_config
from config.creative_presets import PROMPT_IDEAS, VIDEO_TEMPLATES
from config.default import Default
from services.generation_service import generation_service, select_credential, switch_view
from state.creative_state import PageState, UploadedImage

config = Default()

CHIP_STYLE = me.Style(
    padding=me.Padding(top=4, right=12, bottom=4, left=12),
    border_radius=8,
    font_size=14,
    height=32,
)


@dataclass
class Tab:
    key: str
    label: str
    icon: str | None = None


VIEW_TABS = [
    Tab(key=AppView.PHOTO.value, label="Photo", icon="photo_camera"),
    Tab(key=AppView.VIDEO.value, label="Video", icon="movie"),
    Tab(key=AppView.CARTOON.value, label="Cartoon", icon="animation"),
    Tab(key=AppView.THUMBNAIL.value, label="Thumbnail", icon="smart_display"),
    Tab(key=AppView.TEMPLATES.value, label="Templates", icon="dashboard"),
]


@me.component
def _tab_group(tabs: list[Tab], on_tab_click: Callable, selected_tab_key: str):
    with me.box(
        style=me.Style(
            display="flex",
            border=me.Border(
                bottom=me.BorderSide(
                    width=1, style="solid", color=me.theme_var("outline-variant")
                )
            ),
        )
    ):
        for tab in tabs:
            is_selected = tab.key == selected_tab_key
            with me.box(
                key=tab.key,
                on_click=on_tab_click,
                style=_make_tab_style(is_selected),
            ):
                if tab.icon:
                    me.icon(tab.icon)
                me.text(tab.label)


def _make_tab_style(selected: bool) -> me.Style:
    style = me.Style(
        align_items="center",
        color=me.theme_var("on-surface"),
        display="flex",
        cursor="pointer",
        flex_grow=1,
        justify_content="center",
        gap=6,
        line_height=1,
        font_size=14,
        padding=me.Padding.all(12),
    )
    if selected:
        style.color = me.theme_var("primary")
        style.border = me.Border(
            bottom=me.BorderSide(width=2, style="solid", color=me.theme_var("primary"))
        )
    return style


def creative_studio_page_content():
    """Renders the main UI for the Creative Studio page."""
    state = me.state(PageState)
    session = state.session

    with me.box(style=me.Style(padding=me.Padding.all(24), display="flex", flex_direction="column", gap=16)):
        me.text(config.APP_TITLE, type="headline-4")
        _tab_group(VIEW_TABS, on_view_click, session.view)

        with me.box(
            style=me.Style(
                display="grid",
                grid_template_columns="1fr 1fr",
                gap=32,
                align_items="start",
            )
        ):
            with me.box(style=me.Style(display="flex", flex_direction="column", gap=16)):
                view_config = get_view_config(session.view)
                if view_config.requires_credential and not session.credential_selected:
                    _credential_gate()
                else:
                    _controls()

                me.button(
                    "Processing..." if session.is_loading else "Generate",
                    on_click=on_click_generate,
                    type="flat",
                    disabled=session.is_loading,
                )
                if generation_service.can_cancel(session):
                    me.button("Cancel", on_click=on_click_cancel, type="stroked")
                if session.error_message:
                    me.text(
                        session.error_message,
                        style=me.Style(color=me.theme_var("error")),
                    )

            _media_display()


def _controls():
    state = me.state(PageState)
    session = state.session
    view = AppView(session.view)

    if view == AppView.PHOTO:
        me.button_toggle(
            value=session.photo_mode,
            buttons=[me.ButtonToggleButton(label=mode.value, value=mode.value) for mode in EditMode],
            on_change=on_photo_mode_change,
        )

    if view == AppView.TEMPLATES:
        _template_cards()

    if view == AppView.THUMBNAIL:
        me.input(label="Title (optional)", value=session.thumbnail_title, on_blur=on_blur_thumbnail_title)
        me.input(
            label="Clone style from thumbnail URL (optional)",
            value=session.thumbnail_clone_url,
            on_blur=on_blur_thumbnail_clone_url,
        )

    _prompt_input(view, session)

    if _upload_slots(view, session.photo_mode) >= 1:
        _upload_slot("image1", session.image1, "Upload image")
    if _upload_slots(view, session.photo_mode) == 2:
        _upload_slot("image2", session.image2, "Upload second image")

    view_config = get_view_config(view)
    if view_config.aspect_ratio_options and not (
        view == AppView.PHOTO and session.photo_mode in (EditMode.EDIT.value, EditMode.ENHANCE.value)
    ):
        me.text("Aspect Ratio", type="subtitle-2")
        me.button_toggle(
            value=session.aspect_ratio,
            buttons=[me.ButtonToggleButton(label=ratio, value=ratio) for ratio in view_config.aspect_ratio_options],
            on_change=on_aspect_ratio_change,
        )

    if view_config.shows_duration:
        me.text(f"Timeline: {session.video_duration} min", type="subtitle-2")
        me.slider(
            min=1,
            max=20,
            step=1,
            value=session.video_duration,
            on_value_change=on_duration_change,
        )

    _prompt_ideas()


def _prompt_input(view: AppView, session):
    state = me.state(PageState)
    if view == AppView.PHOTO and session.photo_mode == EditMode.ENHANCE.value:
        return
    if view == AppView.TEMPLATES and not session.selected_template:
        return
    label, value = {
        AppView.VIDEO: ("Describe your video", session.video_prompt),
        AppView.CARTOON: ("Tell your story", session.cartoon_prompt),
        AppView.THUMBNAIL: ("Instructions", session.prompt),
        AppView.TEMPLATES: ("What should the video be about?", session.prompt),
    }.get(view, ("Prompt", session.prompt))
    me.textarea(
        label=label,
        key=str(state.prompt_textarea_key),
        value=value,
        on_blur=on_blur_prompt,
        rows=4,
        style=me.Style(width="100%"),
    )


def _upload_slots(view: AppView, photo_mode: str) -> int:
    if view == AppView.PHOTO:
        return {
            EditMode.GENERATE.value: 0,
            EditMode.COMBINE.value: 2,
        }.get(photo_mode, 1)
    if view in (AppView.VIDEO, AppView.THUMBNAIL):
        return 1
    return 0


def _upload_slot(slot: str, image: UploadedImage | None, label: str):
    with me.box(style=me.Style(display="flex", gap=12, align_items="center")):
        if image:
            me.image(src=image.data_uri, style=me.Style(height=96, border_radius=8))
            me.button("Clear", key=slot, on_click=on_clear_upload, type="stroked")
        else:
            me.uploader(
                label=label,
                key=slot,
                accepted_file_types=["image/jpeg", "image/png", "image/webp"],
                on_upload=on_upload,
                type="flat",
            )


def _template_cards():
    state = me.state(PageState)
    with me.box(style=me.Style(display="grid", grid_template_columns="1fr 1fr", gap=12)):
        for template in VIDEO_TEMPLATES:
            is_selected = template.name == state.session.selected_template
            with me.box(
                key=template.name,
                on_click=on_template_click,
                style=me.Style(
                    cursor="pointer",
                    border_radius=8,
                    padding=me.Padding.all(8),
                    border=me.Border.all(
                        me.BorderSide(
                            width=2,
                            style="solid",
                            color=me.theme_var("primary" if is_selected else "outline-variant"),
                        )
                    ),
                ),
            ):
                me.image(src=template.thumbnail, style=me.Style(width="100%", border_radius=6))
                me.text(template.name, type="subtitle-1")
                me.text(template.description, style=me.Style(font_size=12))


def _prompt_ideas():
    me.text("Need ideas? Try one of these:", type="subtitle-2")
    with me.box(style=me.Style(display="flex", flex_wrap="wrap", gap=8)):
        for idea in PROMPT_IDEAS:
            me.button(idea, key=idea, on_click=on_idea_click, type="stroked", style=CHIP_STYLE)


def _credential_gate():
    state = me.state(PageState)
    with me.box(style=me.Style(display="flex", flex_direction="column", gap=12, align_items="center")):
        me.icon("key")
        me.text("API Key Required", type="headline-6")
        me.text(
            "Video generation needs an API key with access to the video models. "
            "Select a key to continue."
        )
        me.input(
            label="API key",
            type="password",
            value=state.api_key_input,
            on_blur=on_blur_api_key,
            style=me.Style(width="100%"),
        )
        me.button("Select key", on_click=on_click_select_key, type="flat")
        if config.GEMINI_API_KEY:
            me.button("Use configured key", on_click=on_click_use_configured_key, type="stroked")


def _media_display():
    session = me.state(PageState).session
    with me.box(
        style=me.Style(
            min_height=400,
            display="flex",
            flex_direction="column",
            align_items="center",
            justify_content="center",
            gap=12,
            border_radius=12,
            background=me.theme_var("surface-container-lowest"),
            padding=me.Padding.all(16),
        )
    ):
        if session.is_loading:
            me.progress_spinner()
            if session.progress_message:
                me.text(session.progress_message)
        elif session.result_video:
            me.video(src=session.result_video, style=me.Style(width="100%", border_radius=8))
        elif session.result_image:
            me.image(src=session.result_image, style=me.Style(width="100%", border_radius=8))
            dimensions = get_image_dimensions_from_base64(session.result_image)
            if dimensions:
                me.text(f"Resolution: {dimensions[0]}x{dimensions[1]}", style=me.Style(font_size=12))
        else:
            me.text("Your masterpiece will appear here.")


def on_view_click(e: me.ClickEvent):
    state = me.state(PageState)
    log_ui_click(element_id=f"view_{e.key}", page_name=state.session.view, session_id=state.session.session_id)
    switch_view(state.session, e.key)
    state.session.credential_selected = credential_store.has_selected(state.session.session_id)
    state.prompt_textarea_key += 1
    yield


def on_photo_mode_change(e: me.ButtonToggleChangeEvent):
    state = me.state(PageState)
    state.session.photo_mode = e.value
    yield


def on_aspect_ratio_change(e: me.ButtonToggleChangeEvent):
    state = me.state(PageState)
    state.session.aspect_ratio = e.value
    yield


def on_duration_change(e: me.SliderValueChangeEvent):
    state = me.state(PageState)
    state.session.video_duration = int(e.value)
    yield


def _set_active_prompt(session, value: str):
    view = AppView(session.view)
    if view == AppView.VIDEO:
        session.video_prompt = value
    elif view == AppView.CARTOON:
        session.cartoon_prompt = value
    else:
        session.prompt = value


def on_blur_prompt(e: me.InputBlurEvent):
    _set_active_prompt(me.state(PageState).session, e.value)
    yield


def on_blur_thumbnail_title(e: me.InputBlurEvent):
    me.state(PageState).session.thumbnail_title = e.value
    yield


def on_blur_thumbnail_clone_url(e: me.InputBlurEvent):
    me.state(PageState).session.thumbnail_clone_url = e.value
    yield


def on_idea_click(e: me.ClickEvent):
    """Fills the active prompt field with the chosen idea."""
    state = me.state(PageState)
    _set_active_prompt(state.session, e.key)
    state.prompt_textarea_key += 1
    yield


def on_template_click(e: me.ClickEvent):
    state = me.state(PageState)
    state.session.selected_template = e.key
    yield


def on_upload(e: me.UploadEvent):
    """Reads the uploaded file into a data URI for the slot named by the uploader key."""
    state = me.state(PageState)
    state.session.set_upload(
        e.key,
        UploadedImage(
            filename=e.file.name,
            mime_type=e.file.mime_type,
            data_uri=payload_to_data_uri(e.file.getvalue(), e.file.mime_type),
        ),
    )
    yield


def on_clear_upload(e: me.ClickEvent):
    state = me.state(PageState)
    state.session.clear_upload(e.key)
    yield


def on_blur_api_key(e: me.InputBlurEvent):
    me.state(PageState).api_key_input = e.value
    yield


@track_click(element_id="select_api_key_button")
def on_click_select_key(e: me.ClickEvent):  # pylint: disable=unused-argument
    state = me.state(PageState)
    if not select_credential(state.session, state.api_key_input):
        state.session.error_message = "Please enter an API key."
    else:
        state.session.error_message = ""
    # Never keep the key in client-visible state.
    state.api_key_input = ""
    yield


@track_click(element_id="use_configured_key_button")
def on_click_use_configured_key(e: me.ClickEvent):  # pylint: disable=unused-argument
    state = me.state(PageState)
    select_credential(state.session, config.GEMINI_API_KEY)
    state.session.error_message = ""
    yield


@track_click(element_id="generate_button")
def on_click_generate(e: me.ClickEvent):  # pylint: disable=unused-argument
    """Generate request handler."""
    state = me.state(PageState)
    for _ in generation_service.submit(state.session):
        yield


@track_click(element_id="cancel_button")
def on_click_cancel(e: me.ClickEvent):  # pylint: disable=unused-argument
    state = me.state(PageState)
    generation_service.cancel(state.session.session_id)
    yield
