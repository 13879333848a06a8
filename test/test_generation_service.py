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


import os
import sys

# Add the project root to the Python path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import threading
import time

import pytest

from common.credentials import CredentialStore
from common.error_handling import CREDENTIAL_ERROR_MESSAGE, CredentialError
from config.creative_modes import AppView, CreativeMode, EditMode
from config.default import Default
from fakes import FakeProvider, done_operation, done_operation_without_locator, pending_operation
from models import veo
from services.generation_service import (
    REQUEST_BUILDERS,
    GenerationService,
    select_credential,
    switch_view,
)
from state.creative_state import CreativeSession, UploadedImage

PNG = UploadedImage(filename="a.png", mime_type="image/png", data_uri="data:image/png;base64,QUFB")

CONFIG = Default(VIDEO_POLL_INTERVAL_SECONDS=0, VIDEO_POLL_TIMEOUT_SECONDS=60)


@pytest.fixture
def store():
    return CredentialStore(default_api_key="default-key")


def _service(provider, store, factory_calls=None):
    def factory(api_key):
        if factory_calls is not None:
            factory_calls.append(api_key)
        return provider

    return GenerationService(config=CONFIG, provider_factory=factory, credentials=store)


def _video_session(store, **fields):
    session = CreativeSession()
    switch_view(session, AppView.VIDEO)
    assert select_credential(session, "user-key", store=store)
    session.video_prompt = "a dog surfing"
    for name, value in fields.items():
        setattr(session, name, value)
    return session


def test_every_mode_has_a_builder():
    assert set(REQUEST_BUILDERS) == set(CreativeMode)


def test_validation_failure_never_reaches_provider(store):
    factory_calls = []
    provider = FakeProvider()
    session = CreativeSession(photo_mode=EditMode.EDIT.value, prompt="add a hat")

    list(_service(provider, store, factory_calls).submit(session))

    assert factory_calls == []
    assert provider.edit_requests == []
    assert session.error_message == "Please upload an image and provide an editing prompt."
    assert not session.credential_error
    assert not session.is_loading


def test_generate_sets_image_result(store):
    provider = FakeProvider()
    session = CreativeSession(prompt="a cat")
    session.result_video = "data:video/mp4;base64,b2xk"
    session.error_message = "old error"

    list(_service(provider, store).submit(session))

    assert session.result_image == provider.image_data_uri
    assert session.result_video == ""
    assert session.error_message == ""
    assert provider.image_requests[0].prompt == "a cat. Style: realistic, 4k, ultra detail."


def test_enhance_uses_the_edit_call(store):
    provider = FakeProvider()
    session = CreativeSession(photo_mode=EditMode.ENHANCE.value, image1=PNG)

    list(_service(provider, store).submit(session))

    assert len(provider.edit_requests) == 1
    assert session.result_image


def test_submission_clears_previous_outcome_before_settling(store):
    provider = FakeProvider(error=RuntimeError("boom"))
    session = CreativeSession(prompt="a cat", result_image="data:image/png;base64,b2xk")
    runner = _service(provider, store).submit(session)

    next(runner)
    assert session.is_loading
    assert session.result_image == ""
    assert session.error_message == ""

    list(runner)
    assert session.error_message == "An error occurred: boom"
    assert session.result_image == ""
    assert not session.is_loading
    assert session.progress_message == ""


def test_video_progress_is_reported_in_order(store):
    provider = FakeProvider(operations=[pending_operation(), pending_operation(), done_operation()])
    session = _video_session(store)

    progress = [session.progress_message for _ in _service(provider, store).submit(session)]

    assert progress == [
        "",
        "Initializing video generation...",
        veo.PROGRESS_SUBMITTING,
        veo.PROGRESS_POLLING,
        veo.PROGRESS_RENDERING,
        veo.PROGRESS_DOWNLOADING,
        "",
    ]
    assert provider.refresh_calls == 2
    assert session.result_video == "data:video/mp4;base64,ZmFrZS1tcDQ="
    assert session.result_image == ""


def test_selected_key_is_used_for_the_call(store):
    factory_calls = []
    provider = FakeProvider(operations=[done_operation()])
    session = _video_session(store)

    list(_service(provider, store, factory_calls).submit(session))

    assert factory_calls == ["user-key"]


def test_template_loading_message_names_the_template(store):
    provider = FakeProvider(operations=[done_operation()])
    session = CreativeSession()
    switch_view(session, AppView.TEMPLATES)
    session.selected_template = "Retro VHS"
    session.prompt = "my grandparents"

    progress = [session.progress_message for _ in _service(provider, store).submit(session)]

    assert "Creating your Retro VHS..." in progress
    assert provider.video_requests[0].aspect_ratio == "16:9"


def test_no_result_surfaces_as_error(store):
    provider = FakeProvider(operations=[done_operation_without_locator()])
    session = _video_session(store)

    list(_service(provider, store).submit(session))

    assert session.error_message == "An error occurred: Video generation failed: no download link provided."
    assert session.result_video == ""
    assert not session.credential_error


def test_credential_error_revokes_selection(store):
    provider = FakeProvider(
        operations=[done_operation()],
        download_error=CredentialError("API key not valid. Please select a new key."),
    )
    session = _video_session(store)

    list(_service(provider, store).submit(session))

    assert session.credential_error
    assert session.error_message == CREDENTIAL_ERROR_MESSAGE
    assert not session.credential_selected
    assert not store.has_selected(session.session_id)


def test_provider_phrase_is_classified_as_credential_error(store):
    provider = FakeProvider(error=Exception("404 NOT_FOUND. Requested entity was not found."))
    session = CreativeSession(prompt="a cat")

    list(_service(provider, store).submit(session))

    assert session.credential_error
    assert session.error_message == CREDENTIAL_ERROR_MESSAGE


def test_second_submission_is_ignored_while_one_is_in_flight(store):
    provider = FakeProvider()
    service = _service(provider, store)
    session = CreativeSession(prompt="a cat")

    first = service.submit(session)
    next(first)
    assert service.is_busy(session.session_id)

    assert list(service.submit(session)) == []
    assert provider.image_requests == []
    assert session.is_loading

    list(first)
    assert len(provider.image_requests) == 1
    assert not service.is_busy(session.session_id)


def test_separate_sessions_run_independently(store):
    provider = FakeProvider()
    service = _service(provider, store)
    first_session = CreativeSession(prompt="a cat")
    second_session = CreativeSession(prompt="a dog")

    first = service.submit(first_session)
    next(first)
    list(service.submit(second_session))
    list(first)

    assert first_session.result_image and second_session.result_image


def test_cancel_stops_a_running_video(store):
    provider = FakeProvider(operations=[pending_operation()])
    service = _service(provider, store)
    session = _video_session(store)
    runner = service.submit(session)

    for _ in runner:
        if session.progress_message == veo.PROGRESS_POLLING:
            assert service.cancel(session.session_id)
            break
    list(runner)

    assert session.error_message == "An error occurred: Video generation was cancelled."
    assert not session.is_loading
    assert not service.cancel(session.session_id)


def test_external_cancel_event_is_honored(store):
    provider = FakeProvider(operations=[pending_operation()])
    cancel_event = threading.Event()
    cancel_event.set()
    session = _video_session(store)

    list(_service(provider, store).submit(session, cancel_event))

    assert "cancelled" in session.error_message
    assert provider.refresh_calls == 0


def test_blank_key_is_not_selected(store):
    session = CreativeSession()
    assert not select_credential(session, "   ", store=store)
    assert not session.credential_selected


def test_cancel_from_another_thread_interrupts_the_poll_wait(store):
    provider = FakeProvider(operations=[pending_operation()])
    config = Default(VIDEO_POLL_INTERVAL_SECONDS=30, VIDEO_POLL_TIMEOUT_SECONDS=600)
    service = GenerationService(config=config, provider_factory=lambda api_key: provider, credentials=store)
    session = _video_session(store)

    worker = threading.Thread(target=lambda: list(service.submit(session)))
    worker.start()
    deadline = time.monotonic() + 5
    while session.progress_message != veo.PROGRESS_POLLING and time.monotonic() < deadline:
        time.sleep(0.01)

    assert service.cancel(session.session_id)
    worker.join(timeout=5)

    assert not worker.is_alive()
    assert session.error_message == "An error occurred: Video generation was cancelled."
    assert provider.refresh_calls == 0


@pytest.mark.parametrize(
    "concurrent_updates, view, expected",
    [
        (True, AppView.VIDEO, True),
        (True, AppView.TEMPLATES, True),
        (True, AppView.PHOTO, False),
        (False, AppView.VIDEO, False),
    ],
)
def test_cancel_is_offered_only_when_clicks_can_reach_the_stream(store, concurrent_updates, view, expected):
    config = Default(CONCURRENT_UPDATES_ENABLED=concurrent_updates)
    service = GenerationService(config=config, provider_factory=lambda api_key: None, credentials=store)
    session = CreativeSession()
    switch_view(session, view)
    session.is_loading = True

    assert service.can_cancel(session) is expected

    session.is_loading = False
    assert not service.can_cancel(session)
