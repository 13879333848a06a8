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

"""Serializes submissions and folds their outcome into the session."""

import threading

from common.analytics import get_logger
from common.credentials import CredentialStore, credential_store
from common.error_handling import classify_error
from config.creative_modes import AppView, CreativeMode, get_view_config
from config.default import Default
from models import request_builders
from models.provider import GenAIProvider
from models.requests import ImageEditRequest, ImageGenerationRequest, VideoGenerationRequest
from models.veo import VideoOperationPoller
from state.creative_state import CreativeSession

logger = get_logger(__name__)

# Maps each mode to the builder producing its provider request.
REQUEST_BUILDERS = {
    CreativeMode.GENERATE: request_builders.build_generate_request,
    CreativeMode.EDIT: lambda request, config: request_builders.build_edit_request(
        request.prompt, request.image, config
    ),
    CreativeMode.ENHANCE: request_builders.build_enhance_request,
    CreativeMode.COMBINE: request_builders.build_combine_request,
    CreativeMode.THUMBNAIL: request_builders.build_thumbnail_request,
    CreativeMode.VIDEO: request_builders.build_video_request,
    CreativeMode.CARTOON: request_builders.build_cartoon_request,
    CreativeMode.TEMPLATE: request_builders.build_template_request,
}

LOADING_MESSAGES = {
    CreativeMode.GENERATE: "Generating your vision...",
    CreativeMode.EDIT: "Applying AI edits...",
    CreativeMode.ENHANCE: "Enhancing to 4K resolution...",
    CreativeMode.COMBINE: "Combining images...",
    CreativeMode.THUMBNAIL: "Creating your viral thumbnail...",
    CreativeMode.VIDEO: "Initializing video generation...",
    CreativeMode.CARTOON: "Directing your cartoon episode...",
    CreativeMode.TEMPLATE: "Creating your {template_name}...",
}


def loading_message(request) -> str:
    message = LOADING_MESSAGES[request.mode]
    if request.mode == CreativeMode.TEMPLATE:
        return message.format(template_name=request.template_name)
    return message


def switch_view(session: CreativeSession, view: AppView | str):
    """Moves to another top-level view, discarding the previous view's inputs."""
    session.reset_for_view(view)
    logger.info(f"Switched view to {session.view}")


def select_credential(session: CreativeSession, api_key: str, store: CredentialStore = credential_store) -> bool:
    """Stores the key chosen at the credential gate and opens the gate."""
    if not store.select(session.session_id, api_key):
        return False
    session.credential_selected = True
    session.credential_error = False
    return True


def _forward_progress(session: CreativeSession, runner):
    """Copies each progress message into the session and returns the runner's value."""
    while True:
        try:
            message = next(runner)
        except StopIteration as done:
            return done.value
        session.progress_message = message
        yield


class GenerationService:
    """Runs at most one generation per session at a time.

    ``submit`` is a generator: each yield marks a point where the UI should
    re-render the session.
    """

    def __init__(self, config: Default | None = None, provider_factory=None, credentials: CredentialStore = credential_store):
        self.config = config or Default()
        self._credentials = credentials
        self._provider_factory = provider_factory or (
            lambda api_key: GenAIProvider(api_key, config=self.config)
        )
        self._lock = threading.Lock()
        self._in_flight: dict[str, threading.Event] = {}

    def is_busy(self, session_id: str) -> bool:
        with self._lock:
            return session_id in self._in_flight

    def can_cancel(self, session: CreativeSession) -> bool:
        """True when a Cancel click can reach the session's running video generation."""
        return (
            self.config.CONCURRENT_UPDATES_ENABLED
            and session.is_loading
            and get_view_config(session.view).produces_video
        )

    def cancel(self, session_id: str) -> bool:
        """Signals the session's running video generation to stop at its next poll."""
        with self._lock:
            cancel_event = self._in_flight.get(session_id)
        if cancel_event is None:
            return False
        cancel_event.set()
        logger.info(f"Cancellation requested for session {session_id}")
        return True

    def submit(self, session: CreativeSession, cancel_event: threading.Event | None = None):
        with self._lock:
            if session.session_id in self._in_flight:
                logger.warning(
                    f"Ignoring submission for session {session.session_id}: a generation is already running"
                )
                return
            cancel_event = cancel_event or threading.Event()
            self._in_flight[session.session_id] = cancel_event

        try:
            session.clear_outcome()
            session.is_loading = True
            session.progress_message = ""
            yield

            request = request_builders.validate_session(session)
            logger.info(f"Submitting {request.mode.value} for session {session.session_id}")
            session.progress_message = loading_message(request)
            yield

            provider_request = REQUEST_BUILDERS[request.mode](request, self.config)
            provider = self._provider_factory(self._credentials.get(session.session_id))

            if isinstance(provider_request, ImageGenerationRequest):
                session.set_result_image(provider.generate_image(provider_request))
            elif isinstance(provider_request, ImageEditRequest):
                session.set_result_image(provider.edit_image(provider_request))
            elif isinstance(provider_request, VideoGenerationRequest):
                poller = VideoOperationPoller(
                    provider,
                    poll_interval=self.config.VIDEO_POLL_INTERVAL_SECONDS,
                    timeout=self.config.VIDEO_POLL_TIMEOUT_SECONDS,
                )
                result = yield from _forward_progress(
                    session, poller.run(provider_request, cancel_event)
                )
                session.set_result_video(result.data_uri)
            else:
                raise TypeError(f"Unsupported provider request: {type(provider_request).__name__}")
            logger.info(f"Generation for session {session.session_id} succeeded")

        except Exception as e:
            classification = classify_error(e)
            logger.error(
                f"Generation for session {session.session_id} failed ({classification.kind}): {e}"
            )
            session.set_error(classification.message, classification.is_credential_error)
            if classification.is_credential_error:
                self._credentials.revoke(session.session_id)
        finally:
            session.is_loading = False
            session.progress_message = ""
            with self._lock:
                self._in_flight.pop(session.session_id, None)
        yield


generation_service = GenerationService()
