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

"""Creative Studio entry point. Run with `mesop main.py`."""

import logging

import mesop as me

from common.analytics import log_page_view
from common.error_handling import UnknownHandlerIdFilter
from config.default import Default
from pages.creative_studio import creative_studio_page_content
from state.creative_state import PageState

config = Default()

logging.basicConfig(level=logging.INFO)
for handler in logging.getLogger().handlers:
    handler.addFilter(UnknownHandlerIdFilter())


def on_load(e: me.LoadEvent):  # pylint: disable=unused-argument
    state = me.state(PageState)
    log_page_view("creative_studio", session_id=state.session.session_id)
    yield


@me.page(path="/", title=config.APP_TITLE, on_load=on_load)
def creative_studio_page():
    creative_studio_page_content()
