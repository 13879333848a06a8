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

import logging
from dataclasses import dataclass

# Dedicated logger for tracking the suppressed error
race_condition_logger = logging.getLogger("creative_studio.race_condition_tracker")

# Provider phrases that mean the API key is invalid, expired or unknown.
CREDENTIAL_ERROR_PHRASES = (
    "API key not valid",
    "Requested entity was not found",
)

CREDENTIAL_ERROR_MESSAGE = (
    "Your API Key appears to be invalid or has expired. "
    "Please select a valid key to continue."
)

INVALID_KEY_MESSAGE = "API key not valid. Please select a new key."


class GenerationError(Exception):
    """Custom exception for generation errors."""

    kind = "GENERATION"

    def __init__(self, message):
        self.message = message
        super().__init__(self.message)


class ValidationError(GenerationError):
    """A required input is missing. Raised before any network call."""

    kind = "VALIDATION"


class CredentialError(GenerationError):
    """The access credential is invalid or has expired."""

    kind = "CREDENTIAL"


class ProviderError(GenerationError):
    """Any other failure reported by the provider, including empty responses."""

    kind = "PROVIDER"


class NoResultError(ProviderError):
    """The operation finished but returned no usable media."""

    kind = "NO_RESULT"


class PollingTimeoutError(GenerationError):
    """The video operation did not finish within the configured timeout."""

    kind = "TIMEOUT"


class GenerationCancelledError(GenerationError):
    """The caller cancelled an in-flight video operation."""

    kind = "CANCELLED"


@dataclass(frozen=True)
class ErrorClassification:
    """User-facing view of a failed generation."""

    is_credential_error: bool
    message: str
    kind: str


def is_credential_message(message: str) -> bool:
    """True if the message contains one of the known credential phrases."""
    return any(phrase in message for phrase in CREDENTIAL_ERROR_PHRASES)


def classify_error(error: Exception) -> ErrorClassification:
    """Maps a raised error to the message and flags shown in the UI."""
    message = getattr(error, "message", None) or str(error)
    if isinstance(error, CredentialError) or is_credential_message(message):
        return ErrorClassification(
            is_credential_error=True,
            message=CREDENTIAL_ERROR_MESSAGE,
            kind=CredentialError.kind,
        )
    if isinstance(error, ValidationError):
        return ErrorClassification(False, message, error.kind)
    kind = error.kind if isinstance(error, GenerationError) else ProviderError.kind
    return ErrorClassification(
        is_credential_error=False,
        message=f"An error occurred: {message}",
        kind=kind,
    )


class UnknownHandlerIdFilter(logging.Filter):
    """A logging filter to suppress 'Unknown handler id' errors."""
    def filter(self, record):
        # Suppress the specific benign error message from Mesop
        if "Unknown handler id" in record.getMessage():
            # Log to a separate, non-disruptive logger for tracking purposes
            race_condition_logger.info("Suppressed 'Unknown handler id' error", extra={"original_record": record.getMessage()})
            return False # Prevent the original logger from processing it
        return True
