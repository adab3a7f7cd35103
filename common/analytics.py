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
"""Structured usage events for the Gerador de Empenho."""

import functools
import json
import logging
import os
import time
from contextlib import contextmanager

import mesop as me
from google.cloud import logging as cloud_logging

from state.state import AppState


class JsonFormatter(logging.Formatter):
    """One JSON object per record; event fields are merged in."""

    def format(self, record):
        log_object = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "message": record.getMessage(),
            "name": record.name,
        }
        if hasattr(record, "event"):
            log_object.update(record.event)
        if record.exc_info:
            log_object["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_object, ensure_ascii=False)


def get_logger(name: str):
    """Creates and configures a logger."""
    logger = logging.getLogger(name)
    # Prevent duplicate logs in case of multiple calls
    if not logger.handlers:
        logger.setLevel(logging.INFO)

        # Cloud Run sets K_SERVICE; its logging handler parses JSON payloads.
        if os.environ.get("K_SERVICE"):
            handler = cloud_logging.Client().get_default_handler()
        else:
            handler = logging.StreamHandler()
            handler.setFormatter(JsonFormatter())

        logger.addHandler(handler)
    return logger


events_logger = get_logger("empenho.events")


def _current_session() -> tuple[str, str]:
    """Returns (page_name, session_id), or placeholders outside a Mesop context."""
    try:
        state = me.state(AppState)
        return state.current_page, state.session_id
    except Exception:  # pylint: disable=broad-except
        # me.state is unavailable outside a Mesop request (API calls, tests).
        return "unknown", "unknown"


def log_event(event_type: str, message: str, session_id: str = None, **fields):
    """Logs one event tagged with the current page and session."""
    page_name, current_session_id = _current_session()
    event = {
        "event_type": event_type,
        "page_name": page_name,
        "session_id": session_id or current_session_id,
        **fields,
    }
    events_logger.info(message, extra={"event": event})


def log_page_view(page_name: str, session_id: str = None):
    log_event("page_view", f"Page view: {page_name}", session_id=session_id)


def log_upload(mime_type: str, size: int, rejection: str = None):
    """An upload attempt; `rejection` is the validation reason when refused."""
    log_event(
        "upload",
        f"Upload {'rejected' if rejection else 'accepted'}: {mime_type}",
        mime_type=mime_type,
        size_bytes=size,
        accepted=rejection is None,
        rejection=rejection,
    )


def log_export(action: str, text: str):
    """A copy or download of the description."""
    log_event("export", f"Export: {action}", action=action, chars=len(text))


def track_click(element_id: str):
    """Decorator to log a UI click event on an event handler."""
    def decorator(handler_function):
        @functools.wraps(handler_function)
        def wrapper(*args, **kwargs):
            log_event("ui_click", f"UI Click: {element_id}", element_id=element_id)
            return handler_function(*args, **kwargs)
        return wrapper
    return decorator


@contextmanager
def track_model_call(model_name: str, **details):
    """Logs the duration and outcome of a model call; errors are re-raised."""
    start_time = time.time()
    try:
        yield
    except Exception as e:
        _log_model_call(model_name, "failure", start_time, {"error": str(e), **details})
        raise
    _log_model_call(model_name, "success", start_time, details)


def _log_model_call(model_name: str, status: str, start_time: float, details: dict):
    log_event(
        "model_call",
        f"Model Call: {model_name} ({status})",
        model_name=model_name,
        status=status,
        duration_ms=round((time.time() - start_time) * 1000, 2),
        details=details,
    )
