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
"""Session state for the description workflow."""

from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from models.requests import UploadCandidate


class Idle(BaseModel):
    model_config = ConfigDict(frozen=True)
    kind: Literal["idle"] = "idle"


class Processing(BaseModel):
    model_config = ConfigDict(frozen=True)
    kind: Literal["processing"] = "processing"


class Success(BaseModel):
    model_config = ConfigDict(frozen=True)
    kind: Literal["success"] = "success"
    text: str


class Error(BaseModel):
    model_config = ConfigDict(frozen=True)
    kind: Literal["error"] = "error"
    message: str


Status = Annotated[Union[Idle, Processing, Success, Error], Field(discriminator="kind")]


class SessionState(BaseModel):
    """
    The single active session: one status variant plus the current candidate.
    A result only exists inside Success and an error only inside Error, so
    combinations like "success without text" cannot be built.
    """

    status: Status = Field(default_factory=Idle)
    candidate: Optional[UploadCandidate] = None
    # Validation message shown next to the uploader; does not change status.
    notice: Optional[str] = None
    # Result textarea accepts input only while this is set.
    edit_mode: bool = False

    @property
    def result_text(self) -> str:
        return self.status.text if isinstance(self.status, Success) else ""

    @property
    def error_message(self) -> Optional[str]:
        if isinstance(self.status, Error):
            return self.status.message
        return self.notice

    @property
    def is_processing(self) -> bool:
        return isinstance(self.status, Processing)

    @property
    def is_success(self) -> bool:
        return isinstance(self.status, Success)
