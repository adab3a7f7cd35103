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

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile
from fastapi.responses import Response

from common.error_handling import GenerationError, ValidationError
from config.default import Default
from models.requests import DescriptionResponse, DownloadRequest
from models.validation import check_upload, validate_upload
from services.description_service import (
    DescriptionGenerator,
    generate_description,
    get_description_generator,
)
from services.session_controller import build_download_artifact

router = APIRouter(prefix="/api/empenho", tags=["empenho"])


@router.get("/health")
def health():
    return {"status": "ok", "model": Default().MODEL_ID}


@router.post("/describe", response_model=DescriptionResponse)
def describe_document(
    file: UploadFile = File(...),
    generator: DescriptionGenerator = Depends(get_description_generator),
):
    """
    Validates an uploaded document and returns its normalized NE description.
    Runs in FastAPI's threadpool since the model call blocks.
    """
    mime_type = file.content_type or ""
    name = file.filename or ""

    try:
        # Reject on the declared size before the body is read into memory.
        if file.size is not None:
            check_upload(file.size, mime_type, name=name)
        content = file.file.read()
        size = file.size if file.size is not None else len(content)
        candidate = validate_upload(content, size, mime_type, name=name)
    except ValidationError as e:
        raise HTTPException(
            status_code=400, detail={"reason": e.reason, "message": e.message}
        )

    try:
        description = generate_description(candidate, generator)
    except GenerationError as e:
        raise HTTPException(status_code=502, detail=e.message)

    return DescriptionResponse(
        description=description,
        file_name=candidate.name,
        mime_type=candidate.mime_type,
    )


@router.post("/download")
def download_description(request: DownloadRequest):
    """Returns the given text as a plain-text attachment."""
    artifact = build_download_artifact(request.text)
    return Response(
        content=artifact.content,
        media_type=f"{artifact.media_type}; charset=utf-8",
        headers={
            "Content-Disposition": f'attachment; filename="{artifact.file_name}"'
        },
    )
