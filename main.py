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
"""Gerador de Empenho: FastAPI app with the Mesop UI mounted at the root."""

import logging
import os

import mesop as me
from fastapi import FastAPI
from fastapi.middleware.wsgi import WSGIMiddleware

from common.error_handling import UnknownHandlerIdFilter
from routers.empenho_router import router as empenho_router

import pages.empenho  # noqa: F401  # registers the Mesop page

logging.basicConfig(level=logging.INFO)
logging.getLogger().addFilter(UnknownHandlerIdFilter())
logging.getLogger("mesop").addFilter(UnknownHandlerIdFilter())

app = FastAPI(title="Gerador de Empenho")
app.include_router(empenho_router)

app.mount(
    "/",
    WSGIMiddleware(
        me.create_wsgi_app(debug_mode=os.environ.get("DEBUG_MODE", "") == "true")
    ),
)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=int(os.environ.get("PORT", "8080")),
        reload=os.environ.get("DEBUG_MODE", "") == "true",
    )
