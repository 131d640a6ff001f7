"""
Serves static files from a public directory, with support for
single byte-range requests so media players can seek.

    app = FastAPI()
    app.add_middleware(
        StreamableFileMiddleware,
        config=StaticFilesConfig(public_directory='/srv/Public'),
    )

Requests that don't match a regular file in the public directory are
passed on to the rest of the application untouched.
"""

import os
import stat

from fastapi import Request
from fastapi.responses import StreamingResponse
from starlette.concurrency import run_in_threadpool
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.types import ASGIApp

from streamable.settings import StaticFilesConfig
from streamable.utils.exceptions import (
    Forbidden,
    MalformedRangeHeader,
    RangeNotSatisfiable,
    error_response,
)
from streamable.utils.logger import get_logger
from streamable.utils.path_resolver import resolve_request_path
from streamable.utils.range_request_handler import handle_range_request, iter_file_range

logger = get_logger()


def get_regular_file_size(path: str) -> int | None:
    """
    Size of the file at path, or None if it doesn't exist,
    is a directory (or anything else that isn't a regular file),
    or can't be read
    """
    try:
        st = os.stat(path)
    except (OSError, ValueError):
        return None

    if not stat.S_ISREG(st.st_mode) or not os.access(path, os.R_OK):
        return None

    return st.st_size


class StreamableFileMiddleware(BaseHTTPMiddleware):
    """
    Static file middleware that answers `Range: bytes=start-end`
    requests with 206 Partial Content
    """

    def __init__(self, app: ASGIApp, config: StaticFilesConfig):
        super().__init__(app)
        self.config = config

    @property
    def public_directory(self) -> str:
        """Always ends with a separator"""
        return self.config.public_directory

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint):
        try:
            # scope path is already percent-decoded, request.url would
            # split it again on a decoded "?" or "#"
            file_path = resolve_request_path(
                self.public_directory, request.scope['path']
            )
        except Forbidden as e:
            logger.warning(str(e))
            return error_response(e)

        size = await run_in_threadpool(get_regular_file_size, file_path)
        if size is None:
            # let the rest of the app decide (most likely a 404)
            return await call_next(request)

        range_header = request.headers.get('range')
        if range_header is not None:
            response = self.range_header_response(range_header, file_path, size)
            if response is not None:
                return response

        return self.stream_file(file_path, size)

    def range_header_response(self, range_header: str, file_path: str, size: int):
        """
        Build the 206 response for the requested range, an error response
        if the range is malformed or unsatisfiable, or None if the header
        doesn't apply and the whole file should be served instead
        """
        try:
            result = handle_range_request(
                range_header, file_path, size, self.config.chunk_size
            )
        except MalformedRangeHeader as e:
            logger.warning(f'{self.relative_path(file_path)}: {e}')
            return error_response(e)
        except RangeNotSatisfiable as e:
            logger.warning(f'{self.relative_path(file_path)}: {e}')
            return error_response(e, headers={'Content-Range': f'bytes */{size}'})

        if result is None:
            return None

        byte_range, body = result
        logger.debug(f'Serving {byte_range.content_range} of {file_path}')
        return StreamingResponse(
            body,
            status_code=206,
            headers={
                'Content-Length': str(byte_range.length),
                'Content-Range': byte_range.content_range,
                'Accept-Ranges': 'bytes',
            },
        )

    def stream_file(self, file_path: str, size: int):
        """Stream the whole file"""
        return StreamingResponse(
            iter_file_range(file_path, 0, size, self.config.chunk_size),
            status_code=200,
            headers={'Content-Length': str(size), 'Accept-Ranges': 'bytes'},
        )

    def relative_path(self, file_path: str) -> str:
        """Path of the file relative to the public directory, for logging"""
        return '/' + file_path[len(self.public_directory) :]
