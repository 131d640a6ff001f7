import os
import time
import traceback

from fastapi import APIRouter, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from streamable import __version__
from streamable.middleware import StreamableFileMiddleware
from streamable.settings import SF_ENVIRONMENT, StaticFilesConfig
from streamable.utils.exceptions import error_response
from streamable.utils.logger import get_logger

logger = get_logger()

router = APIRouter(prefix='/api/v1', tags=['health'])


@router.get('/health', operation_id='getHealth')
async def health():
    """Used by load balancers to check the server is up"""
    return {'status': 'ok', 'version': __version__}


def create_app(config: StaticFilesConfig | None = None) -> FastAPI:
    """
    Build the application, serving static files from the public
    directory in `config` (or the one configured in the environment)
    """
    if config is None:
        config = StaticFilesConfig.from_settings()

    if not os.path.isdir(config.public_directory):
        logger.warning(
            f'Public directory {config.public_directory} does not exist, '
            'all requests will fall through to the api'
        )

    app = FastAPI(version=__version__)

    app.add_middleware(StreamableFileMiddleware, config=config)

    @app.middleware('http')
    async def add_process_time_header(request: Request, call_next):
        """Add X-Process-Time to all requests for logging"""
        start_time = time.time()
        response = await call_next(request)
        process_time = time.time() - start_time
        response.headers['X-Process-Time'] = f'{round(process_time * 1000, 1)}ms'
        return response

    if SF_ENVIRONMENT == 'local':
        app.add_middleware(
            CORSMiddleware,
            allow_origins=['*'],
            allow_methods=['*'],
            allow_headers=['*'],
            expose_headers=['Content-Range', 'Accept-Ranges', 'Content-Length'],
        )

    @app.exception_handler(Exception)
    async def exception_handler(request: Request, e: Exception):
        """Generic exception handler, for errors raised by the api"""
        logger.error(
            f'{request.method} {request.url.path} failed: {type(e).__name__}'
        )
        return error_response(e, stacktrace=traceback.format_exc())

    app.include_router(router)

    return app


app = create_app()


if __name__ == '__main__':
    import logging

    import uvicorn

    logging.getLogger('watchfiles').setLevel(logging.WARNING)
    logging.getLogger('watchfiles.main').setLevel(logging.WARNING)

    uvicorn.run(
        'streamable.server:app',
        host='0.0.0.0',
        port=int(os.getenv('PORT', '8000')),
        reload=True,
    )
