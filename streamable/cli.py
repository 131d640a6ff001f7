#!/usr/bin/env python
"""
Serve a directory over HTTP, with byte-range support:

    streamable-files serve ./Public --port 8080
"""

import os

import click
import uvicorn

from streamable import __version__
from streamable.settings import PUBLIC_DIRECTORY, StaticFilesConfig


@click.group()
@click.version_option(__version__)
def main():
    """Static file server with HTTP range request support"""


@main.command()
@click.argument(
    'public_directory',
    required=False,
    default=PUBLIC_DIRECTORY,
    type=click.Path(exists=True, file_okay=False, resolve_path=True),
)
@click.option('--host', '-h', default='127.0.0.1', help='Host/IP address to bind')
@click.option('--port', '-p', default=int(os.getenv('PORT', '8000')), type=int)
@click.option(
    '--chunk-size',
    default=None,
    type=click.IntRange(min=1),
    help='Number of bytes read from disk per chunk when streaming',
)
@click.option('--log-level', default='info', type=click.Choice(['debug', 'info', 'warning']))
def serve(
    public_directory: str,
    host: str,
    port: int,
    chunk_size: int | None,
    log_level: str,
):
    """Serve PUBLIC_DIRECTORY (default: ./Public)"""
    # pylint: disable=import-outside-toplevel
    from streamable.server import create_app

    config_kwargs: dict = {'public_directory': public_directory}
    if chunk_size:
        config_kwargs['chunk_size'] = chunk_size
    config = StaticFilesConfig(**config_kwargs)

    click.echo(f'Serving files from {config.public_directory} at http://{host}:{port}')
    uvicorn.run(create_app(config), host=host, port=port, log_level=log_level)


if __name__ == '__main__':
    # pylint: disable=no-value-for-parameter
    main()
