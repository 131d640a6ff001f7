import logging
import os

from pydantic import ConfigDict, field_validator
from pydantic.main import BaseModel

TRUTH_SET = ('1', 'y', 't', 'true')

levels_map = {'DEBUG': logging.DEBUG, 'INFO': logging.INFO, 'WARNING': logging.WARNING}

LOGGING_LEVEL = levels_map[os.getenv('SF_LOGGING_LEVEL', 'INFO').upper()]
USE_GCP_LOGGING = os.getenv('SF_ENABLE_GCP_LOGGING', '0').lower() in TRUTH_SET
LOGGER_NAME = 'streamable-files'

SF_ENVIRONMENT = os.getenv('SF_ENVIRONMENT', 'local').lower()

# mirrors the conventional "<working directory>/Public/" layout
PUBLIC_DIRECTORY = os.getenv(
    'SF_PUBLIC_DIRECTORY', os.path.join(os.getcwd(), 'Public') + os.sep
)
CHUNK_SIZE = int(os.getenv('SF_CHUNK_SIZE', str(64 * 1024)))


class StaticFilesConfig(BaseModel):
    """
    Configuration for the StreamableFileMiddleware, constructed once
    by whatever composes the server and never mutated afterwards.
    """

    model_config = ConfigDict(frozen=True, extra='forbid')

    public_directory: str
    chunk_size: int = CHUNK_SIZE

    @field_validator('public_directory')
    @classmethod
    def normalise_public_directory(cls, value: str) -> str:
        """Make the directory absolute, and always end with a separator"""
        if not value:
            raise ValueError('public_directory must not be empty')
        value = os.path.abspath(os.path.expanduser(value))
        return value if value.endswith(os.sep) else value + os.sep

    @field_validator('chunk_size')
    @classmethod
    def validate_chunk_size(cls, value: int) -> int:
        """Chunks must be at least one byte"""
        if value <= 0:
            raise ValueError(f'chunk_size must be positive, got {value}')
        return value

    @classmethod
    def from_settings(cls):
        """Build the config from the environment"""
        return cls(public_directory=PUBLIC_DIRECTORY, chunk_size=CHUNK_SIZE)
