from importlib import metadata

try:
    __version__ = metadata.version('streamable-files')
except metadata.PackageNotFoundError:
    __version__ = '1.0.0'
