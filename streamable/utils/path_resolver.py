from streamable.utils.exceptions import Forbidden


def resolve_request_path(public_directory: str, request_path: str) -> str:
    """
    Turn the (untrusted) path of a request into a file path inside
    public_directory, which must already end with a separator.
    Existence of the file is NOT checked here.
    """
    # path must be relative
    path = request_path.lstrip('/')

    # protect against relative paths
    if '../' in path or path == '..' or path.endswith('/..'):
        raise Forbidden(f'Path {request_path!r} is outside the public directory')
    if '\x00' in path:
        raise Forbidden(f'Path {request_path!r} contains a null byte')

    return public_directory + path
