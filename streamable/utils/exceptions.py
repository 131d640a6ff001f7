from fastapi.responses import JSONResponse


class Forbidden(Exception):
    """Forbidden action"""


class MalformedRangeHeader(ValueError):
    """Range header uses the bytes unit, but can't be parsed"""

    def __init__(self, range_header: str, *args: object) -> None:
        super().__init__(f'Malformed range header: {range_header[:100]!r}', *args)


class RangeNotSatisfiable(Exception):
    """The requested byte range does not fit within the file"""

    def __init__(self, start: int | None, end: int | None, size: int, *args):
        self.start = start
        self.end = end
        self.size = size
        start_str = '' if start is None else str(start)
        end_str = '' if end is None else str(end)
        super().__init__(
            f'Range {start_str}-{end_str} is not satisfiable for a file '
            f'of {size} bytes',
            *args,
        )


def determine_code_from_error(e):
    """From error / exception, determine appropriate http code"""
    if isinstance(e, RangeNotSatisfiable):
        return 416
    if isinstance(e, ValueError):
        # HTTP Bad Request
        return 400
    if isinstance(e, Forbidden):
        return 403

    return 500


def error_response(
    e: Exception,
    headers: dict[str, str] | None = None,
    stacktrace: str | None = None,
):
    """Prepare the json response for an exception"""
    content = {'name': str(type(e).__name__), 'description': str(e)}
    if stacktrace:
        content['stacktrace'] = stacktrace

    return JSONResponse(
        status_code=determine_code_from_error(e),
        content=content,
        headers=headers,
    )
