import re
from typing import Iterator, NamedTuple

from streamable.utils.exceptions import MalformedRangeHeader, RangeNotSatisfiable

RANGE_UNIT_PREFIX = 'bytes='
# offsets longer than this are not file offsets, and would be slow to int()
MAX_OFFSET_DIGITS = 64
RE_BYTE_RANGE = re.compile(
    rf'^(\d{{0,{MAX_OFFSET_DIGITS}}})-(\d{{0,{MAX_OFFSET_DIGITS}}})$', re.ASCII
)


class ByteRange(NamedTuple):
    """Inclusive byte offsets, as written in the range header"""

    start: int | None
    end: int | None


class ResolvedByteRange(NamedTuple):
    """Inclusive byte offsets, resolved against a file of `size` bytes"""

    start: int
    end: int
    size: int

    @property
    def length(self) -> int:
        """Number of bytes within the range"""
        return self.end - self.start + 1

    @property
    def content_range(self) -> str:
        """Value for the Content-Range response header"""
        return f'bytes {self.start}-{self.end}/{self.size}'


def parse_range_header(range_header: str | None) -> ByteRange | None:
    """
    Parse a HTTP range request header into a tuple of start and end byte offsets.

    Returns None when the header isn't applicable (missing, a unit other
    than bytes, or a multi-range request), and raises MalformedRangeHeader
    when it uses the bytes unit but can't be understood.
    """
    if range_header is None:
        return None
    if not range_header.startswith(RANGE_UNIT_PREFIX):
        return None

    spec = range_header[len(RANGE_UNIT_PREFIX) :]
    if ',' in spec:
        # multiple ranges are not supported, serve the whole file instead
        return None

    match = RE_BYTE_RANGE.match(spec.strip())
    if not match:
        raise MalformedRangeHeader(range_header)

    start, end = match.groups()
    if start == '' and end == '':
        raise MalformedRangeHeader(range_header)

    return ByteRange(
        int(start) if start != '' else None,
        int(end) if end != '' else None,
    )


# @see https://developer.mozilla.org/en-US/docs/Web/HTTP/Headers/Range
def resolve_byte_range(byte_range: ByteRange, size: int) -> ResolvedByteRange:
    """
    Resolve the (possibly open-ended, or suffix) range against the
    size of the file, raising RangeNotSatisfiable if it doesn't fit.
    """
    start, end = byte_range

    if start is None:
        # suffix range, eg: bytes=-500 is the last 500 bytes
        if end is None or end == 0 or size == 0:
            raise RangeNotSatisfiable(start, end, size)
        return ResolvedByteRange(max(0, size - end), size - 1, size)

    if end is None:
        end = size - 1

    if end - start + 1 <= 0 or start > size - 1 or end > size - 1:
        raise RangeNotSatisfiable(start, end, size)

    return ResolvedByteRange(start, end, size)


def iter_file_range(
    path: str, start: int, length: int, chunk_size: int
) -> Iterator[bytes]:
    """
    Yield `length` bytes of the file at path, starting at `start`.
    The file is only held open while the generator is being consumed.
    """
    with open(path, 'rb') as f:
        f.seek(start)
        remaining = length
        while remaining > 0:
            chunk = f.read(min(chunk_size, remaining))
            if not chunk:
                # file was truncated underneath us, and Content-Length is
                # already sent, so abort rather than end the body early
                raise OSError(
                    f'{path} ended {remaining} bytes before the expected '
                    f'{start + length}'
                )
            remaining -= len(chunk)
            yield chunk


def handle_range_request(
    range_header: str | None, path: str, size: int, chunk_size: int
) -> tuple[ResolvedByteRange, Iterator[bytes]] | None:
    """
    Take a range header string and a file, and return the resolved
    range with an iterator over the requested bytes, or None if the
    header does not apply
    """
    byte_range = parse_range_header(range_header)
    if byte_range is None:
        return None

    resolved = resolve_byte_range(byte_range, size)
    return resolved, iter_file_range(path, resolved.start, resolved.length, chunk_size)
