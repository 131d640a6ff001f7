import unittest

from streamable.utils.exceptions import Forbidden
from streamable.utils.path_resolver import resolve_request_path

PUBLIC = '/srv/Public/'


class TestResolveRequestPath(unittest.TestCase):
    """Test turning request paths into file paths"""

    def test_relative_to_public_directory(self):
        """Leading slashes are stripped, and the path appended"""
        self.assertEqual(
            '/srv/Public/video.mp4', resolve_request_path(PUBLIC, '/video.mp4')
        )
        self.assertEqual(
            '/srv/Public/a/b/c.txt', resolve_request_path(PUBLIC, '///a/b/c.txt')
        )
        self.assertEqual('/srv/Public/', resolve_request_path(PUBLIC, '/'))
        self.assertEqual('/srv/Public/', resolve_request_path(PUBLIC, ''))

    def test_dots_in_names_are_allowed(self):
        """Only parent directory segments are rejected"""
        self.assertEqual(
            '/srv/Public/v1..2/file..txt',
            resolve_request_path(PUBLIC, '/v1..2/file..txt'),
        )
        self.assertEqual('/srv/Public/./a', resolve_request_path(PUBLIC, '/./a'))

    def test_traversal_is_forbidden(self):
        """Any parent directory segment is rejected"""
        for path in (
            '/../secret.txt',
            '../secret.txt',
            '/a/../../secret.txt',
            '/a/b/../c',
            '/..',
            '/a/..',
            '//../etc/passwd',
        ):
            with self.subTest(path=path):
                with self.assertRaises(Forbidden):
                    resolve_request_path(PUBLIC, path)

    def test_null_byte_is_forbidden(self):
        """Null bytes can't be passed on to the filesystem"""
        with self.assertRaises(Forbidden):
            resolve_request_path(PUBLIC, '/video.mp4\x00.txt')
