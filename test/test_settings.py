import os
import unittest

from pydantic import ValidationError

from streamable.settings import CHUNK_SIZE, PUBLIC_DIRECTORY, StaticFilesConfig


class TestStaticFilesConfig(unittest.TestCase):
    """Test the middleware configuration"""

    def test_public_directory_ends_with_separator(self):
        """The public directory is always normalised to end with a separator"""
        self.assertEqual(
            '/srv/Public/', StaticFilesConfig(public_directory='/srv/Public').public_directory
        )
        self.assertEqual(
            '/srv/Public/',
            StaticFilesConfig(public_directory='/srv/Public/').public_directory,
        )

    def test_relative_public_directory(self):
        """Relative directories are made absolute"""
        config = StaticFilesConfig(public_directory='Public')
        self.assertEqual(os.path.join(os.getcwd(), 'Public') + os.sep, config.public_directory)

    def test_invalid(self):
        """Empty directories and non-positive chunk sizes are rejected"""
        with self.assertRaises(ValidationError):
            StaticFilesConfig(public_directory='')
        with self.assertRaises(ValidationError):
            StaticFilesConfig(public_directory='/srv', chunk_size=0)
        with self.assertRaises(ValidationError):
            StaticFilesConfig(public_directory='/srv', not_a_field=True)

    def test_frozen(self):
        """Config can't be changed after construction"""
        config = StaticFilesConfig(public_directory='/srv/Public')
        with self.assertRaises(ValidationError):
            config.public_directory = '/'  # type: ignore[misc]

    def test_from_settings(self):
        """Defaults come from the environment"""
        config = StaticFilesConfig.from_settings()
        self.assertEqual(CHUNK_SIZE, config.chunk_size)
        self.assertTrue(config.public_directory.endswith(os.sep))
        self.assertEqual(
            os.path.abspath(PUBLIC_DIRECTORY) + os.sep, config.public_directory
        )
