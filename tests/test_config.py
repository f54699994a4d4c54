import os
import unittest
from unittest import mock

from vidinfo.backend import config


class EnvIntTests(unittest.TestCase):
    def test_unset_uses_default(self):
        with mock.patch.dict(os.environ, {}, clear=True):
            self.assertEqual(config._env_int("VIDINFO_YTDLP_TIMEOUT_SEC", 60), 60)

    def test_valid_override(self):
        with mock.patch.dict(os.environ, {"VIDINFO_YTDLP_TIMEOUT_SEC": "15"}):
            self.assertEqual(config._env_int("VIDINFO_YTDLP_TIMEOUT_SEC", 60), 15)

    def test_invalid_value_falls_back_with_warning(self):
        with mock.patch.dict(os.environ, {"VIDINFO_YTDLP_TIMEOUT_SEC": "abc"}):
            with self.assertLogs("vidinfo.backend.config", level="WARNING") as logs:
                value = config._env_int("VIDINFO_YTDLP_TIMEOUT_SEC", 60)
        self.assertEqual(value, 60)
        self.assertIn("VIDINFO_YTDLP_TIMEOUT_SEC", logs.output[0])

    def test_zero_and_negative_fall_back_with_warning(self):
        for raw in ("0", "-5"):
            with mock.patch.dict(os.environ, {"VIDINFO_YTDLP_TIMEOUT_SEC": raw}):
                with self.assertLogs("vidinfo.backend.config", level="WARNING"):
                    self.assertEqual(config._env_int("VIDINFO_YTDLP_TIMEOUT_SEC", 60), 60)


class EnvOrDefaultTests(unittest.TestCase):
    def test_override_and_empty(self):
        with mock.patch.dict(os.environ, {"VIDINFO_YTDLP_BINARY": "/opt/bin/yt-dlp"}):
            self.assertEqual(config._env_or_default("VIDINFO_YTDLP_BINARY", "yt-dlp"), "/opt/bin/yt-dlp")
        with mock.patch.dict(os.environ, {"VIDINFO_YTDLP_BINARY": ""}):
            self.assertEqual(config._env_or_default("VIDINFO_YTDLP_BINARY", "yt-dlp"), "yt-dlp")
