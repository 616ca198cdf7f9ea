"""
Tests for the server entry point's command-line handling.
"""

import os
from unittest.mock import patch

import pytest

from chuk_mcp_chords.server import (
    ENV_DATASET,
    ENV_OUTPUT_DIR,
    ENV_THEORY_DIR,
    apply_settings,
    build_parser,
)


@pytest.fixture
def env():
    """An emptied os.environ, restored after the test."""
    with patch.dict(os.environ, {}, clear=True):
        yield os.environ


class TestParser:
    """Tests for argument parsing."""

    def test_defaults(self):
        """stdio on port 8000, nothing overridden."""
        args = build_parser().parse_args([])
        assert args.transport == "stdio"
        assert args.port == 8000
        assert args.dataset is None
        assert args.theory_dir is None
        assert not args.debug

    def test_http_with_dataset(self):
        """Transport, port and dataset options."""
        args = build_parser().parse_args(
            ["--transport", "http", "--port", "9000", "--dataset", "jazz"]
        )
        assert args.transport == "http"
        assert args.port == 9000
        assert args.dataset == "jazz"

    def test_bad_transport(self):
        """Unknown transports are rejected."""
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--transport", "carrier-pigeon"])


class TestApplySettings:
    """Command-line choices are exported to the environment."""

    def test_given_options_exported(self, env):
        """Every option given lands in its variable."""
        args = build_parser().parse_args(
            ["--dataset", "jazz", "--theory-dir", "/srv/theory", "--output-dir", "/srv/out"]
        )
        apply_settings(args)
        assert env[ENV_DATASET] == "jazz"
        assert env[ENV_THEORY_DIR] == "/srv/theory"
        assert env[ENV_OUTPUT_DIR] == "/srv/out"

    def test_missing_options_leave_environment(self, env):
        """Options not given don't clobber existing variables."""
        env[ENV_DATASET] = "folk"
        apply_settings(build_parser().parse_args([]))
        assert env[ENV_DATASET] == "folk"
        assert ENV_THEORY_DIR not in env
