"""Tests for environment variable expansion utilities."""

import os
from unittest.mock import patch

from instancespec.config.utils.env_expansion import expand_config_env_vars, expand_env_vars


class TestEnvironmentVariableExpansion:
    """Test environment variable expansion functionality."""

    def test_expand_simple_env_var(self):
        """Test expansion of simple environment variable."""
        with patch.dict(os.environ, {"TEST_VAR": "/test/path"}):
            assert expand_env_vars("$TEST_VAR") == "/test/path"

    def test_expand_braced_env_var_with_subpath(self):
        """Test expansion of braced environment variable with subpath."""
        with patch.dict(os.environ, {"TEST_VAR": "/test/path"}):
            assert expand_env_vars("${TEST_VAR}/subdir") == "/test/path/subdir"

    def test_expand_nonexistent_env_var(self):
        """Test expansion of non-existent environment variable."""
        with patch.dict(os.environ, {}, clear=True):
            assert expand_env_vars("$NONEXISTENT_VAR") == "$NONEXISTENT_VAR"

    def test_default_used_when_unset(self):
        with patch.dict(os.environ, {}, clear=True):
            assert expand_env_vars("${LOG_DIR:/var/log}/app.log") == "/var/log/app.log"

    def test_default_ignored_when_set(self):
        with patch.dict(os.environ, {"LOG_DIR": "/tmp"}):
            assert expand_env_vars("${LOG_DIR:/var/log}/app.log") == "/tmp/app.log"

    def test_empty_default(self):
        with patch.dict(os.environ, {}, clear=True):
            assert expand_env_vars("${UNSET_VAR:}") == ""

    def test_expand_nested_values(self):
        """Test expansion inside nested dictionaries and lists."""
        with patch.dict(os.environ, {"TEST_VAR": "/test/path"}):
            config = {
                "logging": {"file_path": "$TEST_VAR/app.log"},
                "list": ["$TEST_VAR/a", "plain"],
                "other": "value",
            }
            assert expand_config_env_vars(config) == {
                "logging": {"file_path": "/test/path/app.log"},
                "list": ["/test/path/a", "plain"],
                "other": "value",
            }

    def test_expand_non_string_values(self):
        """Test that non-string values are returned unchanged."""
        config = {"number": 42, "boolean": True, "none": None}
        assert expand_env_vars(config) == config
