"""Tests for Library Desk configuration.

These tests cover:
1. Default values
2. Environment variable loading
3. Validation of names, versions and log levels
"""

import pytest
from pydantic import ValidationError

from library_desk.config import LibraryConfig


@pytest.mark.usefixtures("clean_env")
class TestLibraryConfig:
    def test_default_configuration(self):
        config = LibraryConfig()

        assert config.library_name == "Central Library"
        assert config.seed_sample_data is True
        assert config.server_name == "library-desk"
        assert config.server_version == "0.1.0"
        assert config.transport == "stdio"
        assert config.debug is False
        assert config.log_level == "INFO"
        assert config.is_development is False

    def test_environment_variable_loading(self, monkeypatch):
        monkeypatch.setenv("LIBRARY_DESK_LIBRARY_NAME", "Branch Library")
        monkeypatch.setenv("LIBRARY_DESK_SEED_SAMPLE_DATA", "false")
        monkeypatch.setenv("LIBRARY_DESK_DEBUG", "true")
        monkeypatch.setenv("LIBRARY_DESK_LOG_LEVEL", "warning")

        config = LibraryConfig()

        assert config.library_name == "Branch Library"
        assert config.seed_sample_data is False
        assert config.debug is True
        assert config.log_level == "WARNING"
        assert config.effective_log_level == "DEBUG"
        assert config.is_development is True

    def test_env_file_loading(self, tmp_path):
        (tmp_path / ".env").write_text("LIBRARY_DESK_LIBRARY_NAME=Dotenv Library\n")
        assert LibraryConfig().library_name == "Dotenv Library"

    def test_keyword_arguments_override_environment(self, monkeypatch):
        monkeypatch.setenv("LIBRARY_DESK_LIBRARY_NAME", "From Env")
        assert LibraryConfig(library_name="From Code").library_name == "From Code"

    @pytest.mark.parametrize("name", ["Library_Desk", "library desk", "ab", "x" * 51])
    def test_invalid_server_names(self, name):
        with pytest.raises(ValidationError):
            LibraryConfig(server_name=name)

    def test_invalid_version(self):
        with pytest.raises(ValidationError):
            LibraryConfig(server_version="one")

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            LibraryConfig(log_level="TRACE")

    def test_blank_library_name(self):
        with pytest.raises(ValidationError):
            LibraryConfig(library_name="   ")

    def test_unsupported_transport(self):
        with pytest.raises(ValidationError):
            LibraryConfig(transport="sse")

    def test_server_info(self):
        config = LibraryConfig(server_name="branch-desk", server_version="1.2.3")
        assert config.server_info == {
            "name": "branch-desk",
            "version": "1.2.3",
            "transport": "stdio",
        }
