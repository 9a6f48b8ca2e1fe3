import os
import pytest
from pattern_demos import config
from pattern_demos.config import get_timeout, load_env_file, DEFAULT_TIMEOUT_SECONDS
from pattern_demos.exceptions import ConfigurationError


class TestGetTimeout:
    def test_default(self, monkeypatch):
        monkeypatch.delenv("PATTERN_DEMOS_TIMEOUT", raising=False)
        assert get_timeout() == DEFAULT_TIMEOUT_SECONDS

    def test_numeric(self, monkeypatch):
        monkeypatch.setenv("PATTERN_DEMOS_TIMEOUT", "2.5")
        assert get_timeout() == 2.5

    @pytest.mark.parametrize("value", ["0", "-1"])
    def test_disabled(self, monkeypatch, value):
        monkeypatch.setenv("PATTERN_DEMOS_TIMEOUT", value)
        assert get_timeout() is None

    def test_invalid(self, monkeypatch):
        monkeypatch.setenv("PATTERN_DEMOS_TIMEOUT", "later")
        with pytest.raises(ConfigurationError):
            get_timeout()


class TestLoadEnvFile:
    def test_loads_missing_keys_only(self, tmp_path, monkeypatch):
        env_file = tmp_path / ".env"
        env_file.write_text(
            "# comment\nPATTERN_DEMOS_TEST_NEW=from-file\nPATTERN_DEMOS_TEST_SET=from-file\n"
        )
        monkeypatch.delenv("PATTERN_DEMOS_TEST_NEW", raising=False)
        monkeypatch.setenv("PATTERN_DEMOS_TEST_SET", "from-env")

        load_env_file(env_file)

        assert os.environ["PATTERN_DEMOS_TEST_NEW"] == "from-file"
        assert os.environ["PATTERN_DEMOS_TEST_SET"] == "from-env"
        monkeypatch.delenv("PATTERN_DEMOS_TEST_NEW")

    def test_missing_file_is_ignored(self, tmp_path):
        load_env_file(tmp_path / "absent.env")
