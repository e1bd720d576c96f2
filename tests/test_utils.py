"""Tests for utility functions."""

import pytest

from tunnel_importer.common.utils import (
    file_extension,
    join_and_trim,
    mask_sensitive_data,
    sanitize_log_data,
    split_list,
    strip_extension,
)


class TestListHelpers:
    def test_split_list(self):
        """Test comma separated values are split and trimmed"""
        assert split_list("10.0.0.1/32, fd00::1/128") == ["10.0.0.1/32", "fd00::1/128"]
        assert split_list(" a ,, b ,") == ["a", "b"]
        assert split_list("") == []

    def test_join_and_trim(self):
        """Test values are joined with comma and space"""
        assert join_and_trim(("0.0.0.0/0", "::/0")) == "0.0.0.0/0, ::/0"
        assert join_and_trim([]) == ""


class TestFileNames:
    @pytest.mark.parametrize(
        "name, expected",
        [
            ("home.conf", ".conf"),
            ("dir/home.conf", ".conf"),
            ("dir.d/home", None),
            ("C:\\tunnels\\home.zip", ".zip"),
            ("archive.tar.conf", ".conf"),
            ("home.CONF", ".CONF"),
            ("home", None),
        ],
    )
    def test_file_extension(self, name, expected):
        """Test the extension is taken from the final path component"""
        assert file_extension(name) == expected

    def test_strip_extension(self):
        """Test the extension and directories are removed"""
        assert strip_extension("dir/home.conf") == "home"
        assert strip_extension("home") == "home"
        assert strip_extension(".conf") == ""


class TestMaskSensitiveData:
    """Test sensitive data masking function."""

    def test_mask_normal_string(self):
        """Test masking of normal strings."""
        assert mask_sensitive_data("secret123") == "*****t123"

    def test_mask_short_string(self):
        """Test masking of short strings."""
        assert mask_sensitive_data("abc") == "***"

    def test_mask_empty_and_none(self):
        """Test masking of empty or None values."""
        assert mask_sensitive_data("") == "<None>"
        assert mask_sensitive_data(None) == "<None>"

    def test_custom_mask(self):
        """Test custom mask character and visible length."""
        assert mask_sensitive_data("abcdefgh", mask_char="#", show_chars=2) == "######gh"


class TestSanitizeLogData:
    def test_sanitize_keys(self):
        """Test key material is masked and other values kept"""
        data = {"private_key": "abcdefghijkl", "PresHared_Key": "mnopqrst", "tunnel": "home"}

        sanitized = sanitize_log_data(data)

        assert sanitized["private_key"] == "********ijkl"
        assert sanitized["PresHared_Key"] == "****qrst"
        assert sanitized["tunnel"] == "home"
        assert data["private_key"] == "abcdefghijkl"

    def test_empty_secret(self):
        """Test missing secrets are rendered as <None>"""
        assert sanitize_log_data({"private_key": None}) == {"private_key": "<None>"}
