"""Tests for security utilities."""

from pathlib import Path

import pytest

from sectioncount.security import (
    UnsafePathError,
    is_sensitive_filename,
    resolve_input_path,
    validate_path_traversal,
)


class TestSensitiveFilename:
    def test_env_files(self):
        assert is_sensitive_filename(".env") is True
        assert is_sensitive_filename(".env.local") is True

    def test_credential_files(self):
        assert is_sensitive_filename("credentials.json") is True
        assert is_sensitive_filename("secrets.yaml") is True

    def test_key_files(self):
        assert is_sensitive_filename("server.pem") is True
        assert is_sensitive_filename("private.key") is True
        assert is_sensitive_filename("id_rsa") is True
        assert is_sensitive_filename("id_ed25519.pub") is True

    def test_normal_files_pass(self):
        assert is_sensitive_filename("sections.txt") is False
        assert is_sensitive_filename("docs/notes.txt") is False

    def test_case_insensitive(self):
        assert is_sensitive_filename(".ENV") is True
        assert is_sensitive_filename("CREDENTIALS.JSON") is True


class TestValidatePathTraversal:
    def test_inside(self, tmp_path):
        assert validate_path_traversal(tmp_path / "a" / "b.txt", tmp_path) is True

    def test_outside(self, tmp_path):
        assert validate_path_traversal(tmp_path.parent / "x.txt", tmp_path) is False


class TestResolveInputPath:
    def test_no_base_dir(self, tmp_path, monkeypatch):
        monkeypatch.delenv("SECTIONCOUNT_BASE_DIR", raising=False)
        path = tmp_path / "doc.txt"
        assert resolve_input_path(str(path)) == path.resolve()

    def test_relative_to_base_dir(self, base_dir):
        assert resolve_input_path("doc.txt") == (base_dir / "doc.txt").resolve()

    def test_dotdot_escape(self, base_dir):
        with pytest.raises(UnsafePathError):
            resolve_input_path("../outside.txt")

    def test_explicit_base_dir(self, tmp_path):
        base = tmp_path.resolve()
        with pytest.raises(UnsafePathError):
            resolve_input_path(str(Path("/") / "etc" / "hosts"), base_dir=base)

    def test_symlink_escape(self, base_dir, tmp_path_factory):
        target = tmp_path_factory.mktemp("elsewhere") / "doc.txt"
        target.write_text('["t"]"x"', encoding="utf-8")
        link = base_dir / "link.txt"
        try:
            link.symlink_to(target)
        except OSError:
            pytest.skip("symlinks not supported")
        with pytest.raises(UnsafePathError):
            resolve_input_path("link.txt")

    def test_sensitive_refused(self, base_dir):
        with pytest.raises(UnsafePathError):
            resolve_input_path("server.pem")
