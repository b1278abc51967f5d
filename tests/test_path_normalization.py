"""Test path normalization utilities."""

import os
import posixpath
from unittest.mock import patch

import pytest

from slnpath.config import PathConfig
from slnpath.diagnostics import ArgumentMissingError, PathResolutionError, SecurityDeniedError
from slnpath.utils.paths import fix_file_path, normalize_path, normalize_path_no_throw

posix_only = pytest.mark.skipif(os.name == "nt", reason="relies on POSIX working directory")


class TestFixFilePath:
    """Test separator canonicalization."""

    def test_backslashes_rewritten_when_native_differs(self, windows_config):
        """Test converting Windows backslashes to forward slashes."""
        assert fix_file_path("Solution\\App\\App.csproj", windows_config) == "Solution/App/App.csproj"

        # Mixed separators
        assert fix_file_path("Solution\\Sub/App.csproj", windows_config) == "Solution/Sub/App.csproj"

    def test_noop_when_native_is_canonical(self, posix_config, windows_native_config):
        """Test that nothing is rewritten when native and canonical agree."""
        assert fix_file_path("src\\App.csproj", posix_config) == "src\\App.csproj"
        assert fix_file_path("C:/src/App.csproj", windows_native_config) == "C:/src/App.csproj"

    def test_rewrite_to_backslash(self):
        """Test canonicalizing to backslashes on a forward slash host."""
        config = PathConfig(native_separator="/", canonical_separator="\\")
        assert fix_file_path("src/App/App.csproj", config) == "src\\App\\App.csproj"

    def test_doubled_separators_not_collapsed(self, windows_config):
        """Test that doubled separators survive canonicalization."""
        assert fix_file_path("\\\\server\\\\share", windows_config) == "//server//share"

    def test_edge_cases(self, windows_config):
        """Test edge cases for separator canonicalization."""
        assert fix_file_path("", windows_config) == ""
        assert fix_file_path(None, windows_config) is None
        assert fix_file_path("App.sln", windows_config) == "App.sln"
        assert fix_file_path("\\", windows_config) == "/"


class TestNormalizePath:
    """Test resolution to absolute canonical paths."""

    def test_posix_absolute_with_dot_segments(self, posix_config):
        """Test that . and .. segments collapse."""
        assert normalize_path("/sln/App/../Lib/./Lib.csproj", posix_config) == "/sln/Lib/Lib.csproj"

    @posix_only
    def test_posix_relative_resolved_against_cwd(self, posix_config, tmp_path, monkeypatch):
        """Test that relative paths become absolute."""
        monkeypatch.chdir(tmp_path)
        result = normalize_path("relative/../relative/./file", posix_config)

        assert result == posixpath.join(os.getcwd(), "relative", "file")
        assert posixpath.isabs(result)
        assert ".." not in result.split("/")

    def test_posix_keeps_backslashes(self, posix_config):
        """Test that a backslash is an ordinary character on POSIX hosts."""
        assert normalize_path("/src/odd\\name.cs", posix_config) == "/src/odd\\name.cs"

    def test_windows_absolute(self, windows_config):
        """Test absolute Windows paths resolve and canonicalize."""
        input_path = "C:\\Solutions\\App\\..\\Lib\\.\\Lib.csproj"
        assert normalize_path(input_path, windows_config) == "C:/Solutions/Lib/Lib.csproj"

    def test_windows_forward_slash_input(self, windows_config):
        """Test Windows resolution of forward slash input."""
        assert normalize_path("D:/Repo/src/./App.sln", windows_config) == "D:/Repo/src/App.sln"

    def test_windows_native_separators_kept(self, windows_native_config):
        """Test Windows resolution without separator rewriting."""
        input_path = "C:\\Solutions\\App\\..\\App.sln"
        assert normalize_path(input_path, windows_native_config) == "C:\\Solutions\\App.sln"

    def test_empty_and_none_unchanged(self, posix_config):
        """Test that empty input skips normalization."""
        assert normalize_path("", posix_config) == ""
        assert normalize_path(None, posix_config) is None

    @pytest.mark.parametrize("path", [
        "/sln/App.sln",
        "/sln//double/./App.sln",
        "/sln/App/../../../App.sln",
    ])
    def test_posix_idempotent(self, posix_config, path):
        """Test normalize(normalize(p)) == normalize(p)."""
        once = normalize_path(path, posix_config)
        assert normalize_path(once, posix_config) == once

    @pytest.mark.parametrize("path", [
        "C:\\Solutions\\App.sln",
        "C:/Solutions/./App/../App.sln",
        "E:\\Repo\\src\\Lib\\Lib.fsproj",
    ])
    def test_windows_idempotent(self, windows_config, path):
        """Test idempotence with separator rewriting active."""
        once = normalize_path(path, windows_config)
        assert normalize_path(once, windows_config) == once

    def test_embedded_null_raises(self, posix_config):
        """Test that unresolvable input raises PathResolutionError."""
        with pytest.raises(PathResolutionError) as exc_info:
            normalize_path("/sln/App\0.sln", posix_config)

        assert exc_info.value.path == "/sln/App\0.sln"

    def test_non_path_argument_raises_type_error(self, posix_config):
        """Test that a non-path argument is a caller defect."""
        with pytest.raises(TypeError):
            normalize_path(42, posix_config)

    @posix_only
    def test_default_config(self):
        """Test normalization with host defaults."""
        assert normalize_path("/sln/./App.sln") == "/sln/App.sln"


class TestNormalizePathNoThrow:
    """Test best-effort normalization used for error messages."""

    def test_success_matches_normalize(self, windows_config):
        """Test that a resolvable path is normalized."""
        path = "C:\\Solutions\\App\\..\\App.sln"
        assert normalize_path_no_throw(path, windows_config) == normalize_path(path, windows_config)

    def test_empty_returns_empty(self):
        """Test that empty input is returned unchanged."""
        assert normalize_path_no_throw("") == ""
        assert normalize_path_no_throw(None) is None

    def test_unresolvable_returns_original(self, windows_config):
        """Test fallback returns the exact original input, not a partial rewrite."""
        path = "C:\\Solutions\\bad\0name\\App.sln"
        assert normalize_path_no_throw(path, windows_config) == path

    @pytest.mark.parametrize("error", [
        PermissionError("denied"),
        FileNotFoundError("missing"),
        OSError("generic"),
        NotImplementedError("unsupported"),
        ValueError("bad"),
        SecurityDeniedError("sandbox"),
    ])
    def test_io_related_failures_suppressed(self, error):
        """Test that every I/O related failure falls back to the input."""
        with patch("slnpath.utils.paths.normalize_path", side_effect=error):
            assert normalize_path_no_throw("relative\\App.sln") == "relative\\App.sln"

    @pytest.mark.parametrize("error", [
        TypeError("not a path"),
        ArgumentMissingError("path"),
        MemoryError(),
        RuntimeError("bug"),
        KeyError("lookup"),
    ])
    def test_other_failures_propagate(self, error):
        """Test that caller defects and unexpected failures are re-raised."""
        with patch("slnpath.utils.paths.normalize_path", side_effect=error):
            with pytest.raises(type(error)) as exc_info:
                normalize_path_no_throw("App.sln")

        assert exc_info.value is error

    def test_non_path_argument_propagates(self, posix_config):
        """Test a real caller defect through the whole stack."""
        with pytest.raises(TypeError):
            normalize_path_no_throw(42, posix_config)

    @posix_only
    def test_relative_path_resolved(self, tmp_path, monkeypatch):
        """Test that dot segments are resolved with host defaults."""
        monkeypatch.chdir(tmp_path)
        result = normalize_path_no_throw("relative/../relative/./file")

        assert result == posixpath.join(os.getcwd(), "relative", "file")
