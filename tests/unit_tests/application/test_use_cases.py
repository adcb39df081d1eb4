"""Unit tests for pre-flight scan steps."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from code_scanner.application.options import ScanConfiguration
from code_scanner.application.results import (
    Closed,
    Failure,
    SpawnErrorOutcome,
    SpawnFailed,
    StderrChunk,
    StdoutChunk,
    Success,
    outcome_from_event,
)
from code_scanner.application.use_cases import (
    build_argument_vector,
    build_invocation,
    join_path,
    normalize_work_folder,
    resolve_paths,
    validate_configuration,
)
from code_scanner.errors import ConfigurationIncomplete, UnsupportedPlatformError

FULL_CONFIG = ScanConfiguration(
    scan_root="/notes",
    work_folder="out",
    line_start_marker="// ",
    folder_structure="a.b.c",
    source_extension=".go",
    dest_extension=".md",
)


def test_validate_rejects_unset_scan_root() -> None:
    """Only a missing scan root fails validation."""
    result = validate_configuration(ScanConfiguration(work_folder="out"))
    assert not result.ok
    assert isinstance(result.error, ConfigurationIncomplete)
    with pytest.raises(ConfigurationIncomplete):
        result.raise_for_error()


def test_validate_passes_other_fields_through() -> None:
    """Unset optional fields do not fail validation."""
    result = validate_configuration(ScanConfiguration(scan_root="/notes"))
    assert result.ok
    result.raise_for_error()


@pytest.mark.parametrize("separator", ["/", "\\"])
@given(work_folder=st.text())
def test_normalize_work_folder_is_idempotent(separator: str, work_folder: str) -> None:
    """Normalizing twice equals normalizing once, with one leading separator."""
    once = normalize_work_folder(work_folder, separator)
    assert normalize_work_folder(once, separator) == once
    assert once.startswith(separator)
    assert not once.startswith(separator * 2)


def test_normalize_work_folder_keeps_single_leading_separator() -> None:
    assert normalize_work_folder("out", "/") == "/out"
    assert normalize_work_folder("/out", "/") == "/out"
    assert normalize_work_folder("out", "\\") == "\\out"


def test_join_path_collapses_doubled_separators() -> None:
    assert join_path("/", "/home/u/vault/", ".obsidian", "/plugins/") == "/home/u/vault/.obsidian/plugins"
    assert join_path("\\", "C:\\vault\\", "x") == "C:\\vault\\x"


def test_resolve_paths_end_to_end_linux() -> None:
    """Resolve executable and working directory for the documented linux vault."""
    paths = resolve_paths("linux", "/home/u/vault", ".obsidian", "code-scanner-ver2", "out")
    assert paths.executable_path == (
        "/home/u/vault/.obsidian/plugins/code-scanner-ver2/get-comments-linux"
    )
    assert paths.working_directory_path == "/home/u/vault/out"


@pytest.mark.parametrize(
    ("platform_id", "executable"),
    [
        ("linux", "/v/.obsidian/plugins/p/get-comments-linux"),
        ("macos", "/v/.obsidian/plugins/p/get-comments-macos"),
    ],
)
def test_resolve_paths_posix_profiles(platform_id: str, executable: str) -> None:
    paths = resolve_paths(platform_id, "/v", ".obsidian", "p", "/out")
    assert paths.executable_path == executable
    assert paths.working_directory_path == "/v/out"


def test_resolve_paths_windows_profile() -> None:
    paths = resolve_paths("windows", "C:\\Users\\u\\vault", ".obsidian", "code-scanner-ver2", "out")
    assert paths.executable_path == (
        "C:\\Users\\u\\vault\\.obsidian\\plugins\\code-scanner-ver2\\get-comments.exe"
    )
    assert paths.working_directory_path == "C:\\Users\\u\\vault\\out"


def test_resolve_paths_trailing_base_separator_is_not_doubled() -> None:
    paths = resolve_paths("linux", "/home/u/vault/", ".obsidian", "p", "out")
    assert "//" not in paths.executable_path
    assert paths.working_directory_path == "/home/u/vault/out"


@pytest.mark.parametrize("platform_id", ["freebsd", "", "Linux", "win32", "darwin"])
def test_resolve_paths_rejects_unknown_platforms(platform_id: str) -> None:
    with pytest.raises(UnsupportedPlatformError) as info:
        resolve_paths(platform_id, "/v", ".obsidian", "p", "out")
    assert info.value.platform_id == platform_id


def test_argument_vector_end_to_end_order() -> None:
    """Flags appear in their fixed order with -dest before -work."""
    argv = build_argument_vector(FULL_CONFIG, "/home/u/vault/out")
    assert list(argv) == [
        "-dir", "/notes",
        "-start", "// ",
        "-path", "a.b.c",
        "-ext", ".go",
        "-dest", ".md",
        "-work", "/home/u/vault/out",
    ]


def test_argument_vector_omits_unset_destination() -> None:
    config = ScanConfiguration(scan_root="/notes", source_extension=".go")
    argv = build_argument_vector(config, "/v/")
    assert "-dest" not in argv
    assert list(argv) == ["-dir", "/notes", "-start", "", "-path", "", "-ext", ".go", "-work", "/v/"]


def test_build_invocation_carries_resolved_paths() -> None:
    paths = resolve_paths("linux", "/home/u/vault", ".obsidian", "code-scanner-ver2", "out")
    invocation = build_invocation(FULL_CONFIG, paths)
    assert invocation.executable_path == paths.executable_path
    assert invocation.working_directory_path == "/home/u/vault/out"
    assert invocation.argument_vector[-2:] == ("-work", "/home/u/vault/out")


def test_outcome_mapping() -> None:
    """Terminal events map to outcomes; chunks do not."""
    assert outcome_from_event(Closed(0)) == Success()
    failure = outcome_from_event(Closed(7))
    assert failure == Failure(exit_code=7)
    assert "7" in failure.message
    assert outcome_from_event(SpawnFailed("denied")) == SpawnErrorOutcome("denied")
    assert outcome_from_event(StdoutChunk(b"x")) is None
    assert outcome_from_event(StderrChunk(b"x")) is None
