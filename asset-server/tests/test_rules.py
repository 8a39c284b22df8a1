import pytest

from app.modules.assets.models import Resolution
from app.modules.assets.rules import (
    build_file_paths,
    compressed_path,
    content_type_for,
    decide,
    is_fallback_eligible,
)


@pytest.mark.parametrize(
    "path, plain, gz, expected",
    [
        ("app.wasm", True, False, Resolution("app.wasm", False)),
        ("app.wasm", True, True, Resolution("app.wasm", False)),
        ("app.wasm", False, True, Resolution("app.wasm.gz", True)),
        ("app.wasm", False, False, None),
        ("Build/app.data", False, True, Resolution("Build/app.data.gz", True)),
        ("Build/app.framework.js", False, True, Resolution("Build/app.framework.js.gz", True)),
        ("app.loader.js", False, True, None),
        ("notes.txt", False, True, None),
        ("notes.txt", True, False, Resolution("notes.txt", False)),
    ],
)
def test_decide_table(path, plain, gz, expected):
    assert decide(path, plain, gz) == expected


def test_decide_marks_plain_gz_objects_as_compressed():
    assert decide("archive.tar.gz", True, False) == Resolution("archive.tar.gz", True)


@pytest.mark.parametrize(
    "path, eligible",
    [
        ("app.data", True),
        ("app.framework.js", True),
        ("app.wasm", True),
        ("app.loader.js", False),
        ("app.js", False),
        ("app.txt", False),
        ("app.wasm.gz", False),
    ],
)
def test_fallback_eligibility(path, eligible):
    assert is_fallback_eligible(path) is eligible


@pytest.mark.parametrize(
    "path, content_type",
    [
        ("app.js", "application/javascript"),
        ("Build/app.framework.js", "application/javascript"),
        ("Build/app.loader.js", "application/javascript"),
        ("app.wasm", "application/wasm"),
        ("app.data", "application/octet-stream"),
        ("readme.txt", "application/octet-stream"),
        ("noextension", "application/octet-stream"),
    ],
)
def test_content_type_for(path, content_type):
    assert content_type_for(path) == content_type


def test_compressed_path_appends_suffix():
    assert compressed_path("Build/app.wasm") == "Build/app.wasm.gz"


def test_build_file_paths_cover_loader_files():
    assert build_file_paths("Build/app") == [
        "Build/app.loader.js",
        "Build/app.data",
        "Build/app.framework.js",
        "Build/app.wasm",
    ]
