import pytest

from json_to_freezed import AtomicWriter, InvalidOutputError, generate


@pytest.fixture
def content():
    return generate('{"id": 1, "address": {"city": "X"}}', "user").text


def test_write(tmp_path, content):
    path = tmp_path / "models" / "user.dart"

    AtomicWriter().write(path, content)

    assert path.read_text(encoding="utf-8") == content
    assert [p.name for p in path.parent.iterdir()] == ["user.dart"]


def test_write_replaces_existing_file(tmp_path, content):
    path = tmp_path / "user.dart"
    path.write_text("old")

    AtomicWriter().write(path, content)

    assert path.read_text(encoding="utf-8") == content


def test_write_if_not_exists(tmp_path, content):
    path = tmp_path / "user.dart"
    path.write_text("old")

    with pytest.raises(FileExistsError):
        AtomicWriter().write_if_not_exists(path, content)

    assert path.read_text() == "old"


@pytest.mark.parametrize("bad_content", ["no classes here", "@freezed\nclass A {", "@freezed\nclass A { f(; }"])
def test_invalid_content_is_not_written(tmp_path, bad_content):
    path = tmp_path / "user.dart"

    with pytest.raises(InvalidOutputError):
        AtomicWriter().write(path, bad_content)

    assert list(tmp_path.iterdir()) == []


def test_validation_can_be_skipped(tmp_path):
    path = tmp_path / "notes.txt"

    AtomicWriter().write(path, "plain text", validate=False)

    assert path.read_text() == "plain text"


def test_custom_validator(tmp_path, content):
    seen = []

    AtomicWriter(validate_dart=seen.append).write(tmp_path / "user.dart", content)

    assert seen == [content]
