"""
Tests for the json_to_freezed command line.
"""

import json

import pytest
from click.testing import CliRunner

from json_to_freezed.json_to_freezed import json_to_freezed

USER_JSON = {"id": 1, "address": {"city": "X"}, "items": [{"sku": "A1"}]}


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def user_json(tmp_path):
    path = tmp_path / "user_profile.json"
    path.write_text(json.dumps(USER_JSON))
    return path


def test_writes_file_named_after_input(runner, user_json, tmp_path):
    output = tmp_path / "out.dart"

    result = runner.invoke(json_to_freezed, [str(user_json), str(output)])

    assert result.exit_code == 0, result.output
    text = output.read_text()
    assert text.startswith("import 'package:freezed_annotation/freezed_annotation.dart';\npart 'user_profile.freezed.dart';")
    assert "class UserProfile with _$UserProfile {" in text
    assert "Classes: UserProfile, Item, Address" in result.output


def test_default_output_in_current_directory(runner, user_json):
    with runner.isolated_filesystem():
        result = runner.invoke(json_to_freezed, [str(user_json), "--name", "account"])

        assert result.exit_code == 0, result.output
        with open("account.dart") as f:
            text = f.read()

    assert "class Account with _$Account {" in text
    assert "part 'account.g.dart';" in text


def test_stdout_output(runner, user_json):
    result = runner.invoke(json_to_freezed, [str(user_json), "-", "--field-mode", "required"])

    assert result.exit_code == 0, result.output
    assert result.output.startswith("import 'package:freezed_annotation/freezed_annotation.dart';")
    assert "    required int? id;" in result.output


def test_stdin_input(runner):
    result = runner.invoke(json_to_freezed, ["-", "-", "-n", "post"], input='{"tags": ["a"]}')

    assert result.exit_code == 0, result.output
    assert "class Post with _$Post {" in result.output
    assert "    final List<String>? tags;" in result.output


def test_stdin_input_default_name(runner):
    result = runner.invoke(json_to_freezed, ["-", "-"], input='{"id": 1}')

    assert result.exit_code == 0, result.output
    assert "class YourNameModel with _$YourNameModel {" in result.output


def test_rename(runner, user_json):
    result = runner.invoke(json_to_freezed, [str(user_json), "-", "-r", "Item=OrderItem", "-r", "Address=Location"])

    assert result.exit_code == 0, result.output
    assert "    final List<OrderItem>? items;" in result.output
    assert "    final Location? address;" in result.output
    assert "Classes: UserProfile, OrderItem, Location" in result.output


def test_rename_unknown_class(runner, user_json):
    result = runner.invoke(json_to_freezed, [str(user_json), "-", "-r", "Missing=Other"])

    assert result.exit_code == 1
    assert "Unknown class 'Missing'" in result.output


def test_rename_bad_format(runner, user_json):
    result = runner.invoke(json_to_freezed, [str(user_json), "-", "-r", "Missing"])

    assert result.exit_code == 2
    assert "expected OLD=NEW" in result.output


def test_invalid_json(runner, tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json")
    output = tmp_path / "broken.dart"

    result = runner.invoke(json_to_freezed, [str(path), str(output)])

    assert result.exit_code == 1
    assert "Invalid JSON input, Please make some change!" in result.output
    assert not output.exists()


def test_missing_input(runner, tmp_path):
    path = tmp_path / "empty.json"
    path.write_text("")

    result = runner.invoke(json_to_freezed, [str(path), "-"])

    assert result.exit_code == 1
    assert "Please provide JSON input!" in result.output


def test_invalid_field_mode(runner, user_json):
    result = runner.invoke(json_to_freezed, [str(user_json), "-", "--field-mode", "const"])

    assert result.exit_code == 2


def test_existing_output_requires_force(runner, user_json, tmp_path):
    output = tmp_path / "out.dart"
    output.write_text("keep me")

    result = runner.invoke(json_to_freezed, [str(user_json), str(output)])

    assert result.exit_code == 1
    assert "already exists" in result.output
    assert output.read_text() == "keep me"

    result = runner.invoke(json_to_freezed, [str(user_json), str(output), "--force"])

    assert result.exit_code == 0, result.output
    assert "class UserProfile" in output.read_text()


def test_config_file(runner, user_json, tmp_path):
    config = tmp_path / "config.json"
    config.write_text(json.dumps({"field_mode": "optional", "add_generation_comment": True}))

    result = runner.invoke(json_to_freezed, [str(user_json), "-", "--config", str(config)])

    assert result.exit_code == 0, result.output
    assert result.output.startswith("// Generated by json_to_freezed v")
    assert "json_to_freezed user_profile.json" in result.output
    assert "    int? id;" in result.output


def test_rename_to_declared_class(runner, user_json):
    result = runner.invoke(json_to_freezed, [str(user_json), "-", "-r", "Address=UserProfile"])

    assert result.exit_code == 1
    assert "Class name 'UserProfile' is already declared" in result.output
