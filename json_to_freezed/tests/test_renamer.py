import pytest

from json_to_freezed import generate
from json_to_freezed.errors import InvalidClassNameError, UnknownClassError
from json_to_freezed.renamer import collect_class_names, rename_class


@pytest.fixture
def result():
    return generate('{"id": 1, "address": {"city": "X"}, "items": [{"sku": "A1"}]}', "user_profile")


class TestTextRename:
    def test_rewrites_class_boilerplate(self, result):
        text = rename_class(result.text, "Address", "Location")

        assert "class Location with _$Location {" in text
        assert "  const factory Location({" in text
        assert "  }) = _Location;" in text
        assert "  factory Location.fromJson(Map<String, dynamic> json) =>" in text
        assert "      _$LocationFromJson(json);" in text
        assert "class Address" not in text
        assert "_$AddressFromJson" not in text

    def test_field_types_are_not_rewritten(self, result):
        text = rename_class(result.text, "Address", "Location")

        assert "    final Address? address;" in text

    def test_round_trip(self, result):
        renamed = rename_class(result.text, "Item", "OrderItem")

        assert renamed != result.text
        assert rename_class(renamed, "OrderItem", "Item") == result.text

    def test_substring_class_names_are_left_alone(self):
        result = generate('{"user": {"name": "a"}, "user_detail": {"age": 1}}', "account")
        assert result.class_names == ("Account", "UserDetail", "User")

        text = rename_class(result.text, "User", "Member")

        assert "class UserDetail with _$UserDetail {" in text
        assert "_$UserDetailFromJson(json);" in text
        assert "  }) = _UserDetail;" in text
        assert "class Member with _$Member {" in text
        assert "_$MemberFromJson(json);" in text

    def test_noop_rename(self, result):
        assert rename_class(result.text, "Address", "Address") == result.text
        assert rename_class(result.text, "", "Anything") == result.text

    def test_special_characters_in_names(self, result):
        text = rename_class(result.text, "Address", "Addr$1")

        assert "class Addr$1 with _$Addr$1 {" in text


class TestResultRename:
    def test_rewrites_every_reference(self, result):
        renamed = result.rename_class("Address", "Location")

        assert "    final Location? address;" in renamed.text
        assert "class Location with _$Location {" in renamed.text
        assert "Address" not in renamed.text
        assert renamed.class_names == ("UserProfile", "Item", "Location")

    def test_list_field_type(self, result):
        renamed = result.rename_class("Item", "LineItem")

        assert "    final List<LineItem>? items;" in renamed.text
        assert "_$LineItemFromJson(json);" in renamed.text

    def test_original_result_is_unchanged(self, result):
        text = result.text
        result.rename_class("Address", "Location")

        assert result.text == text

    def test_references_stay_aligned_after_several_renames(self, result):
        renamed = result.rename_class("Address", "A").rename_class("UserProfile", "VeryLongRootClassName").rename_class("Item", "I")

        for reference in renamed.references:
            assert renamed.text[reference.start : reference.end] == reference.name
        assert collect_class_names(renamed.text) == list(renamed.class_names)

    def test_round_trip(self, result):
        assert result.rename_class("Address", "Location").rename_class("Location", "Address") == result

    def test_substring_class_names(self):
        result = generate('{"user": {"name": "a"}, "user_detail": {"age": 1}}', "account")

        renamed = result.rename_class("User", "Member")

        assert "    final UserDetail? userDetail;" in renamed.text
        assert "    final Member? user;" in renamed.text
        assert renamed.class_names == ("Account", "UserDetail", "Member")

    def test_unknown_class(self, result):
        with pytest.raises(UnknownClassError):
            result.rename_class("Missing", "Other")

    @pytest.mark.parametrize("new_name", ["", "2Fast", "Has Space", "Bad-Name"])
    def test_invalid_new_name(self, result, new_name):
        with pytest.raises(InvalidClassNameError):
            result.rename_class("Address", new_name)

    @pytest.mark.parametrize("new_name", ["Item", "UserProfile"])
    def test_rename_to_declared_class(self, result, new_name):
        with pytest.raises(InvalidClassNameError):
            result.rename_class("Address", new_name)

    def test_rename_to_itself(self, result):
        assert result.rename_class("Address", "Address") == result


def test_collect_class_names(result):
    assert collect_class_names(result.text) == ["UserProfile", "Item", "Address"]
    assert list(result.class_names) == collect_class_names(result.text)
