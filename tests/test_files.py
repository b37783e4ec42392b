import pytest

from zosmf.files import FileDataType, FileTagType


@pytest.mark.parametrize("text", ["binary", "text"])
def test_data_type_display(text):
    assert f"{FileDataType(text)}" == text


def test_data_type_from_value():
    assert FileDataType("binary") is FileDataType.BINARY
    assert FileDataType("text") is FileDataType.TEXT


def test_data_type_rejects_unknown():
    with pytest.raises(ValueError):
        FileDataType("record")


@pytest.mark.parametrize(
    "member, text",
    [
        (FileTagType.BINARY, "binary"),
        (FileTagType.MIXED, "mixed"),
        (FileTagType.TEXT, "text"),
    ],
)
def test_tag_type_round_trip(member, text):
    assert str(member) == text
    assert FileTagType(text) is member


def test_tag_type_rejects_unknown():
    with pytest.raises(ValueError):
        FileTagType("MIXED")


def test_tag_type_ordering_of_members():
    assert list(FileTagType) == [
        FileTagType("binary"),
        FileTagType("mixed"),
        FileTagType("text"),
    ]