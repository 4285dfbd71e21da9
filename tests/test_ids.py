import pytest

from lium.ids import ADJECTIVES, NOUNS, generate_human_id, generate_uuid, is_valid_uuid

SAMPLE = "550e8400-e29b-41d4-a716-446655440000"


def test_human_id_generation():
    human_id = generate_human_id(SAMPLE)
    assert "-" in human_id
    assert human_id.count("-") == 2


def test_human_id_parts():
    adjective, noun, suffix = generate_human_id(SAMPLE).split("-")
    assert adjective in ADJECTIVES
    assert noun in NOUNS
    assert suffix == "0000"


def test_human_id_is_deterministic():
    first = generate_human_id(SAMPLE)
    assert first.endswith("-0000")
    repeated = [generate_human_id(SAMPLE) for _ in range(3)]
    assert repeated == [first, first, first]


def test_human_id_of_short_input_uses_whole_text_as_suffix():
    assert generate_human_id("ab").endswith("-ab")


def test_uuid_validation():
    assert is_valid_uuid(SAMPLE) is True
    assert is_valid_uuid("invalid-uuid") is False


@pytest.mark.parametrize(
    "text",
    [
        "550e8400e29b41d4a716446655440000",
        "{550e8400-e29b-41d4-a716-446655440000}",
        "urn:uuid:550e8400-e29b-41d4-a716-446655440000",
        "550E8400-E29B-41D4-A716-446655440000",
    ],
)
def test_accepted_uuid_forms(text):
    assert is_valid_uuid(text) is True


@pytest.mark.parametrize(
    "text",
    [
        "",
        "550e8400-e29b-41d4-a716-44665544000",
        "550e8400-e29b-41d4-a716-44665544000g",
        "550e-8400e29b-41d4-a716-446655440000",
    ],
)
def test_rejected_uuid_forms(text):
    assert is_valid_uuid(text) is False


def test_generated_uuid_is_valid_and_unique():
    first = generate_uuid()
    second = generate_uuid()
    assert is_valid_uuid(first) is True
    assert len(first) == 36
    assert first[14] == "4"
    assert first != second