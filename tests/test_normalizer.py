"""Tests for inbound message normalization."""

from wedding_bot.services.normalizer import (
    InputKind,
    extract_number,
    normalize_message,
)


def test_text_message_is_trimmed() -> None:
    normalized = normalize_message("text", "  เมนู \n")

    assert normalized.kind is InputKind.TEXT
    assert normalized.text == "เมนู"
    assert normalized.is_text


def test_missing_text_becomes_empty_string() -> None:
    assert normalize_message("text", None).text == ""


def test_image_and_file_are_attachments() -> None:
    assert normalize_message("image", None).kind is InputKind.ATTACHMENT
    assert normalize_message("file", None).kind is InputKind.ATTACHMENT


def test_other_message_types_are_other() -> None:
    for message_type in ("sticker", "location", "audio", None):
        normalized = normalize_message(message_type, "ignored")
        assert normalized.kind is InputKind.OTHER
        assert normalized.text == ""


def test_extract_number_takes_first_run_of_digits() -> None:
    assert extract_number("2 คน") == 2
    assert extract_number("มา 12 คน ไม่ใช่ 3") == 12
    assert extract_number("abc") is None
    assert extract_number("") is None
