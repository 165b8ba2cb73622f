"""Tests for the mask engine."""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

import pytest
import regex

from textmask import (
    ConfigurationError,
    CursorRange,
    EditDelta,
    EngineConfig,
    MaskEngine,
    OverflowPolicy,
)


def _engine(masks, **options):
    return MaskEngine(EngineConfig(masks=masks, **options))


def _type(engine, old_text, old_cursor, new_text, new_cursor):
    return engine.process(EditDelta.of(old_text, old_cursor, new_text, new_cursor))


# ── Formatting whole values ──────────────────────────────────────────

def test_pretty_text_formats_value():
    engine = _engine(["+1 (###) ####-###"])
    assert engine.pretty_text("+12345678901") == "+1 (234) 5678-901"


def test_pretty_text_unformattable_returns_input():
    engine = _engine(["+1 (567) ####-###"])
    assert engine.pretty_text("+12345678901") == "+12345678901"


def test_pretty_text_overflow():
    engine = _engine(["+1 (###) ####-###"])
    assert engine.pretty_text("+12345678901234567890") == "+1 (234) 5678-901234567890"
    assert engine.info.is_valid


def test_pretty_text_overflow_forbidden():
    engine = _engine(["+1 (###) ####-###"], overflow=OverflowPolicy.forbidden())
    assert engine.pretty_text("+12345678901234567890") == "+12345678901234567890"
    assert not engine.info.is_valid


def test_overflow_uses_longest_filled_mask():
    engine = _engine([
        "+1 (###) ####-###",
        "+1 (###) ####-###-#####-#",
        "+1 (###) ####-###-#####-#-#",
    ])
    assert engine.pretty_text("+12345678901234567890") == "+1 (234) 5678-901-23456-7-890"


def test_shorter_mask_wins_on_equal_non_decorators():
    engine = _engine(["+1 (###) (####)-((###))", "+1 (###) ####-###"])
    assert engine.pretty_text("+12345678901") == "+1 (234) 5678-901"


def test_equal_length_masks_keep_registration_order():
    first = _engine(["##-##", "##/##"])
    second = _engine(["##/##", "##-##"])
    assert first.pretty_text("1234") == "12-34"
    assert second.pretty_text("1234") == "12/34"


def test_transforms_applied_to_wildcards():
    engine = _engine(["@@-##"], transforms={"@": str.upper})
    assert engine.pretty_text("ab12") == "AB-12"
    assert engine.current_info().clean == "ab12"


def test_country_phone_masks():
    engine = MaskEngine.country_phone_masks()
    assert engine.pretty_text("+380441234567") == "+380 (44) 123-45-67"
    assert engine.current_info().is_valid
    assert engine.pretty_text("+3804412345678") == "+380 (44) 123-45-678"


def test_country_phone_masks_without_overflow():
    engine = MaskEngine.country_phone_masks(allow_overflow=False)
    assert engine.pretty_text("+3804412345678") == "+3804412345678"


# ── Validity ─────────────────────────────────────────────────────────

def test_decorator_typed_into_empty_field():
    engine = _engine(["+1 (###) ####-###"])
    res = _type(engine, "", 0, "+", 1)
    assert res.text == "+"
    assert engine.info.is_valid is False


def test_impossible_decorator_rejected():
    engine = _engine(["+1 (###) ####-###"])
    res = _type(engine, "", 0, "-", 1)
    assert res.text == ""
    assert engine.info.is_valid is False


def test_typing_session():
    engine = _engine(["+1 (###) ####-###"])

    # pasted into an empty field
    res = _type(engine, "", 0, "13123456", 8)
    assert res.text == "+1 (312) 3456"
    assert res.cursor_offset == 13
    assert engine.info.is_valid is False
    assert engine.info.clean == "13123456"

    # appended at the end
    res = _type(engine, "+1 (312) 3456", 13, "+1 (312) 34567", 14)
    assert res.text == "+1 (312) 3456-7"
    assert res.cursor_offset == 15
    assert engine.info.is_valid is False

    # inserted in the middle
    res = _type(engine, "+1 (312) 3456-7", 7, "+1 (3120) 3456-7", 8)
    assert res.text == "+1 (312) 0345-67"
    assert res.cursor_offset == 10
    assert engine.info.is_valid is False

    # inserted where the mask has a fixed character: rejected
    res = _type(engine, "+1 (312) 0345-67", 1, "+31 (312) 0345-67", 2)
    assert res.text == "+1 (312) 0345-67"
    assert res.cursor_offset == 1
    assert engine.info.is_valid is False
    assert engine.info.clean == "1312034567"

    # overflowing
    res = _type(engine, "+1 (312) 0345-67", 16, "+1 (312) 0345-67999", 19)
    assert res.text == "+1 (312) 0345-67999"
    assert res.cursor_offset == 19
    assert engine.info.is_valid is True

    # back to an exact fit
    res = _type(engine, "+1 (312) 0345-67999", 19, "+1 (312) 0345-679", 17)
    assert res.text == "+1 (312) 0345-679"
    assert res.cursor_offset == 17
    assert engine.info.is_valid is True


def test_rejected_edit_keeps_snapshot():
    engine = _engine(["+1 (###) ####-###"])
    accepted = _type(engine, "", 0, "1312", 4)
    _type(engine, accepted.text, accepted.cursor_offset, accepted.text + "x", accepted.cursor_offset + 1)
    assert engine.result == accepted


# ── Custom decorators ────────────────────────────────────────────────

def test_decorators_override_wildcards_and_literals():
    mask = "###123w###123w"
    engine = _engine([mask], decorators=["#", "1", "2", "3"])
    res = _type(engine, "", 0, "ww", 2)
    assert res.text == mask
    assert engine.info.is_valid is True


def test_regex_decorators():
    engine = _engine(["@123@456@789@"], decorators=[regex.compile("[0-9]")])
    res = _type(engine, "", 0, "abcd", 4)
    assert res.text == "a123b456c789d"
    assert engine.info.is_valid is True


# ── Custom wildcards ─────────────────────────────────────────────────

def test_custom_wildcards():
    engine = _engine(
        ["_###_###_"],
        wildcards={"_": regex.compile("[0-4]"), "#": regex.compile("[5-9]")},
    )
    res = _type(engine, "", 0, "199929993", 2)
    assert res.text == "199929993"
    assert engine.info.is_valid is True

    res = _type(engine, "", 0, "599929993", 2)
    assert res.text == ""


def test_plain_string_wildcard():
    engine = _engine(["1234"], wildcards={"4": "5"})
    assert _type(engine, "", 0, "1234", 4).text == ""
    assert _type(engine, "", 0, "1235", 4).text == "1235"


# ── Autofill ─────────────────────────────────────────────────────────

def test_autofill_inserts_constant_prefix():
    engine = _engine(["+380 (##) ###-##-##"], allow_autofill=True)
    res = _type(engine, "", 0, "1", 1)
    assert res.text == "+380 (1"
    assert res.cursor_offset == 7


def test_without_autofill_literals_must_be_typed():
    engine = _engine(["+380 (##) ###-##-##"])
    res = _type(engine, "", 0, "1", 1)
    assert res.text == ""


# ── Decorator-only edits ─────────────────────────────────────────────

def test_decorator_appended_where_mask_has_it():
    engine = _engine(["+1 (###) ####-###"])
    res = _type(engine, "+1 (312", 7, "+1 (312)", 8)
    assert res.text == "+1 (312)"
    assert res.cursor_offset == 8
    assert engine.info.clean == "1312"
    assert engine.info.is_valid is False


def test_decorator_appended_where_mask_does_not_have_it():
    engine = _engine(["+1 (###) ####-###"])
    res = _type(engine, "+1 (312", 7, "+1 (312-", 8)
    assert res.text == "+1 (312"
    assert res.cursor_offset == 7


def test_decorator_inserted_mid_text_jumps_cursor():
    engine = _engine(["+1 (###) ####-###"])
    _type(engine, "", 0, "13123456", 8)
    res = _type(engine, "+1 (312) 3456", 5, "+1 (3-12) 3456", 6)
    assert res.text == "+1 (3-12) 3456"
    assert res.cursor_offset == 7
    assert engine.info.clean == "13123456"


def test_decorator_inserted_mid_text_on_fresh_engine():
    engine = _engine(["+1 (###) ####-###"])
    res = _type(engine, "+1 (312) 3456-789", 5, "+1 (3-12) 3456-789", 6)
    assert res.text == "+1 (3-12) 3456-789"
    assert engine.info.clean == "1312345678"
    assert engine.info.is_valid is True


def test_decorator_appended_then_removed():
    engine = _engine(["+1 (###) ####-###"])
    _type(engine, "", 0, "13123456", 8)
    res = _type(engine, "+1 (312) 3456", 13, "+1 (312) 3456-", 14)
    assert res.text == "+1 (312) 3456-"
    assert res.cursor_offset == 14

    res = _type(engine, "+1 (312) 3456-", 14, "+1 (312) 3456", 13)
    assert res.text == "+1 (312) 3456"
    assert res.cursor_offset == 13
    assert engine.info.clean == "13123456"


def test_forward_delete_of_decorator_reformats():
    engine = _engine(["+1 (###) ####-###"])
    res = _type(engine, "+1 (312) 3456", 7, "+1 (312 3456", 7)
    assert res.text == "+1 (312) 3456"
    assert res.cursor_offset == 7
    assert engine.info.clean == "13123456"


def test_backspace_over_decorator_reformats():
    engine = _engine(["+1 (###) ####-###"])
    res = _type(engine, "+1 (312) 3456", 9, "+1 (312)3456", 8)
    assert res.text == "+1 (312) 3456"
    assert res.cursor_offset == 7
    assert engine.info.clean == "13123456"


def test_backspace_over_decorator_at_start():
    engine = _engine(["(###) ###"])
    res = _type(engine, "(12", 1, "12", 0)
    assert res.text == "(12"
    assert res.cursor_offset == 0
    assert engine.info.clean == "12"


def test_deletion_leaving_only_decorators_is_accepted():
    engine = _engine(["(###) ###"])
    _type(engine, "", 0, "3", 1)
    assert engine.info.clean == "3"
    res = _type(engine, "(3", 2, "(", 1)
    assert res.text == "("
    assert res.cursor_offset == 1
    assert engine.info.clean == ""
    assert engine.info.is_valid is False


def test_selection_replace_reformats():
    engine = _engine(["+1 (###) ####-###"])
    delta = EditDelta(
        old_text="+1 (312) 3456",
        old_range=CursorRange(4, 7),
        new_text="+1 (9) 3456",
        new_range=CursorRange(5, 5),
    )
    res = engine.process(delta)
    assert res.text == "+1 (934) 56"
    assert res.cursor_offset == 5
    assert engine.info.clean == "193456"


# ── Purity ───────────────────────────────────────────────────────────

def test_process_is_deterministic():
    delta = EditDelta.of("+1 (312) 3456-7", 7, "+1 (3120) 3456-7", 8)
    a = _engine(["+1 (###) ####-###"])
    b = _engine(["+1 (###) ####-###"])
    assert a.process(delta) == b.process(delta)
    assert a.process(delta) == a.process(delta)


# ── Configuration errors ─────────────────────────────────────────────

def test_empty_masks_rejected():
    with pytest.raises(ConfigurationError):
        _engine([])


def test_overflow_without_pattern_rejected():
    with pytest.raises(ConfigurationError):
        OverflowPolicy(allowed=True, pattern=None)


def test_multi_char_wildcard_id_rejected():
    with pytest.raises(ConfigurationError):
        _engine(["##"], wildcards={"##": "1"})


def test_non_callable_transform_rejected():
    with pytest.raises(ConfigurationError):
        _engine(["##"], transforms={"#": "upper"})


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
