import pytest

from src.domain.exceptions import ValidationCode, ValidationError
from src.domain.value_objects import ProjectId, UserEmail, UserId, UserName


# ==================== UserId / ProjectId ====================


def test_user_id_equality_is_by_value():
    assert UserId("u1") == UserId("u1")
    assert UserId("u1") != UserId("u2")
    assert len({UserId("u1"), UserId("u1")}) == 1


@pytest.mark.parametrize("raw", ["", "   "])
def test_user_id_rejects_blank(raw):
    with pytest.raises(ValidationError) as exc:
        UserId(raw)
    assert exc.value.code is ValidationCode.REQUIRED


def test_user_id_rejects_over_128_chars():
    UserId("x" * 128)
    with pytest.raises(ValidationError) as exc:
        UserId("x" * 129)
    assert exc.value.code is ValidationCode.TOO_LONG


def test_empty_sentinels():
    assert UserId.EMPTY.is_empty
    assert ProjectId.EMPTY.is_empty
    assert not UserId("u1").is_empty
    assert UserId.EMPTY.value == ""


def test_project_id_reports_its_own_field():
    with pytest.raises(ValidationError) as exc:
        ProjectId("")
    assert exc.value.field == "projectId"


# ==================== UserEmail ====================


def test_email_accepts_valid_address():
    assert UserEmail("bob@example.com").value == "bob@example.com"


def test_email_equality_ignores_case():
    assert UserEmail("Bob@Example.COM") == UserEmail("bob@example.com")
    assert hash(UserEmail("Bob@Example.COM")) == hash(UserEmail("bob@example.com"))


@pytest.mark.parametrize(
    "raw",
    [
        "no-at-sign",
        "a@b",
        "a b@example.com",
        "a..b@example.com",
        ".alice@example.com",
        "alice.@example.com",
        "alice@.example.com",
        "alice@example.com.",
    ],
)
def test_email_rejects_malformed(raw):
    with pytest.raises(ValidationError) as exc:
        UserEmail(raw)
    assert exc.value.code is ValidationCode.INVALID_FORMAT


def test_email_required_and_length():
    with pytest.raises(ValidationError) as exc:
        UserEmail("")
    assert exc.value.code is ValidationCode.REQUIRED

    with pytest.raises(ValidationError) as exc:
        UserEmail("a" * 250 + "@example.com")
    assert exc.value.code is ValidationCode.TOO_LONG


# ==================== UserName ====================


@pytest.mark.parametrize("raw", ["bob", "Jo", "홍길동", "team lead", "dev_ops-2"])
def test_user_name_accepts_valid(raw):
    assert UserName(raw).value == raw


@pytest.mark.parametrize(
    "raw, code",
    [
        ("", ValidationCode.REQUIRED),
        ("   ", ValidationCode.REQUIRED),
        ("a", ValidationCode.TOO_SHORT),
        ("a" * 21, ValidationCode.TOO_LONG),
        ("bad!name", ValidationCode.INVALID_FORMAT),
        ("two  spaces", ValidationCode.INVALID_FORMAT),
        ("_leading", ValidationCode.INVALID_FORMAT),
        ("trailing-", ValidationCode.INVALID_FORMAT),
        ("SuperAdmin", ValidationCode.FORBIDDEN_WORD),
        ("the root", ValidationCode.FORBIDDEN_WORD),
        ("관리자님", ValidationCode.FORBIDDEN_WORD),
    ],
)
def test_user_name_rejections_carry_codes(raw, code):
    with pytest.raises(ValidationError) as exc:
        UserName(raw)
    assert exc.value.code is code, f"{raw!r} should fail with {code}, got {exc.value.code}"
    assert exc.value.field == "name"


def test_user_name_equality_ignores_case():
    assert UserName("Bob") == UserName("bob")
    assert hash(UserName("Bob")) == hash(UserName("bob"))


def test_unknown_user_sentinel():
    assert UserName.UNKNOWN_USER.value == "Unknown User"
    assert UserName.UNKNOWN_USER == UserName("unknown user")
