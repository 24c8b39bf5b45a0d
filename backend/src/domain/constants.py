"""
Validation constants shared by the value objects.

Values match the Android client's validation rules so that a name or email
accepted on the device is accepted here.
"""


class ValidationRules:
    ID_MAX_LENGTH = 128

    EMAIL_MAX_LENGTH = 254
    EMAIL_PATTERN = r"^[^\s@]+@[^\s@]+\.[^\s@]+$"

    USER_NAME_MIN_LENGTH = 2
    USER_NAME_MAX_LENGTH = 20
    # Letters, digits, Hangul syllables/jamo, space, underscore, hyphen
    USER_NAME_PATTERN = r"^[A-Za-z0-9가-힣ㄱ-ㆎ _-]+$"
    USER_NAME_FORBIDDEN_WORDS = (
        "admin",
        "root",
        "system",
        "moderator",
        "operator",
        "null",
        "undefined",
        "관리자",
        "운영자",
    )

    TOKEN_MIN_LENGTH = 10
    TOKEN_MAX_LENGTH = 2048

    PAGE_MAX_LIMIT = 100
