"""Phone number normalization to E.164 when loading persons."""

import phonenumbers


def normalize_phone(raw: str, default_region: str | None = None) -> str:
    """Return the E.164 form of raw, or raw itself (stripped) when it is not a valid number.

    Short local numbers such as office extensions are kept as typed; the Phone
    value object still checks that they are digits. default_region applies only
    when the input has no leading +.
    """
    text = str(raw or "").strip()
    if not text:
        return text
    try:
        parsed = phonenumbers.parse(text, default_region)
    except phonenumbers.NumberParseException:
        return text
    if not phonenumbers.is_valid_number(parsed):
        return text
    return phonenumbers.format_number(parsed, phonenumbers.PhoneNumberFormat.E164)
