import re

_WHITESPACE_RE = re.compile(r"\s+")
_JOINER_RE = re.compile(r"\s*&\s*")
_NON_LETTER_RE = re.compile(r"[^A-Za-z]")

UNKNOWN = "Unknown"


def normalize_customer_name(raw_name: str) -> str:
    """Turn a captured customer name into a filename-safe token.

    Joint names ("Celia & Felipe Ramirez's") are squashed into one word of
    letters ("CeliaFelipeRamirezs"); other names get whitespace runs replaced
    with a single underscore.
    """
    name = raw_name.strip()
    if "&" in name:
        name = _JOINER_RE.sub("", name)
        name = _WHITESPACE_RE.sub("", name)
        name = name.replace("'", "")
        return _NON_LETTER_RE.sub("", name)
    return _WHITESPACE_RE.sub("_", name)


def build_file_name(account_id: str, normalized_name: str, period_label: str = "") -> str:
    """{account}_{name}[_{period}].pdf, period omitted when blank."""
    period = _WHITESPACE_RE.sub("_", period_label.strip())
    if period:
        return f"{account_id}_{normalized_name}_{period}.pdf"
    return f"{account_id}_{normalized_name}.pdf"


def disambiguate_file_name(file_name: str, page_index: int) -> str:
    """Append the 1-based page number before the extension."""
    stem, dot, ext = file_name.rpartition(".")
    if not dot:
        return f"{file_name}_p{page_index + 1}"
    return f"{stem}_p{page_index + 1}.{ext}"


def parse_file_name(file_name: str) -> tuple[str, str]:
    """Recover (account_id, customer_name) from Account_Name[_Period].pdf."""
    base = file_name.rsplit("/", 1)[-1]
    if base.lower().endswith(".pdf"):
        base = base[:-4]
    parts = base.split("_")
    account_id = parts[0] if parts[0] else UNKNOWN
    customer_name = parts[1] if len(parts) >= 2 and parts[1] else UNKNOWN
    return account_id, customer_name
