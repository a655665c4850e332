_UNITS = ("B", "KB", "MB", "GB")


def format_bytes(size: int) -> str:
    """Human readable size with binary units: 0 B, 512 B, 1.5 KB, 2 MB."""
    if size <= 0:
        return "0 B"
    exponent = 0
    while exponent < len(_UNITS) - 1 and size >= 1024 ** (exponent + 1):
        exponent += 1
    value = f"{size / 1024**exponent:.1f}".rstrip("0").rstrip(".")
    return f"{value} {_UNITS[exponent]}"
