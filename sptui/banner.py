"""The banner shown on first-time setup."""

_LINES = (
    "   _________  ____  / /_(_) __/_  __      / /___  __(_)",
    "  / ___/ __ \\/ __ \\/ __/ / /_/ / / /_____/ __/ / / / / ",
    " (__  ) /_/ / /_/ / /_/ / __/ /_/ /_____/ /_/ /_/ / /  ",
    "/____/ .___/\\____/\\__/_/_/  \\__, /      \\__/\\__,_/_/   ",
    "    /_/                    /____/                      ",
)

BANNER = "\n" + "\n".join(_LINES) + "\n"


def banner_lines() -> list[str]:
    """Return the banner's lines without the surrounding blank lines."""
    return list(_LINES)