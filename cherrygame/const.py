"""Framework version and banner."""

VERSION = "1.3.18"

# Separator used in actor paths.
DOT = "."

# Block-letter glyphs, one string per banner row.
_GLYPHS = {
    "C": (
        "░█████╗░",
        "██╔══██╗",
        "██║░░╚═╝",
        "██║░░██╗",
        "╚█████╔╝",
        "░╚════╝░",
    ),
    "H": (
        "██╗░░██╗",
        "██║░░██║",
        "███████║",
        "██╔══██║",
        "██║░░██║",
        "╚═╝░░╚═╝",
    ),
    "E": (
        "███████╗",
        "██╔════╝",
        "█████╗░░",
        "██╔══╝░░",
        "███████╗",
        "╚══════╝",
    ),
    "R": (
        "██████╗░",
        "██╔══██╗",
        "██████╔╝",
        "██╔══██╗",
        "██║░░██║",
        "╚═╝░░╚═╝",
    ),
    "Y": (
        "██╗░░░██╗",
        "╚██╗░██╔╝",
        "░╚████╔╝░",
        "░░╚██╔╝░░",
        "░░░██║░░░",
        "░░░╚═╝░░░",
    ),
}

_BANNER_WORD = "CHERRY"
_TAGLINE = "game sever framework @v{version}"


def _render(word: str) -> list[str]:
    rows = zip(*(_GLYPHS[letter] for letter in word))
    lines = ["".join(row) for row in rows]
    # The last banner row carries a trailing space.
    lines[-1] += " "
    return lines


def version() -> str:
    """Return the framework version string."""
    return VERSION


def get_logo() -> str:
    """Return the start-up banner with the version filled in."""
    body = "\n".join([*_render(_BANNER_WORD), _TAGLINE.format(version=version())])
    return "\n\n" + body + "\n"