"""Library version information."""

MAJOR_VERSION = 2
MINOR_VERSION = 14
MICRO_VERSION = 0
VERSION = "2.14"


def version_str() -> str:
    """Return the version as a display string."""
    return VERSION


def version_cmp(major: int, minor: int, micro: int) -> int:
    """Compare the library version with the one given.

    Positive if the library is newer, negative if older, 0 if equal.
    """
    return (
        (MAJOR_VERSION - major)
        or (MINOR_VERSION - minor)
        or (MICRO_VERSION - micro)
    )