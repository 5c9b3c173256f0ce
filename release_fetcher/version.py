"""Release identifier parsing and predecessor resolution.

Release identifiers follow ``release-v<major>.<minor>.<patch>`` where the patch
component is either a non-negative integer or the wildcard ``x`` denoting an
open patch train (e.g. ``release-v1.4.x``).
"""

import re

from pydantic import BaseModel, ConfigDict, Field

RELEASE_PATTERN = re.compile(r"release-v([0-9]+)\.([0-9]+)\.(x|[0-9]+)")
WILDCARD = "x"


class ReleaseVersion(BaseModel):
    """Parsed release identifier."""

    model_config = ConfigDict(frozen=True)

    major: int = Field(..., ge=0, description="Major version component")
    minor: int = Field(..., ge=0, description="Minor version component")
    patch: int | None = Field(
        None, ge=0, description="Patch component, None for the wildcard patch"
    )

    @property
    def is_wildcard(self) -> bool:
        return self.patch is None

    def previous(self) -> "ReleaseVersion":
        """Return the predecessor release.

        Only the minor and patch components are ever decremented. A patch of
        zero falls back to the zero patch of the previous minor, since the last
        patch of that minor is unknown. Releases with nothing left to
        decrement (``X.0.0`` and ``X.0.x``) are their own predecessor.
        """
        if self.is_wildcard:
            if self.minor > 0:
                return ReleaseVersion(major=self.major, minor=self.minor - 1)
            return self

        assert self.patch is not None
        if self.patch > 0:
            return ReleaseVersion(
                major=self.major, minor=self.minor, patch=self.patch - 1
            )
        if self.minor > 0:
            return ReleaseVersion(major=self.major, minor=self.minor - 1, patch=0)
        return self

    def __str__(self) -> str:
        patch = WILDCARD if self.patch is None else str(self.patch)
        return f"release-v{self.major}.{self.minor}.{patch}"


def parse_version(version: str) -> ReleaseVersion | None:
    """Parse a release identifier, returning None when it does not match."""
    match = RELEASE_PATTERN.fullmatch(version)
    if not match:
        return None

    major, minor, patch = match.groups()
    try:
        return ReleaseVersion(
            major=int(major),
            minor=int(minor),
            patch=None if patch == WILDCARD else int(patch),
        )
    except ValueError:
        # components beyond the int/str conversion digit limit
        return None


def previous_version(version: str) -> str:
    """Return the identifier of the release preceding ``version``.

    Identifiers that do not follow the release naming scheme are returned
    unchanged, as are releases without a derivable predecessor.

    Example:
        >>> previous_version("release-v2.3.5")
        'release-v2.3.4'
        >>> previous_version("release-v1.4.x")
        'release-v1.3.x'
        >>> previous_version("release-v2.0.0")
        'release-v2.0.0'
    """
    parsed = parse_version(version)
    if parsed is None:
        return version

    previous = parsed.previous()
    if previous == parsed:
        return version
    return str(previous)
