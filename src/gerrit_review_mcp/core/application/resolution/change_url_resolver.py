"""Pure function turning a Gerrit change URL into a ChangeReference.

Supported shapes, tried in order:
    https://gerrit-review.googlesource.com/c/project/+/12345
    https://gerrit.example.com/c/some/nested/project/+/12345/?usp=review-tab
    https://gerrit.example.com/#/c/12345/
    https://example.com/anything/12345  (rightmost all-digit path segment)
"""

import re

from gerrit_review_mcp.core.application.exceptions import ChangeUrlResolutionError
from gerrit_review_mcp.core.domain.change import ChangeReference

_MODERN_PATH_PATTERN = re.compile(r"/c/(?:[^/]+/)*\+/(\d+)(?:[?&#]|\Z|/)", re.ASCII)
_LEGACY_FRAGMENT_PATTERN = re.compile(r"#/c/(\d+)", re.ASCII)
_NUMERIC_SEGMENT_PATTERN = re.compile(r"\d+", re.ASCII)


def resolve_change_url(url: str) -> ChangeReference:
    """Extract the change number from a Gerrit change URL.

    The fallback scan walks path segments right to left, so it can pick up an
    unrelated trailing number on URLs that are not change URLs at all.
    """
    for pattern in (_MODERN_PATH_PATTERN, _LEGACY_FRAGMENT_PATTERN):
        match = pattern.search(url)
        if match:
            return ChangeReference(match.group(1))

    change_id = _rightmost_numeric_segment(url)
    if change_id is not None:
        return ChangeReference(change_id)

    raise ChangeUrlResolutionError(
        f"could not extract change ID from URL: {url}",
        context={"change_url": url},
    )


def _rightmost_numeric_segment(url: str) -> str | None:
    segments = url.removesuffix("/").split("/")
    for segment in reversed(segments):
        if _NUMERIC_SEGMENT_PATTERN.fullmatch(segment):
            return segment
    return None
