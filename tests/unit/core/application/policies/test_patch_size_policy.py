from gerrit_review_mcp.core.application.policies.patch_size_policy import (
    MAX_PATCH_CHARS,
    TRUNCATION_WARNING,
    apply_patch_size_limit,
)


def test_patch_below_limit_is_unchanged():
    patch = "x" * 31999

    assert apply_patch_size_limit(patch) is patch


def test_patch_exactly_at_limit_is_unchanged():
    patch = "y" * MAX_PATCH_CHARS

    assert apply_patch_size_limit(patch) == patch


def test_oversized_patch_keeps_first_limit_chars_behind_warning():
    patch = "a" * 32000 + "b" * 8000

    result = apply_patch_size_limit(patch)

    assert result.startswith(TRUNCATION_WARNING)
    body = result[len(TRUNCATION_WARNING):]
    assert len(body) == 32000
    assert set(body) == {"a"}


def test_truncation_counts_characters_not_bytes():
    patch = "é" * 10 + "日本" * 5

    result = apply_patch_size_limit(patch, max_chars=12)

    assert result == TRUNCATION_WARNING + "é" * 10 + "日本"


def test_warning_line_text():
    assert TRUNCATION_WARNING == "WARNING: This patch has been truncated as it is very big:\n"
