"""Pure function capping patch text before it is handed to the LLM."""

MAX_PATCH_CHARS = 32000
TRUNCATION_WARNING = "WARNING: This patch has been truncated as it is very big:\n"


def apply_patch_size_limit(text: str, max_chars: int = MAX_PATCH_CHARS) -> str:
    """Keep the first max_chars characters and prepend a warning line when cut."""
    if len(text) <= max_chars:
        return text
    return TRUNCATION_WARNING + text[:max_chars]
