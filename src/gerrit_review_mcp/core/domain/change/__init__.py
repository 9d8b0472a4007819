from gerrit_review_mcp.core.domain.change.change_metadata import ChangeMetadata
from gerrit_review_mcp.core.domain.change.value_objects.change_reference import ChangeReference

__all__ = ["ChangeMetadata", "ChangeReference"]
