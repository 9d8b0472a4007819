from gerrit_review_mcp.core.application.ports.gerrit_change_port import GerritChangePort

__all__ = ["GerritChangePort"]
