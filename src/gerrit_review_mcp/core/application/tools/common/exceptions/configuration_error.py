from __future__ import annotations

from gerrit_review_mcp.core.application.tools.common.exceptions.infra_error import InfraError


class ConfigurationError(InfraError):
    """Raised when configuration is invalid or incomplete."""
