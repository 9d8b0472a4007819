from gerrit_review_mcp.core.application.tools.common.exceptions.configuration_error import (
    ConfigurationError,
)
from gerrit_review_mcp.core.application.tools.common.exceptions.domain_error import DomainError
from gerrit_review_mcp.core.application.tools.common.exceptions.gerrit_errors import (
    GerritApiError,
    GerritAuthenticationError,
    GerritConnectivityError,
)
from gerrit_review_mcp.core.application.tools.common.exceptions.infra_error import InfraError
from gerrit_review_mcp.core.application.tools.common.exceptions.provider_error import (
    ProviderError,
)

__all__ = [
    "ConfigurationError",
    "DomainError",
    "GerritApiError",
    "GerritAuthenticationError",
    "GerritConnectivityError",
    "InfraError",
    "ProviderError",
]
