"""GitLab adapter – feature flags REST gateway."""
from flagman.adapters.gitlab.gateway import TOKEN_HEADER, GitLabFlagGateway

__all__ = ["TOKEN_HEADER", "GitLabFlagGateway"]
