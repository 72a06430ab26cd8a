"""
Domain exceptions raised by the data-access layer.

Routes translate these into HTTP responses; anything not listed here
(database driver errors included) propagates unchanged.
"""


class ToolsHubError(Exception):
    """Base exception for all ToolsHub errors."""
    pass


class NotFoundError(ToolsHubError):
    """Raised when a referenced row does not exist."""

    def __init__(self, entity: str, key):
        self.entity = entity
        self.key = key
        super().__init__(f"{entity} not found: {key}")


class DuplicateReviewError(ToolsHubError):
    """Raised when a user reviews the same tool twice."""

    def __init__(self, user_id: str, tool_id: int):
        self.user_id = user_id
        self.tool_id = tool_id
        super().__init__("You have already reviewed this tool")


class AuthenticationError(ToolsHubError):
    """Raised when the identity provider rejects a login attempt."""
    pass
