from app.services.auth_service import (
    authenticate,
    build_authorize_url,
    complete_login,
    get_provider_metadata,
    verify_id_token
)
from app.services.tool_execution_service import (
    ToolExecutionProvider,
    MockToolExecutionProvider,
    execute_tool_for_request,
    get_tool_execution_provider
)
