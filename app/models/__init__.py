from app.models.user import User
from app.models.session import AuthSession
from app.models.tool_category import ToolCategory
from app.models.tool import Tool
from app.models.tool_usage import ToolUsage
from app.models.ai_tool_request import AiToolRequest
from app.models.user_favorite import UserFavorite
from app.models.tool_review import ToolReview
