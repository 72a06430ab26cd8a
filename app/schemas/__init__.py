from app.schemas.user import User, UserUpsert
from app.schemas.tool_category import ToolCategory, ToolCategoryCreate
from app.schemas.tool import Tool, ToolCreate, ToolUpdate, ToolUsageStats
from app.schemas.tool_usage import ToolUsage, ToolUsageCreate
from app.schemas.ai_tool_request import AiToolRequest, AiToolRequestCreate, AiToolRequestUpdate
from app.schemas.user_favorite import UserFavorite, UserFavoriteCreate, FavoriteCheck
from app.schemas.tool_review import ToolReview, ToolReviewCreate, ToolReviewUpdate
