# Models package
from toolcrib.models.user import User, UserRole
from toolcrib.models.tool import Tool, ToolStatus
from toolcrib.models.log import Log, LogType
