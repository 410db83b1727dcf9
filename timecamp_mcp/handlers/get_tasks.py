from pydantic import BaseModel

from ..dispatch import Tool, tool_router


class TasksQuery(BaseModel):
    pass


async def get_tasks(api, payload: TasksQuery) -> dict:
    return await api.list_tasks()


tool = Tool(
    name="get_timecamp_tasks",
    payload=TasksQuery,
    run=get_tasks,
    error_prefix="Error fetching tasks",
    listing=True,
)
router = tool_router(tool)
