from pydantic import BaseModel, ConfigDict, Field

from ..dispatch import Tool, tool_router


class AddTimeEntryPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    start: str = Field(..., alias="from", description="Start time, YYYY-MM-DD HH:MM")
    end: str = Field(..., alias="to", description="End time, YYYY-MM-DD HH:MM")
    note: str
    task_id: str | None = None


async def add_time_entry(api, payload: AddTimeEntryPayload) -> dict:
    return await api.create_entry(payload.start, payload.end, payload.note, payload.task_id)


tool = Tool(
    name="add_timecamp_time_entry",
    payload=AddTimeEntryPayload,
    run=add_time_entry,
    error_prefix="Error creating time entry",
)
router = tool_router(tool)
