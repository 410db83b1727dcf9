from pydantic import BaseModel, ConfigDict, Field

from ..dispatch import Tool, tool_router


class UpdateTimeEntryPayload(BaseModel):
    """Partial update; a field left out (``None``) is not sent to TimeCamp."""
    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    entry_id: str = Field(..., alias="entryId")
    start: str | None = Field(None, alias="from", description="New start time, HH:MM")
    end: str | None = Field(None, alias="to", description="New end time, HH:MM")
    note: str | None = None
    task_id: str | None = None


async def update_time_entry(api, payload: UpdateTimeEntryPayload) -> dict:
    return await api.update_entry(
        payload.entry_id,
        start=payload.start,
        end=payload.end,
        note=payload.note,
        task_id=payload.task_id,
    )


tool = Tool(
    name="update_timecamp_time_entry",
    payload=UpdateTimeEntryPayload,
    run=update_time_entry,
    error_prefix="Error updating time entry",
)
router = tool_router(tool)
