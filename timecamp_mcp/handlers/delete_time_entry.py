from pydantic import BaseModel, ConfigDict, Field

from ..dispatch import Tool, tool_router


class DeleteTimeEntryPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    entry_id: str = Field(..., alias="entryId")


async def delete_time_entry(api, payload: DeleteTimeEntryPayload) -> dict:
    return await api.delete_entry(payload.entry_id)


tool = Tool(
    name="delete_timecamp_time_entry",
    payload=DeleteTimeEntryPayload,
    run=delete_time_entry,
    error_prefix="Error deleting time entry",
)
router = tool_router(tool)
