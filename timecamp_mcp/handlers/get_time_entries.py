from datetime import datetime, timedelta

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .. import timecamp
from ..dispatch import Tool, tool_router

# offsets from today (UTC, same clock as the 30-day lookup window)
RELATIVE_DAYS = {"today": 0, "yesterday": -1, "tomorrow": 1}


class TimeEntriesQuery(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    start: str = Field(..., alias="from", description="First day, YYYY-MM-DD")
    end: str = Field(..., alias="to", description="Last day, YYYY-MM-DD")

    @field_validator("start", "end")
    @classmethod
    def iso_date(cls, v):
        v_lower = v.lower().strip()
        if v_lower in RELATIVE_DAYS:
            return (timecamp.today() + timedelta(days=RELATIVE_DAYS[v_lower])).isoformat()
        try:
            return datetime.strptime(v_lower, "%Y-%m-%d").date().isoformat()
        except ValueError:
            raise ValueError(
                f"Unrecognized date '{v}', use YYYY-MM-DD, 'today', 'yesterday' or 'tomorrow'"
            ) from None


async def get_time_entries(api, payload: TimeEntriesQuery) -> dict:
    return await api.list_entries(payload.start, payload.end, "me", "tags")


tool = Tool(
    name="get_timecamp_time_entries",
    payload=TimeEntriesQuery,
    run=get_time_entries,
    error_prefix="Error fetching time entries",
    listing=True,
)
router = tool_router(tool)
