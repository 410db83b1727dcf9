# Tool definition for deleting a time entry
schema = {
    "type": "function",
    "function": {
        "name": "delete_timecamp_time_entry",
        "description": "Delete a TimeCamp time entry by its ID.",
        "parameters": {
            "type": "object",
            "properties": {
                "entryId": {"type": "string", "description": "ID of the time entry to delete"}
            },
            "required": ["entryId"]
        }
    }
}
