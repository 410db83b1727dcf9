# Tool definition for updating a time entry
schema = {
    "type": "function",
    "function": {
        "name": "update_timecamp_time_entry",
        "description": (
            "Update an existing TimeCamp time entry. Only the fields you pass are "
            "changed. Times are HH:MM on the entry's own day; if only one of "
            "from/to is given the other is kept from the existing entry."
        ),
        "parameters": {
            "type": "object",
            "properties": {
                "entryId": {"type": "string", "description": "ID of the time entry to update"},
                "from": {"type": "string", "description": "Optional start time in format HH:MM (e.g. 13:28)"},
                "to": {"type": "string", "description": "Optional end time in format HH:MM (e.g. 15:28)"},
                "note": {"type": "string", "description": "Optional note/description for the time entry"},
                "task_id": {"type": "string", "description": "Optional TimeCamp task ID to associate with the time entry"}
            },
            "required": ["entryId"]
        }
    }
}
