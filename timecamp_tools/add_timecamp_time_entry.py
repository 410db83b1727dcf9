# Tool definition for creating a time entry
schema = {
    "type": "function",
    "function": {
        "name": "add_timecamp_time_entry",
        "description": (
            "Create a TimeCamp time entry. Start and end are full timestamps "
            "in YYYY-MM-DD HH:MM format; the entry is logged on the start date."
        ),
        "parameters": {
            "type": "object",
            "properties": {
                "from": {"type": "string", "description": "Start time in format YYYY-MM-DD HH:MM (e.g. 2025-06-22 13:28)"},
                "to": {"type": "string", "description": "End time in format YYYY-MM-DD HH:MM (e.g. 2025-06-22 15:28)"},
                "note": {"type": "string", "description": "Note/description for the time entry"},
                "task_id": {"type": "string", "description": "Optional TimeCamp task ID to associate with the time entry"}
            },
            "required": ["from", "to", "note"]
        }
    }
}
