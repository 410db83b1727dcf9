# Tool definition for listing time entries
schema = {
    "type": "function",
    "function": {
        "name": "get_timecamp_time_entries",
        "description": (
            "List the user's TimeCamp time entries between two dates (inclusive). "
            "Each entry includes task_name, note, duration_seconds and duration_hours."
        ),
        "parameters": {
            "type": "object",
            "properties": {
                "from": {"type": "string", "description": "Start date in format YYYY-MM-DD (e.g. 2025-06-22)"},
                "to": {"type": "string", "description": "End date in format YYYY-MM-DD (e.g. 2025-06-22)"}
            },
            "required": ["from", "to"]
        }
    }
}
