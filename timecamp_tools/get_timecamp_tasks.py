# Tool definition for listing projects and tasks
schema = {
    "type": "function",
    "function": {
        "name": "get_timecamp_tasks",
        "description": (
            "Fetch all non-archived TimeCamp projects and tasks with their IDs, "
            "parent IDs and hierarchy level. Use it to find a task_id before "
            "logging time against a task."
        ),
        "parameters": {
            "type": "object",
            "properties": {},
            "required": []
        }
    }
}
