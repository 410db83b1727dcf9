import os, json, sys, requests, openai
from datetime import date
from dotenv import load_dotenv
from timecamp_tools import schemas as functions

# Load environment variables from .env file
load_dotenv()

MCP_URL        = os.getenv("MCP_URL", "http://localhost:8000").rstrip("/")
MODEL          = os.getenv("OPENAI_MODEL", "gpt-4o-mini")
TIMECAMP_TOKEN = os.getenv("TIMECAMP_TOKEN", "")

# Tools that change data in TimeCamp need a yes from the user first
WRITE_TOOLS = {"add_timecamp_time_entry", "update_timecamp_time_entry", "delete_timecamp_time_entry"}

SYSTEM_PROMPT = ("You are an assistant that logs time to TimeCamp. Today's date is {today}. "
                 "Time entries are created with full 'YYYY-MM-DD HH:MM' start and end times; "
                 "updates take plain 'HH:MM' times. Look up task IDs with get_timecamp_tasks "
                 "before logging time against a task, and look up entry IDs with "
                 "get_timecamp_time_entries before updating or deleting an entry.")

messages = []
client = None


def reset_conversation():
    messages.clear()
    messages.append({"role": "system", "content": SYSTEM_PROMPT.format(today=date.today().isoformat())})


def call_tool(name: str, args: dict) -> str:
    """Forward one tool call to the MCP server and return its text output."""
    headers = {"Authorization": f"Bearer {TIMECAMP_TOKEN}"} if TIMECAMP_TOKEN else {}
    r = requests.post(f"{MCP_URL}/tools/{name}", json=args, headers=headers, timeout=60)
    if r.status_code == 401:
        return "Error: the MCP server rejected the request (no TimeCamp token). Set TIMECAMP_TOKEN."
    if not r.ok:
        return f"Error: MCP server returned {r.status_code}: {r.text}"
    content = r.json().get("content", [])
    return "\n".join(block.get("text", "") for block in content if block.get("type") == "text")


def confirm(name: str, args: dict) -> bool:
    print("\n" + "="*60)
    print("📋 TIMECAMP CHANGE CONFIRMATION")
    print("="*60)
    print(f"🔧 Action: {name}")
    for key, value in args.items():
        print(f"   {key}: {value}")
    print("="*60)
    answer = input("Proceed? (yes/no): ").strip().lower()
    return answer in ['yes', 'y', 'confirm', 'ok', 'proceed', 'sure', 'go ahead']


def chat(user_input: str):
    if not messages:
        reset_conversation()
    messages.append({"role": "user", "content": user_input})

    while True:
        resp = client.chat.completions.create(
            model=MODEL,
            messages=messages,
            tools=functions,
            tool_choice="auto"
        )
        msg = resp.choices[0].message
        messages.append(msg)

        if not msg.tool_calls:
            print(msg.content)
            return

        for tool_call in msg.tool_calls:
            name = tool_call.function.name
            args = json.loads(tool_call.function.arguments or "{}")
            print(f"↳ OpenAI called {name} with {args}")

            if name in WRITE_TOOLS and not confirm(name, args):
                print("❌ Cancelled.")
                result = "The user cancelled this action."
            else:
                try:
                    result = call_tool(name, args)
                except requests.RequestException as e:
                    result = f"Error: could not reach the MCP server: {e}"
                print(result)

            messages.append({"role": "tool",
                             "tool_call_id": tool_call.id,
                             "content": result})


def main():
    global client
    if not os.getenv("OPENAI_API_KEY"):
        print("❌ OpenAI API key not found!")
        print("Please set your OpenAI API key in your .env file:")
        print("OPENAI_API_KEY=your-api-key-here")
        sys.exit(1)
    client = openai.OpenAI()
    try:
        while True:
            chat(input("You: "))
    except (EOFError, KeyboardInterrupt):
        sys.exit()


if __name__ == "__main__":
    main()
