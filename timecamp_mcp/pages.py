"""Static landing page."""
from html import escape

INDEX_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>TimeCamp MCP Server</title>
</head>
<body style="font-family: system-ui; max-width: 800px; margin: 50px auto; padding: 20px;">
  <h1>TimeCamp MCP Server</h1>
  <p>This is a Model Context Protocol (MCP) server for TimeCamp integration.</p>
  <p>Each tool is served at <code>POST /tools/&lt;tool name&gt;</code> and takes its arguments as a JSON object.
     The tool catalog with argument schemas is at <code>GET /tools</code>.</p>

  <h2>Available Tools</h2>
  <ul style="line-height: 1.6;">
{tools}
  </ul>

  <h2>Authentication</h2>
  <p>Include your TimeCamp API token in the Authorization header:</p>
  <pre style="background: #f4f4f4; padding: 15px; border-radius: 5px;">Authorization: Bearer YOUR_TIMECAMP_TOKEN</pre>
  <p>Without the header the server falls back to its own <code>TIMECAMP_TOKEN</code>, if one is configured.</p>

  <h2>Example</h2>
  <pre style="background: #f4f4f4; padding: 15px; border-radius: 5px; overflow-x: auto;">curl -X POST {base_url}tools/get_timecamp_time_entries \\
  -H "Authorization: Bearer &lt;auth-token&gt;" \\
  -H "Content-Type: application/json" \\
  -d '{{"from": "2025-06-21", "to": "2025-06-21"}}'</pre>
  <p><strong>Note:</strong> Replace <code>&lt;auth-token&gt;</code> with your actual TimeCamp API token.</p>
</body>
</html>
"""


def index_html(schemas: list, base_url: str = "/") -> str:
    items = "\n".join(
        f"    <li><strong>{escape(s['function']['name'])}</strong> - {escape(s['function']['description'])}</li>"
        for s in schemas
    )
    return INDEX_TEMPLATE.format(tools=items, base_url=escape(base_url))
