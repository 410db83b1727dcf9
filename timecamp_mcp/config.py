"""Shared configuration for the TimeCamp MCP server."""
import os
from dotenv import load_dotenv

load_dotenv()

BASE_URL = os.getenv("TIMECAMP_BASE_URL", "https://app.timecamp.com/third_party/api")
TOKEN = os.getenv("TIMECAMP_TOKEN", "")
TIMEOUT = float(os.getenv("TIMECAMP_TIMEOUT", "10"))
SERVICE_NAME = "timecamp-mcp"

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8000"))
