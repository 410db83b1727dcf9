from importlib import import_module
from pkgutil import iter_modules
from pathlib import Path
from fastapi import APIRouter

from ..dispatch import Tool, run_tool

routers = []
tools = {}

_package_dir = Path(__file__).parent
for mod in iter_modules([str(_package_dir)]):
    if mod.ispkg or mod.name == "__init__":
        continue
    module = import_module(f"{__name__}.{mod.name}")
    router = getattr(module, "router", None)
    if isinstance(router, APIRouter):
        routers.append(router)
    tool = getattr(module, "tool", None)
    if isinstance(tool, Tool):
        tools[tool.name] = tool


async def call_tool(name: str, arguments: dict | None, token: str, transport=None) -> str:
    """Dispatch a tool call by name and return the rendered text."""
    tool = tools.get(name)
    if tool is None:
        return f"Error: Unknown tool '{name}'"
    return await run_tool(tool, arguments, token, transport)
