import logging

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import HTMLResponse

from timecamp_tools import by_name, schemas

from . import __version__
from .config import HOST, LOG_LEVEL, PORT
from .handlers import routers
from .pages import index_html

logging.basicConfig(
    level=LOG_LEVEL,
    format="[%(asctime)s] %(levelname)s | %(name)s | %(message)s",
)
logger = logging.getLogger("timecamp-mcp")

app = FastAPI(title="TimeCamp MCP Server", version=__version__)

for router in routers:
    app.include_router(router)


@app.get("/", response_class=HTMLResponse)
async def index(request: Request):
    return index_html(schemas, str(request.base_url))


@app.get("/health")
async def health():
    return {"status": "ok", "tool": "timecamp-mcp", "version": __version__}


@app.get("/tools")
async def list_tools():
    """Tool catalog in function-calling schema form."""
    return {"tools": schemas}


@app.get("/tools/{name}")
async def describe_tool(name: str):
    if name not in by_name:
        raise HTTPException(404, f"Unknown tool '{name}'")
    return by_name[name]


def run():
    import uvicorn
    logger.info("Starting TimeCamp MCP server on %s:%s", HOST, PORT)
    uvicorn.run(app, host=HOST, port=PORT)


if __name__ == "__main__":
    run()
