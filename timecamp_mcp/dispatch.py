"""Turn one tool call into one TimeCamp client call and a block of text."""
import json
import logging
from typing import Any, Awaitable, Callable, NamedTuple

from fastapi import APIRouter, Body, Depends
from pydantic import BaseModel, ValidationError

from .deps import get_bearer_token, get_transport
from .timecamp import TimeCampAPI, TimeCampError

logger = logging.getLogger(__name__)


class Tool(NamedTuple):
    name: str
    payload: type[BaseModel]
    run: Callable[[TimeCampAPI, Any], Awaitable[dict]]
    error_prefix: str
    # read tools render "<message>:\n<json>", writes "<message> Response: <json>"
    listing: bool = False


def render(tool: Tool, envelope: dict) -> str:
    if not envelope.get("success"):
        return f"{tool.error_prefix}: {envelope.get('error')}"
    body = json.dumps(envelope.get("data"), indent=2, ensure_ascii=False)
    separator = ":\n" if tool.listing else " Response: "
    return f"{envelope['message']}{separator}{body}"


def _describe(error: ValidationError) -> str:
    parts = []
    for err in error.errors():
        field = ".".join(str(loc) for loc in err["loc"])
        parts.append(f"{field}: {err['msg']}" if field else err["msg"])
    return "; ".join(parts)


async def run_tool(tool: Tool, arguments: dict | None, token: str, transport=None) -> str:
    """Validate ``arguments``, call the client and render the result.

    Never raises: every failure comes back as ``"<error prefix>: <reason>"``.
    """
    logger.info("Tool call: %s", tool.name)
    try:
        payload = tool.payload.model_validate(arguments or {})
        api = TimeCampAPI(token, transport=transport)
        envelope = await tool.run(api, payload)
    except ValidationError as e:
        logger.warning("Invalid arguments for %s: %s", tool.name, e)
        return f"{tool.error_prefix}: {_describe(e)}"
    except TimeCampError as e:
        logger.warning("%s: %s", tool.name, e)
        return f"{tool.error_prefix}: {e}"
    except Exception as e:
        logger.exception("Unexpected error in %s", tool.name)
        return f"{tool.error_prefix}: {e}"
    return render(tool, envelope)


def tool_router(tool: Tool) -> APIRouter:
    """Expose ``tool`` as ``POST /tools/<name>``."""
    router = APIRouter()

    @router.post(f"/tools/{tool.name}", name=tool.name)
    async def call(arguments: dict | None = Body(None),
                   token: str = Depends(get_bearer_token),
                   transport=Depends(get_transport)):
        text = await run_tool(tool, arguments, token, transport)
        return {"tool": tool.name, "content": [{"type": "text", "text": text}]}

    return router
