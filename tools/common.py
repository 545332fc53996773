# =============================================================================
# tools/common.py  —  Shared Plumbing for Every Tool Group
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Everything the nine tools/<group>.py modules have in common:
#     - coloured stderr logging of each call (request / status / response)
#     - the annotations and paging parameter types every tool reuses
#     - fetch(): one GET through the API adapter, parsed into a model
#     - respond(): ToolOutput → FastMCP ToolResult (text + structured)
#
# ERROR MAPPING:
#   ApiError (non-2xx upstream) and ResponseShapeError (required field
#   missing) become ToolError, whose message FastMCP passes to the client
#   unchanged, so "API 404: ..." reaches the caller with its status code.
#   Anything else (network failure, bug) propagates and FastMCP reports it
#   as a tool execution error.
# =============================================================================

import json
import logging
from typing import Annotated, Any, Mapping, Optional, Type, TypeVar

from fastmcp.exceptions import ToolError
from fastmcp.tools.tool import ToolResult
from pydantic import Field

from core.api import ApiError, ParamValue, PoligraphClient
from core.models import ResponseShapeError, parse_response
from core.narrative import ToolOutput

M = TypeVar("M")

# ANSI color codes for terminal output
_CYAN = "\033[36m"     # Requests (tool calls with params)
_GREEN = "\033[32m"    # Responses (structured output)
_YELLOW = "\033[33m"   # Status/progress messages
_RED = "\033[31m"      # Upstream failures
_RESET = "\033[0m"     # Reset to default terminal color

_LOG_PREVIEW_CHARS = 500

logger = logging.getLogger("poligraph.tools")


def _log_request(tool_name: str, **params) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items() if v is not None)
    logger.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    """Log an intermediate status message in YELLOW."""
    logger.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_error(tool_name: str, message: str) -> None:
    logger.warning(f"{_RED}  ✗ {tool_name} failed: {message}{_RESET}")


def _log_response(tool_name: str, result: dict) -> dict:
    """Log the structured response as compact JSON in GREEN, then return it."""
    dumped = json.dumps(result, separators=(",", ":"), ensure_ascii=False, default=str)
    if len(dumped) > _LOG_PREVIEW_CHARS:
        dumped = dumped[:_LOG_PREVIEW_CHARS] + "…"
    logger.info(f"{_GREEN}  ← {tool_name} response: {dumped}{_RESET}")
    return result


# =============================================================================
# Tool metadata shared by every registration
# =============================================================================
READ_ONLY = {
    "readOnlyHint": True,
    "destructiveHint": False,
    "openWorldHint": False,
}


def invocation_meta(invoking: str, invoked: str) -> dict[str, str]:
    """Progress strings some clients show while a tool runs."""
    return {
        "openai/toolInvocation/invoking": invoking,
        "openai/toolInvocation/invoked": invoked,
    }


Page = Annotated[int, Field(ge=1, description="Numéro de page")]
Limit = Annotated[int, Field(ge=1, le=100, description="Résultats par page (max 100)")]
PoliticianSlug = Annotated[
    str,
    Field(min_length=1, description="Identifiant du politicien (ex: 'emmanuel-macron', 'marine-le-pen')"),
]


# =============================================================================
# Fetch / respond
# =============================================================================
async def fetch(
    api: PoligraphClient,
    tool_name: str,
    model: Type[M],
    path: str,
    params: Optional[Mapping[str, ParamValue]] = None,
) -> M:
    """GET ``path`` and parse the body into ``model``.

    Raises:
        ToolError: upstream answered non-2xx, or the body lacks a required field.
    """
    try:
        payload: Any = await api.get(path, params)
        return parse_response(model, payload)
    except ApiError as exc:
        _log_error(tool_name, exc.message)
        raise ToolError(exc.message) from exc
    except ResponseShapeError as exc:
        _log_error(tool_name, str(exc))
        raise ToolError(str(exc)) from exc


def respond(tool_name: str, output: ToolOutput) -> ToolResult:
    _log_response(tool_name, output.data)
    return ToolResult(content=output.text, structured_content=output.data)
