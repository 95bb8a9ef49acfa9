#!/usr/bin/env python3
"""
MCP server for the app_client_info channel.
Run via stdio (default): python -m app_client_info.mcp_server
"""

from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.exceptions import ToolError

from .config import configure_logging, get_settings
from .dispatcher import CHANNEL_NAME, GET_DATA, REFRESH, ErrorResponse
from .service import ClientInfoService
from .system_info import select_provider


def get_data(service: ClientInfoService) -> dict:
    response = service.handle(GET_DATA)
    if isinstance(response, ErrorResponse):
        raise ToolError(f"{response.code}: {response.message}")
    return response.result


def refresh(service: ClientInfoService) -> None:
    service.handle(REFRESH)


def invoke(service: ClientInfoService, method: str) -> dict:
    return service.handle(method).to_dict()


def build_server(service: ClientInfoService) -> FastMCP:
    app = FastMCP(CHANNEL_NAME)

    @app.tool(name=GET_DATA)
    def get_data_tool() -> dict:
        """Host platform, the time it was sampled, and platform-specific fields. Cached until refresh."""
        return get_data(service)

    @app.tool(name=REFRESH)
    def refresh_tool():
        """Drop the cached host information; the next getData samples again."""
        refresh(service)

    @app.tool(name="invoke")
    def invoke_tool(method: str) -> dict:
        """Call a method by name and return its response envelope (success, error or notImplemented)."""
        return invoke(service, method)

    return app


def main() -> None:
    settings = get_settings()
    configure_logging(settings.log_level)

    with ClientInfoService(select_provider(settings.platform)) as service:
        build_server(service).run(transport=settings.transport)


if __name__ == "__main__":
    main()
