import asyncio
from typing import Literal

import asyncclick as click
from fastmcp import FastMCP
from fastmcp.server.middleware.logging import LoggingMiddleware
from fastmcp.tools import FunctionTool
from fastmcp.utilities.logging import configure_logging, get_logger

from kagi_ken.servers.kagi import KagiServer

logger = get_logger(__name__)

TOKEN_ENV_VAR = "KAGI_SESSION_TOKEN"
TIMEOUT_ENV_VAR = "KAGI_TIMEOUT"


class ConfigurationError(Exception):
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


def build_mcp(token: str | None, timeout: float | None = None) -> FastMCP[None]:
    if not token:
        msg = f"You must provide a Kagi session token via --token or the {TOKEN_ENV_VAR} environment variable"
        raise ConfigurationError(msg)

    kagi_server = KagiServer(token=token, timeout=timeout)

    mcp = FastMCP[None](name="Kagi MCP")

    mcp.add_tool(tool=FunctionTool.from_function(fn=kagi_server.search, name="kagi_search"))
    mcp.add_tool(tool=FunctionTool.from_function(fn=kagi_server.summarize, name="kagi_summarize"))

    mcp.add_middleware(middleware=LoggingMiddleware())

    return mcp


@click.command()
@click.option("--token", type=str, envvar=TOKEN_ENV_VAR, default=None, help="The Kagi session token (the kagi_session cookie)")
@click.option("--timeout", type=float, envvar=TIMEOUT_ENV_VAR, default=None, help="Total timeout for each Kagi request, in seconds")
@click.option(
    "--mcp-transport", type=click.Choice(["stdio", "streamable-http"]), default="stdio", help="The transport to run the MCP server on"
)
@click.option(
    "--log-level", type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"]), default="INFO", help="The log level of the server"
)
async def cli(token: str | None, timeout: float | None, mcp_transport: Literal["stdio", "streamable-http"], log_level: str):
    configure_logging(level=log_level)  # pyright: ignore[reportArgumentType]

    mcp = build_mcp(token=token, timeout=timeout)

    logger.info(f"Starting Kagi MCP on {mcp_transport}")

    await mcp.run_async(transport=mcp_transport)


def run_mcp():
    asyncio.run(cli())


if __name__ == "__main__":
    run_mcp()
