"""
Lift Gateway — operation gateway for the lifting tracker.

Routes named operations to legacy credential checks, legacy workout
records in DynamoDB, and Amazon Bedrock for recommendations and chat.

Runs two ways:
- lambda: ``lift_gateway.handler.handler`` as the GraphQL resolver
- mcp: every operation exposed as an MCP tool (stdio or http transport)
"""

import os

from fastmcp import FastMCP

from lift_gateway import auth_tool
from lift_gateway import workouts
from lift_gateway import assistant


def create_app() -> FastMCP:
    """Create and configure the MCP app with all tools registered."""
    app = FastMCP("Lift Gateway v1.0")

    # Register auth tools (credential check, feature list)
    app = auth_tool.register_tools(app)

    # Register workout record tools
    app = workouts.register_tools(app)

    # Register model-backed tools
    app = assistant.register_tools(app)

    return app


def main():
    """Initialize the MCP server and run with configured transport.

    Environment variables:
    - MCP_TRANSPORT: 'stdio' (default) or 'http'
    - MCP_HOST: Host to bind to (default: '0.0.0.0')
    - MCP_PORT: Port for HTTP transport (default: 8081)
    """
    app = create_app()

    transport = os.environ.get("MCP_TRANSPORT", "stdio")

    if transport == "http":
        host = os.environ.get("MCP_HOST", "0.0.0.0")
        port = int(os.environ.get("MCP_PORT", "8081"))
        app.run(transport="http", host=host, port=port)
    else:
        app.run()


if __name__ == "__main__":
    main()
