"""
Entry point for running lift_gateway as a module.

Usage:
    python -m lift_gateway                      # Run MCP server with stdio transport
    python -m lift_gateway --http               # Run MCP server with HTTP transport
    python -m lift_gateway --http --port 9000   # Run HTTP on custom port
    python -m lift_gateway --event event.json   # Run one invocation record and print the result
"""

import argparse
import json
import os
import sys

from lift_gateway import create_app


def run_event(path: str) -> str:
    """Run the invocation record stored in ``path`` and return the transport scalar."""
    from lift_gateway.client_factory import get_context
    from lift_gateway.envelope import encode_transport
    from lift_gateway.router import route

    with open(path, "r") as f:
        event = json.load(f)
    return encode_transport(route(event, get_context()))


def main():
    parser = argparse.ArgumentParser(
        description="Lift Gateway - operation gateway for the lifting tracker"
    )
    parser.add_argument(
        "--http",
        action="store_true",
        help="Use http transport instead of stdio"
    )
    parser.add_argument(
        "--host",
        default="0.0.0.0",
        help="Host to bind to (default: 0.0.0.0)"
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8081,
        help="Port for HTTP transport (default: 8081)"
    )
    parser.add_argument(
        "--event",
        metavar="FILE",
        help="Run a single invocation record from a JSON file and exit"
    )

    args = parser.parse_args()

    if args.event:
        sys.stdout.write(run_event(args.event) + "\n")
        return

    # Set environment variables for the app
    if args.http:
        os.environ["MCP_TRANSPORT"] = "http"
        os.environ["MCP_HOST"] = args.host
        os.environ["MCP_PORT"] = str(args.port)
    else:
        os.environ["MCP_TRANSPORT"] = "stdio"

    app = create_app()

    if args.http:
        print(f"Starting Lift Gateway MCP server on http://{args.host}:{args.port}/mcp")
        app.run(transport="http", host=args.host, port=args.port)
    else:
        app.run()


if __name__ == "__main__":
    main()
