"""
Gen-Form MCP Server Entry Point.

Run the MCP server with either stdio or SSE transport.

Usage:
    # stdio mode (for desktop MCP clients)
    python run_mcp_server.py --transport stdio

    # SSE mode (for Docker/remote)
    python run_mcp_server.py --transport sse --port 8080

    # Use environment variables
    MCP_TRANSPORT=sse MCP_PORT=8080 python run_mcp_server.py
"""

import argparse
import asyncio
import sys
from pathlib import Path

# Add src to path for local development
sys.path.insert(0, str(Path(__file__).parent / "src"))

from gen_form.config import get_config
from gen_form.mcp_server import run_mcp_server


def main():
    """Main entry point."""
    config = get_config()

    parser = argparse.ArgumentParser(
        description="Gen-Form MCP Server",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Desktop client (stdio)
  python run_mcp_server.py --transport stdio

  # Docker/Remote (SSE)
  python run_mcp_server.py --transport sse --port 8080

  # Using environment variables
  MCP_TRANSPORT=sse MCP_PORT=8080 python run_mcp_server.py

Environment Variables:
  MCP_TRANSPORT                    Transport type: stdio or sse (default: stdio)
  MCP_PORT                         Port for SSE transport (default: 8080)
  GEN_FORM_USE_NEXTJS              Import next/link in generated code (default: true)
  GEN_FORM_DEFAULT_COMPONENT_NAME  Component name for untitled forms (default: GeneratedForm)
  GEN_FORM_LOG_LEVEL               Logging level (default: INFO)
        """,
    )

    parser.add_argument(
        "--transport",
        choices=["stdio", "sse"],
        default=config.mcp_transport,
        help=f"Transport type (default: {config.mcp_transport})",
    )

    parser.add_argument(
        "--host",
        default="0.0.0.0",
        help="Host for SSE transport (default: 0.0.0.0)",
    )

    parser.add_argument(
        "--port",
        type=int,
        default=config.mcp_port,
        help=f"Port for SSE transport (default: {config.mcp_port})",
    )

    args = parser.parse_args()

    # stdout carries the protocol in stdio mode
    out = sys.stderr if args.transport == "stdio" else sys.stdout
    print("=" * 60, file=out)
    print("Gen-Form MCP Server", file=out)
    print("=" * 60, file=out)
    print(f"Transport: {args.transport}", file=out)
    if args.transport == "sse":
        print(f"Host: {args.host}", file=out)
        print(f"Port: {args.port}", file=out)
    print(f"Next.js imports: {config.use_nextjs}", file=out)
    print("=" * 60, file=out)

    try:
        asyncio.run(
            run_mcp_server(
                transport=args.transport,
                host=args.host,
                port=args.port,
            )
        )
    except KeyboardInterrupt:
        print("\nServer stopped.", file=out)
    except Exception as e:
        print(f"Error: {e}", file=out)
        sys.exit(1)


if __name__ == "__main__":
    main()
