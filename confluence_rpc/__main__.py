"""Entry point for running confluence_rpc as a module: python -m confluence_rpc"""

from confluence_rpc.cli.commands import app

if __name__ == "__main__":
    app()
