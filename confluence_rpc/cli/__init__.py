"""Command line interface for confluence_rpc."""
