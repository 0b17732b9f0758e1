"""Subcommands of the ``ts2date`` CLI.

Each command imports its service inside the function body, so
``ts2date --help`` loads only click.
"""
