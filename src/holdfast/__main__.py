# holdfast:header:start
#
#   project      : Holdfast
#   file         : __main__.py
#   file_relpath : src/holdfast/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 The Holdfast Authors
#
# holdfast:header:end

"""Module entry point for running Holdfast via ``python -m holdfast``.

It delegates directly to `holdfast.cli.main.cli`, so there is a single CLI
entry point regardless of how Holdfast is launched.

Examples:
    Run the encapsulation demo using the module interface::

        python -m holdfast demo
"""

from __future__ import annotations

from holdfast.cli.main import cli

if __name__ == "__main__":
    cli()
