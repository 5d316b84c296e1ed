"""
Handle-based browser automation over MCP.

One `browse` call launches one browser with one page and hands back opaque
Browser and Page IDs. The model keeps those IDs and passes them to later
`interact`, `extract` and `close` calls, each a separate MCP request. The
session registry is the only state that lives between calls.

Every browse starts its own browser process. There is no shared profile and
no attaching to a running Chrome: a browser belongs to whoever holds its
Browser ID, until that caller closes it or the server shuts down.
"""

__version__ = "1.0.0"

__all__ = ["__version__"]
