"""
MCP server for bureau - exposes task and report allocation as tools.
"""

from .server import BureauMCPServer
from .handlers import BureauToolHandlers

__all__ = ['BureauMCPServer', 'BureauToolHandlers']
