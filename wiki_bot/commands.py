"""
Application command definitions registered with Discord per guild.
"""

from typing import Dict

from .config import DEFAULT_COMMAND_DESCRIPTION

WIKI_COMMAND = "wiki"
QUERY_OPTION = "query"

# Discord API enum values
CHAT_INPUT = 1
STRING_OPTION = 3
MANAGE_MESSAGES = 1 << 13


def wiki_command_schema(description: str = DEFAULT_COMMAND_DESCRIPTION) -> Dict:
    """JSON body for the /wiki command, as accepted by the bulk-overwrite endpoint."""
    return {
        "name": WIKI_COMMAND,
        "type": CHAT_INPUT,
        "description": description,
        "options": [
            {
                "name": QUERY_OPTION,
                "description": "Search term for wiki",
                "type": STRING_OPTION,
                "required": True,
                "autocomplete": True,
            }
        ],
        "default_member_permissions": str(MANAGE_MESSAGES),
    }
