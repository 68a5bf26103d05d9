"""
Message event names exchanged with the extension's UI and content layers.
"""


class InboundEvent:
    """Commands the UI/content layers send to the background agent."""
    GET_INVENTORY = "get-inventory"


class ContentScriptEvent:
    """Messages the background agent sends into a tab."""
    CONTENT_SCRIPT_CHECK = "content-script-check"
