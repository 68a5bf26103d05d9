"""
Registered content script — the one rule the permission sync engine owns.
"""

from pydantic import BaseModel

CONTENT_SCRIPT_ID = "content-script"
CONTENT_SCRIPT_FILES = ["scripts/content-script.js"]
CONTENT_SCRIPT_RUN_AT = "document_idle"


class RegisteredContentScript(BaseModel):
    id: str = CONTENT_SCRIPT_ID
    js: list[str] = list(CONTENT_SCRIPT_FILES)
    matches: list[str] = []
    run_at: str = CONTENT_SCRIPT_RUN_AT
