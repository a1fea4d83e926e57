"""
ID generation utilities & it provides:
- Goal IDs
- Step IDs

The main purpose:
Consistent, prefixed identifiers for every persisted row.
"""

import uuid

def new_id(prefix: str) -> str:
    return f"{prefix}_{uuid.uuid4().hex[:16]}"
