from typing import List
from pydantic import BaseModel

class CacheStats(BaseModel):
    """Snapshot of the data service cache"""
    size: int
    keys: List[str]
    using_fallback: bool
