"""
Primitive document operations for Elasticsearch.
"""

from typing import Dict, Any

from elastic_driver.errors import RequestError
from elastic_driver.utils.connection import get_client
from elastic_driver.utils.validation import validate_index_name


async def fetch_document(index: str, id: str) -> Dict[str, Any]:
    """
    Fetch a single document by ID.
    
    Args:
        index: Index name
        id: Document ID
        
    Returns:
        The get API response, or ``{"found": False, ...}`` if missing
    """
    validate_index_name(index)
    
    async with get_client() as client:
        try:
            return await client.get_document(index, id)
        except RequestError as e:
            if e.status_code == 404:
                return {"_index": index, "_id": id, "found": False}
            raise
