"""
Input validation utilities.
"""

from typing import Any


def validate_index_name(index: str) -> None:
    """
    Reject empty index names for operations that require one.
    
    Args:
        index: Index name or comma separated list
        
    Raises:
        ValueError: If index is empty
    """
    if not index:
        raise ValueError("Index name cannot be empty")


def validate_size(size: int, max_size: int = 10000) -> int:
    """
    Validate and clamp size parameter.
    
    Args:
        size: Requested size
        max_size: Maximum allowed size
        
    Returns:
        Valid size value
    """
    return clamp_value(size, min_value=1, max_value=max_size)


def clamp_value(value: Any, min_value: Any, max_value: Any) -> Any:
    """
    Clamp a value between min and max.
    
    Args:
        value: Value to clamp
        min_value: Minimum allowed value
        max_value: Maximum allowed value
        
    Returns:
        Clamped value
    """
    return max(min_value, min(value, max_value))
