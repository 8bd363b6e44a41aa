"""Deep merge for nested configuration dictionaries."""

from typing import Any, Dict, Mapping


def is_mapping(value: Any) -> bool:
    """True for dict-like values; lists and scalars are atomic."""
    return isinstance(value, Mapping)


def merge_deep(target: Dict[str, Any], source: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Merge ``source`` onto ``target`` in place, recursing into nested mappings.

    Sequences are replaced wholesale, never merged element-wise. A mapping in
    ``source`` replaces a non-mapping value in ``target``.

    Args:
        target: Dictionary to update
        source: Values to merge in

    Returns:
        The updated ``target``
    """
    if not (is_mapping(target) and is_mapping(source)):
        return target

    for key, value in source.items():
        if is_mapping(value):
            if not is_mapping(target.get(key)):
                target[key] = {}
            merge_deep(target[key], value)
        else:
            target[key] = value

    return target
