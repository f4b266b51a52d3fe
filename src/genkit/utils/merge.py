import copy
import logging
from typing import Dict

logger = logging.getLogger(__name__)


def deep_merge(parent: Dict, child: Dict) -> Dict:
    """
    Recursively merges a child dictionary into a parent dictionary.
        - Dictionaries are merged recursively.
        - Lists are merged by extending unique items.
        - All other types from the child will overwrite the parent.

    Neither input is modified.
    """
    merged = copy.deepcopy(parent)
    for key, child_value in child.items():
        if key not in merged:
            merged[key] = copy.deepcopy(child_value)
            continue

        parent_value = merged[key]

        if isinstance(parent_value, dict) and isinstance(child_value, dict):
            merged[key] = deep_merge(parent_value, child_value)
        elif isinstance(parent_value, list) and isinstance(child_value, list):
            parent_set = {str(item) for item in parent_value}
            for item in child_value:
                if str(item) not in parent_set:
                    merged[key].append(item)
        else:
            logger.debug(f"Overriding '{key}': {parent_value!r} -> {child_value!r}")
            merged[key] = copy.deepcopy(child_value)
    return merged
