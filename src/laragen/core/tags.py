"""
Tag extraction.

Hosts attach annotations as a list of records. Generators look tags up by
name, so the list is folded into a name -> parameters mapping.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from laragen.core.types import Tag
from laragen.logging import get_logger

logger = get_logger(__name__)

TagMap = dict[str, dict[str, Any]]


def extract_tags(tags: Iterable[Tag | Mapping[str, Any]] | None) -> TagMap:
    """
    Fold annotation records into a mapping keyed by tag name.

    Records are applied left to right, so a later tag with the same name
    replaces an earlier one. Records without a name are skipped.

    Args:
        tags: Tag models or plain mappings carrying a ``name`` key

    Returns:
        Mapping from tag name to the record's remaining parameters
    """
    result: TagMap = {}
    if not tags:
        return result

    for tag in tags:
        if isinstance(tag, Tag):
            name, params = tag.name, tag.params
        else:
            name = tag.get("name")
            params = {key: value for key, value in tag.items() if key != "name"}

        if not name:
            logger.debug("Skipping tag without a name", params=params)
            continue
        result[name] = params

    return result


def tag_value(tags: TagMap, name: str, default: Any = None) -> Any:
    """
    Get the ``value`` parameter of a tag.

    A tag that is missing, or present without a usable value, yields
    ``default``.
    """
    params = tags.get(name)
    if not params:
        return default
    value = params.get("value")
    if value is None or value == "":
        return default
    return value
