from typing import Any, Dict, List, Optional, Union

LinkValue = Union[Dict[str, Any], List[Dict[str, Any]]]


def get_link(payload: Dict[str, Any], relation: str) -> Optional[LinkValue]:
    """
    Safely retrieves a link object (or array of link objects) from _links.
    """
    if not payload or not isinstance(payload.get("_links"), dict):
        return None
    return payload["_links"].get(relation)


def get_link_href(payload: Dict[str, Any], relation: str) -> Optional[str]:
    """
    Extracts the 'href' from a single-object link relation.
    Example: get_link_href(order_json, 'self') -> '/orders/1'
    """
    link = get_link(payload, relation)
    return link.get("href") if isinstance(link, dict) else None


def get_link_title(payload: Dict[str, Any], relation: str) -> Optional[str]:
    """
    Extracts the 'title' (readable name) from a single-object link relation.
    Example: get_link_title(order_json, 'customer') -> 'Ada Lovelace'
    """
    link = get_link(payload, relation)
    return link.get("title") if isinstance(link, dict) else None


def get_embedded(payload: Dict[str, Any], relation: str) -> Optional[Any]:
    """
    Extracts an embedded resource from the _embedded dictionary.
    """
    if not payload or not isinstance(payload.get("_embedded"), dict):
        return None
    return payload["_embedded"].get(relation)


def parse_id_from_href(href: Optional[str]) -> Optional[int]:
    """
    Extracts the numeric ID from a RESTful URL.
    Example: '/orders/42' -> 42
    """
    if not href:
        return None
    try:
        # Last non-empty segment
        return int(href.strip("/").split("/")[-1])
    except (ValueError, IndexError):
        return None


# --- JSON:API ---


def get_relationship(payload: Dict[str, Any], name: str) -> Optional[Dict[str, Any]]:
    """
    Retrieves a relationship object from data.relationships.
    """
    data = payload.get("data") if payload else None
    if not isinstance(data, dict):
        return None
    relationships = data.get("relationships")
    if not isinstance(relationships, dict):
        return None
    value = relationships.get(name)
    return value if isinstance(value, dict) else None


def get_related_href(payload: Dict[str, Any], name: str) -> Optional[str]:
    """
    Example: get_related_href(doc, 'items') -> '/orders/1/relationships/items'
    """
    relationship = get_relationship(payload, name)
    if not relationship or not isinstance(relationship.get("links"), dict):
        return None
    return relationship["links"].get("related")


def get_relationship_data(payload: Dict[str, Any], name: str) -> Any:
    """Resource linkage of a relationship; None when absent or null."""
    relationship = get_relationship(payload, name)
    return relationship.get("data") if relationship else None
