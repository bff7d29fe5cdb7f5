"""
Flatten JCR tree JSON into table rows.

AEM's Sling GET servlet returns a node as a JSON object whose properties
mix node metadata (``jcr:primaryType``, ``jcr:created``, ...), access
control (``rep:policy``) and child nodes. ``project_children`` walks the
immediate children of such an object and maps each accepted child into a
flat row described by a sequence of ``Field`` extractors.
"""

from collections import namedtuple

RESERVED_PREFIX = "jcr:"
POLICY_NODE = "rep:policy"

# Fallback marker: use the child's own node name
NODE_NAME = object()

Field = namedtuple("Field", ["name", "source", "fallback"])


def is_reserved(key):
    """True for metadata and ACL properties that are not content children."""
    return key.startswith(RESERVED_PREFIX) or key == POLICY_NODE


def is_node(value):
    return isinstance(value, dict)


def is_asset_node(value):
    """DAM assets carry a primary type; synthetic containers do not."""
    return is_node(value) and bool(value.get("jcr:primaryType"))


def resolve(node, source):
    """Follow a ``/``-separated relative path into nested dicts."""
    value = node
    for part in source.split("/"):
        if not isinstance(value, dict):
            return None
        value = value.get(part)
    return value


def extract(child, key, field):
    value = resolve(child, field.source)
    if value:
        return value
    return key if field.fallback is NODE_NAME else field.fallback


def project_children(node, parent_path, limit=None, fields=(), accept=is_node):
    """Map the accepted children of ``node`` into rows.

    Args:
        node (dict): JSON object for the parent node
        parent_path (str): Repository path of the parent, used to build
            each row's ``path``
        limit (int or None): Maximum number of rows, ``None`` for no limit
        fields (sequence): ``Field`` extractors applied to each child
        accept (callable): Predicate deciding whether a value is a child

    Returns:
        list: One dict per child, in the order the server returned them
    """
    rows = []
    for key, value in node.items():
        if is_reserved(key) or not accept(value):
            continue
        if limit is not None and len(rows) >= limit:
            break

        row = {"name": key, "path": f"{parent_path}/{key}"}
        for field in fields:
            row[field.name] = extract(value, key, field)
        rows.append(row)

    return rows


ASSET_FIELDS = (
    Field("type", "jcr:primaryType", "N/A"),
    Field("title", "jcr:content/jcr:title", NODE_NAME),
    Field("mimeType", "jcr:content/jcr:mimeType", "N/A"),
    Field("lastModified", "jcr:content/jcr:lastModified", "N/A"),
)

PAGE_FIELDS = (
    Field("title", "jcr:content/jcr:title", NODE_NAME),
    Field("template", "jcr:content/cq:template", "N/A"),
    Field("lastModified", "jcr:content/cq:lastModified", "N/A"),
)

TAG_FIELDS = (
    Field("title", "jcr:title", NODE_NAME),
    Field("description", "jcr:description", "N/A"),
    Field("count", "cq:count", 0),
)
