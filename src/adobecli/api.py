"""
Resource operations against AEM's Sling REST endpoints.

One function per remote action. Each takes an ``AemClient`` and returns
plain Python data: projected rows for listings, the server document for
lookups, and a locally built summary for create operations.
"""

import logging

from .projection import (
    ASSET_FIELDS,
    PAGE_FIELDS,
    TAG_FIELDS,
    is_asset_node,
    project_children,
)

logger = logging.getLogger(__name__)

DEFAULT_DAM_PATH = "/content/dam"
DEFAULT_CONTENT_PATH = "/content"
DEFAULT_TAG_NAMESPACE = "/content/cq:tags"
DEFAULT_TEMPLATE = "/libs/wcm/foundation/templates/page"
DEFAULT_MIME_TYPE = "application/octet-stream"
DEFAULT_LIMIT = 20

# Sling GET selectors for the depth of the returned JSON tree
INFINITY_JSON = ".infinity.json"
ONE_LEVEL_JSON = ".1.json"


def _with_path(path, document):
    result = {"path": path}
    result.update(document)
    return result


# Assets (DAM)


def list_assets(client, path=DEFAULT_DAM_PATH, limit=DEFAULT_LIMIT):
    data = client.get_node(f"{path}{INFINITY_JSON}")
    return project_children(data, path, limit, ASSET_FIELDS, is_asset_node)


def get_asset(client, asset_path):
    return _with_path(asset_path, client.get_node(f"{asset_path}{INFINITY_JSON}"))


def upload_asset(client, dam_path, file_name, content, mime_type=DEFAULT_MIME_TYPE):
    """Upload ``content`` as ``file_name`` into the DAM folder ``dam_path``.

    Returns the server's response body, decoded as JSON when possible.
    """
    if isinstance(content, str):
        content = content.encode("utf-8")

    logger.debug(f"Uploading {len(content)} bytes as {file_name} to {dam_path}")
    return client.post_multipart(
        f"{dam_path}.createasset.html",
        files={"file": (file_name, content, mime_type or DEFAULT_MIME_TYPE)},
        data={"fileName": file_name},
    )


# Pages


def list_pages(client, path=DEFAULT_CONTENT_PATH, limit=DEFAULT_LIMIT):
    data = client.get_node(f"{path}{ONE_LEVEL_JSON}")
    return project_children(data, path, limit, PAGE_FIELDS)


def get_page(client, page_path):
    return _with_path(page_path, client.get_node(f"{page_path}{INFINITY_JSON}"))


def create_page(client, parent_path, page_name, title, template=None):
    template = template or DEFAULT_TEMPLATE
    client.post_form(
        parent_path,
        {
            "_charset_": "utf-8",
            ":name": page_name,
            "jcr:primaryType": "cq:Page",
            "jcr:content/jcr:primaryType": "cq:PageContent",
            "jcr:content/jcr:title": title,
            "jcr:content/cq:template": template,
        },
    )
    return {"path": f"{parent_path}/{page_name}", "title": title, "template": template}


# Tags


def list_tags(client, namespace=DEFAULT_TAG_NAMESPACE):
    # Tag listings are never truncated
    data = client.get_node(f"{namespace}{ONE_LEVEL_JSON}")
    return project_children(data, namespace, None, TAG_FIELDS)


def create_tag(client, namespace, tag_name, title, description=None):
    form = {
        "_charset_": "utf-8",
        "jcr:primaryType": "cq:Tag",
        "jcr:title": title,
    }
    if description:
        form["jcr:description"] = description

    tag_path = f"{namespace}/{tag_name}"
    client.post_form(tag_path, form)
    return {
        "path": tag_path,
        "name": tag_name,
        "title": title,
        "description": description,
    }


def delete_tag(client, tag_path):
    client.delete(tag_path)
