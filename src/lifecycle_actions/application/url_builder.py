"""URL construction for content management resources."""

from typing import Optional, Union

from ..config.settings import DEFAULT_API_BASE_PATH


def build_api_url(
    resource: str,
    nested_resource: Optional[str] = None,
    resource_id: Optional[Union[str, int]] = None,
    base_path: str = DEFAULT_API_BASE_PATH,
) -> str:
    """Build the API path for a resource action.

    - no id: ``<base>/<resource>``
    - id: ``<base>/<resource>/<id>``
    - id and nested resource: ``<base>/<resource>/<id>/<nested_resource>``

    A nested resource only exists below a single resource, so it is ignored
    when no id is given.
    """
    if resource_id is None or resource_id == "":
        return f"{base_path}/{resource}"
    if not nested_resource:
        return f"{base_path}/{resource}/{resource_id}"
    return f"{base_path}/{resource}/{resource_id}/{nested_resource}"
