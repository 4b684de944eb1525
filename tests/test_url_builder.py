"""Tests for API URL construction."""

import pytest

from lifecycle_actions.application import build_api_url
from lifecycle_actions.config.settings import DEFAULT_API_BASE_PATH


class TestBuildApiUrl:
    """Test build_api_url path shapes."""

    def test_collection(self):
        """Test a resource without id addresses the collection."""
        assert build_api_url("projects") == "/rhn/manager/api/contentmanagement/projects"

    def test_single_resource(self):
        """Test an id addresses a single resource."""
        assert build_api_url("projects", None, "7") == f"{DEFAULT_API_BASE_PATH}/projects/7"

    def test_nested_resource(self):
        """Test a nested resource is addressed below the id."""
        assert build_api_url("projects", "filters", "7") == f"{DEFAULT_API_BASE_PATH}/projects/7/filters"

    @pytest.mark.parametrize("resource_id", [None, ""])
    def test_nested_resource_without_id(self, resource_id):
        """Test the nested resource is ignored without an id."""
        assert build_api_url("projects", "filters", resource_id) == f"{DEFAULT_API_BASE_PATH}/projects"

    def test_integer_id(self):
        """Test numeric ids are accepted."""
        assert build_api_url("projects", "environments", 0) == f"{DEFAULT_API_BASE_PATH}/projects/0/environments"

    def test_custom_base_path(self):
        """Test the namespace prefix can be overridden."""
        assert build_api_url("sources", resource_id="3", base_path="/api") == "/api/sources/3"
