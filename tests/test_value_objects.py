"""Tests for lifecycle action value objects."""

import logging

import pytest

from lifecycle_actions.core.exceptions import InvalidResourceDescriptorError
from lifecycle_actions.core.value_objects import (
    ActionKind,
    HttpVerb,
    NotificationSeverity,
    ResourceDescriptor,
)


class TestActionKind:
    """Test ActionKind verb table and parsing."""

    @pytest.mark.parametrize(
        "kind, verb",
        [
            (ActionKind.GET, HttpVerb.GET),
            (ActionKind.CREATE, HttpVerb.POST),
            (ActionKind.ACTION, HttpVerb.POST),
            (ActionKind.UPDATE, HttpVerb.PUT),
            (ActionKind.DELETE, HttpVerb.DELETE),
        ],
    )
    def test_verb_table(self, kind, verb):
        """Test every kind maps to exactly one verb."""
        assert kind.verb is verb

    def test_verb_table_is_total(self):
        """Test no kind is missing a verb."""
        assert {kind.verb for kind in ActionKind} == set(HttpVerb)

    @pytest.mark.parametrize("value", ["create", "CREATE", " Create "])
    def test_parse_names(self, value):
        """Test parsing is case and whitespace insensitive."""
        assert ActionKind.parse(value) is ActionKind.CREATE

    def test_parse_member(self):
        """Test members parse to themselves."""
        assert ActionKind.parse(ActionKind.DELETE) is ActionKind.DELETE

    @pytest.mark.parametrize("value", ["promote", "", None, 42])
    def test_parse_unknown_falls_back_to_get(self, value):
        """Test unknown kinds resolve to GET."""
        assert ActionKind.parse(value) is ActionKind.GET

    def test_is_mutation(self):
        """Test only GET is a read."""
        assert [kind for kind in ActionKind if not kind.is_mutation] == [ActionKind.GET]

    def test_str(self):
        assert str(ActionKind.ACTION) == "action"


class TestHttpVerb:
    """Test HttpVerb helpers."""

    def test_sends_body(self):
        assert HttpVerb.GET.sends_body is False
        assert all(verb.sends_body for verb in (HttpVerb.POST, HttpVerb.PUT, HttpVerb.DELETE))


class TestResourceDescriptor:
    """Test ResourceDescriptor validation."""

    def test_valid(self):
        descriptor = ResourceDescriptor("projects", "filters")

        assert descriptor.resource == "projects"
        assert descriptor.nested_resource == "filters"
        assert str(descriptor) == "projects/*/filters"

    def test_strips_slashes(self):
        """Test surrounding slashes are removed."""
        descriptor = ResourceDescriptor("/projects/", "/filters")

        assert descriptor.resource == "projects"
        assert descriptor.nested_resource == "filters"

    @pytest.mark.parametrize("resource", ["", "  ", "/"])
    def test_empty_resource_rejected(self, resource):
        """Test an empty resource name is rejected."""
        with pytest.raises(InvalidResourceDescriptorError):
            ResourceDescriptor(resource)

    def test_empty_nested_resource_is_none(self):
        assert ResourceDescriptor("projects", "").nested_resource is None

    def test_immutable(self):
        descriptor = ResourceDescriptor("projects")

        with pytest.raises(AttributeError):
            descriptor.resource = "sources"


class TestNotificationSeverity:
    """Test NotificationSeverity log levels."""

    @pytest.mark.parametrize(
        "severity, level",
        [
            (NotificationSeverity.SUCCESS, logging.INFO),
            (NotificationSeverity.INFO, logging.INFO),
            (NotificationSeverity.WARNING, logging.WARNING),
            (NotificationSeverity.ERROR, logging.ERROR),
        ],
    )
    def test_log_level(self, severity, level):
        assert severity.log_level == level
