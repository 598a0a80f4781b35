import pytest

from app.models.shared.enums import OwnershipScope, ResourceType
from app.services.access.ownership import parse_scope, same_admin
from app.utils.resource_ids import (
    format_access_request_id,
    format_resource_id,
    parse_resource_id,
    parse_resource_type,
)


class TestResourceIds:
    @pytest.mark.parametrize("resource_type,expected", [
        (ResourceType.DEPARTMENT, "D-07"),
        (ResourceType.EMPLOYEE, "E-7"),
        (ResourceType.CANDIDATE, "C-007"),
        (ResourceType.JOB_APPLICATION, "APP-007"),
        (ResourceType.LEAVE_REQUEST, "L-7"),
    ])
    def test_display_format(self, resource_type, expected):
        assert format_resource_id(resource_type, 7) == expected

    def test_wide_ids_are_not_truncated(self):
        assert format_resource_id(ResourceType.CANDIDATE, 12345) == "C-12345"
        assert format_access_request_id(42) == "AR-42"

    def test_parse_bare_and_prefixed(self):
        assert parse_resource_id(ResourceType.EMPLOYEE, "7") == 7
        assert parse_resource_id(ResourceType.EMPLOYEE, "e-7") == 7
        assert parse_resource_id(ResourceType.JOB_APPLICATION, "APP-007") == 7
        assert parse_resource_id(ResourceType.DEPARTMENT, 3) == 3

    def test_parse_rejects_other_prefix(self):
        assert parse_resource_id(ResourceType.EMPLOYEE, "C-7") is None
        assert parse_resource_id(ResourceType.EMPLOYEE, "seven") is None
        assert parse_resource_id(ResourceType.EMPLOYEE, "E-²") is None
        assert parse_resource_id(ResourceType.EMPLOYEE, None) is None

    def test_parse_resource_type(self):
        assert parse_resource_type("Employee") == ResourceType.EMPLOYEE
        assert parse_resource_type("job_application") == ResourceType.JOB_APPLICATION
        assert parse_resource_type("LEAVE-REQUEST") == ResourceType.LEAVE_REQUEST
        assert parse_resource_type("Contract") is None
        assert parse_resource_type(None) is None


class TestOwnershipHelpers:
    def test_scope_only_yours_narrows(self):
        assert parse_scope("yours") == OwnershipScope.YOURS
        assert parse_scope(" YOURS ") == OwnershipScope.YOURS
        assert parse_scope("all") == OwnershipScope.ALL
        assert parse_scope("mine") == OwnershipScope.ALL
        assert parse_scope(None) == OwnershipScope.ALL

    def test_same_admin(self):
        assert same_admin("alice", "ALICE ")
        assert not same_admin("alice", "bob")
        assert not same_admin("", "")
        assert not same_admin(None, "alice")
