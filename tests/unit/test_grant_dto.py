"""Unit tests for grant entry normalization."""

import pytest

from yetki.application.dto.grant_dto import normalize_grants
from yetki.domain.entities import PermissionGrant
from yetki.domain.exceptions import ValidationError


def test_mapping_entries() -> None:
    assert normalize_grants({"a": True, "b": False}) == {"a": True, "b": False}


def test_grant_objects_and_dicts() -> None:
    entries = [
        PermissionGrant("a", True),
        {"permission": "b", "allowed": False},
        {"id": "c", "allowed": True},
        {"permission_id": "a", "allowed": False},
    ]
    assert normalize_grants(entries) == {"a": False, "b": False, "c": True}


def test_missing_allowed_rejected() -> None:
    with pytest.raises(ValidationError, match="allowed"):
        normalize_grants([{"permission": "a"}])


def test_missing_id_rejected() -> None:
    with pytest.raises(ValidationError, match="no permission id"):
        normalize_grants([{"allowed": True}])


def test_non_boolean_allowed_rejected() -> None:
    with pytest.raises(ValidationError, match="boolean"):
        normalize_grants({"a": "yes"})
