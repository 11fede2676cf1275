from __future__ import annotations

"""
Unit tests for rotation policy loading.

Verifies:
1. JSON files map onto RotationPolicy fields with defaults for gaps.
2. Malformed or missing files raise PolicyFileError.
3. Unknown keys are ignored.
"""

import json
from pathlib import Path

import pytest

from rotalog.domain.config import load_policy, policy_from_dict, policy_to_dict
from rotalog.domain.settings import RotationPolicy
from rotalog.errors import PolicyFileError


def test_default_policy_is_inert() -> None:
    policy = RotationPolicy()
    assert policy.clear_on_startup is False
    assert policy.enable_rotation is False
    assert policy.max_file_size == 0
    assert policy.max_backup_count == 0


def test_load_policy_reads_all_fields(tmp_path: Path) -> None:
    path = tmp_path / "policy.json"
    path.write_text(json.dumps({
        "clear_on_startup": True,
        "enable_rotation": True,
        "max_file_size": 1048576,
        "max_backup_count": 5,
    }), encoding="utf-8")

    assert load_policy(str(path)) == RotationPolicy(True, True, 1048576, 5)


def test_partial_mapping_uses_defaults() -> None:
    policy = policy_from_dict({"enable_rotation": True, "max_file_size": 512})
    assert policy == RotationPolicy(enable_rotation=True, max_file_size=512)


def test_unknown_keys_are_ignored() -> None:
    policy = policy_from_dict({"max_backup_count": 2, "compress": True})
    assert policy.max_backup_count == 2


@pytest.mark.parametrize("data", [
    {"enable_rotation": "yes"},
    {"max_file_size": -1},
    {"max_backup_count": 2.5},
    {"max_file_size": True},
])
def test_invalid_values_are_rejected(data: dict) -> None:
    with pytest.raises(PolicyFileError):
        policy_from_dict(data)


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(PolicyFileError):
        load_policy(str(tmp_path / "absent.json"))


def test_malformed_json_raises(tmp_path: Path) -> None:
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(PolicyFileError):
        load_policy(str(path))


def test_non_object_json_raises(tmp_path: Path) -> None:
    path = tmp_path / "list.json"
    path.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(PolicyFileError):
        load_policy(str(path))


def test_policy_to_dict_matches_field_names() -> None:
    assert policy_to_dict(RotationPolicy(False, True, 10, 3)) == {
        "clear_on_startup": False,
        "enable_rotation": True,
        "max_file_size": 10,
        "max_backup_count": 3,
    }


def test_non_utf8_file_raises(tmp_path: Path) -> None:
    path = tmp_path / "binary.json"
    path.write_bytes(b'{"max_file_size": 1\xff\xfe}')
    with pytest.raises(PolicyFileError):
        load_policy(str(path))


@pytest.mark.parametrize("field", ["max_file_size", "max_backup_count"])
def test_policy_rejects_negative_sizes(field: str) -> None:
    with pytest.raises(ValueError):
        RotationPolicy(**{field: -1})
