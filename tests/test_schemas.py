import pytest
from pydantic import ValidationError

from stores.schemas import CompletionSave, HealthRecord, HealthUpdate, PositionSave


def test_integral_floats_are_stored_as_ints():
    upd = HealthUpdate.model_validate({"health": 50.0, "maxHealth": 99.5})
    assert upd.health == 50 and isinstance(upd.health, int)
    assert upd.max_health == 99.5


def test_booleans_are_not_numbers():
    with pytest.raises(ValidationError):
        PositionSave.model_validate({"level": True, "position": {"x": 0, "y": 0, "z": 0}})


def test_records_are_frozen():
    rec = HealthRecord(user_id="u1", health=1, max_health=2)
    with pytest.raises(ValidationError):
        rec.user_id = "u2"


def test_wire_names_are_camel_case():
    rec = HealthRecord(user_id="u1", health=1, max_health=2)
    assert rec.to_json() == {"userId": "u1", "health": 1, "maxHealth": 2}


def test_optional_highest_ignores_non_numbers():
    assert CompletionSave.model_validate({"currentLevel": 2, "highestLevelCompleted": None}).highest_level_completed is None
    assert CompletionSave.model_validate({"currentLevel": 2, "highestLevelCompleted": [1]}).highest_level_completed is None
    assert CompletionSave.model_validate({"currentLevel": 2, "highestLevelCompleted": 0}).highest_level_completed == 0
