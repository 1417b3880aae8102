"""Unit tests for pokedex_api/models.py."""

import pytest

from pokedex_api.models import CreatureRecord, CreatureStats, ErrorBody
from tests.factories import PIKACHU_CRY, PIKACHU_PAYLOAD


class TestCreatureRecord:
    def test_full_payload(self):
        record = CreatureRecord.model_validate(PIKACHU_PAYLOAD)
        assert record.name == "pikachu"
        assert record.height == 4
        assert record.weight == 60
        assert record.types == ["electric"]
        assert record.abilities == ["static", "lightning-rod"]
        assert record.stats.hp == 35
        assert record.stats.special_attack == 50
        assert len(record.sprites) == 2
        assert record.cries == PIKACHU_CRY

    def test_empty_payload_maps_to_unknowns(self):
        record = CreatureRecord.model_validate({})
        assert record.name is None
        assert record.height is None
        assert record.weight is None
        assert record.types is None
        assert record.abilities is None
        assert record.stats == CreatureStats()
        assert record.sprites == []
        assert record.cries is None

    def test_nulls_map_to_unknowns(self):
        record = CreatureRecord.model_validate(
            {"name": "missingno", "stats": None, "sprites": None, "cries": None}
        )
        assert record.stats.hp is None
        assert record.sprites == []
        assert record.cries is None

    def test_blank_cry_is_absent(self):
        record = CreatureRecord.model_validate({"cries": "  "})
        assert record.cries is None

    def test_unknown_fields_ignored(self):
        record = CreatureRecord.model_validate({"name": "eevee", "base_experience": 65})
        assert record.name == "eevee"

    def test_integers_stay_integers(self):
        record = CreatureRecord.model_validate({"height": 7, "weight": 69.5})
        assert isinstance(record.height, int)
        assert record.weight == 69.5

    @pytest.mark.parametrize(
        "name,expected", [("pikachu", "Pikachu"), ("mr-mime", "Mr-mime"), (None, ""), ("", "")]
    )
    def test_display_name(self, name, expected):
        assert CreatureRecord(name=name).display_name == expected


class TestCreatureStats:
    def test_partial_stats(self):
        stats = CreatureStats.model_validate({"hp": 45, "speed": 45})
        assert stats.hp == 45
        assert stats.attack is None

    def test_get_by_api_name(self):
        stats = CreatureStats.model_validate(PIKACHU_PAYLOAD["stats"])
        assert stats.get("special-defense") == 50
        assert stats.get("hp") == 35

    def test_get_unknown_stat(self):
        with pytest.raises(KeyError):
            CreatureStats().get("luck")

    def test_dump_uses_api_names(self):
        stats = CreatureStats.model_validate(PIKACHU_PAYLOAD["stats"])
        assert stats.model_dump(by_alias=True)["special-attack"] == 50


class TestErrorBody:
    def test_message(self):
        assert ErrorBody.model_validate({"msg": "Pokemon not found"}).msg == "Pokemon not found"

    def test_missing_message_fails(self):
        with pytest.raises(ValueError):
            ErrorBody.model_validate({"detail": "Not Found"})
