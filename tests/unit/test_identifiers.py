import pytest
from pydantic import BaseModel

from legalconnect.models.identifiers import (
    ParticipantId,
    normalize_participant_id,
    same_participant,
)


class _Holder(BaseModel):
    participant: ParticipantId


class TestNormalizeParticipantId:
    def test_int_and_str_normalize_to_same_value(self):
        assert normalize_participant_id(42) == "42"
        assert normalize_participant_id("42") == "42"
        assert normalize_participant_id(" 42 ") == "42"

    def test_integral_float(self):
        assert normalize_participant_id(42.0) == "42"

    @pytest.mark.parametrize("value", [None, True, "", "   ", "x" * 256, [1]])
    def test_rejects_invalid(self, value):
        with pytest.raises(ValueError):
            normalize_participant_id(value)


def test_same_participant():
    assert same_participant(7, "7")
    assert not same_participant("7", "8")
    assert not same_participant(None, "7")


def test_participant_id_annotation_normalizes():
    assert _Holder(participant=12).participant == "12"
