"""Public value message models."""

import json
import pytest
from pydantic import ValidationError
from twolayerdh.common.protocol import Round1Public, Round2Public


def test_round1_message_json():
    message = Round1Public.from_int(2)
    payload = json.loads(message.model_dump_json())
    assert payload == {"version": "2.0", "value": "2", "type": "round1_public"}


def test_large_value_survives_json():
    n = 2**521 - 1
    wire = Round2Public.from_int(n).model_dump_json()
    assert Round2Public.model_validate_json(wire).as_int() == n


def test_value_is_normalized():
    assert Round2Public(value=" 0042 ").value == "42"


@pytest.mark.parametrize("value", ["-1", "abc", "", "1.5"])
def test_bad_value_rejected(value):
    with pytest.raises(ValidationError):
        Round1Public(value=value)


def test_message_type_enforced():
    wire = Round1Public.from_int(0).model_dump_json()
    with pytest.raises(ValidationError):
        Round2Public.model_validate_json(wire)


def test_version_enforced():
    with pytest.raises(ValidationError):
        Round1Public(version="1.0", value="0")


def test_from_int_builds_subclass():
    message = Round2Public.from_int(16)
    assert isinstance(message, Round2Public)
    assert message.type == "round2_public"
    assert message.as_int() == 16
