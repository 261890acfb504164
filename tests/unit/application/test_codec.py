from __future__ import annotations

import json

import numpy as np
import pytest

from gaugesim.application.codec import decode_request, encode_response
from gaugesim.application.dispatcher import build_configuration, build_data
from gaugesim.domain import (
    ConfigurationResponse,
    Data,
    DataResponse,
    DebugMessage,
    DisplayData,
    GaugeData,
    NeedGaugeConfig,
    NeedGaugeData,
    ProtocolError,
)

EXPECTED_CONFIGURATION = (
    '{"type":1,"message":{"theme":{"ok_color":64512,"low_color":31,'
    '"high_color":63488,"alert_color":63488},"display1":{"gauges":[{"name":"COOLANT",'
    '"units":"C","format":"%.0f","min":0.0,"max":130.0,"low_value":60.0,'
    '"high_value":100.0}]},"display2":{"gauges":[{"name":"OIL","units":"bar",'
    '"format":"%.2f","min":0.0,"max":10.0,"low_value":1.0,"high_value":8.0}]},'
    '"display3":{"gauges":[]}}}'
)


def test_decode_known_requests() -> None:
    assert isinstance(decode_request('{"type":1}'), NeedGaugeConfig)
    assert isinstance(decode_request('{"type": 2}'), NeedGaugeData)


def test_decode_debug_message() -> None:
    req = decode_request('{"type":3,"message":"boot ok"}')
    assert isinstance(req, DebugMessage)
    assert req.message == "boot ok"


def test_decode_unknown_discriminant_is_protocol_error() -> None:
    with pytest.raises(ProtocolError) as excinfo:
        decode_request('{"type":7}')
    assert excinfo.value.source_text == '{"type":7}'
    assert "unsupported type 7" in str(excinfo.value)


@pytest.mark.parametrize(
    "text",
    [
        "not json",
        "[1, 2]",
        "{}",
        '{"type":"1"}',
        '{"type":true}',
        '{"type":1.0}',
        '{"type":3}',
    ],
)
def test_decode_rejects_malformed_requests(text: str) -> None:
    with pytest.raises(ProtocolError) as excinfo:
        decode_request(text)
    assert excinfo.value.source_text == text


def test_encode_configuration_matches_wire_format() -> None:
    text = encode_response(ConfigurationResponse(message=build_configuration()))
    assert text == EXPECTED_CONFIGURATION


def test_encode_data_is_compact_and_ordered() -> None:
    text = encode_response(DataResponse(message=build_data(0.5)))
    assert text == (
        '{"type":2,"message":{"display1":{"gauges":[{"current_value":38.5}]},'
        '"display2":{"gauges":[{"current_value":3.25}]},"display3":{"gauges":[]}}}'
    )
    assert "\n" not in text


def test_decode_deeply_nested_json_is_protocol_error() -> None:
    text = "[" * 200_000
    with pytest.raises(ProtocolError) as excinfo:
        decode_request(text)
    assert excinfo.value.source_text == text
    # the log line stays short even for a huge payload
    assert len(str(excinfo.value)) < 400
    assert "(200000 chars)" in str(excinfo.value)


def test_encode_offline_value_as_float32_text() -> None:
    data = Data(display1=DisplayData(gauges=(GaugeData.offline(),)))
    text = encode_response(DataResponse(message=data))
    assert '"current_value":3.4028235e+38' in text


def test_encode_sampled_values_with_float32_precision() -> None:
    text = encode_response(DataResponse(message=build_data(1.0 / 3.0)))
    payload = json.loads(text)
    coolant = payload["message"]["display1"]["gauges"][0]["current_value"]
    oil = payload["message"]["display2"]["gauges"][0]["current_value"]

    assert np.float32(coolant) == np.float32(77.0 / 3.0)
    assert np.float32(oil) == np.float32(6.5 / 3.0)
    # no float64 noise beyond float32's shortest round-trip digits
    assert len(repr(coolant).replace(".", "")) <= 9
    assert len(repr(oil).replace(".", "")) <= 9
