"""
Tests para el adaptador AmapProvider y el contrato de callback.
"""
import json
from unittest.mock import Mock, patch

import pytest

import locate_amap
from providers import (
    AmapProvider,
    CellTower,
    GeolocationError,
    LocationFailure,
    LocationSuccess,
    Network,
    WifiAccessPoint,
    get_provider,
)


@pytest.fixture
def network():
    return Network(
        wifi_access_points=(WifiAccessPoint("aa:bb:cc:dd:ee:ff", -55),),
        cell_towers=(CellTower(460, 0, 4566, 12345, radio_type="cdma"),),
    )


def _provider(body=None, error=None):
    send = Mock(return_value=body, side_effect=error)
    return AmapProvider("secret", send=send), send


class TestLocate:

    def test_success(self, network):
        provider, send = _provider('{"status":"1","position":"121.47,31.23","radius":50}')
        outcome = provider.locate(network)
        assert isinstance(outcome, LocationSuccess)
        assert outcome.location.latitude == 31.23
        assert outcome.location.longitude == 121.47
        payload = send.call_args[0][0]
        assert payload["key"] == "secret"
        assert payload["cdma"] == "1"

    def test_rejected(self, network):
        provider, _ = _provider('{"status":"0","info":"INVALID_USER_KEY"}')
        outcome = provider.locate(network)
        assert isinstance(outcome, LocationFailure)
        assert outcome.error.kind == GeolocationError.REJECTED
        assert outcome.error.message == "INVALID_USER_KEY"

    def test_transport_error_from_injected_send(self, network):
        provider, _ = _provider(error=ConnectionError("timed out"))
        outcome = provider.locate(network)
        assert isinstance(outcome, LocationFailure)
        assert outcome.error.kind == GeolocationError.TRANSPORT
        assert isinstance(outcome.error.__cause__, ConnectionError)

    def test_transport_geolocation_error_passes_through(self, network):
        error = GeolocationError(GeolocationError.TRANSPORT, "HTTP 503")
        provider, _ = _provider(error=error)
        assert provider.locate(network).error is error

    def test_parse_error(self, network):
        provider, _ = _provider("<html>bad gateway</html>")
        outcome = provider.locate(network)
        assert outcome.error.kind == GeolocationError.PARSE

    def test_empty_network_is_sent_with_key_only(self):
        provider, send = _provider('{"status":"0","info":"INVALID_PARAMS"}')
        outcome = provider.locate(Network())
        send.assert_called_once_with({"key": "secret"})
        assert outcome.error.message == "INVALID_PARAMS"

    @patch("providers.amap_provider.send_request")
    def test_default_transport_uses_configured_url(self, mock_send, network):
        mock_send.return_value = '{"status":"1","position":"1.5,2.5"}'
        outcome = AmapProvider("secret", url="https://example.test/IoT").locate(network)
        assert outcome.location.latitude == 2.5
        assert mock_send.call_args.kwargs["url"] == "https://example.test/IoT"


class TestGetLocation:

    def test_success_calls_on_success_once(self, network):
        provider, _ = _provider('{"status":"1","position":"121.47,31.23","radius":50}')
        callback = Mock()
        provider.get_location(network, callback)
        callback.on_success.assert_called_once_with(31.23, 121.47, 50)
        callback.on_failure.assert_not_called()

    def test_failure_calls_on_failure_once(self, network):
        provider, _ = _provider('{"status":"0"}')
        callback = Mock()
        provider.get_location(network, callback)
        callback.on_success.assert_not_called()
        callback.on_failure.assert_called_once()
        error = callback.on_failure.call_args[0][0]
        assert isinstance(error, GeolocationError)
        assert error.message == "Error desconocido"

    @pytest.mark.parametrize("body", [
        '{"status":"1","position":"1,2","radius":1e999}',
        '{"status":"1","position":"1,2","radius":NaN}',
        '{"status":"1","position":"1,2","radius":"inf"}',
        '{"status":"1","position":"nan,inf"}',
    ])
    def test_invalid_numbers_call_on_failure_once(self, network, body):
        provider, _ = _provider(body)
        callback = Mock()
        provider.get_location(network, callback)
        callback.on_success.assert_not_called()
        callback.on_failure.assert_called_once()
        assert callback.on_failure.call_args[0][0].kind == GeolocationError.PARSE


class TestNetworkFromDict:

    def test_camel_case_layout(self):
        network = Network.from_dict({
            "wifiAccessPoints": [{"macAddress": "01:02:03:04:05:06", "signalStrength": -60}],
            "cellTowers": [{
                "mobileCountryCode": 460, "mobileNetworkCode": 1,
                "locationAreaCode": 10, "cellId": 20, "radioType": "lte",
            }],
        })
        assert network.wifi_access_points == (WifiAccessPoint("01:02:03:04:05:06", -60),)
        assert network.cell_towers == (CellTower(460, 1, 10, 20, radio_type="lte"),)

    def test_missing_collections(self):
        assert Network.from_dict({}) == Network()


class TestRegistry:

    def test_amap_provider_reads_key_from_env(self, monkeypatch):
        monkeypatch.setenv("AMAP_API_KEY", "from-env")
        provider = get_provider("AMAP")
        assert isinstance(provider, AmapProvider)
        assert provider.api_key == "from-env"

    def test_unknown_provider(self):
        assert get_provider("NOPE") is None


class TestLocateScript:

    def test_prints_location(self, tmp_path, monkeypatch, capsys):
        path = tmp_path / "obs.json"
        path.write_text(json.dumps({"wifiAccessPoints": [{"macAddress": "aa", "signalStrength": -50}]}))
        monkeypatch.setenv("AMAP_API_KEY", "k")
        with patch("providers.amap_provider.send_request", return_value='{"status":"1","position":"116.4,39.9","radius":"80"}'):
            assert locate_amap.main([str(path)]) == 0
        assert "39.900000, 116.400000 | radio 80 m" in capsys.readouterr().out

    def test_failure_exit_code(self, tmp_path, monkeypatch):
        path = tmp_path / "obs.json"
        path.write_text("{}")
        monkeypatch.setenv("AMAP_API_KEY", "k")
        with patch("providers.amap_provider.send_request", return_value='{"status":"0"}'):
            assert locate_amap.main([str(path)]) == 1

    def test_usage(self):
        assert locate_amap.main([]) == 2
