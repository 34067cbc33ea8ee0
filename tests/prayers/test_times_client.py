import pytest
import requests

from src.masjid_rota.masjid_rota.core.exceptions import ConfigurationError, UpstreamError
from src.masjid_rota.masjid_rota.prayers.times_client import PrayerTimesClient
from tests.fakes import FakeResponse, FakeSession

PAYLOAD = {
    "city": "london",
    "date": "2026-06-01",
    "fajr": "02:51",
    "sunrise": "04:48",
    "dhuhr": "13:10",
    "asr": "17:27",
    "asr_2": "17:57",
    "magrib": "21:24",
    "isha": "23:00",
}


def test_fetch_today_maps_payload():
    session = FakeSession(FakeResponse(payload=PAYLOAD))
    client = PrayerTimesClient("k3y", url="https://times.example.com/api/", session=session, timeout=3)

    times = client.fetch_today()

    assert times.maghrib == "21:24"
    assert times.asr2 == "17:57"
    assert times.sunrise == "04:48"
    assert session.calls == [
        {
            "url": "https://times.example.com/api/",
            "params": {"format": "json", "24hours": "true", "key": "k3y"},
            "timeout": 3,
        }
    ]


def test_asr2_is_optional():
    payload = dict(PAYLOAD)
    del payload["asr_2"]
    client = PrayerTimesClient("k3y", session=FakeSession(FakeResponse(payload=payload)))

    assert client.fetch_today().asr2 is None


def test_missing_key_is_a_configuration_error():
    session = FakeSession(FakeResponse(payload=PAYLOAD))

    with pytest.raises(ConfigurationError):
        PrayerTimesClient(None, session=session).fetch_today()
    assert session.calls == []


def test_non_200_is_upstream_error():
    client = PrayerTimesClient("k3y", session=FakeSession(FakeResponse(status_code=503, reason="Unavailable")))

    with pytest.raises(UpstreamError, match="503"):
        client.fetch_today()


def test_network_error_is_upstream_error():
    client = PrayerTimesClient("k3y", session=FakeSession(error=requests.ConnectionError("down")))

    with pytest.raises(UpstreamError):
        client.fetch_today()


def test_malformed_payload_is_upstream_error():
    client = PrayerTimesClient("k3y", session=FakeSession(FakeResponse(payload={"fajr": "02:51"})))

    with pytest.raises(UpstreamError):
        client.fetch_today()
