from __future__ import annotations

from datetime import datetime

import pytest

from src.masjid_rota.masjid_rota.breaks.service import BreakService
from src.masjid_rota.masjid_rota.container import Container
from src.masjid_rota.masjid_rota.core.exceptions import UpstreamError
from src.masjid_rota.masjid_rota.main import create_app
from src.masjid_rota.masjid_rota.prayers.service import PrayerService
from src.masjid_rota.masjid_rota.shifts.model import ShiftEvent
from src.masjid_rota.masjid_rota.shifts.service import RotaService
from src.masjid_rota.masjid_rota.workers.service import WorkerService
from tests.fakes import (
    FakeFeeds,
    FakePrayerTimes,
    InMemoryBreaks,
    InMemoryPrayerStatuses,
    InMemoryWorkers,
    feed_failure,
    make_worker,
)

NOW = datetime(2026, 6, 1, 14, 0)


@pytest.fixture
def world():
    workers = InMemoryWorkers([make_worker(1, "Yusuf", "https://cal/1"), make_worker(2, "Bilal", "https://cal/2")])
    feeds = FakeFeeds(
        {
            "https://cal/1": [ShiftEvent(start=datetime(2026, 6, 1, 12, 0), end=datetime(2026, 6, 1, 18, 0))],
            "https://cal/2": feed_failure("connection refused"),
        }
    )
    return {
        "workers": workers,
        "breaks": InMemoryBreaks(workers),
        "statuses": InMemoryPrayerStatuses(),
        "feeds": feeds,
        "times": FakePrayerTimes(),
    }


def _container(world) -> Container:
    rota = RotaService(world["workers"], world["feeds"], max_workers=2)
    return Container(
        conn=None,
        worker_service=WorkerService(world["workers"]),
        rota_service=rota,
        break_service=BreakService(world["breaks"], world["workers"]),
        prayer_service=PrayerService(world["times"], rota, world["statuses"], world["workers"]),
    )


@pytest.fixture
def client(world, monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app(_container(world))
    return app.test_client()


def test_list_workers_never_exposes_feed_urls(client):
    resp = client.get("/workers")

    assert resp.status_code == 200
    workers = resp.get_json()["workers"]
    assert [w["display_name"] for w in workers] == ["Yusuf", "Bilal"]
    assert all("ical_url" not in w for w in workers)


def test_add_worker(client, world):
    resp = client.post("/workers", json={"name": "Hamza", "icalUrl": "https://cal/3"})

    assert resp.status_code == 201
    assert resp.get_json()["worker"]["display_name"] == "Hamza"
    assert world["workers"].get_by_id(3).ical_url == "https://cal/3"


def test_add_worker_requires_fields(client):
    assert client.post("/workers", json={"name": "Hamza"}).status_code == 400


def test_malformed_break_body_is_rejected(client):
    resp = client.post("/breaks", data="{not json", content_type="application/json")

    assert resp.status_code == 400
    assert resp.get_json() == {"error": "Invalid JSON"}


@pytest.mark.parametrize(
    "path, message",
    [
        ("/prayer", "Failed to save prayer status"),
        ("/workers", "Failed to add worker"),
    ],
)
def test_malformed_body_is_a_generic_500(client, world, path, message):
    resp = client.post(path, data="{bad", content_type="application/json")

    assert resp.status_code == 500
    assert resp.get_json() == {"error": message}
    assert world["statuses"].rows == {}


def test_post_break_missing_end_time_writes_nothing(client, world):
    resp = client.post("/breaks", json={"workerId": 1, "breakDate": "2026-06-01", "startTime": "09:00"})

    assert resp.status_code == 400
    assert "error" in resp.get_json()
    assert world["breaks"].all() == []


def test_post_break_is_idempotent_per_worker_and_day(client, world):
    body = {"workerId": 1, "breakDate": "2026-06-01", "startTime": "09:00", "endTime": "09:30"}

    first = client.post("/breaks", json=body)
    second = client.post("/breaks", json=body)

    assert first.status_code == 201 and second.status_code == 201
    assert first.get_json()["break"]["id"] == second.get_json()["break"]["id"]
    assert len(world["breaks"].all()) == 1


def test_get_breaks_with_overlaps(client):
    client.post("/breaks", json={"workerId": 1, "breakDate": "2026-06-01", "startTime": "09:00", "endTime": "09:30"})
    client.post("/breaks", json={"workerId": 2, "breakDate": "2026-06-01", "startTime": "09:15", "endTime": "09:45"})

    resp = client.get("/breaks?date=2026-06-01")

    assert resp.status_code == 200
    breaks = resp.get_json()["breaks"]
    assert [(b["worker_name"], b["overlaps_with"]) for b in breaks] == [("Yusuf", ["Bilal"]), ("Bilal", ["Yusuf"])]
    assert breaks[0]["start_time"] == "09:00"


def test_get_breaks_requires_date(client):
    assert client.get("/breaks").status_code == 400


def test_delete_break(client, world):
    created = client.post(
        "/breaks", json={"workerId": 1, "breakDate": "2026-06-01", "startTime": "09:00", "endTime": "09:30"}
    ).get_json()["break"]

    assert client.delete("/breaks").status_code == 400
    resp = client.delete(f"/breaks?id={created['id']}")

    assert resp.status_code == 200
    assert resp.get_json() == {"ok": True}
    assert world["breaks"].all() == []


def test_whos_on_excludes_failed_feed(client):
    resp = client.get("/whos-on?at=2026-06-01T13:00:00")

    assert resp.status_code == 200
    data = resp.get_json()
    assert data["onShift"] == [{"id": 1, "name": "Yusuf"}]
    assert data["at"].startswith("2026-06-01T13:00:00")


def test_whos_on_defaults_to_now_for_bad_at(client, monkeypatch):
    monkeypatch.setattr("src.masjid_rota.masjid_rota.shifts.controller.now_local", lambda: NOW)

    resp = client.get("/whos-on?at=not-a-date")

    assert resp.status_code == 200
    assert resp.get_json()["at"].startswith("2026-06-01T14:00:00")
    assert resp.get_json()["onShift"] == [{"id": 1, "name": "Yusuf"}]


def test_get_prayer(client, world, monkeypatch):
    monkeypatch.setattr("src.masjid_rota.masjid_rota.prayers.service.now_local", lambda: NOW)
    client.post("/prayer", json={"workerId": 1, "prayerKey": "dhuhr", "hasPrayed": True})

    resp = client.get("/prayer")

    assert resp.status_code == 200
    data = resp.get_json()
    assert data["currentPrayer"]["key"] == "dhuhr"
    assert data["currentPrayer"]["windowStart"] == "13:10"
    assert data["currentPrayer"]["windowEnd"] == "17:27"
    assert data["times"]["maghrib"] == "21:24"
    assert data["onShift"] == [{"id": 1, "name": "Yusuf", "hasPrayed": True}]


def test_get_prayer_upstream_failure_is_500(client, world):
    world["times"]._error = UpstreamError("Prayer times API error: 502")

    resp = client.get("/prayer")

    assert resp.status_code == 500
    assert resp.get_json() == {"error": "Failed to load prayer info"}


def test_post_prayer_validation(client, world):
    resp = client.post("/prayer", json={"workerId": 1, "prayerKey": "witr", "hasPrayed": True})

    assert resp.status_code == 400
    assert world["statuses"].rows == {}


def test_post_prayer_ok(client, world):
    resp = client.post("/prayer", json={"workerId": 2, "prayerKey": "asr", "hasPrayed": False})

    assert resp.status_code == 200
    assert resp.get_json() == {"ok": True}
    assert list(world["statuses"].rows.values()) == [False]


def test_unknown_route_is_json_404(client):
    resp = client.get("/nope")

    assert resp.status_code == 404
    assert resp.get_json() == {"error": "Not found"}


def test_health(client):
    assert client.get("/health").get_json() == {"ok": True}


def test_isha_marked_before_fajr_reads_back(client, world, monkeypatch):
    world["feeds"]._feeds["https://cal/1"] = [
        ShiftEvent(start=datetime(2026, 6, 1, 22, 0), end=datetime(2026, 6, 2, 6, 0))
    ]
    monkeypatch.setattr("src.masjid_rota.masjid_rota.prayers.service.now_local", lambda: datetime(2026, 6, 2, 1, 0))

    posted = client.post("/prayer", json={"workerId": 1, "prayerKey": "isha", "hasPrayed": True})
    resp = client.get("/prayer")

    assert posted.status_code == 200
    data = resp.get_json()
    assert data["currentPrayer"]["key"] == "isha"
    assert data["currentPrayer"]["date"] == "2026-06-01"
    assert (data["currentPrayer"]["windowStart"], data["currentPrayer"]["windowEnd"]) == ("23:00", "02:51")
    assert data["onShift"] == [{"id": 1, "name": "Yusuf", "hasPrayed": True}]


def test_status_at_window_boundary_reads_back(client, monkeypatch):
    monkeypatch.setattr("src.masjid_rota.masjid_rota.prayers.service.now_local", lambda: datetime(2026, 6, 1, 17, 27))

    client.post("/prayer", json={"workerId": 1, "prayerKey": "asr", "hasPrayed": True})
    data = client.get("/prayer").get_json()

    assert data["currentPrayer"]["key"] == "asr"
    assert data["currentPrayer"]["date"] == "2026-06-01"
    assert data["onShift"] == [{"id": 1, "name": "Yusuf", "hasPrayed": True}]
