"""Dashboard and history projections."""
from datetime import timedelta

from toolcrib.config import settings
from toolcrib.database import utcnow
from toolcrib.models import LogType, ToolStatus
from toolcrib.services.checkin import check_in
from toolcrib.services.checkout import check_out
from toolcrib.services.dashboard import dashboard_rows, dashboard_summary, history_rows
from toolcrib.services.status import EffectiveStatus


def _by_qr(rows):
    return {row.qr_id: row for row in rows}


def test_new_tool_sits_in_showroom(db, make_tool):
    make_tool("QR-1")
    row = dashboard_rows(db)[0]

    assert row.effective_status == EffectiveStatus.AVAILABLE
    assert row.who == "---"
    assert row.where == "Showroom"
    assert row.timestamp is None


def test_checked_out_tool_shows_holder_and_job(db, make_user, make_tool):
    make_user("W1", name="Ana Torres")
    make_tool("QR-1")
    _, log = check_out(db, "QR-1", "W1", "Refinery Job")

    row = dashboard_rows(db)[0]

    assert row.status == ToolStatus.IN_USE
    assert row.effective_status == EffectiveStatus.IN_USE
    assert row.who == "Ana Torres"
    assert row.where == "Refinery Job"
    assert row.timestamp == log.created_at


def test_checked_out_without_client(db, make_user, make_tool):
    make_user("W1")
    make_tool("QR-1")
    check_out(db, "QR-1", "W1")
    assert dashboard_rows(db)[0].where == "---"


def test_returned_tool_shows_last_user(db, make_user, make_tool):
    make_user("W1", name="Ana Torres")
    make_tool("QR-1")
    check_out(db, "QR-1", "W1", "Job")
    check_in(db, "QR-1", "W1")

    row = dashboard_rows(db)[0]
    assert row.who == "Ana Torres"
    assert row.where == "Showroom"


def test_expired_tool_requires_calibration(db, make_tool):
    make_tool("QR-1", calibration=True, due=utcnow() - timedelta(days=2))
    row = dashboard_rows(db)[0]

    assert row.status == ToolStatus.AVAILABLE
    assert row.effective_status == EffectiveStatus.IN_CALIBRATION
    assert row.who == "Requires calibration"
    assert row.where == "Showroom"


def test_rows_are_ordered_by_name(db, make_tool):
    make_tool("QR-1", name="Wrench")
    make_tool("QR-2", name="Drill")
    make_tool("QR-3", name="Level")
    assert [row.name for row in dashboard_rows(db)] == ["Drill", "Level", "Wrench"]


def test_status_filter_and_summary(db, make_user, make_tool):
    make_user("W1")
    make_tool("QR-1")
    make_tool("QR-2")
    make_tool("QR-3", calibration=True, due=utcnow() - timedelta(days=1))
    check_out(db, "QR-2", "W1", "Job")

    in_use = dashboard_rows(db, status=EffectiveStatus.IN_USE)
    assert [row.qr_id for row in in_use] == ["QR-2"]

    summary = dashboard_summary(dashboard_rows(db))
    assert summary.total == 3
    assert summary.available == 1
    assert summary.in_use == 1
    assert summary.in_calibration == 1


def test_search_matches_name_or_qr_ignoring_case(db, make_tool):
    make_tool("TW-01", name="Torque Wrench")
    make_tool("DR-07", name="Drill")
    make_tool("LV-02", name="Laser Level")

    assert [row.name for row in dashboard_rows(db, search="torque")] == ["Torque Wrench"]
    assert [row.qr_id for row in dashboard_rows(db, search="dr-0")] == ["DR-07"]
    assert dashboard_rows(db, search="hammer") == []
    assert len(dashboard_rows(db, search="")) == 3


def test_search_combines_with_status_filter(db, make_user, make_tool):
    make_user("W1")
    make_tool("TW-01", name="Torque Wrench")
    make_tool("TW-02", name="Torque Wrench Small")
    check_out(db, "TW-02", "W1", "Job")

    rows = dashboard_rows(db, status=EffectiveStatus.AVAILABLE, search="torque")
    assert [row.qr_id for row in rows] == ["TW-01"]


def test_days_until_calibration(db, make_tool):
    now = utcnow()
    make_tool("QR-1", name="A", calibration=True, due=now + timedelta(days=2, hours=12))
    make_tool("QR-2", name="B", calibration=True, due=now - timedelta(hours=30))
    make_tool("QR-3", name="C", calibration=True)
    make_tool("QR-4", name="D")

    days = [row.days_until_calibration for row in dashboard_rows(db, now=now)]
    assert days == [3, -1, None, None]


def test_history_is_newest_first(db, make_user, make_tool):
    make_user("W1", name="Ana Torres")
    make_tool("QR-1", name="Drill")
    check_out(db, "QR-1", "W1")
    check_in(db, "QR-1", "W1", "All good")

    rows = history_rows(db)

    assert [row.action for row in rows] == [LogType.CHECK_IN, LogType.CHECK_OUT]
    assert rows[0].tool_name == "Drill"
    assert rows[0].tool_qr_id == "QR-1"
    assert rows[0].user_name == "Ana Torres"
    assert rows[0].user_worker_id == "W1"
    assert rows[0].client_name == "Showroom"
    assert rows[0].comments == "All good"
    assert rows[1].client_name == "---"


def test_history_is_capped(db, make_user, make_tool, monkeypatch):
    monkeypatch.setattr(settings, "HISTORY_LIMIT", 3)
    make_user("W1")
    make_tool("QR-1")
    for _ in range(3):
        check_out(db, "QR-1", "W1", "Job")
        check_in(db, "QR-1", "W1")

    assert len(history_rows(db)) == 3
    assert len(history_rows(db, limit=500)) == 3
    assert len(history_rows(db, limit=2)) == 2
