"""Effective status and calibration blocking."""
from datetime import datetime, timedelta

import pytest

from toolcrib.models import Tool, ToolStatus
from toolcrib.services.status import (
    EffectiveStatus,
    checkout_block_reason,
    effective_status,
    is_calibration_expired,
)

NOW = datetime(2026, 10, 19, 12, 0, 0)
YESTERDAY = NOW - timedelta(days=1)
TOMORROW = NOW + timedelta(days=1)


def _tool(status=ToolStatus.AVAILABLE, calibration=False, due=None):
    return Tool(
        name="Torque Wrench",
        qr_id="TW-01",
        status=status,
        is_calibration_tool=calibration,
        next_calibration_date=due,
    )


@pytest.mark.parametrize("status,calibration,due,expected", [
    (ToolStatus.AVAILABLE, False, None, EffectiveStatus.AVAILABLE),
    (ToolStatus.IN_USE, False, None, EffectiveStatus.IN_USE),
    # A past date means nothing on a tool that is not calibrated
    (ToolStatus.AVAILABLE, False, YESTERDAY, EffectiveStatus.AVAILABLE),
    (ToolStatus.AVAILABLE, True, YESTERDAY, EffectiveStatus.IN_CALIBRATION),
    (ToolStatus.IN_USE, True, YESTERDAY, EffectiveStatus.IN_CALIBRATION),
    (ToolStatus.AVAILABLE, True, TOMORROW, EffectiveStatus.AVAILABLE),
    (ToolStatus.IN_USE, True, TOMORROW, EffectiveStatus.IN_USE),
    # No date assigned is blocked for check-out but not shown as expired
    (ToolStatus.AVAILABLE, True, None, EffectiveStatus.AVAILABLE),
    (ToolStatus.AVAILABLE, True, NOW, EffectiveStatus.AVAILABLE),
])
def test_effective_status(status, calibration, due, expected):
    assert effective_status(_tool(status, calibration, due), NOW) == expected


def test_effective_status_defaults_to_current_time():
    tool = _tool(calibration=True, due=datetime(2000, 1, 1))
    assert effective_status(tool) == EffectiveStatus.IN_CALIBRATION


def test_is_calibration_expired_is_strict():
    assert not is_calibration_expired(_tool(calibration=True, due=NOW), NOW)
    assert is_calibration_expired(_tool(calibration=True, due=NOW - timedelta(seconds=1)), NOW)


def test_no_block_for_regular_tool():
    assert checkout_block_reason(_tool(due=YESTERDAY), NOW) is None


def test_no_block_for_calibration_in_date():
    assert checkout_block_reason(_tool(calibration=True, due=TOMORROW), NOW) is None


def test_block_names_expiry_date():
    reason = checkout_block_reason(_tool(calibration=True, due=YESTERDAY), NOW)
    assert reason is not None
    assert "Torque Wrench" in reason
    assert "2026-10-18" in reason


def test_block_when_no_date_assigned():
    reason = checkout_block_reason(_tool(calibration=True), NOW)
    assert reason is not None
    assert "no next calibration date" in reason
