"""
Status-bar rendering: one summary line plus a dropdown detail block.
"""
from __future__ import annotations

from models import HostReport
from utils import format_gb_pair, format_percent, format_rpm

SEPARATOR = "---"
REFRESH_LINE = "Refresh Now | refresh=true"


def render_summary(report: HostReport) -> str:
    """Line shown persistently in the menu bar: temp | cpu | memory."""
    return " | ".join([
        f"🌡️ {report.temperature}",
        f"💻 {format_percent(report.cpu_percent, 1)} CPU",
        f"🧠 {format_gb_pair(report.memory.used_gb, report.memory.total_gb, 3)}",
    ])


def render_fan_line(report: HostReport) -> str | None:
    fan = report.fan
    if not fan.present:
        return None
    return (
        f"🌀 Fan: {format_rpm(fan.rpm)}"
        f" ({format_percent(fan.percent, 1)} of {format_rpm(fan.max_rpm)})"
    )


def render_detail(report: HostReport) -> str:
    lines = [
        SEPARATOR,
        f"🌡️ Temp: {report.temperature}",
        f"💻 CPU: {format_percent(report.cpu_percent, 2)}",
        f"💾 Memory: {format_gb_pair(report.memory.used_gb, report.memory.total_gb, 3)}",
    ]
    fan_line = render_fan_line(report)
    if fan_line:
        lines.append(fan_line)
    lines.append(REFRESH_LINE)
    return "\n".join(lines) + "\n"


def render(report: HostReport) -> str:
    """Full plugin output: summary on line 1, detail block after it."""
    return render_summary(report) + "\n" + render_detail(report)
