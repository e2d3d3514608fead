"""Fixed greeting messages."""

from __future__ import annotations

from datetime import datetime

_DIWALI_DAY = 27
_BANNER = (
    "--------------------------------------Happy Diwali"
    "---------------------------------- "
)


def diwali_message(now: datetime | None = None) -> str:
    """Return the Diwali message for ``now`` (local time when omitted).

    A banner heads the message on the 27th day of any month.
    """
    if now is None:
        now = datetime.now()
    lines = []
    if now.day == _DIWALI_DAY:
        lines.append(_BANNER)
    lines.append("Yeah Today Is Diwali ")
    lines.append(
        f"now: {now.year}-{now.month}-{now.day} "
        f"{now.hour}:{now.minute}:{now.second}"
    )
    return "\n".join(lines) + "\n"


def greeting() -> str:
    """Return a friendly greeting."""
    return "Hey ! Bro I Love You"