"""
tablewriter/ansi.py

Terminal control-sequence stripping and display-width measurement.
"""

import re

from wcwidth import wcwidth

# ESC or 8-bit CSI introducer, optional intermediate bytes, then either a
# BEL-terminated OSC payload or a numeric CSI parameter list and final byte.
CONTROL_SEQUENCE_RE = re.compile(
    "[\x1b\x9b][\\[\\]()#;?]*"
    "(?:(?:(?:[a-zA-Z\\d]*(?:;[a-zA-Z\\d]*)*)?\x07)"
    "|(?:(?:\\d{1,4}(?:;\\d{0,4})*)?[\\dA-PRZcf-ntqry=><~]))"
)


def strip_control_sequences(text: str) -> str:
    """Remove all terminal control sequences from *text*."""
    return CONTROL_SEQUENCE_RE.sub("", text)


def display_width(text: str) -> int:
    """
    Return the number of terminal columns *text* occupies when printed.

    Control sequences are removed first. Wide (East Asian) characters count
    as two columns; zero-width and non-printable characters count as none.
    """
    total = 0
    for ch in strip_control_sequences(text):
        w = wcwidth(ch)
        if w > 0:
            total += w
    return total
