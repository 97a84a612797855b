from __future__ import annotations
import math

UNITS = ["B", "KB", "MB", "GB", "TB"]

def format_bytes(num: int) -> str:
    if num < 0:
        return str(num)
    if num == 0:
        return "0 B"
    i = min(int(math.floor(math.log(num, 1024))), len(UNITS) - 1)
    # float log can land just under an exact power of 1024
    if i + 1 < len(UNITS) and num >= 1024 ** (i + 1):
        i += 1
    x = num / (1024 ** i)
    if i == 0 or x >= 100:
        return f"{x:.0f} {UNITS[i]}"
    return f"{x:.2f} {UNITS[i]}"

def format_percent(value: float) -> str:
    return f"{clamp(value, 0.0, 100.0):5.1f}%"

def clamp(v, lo, hi):
    return lo if v < lo else hi if v > hi else v
