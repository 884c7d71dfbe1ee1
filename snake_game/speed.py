"""Speed progression and the speed control band.

Speed is the delay between ticks in milliseconds, so a lower value means
a faster snake.
"""

# (minimum delay, label) pairs, checked from slowest to fastest.
SPEED_LABELS = [
    (180, "Very slow"),
    (150, "Slow"),
    (120, "Medium slow"),
    (90, "Medium"),
    (70, "Medium fast"),
    (50, "Fast"),
]


def next_speed(speed, floor_speed, decrement):
    """Speed after one food is eaten: one step faster, never past the floor."""
    if speed > floor_speed:
        return max(floor_speed, speed - decrement)
    return speed


def clamp_speed(value, lowest, highest):
    """Clamp an external speed-control value into the allowed band."""
    return max(lowest, min(int(value), highest))


def speed_label(speed):
    for threshold, label in SPEED_LABELS:
        if speed >= threshold:
            return label
    return "Very fast"
