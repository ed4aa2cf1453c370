import logging
from datetime import datetime

from elite_atomic.schedule import slot_of
from elite_atomic.schemas import TimeControl, TournamentRequest, Variant

logger = logging.getLogger(__name__)

ELITE_ATOMIC_NAME = "Elite Atomic"
ELITE_ATOMIC_MINUTES = 120
ELITE_ATOMIC_MIN_RATING = 2000

# Indexed by slot_of(start): first Sunday of the month is 3+2, second 1+1, ...
TIME_CONTROLS: tuple[TimeControl, ...] = (
    TimeControl(3, 2),
    TimeControl(1, 1),
    TimeControl(3, 0),
    TimeControl(1, 0),
    TimeControl(2, 1),
)


def time_control_for(start: datetime) -> TimeControl:
    """
    Look up the time control for the Sunday `start` falls on.

    Five entries cover every possible slot since no month has more than
    five Sundays.
    """
    slot = slot_of(start)
    if not 0 <= slot < len(TIME_CONTROLS):
        raise ValueError(
            f"No time control for slot {slot} ({start:%Y-%m-%d}). "
            f"Update TIME_CONTROLS in elite_atomic/tournament.py."
        )

    return TIME_CONTROLS[slot]


def build_elite_atomic(start: datetime) -> TournamentRequest:
    """
    Build the Elite Atomic creation request for a given start instant.

    :param start: tournament start, normally from `next_occurrence`
    :return: validated TournamentRequest
    """
    tc = time_control_for(start)

    request = TournamentRequest(
        name=ELITE_ATOMIC_NAME,
        clock_time=tc.clock_time,
        clock_increment=tc.clock_increment,
        minutes=ELITE_ATOMIC_MINUTES,
        starts_at=start,
        variant=Variant.ATOMIC,
        rated=True,
        berserkable=True,
        min_rating=ELITE_ATOMIC_MIN_RATING,
    )

    logger.info(
        "Built %s %s starting %s",
        request.name,
        tc.label,
        start.isoformat(),
    )

    return request
