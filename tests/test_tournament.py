from datetime import datetime, timezone

import pytest

from elite_atomic.schemas import TimeControl, Variant
from elite_atomic.tournament import (
    TIME_CONTROLS,
    build_elite_atomic,
    time_control_for,
)

START = datetime(2019, 8, 25, 19, tzinfo=timezone.utc)


class TestTimeControls:

    def test_table_order(self):
        assert [(tc.clock_time, tc.clock_increment) for tc in TIME_CONTROLS] == [
            (3, 2),
            (1, 1),
            (3, 0),
            (1, 0),
            (2, 1),
        ]

    @pytest.mark.parametrize(
        "day, expected",
        [
            (4, TimeControl(3, 2)),
            (11, TimeControl(1, 1)),
            (18, TimeControl(3, 0)),
            (25, TimeControl(1, 0)),
        ],
    )
    def test_lookup_by_sunday(self, day, expected):
        assert time_control_for(datetime(2019, 8, day, 19, tzinfo=timezone.utc)) == expected

    def test_fifth_sunday(self):
        # 2019-09-29 is the fifth Sunday of September
        start = datetime(2019, 9, 29, 19, tzinfo=timezone.utc)
        assert time_control_for(start) == TimeControl(2, 1)

    def test_label(self):
        assert TimeControl(3, 2).label == "3+2"


class TestBuildEliteAtomic:

    def test_fourth_sunday(self):
        request = build_elite_atomic(START)

        assert request.time_control == TimeControl(1, 0)
        assert request.start_date == 1566759600000

    def test_fixed_fields(self):
        request = build_elite_atomic(START)

        assert request.name == "Elite Atomic"
        assert request.minutes == 120
        assert request.variant == Variant.ATOMIC
        assert request.rated is True
        assert request.berserkable is True
        assert request.min_rating == 2000
        assert request.starts_at == START
