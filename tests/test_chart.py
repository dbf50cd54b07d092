import unittest

from reserve_seats.chart import (
    InvalidDimensionError,
    InvalidSeatTokenError,
    SeatCoordinate,
    SeatingChart,
    SeatState,
)


class TestSeatCoordinate(unittest.TestCase):
    def test_parse_is_zero_based(self):
        self.assertEqual(SeatCoordinate.parse("R1C6"), SeatCoordinate(0, 5))
        self.assertEqual(SeatCoordinate.parse(" R12C3 "), SeatCoordinate(11, 2))

    def test_label_round_trip(self):
        self.assertEqual(SeatCoordinate(2, 9).label(), "R3C10")

    def test_bad_token_raises(self):
        for token in ("", "R1", "C1R1", "R1C", "RxC2", "r1c1"):
            with self.assertRaises(InvalidSeatTokenError):
                SeatCoordinate.parse(token)

    def test_bad_token_reports_position(self):
        with self.assertRaises(InvalidSeatTokenError) as ctx:
            SeatCoordinate.parse("seat", index=4)
        self.assertEqual(ctx.exception.index, 4)


class TestSeatingChart(unittest.TestCase):
    def test_init(self):
        c = SeatingChart(3, 11, "R1C6")
        self.assertEqual((c.rows, c.columns), (3, 11))
        self.assertEqual(c.best_seat, SeatCoordinate(0, 5))
        self.assertEqual(c.available_count(), 33)
        self.assertFalse(c.is_reserved(0, 0))

    def test_invalid_dimensions_raise(self):
        with self.assertRaises(InvalidDimensionError):
            SeatingChart(0, 11, "R1C6")
        with self.assertRaises(InvalidDimensionError):
            SeatingChart(3, 0, "R1C6")

    def test_distances(self):
        c = SeatingChart(3, 11, SeatCoordinate(0, 5))
        for r in range(c.rows):
            for col in range(c.columns):
                self.assertEqual(c.distance_at(r, col), abs(r - 0) + abs(col - 5))
        self.assertEqual(c.distance_at(0, 5), 0)
        self.assertEqual(c.distance_at(2, 10), 7)

    def test_distances_unchanged_by_reservations(self):
        c = SeatingChart(2, 4, "R2C2")
        before = [c.distance_at(r, col) for r in range(2) for col in range(4)]
        c.reserve(1, 1, SeatState.initial)
        c.reserve(0, 3)
        after = [c.distance_at(r, col) for r in range(2) for col in range(4)]
        self.assertEqual(before, after)

    def test_best_seat_outside_grid_is_allowed(self):
        c = SeatingChart(2, 2, SeatCoordinate(4, 0))
        self.assertEqual(c.distance_at(0, 0), 4)
        self.assertEqual(c.distance_at(1, 1), 4)

    def test_reserve_twice_returns_false(self):
        c = SeatingChart(1, 2, "R1C1")
        self.assertTrue(c.reserve(0, 1, SeatState.initial))
        self.assertEqual(c.available_count(), 1)
        self.assertFalse(c.reserve(0, 1, SeatState.best_available))
        self.assertEqual(c.available_count(), 1)
        self.assertIs(c.state_at(0, 1), SeatState.initial)

    def test_available_count_tracks_reservations(self):
        c = SeatingChart(3, 4, "R1C1")
        seats = [(0, 0), (1, 2), (2, 3), (1, 2), (0, 1)]
        for r, col in seats:
            c.reserve(r, col)
            reserved = sum(c.is_reserved(rr, cc) for rr in range(3) for cc in range(4))
            self.assertEqual(c.available_count(), 12 - reserved)
            self.assertEqual(c.reserved_count(), reserved)

    def test_reserve_free_state_rejected(self):
        c = SeatingChart(1, 1, "R1C1")
        with self.assertRaises(ValueError):
            c.reserve(0, 0, SeatState.free)

    def test_out_of_bounds_lookup_raises(self):
        c = SeatingChart(2, 2, "R1C1")
        self.assertFalse(c.in_bounds(2, 0))
        self.assertFalse(c.in_bounds(0, -1))
        with self.assertRaises(IndexError):
            c.is_reserved(2, 0)
        with self.assertRaises(IndexError):
            c.distance_at(0, -1)

    def test_markers(self):
        self.assertEqual(SeatState.free.marker, "")
        self.assertEqual(SeatState.initial.marker, "x")
        self.assertEqual(SeatState.best_available.marker, "o")


if __name__ == "__main__":
    unittest.main()
