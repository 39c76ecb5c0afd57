import unittest
from datetime import date

from app.services.filters import StatisticsFilters
from app.services.statistics_service import get_statistics
from dbhelpers import add_drink, add_room, add_tip, add_transaction, make_executor


class EmptyStatisticsTest(unittest.TestCase):
    def test_empty_database_yields_zeros(self):
        executor = make_executor()
        report = get_statistics(executor, StatisticsFilters())

        self.assertEqual(report["statistics"], [])
        self.assertEqual(report["tips_per_room"], [])
        self.assertEqual(report["events"], [])
        self.assertEqual(
            report["summary"],
            {
                "total_items": 0,
                "storno_items": 0,
                "total_revenue": 0.0,
                "storno_revenue": 0.0,
                "transaction_count": 0,
                "total_tips": 0.0,
                "tip_count": 0,
            },
        )

    def test_total_tips_defaults_to_zero_without_tips(self):
        executor = make_executor()
        room = add_room(executor, "Clubraum")
        drink = add_drink(executor, "Bier")
        add_transaction(executor, room, drink, 1, 3.5)

        summary = get_statistics(executor, StatisticsFilters())["summary"]
        self.assertEqual(summary["total_tips"], 0)
        self.assertIsNotNone(summary["total_tips"])
        self.assertEqual(summary["tip_count"], 0)


class StatisticsAggregationTest(unittest.TestCase):
    def setUp(self):
        self.executor = make_executor()
        self.clubraum = add_room(self.executor, "Clubraum")
        self.saal = add_room(self.executor, "Saal")
        self.bier = add_drink(self.executor, "Bier", price=3.5)
        self.cola = add_drink(self.executor, "Cola", price=2.5)

        add_transaction(
            self.executor, self.clubraum, self.bier, 2, 7.0,
            event_name="Sommerfest", timestamp="2026-07-01 19:30:00",
        )
        add_transaction(
            self.executor, self.clubraum, self.bier, 1, 3.5,
            event_name="Sommerfest", is_storno=True, timestamp="2026-07-01 21:00:00",
        )
        add_transaction(self.executor, self.saal, self.cola, 3, 7.5, timestamp="2026-07-02 12:00:00")
        add_transaction(self.executor, self.clubraum, self.cola, 1, 2.5, timestamp="2026-07-05 18:00:00")

        add_tip(self.executor, self.clubraum, 5.0, event_name="Sommerfest", timestamp="2026-07-01 22:00:00")
        add_tip(self.executor, self.saal, 2.5, timestamp="2026-07-02 13:00:00")

    def test_summary_matches_breakdown_without_filters(self):
        report = get_statistics(self.executor, StatisticsFilters())
        summary = report["summary"]

        self.assertEqual(summary["total_items"], sum(row["total_quantity"] for row in report["statistics"]))
        self.assertEqual(summary["total_items"], 6)
        self.assertEqual(summary["storno_items"], 1)
        self.assertAlmostEqual(summary["total_revenue"], 17.0)
        self.assertAlmostEqual(summary["storno_revenue"], 3.5)
        self.assertEqual(summary["transaction_count"], 4)
        self.assertAlmostEqual(summary["total_tips"], 7.5)
        self.assertEqual(summary["tip_count"], 2)
        self.assertEqual(report["events"], ["Hausintern", "Sommerfest"])

    def test_breakdown_ordering(self):
        rows = get_statistics(self.executor, StatisticsFilters())["statistics"]
        self.assertEqual(
            [(row["event_name"], row["room_name"], row["drink_name"]) for row in rows],
            [
                ("Hausintern", "Clubraum", "Cola"),
                ("Hausintern", "Saal", "Cola"),
                ("Sommerfest", "Clubraum", "Bier"),
            ],
        )

    def test_storno_is_summed_separately(self):
        filters = StatisticsFilters(room_id=self.clubraum, event_name="Sommerfest")
        rows = get_statistics(self.executor, filters)["statistics"]

        self.assertEqual(len(rows), 1)
        row = rows[0]
        self.assertEqual(row["total_quantity"], 2)
        self.assertEqual(row["storno_quantity"], 1)
        self.assertAlmostEqual(row["total_revenue"], 7.0)
        self.assertAlmostEqual(row["storno_revenue"], 3.5)

    def test_room_filter_applies_to_tips(self):
        report = get_statistics(self.executor, StatisticsFilters(room_id=self.saal))

        self.assertEqual(report["summary"]["total_items"], 3)
        self.assertAlmostEqual(report["summary"]["total_tips"], 2.5)
        self.assertEqual(report["summary"]["tip_count"], 1)
        self.assertEqual([row["room_name"] for row in report["tips_per_room"]], ["Saal"])

    def test_event_list_ignores_room_and_event_filters(self):
        filters = StatisticsFilters(room_id=self.saal, event_name="Hausintern")
        report = get_statistics(self.executor, filters)
        self.assertEqual(report["events"], ["Hausintern", "Sommerfest"])

    def test_date_range_is_inclusive_by_day(self):
        filters = StatisticsFilters(start_date=date(2026, 7, 1), end_date=date(2026, 7, 1))
        report = get_statistics(self.executor, filters)

        self.assertEqual(report["summary"]["total_items"], 2)
        self.assertEqual(report["summary"]["storno_items"], 1)
        self.assertEqual(report["summary"]["transaction_count"], 2)
        self.assertAlmostEqual(report["summary"]["total_tips"], 5.0)
        self.assertEqual(report["events"], ["Sommerfest"])

    def test_tips_per_room_grouped_by_event(self):
        add_tip(self.executor, self.clubraum, 1.5, event_name="Sommerfest", timestamp="2026-07-01 23:00:00")
        rows = get_statistics(self.executor, StatisticsFilters())["tips_per_room"]

        totals = {(row["room_name"], row["event_name"]): row["total_tips"] for row in rows}
        self.assertEqual(len(rows), 2)
        self.assertAlmostEqual(totals[("Clubraum", "Sommerfest")], 6.5)
        self.assertAlmostEqual(totals[("Saal", "Hausintern")], 2.5)


class EventFilteredTipsTest(unittest.TestCase):
    def test_event_filter_applies_to_tips(self):
        executor = make_executor()
        room = add_room(executor, "Clubraum")
        add_tip(executor, room, 2.0, event_name="Sommerfest")
        add_tip(executor, room, 3.0, event_name="Weihnachtsfeier")

        report = get_statistics(executor, StatisticsFilters(event_name="Sommerfest"))

        self.assertAlmostEqual(report["summary"]["total_tips"], 2.0)
        self.assertEqual(report["summary"]["tip_count"], 1)
        self.assertEqual(
            report["tips_per_room"],
            [{"room_id": room, "room_name": "Clubraum", "event_name": "Sommerfest", "total_tips": 2.0}],
        )


if __name__ == "__main__":
    unittest.main()
