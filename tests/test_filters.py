import itertools
import unittest
from datetime import date

from app.services.filters import StatisticsFilters, build_filter


class FilterBuilderTest(unittest.TestCase):
    def test_no_filters_is_trivially_true(self):
        clause = build_filter(StatisticsFilters(), "t")
        self.assertEqual(clause.expression, "1=1")
        self.assertEqual(clause.params, ())
        self.assertEqual(clause.bind_params(), {})

    def test_all_filters_in_stable_order(self):
        filters = StatisticsFilters(
            start_date=date(2026, 7, 1),
            end_date=date(2026, 7, 31),
            room_id=2,
            event_name="Sommerfest",
        )
        clause = build_filter(filters, "t")

        self.assertEqual(
            clause.expression,
            "DATE(t.timestamp) >= :start_date AND DATE(t.timestamp) <= :end_date "
            "AND t.room_id = :room_id AND t.event_name = :event_name",
        )
        self.assertEqual(
            clause.params,
            (
                ("start_date", "2026-07-01"),
                ("end_date", "2026-07-31"),
                ("room_id", 2),
                ("event_name", "Sommerfest"),
            ),
        )

    def test_parameter_count_matches_present_filters(self):
        values = {
            "start_date": date(2026, 1, 1),
            "end_date": date(2026, 12, 31),
            "room_id": 3,
            "event_name": "Fasching",
        }
        order = list(values)
        for mask in itertools.product((False, True), repeat=len(order)):
            present = [name for name, keep in zip(order, mask) if keep]
            with self.subTest(present=present):
                filters = StatisticsFilters(**{name: values[name] for name in present})
                clause = build_filter(filters, "t")
                self.assertEqual([name for name, _ in clause.params], present)
                self.assertEqual(clause.expression.count(":"), len(present))

    def test_for_alias_reuses_parameters(self):
        clause = build_filter(StatisticsFilters(room_id=1, event_name="Kirmes"), "t")
        tips_clause = clause.for_alias("ti")

        self.assertIs(tips_clause.params, clause.params)
        self.assertEqual(tips_clause.expression, "ti.room_id = :room_id AND ti.event_name = :event_name")
        self.assertNotIn("t.", tips_clause.expression.replace("ti.", ""))

    def test_date_range_drops_room_and_event(self):
        filters = StatisticsFilters(
            start_date=date(2026, 7, 1),
            room_id=1,
            event_name="Kirmes",
        )
        clause = build_filter(filters.date_range(), "t")
        self.assertEqual(clause.bind_params(), {"start_date": "2026-07-01"})

    def test_values_never_reach_sql_text(self):
        filters = StatisticsFilters(event_name="x' OR '1'='1")
        clause = build_filter(filters, "t")
        self.assertNotIn("OR", clause.expression)
        self.assertEqual(clause.bind_params()["event_name"], "x' OR '1'='1")


if __name__ == "__main__":
    unittest.main()
