import unittest

from vastuplan.core.registry import RuleRegistry, create_default_registry
from vastuplan.core.scoring import ComplianceScorer, score_compliance
from vastuplan.core.setbacks import compute_envelope
from vastuplan.layouts.ground_floor import layout_ground_floor
from vastuplan.layouts.upper_floor import layout_upper_floor
from vastuplan.models import (
    Facing, FloorPlan, PlanConfig, PlanContext, Room, RoomType, Severity, Zone,
)
from vastuplan.rules.facing import FacingRule


def _floors(config):
    envelope = compute_envelope(config)
    floors = [layout_ground_floor(envelope, config)]
    for index in range(1, config.floors):
        floors.append(layout_upper_floor(envelope, config, index))
    return floors


def _room(id, type, zone, name=None):
    return Room(id=id, name=name or id.title(), type=type,
                x=0, y=0, width=10, height=10, zone=zone)


def _floor(*rooms):
    return FloorPlan(floor=0, label="Ground Floor", level="+0.00m",
                     width=20, depth=20, rooms=list(rooms))


class DefaultPlanScoringTest(unittest.TestCase):
    def setUp(self):
        self.result = score_compliance(_floors(PlanConfig()), "E")

    def test_every_rule_fully_satisfied(self):
        self.assertEqual(self.result.score, 100)
        self.assertEqual(self.result.max_points, 100)
        self.assertTrue(all(f.severity == Severity.GOOD for f in self.result.findings))

    def test_findings_follow_rule_order(self):
        self.assertEqual(
            [f.rule_id for f in self.result.findings],
            ["facing", "room.kitchen", "room.master", "room.pooja", "room.toilet",
             "room.living", "room.staircase", "room.dining"],
        )
        self.assertEqual(self.result.findings[0].message,
                         "E-facing entrance: excellent Vastu alignment")
        self.assertEqual(self.result.findings[1].message, "✓ Kitchen in SE (Agneya)")


class MissingRoomsTest(unittest.TestCase):
    def test_absent_rooms_do_not_count(self):
        config = PlanConfig(floors=1, bedrooms=2, has_pooja=False)
        result = score_compliance(_floors(config), "E")
        self.assertEqual(result.max_points, 78)
        self.assertEqual(result.score, 100)
        ids = [f.rule_id for f in result.findings]
        self.assertNotIn("room.pooja", ids)
        self.assertNotIn("room.staircase", ids)

    def test_south_facing_loses_facing_points(self):
        config = PlanConfig(floors=1, bedrooms=2, has_pooja=False, facing="S")
        result = score_compliance(_floors(config), "S")
        # (78 - 18 + 4) / 78
        self.assertEqual(result.score, 82)
        facing = result.findings[0]
        self.assertEqual(facing.severity, Severity.ACCEPTABLE)
        self.assertEqual(facing.message, "S-facing: consider Vastu remedies at the entrance")

    def test_empty_plan_scores_facing_only(self):
        result = score_compliance([], Facing.NORTH)
        self.assertEqual(len(result.findings), 1)
        self.assertEqual(result.score, 89)  # 16 / 18


class RoomZoneRuleTest(unittest.TestCase):
    def test_acceptable_and_poor_zones(self):
        floor = _floor(
            _room("kitchen", RoomType.KITCHEN, Zone.E),
            _room("master", RoomType.MASTER_BED, Zone.NE, name="Master Bedroom"),
        )
        result = score_compliance([floor], "N")
        kitchen, master = result.findings[1], result.findings[2]

        self.assertEqual(kitchen.severity, Severity.ACCEPTABLE)
        self.assertEqual(kitchen.points, 9)
        self.assertEqual(kitchen.message, "~ Kitchen in E: acceptable, but SE is ideal")

        self.assertEqual(master.severity, Severity.POOR)
        self.assertEqual(master.points, 0)
        self.assertEqual(master.message, "✗ Master Bedroom in NE: Vastu recommends SW")

        # (16 + 9 + 0) / (18 + 15 + 15)
        self.assertEqual(result.score, 52)

    def test_acceptable_credit_rounds_half_up(self):
        floor = _floor(_room("dining", RoomType.DINING, Zone.S))
        dining = score_compliance([floor], "E").findings[1]
        self.assertEqual(dining.points, 5)
        self.assertEqual(dining.max_points, 8)

    def test_poor_message_lists_all_ideal_zones(self):
        floor = _floor(_room("toilet_x", RoomType.TOILET, Zone.SE, name="Bath"))
        toilet = score_compliance([floor], "E").findings[1]
        self.assertEqual(toilet.message, "✗ Bath in SE: Vastu recommends NW/W")

    def test_room_found_by_type_tag(self):
        floor = _floor(_room("cook", RoomType.KITCHEN, Zone.SE))
        kitchen = score_compliance([floor], "E").findings[1]
        self.assertEqual(kitchen.rule_id, "room.kitchen")
        self.assertEqual(kitchen.severity, Severity.GOOD)


class RegistryTest(unittest.TestCase):
    def test_default_registry_order(self):
        registry = create_default_registry()
        self.assertEqual(len(registry), 8)
        self.assertEqual(registry.list_rules()[0].get_id(), "facing")
        self.assertEqual(sum(r.weight for r in registry.list_rules()), 100)

    def test_custom_registry(self):
        registry = RuleRegistry()
        registry.register(FacingRule())
        scorer = ComplianceScorer(registry)
        config = PlanConfig(facing="W")
        context = PlanContext(config=config, envelope=compute_envelope(config))
        result = scorer.score(context)
        self.assertEqual([f.rule_id for f in result.findings], ["facing"])
        self.assertEqual(result.score, 44)  # 8 / 18

        registry.unregister("facing")
        self.assertIsNone(registry.get_rule("facing"))
        self.assertEqual(scorer.score(context).score, 0)
