import itertools
import unittest

from pydantic import ValidationError

import vastuplan
from vastuplan.core.generator import PlanGenerator
from vastuplan.layouts.ground_floor import GroundFloorLayout
from vastuplan.models import Facing, PlanConfig, Rect, RoomType, Zone
from vastuplan.services.plan_service import PlanService

PLOT_SIZES = [(18, 18), (22, 40), (24, 27), (30, 30), (40, 50), (60, 80)]


def _configs():
    for (width, depth), facing, floors in itertools.product(PLOT_SIZES, Facing, (1, 2, 3)):
        for toggles in (True, False):
            yield PlanConfig(
                plot_width=width, plot_depth=depth, facing=facing, floors=floors,
                bedrooms=2 * floors, bathrooms=2 * floors + 1,
                has_pooja=toggles, has_balcony=toggles,
                has_parking=toggles, has_store=toggles,
            )


class GeneratorScenarioTest(unittest.TestCase):
    def test_default_plan(self):
        result = PlanGenerator().generate(PlanConfig(
            plot_width=30, plot_depth=30, facing="E", floors=2, bedrooms=3,
            bathrooms=3, has_pooja=True, has_balcony=True, has_parking=True,
            has_store=True,
        ))
        ground = result.floors[0]
        self.assertEqual(ground.get_room("master").zone, Zone.SW)
        self.assertEqual(ground.get_room("living").zone, Zone.NE)
        self.assertEqual(ground.get_room("kitchen").zone, Zone.SE)
        self.assertEqual(ground.get_room("staircase").zone, Zone.SW)
        self.assertGreaterEqual(result.compliance.score, 80)
        self.assertEqual(result.facing.label, "East")
        self.assertEqual(result.facing.vastu_rank, 1)
        self.assertEqual(result.side_labels.bottom, "EAST (Road)")
        self.assertEqual((result.envelope.width, result.envelope.depth), (26, 25))
        self.assertEqual([f.label for f in result.floors], ["Ground Floor", "First Floor"])

    def test_tiny_single_storey_plot(self):
        result = PlanGenerator().generate(PlanConfig(
            plot_width=18, plot_depth=18, floors=1, bedrooms=1,
        ))
        self.assertTrue(result.envelope.is_tiny)
        self.assertEqual(len(result.floors), 1)
        for room in result.floors[0].rooms:
            self.assertGreater(room.width, 0)
            self.assertGreater(room.height, 0)

    def test_single_bathroom_has_no_common_bath(self):
        for floors in (2, 3):
            result = PlanGenerator().generate(PlanConfig(floors=floors, bathrooms=1))
            names = [r.name for f in result.floors for r in f.rooms]
            self.assertNotIn("Common Bath", names)
            self.assertIn("Attached Bath", names)

    def test_missing_layout_raises(self):
        generator = PlanGenerator(layouts=[GroundFloorLayout()])
        with self.assertRaises(LookupError):
            generator.generate(PlanConfig(floors=2))


class GeneratorPropertiesTest(unittest.TestCase):
    def test_rooms_stay_inside_envelope_without_overlap(self):
        generator = PlanGenerator()
        for config in _configs():
            result = generator.generate(config)
            bounds = Rect(x=0, y=0, width=result.envelope.width, height=result.envelope.depth)
            for floor in result.floors:
                inside = [r for r in floor.rooms if not r.is_outside]
                for room in floor.rooms:
                    self.assertGreaterEqual(room.width, 1, (config, room.id))
                    self.assertGreaterEqual(room.height, 1, (config, room.id))
                for room in inside:
                    self.assertTrue(bounds.contains(room.rect), (config, room.id))
                for a, b in itertools.combinations(inside, 2):
                    self.assertFalse(a.rect.overlaps(b.rect), (config, a.id, b.id))

    def test_ids_are_unique_per_floor(self):
        for config in _configs():
            for floor in PlanGenerator().generate(config).floors:
                ids = [r.id for r in floor.rooms]
                self.assertEqual(len(ids), len(set(ids)))

    def test_score_is_bounded(self):
        for config in _configs():
            score = PlanGenerator().generate(config).compliance.score
            self.assertGreaterEqual(score, 0)
            self.assertLessEqual(score, 100)

    def test_generation_is_deterministic(self):
        config = PlanConfig(plot_width=40, plot_depth=50, facing="N", floors=3, bedrooms=6)
        first = PlanGenerator().generate(config)
        second = PlanGenerator().generate(config)
        self.assertEqual(first.model_dump_json(), second.model_dump_json())

    def test_bedroom_count_matches_request(self):
        for (width, depth), floors in itertools.product(PLOT_SIZES, (1, 2, 3)):
            for bedrooms in range(1, 2 * floors + 1):
                config = PlanConfig(plot_width=width, plot_depth=depth,
                                    floors=floors, bedrooms=bedrooms)
                result = PlanGenerator().generate(config)
                envelope = result.envelope
                if floors == 1:
                    # A tiny single storey keeps only the master bedroom
                    expected = 1 if envelope.is_tiny else bedrooms
                else:
                    per_floor = 3 if envelope.width > 22 else 2
                    expected = min(bedrooms, 1 + per_floor * (floors - 1))
                self.assertEqual(result.bedroom_count, expected,
                                 (width, depth, floors, bedrooms))

    def test_narrow_three_storey_plan_keeps_every_bedroom(self):
        for bedrooms in (4, 5):
            result = PlanGenerator().generate(PlanConfig(
                plot_width=24, plot_depth=40, floors=3, bedrooms=bedrooms,
            ))
            self.assertEqual(result.bedroom_count, bedrooms)
            self.assertNotEqual(result.floors[2].rooms_of_type(RoomType.BEDROOM), [])

    def test_facing_changes_score(self):
        east = PlanGenerator().generate(PlanConfig(facing="E")).compliance.score
        south = PlanGenerator().generate(PlanConfig(facing="S")).compliance.score
        self.assertGreater(east, south)

    def test_anchor_follows_facing(self):
        east = PlanGenerator().generate(PlanConfig(facing="E"))
        north = PlanGenerator().generate(PlanConfig(facing="N"))
        self.assertEqual(east.floors[0].get_room("master").anchor, (0.0, 1.0))
        self.assertEqual(north.floors[0].get_room("master").anchor, (0.0, 0.0))


class FacadeTest(unittest.TestCase):
    def test_generate_accepts_camel_case_mapping(self):
        result = vastuplan.generate({
            "plotWidth": 40, "plotDepth": 50, "facing": "N",
            "floors": 1, "bedrooms": 2, "hasParking": True,
        })
        self.assertEqual(result.config.plot_width, 40)
        self.assertEqual(result.bedroom_count, 2)
        self.assertIsNotNone(result.floors[0].get_room("parking"))
        self.assertIsNotNone(result.floors[0].get_room("bed_g2"))

    def test_generate_defaults(self):
        result = vastuplan.generate()
        self.assertEqual(result.config, PlanConfig())
        self.assertEqual(len(result.floors), 2)

    def test_service_lists_rules(self):
        rules = PlanService().list_rules()
        self.assertEqual(rules[0], {"id": "facing", "name": "Plot facing", "weight": 18})
        self.assertEqual(rules[-1]["id"], "room.dining")

    def test_built_up_area_sums_floors(self):
        result = vastuplan.generate(PlanConfig(floors=3, bedrooms=5))
        self.assertEqual(
            result.built_up_area,
            sum(f.stats.built_up_area for f in result.floors),
        )
        self.assertEqual(
            [r.type for r in result.floors[2].rooms if r.is_bedroom],
            [RoomType.BEDROOM],
        )

    def test_result_is_immutable(self):
        result = vastuplan.generate()
        with self.assertRaises(ValidationError):
            result.compliance.score = 0
        with self.assertRaises(ValidationError):
            result.floors[0].label = "Basement"
        with self.assertRaises(ValidationError):
            result.floors[0].rooms[0].width = 100
        with self.assertRaises(ValidationError):
            result.envelope.width = 1
        self.assertEqual(result.floors[0].stats.room_count, len(result.floors[0].rooms))
