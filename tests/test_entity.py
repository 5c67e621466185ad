"""
Animal Hierarchy Tests

🧪 Covers construction order, default values, accessors and the shared
instance counter across Animal, Mammal and Rabbit.
"""

import copy
import logging

import pytest

from menagerie.core import Animal, Mammal, Rabbit, animal_counter


class TestAnimal:

    def test_construct_stores_name(self):
        animal = Animal("Generic")
        assert animal.name == "Generic"

    def test_accepts_empty_name(self):
        animal = Animal("")
        assert animal.name == ""
        assert Animal.total_count() == 1

    def test_name_setter(self):
        animal = Animal("Old")
        animal.name = "New"
        assert animal.name == "New"

    def test_say_hello(self):
        assert Animal("A").say_hello() == "Hello, I am an animal"
        assert Rabbit("R").say_hello() == "Hello, I am an animal"

    def test_total_count_is_static(self):
        assert Animal.total_count() == 0
        Animal("A")
        assert Animal.total_count() == 1
        assert Mammal.total_count() == 1
        assert Rabbit.total_count() == 1

    def test_total_count_has_no_side_effect(self):
        Animal("A")
        Animal.total_count()
        Animal.total_count()
        assert Animal.total_count() == 1

    def test_construction_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="menagerie.core.entity"):
            Rabbit("Logged")
        assert "Created Rabbit 'Logged'" in caplog.text


class TestMammal:

    def test_walks_defaults_to_true(self):
        assert Mammal("X").walks_on_land() is True

    def test_walks_given(self):
        whale = Mammal("Whale", False)
        assert whale.walks_on_land() is False
        assert whale.name == "Whale"

    def test_walks_setter(self):
        mammal = Mammal("Seal")
        mammal.walks = False
        assert mammal.walks_on_land() is False
        assert mammal.walks is False

    def test_single_count_per_construction(self):
        Mammal("X")
        assert Animal.total_count() == 1, "Mammal must count once, not once per tier"

    def test_is_an_animal(self):
        assert isinstance(Mammal("X"), Animal)


class TestRabbit:

    @pytest.mark.parametrize("name,walks,jumps", [
        ("Bittu", True, 3),
        ("Bunny", False, 0),
        ("", True, -4),
    ])
    def test_attributes_match_inputs(self, name, walks, jumps):
        rabbit = Rabbit(name, walks, jumps)
        assert rabbit.name == name
        assert rabbit.walks_on_land() is walks
        assert rabbit.jump_count == jumps

    def test_jumps_default(self):
        assert Rabbit("X", True).jump_count == 2

    def test_walks_default_passes_through(self):
        assert Rabbit("X").walks_on_land() is True

    def test_jump_count_is_read_only(self):
        rabbit = Rabbit("X", True, 3)
        with pytest.raises(AttributeError):
            rabbit.jump_count = 10
        assert rabbit.jump_count == 3, "Failed assignment must not change state"

    def test_single_count_per_construction(self):
        Rabbit("X", True, 1)
        assert Animal.total_count() == 1
        assert animal_counter.by_kind() == {"Rabbit": 1}

    def test_inherits_accessors(self):
        rabbit = Rabbit("Old", True)
        rabbit.name = "New"
        rabbit.walks = False
        assert rabbit.name == "New"
        assert rabbit.walks_on_land() is False
        assert isinstance(rabbit, Mammal)
        assert isinstance(rabbit, Animal)


class TestHierarchy:

    def test_two_rabbits_scenario(self):
        r1 = Rabbit("Bittu", True, 3)
        Rabbit("Bunny", True, 2)

        assert r1.name == "Bittu"
        assert r1.walks_on_land() is True
        assert r1.jump_count == 3
        assert Animal.total_count() == 2

    def test_mixed_constructions(self):
        entities = [Animal("a"), Rabbit("r1"), Mammal("m"), Rabbit("r2"), Animal("b")]
        assert Animal.total_count() == len(entities)
        assert animal_counter.by_kind() == {"Animal": 2, "Mammal": 1, "Rabbit": 2}

    def test_rename_is_isolated(self):
        first = Rabbit("First")
        second = Rabbit("Second")

        first.name = "Renamed"

        assert second.name == "Second"
        assert Animal.total_count() == 2

    def test_state_is_private(self):
        rabbit = Rabbit("X", True, 5)
        assert rabbit.model_dump() == {}, "No public fields should be exposed"
        with pytest.raises(ValueError):
            rabbit.jumps = 9
        assert rabbit.jump_count == 5

    def test_summary_extends_parent(self):
        assert Animal("A").summary() == {"kind": "Animal", "name": "A"}
        assert Mammal("M", False).summary() == {
            "kind": "Mammal", "name": "M", "walks_on_land": False
        }
        assert Rabbit("R", True, 4).summary() == {
            "kind": "Rabbit", "name": "R", "walks_on_land": True, "jump_count": 4
        }

    def test_repr(self):
        assert repr(Rabbit("Bittu", True, 3)) == (
            "Rabbit(name='Bittu', walks_on_land=True, jump_count=3)"
        )


_assignments = []


class RecordingRabbit(Rabbit):
    """Rabbit that records each private assignment with the counter value at that moment."""

    def __setattr__(self, name, value):
        _assignments.append((name, animal_counter.total))
        super().__setattr__(name, value)


class TestConstructionOrder:

    def test_parent_tiers_run_first_exactly_once(self):
        _assignments.clear()
        rabbit = RecordingRabbit("Ordered", False, 7)

        assert _assignments == [
            ("_name", 0),
            ("_walks", 1),
            ("_jumps", 1),
        ], "Animal must finish (name set, counted once) before Mammal, then Rabbit"
        assert rabbit.summary() == {
            "kind": "RecordingRabbit", "name": "Ordered", "walks_on_land": False, "jump_count": 7
        }
        assert Animal.total_count() == 1


class TestAlternateConstruction:

    def test_model_copy_is_counted(self):
        rabbit = Rabbit("Bittu", True, 3)
        twin = rabbit.model_copy()
        deep_twin = rabbit.model_copy(deep=True)

        assert twin.jump_count == deep_twin.jump_count == 3
        assert Animal.total_count() == 3
        assert animal_counter.by_kind() == {"Rabbit": 3}

    def test_copy_module_is_counted(self):
        rabbit = Rabbit("Bittu", True, 3)
        shallow = copy.copy(rabbit)
        deep = copy.deepcopy(rabbit)

        assert shallow.name == deep.name == "Bittu"
        assert Animal.total_count() == 3

    def test_copy_keeps_instances_independent(self):
        rabbit = Rabbit("Bittu")
        twin = copy.deepcopy(rabbit)
        twin.name = "Twin"
        assert rabbit.name == "Bittu"

    @pytest.mark.parametrize("cls", [Animal, Mammal, Rabbit])
    def test_model_construct_rejected(self, cls):
        with pytest.raises(TypeError):
            cls.model_construct()
        assert Animal.total_count() == 0

    def test_model_validate_rejected(self):
        with pytest.raises(TypeError):
            Rabbit.model_validate({})
        with pytest.raises(TypeError):
            Rabbit.model_validate_json("{}")
        assert Animal.total_count() == 0
