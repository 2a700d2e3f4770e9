import pytest

from kotanama.doublylinked import CityList, CityNode


def names(city_list):
    return [node.name for node in city_list]


def test_empty():
    cities = CityList()
    assert cities.is_empty()
    assert len(cities) == 0
    assert cities.render() == "NULL"


def test_append_returns_node_with_empty_names():
    cities = CityList()
    node = cities.append("Bandung")
    assert isinstance(node, CityNode)
    assert node.name == "Bandung"
    assert node.names.is_empty()
    assert names(cities) == ["Bandung"]


def test_push_front_and_append_order():
    cities = CityList(["B"])
    cities.push_front("A")
    cities.append("C")
    assert names(cities) == ["A", "B", "C"]


def test_insert_after():
    cities = CityList(["A", "C"])
    cities.insert_after("A", "B")
    assert names(cities) == ["A", "B", "C"]
    with pytest.raises(ValueError):
        cities.insert_after("Z", "D")


def test_pop_front():
    cities = CityList(["A", "B"])
    assert cities.pop_front() == "A"
    assert names(cities) == ["B"]
    cities.pop_front()
    with pytest.raises(IndexError):
        cities.pop_front()


@pytest.mark.parametrize("target", ["A", "B", "C"])
def test_remove_head_middle_tail(target):
    cities = CityList(["A", "B", "C"])
    removed = cities.remove(target)
    assert removed.name == target
    assert target not in names(cities)
    assert len(cities) == 2


def test_remove_missing_returns_none():
    cities = CityList(["A"])
    assert cities.remove("Z") is None
    assert names(cities) == ["A"]


def test_find_returns_same_node():
    cities = CityList()
    node = cities.append("A")
    assert cities.find("A") is node
    assert cities.find("Z") is None


def test_reverse_matches_reversed_iteration():
    cities = CityList(["A", "B", "C"])
    backwards = [node.name for node in reversed(cities)]
    cities.reverse()
    assert names(cities) == backwards


def test_render_both_directions():
    cities = CityList(["A", "B"])
    assert cities.render() == "A -> B -> NULL"
    assert cities.render_descending() == "B -> A -> NULL"