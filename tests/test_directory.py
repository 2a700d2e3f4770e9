import pytest

from kotanama.directory import CityNotFoundError, Directory, InvalidChoiceError


@pytest.fixture
def directory():
    d = Directory()
    d.add_city("Jakarta")
    d.add_city("Bandung")
    return d


def test_add_city_counts(directory):
    assert len(directory) == 2
    assert [c.name for c in directory.cities] == ["Jakarta", "Bandung"]


def test_remove_city_clears_names(directory):
    directory.add_name(1, "Budi")
    node = directory.remove_city("Jakarta")
    assert node.names.is_empty()
    assert len(directory) == 1
    assert directory.cities.find("Jakarta") is None


def test_remove_missing_city_raises(directory):
    with pytest.raises(CityNotFoundError):
        directory.remove_city("Surabaya")
    assert len(directory) == 2


def test_remove_from_empty_raises():
    with pytest.raises(CityNotFoundError):
        Directory().remove_city("Jakarta")


def test_city_at(directory):
    assert directory.city_at(2).name == "Bandung"
    with pytest.raises(InvalidChoiceError):
        directory.city_at(0)
    with pytest.raises(CityNotFoundError):
        directory.city_at(3)


def test_add_and_remove_name(directory):
    directory.add_name(2, "Ani")
    directory.add_name(2, "Budi")
    assert list(directory.city_at(2).names) == ["Ani", "Budi"]
    assert directory.remove_name(2, "Ani") is True
    assert directory.remove_name(2, "Zed") is False
    assert list(directory.city_at(2).names) == ["Budi"]


def test_city_menu_numbers_every_city(directory):
    menu = directory.city_menu()
    assert menu == "1. Jakarta\n2. Bandung\n"


def test_render_empty():
    assert Directory().render() == "Belum ada data kota.\n"


def test_render_layout(directory):
    directory.add_name(1, "Budi")
    directory.add_name(1, "Ani")
    expected = (
        "KOTA: Jakarta -> Bandung -> NULL\n\n"
        "  Jakarta:\n"
        "    [Budi] -> [Ani] -> NULL\n"
        "  Bandung:\n"
        "    (tidak ada nama)\n"
    )
    assert directory.render() == expected