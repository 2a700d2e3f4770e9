# kotanama

A small interactive console directory for a customer-service desk. It keeps
cities in the order they were added, and for each city the names registered
there.

## Installation

    pip install .

To run the tests as well:

    pip install ".[test]"
    pytest

## Running

    kotanama

The command takes no options apart from `--help`. The same console starts with
`python -m kotanama.cli`.

The main menu (in Indonesian, as used at the desk) offers:

1. **Tambah Data**: add a city, or add a name to a city picked by its number
2. **Hapus Data**: delete a city together with all its names, or delete one
   name from a city picked by its number
3. **Tampilkan Data**: show the cities in order and the names under each
4. **Keluar**: quit

Both sub-menus keep asking until **3. Kembali** is chosen. After each action
from the main menu the console waits for Enter. Each entry is read as the
first word of a line, cut to 49 characters, so city names and people's names
cannot contain spaces. A choice that is not a listed number prints
`Pilihan tidak valid!`. The console also stops when its input ends.

The screen is cleared between menus by running `cls` on Windows and `clear`
elsewhere; if that command is missing, an ANSI clear-screen sequence is
written instead.

## Using it from Python

```python
from kotanama.directory import Directory

directory = Directory()
directory.add_city("Bandung")
directory.add_city("Jakarta")
directory.add_name(1, "Andi")
directory.add_name(1, "Budi")
print(directory.render())
```

The output is:

    KOTA: Bandung -> Jakarta -> NULL

      Bandung:
        [Andi] -> [Budi] -> NULL
      Jakarta:
        (tidak ada nama)

`Directory` offers:

- `add_city(name)` appends a city and returns its `CityNode`.
- `remove_city(name)` removes a city and all its names; it raises
  `CityNotFoundError` for an unknown city.
- `city_at(number)` returns the city at a 1-based position; it raises
  `InvalidChoiceError` for a number below 1 and `CityNotFoundError` for a
  number past the end.
- `add_name(number, name)` and `remove_name(number, name)` work on the names of
  the city at that position; `remove_name` returns whether the name was found.
- `city_menu()` returns the numbered list of cities, and `render()` the full
  listing shown above (or `Belum ada data kota.` when there are no cities).
- `len(directory)` is the number of cities.

The menus themselves are `kotanama.cli.Console`, which takes a `Directory`,
input and output streams and a screen-clearing function, so it can be driven
from any text streams.

The list types behind the directory, `kotanama.linkedlist.LinkedList` (the
names in a city) and `kotanama.doublylinked.CityList` (the cities, walkable in
both directions with `render()` and `render_descending()`), can also be used on
their own.

## What it does not do

The directory lives in memory only. Nothing is saved to disk, so all cities
and names are gone when the console quits.