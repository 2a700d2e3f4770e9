"""Interactive console menus for managing cities and names."""

from __future__ import annotations

import argparse
import os
import subprocess
import sys
from collections.abc import Callable
from typing import TextIO

from .directory import CityNotFoundError, Directory, InvalidChoiceError

_MAX_TOKEN = 49

_MAIN_MENU = (
    "\n====== Customer Service =======:\n"
    "1. Tambah Data\n"
    "2. Hapus Data\n"
    "3. Tampilkan Data\n"
    "4. Keluar\n"
    "Pilih: "
)
_ADD_MENU = (
    "\n====== Pilih Data Untuk Ditambah =======:\n"
    "1. Data Kota\n"
    "2. Data Nama\n"
    "3. Kembali\n"
    "Pilih: "
)
_DELETE_MENU = (
    "\n====== Pilih Data Untuk Dihapus =======:\n"
    "1. Hapus Data Kota\n"
    "2. Hapus Data Nama\n"
    "3. Kembali\n"
    "Pilih: "
)


def clear_screen() -> None:
    """Clear the terminal."""
    command = "cls" if os.name == "nt" else "clear"
    try:
        subprocess.run(command, shell=os.name == "nt", check=False)
    except FileNotFoundError:
        sys.stdout.write("\033[H\033[2J")
        sys.stdout.flush()


class Console:
    """Menu-driven front end over a :class:`Directory`."""

    def __init__(
        self,
        directory: Directory | None = None,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        clear: Callable[[], None] | None = None,
    ) -> None:
        self.directory = directory if directory is not None else Directory()
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.clear = clear if clear is not None else clear_screen

    def main_menu(self) -> None:
        """Run the main menu until the user quits or input ends."""
        self.clear()
        try:
            while True:
                self.clear()
                self._write(_MAIN_MENU)
                choice = self._read_int()
                if choice == 1:
                    self.clear()
                    self.add_menu()
                elif choice == 2:
                    self.clear()
                    self.delete_menu()
                elif choice == 3:
                    self.clear()
                    self._write(self.directory.render())
                elif choice == 4:
                    return
                else:
                    self._write("Pilihan tidak valid!\n")
                self._write("\nTekan Enter untuk melanjutkan...")
                if not self.stdin.readline():
                    return
        except EOFError:
            return

    def add_menu(self) -> None:
        """Run the menu for adding cities and names."""
        while True:
            self._write(_ADD_MENU)
            choice = self._read_int()
            if choice == 1:
                self.clear()
                self._write("Masukkan nama kota: ")
                name = self._read_token()
                self.directory.add_city(name)
                self._write(f"Node '{name}' ditambahkan ke list.\n")
            elif choice == 2:
                self.clear()
                number = self._choose_city()
                if number is not None:
                    self._write("Masukkan nama: ")
                    self.directory.add_name(number, self._read_token())
            elif choice == 3:
                return
            else:
                self._write("Pilihan tidak valid!\n")

    def delete_menu(self) -> None:
        """Run the menu for removing cities and names."""
        while True:
            self._write(_DELETE_MENU)
            choice = self._read_int()
            if choice == 1:
                self.clear()
                self._remove_city()
            elif choice == 2:
                self.clear()
                number = self._choose_city()
                if number is not None:
                    self._write("Masukkan nama: ")
                    self.directory.remove_name(number, self._read_token())
            elif choice == 3:
                return
            else:
                self._write("Pilihan tidak valid!\n")

    def _remove_city(self) -> None:
        if len(self.directory) == 0:
            self._write("Daftar kota kosong!\n")
            return
        self._write("Masukkan nama kota: ")
        name = self._read_token()
        try:
            self.directory.remove_city(name)
        except CityNotFoundError:
            self._write(f"Kota '{name}' tidak ditemukan!\n")
            return
        self._write(f"Kota '{name}' dan seluruh nama di dalamnya berhasil dihapus!\n")

    def _choose_city(self) -> int | None:
        if len(self.directory) == 0:
            self._write("Belum ada kota.\n")
            return None
        self._write(self.directory.city_menu())
        self._write("Pilih kota (nomor): ")
        number = self._read_int()
        try:
            if number is None:
                raise InvalidChoiceError("Pilihan tidak valid.")
            self.directory.city_at(number)
        except InvalidChoiceError:
            self._write("Pilihan tidak valid.\n")
            return None
        except CityNotFoundError:
            return None
        return number

    def _write(self, text: str) -> None:
        self.stdout.write(text)
        self.stdout.flush()

    def _read_token(self) -> str:
        while True:
            line = self.stdin.readline()
            if not line:
                raise EOFError
            words = line.split()
            if words:
                return words[0][:_MAX_TOKEN]

    def _read_int(self) -> int | None:
        try:
            return int(self._read_token())
        except ValueError:
            return None


def main(argv: list[str] | None = None) -> int:
    """Start the interactive customer-service console."""
    parser = argparse.ArgumentParser(
        prog="kotanama", description="Manage cities and the names registered in them."
    )
    parser.parse_args(argv)
    Console().main_menu()
    return 0


if __name__ == "__main__":
    sys.exit(main())