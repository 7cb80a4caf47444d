"""Aircraft records, their CSV form and the fleet register."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, List, Optional, TextIO

Ask = Callable[[str], str]

_FIELD_COUNT = 5


class DuplicateAircraftError(ValueError):
    """Raised when an aircraft code is already registered."""


def _fields(line: str, count: int) -> List[str]:
    """Split a CSV line into exactly ``count`` fields, padding missing ones."""
    parts = line.split(",")[:count]
    return parts + [""] * (count - len(parts))


def _number(value: float) -> str:
    """Render a number the way a default stream would."""
    return f"{value:g}"


def _token(answer: str) -> str:
    """Return the first whitespace-delimited word of an answer."""
    words = answer.split()
    if not words:
        raise ValueError("resposta vazia")
    return words[0]


@dataclass
class Aircraft:
    """An aircraft: code, model, seats, cruise speed (mph) and range (miles)."""

    code: str = ""
    model: str = ""
    capacity: int = 0
    average_speed: float = 0.0
    range_miles: float = 0.0

    def to_csv(self) -> str:
        """Serialise to one CSV line without a line terminator."""
        return (
            f"{self.code},{self.model},{self.capacity},"
            f"{self.average_speed:f},{self.range_miles:f}"
        )

    @classmethod
    def from_csv(cls, line: str) -> "Aircraft":
        """Parse one CSV line; raises ValueError on malformed numbers."""
        code, model, capacity, speed, range_miles = _fields(line, _FIELD_COUNT)
        return cls(code, model, int(capacity.strip()), float(speed), float(range_miles))


def load_aircraft(path: str | Path) -> List[Aircraft]:
    """Read a fleet from a CSV file; a missing file yields an empty fleet."""
    try:
        with open(path, encoding="utf-8") as handle:
            lines = handle.read().splitlines()
    except FileNotFoundError:
        return []
    return [Aircraft.from_csv(line) for line in lines if line]


def save_aircraft(fleet: Iterable[Aircraft], path: str | Path) -> None:
    """Write the whole fleet to a CSV file, replacing its contents."""
    with open(path, "w", encoding="utf-8") as handle:
        for aircraft in fleet:
            handle.write(aircraft.to_csv() + "\n")


def register_aircraft(fleet: List[Aircraft], ask: Ask) -> Aircraft:
    """Prompt for a new aircraft, append it to the fleet and return it."""
    code = _token(ask("Código: "))
    if any(existing.code == code for existing in fleet):
        raise DuplicateAircraftError("Código de aeronave já cadastrado!")

    model = ask("Modelo: ")
    capacity = int(_token(ask("Capacidade (pessoas): ")))
    speed = float(_token(ask("Velocidade média (milhas/h): ")))
    range_miles = float(_token(ask("Autonomia (milhas): ")))

    aircraft = Aircraft(code, model, capacity, speed, range_miles)
    fleet.append(aircraft)
    return aircraft


def format_aircraft(aircraft: Aircraft) -> str:
    """One human-readable line describing an aircraft."""
    return (
        f"Código: {aircraft.code}"
        f", Modelo: {aircraft.model}"
        f", Capacidade: {aircraft.capacity}"
        f", Velocidade: {_number(aircraft.average_speed)}"
        f", Autonomia: {_number(aircraft.range_miles)} milhas"
    )


def list_aircraft(fleet: Iterable[Aircraft], out: Optional[TextIO] = None) -> None:
    """Write a listing of the fleet to ``out`` (standard output by default)."""
    out = out if out is not None else sys.stdout
    out.write("\n=== Lista de Aeronaves ===\n")
    for aircraft in fleet:
        out.write(format_aircraft(aircraft) + "\n")