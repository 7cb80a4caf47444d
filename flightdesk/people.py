"""People on record: pilots and passengers, with their CSV form."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, List, Optional, TextIO

Ask = Callable[[str], str]

PILOT_TAG = "PILOTO"
PASSENGER_TAG = "PASSAGEIRO"


def _fields(line: str, count: int) -> List[str]:
    """Split a CSV line into exactly ``count`` fields, padding missing ones."""
    parts = line.split(",")[:count]
    return parts + [""] * (count - len(parts))


@dataclass
class Person(ABC):
    """Anyone known to the system, identified by name."""

    name: str = ""

    @abstractmethod
    def to_csv(self) -> str:
        """Serialise to one tagged CSV line."""


@dataclass
class Pilot(Person):
    """A pilot with a registration number, licence and logged flight hours."""

    registration: str = ""
    license: str = ""
    flight_hours: float = 0.0

    def to_csv(self) -> str:
        return (
            f"{PILOT_TAG},{self.name},{self.registration},"
            f"{self.license},{self.flight_hours:f}"
        )

    @classmethod
    def from_csv(cls, line: str) -> "Pilot":
        """Parse a PILOTO line; raises ValueError on a malformed hour count."""
        _, name, registration, license_, hours = _fields(line, 5)
        return cls(name, registration, license_, float(hours))


@dataclass
class Passenger(Person):
    """A passenger identified by CPF and holding a ticket."""

    cpf: str = ""
    ticket: str = ""

    def to_csv(self) -> str:
        return f"{PASSENGER_TAG},{self.name},{self.cpf},{self.ticket}"

    @classmethod
    def from_csv(cls, line: str) -> "Passenger":
        """Parse a PASSAGEIRO line."""
        _, name, cpf, ticket = _fields(line, 4)
        return cls(name, cpf, ticket)


def load_people(path: str | Path) -> List[Person]:
    """Read people from a CSV file; unknown lines are ignored."""
    try:
        with open(path, encoding="utf-8") as handle:
            lines = handle.read().splitlines()
    except FileNotFoundError:
        return []

    people: List[Person] = []
    for line in lines:
        if line.startswith(PILOT_TAG):
            people.append(Pilot.from_csv(line))
        elif line.startswith(PASSENGER_TAG):
            people.append(Passenger.from_csv(line))
    return people


def save_people(people: Iterable[Person], path: str | Path) -> None:
    """Write everyone to a CSV file, replacing its contents."""
    with open(path, "w", encoding="utf-8") as handle:
        for person in people:
            handle.write(person.to_csv() + "\n")


def register_pilot(people: List[Person], ask: Ask) -> Pilot:
    """Prompt for a new pilot, append it and return it."""
    name = ask("Nome: ")
    registration = ask("Matrícula: ")
    license_ = ask("Breve: ")
    hours_answer = ask("Horas de voo: ").split()
    if not hours_answer:
        raise ValueError("resposta vazia")
    pilot = Pilot(name, registration, license_, float(hours_answer[0]))
    people.append(pilot)
    return pilot


def register_passenger(people: List[Person], ask: Ask) -> Passenger:
    """Prompt for a new passenger, append it and return it."""
    name = ask("Nome: ")
    cpf = ask("CPF: ")
    ticket = ask("Bilhete: ")
    passenger = Passenger(name, cpf, ticket)
    people.append(passenger)
    return passenger


def format_person(person: Person) -> str:
    """One human-readable line describing a pilot or passenger."""
    if isinstance(person, Pilot):
        return (
            f"[{PILOT_TAG}] {person.name}"
            f" | Matrícula: {person.registration}"
            f" | Breve: {person.license}"
            f" | Horas: {person.flight_hours:g}"
        )
    if isinstance(person, Passenger):
        return (
            f"[{PASSENGER_TAG}] {person.name}"
            f" | CPF: {person.cpf}"
            f" | Bilhete: {person.ticket}"
        )
    raise TypeError(f"unsupported person: {type(person).__name__}")


def list_people(people: Iterable[Person], out: Optional[TextIO] = None) -> None:
    """Write a listing of everyone to ``out`` (standard output by default)."""
    out = out if out is not None else sys.stdout
    out.write("\n=== Lista de Pessoas ===\n")
    for person in people:
        if isinstance(person, (Pilot, Passenger)):
            out.write(format_person(person) + "\n")