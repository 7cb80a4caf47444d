"""Flights: route, crew, aircraft, passengers and schedule estimates."""

from __future__ import annotations

import math
import re
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterable, List, Optional, TextIO

from flightdesk.aircraft import Aircraft
from flightdesk.people import Passenger, Person, Pilot

Ask = Callable[[str], str]

_CLOCK = re.compile(r"\s*([+-]?\d+)\s*\S\s*([+-]?\d+)")
_STOP_HOURS = 1.0


class FlightError(Exception):
    """Raised when a flight cannot be created, found or boarded."""


def _token(answer: str) -> str:
    """Return the first whitespace-delimited word of an answer."""
    words = answer.split()
    if not words:
        raise ValueError("resposta vazia")
    return words[0]


@dataclass
class Flight:
    """A scheduled flight between two places, flown by one aircraft and crew."""

    code: str
    origin: str
    destination: str
    distance: float
    departure: str
    aircraft: Aircraft
    captain: Pilot
    first_officer: Pilot
    passengers: List[Passenger] = field(default_factory=list)

    @property
    def stops(self) -> int:
        """Refuelling stops needed given the aircraft's range."""
        return max(math.ceil(self.distance / self.aircraft.range_miles) - 1, 0)

    @property
    def estimated_hours(self) -> float:
        """Flying time plus one hour per stop."""
        return self.distance / self.aircraft.average_speed + self.stops * _STOP_HOURS

    def add_passenger(self, passenger: Passenger) -> None:
        """Board a passenger; raises FlightError when the aircraft is full."""
        if len(self.passengers) >= self.aircraft.capacity:
            raise FlightError("Capacidade da aeronave atingida.")
        self.passengers.append(passenger)

    def to_csv(self) -> str:
        """Serialise to one CSV line referencing aircraft and crew by key."""
        return (
            f"{self.code},{self.origin},{self.destination},{self.distance:f},"
            f"{self.departure},{self.aircraft.code},"
            f"{self.captain.registration},{self.first_officer.registration}"
        )

    def arrival_time(self) -> str:
        """Expected arrival as HH:MM, wrapping past midnight."""
        match = _CLOCK.match(self.departure)
        if match is None:
            raise ValueError(f"hora de saída inválida: {self.departure!r}")
        hour, minute = int(match.group(1)), int(match.group(2))
        total = hour * 60 + minute + int(self.estimated_hours * 60)
        return f"{(total // 60) % 24:02d}:{total % 60:02d}"

    def list_passengers(self, out: Optional[TextIO] = None) -> None:
        """Write this flight's passengers with CPF and ticket to ``out``."""
        out = out if out is not None else sys.stdout
        out.write(f"=== Passageiros do Voo {self.code} ===\n")
        for passenger in self.passengers:
            out.write(
                f"{passenger.name} | CPF: {passenger.cpf} | Bilhete: {passenger.ticket}\n"
            )


def find_aircraft(fleet: Iterable[Aircraft], code: str) -> Optional[Aircraft]:
    """The aircraft with this code, or None."""
    return next((aircraft for aircraft in fleet if aircraft.code == code), None)


def find_pilot(people: Iterable[Person], registration: str) -> Optional[Pilot]:
    """The pilot with this registration, or None."""
    return next(
        (p for p in people if isinstance(p, Pilot) and p.registration == registration),
        None,
    )


def find_passenger(people: Iterable[Person], cpf: str) -> Optional[Passenger]:
    """The passenger with this CPF, or None."""
    return next(
        (p for p in people if isinstance(p, Passenger) and p.cpf == cpf),
        None,
    )


def find_flight(flights: Iterable[Flight], code: str) -> Optional[Flight]:
    """The flight with this code, or None."""
    return next((flight for flight in flights if flight.code == code), None)


def register_flight(
    flights: List[Flight],
    fleet: Iterable[Aircraft],
    people: Iterable[Person],
    ask: Ask,
) -> Flight:
    """Prompt for a new flight, append it and return it."""
    code = _token(ask("Código do voo: "))
    origin = ask("Origem: ")
    destination = ask("Destino: ")
    distance = float(_token(ask("Distância (milhas): ")))
    departure = ask("Hora de saída (ex: 14:30): ")

    aircraft = find_aircraft(fleet, ask("Código da Aeronave: "))
    if aircraft is None:
        raise FlightError("Aeronave não encontrada!")

    captain = find_pilot(people, ask("Matrícula do comandante: "))
    if captain is None:
        raise FlightError("Comandante não encontrado!")

    first_officer = find_pilot(people, ask("Matrícula do primeiro oficial: "))
    if first_officer is None:
        raise FlightError("Primeiro oficial não encontrado!")

    flight = Flight(
        code, origin, destination, distance, departure, aircraft, captain, first_officer
    )
    flights.append(flight)
    return flight


def save_flights(flights: Iterable[Flight], path: str | Path) -> None:
    """Write all flights to a CSV file, replacing its contents."""
    with open(path, "w", encoding="utf-8") as handle:
        for flight in flights:
            handle.write(flight.to_csv() + "\n")


def format_flight(flight: Flight) -> str:
    """One human-readable line describing a flight and its expected arrival."""
    return (
        f"Voo: {flight.code}"
        f" | Aeronave: {flight.aircraft.code} ({flight.aircraft.model})"
        f" | Comandante: {flight.captain.registration}"
        f" | Origem: {flight.origin}"
        f" | Destino: {flight.destination}"
        f" | Passageiros: {len(flight.passengers)}"
        f" | Saída: {flight.departure}"
        f" | Chegada prevista: {flight.arrival_time()}"
    )


def list_flights(flights: Iterable[Flight], out: Optional[TextIO] = None) -> None:
    """Write a listing of all flights to ``out``."""
    out = out if out is not None else sys.stdout
    out.write("\n=== Lista de Voos ===\n")
    for flight in flights:
        out.write(format_flight(flight) + "\n")


def board_passenger(
    flights: Iterable[Flight], people: Iterable[Person], ask: Ask
) -> Flight:
    """Prompt for a flight code and a CPF and board that passenger."""
    flight = find_flight(flights, _token(ask("Código do voo: ")))
    if flight is None:
        raise FlightError("Voo não encontrado.")

    passenger = find_passenger(people, _token(ask("CPF do passageiro: ")))
    if passenger is None:
        raise FlightError("Passageiro não encontrado.")

    flight.add_passenger(passenger)
    return flight


def list_flight_passengers(
    flights: Iterable[Flight], ask: Ask, out: Optional[TextIO] = None
) -> Flight:
    """Prompt for a flight code and write the names of its passengers."""
    out = out if out is not None else sys.stdout
    flight = find_flight(flights, ask("Código do voo: ").strip())
    if flight is None:
        raise FlightError("Voo não encontrado.")

    out.write(
        f"Voo: {flight.code} | Aeronave: {flight.aircraft.code}"
        f" ({flight.aircraft.model})\n"
    )
    if not flight.passengers:
        out.write("Nenhum passageiro neste voo.\n")
    else:
        out.write("Passageiros:\n")
        for passenger in flight.passengers:
            out.write(f"- {passenger.name}\n")
    return flight