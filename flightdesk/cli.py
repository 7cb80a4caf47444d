"""Interactive menu for the flight control system."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Optional, Sequence, TextIO

from flightdesk.aircraft import (
    Aircraft,
    DuplicateAircraftError,
    list_aircraft,
    load_aircraft,
    register_aircraft,
    save_aircraft,
)
from flightdesk.flights import (
    Flight,
    FlightError,
    board_passenger,
    list_flight_passengers,
    list_flights,
    register_flight,
    save_flights,
)
from flightdesk.people import (
    Person,
    load_people,
    register_passenger,
    register_pilot,
    save_people,
)

Ask = Callable[[str], str]

AIRCRAFT_FILE = "aeronaves.csv"
PEOPLE_FILE = "pessoas.csv"
FLIGHTS_FILE = "voos.csv"
EXIT_OPTION = 10

MENU = (
    "\n======= SISTEMA DE CONTROLE DE VOOS =======\n"
    "1. Cadastrar aeronave\n"
    "2. Cadastrar piloto\n"
    "3. Cadastrar passageiro\n"
    "4. Criar voo\n"
    "5. Embarcar passageiro em voo\n"
    "6. Listar voos\n"
    "7. Listar passageiros de um voo\n"
    "8. Gerar relatórios e estatísticas\n"
    "9. Listar aeronaves\n"
    "10. Sair\n"
    "==========================================\n"
)


@dataclass
class _Session:
    data_dir: Path
    ask: Ask
    out: TextIO
    fleet: List[Aircraft] = field(default_factory=list)
    people: List[Person] = field(default_factory=list)
    flights: List[Flight] = field(default_factory=list)

    def say(self, text: str) -> None:
        self.out.write(text + "\n")

    def handle(self, option: Optional[int]) -> None:
        match option:
            case 1:
                try:
                    register_aircraft(self.fleet, self.ask)
                    self.say("Aeronave cadastrada com sucesso!")
                finally:
                    save_aircraft(self.fleet, self.data_dir / AIRCRAFT_FILE)
            case 2:
                try:
                    register_pilot(self.people, self.ask)
                    self.say("Piloto cadastrado com sucesso!")
                finally:
                    save_people(self.people, self.data_dir / PEOPLE_FILE)
            case 3:
                try:
                    register_passenger(self.people, self.ask)
                    self.say("Passageiro cadastrado com sucesso!")
                finally:
                    save_people(self.people, self.data_dir / PEOPLE_FILE)
            case 4:
                try:
                    self.out.write("=== Cadastro de Voo ===\n")
                    register_flight(self.flights, self.fleet, self.people, self.ask)
                    self.say("Voo cadastrado com sucesso!")
                finally:
                    save_flights(self.flights, self.data_dir / FLIGHTS_FILE)
                    self.say(f"Voos salvos em {FLIGHTS_FILE}")
            case 5:
                board_passenger(self.flights, self.people, self.ask)
                self.say("Passageiro adicionado com sucesso!")
            case 6:
                list_flights(self.flights, self.out)
            case 7:
                list_flight_passengers(self.flights, self.ask, self.out)
            case 8:
                self.say("Relatórios e estatísticas ainda não disponíveis.")
            case 9:
                list_aircraft(self.fleet, self.out)
            case _:
                self.say("Opção inválida!")


def _parse_option(answer: str) -> Optional[int]:
    words = answer.split()
    if not words:
        return None
    try:
        return int(words[0])
    except ValueError:
        return None


def run(
    ask: Optional[Ask] = None,
    out: Optional[TextIO] = None,
    data_dir: str | Path = ".",
) -> None:
    """Run the menu until the exit option is chosen or input ends."""
    directory = Path(data_dir)
    session = _Session(
        data_dir=directory,
        ask=ask if ask is not None else input,
        out=out if out is not None else sys.stdout,
        fleet=load_aircraft(directory / AIRCRAFT_FILE),
        people=load_people(directory / PEOPLE_FILE),
    )

    while True:
        session.out.write(MENU)
        try:
            option = _parse_option(session.ask("Escolha uma opção: "))
            if option == EXIT_OPTION:
                session.say("Saindo...")
                return
            session.handle(option)
        except EOFError:
            return
        except DuplicateAircraftError as exc:
            session.say(f"Erro: {exc}")
        except FlightError as exc:
            session.say(str(exc))
        except ValueError as exc:
            session.say(f"Entrada inválida: {exc}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(description="Sistema de controle de voos.")
    parser.add_argument(
        "--data-dir",
        default=".",
        help="directory holding the CSV data files",
    )
    args = parser.parse_args(argv)
    run(data_dir=args.data_dir)
    return 0