# flightdesk

A small interactive desk for running a flight operation from the terminal.
It keeps track of aircraft, pilots, passengers and flights and writes them
to plain CSV files. Prompts and messages are in Portuguese.

## Installing

    pip install .

For running the tests:

    pip install ".[test]"
    pytest

## Running

    flightdesk
    flightdesk --data-dir path/to/data

`--data-dir` names the directory holding the CSV files (the current
directory by default). A menu is shown:

1. Register an aircraft
2. Register a pilot
3. Register a passenger
4. Create a flight
5. Board a passenger on a flight
6. List flights
7. List the passengers of a flight
8. Reports and statistics (prints a notice that they are not available)
9. List aircraft
10. Quit

The loop ends on option 10 or at the end of input. Mistakes such as a
duplicate aircraft code, an unknown aircraft, pilot, flight or passenger, a
full aircraft or a number that cannot be read are reported and the menu is
shown again.

Aircraft are saved to `aeronaves.csv`, pilots and passengers to
`pessoas.csv`, and flights to `voos.csv`, each rewritten in full after every
registration. Aircraft and people are loaded again at start-up.

## How flights are planned

From the distance and the aircraft a flight works out:

- `stops` = ceil(distance / range) - 1, never below zero;
- `estimated_hours` = distance / average speed + one hour per stop.

`Flight.arrival_time()` is the departure time (`HH:MM`) plus the estimated
time in whole minutes, wrapped around midnight. `Flight.add_passenger`
raises `FlightError` once the aircraft's capacity is reached.

## Using it as a library

- `flightdesk.aircraft`: `Aircraft` (with `to_csv` / `from_csv`),
  `DuplicateAircraftError`, `load_aircraft`, `save_aircraft`,
  `register_aircraft`, `format_aircraft`, `list_aircraft`
- `flightdesk.people`: `Person`, `Pilot`, `Passenger` (with `to_csv` /
  `from_csv`), `load_people`, `save_people`, `register_pilot`,
  `register_passenger`, `format_person`, `list_people`
- `flightdesk.flights`: `Flight`, `FlightError`, `find_aircraft`,
  `find_pilot`, `find_passenger`, `find_flight`, `register_flight`,
  `save_flights`, `format_flight`, `list_flights`, `board_passenger`,
  `list_flight_passengers`
- `flightdesk.cli`: `run(ask, out, data_dir)` for the menu loop with your own
  input and output, and `main(argv)` for the command

The interactive functions take an `ask` callable that receives a prompt and
returns the answer, and the listing functions an `out` text stream (standard
output by default), so they can be driven from scripts and tests.

## What it does not do

- Flights are written to `voos.csv` but never read back: they are lost when
  the program exits.
- The passengers boarded on a flight are not stored in any file.
- The menu does not list people; `list_people` is available only from code.
- There are no reports or statistics.