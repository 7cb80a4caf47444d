import io

import pytest

from flightdesk.aircraft import (
    Aircraft,
    DuplicateAircraftError,
    format_aircraft,
    list_aircraft,
    load_aircraft,
    register_aircraft,
    save_aircraft,
)


def scripted(*answers):
    remaining = iter(answers)
    return lambda prompt: next(remaining)


@pytest.fixture
def e190():
    return Aircraft("E190", "Embraer 190", 100, 850.0, 2500.0)


def test_to_csv_uses_six_decimal_places(e190):
    assert e190.to_csv() == "E190,Embraer 190,100,850.000000,2500.000000"


def test_csv_round_trip(e190):
    assert Aircraft.from_csv(e190.to_csv()) == e190


def test_from_csv_fractional_values():
    parsed = Aircraft.from_csv("X1,Model,12,450.5,1200.25")
    assert parsed == Aircraft("X1", "Model", 12, 450.5, 1200.25)


def test_from_csv_bad_capacity():
    with pytest.raises(ValueError):
        Aircraft.from_csv("X1,Model,many,450,1200")


def test_from_csv_missing_fields():
    with pytest.raises(ValueError):
        Aircraft.from_csv("X1,Model")


def test_save_then_load(tmp_path, e190):
    path = tmp_path / "aeronaves.csv"
    fleet = [e190, Aircraft("A320", "Airbus", 180, 520.5, 3300.0)]
    save_aircraft(fleet, path)
    assert load_aircraft(path) == fleet


def test_load_missing_file_is_empty(tmp_path):
    assert load_aircraft(tmp_path / "nothing.csv") == []


def test_load_skips_blank_lines(tmp_path, e190):
    path = tmp_path / "aeronaves.csv"
    path.write_text("\n" + e190.to_csv() + "\n\n", encoding="utf-8")
    assert load_aircraft(path) == [e190]


def test_register_appends_new_aircraft():
    fleet = []
    ask = scripted("B737", "Boeing 737", "160", "530", "3000")
    created = register_aircraft(fleet, ask)
    assert created == Aircraft("B737", "Boeing 737", 160, 530.0, 3000.0)
    assert fleet == [created]


def test_register_rejects_duplicate_code(e190):
    fleet = [e190]
    with pytest.raises(DuplicateAircraftError):
        register_aircraft(fleet, scripted("E190", "Other", "1", "1", "1"))
    assert fleet == [e190]


def test_register_rejects_bad_number():
    fleet = []
    with pytest.raises(ValueError):
        register_aircraft(fleet, scripted("Z1", "Model", "lots", "1", "1"))
    assert fleet == []


def test_format_aircraft(e190):
    assert format_aircraft(e190) == (
        "Código: E190, Modelo: Embraer 190, Capacidade: 100, "
        "Velocidade: 850, Autonomia: 2500 milhas"
    )


def test_list_aircraft_writes_header_and_lines(e190):
    other = Aircraft("A320", "Airbus", 180, 520.5, 3300.0)
    out = io.StringIO()
    list_aircraft([e190, other], out)
    lines = out.getvalue().split("\n")
    assert lines[1] == "=== Lista de Aeronaves ==="
    assert lines[2:4] == [format_aircraft(e190), format_aircraft(other)]