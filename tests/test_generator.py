import random

from acequia.generator import (
    REGION_NAMES,
    TIME_HEADING,
    VALUES_HEADING,
    format_values_file,
    generate_values,
    main,
    write_values,
)
from acequia.manager import parse_values


def test_generated_values_are_in_range():
    for seed in range(20):
        simulation_max, regions = generate_values(random.Random(seed))
        assert 50 <= simulation_max <= 120
        assert [name for name, *_ in regions] == list(REGION_NAMES)
        for _, level, need, capacity in regions:
            assert 0 <= level <= 100
            assert 50 <= need <= 100
            assert 100 <= capacity <= 200


def test_same_seed_gives_same_values_in_written_file(tmp_path):
    path = tmp_path / "values.dat"
    write_values(path, random.Random(7))
    simulation_max, regions = generate_values(random.Random(7))
    parsed_max, parsed_regions = parse_values(path.read_text())
    assert parsed_max == simulation_max
    assert [
        (r.name, int(r.water_level), int(r.water_need), int(r.water_capacity)) for r in parsed_regions
    ] == regions


def test_format_has_headings():
    text = format_values_file(60, [("North", 1, 2, 3)])
    lines = text.splitlines()
    assert lines[0] == TIME_HEADING
    assert lines[1] == "60"
    assert lines[2] == VALUES_HEADING
    assert lines[3] == "North,1,2,3"


def test_format_round_trips_through_parser():
    simulation_max, regions = generate_values(random.Random(3))
    parsed_max, parsed_regions = parse_values(format_values_file(simulation_max, regions))
    assert parsed_max == simulation_max
    assert [
        (r.name, int(r.water_level), int(r.water_need), int(r.water_capacity)) for r in parsed_regions
    ] == regions


def test_write_values_writes_file(tmp_path):
    path = tmp_path / "values.dat"
    simulation_max, regions = write_values(path, random.Random(11))
    assert path.read_text() == format_values_file(simulation_max, regions)


def test_main_writes_and_runs(tmp_path, monkeypatch, capsys):
    path = tmp_path / "values.dat"
    monkeypatch.setattr("builtins.input", lambda *args: "Y")
    assert main([str(path), "--seed", "5"]) == 0
    out = capsys.readouterr().out
    assert path.read_text().startswith(TIME_HEADING)
    assert "Current State of the Regions: " in out
    assert "Leaderboard: " in out


def test_main_continues_on_end_of_input(tmp_path, monkeypatch, capsys):
    def _eof(*args):
        raise EOFError

    monkeypatch.setattr("builtins.input", _eof)
    assert main([str(tmp_path / "values.dat"), "--seed", "1"]) == 0
    assert "Leaderboard: " in capsys.readouterr().out


def test_main_unwritable_path_returns_one(tmp_path, capsys):
    assert main([str(tmp_path / "missing" / "values.dat")]) == 1
    assert "could not write values" in capsys.readouterr().err