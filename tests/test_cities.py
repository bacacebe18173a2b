import io

import pytest

from structkit.cities import (
    CityNetworks,
    format_adjacency,
    load_networks,
    main,
    sorted_cities,
)
from structkit.graph import Edge

HEADER = "City,City2,TrainTime,TrainDist,CarTime,CarDist\n"
ROWS = [
    "B,C,1h,10,2h,12\n",
    "A,B,2h,20,3h,25\n",
    "A,C,5h,50,4h,30\n",
]


@pytest.fixture
def networks():
    return load_networks([HEADER, *ROWS])


def test_load_networks_vertices_in_insertion_order(networks):
    assert networks.train.vertices == ["B", "C", "A"]
    assert networks.car.vertices == ["B", "C", "A"]


def test_load_networks_edges_carry_distance_and_time(networks):
    assert networks.train.neighbors("A") == [Edge("A", "B", 20, "2h"), Edge("A", "C", 50, "5h")]
    assert networks.car.neighbors("B") == [Edge("B", "C", 12, "2h")]


def test_load_networks_records_source_cities_only(networks):
    assert networks.cities == {"A", "B"}


def test_load_networks_skips_header_and_blank_lines():
    loaded = load_networks([HEADER, "\n", "X,Y,1h,3,1h,4\r\n"])
    assert loaded.train.neighbors("X") == [Edge("X", "Y", 3, "1h")]
    assert loaded.car.neighbors("X") == [Edge("X", "Y", 4, "1h")]


def test_load_networks_empty_input():
    loaded = load_networks([])
    assert loaded.train.vertices == []
    assert loaded.cities == set()


def test_load_networks_duplicate_connection_raises():
    with pytest.raises(ValueError, match="El arco ya existe"):
        load_networks([HEADER, "A,B,1h,1,1h,1\n", "A,B,2h,2,2h,2\n"])


def test_load_networks_short_row_raises():
    with pytest.raises(ValueError):
        load_networks([HEADER, "A,B,1h\n"])


def test_load_networks_bad_distance_raises():
    with pytest.raises(ValueError):
        load_networks([HEADER, "A,B,1h,far,1h,2\n"])


def test_sorted_cities_orders_and_deduplicates():
    result = sorted_cities(["Rome", "Paris", "Berlin", "Paris"])
    assert result == sorted({"Rome", "Paris", "Berlin"})


def test_sorted_cities_empty():
    assert sorted_cities([]) == []


def test_format_adjacency(networks):
    text = format_adjacency(networks.train, "Adjacency list for train:")
    assert text == (
        "Adjacency list for train:\n"
        "B - C 10 - 1h | \n"
        "C - \n"
        "A - B 20 - 2h | C 50 - 5h | \n"
    )


def test_format_adjacency_empty_graph():
    assert format_adjacency(CityNetworks().car, "Adjacency list for car:") == "Adjacency list for car:\n"


def _run_main(tmp_path, monkeypatch, commands):
    csv_path = tmp_path / "cities.csv"
    csv_path.write_text(HEADER + "".join(ROWS), encoding="utf-8")
    outs = {name: tmp_path / f"{name}.out" for name in ("sorted", "train", "car", "bfs", "dfs")}
    monkeypatch.setattr("sys.stdin", io.StringIO(commands))
    code = main([
        str(csv_path),
        "--sorted-out", str(outs["sorted"]),
        "--train-out", str(outs["train"]),
        "--car-out", str(outs["car"]),
        "--bfs-out", str(outs["bfs"]),
        "--dfs-out", str(outs["dfs"]),
    ])
    return code, {name: path.read_text(encoding="utf-8") for name, path in outs.items()}


def test_main_writes_sorted_cities_and_adjacency(tmp_path, monkeypatch, networks):
    code, files = _run_main(tmp_path, monkeypatch, "1\n2\n5\n")
    assert code == 0
    assert files["sorted"] == "Sorted cities:\nA\nB\n"
    assert files["train"] == format_adjacency(networks.train, "Adjacency list for train:")
    assert files["car"] == format_adjacency(networks.car, "Adjacency list for car:")


def test_main_traversal_files(tmp_path, monkeypatch, networks):
    code, files = _run_main(tmp_path, monkeypatch, "3 A\n5\n")
    assert code == 0
    assert files["bfs"] == "BFS traversal starting from A:\n" + "".join(
        f"{city}\n" for city in networks.train.bfs("A"))
    assert files["dfs"] == "DFS traversal starting from A:\n" + "".join(
        f"{city}\n" for city in networks.train.dfs("A"))


def test_main_traversal_unknown_city_reports_error(tmp_path, monkeypatch, capsys):
    _, files = _run_main(tmp_path, monkeypatch, "3 Z\n5\n")
    out = capsys.readouterr().out
    assert "El vértice no existe" in out
    assert "Vértice inválido" in out
    assert files["bfs"] == ""


def test_main_dijkstra_prints_both_distances(tmp_path, monkeypatch, capsys, networks):
    _run_main(tmp_path, monkeypatch, "4 A C\n5\n")
    out = capsys.readouterr().out
    train = networks.train.shortest_distance("A", "C")
    car = networks.car.shortest_distance("A", "C")
    assert f"Tren - Distancia mas corta: {train} km\n" in out
    assert f"Carro - Distancia mas corta: {car} km\n" in out


def test_main_dijkstra_unreachable(tmp_path, monkeypatch, capsys):
    _run_main(tmp_path, monkeypatch, "4 C A\n5\n")
    out = capsys.readouterr().out
    assert "Tren - Distancia mas corta: No hay ruta\n" in out


def test_main_missing_csv_gives_empty_networks(tmp_path, monkeypatch):
    out_path = tmp_path / "sorted.out"
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n5\n"))
    code = main([
        str(tmp_path / "missing.csv"),
        "--sorted-out", str(out_path),
        "--train-out", str(tmp_path / "t.out"),
        "--car-out", str(tmp_path / "c.out"),
        "--bfs-out", str(tmp_path / "b.out"),
        "--dfs-out", str(tmp_path / "d.out"),
    ])
    assert code == 0
    assert out_path.read_text(encoding="utf-8") == "Sorted cities:\n"