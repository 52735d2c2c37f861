import io

from bicitree.cli import main, run


def interpret(text):
    out = io.StringIO()
    run(io.StringIO(text), out)
    return out.getvalue().splitlines()


def test_register_query_move_and_list():
    lines = interpret(
        "A 2 B 1 # # C 1 # #\n"
        "ab b1 B\nab b1 C\nab b2 Z\nab b3 B\n"
        "eb b1\nmb b1 C\nvb b1\nbe C\nfin\n"
    )
    assert lines == [
        "#ab b1 B",
        "#ab b1 C",
        "error: la bici ya existe",
        "#ab b2 Z",
        "error: la estacion no existe",
        "#ab b3 B",
        "error: la bici no cabe",
        "#eb b1",
        "B",
        "#mb b1 C",
        "#vb b1",
        "B C",
        "#be C",
        "b1",
    ]


def test_plazas_libres_counts_registrations():
    lines = interpret("A 2 B 1 # # C 1 # #\nab b1 A\npl\nfin\n")
    assert lines == ["#ab b1 A", "#pl", "3"]


def test_long_command_names_match_short_ones():
    short = interpret("A 2 # #\nab x A\neb x\nfin")
    long = interpret("A 2 # #\nalta_bici x A\nestacion_bici x\nfin")
    assert short == long


def test_mover_errors():
    lines = interpret("A 1 B 1 # # # \nab b1 A\nab b2 B\nmb b1 A\nmb b1 B\nmb zz A\nfin")
    assert lines[-6:] == [
        "#mb b1 A",
        "error: la bici ya esta en el sitio",
        "#mb b1 B",
        "error: la bici no cabe",
        "#mb zz A",
        "error: la bici no existe",
    ]


def test_baja_and_capacity():
    lines = interpret(
        "A 2 # #\nab b1 A\nmc A 0\nmc Z 3\nbb b1\nbb b1\nmc A 0\neb b1\nfin"
    )
    assert lines == [
        "#ab b1 A",
        "#mc A 0",
        "error: capacidad insuficiente",
        "#mc Z 3",
        "error: la estacion no existe",
        "#bb b1",
        "#bb b1",
        "error: la bici no existe",
        "#mc A 0",
        "#eb b1",
        "error: la bici no existe",
    ]


def test_asignar_estacion():
    lines = interpret("A 1 B 2 # # C 5 # #\nae x\nae x\neb x\nfin")
    assert lines == ["#ae x", "C", "#ae x", "error: la bici ya existe", "#eb x", "C"]


def test_asignar_without_room():
    lines = interpret("A 0 # #\nae x\nfin")
    assert lines == ["#ae x", "error: no hay plazas libres"]


def test_subir_bicis_then_list():
    lines = interpret("A 3 B 2 # # C 1 # #\nab b1 B\nab c1 C\nsb\nbe A\nbe B\nfin")
    assert lines[-5:] == ["#sb", "#be A", "b1", "c1", "#be B"]


def test_stops_at_fin_and_at_end_of_input():
    assert interpret("A 1 # #\nfin\npl\n") == []
    assert interpret("A 1 # #\npl") == ["#pl", "1"]


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("A 1 # #\nab b1 A\nbe A\nfin\n"))
    assert main([]) == 0
    assert capsys.readouterr().out.splitlines() == ["#ab b1 A", "#be A", "b1"]