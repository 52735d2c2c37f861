"""Command interpreter for the bicycle station network."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Iterator, TextIO

from .network import Network

_Handler = Callable[[Network, Iterator[str], Callable[[str], None]], None]


def _word(tokens: Iterator[str]) -> str:
    return next(tokens, "")


def _alta(net: Network, tokens: Iterator[str], emit: Callable[[str], None]) -> None:
    bike, station = _word(tokens), _word(tokens)
    emit(f"#ab {bike} {station}")
    if net.has_bike(bike):
        emit("error: la bici ya existe")
    elif not net.has_station(station):
        emit("error: la estacion no existe")
    elif net.stations[station].free_slots() == 0:
        emit("error: la bici no cabe")
    else:
        net.register(bike, station)


def _baja(net: Network, tokens: Iterator[str], emit: Callable[[str], None]) -> None:
    bike = _word(tokens)
    emit(f"#bb {bike}")
    if not net.has_bike(bike):
        emit("error: la bici no existe")
    else:
        net.remove_bike(bike)


def _estacion(net: Network, tokens: Iterator[str], emit: Callable[[str], None]) -> None:
    bike = _word(tokens)
    emit(f"#eb {bike}")
    if not net.has_bike(bike):
        emit("error: la bici no existe")
    else:
        emit(net.bike_location(bike))


def _viajes(net: Network, tokens: Iterator[str], emit: Callable[[str], None]) -> None:
    bike = _word(tokens)
    emit(f"#vb {bike}")
    if not net.has_bike(bike):
        emit("error: la bici no existe")
        return
    for origin, destination in net.stations[net.bike_location(bike)].trips(bike):
        emit(f"{origin} {destination}")


def _mover(net: Network, tokens: Iterator[str], emit: Callable[[str], None]) -> None:
    bike, station = _word(tokens), _word(tokens)
    emit(f"#mb {bike} {station}")
    if not net.has_bike(bike):
        emit("error: la bici no existe")
    elif not net.has_station(station):
        emit("error: la estacion no existe")
    elif bike in net.stations[station]:
        emit("error: la bici ya esta en el sitio")
    elif net.stations[station].free_slots() == 0:
        emit("error: la bici no cabe")
    else:
        net.move_bike(bike, station)


def _bicis(net: Network, tokens: Iterator[str], emit: Callable[[str], None]) -> None:
    station = _word(tokens)
    emit(f"#be {station}")
    if not net.has_station(station):
        emit("error: la estacion no existe")
        return
    for bike in net.stations[station].bike_ids():
        emit(bike)


def _capacidad(net: Network, tokens: Iterator[str], emit: Callable[[str], None]) -> None:
    station = _word(tokens)
    capacity = int(_word(tokens))
    emit(f"#mc {station} {capacity}")
    if not net.has_station(station):
        emit("error: la estacion no existe")
    elif capacity < net.stations[station].occupancy():
        emit("error: capacidad insuficiente")
    else:
        net.stations[station].set_capacity(capacity)


def _plazas(net: Network, tokens: Iterator[str], emit: Callable[[str], None]) -> None:
    emit("#pl")
    emit(str(net.free_total))


def _subir(net: Network, tokens: Iterator[str], emit: Callable[[str], None]) -> None:
    emit("#sb")
    net.push_bikes_up()


def _asignar(net: Network, tokens: Iterator[str], emit: Callable[[str], None]) -> None:
    bike = _word(tokens)
    emit(f"#ae {bike}")
    if net.has_bike(bike):
        emit("error: la bici ya existe")
    elif not net.has_room():
        emit("error: no hay plazas libres")
    else:
        station = net.best_station()
        net.register(bike, station)
        emit(station)


_COMMANDS: dict[str, _Handler] = {}
for _names, _handler in [
    (("alta_bici", "ab"), _alta),
    (("baja_bici", "bb"), _baja),
    (("estacion_bici", "eb"), _estacion),
    (("viajes_bici", "vb"), _viajes),
    (("mover_bici", "mb"), _mover),
    (("bicis_estacion", "be"), _bicis),
    (("modificar_capacidad", "mc"), _capacidad),
    (("plazas_libres", "pl"), _plazas),
    (("subir_bicis", "sb"), _subir),
    (("asignar_estacion", "ae"), _asignar),
]:
    for _name in _names:
        _COMMANDS[_name] = _handler


def run(stream: TextIO, out: TextIO) -> None:
    """Read the station tree and then commands from ``stream`` until ``fin``."""
    tokens = iter(stream.read().split())
    network = Network.read(tokens)

    def emit(line: str) -> None:
        out.write(line + "\n")

    for command in tokens:
        if command == "fin":
            break
        handler = _COMMANDS.get(command)
        if handler is not None:
            handler(network, tokens, emit)


def main(argv: list[str] | None = None) -> int:
    """Run the interpreter on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="bicitree", description="Manage bicycles in a tree of stations."
    )
    parser.parse_args(argv)
    run(sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())