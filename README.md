# bicitree

A command-driven simulator for a bicycle-sharing network. The stations form a
binary tree, and each station has a capacity. Bicycles are registered at a
station and can move between stations. Each bicycle keeps a record of its trips.

## Installation

```
pip install .
```

## Usage

The `bicitree` command reads a session from standard input and writes the
results to standard output. It takes no options apart from `-h`/`--help`.

```
bicitree < session.txt
```

The input is a stream of whitespace-separated words. It starts with the
station tree in preorder. Each node is a station identifier followed by its
capacity, and the word `#` stands for an empty subtree. A sequence of commands
follows the tree. The word `fin`, or the end of the input, stops the run. The
program ignores any word that is not a known command.

| Command (short form)          | Arguments          | Output on success                     |
|-------------------------------|--------------------|---------------------------------------|
| `alta_bici` (`ab`)            | bike, station      | nothing                               |
| `baja_bici` (`bb`)            | bike               | nothing                               |
| `estacion_bici` (`eb`)        | bike               | the bike's station                    |
| `viajes_bici` (`vb`)          | bike               | one `origin destination` line per trip |
| `mover_bici` (`mb`)           | bike, station      | nothing                               |
| `bicis_estacion` (`be`)       | station            | the station's bikes, sorted           |
| `modificar_capacidad` (`mc`)  | station, capacity  | nothing                               |
| `plazas_libres` (`pl`)        | none               | the free-slot counter                 |
| `subir_bicis` (`sb`)          | none               | nothing                               |
| `asignar_estacion` (`ae`)     | bike               | the station chosen for the bike       |

Every command is first echoed in its short form with a leading `#`, for example
`#ab b1 e2`. The result follows the echo. If the command fails, an error line
follows instead, such as `error: la bici no existe`, `error: la estacion no
existe`, `error: la bici no cabe`, `error: la bici ya existe`, `error: la bici
ya esta en el sitio`, `error: capacidad insuficiente` or `error: no hay plazas
libres`.

Notes on some commands:

- `plazas_libres` prints a counter. The counter starts at the total capacity of
  the tree and goes down by one each time a bike is registered.
- `subir_bicis` walks the tree top down. It fills each station that has two
  children with bikes taken from the fuller child. On a tie it takes from the
  child with the smaller identifier.
- `asignar_estacion` registers the bike at the station whose subtree has the
  most free slots per station. On a tie it picks the smaller identifier.

Example input:

```
e1 2 e2 1 # # e3 1 # #
ab b1 e2
eb b1
ae b2
pl
fin
```

Output:

```
#ab b1 e2
#eb b1
e2
#ae b2
e1
#pl
2
```

## Library use

- `bicitree.cli.run(stream, out)` runs a session from any text stream into any
  text output. `bicitree.cli.main(argv=None)` is the entry point of the command.
- `bicitree.network.Network` holds the station tree, the stations and the
  `Fleet` of bicycles. `Network.read(tokens)` builds it from the preorder
  description. Its methods include `register`, `move_bike`, `remove_bike`,
  `push_bikes_up`, `best_station`, `has_station`, `has_bike` and `has_room`.
- `bicitree.station.Station`, `bicitree.fleet.Fleet` and
  `bicitree.bicycle.Bicycle` model a station, the set of registered bikes and a
  single bike with its trip history.
- `bicitree.bintree.BinTree` is an immutable binary tree node, and an empty
  tree is `None`. Trees can be written and read in four text formats, listed in
  `TreeFormat`: `INLINE`, `POSTORDER`, `LEFT_VISUAL` and `VISUAL`. Use
  `format_tree` and `parse_tree` for these, or the per-format functions
  `to_inline`/`from_inline`, `to_postorder`/`from_postorder`,
  `to_left_visual`/`from_left_visual` and `to_visual`/`from_visual`. Malformed
  input raises `TreeFormatError`.

## Limitations

All state lives in memory for one run. Nothing is saved between sessions, and
there is no interactive prompt. Commands are read from the input stream only.

## Tests

```
pip install .[test]
pytest
```