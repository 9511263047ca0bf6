# contestkit

Solvers for fifteen competitive programming problems. Each problem lives in
its own module with a plain function or small class that does the work, and a
`main()` that reads the problem's input from standard input and prints the
answer. The package has no dependencies beyond the standard library.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Library use

```python
from contestkit.knight import knight_distance
from contestkit.sleepy import min_path_cost
from contestkit.fenwick import FenwickTree

knight_distance(8, (1, 1), (8, 8))   # 6; squares are 1-based, None if unreachable
min_path_cost([[1, 5], [3, 1]])      # 2

tree = FenwickTree(10)
tree.add(3, 5)
tree.prefix_sum(4)                   # 5
```

The modules and their main names:

| Module | Main names | What it does |
| --- | --- | --- |
| `contestkit.fenwick` | `FenwickTree` (`add`, `prefix_sum`) | Point updates and prefix sums over positions 1..size |
| `contestkit.anonymous` | `primes_up_to`, `query` | Position of a prime, or the largest prime below a number |
| `contestkit.budget` | `count_budget_pairs` | Pairs `i < j` with `values[i] >= values[j]`, modulo 1e9+7 |
| `contestkit.disaster_dragon` | `DisasterDragon.apply` | Range level changes and the stretch of positions within a band |
| `contestkit.flood` | `water_level`, `format_levels` | Common water level over columns and each column's printed level |
| `contestkit.guess` | `Condition`, `find_codes` | All codes of distinct digits 1-9 matching scored guesses |
| `contestkit.investor` | `Investor.merge`, `Investor.span`, `Investor.value` | Merged groups of holdings, their span and total value |
| `contestkit.knight` | `knight_distance` | Fewest knight moves on an n by n board |
| `contestkit.lightning_quiz` | `first_primes`, `prime_sum` | Sum of the a-th through b-th primes, modulo 1e9+7 |
| `contestkit.lumpinee` | `best_treasure` | Best sum along a path of at most k cells moving up or left |
| `contestkit.paradox` | `nearest_distances` | Manhattan distance from each query point to the nearest hole |
| `contestkit.sandwich` | `Sandwich.eat` | What is eaten from a stop before a walking budget runs out |
| `contestkit.serious_school` | `Activity`, `min_days` | Days of activities greedily chosen to reach a score of 100 |
| `contestkit.sleepy` | `min_path_cost` | Cheapest left-to-right path moving at most one row per column |
| `contestkit.spanish_mafia` | `min_mix_cost` | Least smoke from mixing neighbouring colours into one |
| `contestkit.street_fighter` | `StreetFighter.attack`, `StreetFighter.lineup`, `Outcome` | Two queues of fighters fighting front to front |

Functions raise `ValueError` or `IndexError` on input outside their range.
Where a problem can have no answer, the function returns `None`
(`knight_distance`, `min_days`, `DisasterDragon.apply`) and the command
prints `-1`.

## Command line

Every problem has a command that reads the problem's input from standard
input and prints the answer:

```
contestkit-anonymous        < input.txt
contestkit-budget           < input.txt
contestkit-disaster-dragon  < input.txt
contestkit-flood            < input.txt
contestkit-guess            < input.txt
contestkit-investor         < input.txt
contestkit-knight           < input.txt
contestkit-lightning-quiz   < input.txt
contestkit-lumpinee         < input.txt
contestkit-paradox          < input.txt
contestkit-sandwich         < input.txt
contestkit-serious-school   < input.txt
contestkit-sleepy           < input.txt
contestkit-spanish-mafia    < input.txt
contestkit-street-fighter   < input.txt
```

For example, the knight problem takes the board size, the target square and
the start square (1-based):

```
$ printf '8\n8 8\n1 1\n' | contestkit-knight
6
```

The commands take no options and no file arguments; input comes only from
standard input, whitespace-separated.