# philosophers

A threaded simulation of the dining philosophers problem.

Philosophers sit around a round table, and there is one fork between each pair
of neighbours. Each philosopher thinks, picks up the two forks beside them,
eats, puts the forks down and sleeps. This repeats until the simulation ends.
Each philosopher runs in its own thread, and each fork is a lock. A monitor
thread watches the table. The simulation stops in one of two cases:

- a philosopher has gone `time_to_die` milliseconds without starting a meal;
- every philosopher has eaten the required number of meals.

## Installation

```
pip install .
```

## Usage

```
philo number_of_philosophers time_to_die time_to_eat time_to_sleep [number_of_times_each_philosopher_must_eat]
```

All times are in milliseconds.

### Argument rules

- Every argument must be a non-negative integer no larger than 2147483647.
- Leading whitespace is skipped.
- A single `+` or `-` sign is accepted. A negative value is then rejected.
- Anything after the digits makes the argument invalid, trailing whitespace included.
- An argument with no digits at all, such as an empty string, counts as 0.
- If the meal count is left out, it is unlimited.

Example:

```
philo 5 800 200 200 7
```

### Output

Status lines have the form `<ms since start> <id> <status>`. Philosophers are
numbered from 1. The statuses are:

- `is thinking`
- `has taken a fork`
- `is eating`
- `is sleeping`
- `died`

The `died` line is written without a trailing newline.

### Special cases

- **One philosopher.** The program prints `0 1 is thinking`. It then waits
  `time_to_die` milliseconds and prints `<time_to_die> 1 died`.
- **A meal count of 0.** The program prints
  `all philosophers have finished their meals` straight away and exits.
- **Meal count reached.** If the meal count is given and every philosopher
  reaches it, the program prints that same line and stops.

### Errors

If the number of arguments is wrong, or an argument is invalid, the program
prints an `Error: ...` message to standard output and exits with status 1.

## Using it as a library

```python
import io
from philosophers.simulation import Config, Table

config = Config.from_numbers([4, 410, 200, 200, 3])
out = io.StringIO()
Table(config, out).run()
print(out.getvalue())
```

`Config` holds these fields:

- `num_philos`
- `time_to_die`
- `time_to_eat`
- `time_to_sleep`
- `must_eat`

`Config.from_numbers` takes 4 or 5 numbers in command-line order. It raises
`ValueError` for any other count.

### The `Table` class

`Table` runs the simulation. `Table.run()` starts the threads and waits for
them to finish. The steps it uses are public methods:

- `print_status`
- `pick_forks`
- `release_forks`
- `sleep`
- `check_meals`
- `check_death`
- `monitor`
- `philosopher_routine`

`philosophers.cli.main(argv)` is the command's entry point and returns the exit
code.

### Argument helpers

The argument helpers are in `philosophers.parsing`:

- `parse_int(text)` parses one integer by the rules above. It raises
  `ValueError` on bad input.
- `split_words(text, sep)` splits on a separator character and drops empty
  pieces.
- `parse_arguments(args)` checks a list of 4 or 5 arguments and returns them as
  integers. It raises `ArgumentError` when they are invalid. `ArgumentError` is
  a subclass of `ValueError`.

## Running the tests

```
pip install .[test]
pytest
```