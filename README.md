# philosophers

A simulation of the dining philosophers problem. Each philosopher runs in its
own thread. It loops through three steps: it takes two forks and eats, then it
sleeps, then it thinks. A monitor thread ends the dinner when a philosopher
starves. It also ends the dinner when every philosopher has eaten the required
number of meals.

## Installation

```
pip install .
```

## Usage

```
philo number_of_philosophers time_to_die time_to_eat time_to_sleep [number_of_times_each_philosopher_must_eat]
```

`python -m philosophers.cli` takes the same arguments.

All times are in milliseconds. The arguments must follow these rules:

- There are four or five arguments.
- Every argument contains digits only. Signs and spaces are rejected.
- The number of philosophers is between 1 and 200.
- `time_to_die`, `time_to_eat` and `time_to_sleep` are each at least 60.

If the last argument is `0`, the simulation ends at once and prints nothing.
Without the last argument, the dinner runs until a philosopher dies. With
generous times, that may never happen.

A single philosopher takes its one fork, waits `time_to_die` milliseconds and
then dies.

Example:

```
philo 5 800 200 200 7
```

Each event is printed to standard output on its own line:

```
<milliseconds since start> <philosopher number> <action>
```

The action is one of `has taken a fork`, `is eating`, `is sleeping`,
`is thinking` or `died`. Philosophers are numbered from 1. Nothing more is
printed once the dinner has ended.

With a wrong number of arguments, the command prints `ERROR: INVALID ARGUMENTS`.
With other invalid input, it prints the reason followed by `ERROR: INVALID INPUT`
or `ERROR: PROBLEM IN TABLE`. In every error case it exits with status 1. A
completed dinner exits with status 0.

## Using it as a library

```python
from philosophers.parsing import parse_settings
from philosophers.table import build_table
from philosophers.simulation import run_simulation

settings = parse_settings(["4", "410", "200", "200", "3"])
table = build_table(settings)
run_simulation(table)
```

The library is split into these modules:

- `philosophers.parsing`
  - `check_args` validates a raw argument list, given without the program name,
    and returns the numbers.
  - `parse_settings` turns the arguments into a frozen `Settings` dataclass.
  - `validate_settings` applies the limits on the philosopher count and the
    times.
  - Each of these raises `ArgumentError`, a `ValueError`, on bad input.
  - `parse_number` reads a leading signed decimal number the way the checks do.
- `philosophers.table`
  - `Table` holds the forks, the philosophers and the end flag.
  - `Table(settings, output=stream)` writes the log lines to `stream` instead
    of standard output. This constructor does not validate the settings.
  - `build_table` validates the settings, then builds a table that prints to
    standard output.
  - `assign_forks` gives the order in which a philosopher picks up its forks.
- `philosophers.simulation`
  - `run_simulation` starts all the threads and waits for them to finish.
  - `check_end` performs one pass of the monitor.
- `philosophers.display`
  - `State` lists the events.
  - `status_message` and `format_status` build the log text.
- `philosophers.timing`
  - Helpers for the millisecond clock.
  - `thinking_time` sets how long a philosopher thinks.

## Running the tests

```
pip install ".[test]"
pytest
```