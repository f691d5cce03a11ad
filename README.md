# philosophers

A simulation of the dining philosophers problem. Each philosopher runs on its
own thread and needs the two forks beside it to eat. A monitor thread watches
for a philosopher who has gone too long without eating, and ends the
simulation the moment one dies or once everyone has eaten enough.

## Installation

```
pip install .
```

## Usage

```
philo number_of_philosophers time_to_die time_to_eat time_to_sleep [max_meals]
```

The same command can also be started with `python -m philosophers.cli`.

- `number_of_philosophers`: how many philosophers, and forks, are at the table (0 to 200)
- `time_to_die`: milliseconds a philosopher may go without eating before dying
- `time_to_eat`: milliseconds a meal takes
- `time_to_sleep`: milliseconds a philosopher sleeps after eating
- `max_meals` (optional): the simulation stops once every philosopher has eaten this many times

Every argument has to be a non-negative whole number no larger than
2147483647. Whitespace around a number and a single leading `+` are accepted.
If the arguments are not valid, a message saying why is printed and the
command exits with status 1; otherwise it exits with status 0.

Example:

```
philo 5 800 200 200 7
```

Each event is printed as one line: the milliseconds since the start, the
philosopher's number, and what happened (`has taken a fork`, `is eating`,
`is sleeping`, `is thinking`):

```
0 1 has taken a fork
0 1 has taken a fork
0 1 is eating
200 1 is sleeping
...
```

A death is reported as `<time> <id> died`, and no further lines follow it.
A lone philosopher takes one fork and can never eat, so the monitor reports
its death once `time_to_die` has passed. When there are no philosophers, or
`max_meals` is 0, the program exits straight away without printing anything.

## Using it from Python

```python
import sys

from philosophers.args import parse_settings
from philosophers.simulation import Table

settings = parse_settings(["4", "410", "200", "200", "3"])
Table(settings, sys.stdout).run()
```

`parse_settings` takes the arguments that follow the program name and returns
a `Settings`; it raises `ArgumentError` (a `ValueError`) when they are not
valid. `Settings` can also be built directly, and raises `ArgumentError` for a
negative time or a philosopher count outside 0 to 200. `Table.run` starts the
philosopher threads and the monitor and returns once all of them have
finished. `philosophers.cli.main` takes an argument list the same way the
command does and returns the exit status.

## Running the tests

```
pip install .[test]
pytest
```