import io
import threading

import pytest

from philosophers.display import State
from philosophers.parsing import ArgumentError, Settings
from philosophers.table import assign_forks, build_table
from philosophers.timing import current_time


@pytest.fixture
def table():
    return build_table(Settings(5, 800, 200, 200))


def test_assign_forks_even_takes_own_first():
    assert assign_forks(0, 5) == (0, 1)


def test_assign_forks_odd_takes_right_first():
    assert assign_forks(1, 5) == (2, 1)


def test_assign_forks_last_wraps():
    assert assign_forks(4, 5) == (4, 0)


def test_assign_forks_single_philosopher():
    assert assign_forks(0, 1) == (0, None)


@pytest.mark.parametrize("count", [2, 3, 4, 7])
def test_assign_forks_uses_neighbouring_forks(count):
    for pid in range(count):
        assert set(assign_forks(pid, count)) == {pid, (pid + 1) % count}


def test_build_table_creates_philosophers(table):
    assert [p.id for p in table.philosophers] == [0, 1, 2, 3, 4]
    assert len(table.forks) == 5
    assert all(p.table is table for p in table.philosophers)
    assert table.philosophers[1].forks == (2, 1)
    assert table.finished() is False


def test_build_table_rejects_invalid_settings():
    with pytest.raises(ArgumentError):
        build_table(Settings(0, 800, 200, 200))


def test_record_meal_time(table):
    philosopher = table.philosophers[0]
    philosopher.record_meal_time(table.start)
    assert philosopher.last_meal == table.start


def test_add_meal_is_thread_safe(table):
    philosopher = table.philosophers[2]

    def eat():
        for _ in range(500):
            philosopher.add_meal()

    threads = [threading.Thread(target=eat) for _ in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert philosopher.meals_done == 4 * 500


def test_thinking_time_short_margin(table):
    philosopher = table.philosophers[0]
    philosopher.record_meal_time(current_time())
    assert philosopher.thinking_time() == 1


def test_thinking_time_long_margin():
    table = build_table(Settings(3, 2000, 200, 200))
    philosopher = table.philosophers[0]
    philosopher.record_meal_time(current_time())
    assert philosopher.thinking_time() == 200


def test_set_finished_round_trip(table):
    table.set_finished(True)
    assert table.finished() is True
    table.set_finished(False)
    assert table.finished() is False


def test_log_writes_status_line(table):
    table.output = io.StringIO()
    line = table.log(table.philosophers[0], State.SLEEPING)
    assert line.endswith(" 1 is sleeping")
    assert table.output.getvalue() == line + "\n"


def test_log_silent_after_finish(table):
    table.output = io.StringIO()
    table.set_finished(True)
    assert table.log(table.philosophers[3], State.EATING) is None
    assert table.output.getvalue() == ""


def test_log_defaults_to_stdout(table, capsys):
    table.log(table.philosophers[4], State.DEAD)
    assert capsys.readouterr().out.endswith(" 5 died\n")


def test_sleep_waits_duration(table):
    before = current_time()
    table.sleep(60)
    after = current_time()
    assert after - before >= 60
    assert table.finished() is False


def test_sleep_returns_early_when_finished(table):
    table.set_finished(True)
    before = current_time()
    table.sleep(5000)
    after = current_time()
    assert after - before < 1000
    assert table.finished() is True