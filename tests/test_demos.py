"""
Demo Driver Tests

Tests the console drivers, the input reader and the logger.
"""

import io
import json
import sys
import tempfile
from contextlib import redirect_stdout
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from demos import main, run_knapsack, run_merge_sort, run_quicksort
from algorithms.errors import LengthMismatchError
from analysis.events import EventLog, EventType, TraceEvent
from models.knapsack_problem import KnapsackProblem
from utils.input_reader import InputFormatError, load_knapsack_problem, read_int_sequence
from utils.logger import DemoLogger


SCENARIOS_DIR = project_root / "scenarios"


def _capture_logger(verbose: bool = False):
    out = io.StringIO()
    return DemoLogger(verbose=verbose, stream=out), out


def test_read_int_sequence():
    """Count followed by that many integers, across lines."""
    assert read_int_sequence(io.StringIO("5\n3 1 4 1 5\n")) == [3, 1, 4, 1, 5]
    assert read_int_sequence(io.StringIO("3\n-1\n0\n7")) == [-1, 0, 7]
    assert read_int_sequence(io.StringIO("2 8 9 10 11")) == [8, 9], "Extra tokens ignored"
    assert read_int_sequence(io.StringIO("0")) == []


def test_read_int_sequence_errors():
    """Malformed console input raises InputFormatError."""
    for text in ["", "abc", "3\n1 2", "-2 1 1", "2\n1 x"]:
        try:
            read_int_sequence(io.StringIO(text))
            assert False, f"Expected InputFormatError for {text!r}"
        except InputFormatError as e:
            print(f"  ✓ {text!r}: {e}")


def test_load_knapsack_problem():
    """Scenario files load into validated problems."""
    problem = load_knapsack_problem(str(SCENARIOS_DIR / "demo_knapsack.json"))
    assert problem.capacity == 5
    assert problem.weights == [2, 1, 3, 2]
    assert problem.n == 4

    crates = load_knapsack_problem(str(SCENARIOS_DIR / "warehouse_crates.json"))
    assert crates.n == 5 and crates.capacity == 10


def test_load_knapsack_problem_errors():
    """Missing files, bad JSON and missing keys are InputFormatError."""
    try:
        load_knapsack_problem(str(SCENARIOS_DIR / "does_not_exist.json"))
        assert False, "Expected InputFormatError"
    except InputFormatError as e:
        assert "not found" in str(e)

    with tempfile.TemporaryDirectory() as tmp:
        bad_json = Path(tmp) / "bad.json"
        bad_json.write_text("{capacity: 5", encoding="utf-8")
        missing = Path(tmp) / "missing.json"
        missing.write_text(json.dumps({"capacity": 5, "weights": [1]}), encoding="utf-8")
        not_ints = Path(tmp) / "floats.json"
        not_ints.write_text(json.dumps({"capacity": 5, "weights": [1.5], "values": [2]}), encoding="utf-8")
        text_count = Path(tmp) / "text_count.json"
        text_count.write_text(json.dumps({"capacity": 5, "weights": [1, 2], "values": [3, 4], "n": "1"}), encoding="utf-8")

        for path, fragment in [(bad_json, "Invalid JSON"), (missing, "'values'"), (not_ints, "integers")]:
            try:
                load_knapsack_problem(str(path))
                assert False, f"Expected InputFormatError for {path.name}"
            except InputFormatError as e:
                assert fragment in str(e), str(e)

        try:
            load_knapsack_problem(str(text_count))
            assert False, "Expected LengthMismatchError for a non-integer n"
        except LengthMismatchError as e:
            assert "must be an integer" in str(e)

        out = io.StringIO()
        with redirect_stdout(out):
            code = main(['--algorithm', 'knapsack', '--input', str(text_count)])
        assert code == 1
        assert "[ERROR] Item count must be an integer" in out.getvalue()

    try:
        load_knapsack_problem(str(SCENARIOS_DIR / "length_mismatch.json"))
        assert False, "Expected LengthMismatchError"
    except LengthMismatchError:
        pass


def test_run_merge_sort_output():
    """Merge sort driver prints the sorted line under its header."""
    print("\n" + "="*60)
    print("TEST: Merge Sort Driver")
    print("="*60)

    logger, out = _capture_logger()
    result = run_merge_sort(io.StringIO("5\n3 1 4 1 5\n"), logger)
    lines = out.getvalue().splitlines()
    print(out.getvalue())

    assert result == [1, 1, 3, 4, 5]
    assert lines == [
        "enter string length",
        "enter 5 numbers",
        "",
        "sorted elements",
        "1 1 3 4 5",
    ]


def test_run_merge_sort_empty_input():
    """n=0 prints the header followed by an empty line."""
    logger, out = _capture_logger()
    result = run_merge_sort(io.StringIO("0\n"), logger)
    assert result == []
    assert out.getvalue().splitlines() == [
        "enter string length",
        "enter 0 numbers",
        "",
        "sorted elements",
        "",
    ]


def test_run_quicksort_output():
    """Quicksort driver shares the console contract."""
    logger, out = _capture_logger()
    result = run_quicksort(io.StringIO("6\n5 2 9 1 5 6"), logger)
    assert result == [1, 2, 5, 5, 6, 9]
    assert out.getvalue().splitlines()[-1] == "1 2 5 5 6 9"


def test_run_knapsack_output():
    """Knapsack driver prints the single result line."""
    logger, out = _capture_logger()
    assert run_knapsack(logger=logger) == 37
    assert out.getvalue().splitlines() == ["Maximum value in Knapsack = 37"]


def test_run_knapsack_verbose():
    """Verbose mode adds the table and chosen items as debug lines."""
    logger, out = _capture_logger(verbose=True)
    problem = KnapsackProblem(capacity=7, weights=[1, 3, 4], values=[15, 20, 30])
    assert run_knapsack(problem, logger) == 50

    text = out.getvalue()
    assert text.startswith("Maximum value in Knapsack = 50")
    assert "[DEBUG] \nDP Table" in text
    assert "[DEBUG] Items chosen: #1 (weight=3, value=20), #2 (weight=4, value=30)" in text


def test_logger_levels():
    """Debug only when verbose; non-info levels are prefixed."""
    logger, out = _capture_logger()
    logger.log("plain")
    logger.log("hidden", "debug")
    logger.log("careful", "warning")
    logger.log("broken", "error")
    assert out.getvalue().splitlines() == ["plain", "[WARNING] careful", "[ERROR] broken"]

    logger, out = _capture_logger(verbose=True)
    logger.log_event(TraceEvent(step=3, event_type=EventType.SWAP, low=1, high=4))
    assert out.getvalue() == "[DEBUG] Step 3: swap 1 <-> 4\n"


def test_logger_file_mirror():
    """Log file gets a header and every printed line."""
    with tempfile.TemporaryDirectory() as tmp:
        log_path = Path(tmp) / "demo.log"
        logger = DemoLogger(log_file=str(log_path), stream=io.StringIO())
        run_knapsack(logger=logger)
        logger.close()

        content = log_path.read_text(encoding="utf-8")
        assert content.startswith("Demo Log - ")
        assert "Maximum value in Knapsack = 37" in content


def test_main_knapsack():
    """CLI entry point: default instance, trace statistics, input file."""
    out = io.StringIO()
    with redirect_stdout(out):
        assert main(['--algorithm', 'knapsack']) == 0
    assert "Maximum value in Knapsack = 37" in out.getvalue()

    out = io.StringIO()
    with redirect_stdout(out):
        assert main(['--algorithm', 'knapsack', '--trace']) == 0
    assert "Trace Statistics:" in out.getvalue()
    assert "table_row: 4" in out.getvalue()

    out = io.StringIO()
    with redirect_stdout(out):
        code = main(['--algorithm', 'knapsack', '--input', str(SCENARIOS_DIR / "warehouse_crates.json")])
    assert code == 0
    assert "Maximum value in Knapsack = 95" in out.getvalue()


def test_main_reports_errors():
    """Invalid input is logged as an error and exits with 1."""
    out = io.StringIO()
    with redirect_stdout(out):
        code = main(['--algorithm', 'knapsack', '--input', str(SCENARIOS_DIR / "length_mismatch.json")])
    assert code == 1
    assert "[ERROR] Weights and values must pair up" in out.getvalue()

    saved_stdin = sys.stdin
    sys.stdin = io.StringIO("4\n1 2 three 4")
    try:
        out = io.StringIO()
        with redirect_stdout(out):
            code = main(['--algorithm', 'quicksort'])
    finally:
        sys.stdin = saved_stdin
    assert code == 1
    assert "[ERROR] Invalid element 2" in out.getvalue()


def test_main_merge_sort_from_stdin():
    """Merge sort reads its numbers from stdin."""
    saved_stdin = sys.stdin
    sys.stdin = io.StringIO("5\n3 1 4 1 5\n")
    try:
        out = io.StringIO()
        with redirect_stdout(out):
            code = main(['--algorithm', 'merge_sort', '--trace', '--verbose'])
    finally:
        sys.stdin = saved_stdin

    text = out.getvalue()
    assert code == 0
    assert "sorted elements\n1 1 3 4 5\n" in text
    assert "[DEBUG] Step 0: merge" in text
    assert "merge: 4" in text


def test_trace_passed_through_drivers():
    """Drivers forward the event log to their kernel."""
    log = EventLog()
    logger, _ = _capture_logger()
    run_quicksort(io.StringIO("3\n3 2 1"), logger, log)
    assert log.events, "quicksort recorded its partitions"


def main_tests():
    """Run all driver tests."""
    print("\n" + "="*70)
    print(" "*20 + "DEMO DRIVER TESTS")
    print("="*70)

    try:
        test_read_int_sequence()
        test_read_int_sequence_errors()
        test_load_knapsack_problem()
        test_load_knapsack_problem_errors()
        test_run_merge_sort_output()
        test_run_merge_sort_empty_input()
        test_run_quicksort_output()
        test_run_knapsack_output()
        test_run_knapsack_verbose()
        test_logger_levels()
        test_logger_file_mirror()
        test_main_knapsack()
        test_main_reports_errors()
        test_main_merge_sort_from_stdin()
        test_trace_passed_through_drivers()

        print("\n✅ ALL DRIVER TESTS PASSED\n")
        return 0

    except AssertionError as e:
        print(f"\n❌ TEST FAILED: {e}")
        return 1


if __name__ == '__main__':
    sys.exit(main_tests())
