"""
Input Reader for the Algorithm Demonstrations.

Reads integer sequences from the console and knapsack instances from
JSON files.
"""

import json
from typing import Dict, List, TextIO

from models.knapsack_problem import KnapsackProblem


class InputFormatError(Exception):
    """Exception raised when console input or an input file cannot be parsed."""
    pass


def read_int_sequence(stream: TextIO) -> List[int]:
    """
    Read a count n followed by n integers.

    Tokens are whitespace separated and may span lines; anything after
    the n-th integer is ignored.

    Args:
        stream: Text stream to read from (stdin in the demos)

    Returns:
        List of the n integers in input order

    Raises:
        InputFormatError: non-integer token, negative n, or too few values
    """
    tokens = stream.read().split()
    if not tokens:
        raise InputFormatError("Expected an element count, got no input")

    count = _parse_int(tokens[0], "element count")
    if count < 0:
        raise InputFormatError(f"Element count cannot be negative: {count}")

    values = tokens[1:count + 1]
    if len(values) < count:
        raise InputFormatError(f"Expected {count} numbers, got {len(values)}")

    return [_parse_int(token, f"element {i}") for i, token in enumerate(values)]


def load_knapsack_problem(file_path: str) -> KnapsackProblem:
    """
    Load a knapsack instance from a JSON file.

    Expected keys: 'capacity', 'weights', 'values' and optionally 'n'.

    Args:
        file_path: Path to the JSON file

    Returns:
        Validated KnapsackProblem

    Raises:
        InputFormatError: If the file cannot be loaded or a key is missing
        AlgorithmInputError: If the instance itself is invalid
    """
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except FileNotFoundError:
        raise InputFormatError(f"Input file not found: {file_path}")
    except json.JSONDecodeError as e:
        raise InputFormatError(f"Invalid JSON in input file: {e}")

    if not isinstance(data, dict):
        raise InputFormatError("Input file must hold a JSON object")

    for field in ['capacity', 'weights', 'values']:
        if field not in data:
            raise InputFormatError(f"Input file missing '{field}' field")

    return KnapsackProblem(
        capacity=data['capacity'],
        weights=_int_list(data, 'weights'),
        values=_int_list(data, 'values'),
        n=data.get('n')
    )


def _int_list(data: Dict, field: str) -> List[int]:
    """Validate that a JSON field is a list of integers."""
    items = data[field]
    if not isinstance(items, list):
        raise InputFormatError(f"'{field}' must be a list")
    for item in items:
        if isinstance(item, bool) or not isinstance(item, int):
            raise InputFormatError(f"'{field}' must contain integers, got {item!r}")
    return items


def _parse_int(token: str, label: str) -> int:
    try:
        return int(token)
    except ValueError:
        raise InputFormatError(f"Invalid {label}: {token!r} is not an integer")
