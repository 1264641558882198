"""Example usage of the EndpointDiff comparison engine."""

import json
from endpointdiff import ComparisonEngine, ComparisonReporter

# Staging API response
staging_response = [
    {"userId": 1, "id": 1, "title": "delectus aut autem", "completed": False},
    {"userId": 1, "id": 2, "title": "quis ut nam facilis", "completed": False},
    {"userId": 2, "id": 3, "title": "fugiat veniam minus", "completed": True},
]

# Production API response (different order, wrapped in an envelope)
production_response = {
    "data": {
        "todos": [
            {"id": 3, "title": "fugiat veniam minus"},
            {"id": 1, "title": "delectus aut autem"},
            {"id": 2, "title": "quis ut nam facilis"},
        ]
    }
}


def main():
    print("=" * 60)
    print("EndpointDiff Comparison Engine - Example")
    print("=" * 60)

    engine = ComparisonEngine()

    # Different paths project the same values out of different shapes
    result = engine.compare(
        staging_response,
        "$[*].title",
        production_response,
        "$.data.todos[*].title",
        left_source="https://staging.example.com/todos",
        right_source="https://api.example.com/todos",
    )

    ComparisonReporter().print_report(result)

    print("\n" + "-" * 60)
    print("Full JSON Report:")
    print(json.dumps(result.to_dict(), indent=2))


def example_with_mismatch():
    """Example that demonstrates a mismatch."""
    print("\n" + "=" * 60)
    print("Example with Mismatch")
    print("=" * 60)

    mismatched = [
        {"id": 1, "title": "delectus aut autem"},
        {"id": 2, "title": "quis ut nam facilis et officia"},  # Title changed
    ]

    engine = ComparisonEngine()
    result = engine.compare(staging_response, "$[*].title", mismatched, "$[*].title")

    # Verbose mode shows matched values and a side-by-side table
    ComparisonReporter(verbose=True).print_report(result)


def example_with_objects():
    """Selecting whole objects compares their member values."""
    print("\n" + "=" * 60)
    print("Example with Object Selection")
    print("=" * 60)

    engine = ComparisonEngine()
    left = {"user": {"name": "Ada", "tags": ["admin", "ops"]}}
    right = {"user": {"name": "Ada", "tags": ["ops", "admin"]}}

    # Nested arrays inside objects are compared as whole JSON strings
    result = engine.compare(left, "$.user", right, "$.user")
    print(f"\nEquivalent: {result.is_equivalent}")
    print(f"Only in left: {list(result.only_in_left)}")
    print(f"Only in right: {list(result.only_in_right)}")


if __name__ == "__main__":
    main()
    example_with_mismatch()
    example_with_objects()
