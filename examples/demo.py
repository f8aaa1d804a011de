"""
jsonsmith demonstration script.
"""

import jsonsmith
from jsonsmith import FormatMode, FormatOptions, SortOrder


def main():
    print("jsonsmith - JSON Formatter Demo")
    print("=" * 40)

    document = """
    {
        // service definition
        "service": "billing",
        "replicas": 3,
        "ports": [8080, 8443],
        "env": {"REGION": "eu-west-1", "DEBUG": false, "LOG_LEVEL": "info"},
        "owners": [
            {"name": "Alice", "email": "alice@example.com"},
            {"name": "Bob", "email": "bob@example.com"}
        ]
    }
    """
    value = jsonsmith.parse(document)

    layouts = [
        (FormatOptions(), "Pretty, 2 spaces"),
        (FormatOptions(indent_width=4, sort_order=SortOrder.ASC), "Pretty, 4 spaces, A-Z"),
        (FormatOptions(mode=FormatMode.SMART), "Smart"),
        (FormatOptions(mode=FormatMode.MINIFY, sort_order=SortOrder.DESC), "Minify, Z-A"),
    ]

    for i, (options, description) in enumerate(layouts, 1):
        print(f"\n{i}. {description}")
        print(jsonsmith.format_value(value, options))

    print(f"\n{len(layouts) + 1}. Validation error")
    diagnostic = jsonsmith.validate('{"service": "billing" "replicas": 3}')
    print(f"Line {diagnostic.line}, column {diagnostic.column}: {diagnostic}")


if __name__ == "__main__":
    main()
