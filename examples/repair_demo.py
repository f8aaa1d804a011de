"""
Demonstration of the jsonsmith repair pipeline on typical broken input.
"""

import jsonsmith
from jsonsmith import RepairConfig


def main():
    print("jsonsmith - Repair Demo")
    print("=" * 40)

    examples = [
        ('{"items": [1, 2, 3,], "active": true,}', "Trailing commas"),
        ("{'name': 'John', 'admin': True}", "Python dict repr"),
        ('{"users": [{"id": 1}, {"id": 2, "name": "Jo', "Truncated response"),
        ('{\n  // comment\n  "a": "unterminated,\n  "b": 2\n}', "Comment and open string"),
        ("{name: 'John'}", "Unquoted keys (not repairable)"),
    ]

    for i, (text, description) in enumerate(examples, 1):
        print(f"\n{i}. {description}")
        print(f"Input:  {text}")
        result = jsonsmith.repair(text)
        print(f"Output: {result.text}")
        print(f"Steps:  {', '.join(result.applied_steps) or 'none'}")
        if not result.recovered:
            print(f"Still invalid: {result.diagnostic}")

    print(f"\n{len(examples) + 1}. URLs with string-safe repair")
    text = '{"homepage": "https://example.com", "ok": t'
    for label, config in (("default", None), ("string-safe", RepairConfig.string_safe())):
        result = jsonsmith.repair(text, config)
        print(f"{label:>12}: {result.text}")


if __name__ == "__main__":
    main()
