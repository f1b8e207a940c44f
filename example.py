#!/usr/bin/env python3
"""
Example usage of the JSON Format codec.

This script demonstrates compact and pretty output, members that cannot be
serialized, and fail-soft reading of malformed text.
"""

from datetime import datetime
from json_format import JSONFormat, UNDEFINED


def main():
    """Main example function."""
    print("JSON Format Example")
    print("=" * 50)
    
    sample_data = {
        "users": {
            "user_001": {
                "name": "Alice Johnson",
                "email": "alice@example.com",
                "joined": datetime(2024, 1, 5, 9, 3, 7),
                "interests": ["reading", "hiking", "photography"]
            },
            "user_002": {
                "name": "Bob Smith",
                "email": None,
                "joined": datetime(2024, 11, 20, 18, 45, 0),
                "interests": []
            }
        },
        "config": {
            "version": "1.0.0",
            "ratio": float("nan"),
            "callback": print,  # not serializable, dropped from the output
            "features": {
                "user_registration": True,
                "private_messaging": False
            }
        }
    }
    
    json_format = JSONFormat(keep_data=True)
    
    compact = json_format.write(sample_data)
    print(f"Compact JSON ({len(compact)} characters):\n{compact}\n")
    
    pretty = json_format.write(sample_data, pretty=True)
    print(f"Pretty JSON:\n{pretty}\n")
    
    parsed = json_format.read(compact)
    print(f"✅ Read back {len(parsed['users'])} users, retained data: {json_format.data is parsed}")
    
    broken = '{"users": {"user_001": '
    if json_format.read(broken) is UNDEFINED:
        error = json_format.last_error
        print(f"❌ Could not read {broken!r}: {error.message} "
              f"(line {error.line}, column {error.column})")


if __name__ == "__main__":
    main()
