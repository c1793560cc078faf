#!/usr/bin/env python3
"""
Smoke test for the lead deduplication API
Usage: python3 scripts/test-process.py <input.json> [output.json]
Example: python3 scripts/test-process.py leads.json filtered_leads_output.json
"""

import sys
import json
import requests
import time
from pathlib import Path

API_URL = "http://localhost:8000"


def test_process(input_path: str, output_path: str) -> None:
    """Call the process-leads endpoint and summarize the output file"""
    print(f"\n🧪 Processing: {input_path} -> {output_path}\n")

    try:
        start_time = time.time()
        response = requests.post(
            f"{API_URL}/api/process-leads",
            params={"input": input_path, "output": output_path},
            timeout=60,
        )

        duration = int((time.time() - start_time) * 1000)

        if not response.ok:
            print(f"❌ Error: {response.status_code} {response.text[:200]}")
            sys.exit(1)

        print(f"✅ {response.text} ({duration}ms)\n")

        before = json.loads(Path(input_path).read_text(encoding="utf-8")).get("leads", [])
        after = json.loads(Path(output_path).read_text(encoding="utf-8")).get("leads", [])
        print(f"📥 Input leads: {len(before)}")
        print(f"📤 Output leads: {len(after)}")
        print(f"🗑️  Removed: {len(before) - len(after)}")
        if after:
            sample = after[0]
            print("   Sample:", {
                "_id": sample.get("_id"),
                "email": sample.get("email"),
                "entryDate": sample.get("entryDate"),
            })
        print("\n")

    except requests.exceptions.ConnectionError:
        print("❌ Connection error: Could not connect to API")
        print("\nMake sure the server is running: leads serve")
        sys.exit(1)
    except (OSError, ValueError) as e:
        print(f"❌ Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print("Usage: python3 scripts/test-process.py <input.json> [output.json]")
        sys.exit(1)

    input_path = str(Path(sys.argv[1]).resolve())
    output_path = str(Path(sys.argv[2] if len(sys.argv) > 2 else "filtered_leads_output.json").resolve())

    test_process(input_path, output_path)
