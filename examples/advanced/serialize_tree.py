"""Cache a decoded tree to disk: JSON round-trip."""

from lazyical import parse
from lazyical.serialization import from_json, to_json

cal = parse(b"BEGIN:VCALENDAR\nBEGIN:VEVENT\nDTEND;TZID=America/Los_Angeles:20160919T123000\nEND:VEVENT\nEND:VCALENDAR\n")

json_str = to_json(cal, indent=2)
restored = from_json(json_str)

print("Original == restored:", cal == restored)
print(json_str)
