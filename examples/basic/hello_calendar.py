"""Decode a calendar in 3 lines: zero config, zero deps."""

from lazyical import parse

cal = parse(b"BEGIN:VCALENDAR\r\nX-WR-CALNAME:Team\r\nBEGIN:VEVENT\r\nSUMMARY:Standup\r\nEND:VEVENT\r\nEND:VCALENDAR\r\n")
print(cal)
print(cal.subtoken("VEVENT"))
