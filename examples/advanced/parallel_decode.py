"""Independent decoders share nothing, so decode 1000 calendars in parallel."""

from concurrent.futures import ThreadPoolExecutor

from lazyical import parse

cals = [
    f"BEGIN:VCALENDAR\nX-WR-CALNAME:Cal {i}\nBEGIN:VEVENT\nUID:{i}\nEND:VEVENT\nEND:VCALENDAR\n"
    for i in range(1000)
]

with ThreadPoolExecutor(max_workers=8) as ex:
    results = list(ex.map(parse, cals))

print(f"Decoded {len(results)} calendars in parallel")
print("First:", results[0])
print("Last:", results[-1])
