"""Pull events one at a time: the rest of the feed stays unread."""

import io

from lazyical import Decoder

feed = io.BytesIO(
    b"BEGIN:VCALENDAR\n"
    b"VERSION:2.0\n"
    + b"".join(
        b"BEGIN:VEVENT\nUID:%d\nDTSTART;TZID=Europe/Paris:20240101T0900%02d\nEND:VEVENT\n" % (i, i)
        for i in range(5)
    )
    + b"END:VCALENDAR\n"
)

decoder = Decoder(feed)
first = decoder.next_token("VEVENT")
print("First event:", first)
print("Bytes read so far:", feed.tell(), "of", len(feed.getvalue()))

for event in decoder.iter_blocks("VEVENT"):
    start = event.subtoken("DTSTART")
    print(event.subtoken("UID").value, start.parameters["TZID"], start.value)
