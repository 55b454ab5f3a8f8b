"""
Basic convkit usage example.

This example demonstrates the common convkit helpers:
- Parsing and formatting full dates
- Day and week boundaries
- Query strings and string shortcuts
- Loading an image asynchronously
"""

import asyncio
import logging
import sys

from convkit import (
    Settings, configure_logging, parse_full_date, format_full_date,
    beginning_of_day, end_of_day, get_next_sunday, is_same_week_as
)
from convkit.media import load_from_url_async
from convkit.ui import Color, apply_default_font_family, Font
from convkit.util import to_url_string, truncate


def calendar_example():
    """Demonstrate calendar helpers"""
    print("Calendar")
    print("=" * 30)

    instant = parse_full_date("2024-01-03 10:00:00")
    print(f"✓ Parsed:         {format_full_date(instant)}")
    print(f"✓ Start of day:   {format_full_date(beginning_of_day(instant))}")
    print(f"✓ End of day:     {format_full_date(end_of_day(instant))}")
    print(f"✓ Week ends:      {format_full_date(get_next_sunday(instant))}")

    other = parse_full_date("2024-01-05 18:30:00")
    print(f"✓ Same week:      {is_same_week_as(instant, other)}")
    print(f"✓ ISO input:      {parse_full_date('2024-01-03T10:00:00Z')}")


def helpers_example():
    """Demonstrate string, color and font helpers"""
    print("\nHelpers")
    print("=" * 30)

    print(f"✓ Query:          {to_url_string({'q': 'green tea', 'page': '2'})}")
    print(f"✓ Truncated:      {truncate('A rather long headline', 10)}")
    print(f"✓ Color:          {Color.from_hex('4D5E2C')}")
    print(f"✓ Font:           {apply_default_font_family(Font('OpenSans-Semibold', 14))}")


async def image_example(url: str):
    """Demonstrate asynchronous image loading"""
    print("\nImage")
    print("=" * 30)

    def on_loaded(error, image):
        if error is not None:
            print(f"✗ Failed: {error.message}")
        elif image is None:
            print("✗ Not an image")
        else:
            print(f"✓ Loaded {image.format} image, {image.size} bytes")

    await load_from_url_async(url, on_loaded)
    # Let the scheduled callback run
    await asyncio.sleep(0)


if __name__ == "__main__":
    logging.basicConfig()
    configure_logging(Settings.from_env())

    calendar_example()
    helpers_example()
    if len(sys.argv) > 1:
        asyncio.run(image_example(sys.argv[1]))
