from __future__ import annotations

import argparse
import time

from geobounds_core.config.logging import configure_logging
from geobounds_core.geo.bounds import parse


def main() -> None:
    parser = argparse.ArgumentParser(description="Parse catalog coordinate strings into envelope/bbox.")
    parser.add_argument("values", nargs="+", help='e.g. "(W 123°23ʹ16ʺ--W 122°31ʹ22ʺ/N 39°23ʹ57ʺ--N 38°17ʹ53ʺ)"')
    parser.add_argument("--log-level", default=None, help="Override GEOBOUNDS_LOG_LEVEL (DEBUG shows rejections)")
    args = parser.parse_args()

    logger = configure_logging(args.log_level, "geobounds.ops")
    if args.log_level:
        configure_logging(args.log_level, "geobounds.parse")

    invalid = 0
    for value in args.values:
        t0 = time.perf_counter()
        rect = parse(value)
        dt_ms = (time.perf_counter() - t0) * 1000.0

        if not rect.is_valid():
            invalid += 1
            logger.warning(f"invalid coordinates: {value!r}")

        print("\n=== SMOKE PARSE RESULT ===")
        print(f"input:    {value}")
        print(f"valid:    {rect.is_valid()}")
        print(f"envelope: {rect.as_envelope()}")
        print(f"bbox:     {rect.as_bbox()}")
        print(f"elapsed:  {dt_ms:.3f} ms")
        print("==========================\n")

    print(f"parsed {len(args.values)} value(s), {invalid} invalid")


if __name__ == "__main__":
    main()
