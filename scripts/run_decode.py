"""
Demo script: decode IGC files and export their tables via the public API.

Usage:
    python scripts/run_decode.py flight1.igc [flight2.igc ...]
    python scripts/run_decode.py --csv flight1.igc
    python scripts/run_decode.py --config decode.yaml flight1.igc

Each input file gets its own output subdirectory under outputs/.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

OUTPUT_ROOT = Path("outputs")

# ---------------------------------------------------------------------------
# Logging setup
# ---------------------------------------------------------------------------

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
    datefmt="%H:%M:%S",
)
log = logging.getLogger("run_decode")


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

def main() -> int:
    import igc_decode

    args = sys.argv[1:]
    config = igc_decode.DecodeConfig()
    if "--config" in args:
        idx = args.index("--config")
        config = igc_decode.load_config(args[idx + 1])
        del args[idx : idx + 2]
    if "--csv" in args:
        args.remove("--csv")
        config.output.output_format = "csv"

    if not args:
        log.error("No input files given")
        return 2

    for input_path in args:
        if not Path(input_path).exists():
            log.warning("SKIP  %s  (file not found)", input_path)
            continue

        output_dir = str(OUTPUT_ROOT / Path(input_path).stem)
        log.info("=" * 70)
        log.info("Processing: %s -> %s", input_path, output_dir)
        log.info("=" * 70)

        written = igc_decode.export_log(input_path, output_dir=output_dir, config=config)
        for path in written:
            log.info("  wrote %s", path)

    log.info("All files processed.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
