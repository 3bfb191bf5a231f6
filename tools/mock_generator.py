#!/usr/bin/env python3
# tools/mock_generator.py
"""
HVAC mock data generator - command line entry point.

Usage:
    python -m tools.mock_generator                          # Defaults from config
    python -m tools.mock_generator --input data/inmet/a.csv --seed 42
    python -m tools.mock_generator --format jsonl --output-dir out/
    python -m tools.mock_generator --upload                 # Also send to S3

Pipeline:
1. Load config/generator.yml and environment (.env) overrides
2. Read the INMET climate export (CSV or ZIP)
3. Generate one HVAC sensor record per climate record
4. Serialise to JSON (array) or JSON lines
5. Save locally and optionally upload to S3
"""

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from config.config_loader import ConfigLoader, apply_environment
from hvac_mock.climate import read_inmet_file
from hvac_mock.logging_system import configure_logging
from hvac_mock.sinks import (
    default_object_name,
    save_locally,
    to_json,
    to_jsonl,
    upload_to_s3,
)
from hvac_mock.telemetry import GeneratorParameters, TelemetryGenerator, summarize

logger = logging.getLogger(__name__)

OUTPUT_FORMATS = ("json", "jsonl")


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        description="Generate mock HVAC sensor telemetry from INMET climate data",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m tools.mock_generator --seed 42                  # Reproducible run
  python -m tools.mock_generator --input data/inmet/a.zip   # Specific export
  python -m tools.mock_generator --format jsonl             # JSON lines output
  python -m tools.mock_generator --upload                   # Save and upload to S3
  python -m tools.mock_generator --log-json                 # Structured console logs
        """,
    )
    parser.add_argument(
        "--input", help="INMET climate file (.csv or .zip); default from config"
    )
    parser.add_argument(
        "--config-dir", default="config", help="Directory holding generator.yml"
    )
    parser.add_argument("--seed", type=int, help="Random seed for a reproducible run")
    parser.add_argument("--output-dir", help="Directory for the generated file")
    parser.add_argument(
        "--format", choices=OUTPUT_FORMATS, help="Output layout (default from config)"
    )
    parser.add_argument(
        "--upload",
        action="store_true",
        help="Upload the generated file to S3 (S3_BUCKET_NAME, AWS_REGION)",
    )
    parser.add_argument(
        "--env-file", default=".env", help="Environment file with S3 settings"
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Console log level",
    )
    parser.add_argument("--log-dir", help="Directory for the rotating JSON log file")
    parser.add_argument(
        "--log-json", action="store_true", help="Write console logs as JSON lines"
    )
    return parser


def run(args: argparse.Namespace) -> int:
    """Execute one generator run. Returns the process exit code."""
    config = ConfigLoader(args.config_dir).load_all()
    config = apply_environment(config, args.env_file)

    params = GeneratorParameters.from_config(config)
    seed = args.seed if args.seed is not None else config["simulation"].get("seed")

    input_path = Path(args.input or config["input"]["climate_path"])
    output_format = args.format or config["output"].get("format", "json")
    if output_format not in OUTPUT_FORMATS:
        raise ValueError(
            f"Unsupported output format '{output_format}', "
            f"expected one of {', '.join(OUTPUT_FORMATS)}"
        )

    logger.info(f"Reading climate data from {input_path}")
    climate_records = read_inmet_file(input_path)

    if not climate_records:
        logger.warning(f"No climate records found in {input_path}, nothing to do")
        return 0

    generator = TelemetryGenerator(params, seed=seed)
    sensor_records = generator.generate(climate_records)

    summary = summarize(sensor_records)
    logger.info(
        f"Run summary: {summary.record_count} records "
        f"({summary.first_timestamp} .. {summary.last_timestamp}), "
        f"total power {summary.total_power_kwh:.1f} kWh",
        extra={"data": summary.to_dict()},
    )
    logger.info(f"Status counts: {summary.status_counts}")
    logger.info(f"Fault counts: {summary.fault_counts}")

    if output_format == "jsonl":
        data = to_jsonl(sensor_records)
    else:
        data = to_json(sensor_records)

    object_name = default_object_name(extension=output_format)
    output_dir = Path(args.output_dir or config["output"].get("directory", "output"))
    save_locally(data, output_dir / object_name)

    if args.upload:
        s3 = config["output"].get("s3", {})
        upload_to_s3(
            s3.get("bucket"),
            s3.get("region"),
            data,
            object_name,
            endpoint_url=s3.get("endpoint_url"),
        )

    logger.info("Generation completed successfully")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    configure_logging(
        args.log_level, log_dir=args.log_dir, json_format=args.log_json
    )

    logger.info("=== HVAC Mock Data Generator ===")

    try:
        return run(args)
    except (FileNotFoundError, ValueError, RuntimeError) as e:
        logger.error(f"Generation failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
