#!/usr/bin/env python3
"""
Round-trip evaluation runner for the Huffman text coder.

This script:
- Encodes an input text file and writes the encoded bytes next to the report
- Reads the encoded file back, decodes it and writes the decoded text
- Compares the decoded text with the input
- Generates a structured JSON report with sizes, timings and environment metadata

Run with:
    python evaluation/evaluation.py --input ulysses.txt [options]
"""
import os
import sys
import json
import uuid
import logging
import platform
import time
from datetime import datetime
from pathlib import Path

SRC_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'src'))
if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)

from huffman_errors import HuffmanError  # noqa: E402
from huffman_service import decode, encode  # noqa: E402


def generate_run_id():
    """Generate a short unique run ID."""
    return uuid.uuid4().hex[:8]


def get_environment_info():
    """Collect environment information for the report."""
    return {
        "python_version": platform.python_version(),
        "platform": platform.platform(),
        "os": platform.system(),
        "os_release": platform.release(),
        "architecture": platform.machine(),
        "hostname": platform.node(),
    }


def run_roundtrip(input_path, output_dir, encoding="utf-8"):
    """
    Encode a text file, decode the written result and compare.

    Args:
        input_path: Text file to encode
        output_dir: Directory receiving the encoded and decoded files
        encoding: Text encoding of the input file

    Returns:
        dict with sizes, timings and the comparison outcome
    """
    input_path = Path(input_path)
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    encoded_path = output_dir / f"{input_path.stem}-encoded.bin"
    decoded_path = output_dir / f"{input_path.stem}-decoded.txt"

    print(f"\n{'=' * 60}")
    print(f"ROUND TRIP: {input_path}")
    print(f"{'=' * 60}")

    # newline="" keeps "\r\n" intact so the comparison is exact
    with open(input_path, encoding=encoding, newline="") as f:
        text = f.read()

    t0 = time.perf_counter()
    encoded = encode(text)
    encode_seconds = time.perf_counter() - t0
    encoded_path.write_bytes(encoded)

    t0 = time.perf_counter()
    decoded = decode(encoded_path.read_bytes())
    decode_seconds = time.perf_counter() - t0
    with open(decoded_path, "w", encoding=encoding, newline="") as f:
        f.write(decoded)

    input_bytes = len(text.encode(encoding))
    same = decoded == text

    print(f"Symbols: {len(text)}")
    print(f"Input bytes: {input_bytes}")
    print(f"Encoded bytes: {len(encoded)}")
    print(f"Match: {'✅ YES' if same else '❌ NO'}")

    return {
        "input": str(input_path),
        "encoded_file": str(encoded_path),
        "decoded_file": str(decoded_path),
        "symbols": len(text),
        "input_bytes": input_bytes,
        "encoded_bytes": len(encoded),
        "compression_ratio": round(len(encoded) / input_bytes, 6) if input_bytes else None,
        "encode_seconds": round(encode_seconds, 6),
        "decode_seconds": round(decode_seconds, 6),
        "match": same,
    }


def generate_output_dir():
    """Generate output directory in format: evaluation/YYYY-MM-DD/HH-MM-SS"""
    now = datetime.now()
    date_str = now.strftime("%Y-%m-%d")
    time_str = now.strftime("%H-%M-%S")

    project_root = Path(__file__).parent.parent
    return project_root / "evaluation" / date_str / time_str


def main(argv=None):
    """Main entry point for evaluation."""
    import argparse

    parser = argparse.ArgumentParser(description="Encode and decode a text file with the Huffman coder")
    parser.add_argument(
        "--input",
        type=str,
        required=True,
        help="Text file to round-trip"
    )
    parser.add_argument(
        "--output-dir",
        type=str,
        default=None,
        help="Directory for encoded/decoded files and report.json (default: evaluation/YYYY-MM-DD/HH-MM-SS)"
    )
    parser.add_argument(
        "--encoding",
        type=str,
        default="utf-8",
        help="Text encoding of the input file (default: utf-8)"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging from the coder"
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(levelname)s %(message)s")

    output_dir = Path(args.output_dir) if args.output_dir else generate_output_dir()

    # Generate run ID and timestamps
    run_id = generate_run_id()
    started_at = datetime.now()

    print(f"Run ID: {run_id}")
    print(f"Started at: {started_at.isoformat()}")

    try:
        results = run_roundtrip(args.input, output_dir, args.encoding)
        success = results["match"]
        error_message = None if success else "Decoded text differs from input"
    except (HuffmanError, OSError, UnicodeError) as e:
        print(f"\nERROR: {str(e)}")
        results = None
        success = False
        error_message = str(e)

    finished_at = datetime.now()
    duration = (finished_at - started_at).total_seconds()

    # Build report
    report = {
        "run_id": run_id,
        "started_at": started_at.isoformat(),
        "finished_at": finished_at.isoformat(),
        "duration_seconds": round(duration, 6),
        "success": success,
        "error": error_message,
        "environment": get_environment_info(),
        "results": results,
    }

    output_path = output_dir / "report.json"
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, "w") as f:
        json.dump(report, f, indent=2)
    print(f"\n✅ Report saved to: {output_path}")

    print(f"\n{'=' * 60}")
    print(f"EVALUATION COMPLETE")
    print(f"{'=' * 60}")
    print(f"Run ID: {run_id}")
    print(f"Duration: {duration:.2f}s")
    print(f"Success: {'✅ YES' if success else '❌ NO'}")

    return 0 if success else 1


if __name__ == "__main__":
    sys.exit(main())
