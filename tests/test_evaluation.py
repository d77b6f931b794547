import os
import sys
import json

# Add evaluation to path
EVALUATION_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'evaluation'))
if EVALUATION_DIR not in sys.path:
	sys.path.insert(0, EVALUATION_DIR)

import evaluation


def test_run_roundtrip_writes_files(tmp_path):
	source = tmp_path / "ulysses.txt"
	source.write_bytes("Stately, plump Buck Mulligan\r\ncame from the stairhead.\n".encode("utf-8"))

	results = evaluation.run_roundtrip(source, tmp_path / "out")

	assert results["match"] is True
	assert results["symbols"] == 55
	encoded = (tmp_path / "out" / "ulysses-encoded.bin").read_bytes()
	assert len(encoded) == results["encoded_bytes"]
	decoded = (tmp_path / "out" / "ulysses-decoded.txt").read_bytes()
	assert decoded == source.read_bytes()


def test_main_writes_report(tmp_path):
	source = tmp_path / "input.txt"
	source.write_text("abracadabra", encoding="utf-8")

	exit_code = evaluation.main(["--input", str(source), "--output-dir", str(tmp_path / "run")])

	assert exit_code == 0
	report = json.loads((tmp_path / "run" / "report.json").read_text())
	assert report["success"] is True
	assert report["error"] is None
	assert report["results"]["symbols"] == 11
	assert "python_version" in report["environment"]


def test_main_reports_empty_input_failure(tmp_path):
	source = tmp_path / "empty.txt"
	source.write_text("", encoding="utf-8")

	exit_code = evaluation.main(["--input", str(source), "--output-dir", str(tmp_path / "run")])

	assert exit_code == 1
	report = json.loads((tmp_path / "run" / "report.json").read_text())
	assert report["success"] is False
	assert report["results"] is None
	assert "empty" in report["error"]
