#!/usr/bin/env python3
"""
Generate the deterministic base-encoding vector file from a source checkout,
without installing the package first. Same options as `bases-testgen`.

    python3 tools/corpus/generate_base_vectors.py > test/vectors/base_vectors.json
"""
import sys, pathlib
# Local import when running from repo root
sys.path.insert(0, str(pathlib.Path(__file__).resolve().parents[2] / "impl" / "python" / "bases_testgen"))
from bases_testgen.cli import main  # type: ignore

if __name__ == "__main__":
    sys.exit(main())
