import os

import subprocess


def test_with_mypy() -> None:
    run_mypy = os.path.join(os.path.dirname(__file__), "..", "run_mypy.sh")
    subprocess.run([run_mypy], check=True)
