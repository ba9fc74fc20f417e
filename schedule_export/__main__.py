"""
Entry point for running the exporter as a module.

Usage:
    python -m schedule_export master data.json -o exports/
    python -m schedule_export teacher data.json t1
    python -m schedule_export classes data.json
"""

from schedule_export.cli import main

if __name__ == "__main__":
    main()
