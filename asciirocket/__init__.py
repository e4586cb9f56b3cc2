"""
asciirocket package

Prints an ASCII-art rocket whose proportions scale with a requested height.

Key responsibilities are split across modules:
- `parts.py`: load the bundled YAML parts catalogue into typed parts
- `renderer.py`: deterministic height -> segment plan -> centred rows
- `errors.py`: exception hierarchy shared by the modules above
- `cli.py`: CLI entrypoint and orchestration (parse -> render -> stdout)
"""

from __future__ import annotations

__all__ = ["__version__"]

__version__ = "0.1.0"
